"""
Copyright© 2024 Evert van de Waal

This file is part of uml_model.

uml_model is free software; you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation; either version 3 of the License, or
(at your option) any later version.

uml_model is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with Foobar; if not, write to the Free Software
Foundation, Inc., 51 Franklin St, Fifth Floor, Boston, MA  02110-1301  USA
"""
from dataclasses import dataclass
from typing import Callable, Any, Dict, Optional, List
from fnmatch import fnmatch
import inspect
import logging

@dataclass
class EventSubscription:
    """ Stores the details for a subscription: the filter that is applied, the callback to call and any context for
        calling the function.
    """
    path: str
    target: Any
    callback: Callable[[str, Any, "EventDispatcher", Dict], None]
    context: Optional[Dict]


class EventDispatcher:
    def __init__(self):
        self.subscriptions: List[EventSubscription] = []

    def trigger_event(self, event_name, source, **details):
        # Iterate over a copy: a callback may (un)subscribe while the event is being handled.
        for sub in list(self.subscriptions):
            if fnmatch(event_name, sub.path):
                sub_details = dict(details, target=sub.target, dispatcher=self, context=sub.context)
                sub.callback(event_name, source, self, sub_details)

    def subscribe(self, event_name: str, target: Any, cb: Callable, context: Optional[Any]=None) -> None:
        """
        Subscribe to one or more events. A callback is called whenever an event is triggered that matches the filter.
        Event names are built up like this: <action>/<datatype>[/<detail>]
        The action is one of add, update and delete.
        The datatype is the classname of the event source.

        :param event_name: A path describing the exact event. Wildcards are allowed.
        :param target: Object on whose behalf the subscription is made. Used to unsubscribe.
        :param cb: Called when an event is triggered that matches the filter. This can not be a bound function,
               use the target or the optional context instead.
        :param context: Optional context supplied with the callback
        """
        # Do not accept bound functions, the dispatcher would keep their object alive.
        assert not inspect.ismethod(cb), "Member functions are not supported"
        sub = EventSubscription(event_name, target, cb, context)
        self.subscriptions.append(sub)

    def unsubscribe(self, target):
        self.subscriptions = [s for s in self.subscriptions if s.target is not target]

    def targets(self, event_name: str) -> List[Any]:
        """ Return the unique targets subscribed to an event, in order of subscription. """
        result = []
        for sub in self.subscriptions:
            if fnmatch(event_name, sub.path) and not any(t is sub.target for t in result):
                result.append(sub.target)
        return result

    # Shortcuts for building event paths
    def create_event(self, action, datatype, source, detail=None, **details):
        path = f'{action}/{datatype}' + (f'/{detail}' if detail else '')
        logging.debug(f"Triggering event {path}")
        self.trigger_event(path, source, **details)
    def update_data(self, item, detail=None, **details):
        self.create_event('update', type(item).__name__, item, detail, **details)
