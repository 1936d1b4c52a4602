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
from dataclasses import is_dataclass, fields
import json


class ExtendibleJsonEncoder(json.JSONEncoder):
    """ A JSON encoder that supports dataclasses and implements a protocol for customizing
        the generation process.
    """
    def default(self, o):
        """ We have a few tricks to jsonify objects that are not normally supported by JSON.
            * For objects with an `asdict` function, that is called, and the dict serialized.
            * For objects that define a `__json__` method, that method is called for serialisation.
            * Dataclass instances are serialised as dicts.
            * For other objects, the str() protocol is used, i.e. the __str__ method is called.
        """
        if hasattr(o, 'asdict'):
            return o.asdict()
        elif hasattr(o, '__json__'):
            return o.__json__()
        elif is_dataclass(o):
            result = {k.name: o.__dict__[k.name] for k in fields(o)}
            result['__classname__'] = type(o).__name__
            return result
        return str(o)


def dumps(item, **kwargs) -> str:
    """ Render a model object the way rendering and persistence collaborators consume it.
        For a class diagram, classes are listed in diagram order and relationships refer to them by position.
    """
    return json.dumps(item, cls=ExtendibleJsonEncoder, **kwargs)
