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
import logging
from typing import Dict, Iterator, List, Optional, Tuple

from .class_entity import ClassEntity
from .dispatcher import EventDispatcher
from .relationship import Relationship
from .sequence import SequenceDiagram

# Matches the event published whenever a relationship gets a new source or target.
ENDPOINT_CHANGED = 'update/*/endpoint'


def revalidate_messages(event_name, source, dispatcher, details):
    """ Event handler for dependent sequence diagrams: re-check every message against the class diagram. """
    sequence_diagram: SequenceDiagram = details['target']
    diagram: ClassDiagram = details['diagram']
    for msg in sequence_diagram.get_messages():
        msg.mark_inconsistent_if_affected(diagram)


class ClassDiagram:
    """ A class diagram: an ordered list of classes, the relationships between them and the
        sequence diagrams that depend on them.

        The order of the classes is significant: a class refers to its parent by position.
        Classes are looked up by identity, never by value.
    """
    def __init__(self, name: str = ''):
        self.name = name
        self._classes: List[ClassEntity] = []
        self._relationships: List[Relationship] = []
        self.dispatcher = EventDispatcher()

    def __len__(self):
        return len(self._classes)

    def __iter__(self) -> Iterator[ClassEntity]:
        return iter(list(self._classes))

    ###########################################################################
    ## Classes
    @property
    def classes(self) -> Tuple[ClassEntity, ...]:
        return tuple(self._classes)

    def add_class(self, entity: ClassEntity) -> int:
        """ Append a class to the diagram and return its position. """
        self._classes.append(entity)
        return len(self._classes) - 1

    def remove_class(self, entity: ClassEntity):
        """ Remove a class. Classes after it shift one position and their parent indices shift with them.
            A class whose parent was the removed class loses its parent.
        """
        index = self.index_of(entity)
        if index is None:
            raise ValueError(f"{entity!r} is not part of diagram {self.name}")
        del self._classes[index]
        for c in self._classes:
            if c.parent == index:
                c.remove_parent()
            elif c.parent is not None and c.parent > index:
                c.set_parent(c.parent - 1)

    def get_class(self, index: int) -> ClassEntity:
        # Negative indices would silently wrap around, so check explicitly.
        if not 0 <= index < len(self._classes):
            raise IndexError(f"No class at position {index} in diagram {self.name} ({len(self._classes)} classes)")
        return self._classes[index]

    def index_of(self, entity: ClassEntity) -> Optional[int]:
        """ Return the position of the entity in this diagram, or None if it is not part of it. """
        for i, c in enumerate(self._classes):
            if c is entity:
                return i
        return None

    def find_class(self, name: str) -> Optional[ClassEntity]:
        for c in self._classes:
            if c.name == name:
                return c
        return None

    ###########################################################################
    ## Relationships
    @property
    def relationships(self) -> Tuple[Relationship, ...]:
        return tuple(self._relationships)

    def add_relationship(self, relationship: Relationship) -> Relationship:
        self._relationships.append(relationship)
        return relationship

    def remove_relationship(self, relationship: Relationship):
        if not any(r is relationship for r in self._relationships):
            raise ValueError(f"Relationship not part of diagram {self.name}")
        self._relationships = [r for r in self._relationships if r is not relationship]

    def relationships_of(self, entity: ClassEntity) -> List[Relationship]:
        return [r for r in self._relationships if r.source is entity or r.target is entity]

    ###########################################################################
    ## Dependent sequence diagrams
    def add_sequence_diagram(self, sequence_diagram: SequenceDiagram):
        if any(sd is sequence_diagram for sd in self.get_sequence_diagrams()):
            return
        self.dispatcher.subscribe(ENDPOINT_CHANGED, sequence_diagram, revalidate_messages)

    def remove_sequence_diagram(self, sequence_diagram: SequenceDiagram):
        self.dispatcher.unsubscribe(sequence_diagram)

    def get_sequence_diagrams(self) -> List[SequenceDiagram]:
        return self.dispatcher.targets(ENDPOINT_CHANGED)

    def endpoint_changed(self, relationship: Relationship):
        """ Have every dependent sequence diagram re-check all of its messages.

            All messages are re-checked, not only those using the relationship, and this happens on
            every call, also when the endpoint did not actually change.
        """
        logging.debug(f"Relationship endpoint changed in diagram {self.name}, "
                      f"revalidating {len(self.get_sequence_diagrams())} sequence diagram(s)")
        self.dispatcher.update_data(relationship, 'endpoint', diagram=self)

    ###########################################################################
    ## Export
    def asdict(self) -> Dict:
        return dict(
            name=self.name,
            classes=[c.asdict() for c in self._classes],
            relationships=[r.asdict(self) for r in self._relationships],
        )
