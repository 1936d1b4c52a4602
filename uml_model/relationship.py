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
import enum
from typing import Dict, Optional, Tuple, TYPE_CHECKING

from .anchors import AnchorType
from .class_entity import ClassEntity
from .point import Point

if TYPE_CHECKING:
    from .class_diagram import ClassDiagram


class RelationshipKind(enum.IntEnum):
    """ The kind of a relationship. The values are the numeric codes handed to the persistence layer. """
    ASSOCIATION = 1
    AGGREGATION = 2
    COMPOSITION = 3
    DEPENDENCY = 4
    REALIZATION = 5
    INHERITANCE = 6


@dataclass(eq=False)
class Relationship:
    """ A structural edge between two classes, attached to one anchor on each of them.

        The endpoints are plain references; the diagram owns the classes. Changing an endpoint
        is the one change that is visible outside the relationship: every sequence diagram that
        depends on the class diagram has to re-check its messages.
    """
    source: ClassEntity
    source_anchor: AnchorType
    target: ClassEntity
    target_anchor: AnchorType
    source_cardinality: str = ''
    target_cardinality: str = ''
    kind: RelationshipKind = RelationshipKind.ASSOCIATION

    def __post_init__(self):
        self.source_anchor = AnchorType(self.source_anchor)
        self.target_anchor = AnchorType(self.target_anchor)
        self.kind = RelationshipKind(self.kind)

    def set_source(self, source: ClassEntity, diagram: "ClassDiagram"):
        self.source = source
        diagram.endpoint_changed(self)

    def set_target(self, target: ClassEntity, diagram: "ClassDiagram"):
        self.target = target
        diagram.endpoint_changed(self)

    def set_source_anchor(self, anchor: AnchorType):
        self.source_anchor = AnchorType(anchor)

    def set_target_anchor(self, anchor: AnchorType):
        self.target_anchor = AnchorType(anchor)

    def set_source_cardinality(self, cardinality: str):
        self.source_cardinality = cardinality

    def set_target_cardinality(self, cardinality: str):
        self.target_cardinality = cardinality

    def set_kind(self, kind: RelationshipKind):
        self.kind = RelationshipKind(kind)

    @property
    def kind_code(self) -> int:
        return int(self.kind)

    def source_index(self, diagram: "ClassDiagram") -> Optional[int]:
        return diagram.index_of(self.source)

    def target_index(self, diagram: "ClassDiagram") -> Optional[int]:
        return diagram.index_of(self.target)

    def connects(self, a: ClassEntity, b: ClassEntity) -> bool:
        """ True if this relationship links a and b, in either direction. """
        return (self.source is a and self.target is b) or (self.source is b and self.target is a)

    def get_terminations(self) -> Tuple[Point, Point]:
        """ The current points where the relationship attaches to its classes. """
        return self.source.get_anchor(self.source_anchor), self.target.get_anchor(self.target_anchor)

    def asdict(self, diagram: "ClassDiagram") -> Dict:
        return dict(
            source=self.source_index(diagram),
            source_anchor=self.source_anchor.name,
            target=self.target_index(diagram),
            target_anchor=self.target_anchor.name,
            source_cardinality=self.source_cardinality,
            target_cardinality=self.target_cardinality,
            kind=self.kind_code,
        )
