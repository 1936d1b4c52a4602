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
from typing import Dict, Iterable, List, Optional, Self, Tuple, TYPE_CHECKING

from .anchors import AnchorType, compute_anchors
from .config import Configuration
from .members import Member, MemberKind
from .overrides import overridden_methods
from .point import Point

if TYPE_CHECKING:
    from .class_diagram import ClassDiagram


class ClassEntity:
    """ A class (or interface) box in a class diagram.

        The parent is stored as the position of the parent class in the diagram that owns both,
        `None` meaning there is no parent. The entity does not hold the parent itself: it is resolved
        against a diagram whenever it is needed.

        The anchors are derived from the position and size. They are recomputed by every setter
        that touches the geometry, so reading them is always up to date.
    """
    def __init__(self, name: str = 'defaultName', parent: Optional[int] = None,
                 fields: Iterable[Member] = (), methods: Iterable[Member] = (), is_interface: bool = False,
                 x: int = 0, y: int = 0, width: int = 10, height: int = 10):
        self.name = name
        self.is_interface = is_interface
        self.set_parent(parent)
        self._fields: List[Member] = list(fields)
        self._methods: List[Member] = list(methods)
        self._x, self._y = x, y
        self._width, self._height = self._check_size(width, height)
        self._anchors: Dict[AnchorType, Point] = {}
        self._geometry_changed()

    @classmethod
    def from_config(cls, config: Configuration, **details) -> Self:
        """ Create an entity using the defaults from a configuration. Any keyword overrides the default. """
        details.setdefault('name', config.default_name)
        details.setdefault('width', config.default_width)
        details.setdefault('height', config.default_height)
        return cls(**details)

    def __repr__(self):
        return f"<ClassEntity {self.name} at ({self._x}, {self._y}) {self._width}x{self._height}>"

    ###########################################################################
    ## Inheritance
    @property
    def parent(self) -> Optional[int]:
        return self._parent

    def set_parent(self, index: Optional[int]):
        """ Set the parent by position. A negative position means there is no parent. """
        self._parent = None if index is None or index < 0 else index

    def set_parent_entity(self, diagram: "ClassDiagram", parent: "ClassEntity"):
        """ Make `parent` the superclass of this class. A parent that is not part of the diagram clears the parent. """
        self._parent = diagram.index_of(parent)
        if self._parent is None:
            logging.debug(f"Parent {parent!r} of {self.name} not in diagram: parent cleared")

    def remove_parent(self):
        self._parent = None

    def get_parent_entity(self, diagram: "ClassDiagram") -> Optional["ClassEntity"]:
        """ Return the parent class, or None if there is none or it is no longer in the diagram. """
        if self._parent is None or not 0 <= self._parent < len(diagram):
            return None
        return diagram.get_class(self._parent)

    def get_overridden_methods(self, diagram: "ClassDiagram") -> Optional[List[Member]]:
        return overridden_methods(self, diagram)

    ###########################################################################
    ## Members
    @property
    def fields(self) -> Tuple[Member, ...]:
        return tuple(self._fields)

    @property
    def methods(self) -> Tuple[Member, ...]:
        return tuple(self._methods)

    def set_fields(self, fields: Iterable[Member]):
        self._fields = list(fields)

    def set_methods(self, methods: Iterable[Member]):
        self._methods = list(methods)

    def add_field(self, field: Member):
        assert field.kind == MemberKind.FIELD, f"{field} is not a field"
        self._fields.append(field)

    def add_method(self, method: Member):
        assert method.kind == MemberKind.METHOD, f"{method} is not a method"
        self._methods.append(method)

    def has_method(self, name: str) -> bool:
        return any(m.name == name for m in self._methods)

    ###########################################################################
    ## Geometry
    @staticmethod
    def _check_size(width, height):
        if width < 0 or height < 0:
            raise ValueError(f"Size can not be negative: {width}x{height}")
        return width, height

    def _geometry_changed(self):
        # The single place where anchors are derived. Every geometry setter must end here.
        self._anchors = compute_anchors(self._x, self._y, self._width, self._height)

    @property
    def x(self) -> int:
        return self._x

    @x.setter
    def x(self, value: int):
        self._x = value
        self._geometry_changed()

    @property
    def y(self) -> int:
        return self._y

    @y.setter
    def y(self, value: int):
        self._y = value
        self._geometry_changed()

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int):
        self._width, _ = self._check_size(value, self._height)
        self._geometry_changed()

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, value: int):
        _, self._height = self._check_size(self._width, value)
        self._geometry_changed()

    def get_position(self) -> Point:
        return Point(self._x, self._y)

    def set_position(self, x: int, y: int):
        self._x, self._y = x, y
        self._geometry_changed()

    def get_size(self) -> Point:
        return Point(self._width, self._height)

    def set_size(self, width: int, height: int):
        self._width, self._height = self._check_size(width, height)
        self._geometry_changed()

    @property
    def anchors(self) -> Dict[AnchorType, Point]:
        # Don't return the original, callers must not be able to change the anchors.
        return dict(self._anchors)

    def get_anchor(self, anchor: AnchorType) -> Point:
        return self._anchors[anchor]

    ###########################################################################
    ## Export
    def asdict(self) -> Dict:
        """ The export view of the class. Members and anchor points are kept as objects for the JSON encoder. """
        return dict(
            name=self.name,
            parent=self._parent,
            fields=list(self._fields),
            methods=list(self._methods),
            is_interface=self.is_interface,
            x=self._x,
            y=self._y,
            width=self._width,
            height=self._height,
            anchors={a.name: p for a, p in self._anchors.items()},
        )
