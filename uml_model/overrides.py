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
from typing import List, Optional, TYPE_CHECKING

from .members import Member

if TYPE_CHECKING:
    from .class_diagram import ClassDiagram
    from .class_entity import ClassEntity


def resolve_parent(entity: "ClassEntity", diagram: "ClassDiagram") -> Optional["ClassEntity"]:
    """ Find the parent of a class, treating a parent index that no longer fits the diagram as no parent. """
    if entity.parent is None:
        return None
    parent = entity.get_parent_entity(diagram)
    if parent is None:
        logging.warning(f"Class {entity.name} refers to parent {entity.parent}, which is not in the diagram")
    return parent


def overridden_methods(entity: "ClassEntity", diagram: "ClassDiagram") -> Optional[List[Member]]:
    """ Return the methods of `entity` that override a method of its direct parent.

        A method overrides when the parent declares an equal method and the subclass' own declaration
        is not private. Only the direct parent is considered. The order is that of the subclass.

        Returns None when the class has no parent, so that "no parent" is distinguishable from
        "a parent, but nothing overridden" (an empty list).
    """
    parent = resolve_parent(entity, diagram)
    if parent is None:
        return None
    parent_methods = parent.methods
    return [m for m in entity.methods if m in parent_methods and not m.is_private]


def inherited_methods(entity: "ClassEntity", diagram: "ClassDiagram") -> Optional[List[Member]]:
    """ Return the non-private methods of the direct parent that the class does not declare itself. """
    parent = resolve_parent(entity, diagram)
    if parent is None:
        return None
    own_methods = entity.methods
    return [m for m in parent.methods if m not in own_methods and not m.is_private]
