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
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """ A pixel position on the diagram canvas. Anchors are handed out to other objects, so points are immutable. """
    x: int
    y: int
    def __str__(self):
        return f"({self.x}, {self.y})"
    def astuple(self) -> Tuple[int, int]:
        return (self.x, self.y)
    def __json__(self):
        return self.astuple()
