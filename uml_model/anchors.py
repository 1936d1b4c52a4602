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
import enum
from typing import Dict

from .point import Point


class AnchorType(enum.IntEnum):
    """ The connection points on the perimeter of a class box. """
    UP = 1
    RIGHT = 2
    DOWN = 3
    LEFT = 4


# Screen coordinates: y grows downwards, so UP lies on the top edge of the box.
# Floor division keeps the anchors on whole pixels.
locations = {
    AnchorType.UP: lambda x, y, w, h: (x + w // 2, y),
    AnchorType.RIGHT: lambda x, y, w, h: (x + w, y + h // 2),
    AnchorType.DOWN: lambda x, y, w, h: (x + w // 2, y + h),
    AnchorType.LEFT: lambda x, y, w, h: (x, y + h // 2),
}


def compute_anchors(x: int, y: int, width: int, height: int) -> Dict[AnchorType, Point]:
    """ Return the four anchor points of a box with its upper-left corner at (x, y).
        A box of size zero is valid: all anchors then collapse onto a single point.
    """
    return {a: Point(*locations[a](x, y, width, height)) for a in AnchorType}
