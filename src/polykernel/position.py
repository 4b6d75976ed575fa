## classification flags for polykernel predicates

## Copyright (c) 2026 polykernel contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Classification results returned by the geometry predicates.

Edge-relative classification (where a point sits along a line or arc) uses
the :class:`Position` bit flags, which double as filter masks for
intersection lists.  Classifications against an infinite line, a closed
region and a plane each get their own enum so that a side of a line can
never be mistaken for the inside of a polygon.
"""

from __future__ import annotations

from enum import Enum, IntFlag

__all__ = ["Position", "Side", "Region", "Face", "Rotation", "to_region"]


class Position(IntFlag):
    """Position of a point relative to an edge (line segment or arc)."""

    UNDEFINED = 0
    AFTER = 0x01
    ORIGIN = 0x02
    ALONG = 0x04
    END = 0x08
    BEFORE = 0x10
    RADIAL = 0x20
    ## off the circle of an arc
    OUTSIDE = 0x40
    INSIDE = 0x80

    WITHIN = ALONG | END | ORIGIN
    VERTEX = END | ORIGIN
    FORMER = ALONG | ORIGIN
    LATTER = ALONG | END
    ALL = BEFORE | ORIGIN | ALONG | END | AFTER | RADIAL


class Side(Enum):
    """Position of a point relative to a directed infinite line."""

    UNDEFINED = 0
    LEFT = 1
    ALONG = 2
    RIGHT = 3


class Region(Enum):
    """Position of a point relative to a closed region (box, circle, polygon)."""

    UNDEFINED = 0
    OUTSIDE = 1
    ALONG = 2
    INSIDE = 3


class Face(Enum):
    """Position of a point relative to a plane."""

    UNDEFINED = 0
    BACK = 1
    ALONG = 2
    FRONT = 3


class Rotation(Enum):
    CLOCKWISE = 0
    ANTICLOCKWISE = 1


## conversion from edge-relative positions to region positions
_REGION_OF_POSITION = {
    Position.OUTSIDE: Region.OUTSIDE,
    Position.INSIDE: Region.INSIDE,
    Position.ALONG: Region.ALONG,
    Position.ORIGIN: Region.ALONG,
    Position.END: Region.ALONG,
}


def to_region(pos: Position) -> Region:
    """Map an edge-relative position onto the region it implies.

    Points on an edge (endpoints included) are ``ALONG`` the boundary; the
    off-circle results of an arc map onto ``INSIDE``/``OUTSIDE``.  Anything
    else (before, after, radial) says nothing about a region.
    """
    return _REGION_OF_POSITION.get(pos, Region.UNDEFINED)
