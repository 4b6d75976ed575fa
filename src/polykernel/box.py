## axis-aligned bounding boxes for polykernel

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

"""Axis-aligned bounding boxes."""

from __future__ import annotations

from enum import IntEnum

from polykernel.point import Point
from polykernel.position import Region
from polykernel.tolerance import (
    EPS,
    is_equal,
    is_greater,
    is_greater_or_equal,
    is_less,
    is_less_or_equal,
)

__all__ = ["Anchor2D", "Box"]


class Anchor2D(IntEnum):
    """Nine anchor points of a rectangle: ``value % 3`` is the x column, ``value // 3`` the y row."""

    LEFT_FRONT = 0
    CENTRE_FRONT = 1
    RIGHT_FRONT = 2
    LEFT_HALF = 3
    CENTRE_HALF = 4
    RIGHT_HALF = 5
    LEFT_BACK = 6
    CENTRE_BACK = 7
    RIGHT_BACK = 8


def _outside_span(val, first, second, prec):
    if is_less(first, second, prec):
        return is_less(val, first, prec) or is_greater(val, second, prec)
    return is_less(val, second, prec) or is_greater(val, first, prec)


class Box:
    """Axis-aligned box defined by two diagonally opposite corners.

    The corners are not required to be sorted; :meth:`sort` puts the
    minimum coordinates in ``origin`` and the maximum in ``end``.
    """

    __slots__ = ("origin", "end")

    def __init__(self, origin: Point = None, end: Point = None):
        self.origin = Point() if origin is None else origin.as_point()
        self.end = self.origin.copy() if end is None else end.as_point()

    @classmethod
    def from_size(cls, width: float, depth: float) -> "Box":
        return cls(Point(), Point(width, depth))

    @classmethod
    def from_coords(cls, x1, y1, z1, x2, y2, z2) -> "Box":
        return cls(Point(x1, y1, z1), Point(x2, y2, z2))

    def __repr__(self):
        return "Box({!r}, {!r})".format(self.origin, self.end)

    def copy(self) -> "Box":
        return Box(self.origin, self.end)

    def __eq__(self, ref):
        if not isinstance(ref, Box):
            return NotImplemented
        return self.is_equal_3d(ref)

    __hash__ = None

    def __add__(self, offset: Point) -> "Box":
        return Box(self.origin + offset, self.end + offset)

    def __sub__(self, offset: Point) -> "Box":
        return Box(self.origin - offset, self.end - offset)

    def __mul__(self, scale: float) -> "Box":
        return Box(self.origin * scale, self.end * scale)

    def __truediv__(self, scale: float) -> "Box":
        return self * (1.0 / scale)

    def is_equal_2d(self, ref: "Box", prec: float = EPS) -> bool:
        return self.origin.is_equal_2d(ref.origin, prec) and self.end.is_equal_2d(ref.end, prec)

    def is_equal_3d(self, ref: "Box", prec: float = EPS) -> bool:
        return self.origin.is_equal_3d(ref.origin, prec) and self.end.is_equal_3d(ref.end, prec)

    def get_centre(self) -> Point:
        return (self.origin + self.end) / 2

    def set_centre(self, centre: Point):
        offset = centre - self.get_centre()
        self.origin += offset
        self.end += offset

    def width(self) -> float:
        return abs(self.origin.x - self.end.x)

    def depth(self) -> float:
        return abs(self.origin.y - self.end.y)

    def height(self) -> float:
        return abs(self.origin.z - self.end.z)

    def area(self) -> float:
        return self.width() * self.depth()

    def volume(self) -> float:
        return self.width() * self.depth() * self.height()

    def max_length(self) -> float:
        return max(self.width(), self.depth(), self.height())

    def get_anchor_2d(self, anchor: Anchor2D) -> Point:
        x_anch, y_anch = int(anchor) % 3, (int(anchor) // 3) % 3
        temp = self.copy()
        temp.sort()
        return temp.origin + Point(self.width() * x_anch / 2, self.depth() * y_anch / 2)

    def position_of_2d(self, ref: Point, prec: float = EPS) -> Region:
        if _outside_span(ref.x, self.origin.x, self.end.x, prec) or \
                _outside_span(ref.y, self.origin.y, self.end.y, prec):
            return Region.OUTSIDE
        if self._on_face(ref, ("x", "y"), prec):
            return Region.ALONG
        return Region.INSIDE

    def position_of_3d(self, ref: Point, prec: float = EPS) -> Region:
        if _outside_span(ref.x, self.origin.x, self.end.x, prec) or \
                _outside_span(ref.y, self.origin.y, self.end.y, prec) or \
                _outside_span(ref.z, self.origin.z, self.end.z, prec):
            return Region.OUTSIDE
        if self._on_face(ref, ("x", "y", "z"), prec):
            return Region.ALONG
        return Region.INSIDE

    def _on_face(self, ref, axes, prec):
        return any(is_equal(getattr(self.origin, axis), getattr(ref, axis), prec) or
                   is_equal(getattr(self.end, axis), getattr(ref, axis), prec) for axis in axes)

    def encloses_2d(self, ref: "Box", prec: float = EPS) -> bool:
        corners = (ref.origin, ref.end, Point(ref.origin.x, ref.end.y), Point(ref.end.x, ref.origin.y))
        return all(self.position_of_2d(corner, prec) != Region.OUTSIDE for corner in corners)

    def encloses_3d(self, ref: "Box", prec: float = EPS) -> bool:
        return self.encloses_2d(ref, prec) and is_greater_or_equal(ref.origin.z, self.origin.z, prec) and \
            is_less_or_equal(ref.end.z, self.end.z, prec)

    def overlaps_2d(self, ref: "Box", prec: float = EPS) -> bool:
        """Return ``True`` if the boxes share interior area (touching edges do not count)."""
        for axis in ("x", "y"):
            first, second = getattr(self.origin, axis), getattr(self.end, axis)
            ref_first, ref_second = getattr(ref.origin, axis), getattr(ref.end, axis)
            low, high = min(first, second), max(first, second)
            ref_low, ref_high = min(ref_first, ref_second), max(ref_first, ref_second)
            if is_greater_or_equal(low, ref_high, prec) or is_less_or_equal(high, ref_low, prec):
                return False
        return True

    def merge(self, ref):
        """Expand the box to include a point or another box."""
        if isinstance(ref, Box):
            self.merge(ref.origin)
            self.merge(ref.end)
            return
        self.sort()
        for axis in ("x", "y", "z"):
            val = getattr(ref, axis)
            if getattr(self.origin, axis) > val:
                setattr(self.origin, axis, val)
            elif getattr(self.end, axis) < val:
                setattr(self.end, axis, val)

    def sort(self):
        for axis in ("x", "y", "z"):
            first, second = getattr(self.origin, axis), getattr(self.end, axis)
            if first > second:
                setattr(self.origin, axis, second)
                setattr(self.end, axis, first)

    def magnify(self, scale: float):
        """Scale the box about its centre."""
        centre = self.get_centre()
        self.origin *= scale
        self.end *= scale
        self.set_centre(centre)

    def resize(self, length: float):
        """Grow the box by ``length`` on every side."""
        self.sort()
        offset = Point(length, length, length)
        self.origin -= offset
        self.end += offset

    def rotate(self, angle: float):
        """Replace the box with the bounds of itself rotated about its centre in the XY plane."""
        from polykernel.rotater import ZRotater

        top_left = Point(self.width() / 2, self.depth() / 2)
        top_right = Point(-top_left.x, top_left.y)
        rotater = ZRotater(angle)
        rotater.transform_point(top_left)
        rotater.transform_point(top_right)
        centre = self.get_centre()
        rotated = Box.from_size(2 * max(abs(top_left.x), abs(top_right.x)),
                                2 * max(abs(top_left.y), abs(top_right.y)))
        rotated.set_centre(centre)
        self.origin, self.end = rotated.origin, rotated.end
