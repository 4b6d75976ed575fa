## implicit line equations for polykernel

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

"""Implicit 2D line equations of the form ``a x + b y + c = 0``."""

from __future__ import annotations

import math
from typing import Optional

from polykernel.point import Point
from polykernel.position import Side
from polykernel.tolerance import (
    EPS,
    PI,
    flow_sgn,
    is_equal,
    is_equal_angle,
    is_less_zero,
    is_zero,
)

__all__ = ["LinEquation"]


class LinEquation:
    """Infinite directed line in the XY plane.

    The coefficients are scaled by ``max(|1/dx|, |1/dy|)`` of the defining
    direction, which keeps them well conditioned for steep and shallow
    lines alike.  Points with ``a x + b y + c < 0`` lie to the left of the
    direction of travel.
    """

    __slots__ = ("a", "b", "c")

    def __init__(self, angle: float = 0.0, source: Optional[Point] = None):
        self._calculate(Point() if source is None else source, math.cos(angle), math.sin(angle))

    def _calculate(self, start, dx, dy):
        if is_zero(dx):
            sign = flow_sgn(dy)
            self.a = sign
            self.b = 0.0
            self.c = sign * -start.x
        elif is_zero(dy):
            sign = flow_sgn(dx)
            self.a = 0.0
            self.b = -sign
            self.c = sign * start.y
        else:
            ratio = max(abs(1 / dx), abs(1 / dy))
            self.a = dy * ratio
            self.b = -dx * ratio
            self.c = -start.x * self.a - start.y * self.b

    @classmethod
    def create(cls, start: Point, end: Optional[Point] = None) -> Optional["LinEquation"]:
        """Return the equation of the line from ``start`` to ``end`` or ``None`` if they coincide.

        With a single argument the line runs from the coordinate origin to
        ``start``.
        """
        if end is None:
            start, end = Point(), start
        dx = end.x - start.x
        dy = end.y - start.y
        if is_zero(dx) and is_zero(dy):
            return None
        return cls(Point().azimuth_angle_to(Point(dx, dy)), start)

    @classmethod
    def create_from_line(cls, line) -> Optional["LinEquation"]:
        return cls.create(line.origin, line.end)

    @classmethod
    def _from_coefficients(cls, a, b, c):
        result = cls.__new__(cls)
        result.a, result.b, result.c = a, b, c
        return result

    def __repr__(self):
        return "LinEquation(a={}, b={}, c={})".format(self.a, self.b, self.c)

    def __eq__(self, ref):
        if not isinstance(ref, LinEquation):
            return NotImplemented
        return is_equal(self.a, ref.a) and is_equal(self.b, ref.b) and is_equal(self.c, ref.c)

    __hash__ = None

    def __lt__(self, ref):
        return self.azimuth_angle() < ref.azimuth_angle()

    def contains(self, ref: Point, prec: float = EPS) -> bool:
        """Return ``True`` if ``ref`` satisfies the equation."""
        if self.is_x_axis(prec):
            return False if self.is_y_axis(prec) else is_equal(ref.y, (-self.a * ref.x - self.c) / self.b, prec)
        return is_equal(ref.x, (-self.b * ref.y - self.c) / self.a, prec)

    def is_x_axis(self, prec: float = EPS) -> bool:
        """Return ``True`` if the line is parallel to the x axis."""
        return is_zero(self.a, prec)

    def is_y_axis(self, prec: float = EPS) -> bool:
        return is_zero(self.b, prec)

    def is_perpendicular_to(self, ref: "LinEquation", prec: float = EPS) -> bool:
        return (is_equal(self.a, ref.b, prec) and is_equal(self.b, -ref.a, prec)) or \
            (is_equal(self.a, -ref.b, prec) and is_equal(self.b, ref.a, prec))

    def is_parallel_to(self, ref: "LinEquation", prec: float = EPS) -> bool:
        inclination = PI / 2.0 if self.is_y_axis(prec) else math.atan(-self.a / self.b)
        ref_inclination = PI / 2.0 if ref.is_y_axis() else math.atan(-ref.a / ref.b)
        return is_equal_angle(inclination, ref_inclination, prec) or \
            is_equal_angle(inclination + PI, ref_inclination, prec)

    def azimuth_angle(self) -> float:
        """Return the direction of travel (0 to 2π)."""
        if self.is_y_axis():
            return PI / 2.0 if self.a > 0.0 else 1.5 * PI
        if self.is_x_axis():
            return 0.0 if self.b < 0.0 else PI
        angle = math.atan(self.a / -self.b)
        if self.b > 0.0:
            angle += PI
        elif is_less_zero(angle):
            angle += 2.0 * PI
        return angle

    def get_flipped(self) -> "LinEquation":
        return self._from_coefficients(-self.a, -self.b, -self.c)

    def get_perpendicular(self, ref: Point) -> "LinEquation":
        """Return the perpendicular equation passing through ``ref``."""
        a, b = self.b, -self.a
        return self._from_coefficients(a, b, -a * ref.x - b * ref.y)

    def get_parallel(self, ref: Point) -> Optional["LinEquation"]:
        angle = self.azimuth_angle()
        return self.create(ref, ref + Point(math.cos(angle), math.sin(angle)))

    def angle_to(self, ref: "LinEquation") -> float:
        angle = ref.azimuth_angle() - self.azimuth_angle()
        if angle < 0.0:
            angle += 2.0 * PI
        return angle

    def intersection_with(self, ref: "LinEquation") -> Optional[Point]:
        """Return the intersection point, or ``None`` if the lines are parallel."""
        if self.is_parallel_to(ref):
            return None
        y = (self.a * ref.c - self.c * ref.a) / (self.b * ref.a - self.a * ref.b)
        if self.is_x_axis():
            x = (-ref.b * y - ref.c) / ref.a
        else:
            x = (-self.b * y - self.c) / self.a
        return Point(x, y)

    def position_of(self, ref: Point, prec: float = EPS) -> Side:
        if self.is_x_axis() and self.is_y_axis():
            return Side.UNDEFINED
        if is_zero(self.length_to(ref), prec):
            return Side.ALONG
        return Side.LEFT if self.a * ref.x + self.b * ref.y + self.c < 0.0 else Side.RIGHT

    def x_at_y(self, y: float) -> Optional[float]:
        if self.is_x_axis():
            return None
        return (-y * self.b - self.c) / self.a

    def y_at_x(self, x: float) -> Optional[float]:
        if self.is_y_axis():
            return None
        return (-x * self.a - self.c) / self.b

    def closest_point_to(self, ref: Point) -> Point:
        """Return the foot of the perpendicular from ``ref``."""
        inter = self.intersection_with(self.get_perpendicular(ref))
        return ref.as_point() if inter is None else inter

    def length_to(self, ref: Point) -> float:
        inter = self.intersection_with(self.get_perpendicular(ref))
        return 0.0 if inter is None else inter.length_from_2d(ref)
