## points for polykernel

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

"""Cartesian point with tolerance-aware comparison."""

from __future__ import annotations

import copy
import math

from polykernel.matrix import Matrix3x3, Matrix4x4
from polykernel.tolerance import (
    EPS,
    PI,
    is_equal,
    is_greater_zero,
    is_less,
    is_zero,
    round_to,
)

__all__ = ["Point"]


class Point:
    """A point (or position vector) in 3D space.

    2D operations ignore ``z``.  Equality is tolerance based: two points are
    equal when their 3D distance is within :data:`~polykernel.tolerance.EPS`.
    Points are mutable; the in-place operators and :meth:`move_polar`
    change the point itself, the binary operators return a modified copy
    of the same type.
    """

    __slots__ = ("x", "y", "z")

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def from_2d(cls, source: "Point", z: float = 0.0) -> "Point":
        """Return a point with the x/y coordinates of ``source`` at height ``z``."""
        return cls(source.x, source.y, z)

    def __repr__(self):
        return "{}({}, {}, {})".format(type(self).__name__, self.x, self.y, self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def copy(self):
        return copy.copy(self)

    def as_point(self) -> "Point":
        """Return a plain :class:`Point` with the coordinates of this."""
        return Point(self.x, self.y, self.z)

    def assign(self, source: "Point") -> "Point":
        """Copy the coordinates of ``source`` into this point."""
        self.x, self.y, self.z = source.x, source.y, source.z
        return self

    ## comparison

    def __eq__(self, ref):
        if not isinstance(ref, Point):
            return NotImplemented
        return self.is_equal_3d(ref)

    def __ne__(self, ref):
        if not isinstance(ref, Point):
            return NotImplemented
        return not self.is_equal_3d(ref)

    __hash__ = None

    def __lt__(self, ref):
        if not is_equal(self.x, ref.x):
            return self.x < ref.x
        if not is_equal(self.y, ref.y):
            return self.y < ref.y
        return is_less(self.z, ref.z)

    def is_equal_2d(self, ref: "Point", prec: float = EPS) -> bool:
        return is_equal(self.x, ref.x, prec) and is_equal(self.y, ref.y, prec)

    def is_equal_3d(self, ref: "Point", prec: float = EPS) -> bool:
        return is_zero(self.length_from_3d(ref), prec)

    ## arithmetic

    def __iadd__(self, offset):
        self.x += offset.x
        self.y += offset.y
        self.z += offset.z
        return self

    def __add__(self, offset):
        if not isinstance(offset, Point):
            return NotImplemented
        result = self.copy()
        result += offset
        return result

    def __isub__(self, offset):
        self.x -= offset.x
        self.y -= offset.y
        self.z -= offset.z
        return self

    def __sub__(self, offset):
        if not isinstance(offset, Point):
            return NotImplemented
        result = self.copy()
        result -= offset
        return result

    def __neg__(self):
        result = self.copy()
        result.x, result.y, result.z = -self.x, -self.y, -self.z
        return result

    def __imul__(self, mult):
        if isinstance(mult, Point):
            self.x *= mult.x
            self.y *= mult.y
            self.z *= mult.z
        elif isinstance(mult, Matrix3x3):
            self.x, self.y, self.z = mult.apply([self.x, self.y, self.z])
        elif isinstance(mult, Matrix4x4):
            self.x, self.y, self.z, _ = mult.apply([self.x, self.y, self.z, 1.0])
        elif isinstance(mult, (int, float)):
            self.x *= mult
            self.y *= mult
            self.z *= mult
        else:
            return NotImplemented
        return self

    def __mul__(self, mult):
        result = self.copy()
        outcome = result.__imul__(mult)
        if outcome is NotImplemented:
            return NotImplemented
        return result

    def __itruediv__(self, mult):
        self.x /= mult
        self.y /= mult
        self.z /= mult
        return self

    def __truediv__(self, mult):
        result = self.copy()
        result /= mult
        return result

    ## measurement

    def length_from_2d(self, ref: "Point") -> float:
        return math.hypot(self.x - ref.x, self.y - ref.y)

    def length_from_3d(self, ref: "Point") -> float:
        return math.sqrt((self.x - ref.x) ** 2 + (self.y - ref.y) ** 2 + (self.z - ref.z) ** 2)

    def rounded_2d(self, prec: float = EPS) -> "Point":
        return Point(round_to(self.x, prec), round_to(self.y, prec), 0.0)

    def rounded_3d(self, prec: float = EPS) -> "Point":
        return Point(round_to(self.x, prec), round_to(self.y, prec), round_to(self.z, prec))

    def azimuth_angle_to(self, ref: "Point") -> float:
        """Return the angle (0 to 2π) of the direction from this to ``ref`` in the XY plane."""
        dx = ref.x - self.x
        dy = ref.y - self.y
        if is_zero(dx):
            if is_zero(dy):
                return 0.0
            return PI * 0.5 if is_greater_zero(dy) else PI * 1.5
        azim = math.atan(dy / dx)
        if dx < 0.0:
            azim += PI
        elif azim < 0.0:
            azim += 2.0 * PI
        return azim

    def altitude_angle_to(self, ref: "Point") -> float:
        """Return the elevation (-π/2 to π/2) of ``ref`` as seen from this."""
        dx = math.hypot(ref.x - self.x, ref.y - self.y)
        dy = ref.z - self.z
        if is_zero(dx):
            if is_zero(dy):
                return 0.0
            return PI / 2.0 if is_greater_zero(dy) else -PI / 2.0
        return math.atan(dy / dx)

    def move_polar(self, length: float, azimuth: float, altitude=None) -> "Point":
        """Offset this point by ``length`` along the given azimuth (and altitude)."""
        if altitude is None:
            self.x += length * math.cos(azimuth)
            self.y += length * math.sin(azimuth)
            return self
        dist = length * abs(math.cos(altitude))
        self.x += dist * math.cos(azimuth)
        self.y += dist * math.sin(azimuth)
        self.z += length * math.sin(altitude)
        return self

    def moved_polar(self, length: float, azimuth: float, altitude=None) -> "Point":
        return self.copy().move_polar(length, azimuth, altitude)
