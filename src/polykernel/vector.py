## direction vectors for polykernel

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

"""Direction vectors."""

from __future__ import annotations

import math

from polykernel.matrix import Matrix3x3, Matrix4x4
from polykernel.point import Point
from polykernel.tolerance import EPS, is_less_zero, is_zero

__all__ = ["Vector3", "Vector4"]


class Vector3:
    """A 3D vector.

    A vector whose components are all within tolerance of zero is *empty*;
    an empty vector is neither parallel nor perpendicular to anything.
    """

    __slots__ = ("v",)

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self.v = [float(x), float(y), float(z)]

    @classmethod
    def from_point(cls, pt: Point) -> "Vector3":
        return cls(pt.x, pt.y, pt.z)

    @classmethod
    def from_line(cls, line) -> "Vector3":
        """Return the vector from the origin to the end of a line."""
        return cls(line.end.x - line.origin.x, line.end.y - line.origin.y, line.end.z - line.origin.z)

    def __repr__(self):
        return "Vector3({}, {}, {})".format(*self.v)

    def __getitem__(self, index):
        return self.v[index % 3]

    def __setitem__(self, index, value):
        self.v[index % 3] = float(value)

    x = property(lambda self: self.v[0])
    y = property(lambda self: self.v[1])
    z = property(lambda self: self.v[2])

    def as_point(self) -> Point:
        return Point(*self.v)

    def __eq__(self, ref):
        if not isinstance(ref, Vector3):
            return NotImplemented
        return all(is_zero(a - b) for a, b in zip(self.v, ref.v))

    __hash__ = None

    def __add__(self, ref):
        return Vector3(*(a + b for a, b in zip(self.v, ref.v)))

    def __sub__(self, ref):
        return Vector3(*(a - b for a, b in zip(self.v, ref.v)))

    def __neg__(self):
        return Vector3(*(-a for a in self.v))

    def __mul__(self, mult):
        if isinstance(mult, Matrix3x3):
            return Vector3(*mult.apply(self.v))
        if isinstance(mult, Matrix4x4):
            return Vector3(*mult.apply(self.v + [1.0])[:3])
        if isinstance(mult, (int, float)):
            return Vector3(*(a * mult for a in self.v))
        return NotImplemented

    def is_parallel_to(self, ref: "Vector3", prec: float = EPS) -> bool:
        if self.is_empty(prec) or ref.is_empty(prec):
            return False
        return self.cross(ref).is_empty(prec)

    def is_perpendicular_to(self, ref: "Vector3", prec: float = EPS) -> bool:
        if self.is_empty(prec) or ref.is_empty(prec):
            return False
        return is_zero(self.dot(ref), prec)

    def is_same_sense(self, ref: "Vector3", prec: float = EPS) -> bool:
        return not any(is_less_zero(a * b, prec) for a, b in zip(self.v, ref.v))

    def is_empty(self, prec: float = EPS) -> bool:
        return all(is_zero(a, prec) for a in self.v)

    def is_z_axis(self, prec: float = EPS) -> bool:
        return is_zero(self.v[0], prec) and is_zero(self.v[1], prec) and not is_zero(self.v[2], prec)

    def is_xy_plane(self, prec: float = EPS) -> bool:
        return (not is_zero(self.v[0], prec) or not is_zero(self.v[1], prec)) and is_zero(self.v[2], prec)

    def magnitude(self) -> float:
        return math.sqrt(sum(a * a for a in self.v))

    def dot(self, ref: "Vector3") -> float:
        return sum(a * b for a, b in zip(self.v, ref.v))

    def cross(self, ref: "Vector3") -> "Vector3":
        a, b = self.v, ref.v
        return Vector3(a[1] * b[2] - a[2] * b[1],
                       a[2] * b[0] - a[0] * b[2],
                       a[0] * b[1] - a[1] * b[0])

    def normalised(self) -> "Vector3":
        """Return the unit vector (or the unchanged vector if it has no magnitude)."""
        mag = self.magnitude()
        if mag > 0:
            return Vector3(*(a / mag for a in self.v))
        return Vector3(*self.v)

    def azimuth_angle(self) -> float:
        return Point().azimuth_angle_to(self.as_point())

    def altitude_angle(self) -> float:
        return Point().altitude_angle_to(self.as_point())

    def angle_to(self, ref: "Vector3") -> float:
        mag1, mag2 = self.magnitude(), ref.magnitude()
        if is_zero(mag1) or is_zero(mag2):
            return 0.0
        return math.acos(max(-1.0, min(1.0, self.dot(ref) / (mag1 * mag2))))


class Vector4:
    """A homogeneous 3D vector; ``w`` defaults to 1."""

    __slots__ = ("v",)

    def __init__(self, x=0.0, y=0.0, z=0.0, w=1.0):
        self.v = [float(x), float(y), float(z), float(w)]

    @classmethod
    def from_point(cls, pt: Point) -> "Vector4":
        return cls(pt.x, pt.y, pt.z)

    def __repr__(self):
        return "Vector4({}, {}, {}, {})".format(*self.v)

    def __getitem__(self, index):
        return self.v[index % 4]

    def __setitem__(self, index, value):
        self.v[index % 4] = float(value)

    def as_point(self) -> Point:
        return Point(*self.v[:3])

    def __mul__(self, mult):
        if isinstance(mult, Matrix4x4):
            return Vector4(*mult.apply(self.v))
        if isinstance(mult, (int, float)):
            return Vector4(*(a * mult for a in self.v))
        return NotImplemented

    def is_parallel_to(self, ref: "Vector4", prec: float = EPS) -> bool:
        return Vector3(*self.v[:3]).is_parallel_to(Vector3(*ref.v[:3]), prec)

    def is_perpendicular_to(self, ref: "Vector4", prec: float = EPS) -> bool:
        return is_zero(self.dot(ref), prec)

    def is_same_sense(self, ref: "Vector4", prec: float = EPS) -> bool:
        return not any(is_less_zero(a * b, prec) for a, b in zip(self.v, ref.v))

    def is_empty(self, prec: float = EPS) -> bool:
        return all(is_zero(a, prec) for a in self.v[:3])

    def magnitude(self) -> float:
        return math.sqrt(sum(a * a for a in self.v[:3]))

    def dot(self, ref: "Vector4") -> float:
        return sum(a * b for a, b in zip(self.v[:3], ref.v[:3]))

    def cross(self, ref: "Vector4") -> "Vector4":
        a, b = self.v, ref.v
        return Vector4(a[1] * b[2] - a[2] * b[1],
                       a[2] * b[0] - a[0] * b[2],
                       a[0] * b[1] - a[1] * b[0])

    def normalised(self) -> "Vector4":
        mag = self.magnitude()
        if mag > 0:
            return Vector4(*(a / mag for a in self.v))
        return Vector4(*self.v)

    def angle_to(self, ref: "Vector4") -> float:
        mag1, mag2 = self.magnitude(), ref.magnitude()
        if is_zero(mag1) or is_zero(mag2):
            return 0.0
        return math.acos(max(-1.0, min(1.0, self.dot(ref) / (mag1 * mag2))))
