## single-axis rotations for polykernel

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

"""Single-axis rotations applied in place to geometry."""

from __future__ import annotations

import math

from polykernel.point import Point
from polykernel.tolerance import EPS, is_zero
from polykernel.vector import Vector3, Vector4

__all__ = ["Rotater", "XRotater", "YRotater", "ZRotater"]


class Rotater:
    """Base class for rotations about a coordinate axis.

    The sine/cosine pair of the (negated) angle is cached; a rotater whose
    angle is within tolerance of zero is inactive and leaves everything
    untouched.
    """

    def __init__(self, angle: float = 0.0, prec: float = EPS):
        self._angle = 0.0
        self._k1 = 0.0
        self._k2 = 1.0
        self._is_active = False
        self.set_angle(angle, prec)

    def __repr__(self):
        return "{}({})".format(type(self).__name__, self.get_angle())

    def copy(self) -> "Rotater":
        result = type(self).__new__(type(self))
        result._angle, result._k1, result._k2, result._is_active = self._angle, self._k1, self._k2, self._is_active
        return result

    @property
    def k1(self) -> float:
        return self._k1

    @property
    def k2(self) -> float:
        return self._k2

    def get_angle(self) -> float:
        return self._angle

    def set_angle(self, angle: float, prec: float = EPS):
        self._angle = angle
        self._is_active = not is_zero(angle, prec)
        if self._is_active:
            self._k1 = math.sin(-angle)
            self._k2 = math.cos(-angle)

    def is_active(self) -> bool:
        return self._is_active

    def reverse(self) -> "Rotater":
        """Invert the rotation in place."""
        if self._is_active:
            self.set_angle(-self.get_angle())
        return self

    def transform_point(self, target: Point) -> Point:
        raise NotImplementedError

    def transform(self, target):
        """Rotate ``target`` in place and return it.

        Points, vectors, lines, poly-edges, arcs, planes and polygons
        (including their holes) are supported.
        """
        from polykernel.arc import Arc
        from polykernel.line import Line
        from polykernel.plane import Plane
        from polykernel.polyedge import PolyEdge
        from polykernel.polygon import Polygon

        if not self._is_active:
            return target
        if isinstance(target, Point):
            self.transform_point(target)
        elif isinstance(target, (Vector3, Vector4)):
            temp = Point(target[0], target[1], target[2])
            self.transform_point(temp)
            target[0], target[1], target[2] = temp.x, temp.y, temp.z
        elif isinstance(target, (Line, PolyEdge)):
            self.transform_point(target.origin)
            self.transform_point(target.end)
        elif isinstance(target, Arc):
            pts = [target.get_origin(), target.midpoint(), target.get_end().as_point()]
            for pt in pts:
                self.transform_point(pt)
            rotated = Arc.create_from_points(*pts)
            if rotated is not None:
                target.assign(rotated)
        elif isinstance(target, Plane):
            normal = target.get_normal()
            self.transform(normal)
            target.set_normal(normal)
        elif isinstance(target, Polygon):
            for shape in [target] + target.get_holes():
                for vertex in shape:
                    self.transform_point(vertex)
        else:
            raise ValueError('cannot rotate {!r}'.format(target))
        return target


class XRotater(Rotater):
    """Rotation about the x axis."""

    def transform_point(self, target: Point) -> Point:
        if self._is_active:
            temp = target.z * self._k1 + target.y * self._k2
            target.z = target.z * self._k2 - target.y * self._k1
            target.y = temp
        return target


class YRotater(Rotater):
    """Rotation about the y axis.

    The angle is stored negated so that a positive angle follows the same
    handedness as the x and z rotaters.
    """

    def get_angle(self) -> float:
        return -super().get_angle()

    def set_angle(self, angle: float, prec: float = EPS):
        super().set_angle(-angle, prec)

    def transform_point(self, target: Point) -> Point:
        if self._is_active:
            temp = target.x * self._k2 + target.z * self._k1
            target.z = -target.x * self._k1 + target.z * self._k2
            target.x = temp
        return target


class ZRotater(Rotater):
    """Rotation about the z axis."""

    def transform_point(self, target: Point) -> Point:
        if self._is_active:
            temp = target.x * self._k2 + target.y * self._k1
            target.y = -target.x * self._k1 + target.y * self._k2
            target.x = temp
        return target
