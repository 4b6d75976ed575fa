## plane levelling rotations for polykernel

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

"""Rigid rotation taking an arbitrary plane normal onto the z axis.

Levelling reduces a 3D problem on a plane to a 2D problem in the XY
plane; reversing the leveller maps the results back.
"""

from __future__ import annotations

from typing import Optional

from polykernel.point import Point
from polykernel.rotater import XRotater, YRotater, ZRotater
from polykernel.tolerance import EPS
from polykernel.vector import Vector3, Vector4

__all__ = ["Leveller"]


class Leveller:
    """Composite of y, x and z rotations mapping ``normal`` to ``(0, 0, 1)``.

    An optional rotation about the z axis is applied after levelling.
    """

    def __init__(self, normal: Optional[Vector3] = None, z_angle: float = 0.0, prec: float = EPS):
        self.set_rotation(Vector3(0.0, 0.0, 1.0) if normal is None else normal, z_angle, prec)

    def __repr__(self):
        return "Leveller({!r}, rx={!r}, ry={!r}, rz={!r})".format(self._normal, self._rx, self._ry, self._rz)

    def copy(self) -> "Leveller":
        result = Leveller.__new__(Leveller)
        result._normal = Vector3(*self._normal.v)
        result._rx, result._ry, result._rz = self._rx.copy(), self._ry.copy(), self._rz.copy()
        return result

    def get_normal(self) -> Vector3:
        return Vector3(*self._normal.v)

    def set_rotation(self, normal: Vector3, z_angle: float = 0.0, prec: float = EPS):
        self._normal = Vector3(*normal.v)
        self._rz = ZRotater(-z_angle, prec)
        self._ry = YRotater(Point().azimuth_angle_to(Point(normal[2], -normal[0], 0.0)), prec)
        temp = Vector3(*normal.v)
        self._ry.transform(temp)
        self._rx = XRotater(Point().azimuth_angle_to(Point(temp[2], temp[1], 0.0)), prec)

    def set_z_rotation(self, angle: float):
        self._rz = ZRotater(-angle)

    def is_active(self) -> bool:
        return self._rx.is_active() or self._ry.is_active() or self._rz.is_active()

    def reverse(self) -> "Leveller":
        """Turn this into the inverse transform (in place) and return it."""
        ## the last rotation applied must be undone first
        self._rz, self._ry = self._ry, self._rz
        self._rz.reverse()
        self._ry.reverse()
        self._rx.reverse()
        return self

    def reversed(self) -> "Leveller":
        return self.copy().reverse()

    def transform_point(self, target: Point) -> Point:
        self._ry.transform_point(target)
        self._rx.transform_point(target)
        self._rz.transform_point(target)
        return target

    def transform(self, target):
        """Level ``target`` in place and return it.

        Arcs keep their start angle and sweep; only the centre and normal
        move.  Planes have their normal rotated.
        """
        from polykernel.arc import Arc
        from polykernel.line import Line
        from polykernel.plane import Plane
        from polykernel.polyedge import PolyEdge
        from polykernel.polygon import Polygon

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
            self.transform_point(target.centre)
            self.transform(target.normal)
        elif isinstance(target, Plane):
            normal = target.get_normal()
            self.transform(normal)
            target.set_normal(normal)
        elif isinstance(target, Polygon):
            for shape in [target] + target.get_holes():
                for vertex in shape:
                    self.transform_point(vertex)
        else:
            raise ValueError('cannot level {!r}'.format(target))
        return target
