## infinite planes for polykernel

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

"""Infinite planes in Hessian normal form."""

from __future__ import annotations

from typing import Optional

from polykernel.matrix import Matrix3x3, Matrix4x4
from polykernel.point import Point
from polykernel.position import Face
from polykernel.tolerance import EPS, is_equal, is_greater, is_less, is_zero
from polykernel.vector import Vector3

__all__ = ["Plane"]


class Plane:
    """The set of points ``P`` with ``normal . P == offset``.

    The normal is always stored as a unit vector.  A default plane is the
    XY plane through the coordinate origin.
    """

    __slots__ = ("offset", "_normal")

    def __init__(self, offset: float = 0.0, normal: Optional[Vector3] = None):
        self.offset = float(offset)
        self._normal = Vector3(0.0, 0.0, 1.0)
        if normal is not None:
            self.set_normal(normal)

    @classmethod
    def create(cls, offset: float, normal: Vector3) -> Optional["Plane"]:
        """Return the plane at ``offset`` along ``normal``, or ``None`` if the normal is empty."""
        if normal.is_empty():
            return None
        return cls(offset, normal)

    @classmethod
    def create_from_point(cls, point: Point, normal: Vector3) -> Optional["Plane"]:
        """Return the plane through ``point`` perpendicular to ``normal``, or ``None`` if degenerate."""
        if normal.is_empty():
            return None
        unit = normal.normalised()
        return cls(unit.dot(Vector3.from_point(point)), unit)

    @classmethod
    def create_from_points(cls, pt1: Point, pt2: Point, pt3: Point) -> Optional["Plane"]:
        """Return the plane through three points, or ``None`` if they are colinear."""
        normal = Vector3.from_point(pt1 - pt2).cross(Vector3.from_point(pt3 - pt2))
        if normal.is_empty():
            return None
        normal = normal.normalised()
        return cls(normal.dot(Vector3.from_point(pt1)), normal)

    def __repr__(self):
        return "Plane(offset={}, normal={!r})".format(self.offset, self._normal)

    def copy(self) -> "Plane":
        return Plane(self.offset, self._normal)

    def __eq__(self, ref):
        if not isinstance(ref, Plane):
            return NotImplemented
        return is_equal(self.offset, ref.offset) and self._normal == ref._normal

    __hash__ = None

    def get_normal(self) -> Vector3:
        return Vector3(*self._normal.v)

    def set_normal(self, normal: Vector3):
        if normal.is_empty():
            raise ValueError('empty normal passed to Plane.set_normal: {!r}'.format(normal))
        self._normal = normal.normalised()

    normal = property(get_normal, set_normal)

    def origin(self) -> Point:
        """Return the point of the plane closest to the coordinate origin."""
        return (self._normal * self.offset).as_point()

    ## arithmetic

    def __add__(self, offset: Point) -> "Plane":
        if not isinstance(offset, Point):
            return NotImplemented
        return Plane.create_from_point(self.origin() + offset, self._normal)

    def __sub__(self, offset: Point) -> "Plane":
        if not isinstance(offset, Point):
            return NotImplemented
        return self + (-offset)

    def __mul__(self, mult):
        if isinstance(mult, (Matrix3x3, Matrix4x4)):
            if isinstance(mult, Matrix3x3):
                normal = self._normal * mult
            else:
                ## directions ignore the translation column
                normal = Vector3(*mult.apply(self._normal.v + [0.0])[:3])
            result = Plane.create_from_point(self.origin() * mult, normal)
            return self.copy() if result is None else result
        if isinstance(mult, (int, float)):
            result = Plane(self.offset * mult, self._normal)
            if mult < 0:
                result._normal = -result._normal
            return result
        return NotImplemented

    ## queries

    def position_of(self, ref: Point, prec: float = EPS) -> Face:
        """Return the side of the plane ``ref`` lies on (the normal points to the front)."""
        dot = self._normal.dot(Vector3.from_point(ref))
        if is_less(dot, self.offset, prec):
            return Face.BACK
        if is_greater(dot, self.offset, prec):
            return Face.FRONT
        return Face.ALONG

    def closest_point_to(self, ref: Point) -> Point:
        """Return the foot of the perpendicular from ``ref``."""
        scale = (self.offset - self._normal.dot(Vector3.from_point(ref))) / self._normal.dot(self._normal)
        return ref.as_point() + (self._normal * scale).as_point()

    def length_to(self, ref: Point) -> float:
        """Return the signed distance from the plane to ``ref`` (positive in front)."""
        return (self._normal.dot(Vector3.from_point(ref)) - self.offset) / self._normal.magnitude()

    def height_at(self, ref: Point) -> float:
        """Return the z of the plane above/below ``(ref.x, ref.y)``.

        A vertical plane has no single height, so ``ref.z`` is returned.
        """
        from polykernel.line import Line

        if is_zero(self._normal.z):
            return ref.z
        inter = self.intersection_with_line(Line(ref, ref + Point(0.0, 0.0, 1.0)))
        return ref.z if inter is None else inter.z

    def is_parallel_to(self, ref: "Plane", prec: float = EPS) -> bool:
        return self._normal.is_parallel_to(ref._normal, prec)

    def intersection_with_line(self, line, prec: float = EPS) -> Optional[Point]:
        """Return the point where the infinite extension of ``line`` meets the plane, or ``None`` if parallel."""
        direction = Vector3.from_line(line).normalised()
        dot = self._normal.dot(direction)
        if is_zero(dot, prec):
            return None
        dist = (self.offset - self._normal.dot(Vector3.from_point(line.origin))) / dot
        return line.origin.as_point() + (direction * dist).as_point()

    def intersection_with_plane(self, ref: "Plane"):
        """Return a line along the intersection of two planes, or ``None`` if they are parallel.

        The line passes through the point where the coordinate with the
        largest direction component is zero and runs along ``n1 x n2``.
        """
        from polykernel.line import Line

        ortho = self._normal.cross(ref._normal)
        if ortho.is_empty():
            return None
        n1, n2 = self._normal, ref._normal
        o1, o2 = self.offset, ref.offset
        axis = max(range(3), key=lambda i: abs(ortho[i]))
        if axis == 0:
            inter = Point(0.0,
                          (o1 * n2.z - o2 * n1.z) / ortho.x,
                          (o2 * n1.y - o1 * n2.y) / ortho.x)
        elif axis == 1:
            inter = Point((o2 * n1.z - o1 * n2.z) / ortho.y,
                          0.0,
                          (o1 * n2.x - o2 * n1.x) / ortho.y)
        else:
            inter = Point((o1 * n2.y - o2 * n1.y) / ortho.z,
                          (o2 * n1.x - o1 * n2.x) / ortho.z,
                          0.0)
        return Line(inter, inter + ortho.as_point())

    def cuts_through(self, box, prec: float = EPS) -> bool:
        """Return ``True`` if the corners of ``box`` do not all share one side of the plane."""
        bounds = box.copy()
        bounds.sort()
        lo, hi = bounds.origin, bounds.end
        corners = [Point(x, y, z) for x in (lo.x, hi.x) for y in (lo.y, hi.y) for z in (lo.z, hi.z)]
        first = self.position_of(corners[0], prec)
        return any(self.position_of(corner, prec) != first for corner in corners[1:])
