## line segments for polykernel

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

"""Straight line segments."""

from __future__ import annotations

from typing import Optional

from polykernel.linequation import LinEquation
from polykernel.matrix import Matrix3x3, Matrix4x4
from polykernel.point import Point
from polykernel.position import Face, Position, Side
from polykernel.tolerance import EPS, PI2, is_equal, is_zero
from polykernel.vector import Vector3
from polykernel.xlist import XList, XPoint, create_intersect

__all__ = ["Line"]


class Line:
    """A segment from ``origin`` to ``end``.

    Length, direction and midpoint are always derived from the two
    endpoints; nothing else is stored.
    """

    __slots__ = ("origin", "end")

    def __init__(self, origin: Optional[Point] = None, end: Optional[Point] = None):
        self.origin = Point() if origin is None else origin.as_point()
        self.end = Point() if end is None else end.as_point()

    def __repr__(self):
        return "Line({!r}, {!r})".format(self.origin, self.end)

    def copy(self) -> "Line":
        return Line(self.origin, self.end)

    def __eq__(self, ref):
        if not isinstance(ref, Line):
            return NotImplemented
        return self.is_equal_3d(ref)

    __hash__ = None

    ## arithmetic

    def __add__(self, offset: Point) -> "Line":
        return Line(self.origin + offset, self.end + offset)

    def __sub__(self, offset: Point) -> "Line":
        return Line(self.origin - offset, self.end - offset)

    def __mul__(self, mult) -> "Line":
        if isinstance(mult, (Matrix3x3, Matrix4x4, int, float)):
            return Line(self.origin * mult, self.end * mult)
        return NotImplemented

    ## measurement

    def is_equal_2d(self, ref: "Line", prec: float = EPS) -> bool:
        """Return ``True`` if the lines share endpoints in either direction."""
        return (self.origin.is_equal_2d(ref.origin, prec) and self.end.is_equal_2d(ref.end, prec)) or \
            (self.origin.is_equal_2d(ref.end, prec) and self.end.is_equal_2d(ref.origin, prec))

    def is_equal_3d(self, ref: "Line", prec: float = EPS) -> bool:
        return (self.origin.is_equal_3d(ref.origin, prec) and self.end.is_equal_3d(ref.end, prec)) or \
            (self.origin.is_equal_3d(ref.end, prec) and self.end.is_equal_3d(ref.origin, prec))

    def length_2d(self) -> float:
        return self.origin.length_from_2d(self.end)

    def length_3d(self) -> float:
        return self.origin.length_from_3d(self.end)

    def azimuth_angle(self) -> float:
        return self.origin.azimuth_angle_to(self.end)

    def altitude_angle(self) -> float:
        return self.origin.altitude_angle_to(self.end)

    def angle_to(self, ref: "Line") -> float:
        """Return the 3D angle between the line directions."""
        return Vector3.from_line(self).angle_to(Vector3.from_line(ref))

    def angle_to_2d(self, ref: "Line") -> float:
        """Return the anticlockwise angle (0 to 2π) from this direction to that of ``ref``."""
        angle = ref.azimuth_angle() - self.azimuth_angle()
        if angle < 0.0:
            angle += PI2
        return angle

    def midpoint(self) -> Point:
        return (self.origin + self.end) / 2

    def height_at(self, ref: Point) -> float:
        """Return the height of the line at the location of ``ref`` in plan."""
        from polykernel.plane import Plane

        if is_equal(self.origin.z, self.end.z):
            return self.origin.z
        plane = Plane.create_from_point(ref, Vector3(self.end.x - self.origin.x, self.end.y - self.origin.y, 0.0))
        if plane is None:
            return self.origin.z
        inter = plane.intersection_with_line(self)
        return self.origin.z if inter is None else inter.z

    ## closest points

    def closest_point_to_2d(self, ref: Point) -> Point:
        """Return the closest point to ``ref`` on the infinite extension of the line."""
        equation = LinEquation.create(self.origin, self.end)
        if equation is None:
            return self.origin.copy()
        inter = equation.intersection_with(equation.get_perpendicular(ref))
        return self.origin.copy() if inter is None else inter

    def closest_point_to_3d(self, ref: Point) -> Point:
        from polykernel.plane import Plane

        plane = Plane.create_from_point(ref, Vector3.from_point(self.origin - self.end))
        if plane is None:
            return self.origin.copy()
        inter = plane.intersection_with_line(self)
        return self.origin.copy() if inter is None else inter

    def closest_point_along_2d(self, ref: Point, prec: float = EPS) -> Point:
        """Return the closest point to ``ref`` on the segment itself."""
        result = self.closest_point_to_2d(ref)
        pos = self.position_of_2d(result, prec)
        if pos == Position.BEFORE:
            return self.origin.copy()
        if pos == Position.AFTER:
            return self.end.copy()
        return result

    def closest_point_along_3d(self, ref: Point, prec: float = EPS) -> Point:
        result = self.closest_point_to_3d(ref)
        pos = self.position_of_3d(result, prec)
        if pos == Position.BEFORE:
            return self.origin.copy()
        if pos == Position.AFTER:
            return self.end.copy()
        return result

    def length_to_2d(self, ref: Point) -> float:
        return self.closest_point_to_2d(ref).length_from_2d(ref)

    def length_to_3d(self, ref: Point) -> float:
        return self.closest_point_to_3d(ref).length_from_3d(ref)

    ## intersection

    def intersection_with_2d(self, ref: "Line", inter: Optional[XList] = None, prec: float = EPS):
        """Intersect the infinite extensions of two lines in plan.

        Without ``inter`` the intersection point (or ``None`` if the lines
        are parallel) is returned.  With an :class:`XList` the point is
        classified against both lines, offered to the list and the number
        of accepted intersections (0 or 1) is returned.

        An arc may also be passed as ``ref`` when collecting into a list.
        """
        if not isinstance(ref, Line):
            inter.swap_filters()
            try:
                return ref.intersection_with_2d(self, inter, prec)
            finally:
                inter.swap_filters()
        if inter is None:
            equation = LinEquation.create(self.origin, self.end)
            ref_equation = LinEquation.create(ref.origin, ref.end)
            if equation is None or ref_equation is None:
                return None
            return equation.intersection_with(ref_equation)
        return 0 if self._intersect_2d(ref, inter, prec) is None else 1

    def _intersect_2d(self, ref, inter, prec) -> Optional[XPoint]:
        pt = self.intersection_with_2d(ref)
        if pt is None:
            return None
        return create_intersect(pt, inter, lambda p: self.position_of_2d(p, prec),
                                lambda p: ref.position_of_2d(p, prec))

    def intersection_with_3d(self, ref: "Line", inter: Optional[XList] = None, prec: float = EPS):
        """Intersect two lines in 3D.

        The lines are levelled onto a horizontal plane containing both; if
        they do not share that plane there is no intersection.
        """
        from polykernel.leveller import Leveller
        from polykernel.plane import Plane

        if inter is None:
            found = XList()
            return found.front() if self.intersection_with_3d(ref, found, prec) else None
        plane = Plane.create_from_points(self.origin, self.end, ref.end - (ref.origin - self.origin))
        if plane is None:
            return 0
        line1, line2 = self.copy(), ref.copy()
        level = Leveller(plane.get_normal())
        level.transform(line1)
        level.transform(line2)
        if not is_equal(line1.origin.z, line2.origin.z, prec):
            return 0
        pt = line1._intersect_2d(line2, inter, prec)
        if pt is None:
            return 0
        pt.z = (line1.origin.z + line2.origin.z) / 2
        level.reverse().transform(pt)
        return 1

    def intersection_with_plane(self, plane) -> Optional[Point]:
        return plane.intersection_with_line(self)

    ## classification

    def position_of_2d(self, ref: Point, prec: float = EPS) -> Position:
        """Classify ``ref`` relative to the segment in plan."""
        if ref.is_equal_2d(self.origin, prec):
            return Position.ORIGIN
        if ref.is_equal_2d(self.end, prec):
            return Position.END
        base = LinEquation.create(self.origin, self.end)
        if base is None or not is_zero(self.closest_point_to_2d(ref).length_from_2d(ref), prec):
            return Position.UNDEFINED
        perp = base.get_perpendicular(ref)
        origin_side = perp.position_of(self.origin, prec)
        if origin_side == Side.ALONG:
            return Position.ORIGIN
        end_side = perp.position_of(self.end, prec)
        if end_side == Side.ALONG:
            return Position.END
        if origin_side != end_side:
            return Position.ALONG
        return Position.BEFORE if perp.length_to(self.origin) < perp.length_to(self.end) else Position.AFTER

    def position_of_3d(self, ref: Point, prec: float = EPS) -> Position:
        from polykernel.leveller import Leveller
        from polykernel.plane import Plane

        vect = Vector3.from_line(self)
        level = Leveller(vect)
        line_ref, pt_ref = self.origin.copy(), ref.as_point()
        level.transform(line_ref)
        level.transform(pt_ref)
        if not is_zero(line_ref.length_from_2d(pt_ref), prec):
            return Position.UNDEFINED
        base = Plane.create_from_point(self.origin, vect)
        if base is None:
            return Position.UNDEFINED
        base_pos = base.position_of(ref, prec)
        if base_pos != Face.FRONT:
            return Position.ORIGIN if base_pos == Face.ALONG else Position.BEFORE
        top = Plane.create_from_point(self.end, vect)
        top_pos = top.position_of(ref, prec)
        if top_pos != Face.BACK:
            return Position.END if top_pos == Face.ALONG else Position.AFTER
        return Position.ALONG

    def encloses_2d(self, ref: Point, prec: float = EPS) -> bool:
        return bool(self.position_of_2d(ref, prec) & Position.WITHIN)

    def encloses_3d(self, ref: Point, prec: float = EPS) -> bool:
        return bool(self.position_of_3d(ref, prec) & Position.WITHIN)

    def is_parallel_to_2d(self, ref: "Line", prec: float = EPS) -> bool:
        """Return ``True`` if the lines run parallel in plan (a zero-length line is parallel to anything)."""
        vect = Point(self.end.x - self.origin.x, self.end.y - self.origin.y)
        ref_vect = Point(ref.end.x - ref.origin.x, ref.end.y - ref.origin.y)
        length, ref_length = vect.length_from_2d(Point()), ref_vect.length_from_2d(Point())
        if is_zero(length, prec) or is_zero(ref_length, prec):
            return True
        vect /= length
        ref_vect /= ref_length
        return vect.is_equal_2d(ref_vect, prec) or vect.is_equal_2d(-ref_vect, prec)

    def is_parallel_to_3d(self, ref: "Line", prec: float = EPS) -> bool:
        return Vector3.from_line(self).is_parallel_to(Vector3.from_line(ref), prec)

    def is_colinear_to_2d(self, ref: "Line", prec: float = EPS) -> bool:
        if not self.is_parallel_to_2d(ref, prec):
            return False
        return is_zero(self.closest_point_to_2d(ref.origin).length_from_2d(ref.origin), prec)

    def is_colinear_to_3d(self, ref: "Line", prec: float = EPS) -> bool:
        if not self.is_parallel_to_3d(ref, prec):
            return False
        return is_zero(self.closest_point_to_3d(ref.origin).length_from_3d(ref.origin), prec)

    ## mutation

    def extend(self, length: float):
        """Move the end point ``length`` further along the line (negative values shorten it)."""
        self.end.move_polar(length, self.azimuth_angle(), self.altitude_angle())

    def move_polar(self, length: float, azimuth: float, altitude=None):
        self.origin.move_polar(length, azimuth, altitude)
        self.end.move_polar(length, azimuth, altitude)

    def flip(self):
        self.origin, self.end = self.end, self.origin

    def set_base_level(self, level: float):
        self.origin.z = level
        self.end.z = level
