## circular arcs in an arbitrary plane for polykernel

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

"""Circular arcs in an arbitrary plane.

An arc is stored as a centre, a plane normal, a radius and a start angle
plus signed sweep.  The angles are measured in the plane of the arc after
it has been levelled (see :class:`~polykernel.leveller.Leveller`), so for
an arc whose normal is the z axis they are ordinary plan azimuths.

The circle intersection solvers evaluate their chord half-angles with
``mpmath``; near-tangent cases lose most of their precision in the
``acos`` otherwise.
"""

from __future__ import annotations

import math
from typing import List, Optional

import mpmath as mpm

from polykernel.box import Box
from polykernel.leveller import Leveller
from polykernel.line import Line
from polykernel.linequation import LinEquation
from polykernel.matrix import Matrix3x3, Matrix4x4
from polykernel.point import Point
from polykernel.polypoint import PolyPoint
from polykernel.position import Position, Region, Side, to_region
from polykernel.tolerance import (
    EPS,
    PI,
    PI2,
    fmod_prec,
    is_equal,
    is_greater,
    is_greater_zero,
    is_less,
    is_less_or_equal,
    is_within,
    is_zero,
    sgn,
)
from polykernel.vector import Vector3
from polykernel.xlist import Role, XInfo, XList, XPoint, create_intersect

__all__ = ["Arc"]


def _acos(ratio: float) -> float:
    ratio = max(-1.0, min(1.0, ratio))
    return float(mpm.acos(mpm.mpf(ratio)))


class Arc:
    """A circular arc; a negative ``sweep`` runs clockwise about ``normal``."""

    __slots__ = ("centre", "normal", "radius", "start_angle", "sweep")

    def __init__(self, centre: Optional[Point] = None, radius: float = 0.0, sweep: float = 0.0,
                 start_angle: float = 0.0, normal: Optional[Vector3] = None):
        self.centre = Point() if centre is None else centre.as_point()
        self.normal = Vector3(0.0, 0.0, 1.0) if normal is None else Vector3(*normal.v)
        self.radius = float(radius)
        self.start_angle = float(start_angle)
        self.sweep = float(sweep)

    @classmethod
    def from_points(cls, centre: Point, pt1: Point, pt2: Point, is_clockwise: bool = False) -> "Arc":
        """Return the plan arc about ``centre`` from ``pt1`` round to the direction of ``pt2``."""
        start = centre.azimuth_angle_to(pt1)
        sweep = centre.azimuth_angle_to(pt2) - start
        if is_clockwise:
            if sweep > 0:
                sweep -= PI2
        elif sweep < 0:
            sweep += PI2
        return cls(centre, centre.length_from_2d(pt1), sweep, start)

    @classmethod
    def create_from_points(cls, pt1: Point, pt2: Point, pt3: Point) -> Optional["Arc"]:
        """Return the arc through three consecutive points, or ``None`` if they are colinear."""
        from polykernel.plane import Plane

        plane = Plane.create_from_points(pt1, pt2, pt3)
        if plane is None:
            return None
        normal = plane.get_normal()
        if normal.z < 0:
            normal = -normal
        line1, line2 = Line(pt1, pt2), Line(pt2, pt3)
        level = Leveller(normal)
        level.transform(line1)
        level.transform(line2)
        eq1, eq2 = LinEquation.create(line1.origin, line1.end), LinEquation.create(line2.origin, line2.end)
        if eq1 is None or eq2 is None:
            return None
        centre = eq1.get_perpendicular(line1.midpoint()).intersection_with(eq2.get_perpendicular(line2.midpoint()))
        if centre is None:
            return None
        centre.z = line1.origin.z
        start = centre.azimuth_angle_to(line1.origin)
        sweep = math.fmod(centre.azimuth_angle_to(line2.end) - start + PI2, PI2)
        chord = LinEquation.create(line1.origin, line2.end)
        if chord is not None and chord.position_of(line1.end) == Side.LEFT:
            sweep -= PI2
        radius = centre.length_from_2d(line1.origin)
        level.reverse().transform(centre)
        return cls(centre, radius, sweep, start, normal)

    @classmethod
    def from_edge(cls, origin: Point, end: PolyPoint) -> "Arc":
        """Return the plan arc of the polygon edge from ``origin`` to ``end``.

        A straight or degenerate edge yields the zero arc.
        """
        if is_zero(end.sweep) or origin.is_equal_2d(end):
            return cls()
        sweep = end.sweep
        chord = Line(origin, end)
        angle = abs(sweep) / 2
        radius = chord.length_2d() / (2 * math.sin(angle))
        centre = origin.as_point()
        centre.move_polar(radius, chord.azimuth_angle() + sgn(sweep) * ((PI / 2.0) - angle))
        return cls(centre, radius, sweep, centre.azimuth_angle_to(chord.origin))

    def __repr__(self):
        return "Arc(centre={!r}, radius={}, sweep={}, start_angle={}, normal={!r})".format(
            self.centre, self.radius, self.sweep, self.start_angle, self.normal)

    def copy(self) -> "Arc":
        return Arc(self.centre, self.radius, self.sweep, self.start_angle, self.normal)

    def assign(self, source: "Arc") -> "Arc":
        self.centre = source.centre.as_point()
        self.normal = Vector3(*source.normal.v)
        self.radius, self.start_angle, self.sweep = source.radius, source.start_angle, source.sweep
        return self

    def __eq__(self, ref):
        if not isinstance(ref, Arc):
            return NotImplemented
        return self.is_equal_3d(ref)

    __hash__ = None

    ## arithmetic

    def __add__(self, offset: Point) -> "Arc":
        result = self.copy()
        result.centre += offset
        return result

    def __sub__(self, offset: Point) -> "Arc":
        result = self.copy()
        result.centre -= offset
        return result

    def __mul__(self, mult) -> "Arc":
        result = self.copy()
        if isinstance(mult, (Matrix3x3, Matrix4x4)):
            ref = self.get_origin() * mult
            result.centre = self.centre * mult
            if isinstance(mult, Matrix3x3):
                result.normal = self.normal * mult
            else:
                result.normal = Vector3(*mult.apply(self.normal.v + [0.0])[:3])
            result.radius = result.centre.length_from_3d(ref)
            return result
        if isinstance(mult, (int, float)):
            result.centre *= mult
            result.radius *= mult
            return result
        return NotImplemented

    ## properties

    def is_valid(self, prec: float = EPS) -> bool:
        return is_greater_zero(self.radius, prec) and not is_zero(self.sweep, prec) and \
            not self.normal.is_empty(prec)

    def _is_equal(self, ref, centres_match, prec):
        if not (centres_match and self.normal.is_parallel_to(ref.normal, prec) and
                is_equal(self.radius, ref.radius, prec) and is_equal(abs(self.sweep), abs(ref.sweep), prec)):
            return False
        min1 = self.start_angle + min(self.sweep, 0.0)
        min2 = ref.start_angle + min(ref.sweep, 0.0)
        return is_equal(min1, min2, prec)

    def is_equal_2d(self, ref: "Arc", prec: float = EPS) -> bool:
        """Return ``True`` if the arcs cover the same span of the same circle, in either direction."""
        return self._is_equal(ref, self.centre.is_equal_2d(ref.centre, prec), prec)

    def is_equal_3d(self, ref: "Arc", prec: float = EPS) -> bool:
        return self._is_equal(ref, self.centre.is_equal_3d(ref.centre, prec), prec)

    def _leveller(self, prec: float = EPS) -> Leveller:
        return Leveller(self.normal, prec=prec)

    def _point_at(self, angle: float) -> Point:
        level = self._leveller()
        pt = self.centre.copy()
        level.transform_point(pt)
        pt.move_polar(self.radius, angle)
        level.reverse().transform_point(pt)
        return pt

    def get_origin(self) -> Point:
        return self._point_at(self.start_angle)

    def get_end(self) -> PolyPoint:
        """Return the end point, carrying the arc sweep."""
        return PolyPoint.from_point(self._point_at(self.start_angle + self.sweep), self.sweep, 0)

    def get_end_angle(self) -> float:
        return self.start_angle + self.sweep

    def midpoint(self) -> Point:
        return self._point_at(self.start_angle + self.sweep / 2)

    def get_plane(self):
        """Return the plane of the arc, or ``None`` if the normal is empty."""
        from polykernel.plane import Plane

        return Plane.create_from_point(self.centre, self.normal)

    def bounds(self) -> Optional[Box]:
        """Return the exact bounding box of a plan arc (``None`` for arcs in any other plane)."""
        if not self.normal.is_parallel_to(Vector3(0.0, 0.0, 1.0)):
            return None
        result = Box(self.get_origin(), self.get_end())
        init_angle, end_angle = self.start_angle, self.get_end_angle()
        if self.sweep < 0:
            init_angle, end_angle = end_angle, init_angle
        if end_angle < init_angle:
            end_angle += PI2
        quad = fmod_prec(init_angle + PI2, PI / 2.0)
        quad = init_angle if is_zero(quad) else init_angle - quad + PI / 2.0
        while quad < end_angle:
            result.merge(self.centre + Point(self.radius * math.cos(quad), self.radius * math.sin(quad)))
            quad += PI / 2.0
        return result

    def get_area(self, is_arc_only: bool = True, is_signed: bool = False) -> float:
        """Return the area of the sector, or with ``is_arc_only`` only the segment between arc and chord."""
        result = self.radius ** 2 * self.sweep / 2
        if is_arc_only:
            chord = self.get_origin().length_from_2d(self.get_end())
            result -= sgn(result) * (chord * self.radius * math.cos(self.sweep / 2) / 2)
        return result if is_signed else abs(result)

    def length_2d(self) -> float:
        return self.radius * abs(self.sweep)

    def length_3d(self) -> float:
        return self.radius * abs(self.sweep)

    def is_parallel_to_2d(self, ref: "Arc", prec: float = EPS) -> bool:
        """Return ``True`` if the arcs are concentric in plan."""
        return self.centre.is_equal_2d(ref.centre, prec)

    def is_parallel_to_3d(self, ref: "Arc", prec: float = EPS) -> bool:
        return self.centre.is_equal_3d(ref.centre, prec) and self.normal.is_parallel_to(ref.normal, prec)

    def is_colinear_to_2d(self, ref: "Arc", prec: float = EPS) -> bool:
        """Return ``True`` if the arcs lie on the same circle in plan."""
        return self.is_parallel_to_2d(ref, prec) and is_equal(self.radius, ref.radius, prec) and \
            is_equal(math.fmod(self.normal.azimuth_angle(), PI), math.fmod(ref.normal.azimuth_angle(), PI), prec) and \
            is_equal(abs(self.normal.altitude_angle()), abs(ref.normal.altitude_angle()), prec)

    def is_colinear_to_3d(self, ref: "Arc", prec: float = EPS) -> bool:
        return self.centre.is_equal_3d(ref.centre, prec) and is_equal(self.radius, ref.radius, prec) and \
            self.normal.is_parallel_to(ref.normal, prec)

    ## closest points

    def closest_point_to_3d(self, ref: Point) -> Point:
        """Return the closest point to ``ref`` on the full circle."""
        level = self._leveller()
        ctr, pt = self.centre.copy(), ref.as_point()
        level.transform_point(ctr)
        level.transform_point(pt)
        angle = ctr.azimuth_angle_to(pt)
        ctr += Point(self.radius * math.cos(angle), self.radius * math.sin(angle))
        level.reverse().transform_point(ctr)
        return ctr

    def closest_point_to_2d(self, ref: Point) -> Point:
        return self.closest_point_to_3d(ref)

    def closest_point_along_2d(self, ref: Point, prec: float = EPS) -> Point:
        """Return the closest point to ``ref`` on the arc itself."""
        if not self.is_valid(prec) or ref.is_equal_2d(self.centre, prec):
            return self.get_origin()
        inter = XList(XInfo(Position.ALL), XInfo())
        if self.intersection_with_2d(Line(self.centre, ref), inter, prec) == 0:
            return self.get_origin()
        base = ref.as_point()
        nearest = min(inter, key=base.length_from_2d)
        if nearest.get_pos(Role.TARGET) & Position.WITHIN:
            return nearest.as_point()
        origin, end = self.get_origin(), self.get_end().as_point()
        return origin if origin.length_from_2d(nearest) < end.length_from_2d(nearest) else end

    def closest_point_along_3d(self, ref: Point, prec: float = EPS) -> Point:
        level = self._leveller()
        arc, pt = self.copy(), ref.as_point()
        level.transform(arc)
        level.transform_point(pt)
        result = arc.closest_point_along_2d(pt, prec)
        return level.reverse().transform_point(result)

    ## classification

    def position_of_2d(self, ref: Point, prec: float = EPS) -> Position:
        """Classify ``ref`` against the arc in plan.

        Points off the circle are ``INSIDE`` or ``OUTSIDE``; points on the
        circle but beyond the ends of the arc are ``RADIAL``.
        """
        if not self.is_valid(prec):
            return Position.UNDEFINED
        span = self.centre.length_from_2d(ref)
        if is_greater(span, self.radius, prec):
            return Position.OUTSIDE
        if is_less(span, self.radius, prec):
            return Position.INSIDE
        if ref.is_equal_2d(self.get_origin(), prec):
            return Position.ORIGIN
        if ref.is_equal_2d(self.get_end(), prec):
            return Position.END
        angle, start, sweep = self.centre.azimuth_angle_to(ref), self.start_angle, self.sweep
        if sweep < 0:
            start = math.fmod(start + sweep + PI2, PI2)
            sweep = -sweep
        if angle < start:
            angle += PI2
        ## a linear tolerance on the circumference
        return Position.ALONG if is_within(angle, start, start + sweep, prec / self.radius) else Position.RADIAL

    def position_of_3d(self, ref: Point, prec: float = EPS) -> Position:
        if not self.is_valid(prec):
            return Position.UNDEFINED
        plane = self.get_plane()
        if plane is None or not is_zero(plane.length_to(ref), prec):
            return Position.UNDEFINED
        ## classify in the plane of the arc
        level = self._leveller()
        arc, pt = self.copy(), ref.as_point()
        level.transform(arc)
        level.transform_point(pt)
        return arc.position_of_2d(pt, prec)

    def encloses_2d(self, ref: Point, prec: float = EPS) -> bool:
        return to_region(self.position_of_2d(ref, prec)) in (Region.INSIDE, Region.ALONG)

    def encloses_3d(self, ref: Point, prec: float = EPS) -> bool:
        plane = self.get_plane()
        if plane is None or not is_zero(plane.length_to(ref), prec):
            return False
        return is_less_or_equal(self.centre.length_from_3d(ref), self.radius, prec)

    ## intersection

    def intersection_with_2d(self, ref, inter: XList, prec: float = EPS) -> int:
        """Collect the plan intersections with a line or another arc into ``inter``.

        The arc is the target; ``ref`` is the blade.  Returns the number of
        points accepted by the list.
        """
        from polykernel.plane import Plane

        if isinstance(ref, Arc):
            if self.centre.is_equal_2d(ref.centre, prec):
                return 0
            plane1, plane2 = self.get_plane(), ref.get_plane()
            if plane1 is None or plane2 is None or not plane1.is_parallel_to(plane2):
                return 0
            arc = self.copy()
            if not is_equal(plane1.offset, plane2.offset, prec):
                ## lift this circle onto the plane of the other
                ctr = plane2.intersection_with_line(Line(self.centre, self.centre + Point(0.0, 0.0, 1.0)))
                if ctr is not None:
                    arc.centre = ctr
            return len(arc._intersect_level_arc(ref, inter, prec))
        plane = Plane.create_from_point(self.centre, self.normal)
        if plane is None:
            return 0
        orig = plane.intersection_with_line(Line(ref.origin, ref.origin + Point(0.0, 0.0, 1.0)))
        end = plane.intersection_with_line(Line(ref.end, ref.end + Point(0.0, 0.0, 1.0)))
        if orig is None or end is None:
            return 0
        return len(self._intersect_level_line(Line(orig, end), inter, prec))

    def intersection_with_3d(self, ref, inter: XList, prec: float = EPS) -> int:
        if isinstance(ref, Arc):
            return self._intersect_arc_3d(ref, inter, prec)
        if self.normal.is_perpendicular_to(Vector3.from_line(ref), prec):
            plane = self.get_plane()
            if plane is None or not is_zero(plane.length_to(ref.origin), prec):
                return 0
            return len(self._intersect_level_line(ref, inter, prec))
        plane = self.get_plane()
        if plane is None:
            return 0
        pt = plane.intersection_with_line(ref, prec)
        if pt is None:
            return 0
        pos = self.position_of_3d(pt, prec)
        if pos in (Position.UNDEFINED, Position.OUTSIDE):
            return 0
        blade_pos = ref.position_of_3d(pt, prec) if inter.is_pos(Role.BLADE) else Position.UNDEFINED
        return 0 if inter.insert(XPoint(pt, pos, blade_pos)) is None else 1

    def _intersect_arc_3d(self, ref: "Arc", inter: XList, prec: float) -> int:
        if self.centre.is_equal_3d(ref.centre, prec):
            return 0
        plane1, plane2 = self.get_plane(), ref.get_plane()
        if plane1 is None or plane2 is None:
            return 0
        if plane1.is_parallel_to(plane2):
            if not is_equal(plane1.offset, plane2.offset, prec):
                return 0
            return len(self._intersect_level_arc(ref, inter, prec))
        line = plane1.intersection_with_plane(plane2)
        if line is None:
            return 0
        ## the line is only a construction aid: points must lie on the other arc
        saved = inter.get_filter(Role.BLADE).copy()
        inter.set_filter(Role.BLADE, XInfo(Position.UNDEFINED, saved.vertex_index, saved.part_index))
        try:
            found = self._intersect_level_line(line, inter, prec)
        finally:
            inter.set_filter(Role.BLADE, saved)
        total = 0
        for pt in found:
            pos = ref.position_of_3d(pt, prec)
            pt.set_pos(inter.slot(Role.BLADE), pos)
            if inter.with_pos(Role.BLADE, pos):
                total += 1
            else:
                inter.erase(pt)
        return total

    def intersection_with_plane(self, plane, inter: XList, prec: float = EPS) -> int:
        """Collect the points where the arc passes through ``plane``."""
        own = self.get_plane()
        if own is None:
            return 0
        line = plane.intersection_with_plane(own)
        if line is None:
            return 0
        saved = inter.get_filter(Role.BLADE).copy()
        inter.set_filter(Role.BLADE, XInfo())
        try:
            return len(self._intersect_level_line(line, inter, prec))
        finally:
            inter.set_filter(Role.BLADE, saved)

    def _intersect_level_line(self, ref: Line, inter: XList, prec: float) -> List[XPoint]:
        if not self.is_valid(prec):
            return []
        level = self._leveller()
        arc, line = self.copy(), ref.copy()
        level.transform(arc)
        level.transform(line)
        base = line.closest_point_to_2d(arc.centre)
        base.z = arc.centre.z
        span = arc.centre.length_from_2d(base)
        if is_greater(span, arc.radius, prec):
            return []
        candidates = []
        if is_equal(span, arc.radius, prec * 1e-2):
            candidates.append(base)
        else:
            if is_zero(span, prec):
                angle = PI / 2.0
                ref_angle = line.azimuth_angle() + angle
            else:
                angle = _acos(span / arc.radius)
                ref_angle = arc.centre.azimuth_angle_to(base)
            for offset in (angle, -angle):
                candidates.append(arc.centre.moved_polar(arc.radius, ref_angle + offset))
        found = self._submit(candidates, inter, arc, line, prec)
        level.reverse()
        for pt in found:
            level.transform_point(pt)
        return found

    def _intersect_level_arc(self, ref: "Arc", inter: XList, prec: float) -> List[XPoint]:
        level = self._leveller()
        arc1, arc2 = self.copy(), ref.copy()
        level.transform(arc1)
        level.transform(arc2)
        r1, r2 = arc1.radius, arc2.radius
        span = arc1.centre.length_from_2d(arc2.centre)
        if is_zero(span, prec) or is_greater(span, r1 + r2, prec) or is_less(span, abs(r1 - r2), prec):
            return []
        angle = arc1.centre.azimuth_angle_to(arc2.centre)
        is_internal = is_equal(span, abs(r1 - r2), prec)
        if is_equal(span, r1 + r2, prec) or is_internal:
            if is_internal and r1 < r2:
                angle += PI
            candidates = [arc1.centre.moved_polar(r1, angle)]
        else:
            offset = (span * span - r2 * r2 + r1 * r1) / (2 * span)
            inc = _acos(offset / r1)
            candidates = [arc1.centre.moved_polar(r1, angle + inc), arc1.centre.moved_polar(r1, angle - inc)]
        found = self._submit(candidates, inter, arc1, arc2, prec)
        level.reverse()
        for pt in found:
            level.transform_point(pt)
        return found

    @staticmethod
    def _submit(candidates, inter, target, blade, prec) -> List[XPoint]:
        found = []
        for pt in candidates:
            xpt = create_intersect(pt, inter, lambda p: target.position_of_2d(p, prec),
                                   lambda p: blade.position_of_2d(p, prec))
            if xpt is not None:
                found.append(xpt)
        return found

    ## mutation

    def move_polar(self, length: float, azimuth: float, altitude=None):
        self.centre.move_polar(length, azimuth, altitude)

    def expand(self, inc: float):
        self.radius += inc

    def spin(self, angle: float):
        """Rotate the arc about its own axis."""
        self.start_angle += angle

    def flip(self):
        """Reverse the direction of the arc."""
        self.start_angle += self.sweep
        self.sweep = -self.sweep
