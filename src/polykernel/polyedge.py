## straight and arc polygon edges for polykernel

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

"""Polygon edges: a straight line or circular arc between two vertices."""

from __future__ import annotations

import math
from typing import Optional

from polykernel.arc import Arc
from polykernel.line import Line
from polykernel.linequation import LinEquation
from polykernel.matrix import Matrix3x3, Matrix4x4
from polykernel.point import Point
from polykernel.polypoint import PolyPoint
from polykernel.position import Position, Rotation, Side
from polykernel.tolerance import (
    EPS,
    EPS_ANGLE,
    PI,
    PI2,
    is_equal,
    is_equal_angle,
    is_greater_or_equal,
    is_greater_zero,
    is_less_or_equal,
    is_zero,
    sgn,
    sign,
)
from polykernel.xlist import XList

__all__ = ["PolyEdge"]


class PolyEdge:
    """The edge from ``origin`` to ``end``; ``end.sweep`` decides whether it is an arc.

    Polygons do not store edges.  A :class:`PolyEdge` is rebuilt from two
    consecutive vertices whenever an operation needs one, and every query
    dispatches to :class:`~polykernel.line.Line` or
    :class:`~polykernel.arc.Arc` accordingly.
    """

    __slots__ = ("origin", "end")

    def __init__(self, origin: Optional[Point] = None, end: Optional[Point] = None):
        self.origin = Point() if origin is None else origin.as_point()
        self.end = PolyPoint() if end is None else PolyPoint.from_point(end)

    @classmethod
    def from_radius(cls, origin: Point, end: Point, radius: float,
                    rotation: Rotation = Rotation.ANTICLOCKWISE, prec: float = EPS) -> "PolyEdge":
        """Return the edge from ``origin`` to ``end`` bent to the given (signed) radius."""
        result = cls(origin, PolyPoint.from_point(end, 0.0))
        if not is_zero(radius, prec) and not origin.is_equal_2d(end):
            result.set_radius(radius, rotation, prec)
        return result

    @classmethod
    def from_arc(cls, arc: Arc) -> "PolyEdge":
        return cls(arc.get_origin(), arc.get_end())

    def __repr__(self):
        return "PolyEdge({!r}, {!r})".format(self.origin, self.end)

    def copy(self) -> "PolyEdge":
        return PolyEdge(self.origin, self.end)

    def __eq__(self, ref):
        if not isinstance(ref, PolyEdge):
            return NotImplemented
        return self.is_equal_3d(ref)

    __hash__ = None

    ## arithmetic

    def __add__(self, offset: Point) -> "PolyEdge":
        result = self.copy()
        result.origin += offset
        result.end += offset
        return result

    def __sub__(self, offset: Point) -> "PolyEdge":
        result = self.copy()
        result.origin -= offset
        result.end -= offset
        return result

    def __mul__(self, mult) -> "PolyEdge":
        if isinstance(mult, (Matrix3x3, Matrix4x4, int, float)):
            result = self.copy()
            result.origin *= mult
            result.end *= mult
            return result
        return NotImplemented

    ## properties

    def is_arc(self, prec: float = EPS) -> bool:
        return self.end.is_arc(prec)

    def as_arc(self, prec: float = EPS) -> Optional[Arc]:
        """Return the edge as an :class:`Arc`, or ``None`` for a straight edge."""
        return Arc.from_edge(self.origin, self.end) if self.is_arc(prec) else None

    def as_line(self) -> Line:
        return Line(self.origin, self.end)

    def _as_primitive(self):
        return Arc.from_edge(self.origin, self.end) if self.is_arc() else self.as_line()

    def is_equal_2d(self, ref: "PolyEdge", prec: float = EPS) -> bool:
        """Return ``True`` if the edges match, allowing one to run in reverse (with the sweep negated)."""
        return (self.origin.is_equal_2d(ref.origin, prec) and self.end.is_equal_2d(ref.end, prec) and
                is_equal(self.end.sweep, ref.end.sweep, prec)) or \
            (self.end.is_equal_2d(ref.origin, prec) and self.origin.is_equal_2d(ref.end, prec) and
             is_equal(self.end.sweep, -ref.end.sweep, prec))

    def is_equal_3d(self, ref: "PolyEdge", prec: float = EPS) -> bool:
        return (self.origin.is_equal_3d(ref.origin, prec) and self.end.is_equal_3d(ref.end, prec) and
                is_equal(self.end.sweep, ref.end.sweep, prec)) or \
            (self.end.is_equal_3d(ref.origin, prec) and self.origin.is_equal_3d(ref.end, prec) and
             is_equal(self.end.sweep, -ref.end.sweep, prec))

    def is_parallel_to_2d(self, ref: "PolyEdge", prec: float = EPS) -> bool:
        """Straight edges are parallel by direction, arc edges when concentric."""
        if self.is_arc():
            return ref.is_arc() and self.as_arc().is_parallel_to_2d(ref.as_arc(), prec)
        return not ref.is_arc() and self.as_line().is_parallel_to_2d(ref.as_line(), prec)

    def is_parallel_to_3d(self, ref: "PolyEdge", prec: float = EPS) -> bool:
        if self.is_arc():
            return ref.is_arc() and self.as_arc().is_parallel_to_3d(ref.as_arc(), prec)
        return not ref.is_arc() and self.as_line().is_parallel_to_3d(ref.as_line(), prec)

    def is_colinear_to_2d(self, ref: "PolyEdge", prec: float = EPS) -> bool:
        if not self.is_parallel_to_2d(ref, prec):
            return False
        return is_zero(self.closest_point_to_2d(ref.origin).length_from_2d(ref.origin), prec)

    def is_colinear_to_3d(self, ref: "PolyEdge", prec: float = EPS) -> bool:
        if not self.is_parallel_to_3d(ref, prec):
            return False
        return is_zero(self.closest_point_to_3d(ref.origin).length_from_3d(ref.origin), prec)

    def is_tangential_to_2d(self, ref: "PolyEdge", prec: float = EPS, angle_prec: float = EPS_ANGLE) -> bool:
        """Return ``True`` if ``ref`` ends where this starts, heading the same way."""
        if not self.origin.is_equal_2d(ref.end, prec):
            return False
        return is_equal_angle(ref.end_tangent(), self.start_tangent(), angle_prec)

    def get_radius(self, is_signed: bool = False) -> float:
        """Return the arc radius (0 for a straight edge), negative when signed and the centre lies left."""
        if not self.is_arc():
            return 0.0
        arc = self.as_arc()
        if is_signed and LinEquation(self.azimuth_angle(), self.origin).position_of(arc.centre) == Side.LEFT:
            return -arc.radius
        return arc.radius

    def length_2d(self) -> float:
        return self.as_arc().length_2d() if self.is_arc() else self.origin.length_from_2d(self.end)

    def length_3d(self) -> float:
        return self.as_arc().length_3d() if self.is_arc() else self.end.length_from_3d(self.origin)

    def azimuth_angle(self) -> float:
        return self.origin.azimuth_angle_to(self.end)

    def altitude_angle(self) -> float:
        return self.origin.altitude_angle_to(self.end)

    def get_tangent_at(self, ref: Point) -> float:
        """Return the direction of travel at ``ref`` (a point on the edge)."""
        arc = self.as_arc()
        if arc is not None:
            return arc.centre.azimuth_angle_to(ref) + (-(PI / 2.0) if arc.sweep < 0 else PI / 2.0)
        return self.azimuth_angle()

    def start_tangent(self) -> float:
        return self.get_tangent_at(self.origin)

    def end_tangent(self) -> float:
        return self.get_tangent_at(self.end)

    def centre(self) -> Point:
        """Return the arc centre, or the midpoint of a straight edge."""
        return self.as_arc().centre if self.is_arc() else self.as_line().midpoint()

    def midpoint(self) -> Point:
        return self._as_primitive().midpoint()

    def get_area(self, is_signed: bool = False) -> float:
        """Return the area between an arc edge and its chord (0 for straight edges)."""
        return self.as_arc().get_area(True, is_signed) if self.is_arc() else 0.0

    def closest_point_to_2d(self, ref: Point) -> Point:
        return self._as_primitive().closest_point_to_2d(ref)

    def closest_point_to_3d(self, ref: Point) -> Point:
        return self._as_primitive().closest_point_to_3d(ref)

    def closest_point_along_2d(self, ref: Point, prec: float = EPS) -> Point:
        return self._as_primitive().closest_point_along_2d(ref, prec)

    def closest_point_along_3d(self, ref: Point, prec: float = EPS) -> Point:
        return self._as_primitive().closest_point_along_3d(ref, prec)

    def position_of_2d(self, ref: Point, prec: float = EPS) -> Position:
        return self._as_primitive().position_of_2d(ref, prec)

    def position_of_3d(self, ref: Point, prec: float = EPS) -> Position:
        return self._as_primitive().position_of_3d(ref, prec)

    def encloses_2d(self, ref: Point, prec: float = EPS) -> bool:
        return self.position_of_2d(ref, prec) in (Position.ALONG, Position.ORIGIN, Position.END)

    def encloses_3d(self, ref: Point, prec: float = EPS) -> bool:
        return self.position_of_3d(ref, prec) in (Position.ALONG, Position.ORIGIN, Position.END)

    def overlaps_2d(self, ref: "PolyEdge", prec: float = EPS) -> bool:
        """Return ``True`` if the edges share a stretch of boundary (touching ends do not count)."""
        if self.is_arc() != ref.is_arc():
            return False
        major, minor = self, ref
        if major.length_2d() < minor.length_2d():
            major, minor = minor, major
        return any(major.position_of_2d(pt, prec) == Position.ALONG
                   for pt in (minor.midpoint(), minor.origin, minor.end))

    ## intersection

    def intersection_with_2d(self, ref: "PolyEdge", inter: XList, prec: float = EPS) -> int:
        """Collect the plan intersections with ``ref`` (the blade) into ``inter``."""
        arc, ref_arc = self.as_arc(prec), ref.as_arc(prec)
        if arc is not None:
            return arc.intersection_with_2d(ref_arc if ref_arc is not None else ref.as_line(), inter, prec)
        if ref_arc is not None:
            inter.swap_filters()
            try:
                return ref_arc.intersection_with_2d(self.as_line(), inter, prec)
            finally:
                inter.swap_filters()
        return self.as_line().intersection_with_2d(ref.as_line(), inter, prec)

    def intersection_with_3d(self, ref: "PolyEdge", inter: XList, prec: float = EPS) -> int:
        arc, ref_arc = self.as_arc(prec), ref.as_arc(prec)
        if arc is not None:
            return arc.intersection_with_3d(ref_arc if ref_arc is not None else ref.as_line(), inter, prec)
        if ref_arc is not None:
            inter.swap_filters()
            try:
                return ref_arc.intersection_with_3d(self.as_line(), inter, prec)
            finally:
                inter.swap_filters()
        return self.as_line().intersection_with_3d(ref.as_line(), inter, prec)

    ## mutation

    def _set_from_arc(self, arc: Arc):
        vertex_id = self.end.id
        self.origin = arc.get_origin()
        self.end = arc.get_end()
        self.end.id = vertex_id

    def set_radius(self, radius: float, rotation: Optional[Rotation] = None, prec: float = EPS):
        """Bend the edge into an arc of the given radius (0 straightens it).

        A positive radius puts the centre on the right of the chord.  If
        the chord is longer than the diameter the edge becomes straight.
        Without an explicit rotation the sense of any existing arc is
        kept, otherwise the arc runs anticlockwise.
        """
        sweep = 0.0
        if not is_zero(radius, prec):
            if rotation is None:
                rotation = Rotation.CLOCKWISE if self.end.sweep < 0 and not is_zero(self.end.sweep) \
                    else Rotation.ANTICLOCKWISE
            span = self.origin.length_from_2d(self.end)
            if is_less_or_equal(span, abs(2 * radius), prec):
                if is_equal(span, abs(2 * radius), prec):
                    sweep = -PI if rotation == Rotation.CLOCKWISE else PI
                else:
                    centre = Point(span / 2, -sgn(radius) * math.sqrt(radius ** 2 - (span / 2) ** 2))
                    sweep = Arc.from_points(centre, Point(), Point(span, 0.0), rotation == Rotation.CLOCKWISE).sweep
        self.end.sweep = sweep

    def stretch_origin(self, pt: Point, can_invert: bool = True, prec: float = EPS):
        """Move the origin to the projection of ``pt`` onto the edge (or its circle)."""
        projected = self.closest_point_to_2d(pt)
        pos = self.position_of_2d(projected, prec)
        if self.is_arc():
            if pos == Position.RADIAL:
                arc = Arc.create_from_points(projected, self.origin, self.end)
                if arc is not None:
                    self._set_from_arc(arc)
            elif pos == Position.ALONG:
                arc = Arc.create_from_points(self.end, self.origin, projected)
                if arc is None:
                    return
                ## the point diametrically opposite the midpoint keeps the new arc on the same circle
                mid = arc.midpoint()
                mid.move_polar(2 * mid.length_from_2d(arc.centre), mid.azimuth_angle_to(arc.centre))
                arc = Arc.create_from_points(projected, mid, self.end)
                if arc is not None:
                    self._set_from_arc(arc)
        elif can_invert:
            if pos in (Position.ALONG, Position.BEFORE):
                self.origin = projected
            elif pos == Position.AFTER:
                self.origin = self.end.as_point()
                self.end = PolyPoint.from_point(projected, 0.0, self.end.id)
        else:
            self.origin = projected

    def stretch_end(self, pt: Point, prec: float = EPS):
        self.flip()
        self.stretch_origin(pt, False, prec)
        self.flip()

    def set_base_level(self, z: float):
        self.origin.z = z
        self.end.z = z

    def offset(self, shift: float):
        """Move the edge sideways by ``shift`` (positive to the left of the direction of travel)."""
        arc = self.as_arc()
        if arc is not None:
            arc.expand(-shift if is_greater_zero(self.end.sweep) else shift)
            self._set_from_arc(arc)
        else:
            angle = self.azimuth_angle() + PI / 2.0
            self.origin.move_polar(shift, angle)
            self.end.move_polar(shift, angle)

    def extend(self, length, by_end: bool = True):
        """Lengthen the edge by ``length`` (negative shortens), or stretch it to the point nearest ``length``.

        Arcs never grow beyond a full circle.
        """
        if isinstance(length, Point):
            self._extend_to(length, by_end)
            return
        if is_zero(length):
            return
        arc = self.as_arc()
        if arc is not None:
            delta = sign(arc.sweep) * length / arc.radius
            arc.sweep += delta
            if is_greater_or_equal(abs(arc.sweep), PI2):
                arc.sweep = sign(arc.sweep) * PI2
            elif not by_end:
                arc.start_angle -= delta
            self._set_from_arc(arc)
        elif by_end:
            self.end.move_polar(length, self.azimuth_angle(), self.altitude_angle())
        else:
            self.origin.move_polar(length, self.end.azimuth_angle_to(self.origin), self.end.altitude_angle_to(self.origin))

    def _extend_to(self, ref: Point, by_end: bool):
        pt = self.closest_point_to_2d(ref)
        arc = self.as_arc()
        if arc is not None:
            if by_end:
                new_edge = Arc.from_points(arc.centre, self.origin, pt, arc.sweep < 0)
                vertex_id = self.end.id
                self.end = new_edge.get_end()
                self.end.id = vertex_id
            else:
                self._set_from_arc(Arc.from_points(arc.centre, pt, self.end, arc.sweep < 0))
        elif by_end:
            self.end = PolyPoint.from_point(pt, 0.0, self.end.id)
        else:
            self.origin = pt

    def split(self, pos: Point, keep_origin: bool = True, prec: float = EPS) -> "PolyEdge":
        """Split the edge at the point nearest ``pos`` and return the offcut.

        The part that keeps the original anchor (the origin, or the end if
        ``keep_origin`` is false) stays in this edge; the parts are
        exchanged if the split would otherwise move the anchor.
        """
        offcut = self.copy()
        prev_anchor = (self.origin if keep_origin else self.end).as_point()
        intersect = PolyPoint.from_point(self.closest_point_along_2d(pos, prec), 0.0, 0)
        where = self.position_of_2d(intersect, prec)
        if where == Position.UNDEFINED:
            return offcut
        if where == Position.ORIGIN:
            self.end = PolyPoint.from_point(self.origin, 0.0, self.end.id)
        elif where == Position.END:
            offcut.origin = self.end.as_point()
        else:
            if self.is_arc():
                arc = self.as_arc()
                new_arc = Arc.from_points(arc.centre, arc.get_origin(), pos, arc.sweep < 0)
                intersect.sweep = new_arc.sweep
                offcut.end.sweep = arc.sweep - new_arc.sweep
            self.end = intersect
            offcut.origin = intersect.as_point()
        if not prev_anchor.is_equal_2d(self.origin if keep_origin else self.end, prec):
            self.origin, offcut.origin = offcut.origin, self.origin
            self.end, offcut.end = offcut.end, self.end
        return offcut

    def move_polar(self, length: float, azimuth: float, altitude=None):
        self.origin.move_polar(length, azimuth, altitude)
        self.end.move_polar(length, azimuth, altitude)

    def flip(self) -> "PolyEdge":
        """Reverse the edge: swap the ends and negate the sweep."""
        sweep = self.end.sweep
        vertex_id = self.end.id
        origin = self.origin
        self.origin = self.end.as_point()
        self.end = PolyPoint.from_point(origin, -sweep, vertex_id)
        return self
