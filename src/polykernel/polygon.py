## polygons with arc edges and holes, and polygon cutting, for polykernel

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

"""Polygons with arc edges and holes, and the engine that cuts them.

A :class:`Polygon` is a list of :class:`~polykernel.polypoint.PolyPoint`
vertices, each carrying the sweep of the edge that arrives at it, plus an
optional list of holes.  Indexing wraps, so ``poly[-1]`` and
``poly[len(poly)]`` are the last and first vertex respectively.

The cutting operations all follow the same pattern:

* intersect the polygon with a blade (a line or another polygon), with
  every intersection tagged by role (target or blade), vertex and part;
* rewrite the vertex indices as vertex ids so the polygons can be mutated,
  then insert a node on each edge at each intersection;
* discard *reflections*, where the polygon only touches the blade;
* walk the target and the blade alternately from one intersection to the
  next until the walk returns to its start, emitting one polygon per walk.

Part indices are 0 for the outer boundary and ``k`` for hole ``k - 1``.
"""

from __future__ import annotations

import logging
import math
from collections import namedtuple
from typing import Iterable, List, Optional, Tuple

from polykernel.arc import Arc
from polykernel.box import Anchor2D, Box
from polykernel.faceter import Faceter
from polykernel.line import Line
from polykernel.linequation import LinEquation
from polykernel.matrix import Matrix3x3, Matrix4x4
from polykernel.point import Point
from polykernel.polyedge import PolyEdge
from polykernel.polypoint import PolyPoint
from polykernel.position import Position, Region, Rotation, Side
from polykernel.rotater import ZRotater
from polykernel.tolerance import (
    EPS,
    EPS_ANGLE,
    PI,
    PI2,
    angle_mod,
    fmod_prec,
    is_greater,
    is_greater_or_equal,
    is_greater_zero,
    is_less_or_equal,
    is_less_or_equal_zero,
    is_zero,
    sgn,
)
from polykernel.xlist import Role, XInfo, XList, XPoint, along_length_of, compare_position

__all__ = ["Polygon", "PolyVector", "VertexIndex"]

logger = logging.getLogger(__name__)

#: Location of a vertex: the part it belongs to, its index in that part and the vertex itself.
VertexIndex = namedtuple("VertexIndex", ["part", "vertex", "point"])


class PolyVector(list):
    """A list of polygons."""

    def find_largest(self) -> Optional[int]:
        """Return the index of the polygon with the largest area (``None`` if none has any area)."""
        largest, result = 0.0, None
        for index, poly in enumerate(self):
            area = poly.get_area()
            if area > largest:
                largest, result = area, index
        return result


## edge helpers


def _primitive(origin: Point, end: PolyPoint):
    """Return the :class:`Arc` or :class:`Line` of the edge from ``origin`` to ``end``."""
    if end.is_arc() and not origin.is_equal_2d(end):
        return Arc.from_edge(origin, end)
    return Line(origin, end)


def _edge_midpoint(poly: "Polygon", vertex: int, inc: int = 1) -> Point:
    """Return the midpoint of the edge between ``vertex`` and ``vertex + inc``."""
    end = vertex + inc
    if inc < 0:
        vertex, end = end, vertex
    return PolyEdge(poly[vertex], poly[end]).midpoint()


def _vertex_offsets(poly: "Polygon", next_index: int, prev_index: int, ref: Optional[LinEquation] = None,
                    prec: float = EPS) -> Tuple[Point, Point]:
    """Return a point off each end of a run of vertices, for testing which side of ``ref`` the edges leave on.

    For straight edges these are the vertices themselves; for arc edges a
    point along the tangent (or the arc midpoint if the tangent runs along
    ``ref``) is used instead.
    """
    next_offset, prev_offset = poly[next_index].as_point(), poly[prev_index].as_point()
    if poly[prev_index + 1].is_arc(prec):
        arc = Arc.from_edge(prev_offset, poly[prev_index + 1])
        angle = arc.start_angle + arc.sweep + (PI / 2.0 if arc.sweep < 0 else -PI / 2.0)
        if ref is not None and is_zero(fmod_prec(ref.azimuth_angle() - angle_mod(angle), PI, prec), prec):
            prev_offset = arc.midpoint()
        else:
            prev_offset = poly[prev_index + 1].as_point() + Point(math.cos(angle), math.sin(angle))
    if poly[next_index].is_arc(prec):
        arc = Arc.from_edge(poly[next_index - 1], poly[next_index])
        angle = arc.start_angle + (-PI / 2.0 if arc.sweep < 0 else PI / 2.0)
        if ref is not None and is_zero(fmod_prec(ref.azimuth_angle() - angle_mod(angle), PI, prec), prec):
            next_offset = arc.midpoint()
        else:
            next_offset = poly[next_index - 1].as_point() + Point(math.cos(angle), math.sin(angle))
    return next_offset, prev_offset


## reflections


def _is_line_reflection(poly: "Polygon", ref: LinEquation, pt: XPoint, prec: float = EPS) -> bool:
    """Return ``True`` if ``poly`` only touches the line ``ref`` at ``pt``.

    The polygon edges must already be split at the intersection, so that
    the target vertex of ``pt`` is the id of the vertex sitting on it.
    """
    if pt.get_pos(Role.TARGET) == Position.ALONG and pt.get_vertex(Role.TARGET) is not None:
        return False
    part = pt.get_part(Role.TARGET) or 0
    shape = poly.get_shape(part)
    vertex_id = pt.get_vertex(Role.TARGET)
    index = None if vertex_id is None else shape.find_vertex_by_id(vertex_id)
    if index is None:
        return True
    shape = shape.get_shape(index.part)
    former, latter = _edge_midpoint(shape, index.vertex, -1), _edge_midpoint(shape, index.vertex)
    pos1, pos2 = ref.position_of(former, prec / 10), ref.position_of(latter, prec / 10)
    is_along1, is_along2 = pos1 == Side.ALONG, pos2 == Side.ALONG
    if is_along1 and is_along2:
        return True
    if not (is_along1 or is_along2) and (pos1 != pos2 or shape.is_hole):
        return False
    ref2 = LinEquation.create(former, pt)
    if ref2 is None:
        return True
    return ref2.position_of(latter) == (Side.RIGHT if part == 0 else Side.LEFT)


def _is_poly_reflection(target: "Polygon", blade: "Polygon", pt: XPoint, prec: float = EPS) -> bool:
    """Return ``True`` if the blade edges either side of ``pt`` are both inside, or both not inside, ``target``."""
    part, vertex_id = pt.get_part(Role.BLADE), pt.get_vertex(Role.BLADE)
    if part is None or vertex_id is None:
        return False
    shape = blade.get_shape(part)
    index = shape.find_vertex_by_id(vertex_id)
    if index is None:
        return True
    shape = shape.get_shape(index.part)
    before = target.position_of(_edge_midpoint(shape, index.vertex, -1), prec / 2)
    after = target.position_of(_edge_midpoint(shape, index.vertex), prec / 2)
    return (before == Region.INSIDE) == (after == Region.INSIDE)


def _discard_reflections(inter: XList, is_reflection):
    reflections = [pt for pt in inter if is_reflection(pt)]
    for pt in reflections:
        inter.erase(pt)
    if reflections:
        logger.debug("discarded %d reflecting intersection(s)", len(reflections))


## travel


def _extract_path(source: "Polygon", vertex: int, inc: int, poly: "Polygon", inter: XList,
                  prec: float) -> Tuple[bool, Optional[XPoint]]:
    """Copy vertices of ``source`` into ``poly``, stepping ``inc`` from ``vertex``, up to the next intersection.

    Returns ``(closed, found)``: ``closed`` is true once the walk has come
    back to the first vertex of ``poly``, otherwise ``found`` is the
    intersection the walk stopped at.
    """
    for _ in range(source.vert_size() + 1):
        vertex += inc
        pt = source[vertex].as_poly_point()
        if inc < 0:
            pt.sweep = -source[vertex - inc].sweep
        if pt.is_equal_2d(poly[0], prec):
            poly[0].sweep = pt.sweep
            return True, None
        poly.append(pt)
        for xpt in inter:
            if pt.is_equal_2d(xpt, prec):
                return False, xpt
    logger.debug("path along %r never reached an intersection", source)
    return True, None


def _travel_line(source: "Polygon", start_pt: XPoint, inc: int, poly: "Polygon", inter: XList,
                 prec: float) -> Tuple[bool, Optional[XPoint]]:
    shape = source.get_shape(start_pt.get_part(Role.TARGET) or 0)
    index = shape.find_vertex_by_location(start_pt, prec)
    if index is None:
        return True, None
    start_pt.set_vertex(Role.TARGET, None)
    return _extract_path(shape.get_shape(index.part), index.vertex, inc, poly, inter, prec)


def _travel_poly(source: "Polygon", start_pt: XPoint, role: Role, inc: int, poly: "Polygon", inter: XList,
                 prec: float) -> Tuple[bool, Optional[XPoint]]:
    part, vertex_id = start_pt.get_part(role), start_pt.get_vertex(role)
    if part is None or vertex_id is None:
        return False, start_pt
    shape = source.get_shape(part)
    index = shape.find_vertex_by_id(vertex_id)
    if index is None:
        return True, None
    if role == Role.TARGET:
        start_pt.set_vertex(Role.TARGET, None)
    return _extract_path(shape.get_shape(index.part), index.vertex, inc, poly, inter, prec)


def _travel_direction(start_pt: XPoint, target: "Polygon", blade: "Polygon", prec: float) -> Region:
    """Return where the polygon started at ``start_pt`` will sit relative to ``blade``.

    ``Region.UNDEFINED`` means the intersection is spent or unusable.
    """
    vertex_id, part = start_pt.get_vertex(Role.TARGET), start_pt.get_part(Role.TARGET)
    if vertex_id is None or part is None:
        return Region.UNDEFINED
    source = target.get_shape(part)
    index = source.find_vertex_by_id(vertex_id)
    if index is None:
        return Region.UNDEFINED
    source = source.get_shape(index.part)
    target_in, target_out = _edge_midpoint(source, index.vertex, -1), _edge_midpoint(source, index.vertex)
    offset_in = blade.closest_point_along_2d(target_in, True, prec)
    offset_out = blade.closest_point_along_2d(target_out, True, prec)
    is_in = offset_in.get_pos(Role.TARGET) != Position.UNDEFINED
    is_out = offset_out.get_pos(Role.TARGET) != Position.UNDEFINED
    if not is_in and not is_out:
        return Region.UNDEFINED
    if is_in and is_out:
        is_out = not target_in.length_from_2d(offset_in) > target_out.length_from_2d(offset_out)
    if is_out:
        return blade.position_of(target_out, prec / 10)
    return Region.OUTSIDE if blade.position_of(target_in, prec / 10) == Region.INSIDE else Region.INSIDE


def _insert_holes(target: "Polygon", holes: List["Polygon"], prec: float = EPS):
    """Move every hole that ``target`` encloses out of ``holes`` and into ``target``."""
    remaining = []
    for hole in holes:
        if target.encloses(hole, prec):
            target._emplace_hole(hole)
        else:
            remaining.append(hole)
    holes[:] = remaining


## polygon against polygon


def _ids_for_indices(inter: XList, poly: "Polygon", role: Role):
    for pt in inter:
        shape = poly.get_shape(pt.get_part(role) or 0)
        pt.set_vertex(role, shape[pt.get_vertex(role) or 0].id)


def _add_nodes(inter: XList, poly: "Polygon", role: Role, prec: float):
    for pt in inter:
        vertex_id = poly.add_node_along(pt.get_vertex(role) or 0, pt, prec, pt.get_part(role) or 0)
        if vertex_id != 0:
            pt.set_vertex(role, vertex_id)


def _intersect_poly_with_poly(target: "Polygon", blade: "Polygon", inter: XList, prec: float = EPS) -> bool:
    """Collect the crossings of ``target`` and ``blade``, splitting both polygons' edges at each one.

    Returns ``True`` if the outer boundaries touch anywhere.
    """
    target.intersection_with(blade, inter, prec)
    is_touching = any(pt.get_part(Role.TARGET) == 0 and pt.get_part(Role.BLADE) == 0 for pt in inter)
    _ids_for_indices(inter, target, Role.TARGET)
    _ids_for_indices(inter, blade, Role.BLADE)
    inter.remove_duplicates(prec)
    _add_nodes(inter, target, Role.TARGET, prec)
    _add_nodes(inter, blade, Role.BLADE, prec)
    _discard_reflections(inter, lambda pt: _is_poly_reflection(target, blade, pt, prec))
    return is_touching


def _split_poly_with_poly(target: "Polygon", blade: "Polygon", poly_in: Optional[PolyVector],
                          poly_out: Optional[PolyVector], prec: float):
    """Divide ``target`` into the parts inside and outside ``blade``.

    ``blade`` must not have holes (any it has are dropped).  Either output
    list may be ``None`` to discard that side.  Both polygons are modified.
    """
    target.set_direction(Rotation.CLOCKWISE, with_holes=False)
    for hole in target.get_holes():
        hole.set_direction(Rotation.ANTICLOCKWISE)
    target.renumber()
    blade.set_direction(Rotation.CLOCKWISE)
    blade.is_hole = False
    blade.set_holes()
    blade.renumber()
    inter = XList(XInfo(Position.WITHIN), XInfo(Position.WITHIN))
    is_internal = not _intersect_poly_with_poly(target, blade, inter, prec)
    if inter.empty():
        _route_unbroken(target, blade, poly_in, poly_out, prec)
        return
    base_poly = target.copy()
    base_poly.clear()
    exterior = None
    if is_internal:
        exterior = target.copy()
        exterior.set_holes()
    my_holes = []
    for hole_index in reversed(range(target.get_hole_size())):
        if not any(pt.get_part(Role.TARGET) == hole_index + 1 for pt in inter):
            hole = target.get_hole(hole_index).copy()
            if is_internal:
                exterior._emplace_hole(hole)
            else:
                my_holes.append(hole)
    limit = 2 * len(inter) + 2
    while True:
        start, usage = None, Region.UNDEFINED
        for pt in inter:
            usage = _travel_direction(pt, target, blade, prec)
            if usage != Region.UNDEFINED:
                start = pt
                break
        if start is None:
            break
        is_inside = usage == Region.INSIDE
        poly = base_poly.copy()
        poly.append(PolyPoint.from_point(start, 0.0, 0))
        next_pt = start
        for _ in range(limit):
            closed, next_pt = _travel_poly(target, next_pt, Role.TARGET, 1, poly, inter, prec)
            if closed:
                break
            closed, next_pt = _travel_poly(blade, next_pt, Role.BLADE, 1 if is_inside else -1, poly, inter, prec)
            if closed:
                break
        else:
            logger.debug("abandoned an unclosed offcut of %d vertices", poly.vert_size())
            continue
        if not poly.is_valid():
            continue
        poly.renumber()
        is_held = blade.encloses(poly, prec) if is_internal else False
        if is_internal and (not is_held or not is_inside):
            exterior._emplace_hole(poly)
            logger.debug("split emitted a hole of %d vertices", poly.vert_size())
        elif is_inside and poly_in is not None or not is_inside and poly_out is not None:
            _insert_holes(poly, my_holes, prec)
            poly.renumber()
            (poly_in if is_inside else poly_out).append(poly)
            logger.debug("split emitted a polygon of %d vertices %s the blade", poly.vert_size(),
                         "inside" if is_inside else "outside")
    if is_internal and poly_out is not None:
        exterior.renumber()
        poly_out.append(exterior)


def _route_unbroken(target: "Polygon", blade: "Polygon", poly_in: Optional[PolyVector],
                    poly_out: Optional[PolyVector], prec: float):
    """Sort a target that ``blade`` does not cut into the inside or outside lists."""
    if blade.encloses(target, prec):
        if poly_in is not None:
            poly_in.append(target)
        return
    is_blade_held = target.encloses(blade, prec)
    if poly_out is not None:
        outer = target.copy()
        if is_blade_held:
            outer._emplace_hole(blade.copy())
        elif outer.get_hole_size() > 0 and target.overlaps(blade, prec):
            inner = None if poly_in is None else blade.copy()
            covered = []
            for hole in outer.release_holes():
                if blade.overlaps(hole, prec):
                    if hole.encloses(blade, prec):
                        inner = None
                    else:
                        covered.append(hole)
                        continue
                outer._emplace_hole(hole)
            if inner is not None and covered:
                outer._emplace_hole(blade.copy())
                inner.set_holes(covered)
            if inner is not None:
                inner.renumber()
                poly_in.append(inner)
        outer.renumber()
        poly_out.append(outer)
    if is_blade_held and poly_in is not None:
        poly_in.append(blade.copy())


## self-intersection


def _resolve_poly_intersect(poly: "Polygon", processed: PolyVector, prec: float) -> bool:
    """Cut ``poly`` at its first self-crossing, adding the pieces to ``processed``.

    Holes are ignored.  Returns ``True`` if anything was done (a crossing
    was cut or duplicate vertices were removed).
    """
    work = poly.copy()
    work.release_holes()
    is_reduced = work.remove_duplicates_2d(prec)
    work.renumber()
    for vertex in reversed(range(work.vert_size())):
        inter = XList(XInfo(Position.WITHIN), XInfo(Position.WITHIN))
        work.intersection_with(_primitive(work[vertex - 1], work[vertex]), inter, prec)
        if len(inter) < 2:
            continue
        for pt in inter:
            pos, pt_vertex = pt.get_pos(Role.TARGET), pt.get_vertex(Role.TARGET) or 0
            ## meeting the neighbouring edges at the shared vertices is expected
            if (pos == Position.END and pt_vertex == work.wrap_index(vertex - 1)) or \
                    (pos == Position.ORIGIN and pt_vertex == work.wrap_index(vertex + 1)):
                continue
            edge_id, crossed_id = work[vertex].id, work[pt_vertex].id
            id1 = work.add_node_along(edge_id, pt, prec)
            id2 = work.add_node_along(crossed_id, pt, prec)
            index1, index2 = work.find_vertex_by_id(id1), work.find_vertex_by_id(id2)
            if index1 is None or index2 is None:
                break
            offcut = work.copy()
            offcut.clear()
            to_strip = work.wrap_index(index2.vertex - index1.vertex + work.vert_size())
            vertex1 = work.wrap_index(index1.vertex + 1)
            for _ in range(to_strip):
                offcut.append(work.pop(vertex1))
                if vertex1 >= work.vert_size():
                    vertex1 = 0
            if offcut.is_valid():
                processed.append(offcut)
            if work.is_valid():
                processed.append(work)
            return True
    if is_reduced and work.is_valid():
        processed.append(work)
    return is_reduced


class Polygon:
    """A closed polygon (or open polyline) of straight and arc edges, with optional holes.

    ``vertices`` may be any points; they are copied into
    :class:`PolyPoint` vertices (keeping the sweep and id of vertices).
    Holes are copied in and flagged with ``is_hole``.
    """

    def __init__(self, vertices: Optional[Iterable[Point]] = None, is_closed: bool = True,
                 is_hole: bool = False, holes: Optional[Iterable["Polygon"]] = None):
        self._vertices: List[PolyPoint] = [PolyPoint.from_point(vertex) for vertex in (vertices or [])]
        self.is_closed = is_closed
        self.is_hole = is_hole
        self._top_id = 0
        self._holes: Optional[List[Polygon]] = None
        for hole in holes or []:
            self.insert_hole(hole)

    @classmethod
    def from_box(cls, box: Box, angle: float = 0.0) -> "Polygon":
        """Return the rectangle of ``box`` at its lowest level, rotated by ``angle`` about the z axis."""
        z = min(box.origin.z, box.end.z)
        result = cls([Point(box.origin.x, box.origin.y, z), Point(box.end.x, box.origin.y, z),
                      Point(box.end.x, box.end.y, z), Point(box.origin.x, box.end.y, z)])
        if not is_zero(angle):
            ZRotater(angle).transform(result)
        return result

    def __repr__(self):
        holes = "" if not self._holes else ", holes={!r}".format(self._holes)
        return "Polygon({!r}{})".format(self._vertices, holes)

    def copy(self) -> "Polygon":
        """Return a deep copy, holes included."""
        result = self._copy_shape([vertex.copy() for vertex in self._vertices])
        if self._holes is not None:
            result._holes = [hole.copy() for hole in self._holes]
        return result

    def clone_geometry(self) -> "Polygon":
        """Return a copy of the outer boundary only, with every vertex reduced to a plain :class:`PolyPoint`."""
        return self._copy_shape([vertex.as_poly_point() for vertex in self._vertices])

    def _copy_shape(self, vertices):
        result = Polygon.__new__(Polygon)
        result._vertices = vertices
        result.is_closed = self.is_closed
        result.is_hole = self.is_hole
        result._top_id = self._top_id
        result._holes = None
        return result

    ## container

    def __len__(self):
        return len(self._vertices)

    def __iter__(self):
        return iter(self._vertices)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._vertices[index]
        return self._vertices[self.wrap_index(index)]

    def __setitem__(self, index: int, vertex: Point):
        self._vertices[self.wrap_index(index)] = PolyPoint.from_point(vertex)

    def __delitem__(self, index: int):
        del self._vertices[self.wrap_index(index)]

    def append(self, vertex: Point):
        self._vertices.append(vertex if isinstance(vertex, PolyPoint) else PolyPoint.from_point(vertex))

    def extend(self, vertices: Iterable[Point]):
        for vertex in vertices:
            self.append(vertex)

    def insert(self, index: int, vertex: Point):
        """Insert ``vertex`` before position ``index`` (``len(self)`` appends)."""
        self._vertices.insert(index, vertex if isinstance(vertex, PolyPoint) else PolyPoint.from_point(vertex))

    def pop(self, index: int = -1) -> PolyPoint:
        return self._vertices.pop(self.wrap_index(index))

    def wrap_index(self, index: int) -> int:
        """Map any integer onto a vertex position (0 for an empty polygon)."""
        size = len(self._vertices)
        return index % size if size else 0

    ## comparison and arithmetic

    def __eq__(self, ref):
        if not isinstance(ref, Polygon):
            return NotImplemented
        return self.is_equal_3d(ref)

    def __ne__(self, ref):
        if not isinstance(ref, Polygon):
            return NotImplemented
        return not self.is_equal_3d(ref)

    __hash__ = None

    def _is_equal(self, ref, test) -> bool:
        if self.get_hole_size() != ref.get_hole_size():
            return False
        for shape, ref_shape in zip(self._shapes(), ref._shapes()):
            if shape.vert_size() != ref_shape.vert_size():
                return False
            if not all(test(vertex, ref_vertex) for vertex, ref_vertex in zip(shape, ref_shape)):
                return False
        return True

    def is_equal_2d(self, ref: "Polygon", prec: float = EPS) -> bool:
        return self._is_equal(ref, lambda vertex, ref_vertex: vertex.is_equal_2d(ref_vertex, prec))

    def is_equal_3d(self, ref: "Polygon", prec: float = EPS) -> bool:
        return self._is_equal(ref, lambda vertex, ref_vertex: vertex.is_equal_3d(ref_vertex, prec))

    def __iadd__(self, offset: Point):
        for shape in self._shapes():
            for vertex in shape:
                vertex += offset
        return self

    def __add__(self, offset: Point) -> "Polygon":
        result = self.copy()
        result += offset
        return result

    def __isub__(self, offset: Point):
        for shape in self._shapes():
            for vertex in shape:
                vertex -= offset
        return self

    def __sub__(self, offset: Point) -> "Polygon":
        result = self.copy()
        result -= offset
        return result

    def __imul__(self, mult):
        """Scale by a number, or transform by a :class:`Matrix3x3`/:class:`Matrix4x4`.

        Arc sweeps are negated when the matrix mirrors the plan.
        """
        if not isinstance(mult, (int, float, Matrix3x3, Matrix4x4)):
            return NotImplemented
        for vertex in self._vertices:
            vertex *= mult
        if isinstance(mult, (Matrix3x3, Matrix4x4)):
            origin, ref1, ref2 = Point() * mult, Point(0.0, 1.0) * mult, Point(1.0, 0.0) * mult
            equation = LinEquation.create(origin, ref1)
            if equation is not None and equation.position_of(ref2) != Side.RIGHT:
                for vertex in self._vertices:
                    vertex.sweep = -vertex.sweep
        for hole in self.get_holes():
            hole *= mult
        return self

    def __mul__(self, mult) -> "Polygon":
        result = self.copy()
        outcome = result.__imul__(mult)
        if outcome is NotImplemented:
            return NotImplemented
        return result

    def __itruediv__(self, mult: float):
        for shape in self._shapes():
            for vertex in shape:
                vertex /= mult
        return self

    def __truediv__(self, mult: float) -> "Polygon":
        result = self.copy()
        result /= mult
        return result

    ## size and ids

    def vert_size(self, is_outer: bool = True) -> int:
        """Return the number of vertices, including those of the holes unless ``is_outer``."""
        result = len(self._vertices)
        if not self.is_hole and not is_outer:
            result += sum(hole.vert_size() for hole in self.get_holes())
        return result

    def edge_size(self) -> int:
        size = len(self._vertices)
        if self.is_closed:
            return size
        return max(size - 1, 0)

    def get_top_id(self) -> int:
        return self._top_id

    def set_top_id(self, top_id: int):
        self._top_id = top_id

    def allocate_id(self) -> int:
        self._top_id += 1
        return self._top_id

    def is_valid(self, do_intersect: bool = False, prec: float = EPS) -> bool:
        """Return ``True`` if the vertices can form a polygon.

        A closed polygon needs 3 vertices, or 2 joined by at least one arc;
        an open polyline needs 2.  With ``do_intersect`` the edges must not
        cross each other either.
        """
        size = self.vert_size()
        if not self.is_closed:
            return size > 1
        if not (size > 2 or (size == 2 and (self[0].is_arc() or self[1].is_arc()))):
            return False
        if do_intersect:
            for vertex in reversed(range(size)):
                inter = XList(XInfo(Position.LATTER), XInfo(Position.WITHIN))
                self.intersection_with(_primitive(self[vertex - 1], self[vertex]), inter, prec)
                if len(inter) > 1:
                    return False
        return True

    ## holes

    def _shapes(self, with_holes: bool = True) -> List["Polygon"]:
        return [self] + self.get_holes() if with_holes else [self]

    def get_hole_size(self) -> int:
        return 0 if self._holes is None else len(self._holes)

    def get_hole(self, which: int) -> "Polygon":
        if self._holes is None or not 0 <= which < len(self._holes):
            raise IndexError("hole index {} out of range".format(which))
        return self._holes[which]

    def get_holes(self) -> List["Polygon"]:
        return [] if self._holes is None else list(self._holes)

    def get_shape(self, index: int) -> "Polygon":
        """Return the outer polygon for part 0, otherwise hole ``index - 1``."""
        return self if index == 0 else self.get_hole(index - 1)

    def insert_hole(self, hole: "Polygon") -> "Polygon":
        """Add a copy of ``hole`` and return the copy."""
        return self._emplace_hole(hole.copy())

    def _emplace_hole(self, hole: "Polygon") -> "Polygon":
        hole.is_hole = True
        hole.set_holes()
        if self._holes is None:
            self._holes = []
        self._holes.append(hole)
        return hole

    def remove_hole(self, which: int):
        self.release_hole(which)

    def release_hole(self, which: int) -> "Polygon":
        """Remove hole ``which`` and hand it to the caller."""
        hole = self.get_hole(which)
        del self._holes[which]
        if not self._holes:
            self._holes = None
        return hole

    def set_holes(self, holes: Optional[Iterable["Polygon"]] = None):
        """Replace the holes with ``holes`` (taken over, not copied); no argument removes them all."""
        self._holes = None
        for hole in holes or []:
            self._emplace_hole(hole)

    def release_holes(self) -> PolyVector:
        result = PolyVector(self.get_holes())
        self._holes = None
        return result

    def clear(self, all_vertices: bool = True, all_holes: bool = True):
        if all_vertices:
            self._vertices.clear()
            self._top_id = 0
        if all_holes:
            self._holes = None

    ## vertex lookup

    def find_vertex_by_id(self, vertex_id: int) -> Optional[VertexIndex]:
        for index in reversed(range(len(self._vertices))):
            if self._vertices[index].id == vertex_id:
                return VertexIndex(0, index, self._vertices[index])
        for hole_index in reversed(range(self.get_hole_size())):
            found = self._holes[hole_index].find_vertex_by_id(vertex_id)
            if found is not None:
                return VertexIndex(hole_index + 1, found.vertex, found.point)
        return None

    def find_vertex_by_location(self, pt: Point, prec: float = EPS) -> Optional[VertexIndex]:
        for index, vertex in enumerate(self._vertices):
            if pt.is_equal_2d(vertex, prec):
                return VertexIndex(0, index, vertex)
        for hole_index in reversed(range(self.get_hole_size())):
            found = self._holes[hole_index].find_vertex_by_location(pt, prec)
            if found is not None:
                return VertexIndex(hole_index + 1, found.vertex, found.point)
        return None

    ## measurement

    def bounds(self) -> Optional[Box]:
        """Return the plan bounds of the outer boundary, arcs included (``None`` if empty)."""
        if not self._vertices:
            return None
        result = Box(self[0], self[0])
        for vertex in range(len(self._vertices)):
            arc_bounds = None
            if self[vertex].is_arc():
                arc = Arc.from_edge(self[vertex - 1], self[vertex])
                if arc.is_valid():
                    arc_bounds = arc.bounds()
            if arc_bounds is not None:
                result.merge(arc_bounds)
            else:
                result.merge(self[vertex])
        result.sort()
        return result

    def get_direction(self) -> Optional[Rotation]:
        if not self.is_valid():
            return None
        return Rotation.ANTICLOCKWISE if self.get_area(False, True) > 0 else Rotation.CLOCKWISE

    def get_perimeter_2d(self) -> float:
        return sum(self[vertex + 1].length_from_2d(self[vertex]) for vertex in range(self.edge_size()))

    def get_perimeter_3d(self) -> float:
        return sum(PolyEdge(self[vertex], self[vertex + 1]).length_3d() for vertex in range(self.edge_size()))

    def trace_perimeter(self, length: float) -> Tuple[int, PolyPoint]:
        """Walk ``length`` along the edges from the first vertex.

        Returns the index of the last vertex passed and the point reached.
        The walk stops at the end of the perimeter.
        """
        if not self._vertices:
            return 0, PolyPoint()
        if is_less_or_equal_zero(length):
            return 0, self[0].copy()
        if is_greater_or_equal(length, self.get_perimeter_3d()):
            end = self[self.edge_size()].copy()
            return self.vert_size() - 1, end
        for index in range(self.edge_size()):
            edge = PolyEdge(self[index], self[index + 1])
            length -= edge.length_3d()
            if is_less_or_equal_zero(length):
                edge.extend(length)
                return index, edge.end
        return self.vert_size() - 1, self[self.edge_size()].copy()

    def get_area(self, is_net: bool = True, is_signed: bool = False) -> float:
        """Return the area enclosed by the outer boundary, less the holes if ``is_net``.

        A signed area is positive for an anticlockwise polygon.  Invalid
        polygons have no area.
        """
        if not self.is_valid():
            return 0.0
        result = 0.0
        for vertex in range(len(self._vertices), 0, -1):
            result += self[vertex + 1].x * (self[vertex + 2].y - self[vertex].y) / 2.0
            if self[vertex].is_arc():
                result += PolyEdge(self[vertex - 1], self[vertex]).get_area(True)
        area_sign = sgn(result)
        result = abs(result)
        if is_net:
            for hole in self.get_holes():
                result -= hole.get_area(False, False)
        if is_less_or_equal_zero(result):
            return 0.0
        return result * area_sign if is_signed else result

    def get_internal_angle_at(self, index: int) -> float:
        edge1 = PolyEdge(self[index - 1], self[index])
        edge2 = PolyEdge(self[index], self[index + 1])
        result = angle_mod(PI - edge2.start_tangent() + edge1.end_tangent())
        if self.get_direction() == Rotation.CLOCKWISE:
            result = PI2 - result
        return result

    def is_tangential_at(self, vertex: int, angle_prec: float = EPS_ANGLE) -> bool:
        """Return ``True`` if the edges meeting at ``vertex`` are tangential."""
        if not self.is_valid():
            return False
        return PolyEdge(self[vertex], self[vertex + 1]).is_tangential_to_2d(
            PolyEdge(self[vertex - 1], self[vertex]), EPS, angle_prec)

    ## classification

    def is_reflection(self, index: int, ref: LinEquation, prec: float = EPS) -> bool:
        """Return ``True`` if the boundary touches ``ref`` at vertex ``index`` without crossing it.

        Runs of straight edges lying along ``ref`` are skipped, so a
        boundary that runs along the line and then turns back is a
        reflection too.
        """
        index = self.wrap_index(index)
        if ref.position_of(self[index], prec) != Side.ALONG:
            return False
        size = self.vert_size()
        prev = index + size - 1
        while prev > index:
            if not is_zero(self[prev + 1].sweep, prec) or ref.position_of(self[prev], prec) != Side.ALONG:
                break
            prev -= 1
        if prev == index:
            return True
        nxt = index - size + 1
        while nxt != index:
            if not is_zero(self[nxt].sweep, prec) or ref.position_of(self[nxt], prec) != Side.ALONG:
                break
            nxt += 1
        if self.wrap_index(nxt) == self.wrap_index(prev):
            return True
        next_offset, prev_offset = _vertex_offsets(self, nxt, prev, ref, prec)
        return ref.position_of(prev_offset, prec) == ref.position_of(next_offset, prec)

    def position_of(self, ref: Point, prec: float = EPS) -> Region:
        """Classify ``ref`` as inside, outside or along the boundary (holes included).

        The parity test casts a ray in the direction furthest from every
        edge direction, and ignores crossings where the boundary only
        touches the ray.
        """
        bounds = self.bounds()
        if bounds is None:
            return Region.UNDEFINED
        if bounds.position_of_2d(ref, prec) == Region.OUTSIDE:
            return Region.OUTSIDE
        edge_angles = []
        for shape in self._shapes():
            for vertex in reversed(range(shape.vert_size())):
                edge = PolyEdge(shape[vertex - 1], shape[vertex])
                if edge.position_of_2d(ref, prec) & Position.WITHIN:
                    return Region.ALONG
                if not edge.is_arc():
                    edge_angles.append(math.fmod(angle_mod(edge.azimuth_angle()), PI))
        ref_angle = 0.0
        if edge_angles:
            edge_angles.append(PI)
            edge_angles.sort()
            prev_angle = max_gap = 0.0
            for angle in edge_angles:
                if is_greater(angle - prev_angle, max_gap):
                    max_gap = angle - prev_angle
                    ref_angle = prev_angle + max_gap / 2
                prev_angle = angle
        ray = Line(ref, ref.as_point().move_polar(2 * bounds.origin.length_from_2d(bounds.end), ref_angle))
        inter = XList(XInfo(Position.WITHIN), XInfo(Position.WITHIN))
        self.intersection_with(ray, inter, prec)
        ## a crossing at a vertex is found on both edges
        inter.remove_duplicates(prec)
        ray_equation = LinEquation.create(ray.origin, ray.end)
        total = 0
        for pt in inter:
            if pt.get_pos(Role.BLADE) == Position.ORIGIN:
                return Region.ALONG
            if pt.get_pos(Role.TARGET) & Position.VERTEX:
                shape = self.get_shape(pt.get_part(Role.TARGET) or 0)
                inc = -1 if pt.get_pos(Role.TARGET) == Position.ORIGIN else 0
                if ray_equation is not None and \
                        shape.is_reflection((pt.get_vertex(Role.TARGET) or 0) + inc, ray_equation):
                    continue
            total += 1
        return Region.OUTSIDE if total % 2 == 0 else Region.INSIDE

    def encloses(self, ref, prec: float = EPS) -> bool:
        """Return ``True`` if the point or polygon ``ref`` lies inside or along this polygon."""
        if isinstance(ref, Polygon):
            return self._encloses_polygon(ref, prec)
        return self.position_of(ref, prec) in (Region.INSIDE, Region.ALONG)

    def _encloses_polygon(self, ref: "Polygon", prec: float) -> bool:
        bounds, ref_bounds = self.bounds(), ref.bounds()
        if bounds is None or ref_bounds is None or not bounds.encloses_2d(ref_bounds, prec):
            return False
        for shape in ref._shapes():
            if not all(self.encloses(vertex, prec) for vertex in shape):
                return False
        for shape in self._shapes():
            if any(ref.position_of(vertex, prec) == Region.INSIDE for vertex in shape):
                return False
        target, blade = self.copy(), ref.copy()
        target.renumber()
        blade.renumber()
        inter = XList(XInfo(Position.WITHIN), XInfo(Position.WITHIN))
        is_touching = _intersect_poly_with_poly(target, blade, inter, prec)
        is_inside = False
        for shape in blade._shapes():
            for vertex in range(shape.vert_size()):
                where = self.position_of(PolyEdge(shape[vertex - 1], shape[vertex]).midpoint(), prec)
                if where == Region.OUTSIDE:
                    return False
                if where == Region.INSIDE:
                    is_inside = True
        if is_inside:
            return True
        if not is_touching:
            return False
        return all(ref.position_of(PolyEdge(target[vertex - 1], target[vertex]).midpoint(), prec) != Region.OUTSIDE
                   for vertex in range(target.vert_size()))

    def overlaps(self, ref: "Polygon", prec: float = EPS) -> bool:
        """Return ``True`` if the polygons share any area (touching alone does not count)."""
        bounds, ref_bounds = self.bounds(), ref.bounds()
        if bounds is None or ref_bounds is None or not bounds.overlaps_2d(ref_bounds, prec):
            return False
        for shape in ref._shapes():
            if any(self.position_of(vertex, prec) == Region.INSIDE for vertex in shape):
                return True
        for shape in self._shapes():
            if any(ref.position_of(vertex, prec) == Region.INSIDE for vertex in shape):
                return True
        target, blade = self.copy(), ref.copy()
        target.renumber()
        blade.renumber()
        inter = XList(XInfo(Position.WITHIN), XInfo(Position.WITHIN))
        is_touching = _intersect_poly_with_poly(target, blade, inter, prec)
        if not inter.empty():
            return True
        is_along = True
        for poly, other in ((target, blade), (blade, target)):
            for shape in other._shapes():
                for vertex in range(shape.vert_size()):
                    where = poly.position_of(PolyEdge(shape[vertex - 1], shape[vertex]).midpoint(), prec)
                    if where == Region.INSIDE:
                        return True
                    if where == Region.OUTSIDE:
                        is_along = False
        return is_along and is_touching

    def crosses(self, ref: Line, prec: float = EPS) -> bool:
        """Return ``True`` if some part of the line ``ref`` passes through the interior."""
        inter = XList(XInfo(Position.WITHIN), XInfo(Position.WITHIN))
        self.intersection_with(ref, inter, prec)
        inter.insert(XPoint(ref.origin, Position.ALONG, Position.ORIGIN))
        inter.insert(XPoint(ref.end, Position.ALONG, Position.END))
        inter.sort(compare_position(prec))
        start = inter[0].as_point()
        for pt in list(inter)[1:]:
            pt = pt.as_point()
            if not start.is_equal_2d(pt, prec) and self.position_of((start + pt) / 2.0) == Region.INSIDE:
                return True
            start = pt
        return False

    def get_internal_point(self) -> Optional[Point]:
        """Return some point strictly inside the polygon (``None`` if one can't be found)."""
        bounds = self.bounds()
        if bounds is None:
            return None
        inter = XList(XInfo(Position.FORMER), XInfo(Position.WITHIN))
        centre_line = PolyEdge(bounds.get_anchor_2d(Anchor2D.LEFT_HALF), bounds.get_anchor_2d(Anchor2D.RIGHT_HALF))
        if self.intersection_with(centre_line, inter) < 2:
            return None
        inter.sort(along_length_of(centre_line))
        previous = None
        for pt in inter:
            if previous is not None:
                midpoint = (previous + pt.as_point()) / 2.0
                if self.position_of(midpoint) == Region.INSIDE:
                    return midpoint
            previous = pt.as_point()
        return None

    def closest_point_along_2d(self, ref: Point, with_holes: bool = True, prec: float = EPS) -> XPoint:
        """Return the point on the boundary nearest ``ref`` in plan.

        The target info of the result records the edge (by its end vertex
        index), the part, and whether the point is at the edge origin, end
        or along it.  An empty result is returned for fewer than 2 vertices.
        """
        return self._closest_point_along(ref, with_holes, prec, False)

    def closest_point_along_3d(self, ref: Point, with_holes: bool = True, prec: float = EPS) -> XPoint:
        return self._closest_point_along(ref, with_holes, prec, True)

    def _closest_point_along(self, ref, with_holes, prec, is_3d) -> XPoint:
        if self.vert_size() < 2:
            return XPoint()
        result = XPoint(self[0], Position.ORIGIN)
        result.set_vertex(Role.TARGET, 1)
        result.set_part(Role.TARGET, 0)
        origin = ref.as_point()
        distance = origin.length_from_3d if is_3d else origin.length_from_2d
        is_equal = (lambda pt1, pt2: pt1.is_equal_3d(pt2, prec)) if is_3d else \
            (lambda pt1, pt2: pt1.is_equal_2d(pt2, prec))
        best = distance(result)
        for part, shape in enumerate(self._shapes(with_holes)):
            for vertex in range(shape.edge_size()):
                edge = PolyEdge(shape[vertex], shape[vertex + 1])
                test = edge.closest_point_along_3d(ref, prec) if is_3d else edge.closest_point_along_2d(ref, prec)
                length = distance(test)
                if length < best:
                    best = length
                    if is_equal(test, edge.origin):
                        pos = Position.ORIGIN
                    elif is_equal(test, edge.end):
                        pos = Position.END
                    else:
                        pos = Position.ALONG
                    result = XPoint(test, pos)
                    result.set_vertex(Role.TARGET, shape.wrap_index(vertex + 1))
                    result.set_part(Role.TARGET, part)
        return result

    ## intersection

    def intersection_with(self, ref, inter: XList, prec: float = EPS) -> int:
        """Collect the intersections of the boundary (holes included) with ``ref`` into ``inter``.

        ``ref`` may be a :class:`Line`, :class:`Arc`, :class:`PolyEdge` or
        another polygon.  This polygon is the target: each point records the
        end vertex index of the target edge and its part, offset by the
        part already set in the target filter.  Returns the number of points
        accepted.
        """
        if isinstance(ref, Polygon):
            return self._intersect_polygon(ref, inter, prec)
        if isinstance(ref, PolyEdge):
            arc = ref.as_arc(prec)
            ref = arc if arc is not None else ref.as_line()
        if self.vert_size() < 2:
            return 0
        total = 0
        base = inter.get_filter(Role.TARGET).part_index or 0
        inter.set_part(Role.TARGET, base)
        for vertex in reversed(range(self.edge_size())):
            inter.set_vertex(Role.TARGET, self.wrap_index(vertex + 1))
            total += _primitive(self[vertex], self[vertex + 1]).intersection_with_2d(ref, inter, prec)
        for hole_index in reversed(range(self.get_hole_size())):
            inter.set_part(Role.TARGET, base + hole_index + 1)
            total += self._holes[hole_index].intersection_with(ref, inter, prec)
        inter.set_part(Role.TARGET, base)
        return total

    def _intersect_polygon(self, ref: "Polygon", inter: XList, prec: float) -> int:
        if self.vert_size() < 2 or ref.vert_size() < 2:
            return 0
        total = 0
        base = inter.get_filter(Role.TARGET).part_index or 0
        inter.set_part(Role.TARGET, base)
        ## each of our edges is a blade cutting the reference polygon
        inter.swap_filters()
        try:
            for vertex in reversed(range(self.edge_size())):
                inter.set_vertex(Role.BLADE, self.wrap_index(vertex + 1))
                inter.set_part(Role.TARGET, 0)
                total += ref.intersection_with(_primitive(self[vertex], self[vertex + 1]), inter, prec)
        finally:
            inter.swap_filters()
        for hole_index in reversed(range(self.get_hole_size())):
            inter.set_part(Role.TARGET, base + hole_index + 1)
            total += self._holes[hole_index]._intersect_polygon(ref, inter, prec)
        inter.set_part(Role.TARGET, base)
        return total

    ## splitting

    def split_with(self, ref, prec: float = EPS) -> Tuple[PolyVector, PolyVector]:
        """Split by a line or another polygon.

        For a :class:`LinEquation` or :class:`Line` (treated as infinite)
        the result is ``(right, left)``: the pieces to the right and left
        of the line.  For a polygon it is ``(inside, outside)``: the pieces
        within the net area of ``ref`` and those outside it.

        Raises :class:`ValueError` for a zero-length line.
        """
        if isinstance(ref, Polygon):
            return self._split_with_polygon(ref, prec)
        if isinstance(ref, Line):
            equation = LinEquation.create(ref.origin, ref.end)
            if equation is None:
                raise ValueError("cannot split with a zero-length line")
            ref = equation
        return self._split_with_line(ref, prec)

    def _split_with_line(self, ref: LinEquation, prec: float) -> Tuple[PolyVector, PolyVector]:
        right, left = PolyVector(), PolyVector()
        target = self.copy()
        angle = ref.azimuth_angle()
        orig = ref.closest_point_to(Point())
        blade = Line(orig, orig + Point(math.cos(angle), math.sin(angle)))
        target.set_direction(Rotation.CLOCKWISE, with_holes=False)
        for hole in target.get_holes():
            hole.set_direction(Rotation.ANTICLOCKWISE)
        target.renumber()
        ## the blade filter accepts anything, so the line is unbounded
        inter = XList(XInfo(Position.WITHIN), XInfo())
        target.intersection_with(blade, inter, prec)
        _ids_for_indices(inter, target, Role.TARGET)
        inter.remove_duplicates(prec)
        _add_nodes(inter, target, Role.TARGET, prec)
        _discard_reflections(inter, lambda pt: _is_line_reflection(target, ref, pt, prec))
        if inter.empty():
            where = Side.UNDEFINED
            for vertex in self:
                where = ref.position_of(vertex)
                if where in (Side.LEFT, Side.RIGHT):
                    break
            (left if where == Side.LEFT else right).append(self.copy())
            return right, left
        my_holes = [self.get_hole(hole_index).copy() for hole_index in reversed(range(self.get_hole_size()))
                    if not any(pt.get_part(Role.TARGET) == hole_index + 1 for pt in inter)]
        inter.sort(compare_position(prec))
        base_poly = self.copy()
        base_poly.clear()
        cos_angle, sin_angle = math.cos(angle), math.sin(angle)
        if is_greater_zero(cos_angle) or (is_zero(cos_angle) and is_greater_zero(sin_angle)):
            direct = Side.LEFT
        else:
            direct = Side.RIGHT
        limit = 2 * len(inter) + 2
        while True:
            start, usage = None, Side.UNDEFINED
            for pt in inter:
                vertex_id, part = pt.get_vertex(Role.TARGET), pt.get_part(Role.TARGET)
                if vertex_id is None or part is None:
                    continue
                index = target.get_shape(part).find_vertex_by_id(vertex_id)
                if index is None:
                    continue
                shape = target.get_shape(part).get_shape(index.part)
                usage = ref.position_of(_edge_midpoint(shape, index.vertex), prec / 10)
                ## the outgoing edge runs along the line, so look at the incoming one
                if usage == Side.ALONG:
                    is_left = ref.position_of(_edge_midpoint(shape, index.vertex, -1), prec / 10) == Side.LEFT
                    usage = Side.RIGHT if is_left else Side.LEFT
                start = pt
                break
            if start is None:
                break
            poly = base_poly.copy()
            poly.append(PolyPoint.from_point(start, 0.0, 0))
            next_pt = start
            for _ in range(limit):
                next_pt.set_vertex(Role.TARGET, None)
                closed, found = _travel_line(target, next_pt, 1, poly, inter, prec)
                if closed:
                    break
                position = inter.index(found)
                if usage == direct:
                    if position == 0:
                        break
                    position -= 1
                else:
                    position += 1
                    if position == len(inter):
                        break
                next_pt = inter[position]
                if next_pt.is_equal_2d(poly[0], prec):
                    break
                if not poly.insert_unique_vertex(PolyPoint.from_point(next_pt, 0.0, 0)):
                    break
            if not poly.is_valid():
                continue
            _insert_holes(poly, my_holes, prec)
            poly.renumber()
            (left if usage == Side.LEFT else right).append(poly)
            logger.debug("split emitted a polygon of %d vertices %s of the line", poly.vert_size(),
                         "left" if usage == Side.LEFT else "right")
        return right, left

    def _split_with_polygon(self, ref: "Polygon", prec: float) -> Tuple[PolyVector, PolyVector]:
        outside = PolyVector()
        offcuts = PolyVector()
        _split_poly_with_poly(self.copy(), ref.clone_geometry(), offcuts, outside, prec)
        ## pieces inside the blade are cut again by each of its holes
        for hole in reversed(ref.get_holes()):
            hole_offcuts = PolyVector()
            for poly in offcuts:
                _split_poly_with_poly(poly, hole.clone_geometry(), outside, hole_offcuts, prec)
            offcuts = hole_offcuts
        return offcuts, outside

    def resolve_self_intersect(self, prec: float = EPS) -> PolyVector:
        """Return the simple polygons this self-crossing polygon resolves into.

        An empty list means the boundary does not cross itself.  Pieces
        with no measurable area are dropped, and any holes are resolved in
        turn and cut out of the pieces.
        """
        result = PolyVector()
        unchecked = PolyVector()
        if not _resolve_poly_intersect(self, unchecked, prec):
            return result
        resolved = PolyVector()
        for _ in range(self.vert_size()):
            if not unchecked:
                break
            processed = PolyVector()
            for poly in unchecked:
                if not _resolve_poly_intersect(poly, processed, prec):
                    resolved.append(poly)
            unchecked = processed
        if unchecked:
            logger.debug("gave up resolving self-intersection after %d passes; dropped %d piece(s)",
                         self.vert_size(), len(unchecked))
        total_area = 0.0
        incoming = PolyVector()
        for poly in resolved:
            area = poly.get_area()
            if not is_zero(area, 10 * prec):
                incoming.append(poly)
                total_area += area
        resolved_holes = PolyVector()
        for hole in self.get_holes():
            pieces = hole.resolve_self_intersect(prec)
            resolved_holes.extend(pieces if pieces else [hole.copy()])
        for hole in resolved_holes:
            hole_area = hole.get_area()
            if is_zero(hole_area, 10 * prec) or not is_less_or_equal(hole_area, total_area):
                continue
            outgoing = PolyVector()
            for outer in incoming:
                outgoing.extend(outer.split_with(hole, prec)[1])
            incoming = outgoing
        for poly in incoming:
            poly.renumber()
        result.extend(incoming)
        return result

    ## editing

    def add_node_along(self, vertex_id: int, pos: Point, prec: float = EPS, part: int = 0) -> int:
        """Insert a vertex at ``pos`` on the edge it lies along and return its id.

        The search runs backwards from the vertex with id ``vertex_id``
        (from the start of shape ``part`` for 0) and stays in the shape
        holding that vertex, so a hole can be edited through its owner.
        If ``pos`` is already at a vertex, that vertex's id is returned; 0
        means ``pos`` is not on the boundary.  Arc edges are divided into
        two arcs on the same circle.

        New ids always come from this polygon's counter, which its holes
        share.
        """
        shape, vert = self.get_shape(part), 0
        if vertex_id != 0:
            index = self.find_vertex_by_id(vertex_id)
            if index is not None:
                shape, vert = self.get_shape(index.part), index.vertex
        size = len(shape._vertices)
        if size == 0:
            return 0
        where, orig, orig_pos = Position.UNDEFINED, None, Position.UNDEFINED
        edge = vert + size
        while edge != vert:
            if shape.is_closed or shape.wrap_index(edge) != 0:
                where = _primitive(shape[edge - 1], shape[edge]).position_of_2d(pos, prec)
                if where == Position.ALONG:
                    break
                if orig is None and where in (Position.END, Position.ORIGIN):
                    orig, orig_pos = edge, where
            edge -= 1
        if where != Position.ALONG:
            if orig is None:
                return 0
            return shape[orig - 1].id if orig_pos == Position.ORIGIN else shape[orig].id
        vert = shape.wrap_index(edge)
        node = shape[vert].copy()
        node.x, node.y, node.z = pos.x, pos.y, pos.z
        node.id = self.allocate_id()
        for member in self._shapes():
            member._top_id = self._top_id
        if node.is_arc():
            arc = Arc.from_edge(shape[vert - 1], shape[vert])
            new_arc = Arc.from_points(arc.centre, arc.get_origin(), pos, arc.sweep < 0)
            node.sweep = new_arc.sweep
            shape[vert].sweep = arc.sweep - new_arc.sweep
        shape._vertices.insert(vert, node)
        return node.id

    def insert_unique_vertex(self, pt: Point, where: Optional[int] = None) -> bool:
        """Insert ``pt`` unless a vertex is already there; ``where`` defaults to the end."""
        if self.find_vertex_by_location(pt) is not None:
            return False
        vertex = pt if isinstance(pt, PolyPoint) else PolyPoint.from_point(pt)
        if where is None:
            self._vertices.append(vertex)
        else:
            self._vertices.insert(self.wrap_index(where), vertex)
        return True

    def set_direction(self, direct: Rotation = Rotation.CLOCKWISE, with_holes: bool = True,
                      invert_hole_dir: bool = False):
        """Reverse the outer boundary (and the holes) as needed to run in direction ``direct``.

        With ``invert_hole_dir`` the holes are set to run the other way.
        """
        for part, shape in enumerate(self._shapes(with_holes)):
            wanted = direct
            if part > 0 and invert_hole_dir:
                wanted = Rotation.ANTICLOCKWISE if direct == Rotation.CLOCKWISE else Rotation.CLOCKWISE
            current = shape.get_direction()
            if current is not None and current != wanted:
                shape.reverse()

    def reverse(self):
        """Reverse the vertex order, moving and negating the sweeps so every arc keeps its shape."""
        if len(self._vertices) < 2:
            return
        self._vertices.reverse()
        sweeps = [vertex.sweep for vertex in self._vertices]
        for index, sweep in enumerate(sweeps):
            self[index + 1].sweep = -sweep

    def _remove_duplicates(self, is_equal) -> bool:
        is_removed = False
        for shape in self._shapes():
            if not shape._vertices:
                continue
            previous = shape._vertices[-1].as_point()
            kept = []
            for vertex in shape._vertices:
                if is_equal(vertex, previous):
                    is_removed = True
                else:
                    previous = vertex.as_point()
                    kept.append(vertex)
            shape._vertices = kept
        return is_removed

    def remove_duplicates_2d(self, prec: float = EPS) -> bool:
        """Remove vertices coinciding in plan with the vertex before them; returns ``True`` if any went."""
        return self._remove_duplicates(lambda vertex, previous: vertex.is_equal_2d(previous, prec))

    def remove_duplicates_3d(self, prec: float = EPS) -> bool:
        return self._remove_duplicates(lambda vertex, previous: vertex.is_equal_3d(previous, prec))

    def optimise(self, do_colinear: bool = False, prec: float = EPS):
        """Remove duplicate vertices, and with ``do_colinear`` vertices between colinear edges."""
        if not self._vertices:
            return
        previous = self[-1].as_point()
        vertex = 0
        while vertex < len(self._vertices):
            this_point = self[vertex]
            is_erased = this_point.is_equal_2d(previous, prec)
            next_point = self[vertex + 1]
            if not is_erased and do_colinear and \
                    PolyEdge(previous, this_point).is_colinear_to_2d(PolyEdge(this_point, next_point), prec):
                is_erased = True
                next_point.sweep += this_point.sweep
            if is_erased:
                del self._vertices[vertex]
            else:
                previous = this_point.as_point()
                vertex += 1

    def renumber(self, restart: bool = False):
        """Give every vertex (holes included) a unique non-zero id.

        Existing unique ids are kept unless ``restart``; duplicates and 0
        get newly allocated ids.
        """
        shapes = self._shapes()
        self._top_id = max((vertex.id for shape in shapes for vertex in shape), default=0)
        used = {0}
        for shape in shapes:
            for vertex in reversed(shape._vertices):
                if restart or vertex.id in used:
                    vertex.id = self.allocate_id()
                else:
                    used.add(vertex.id)
        for shape in shapes:
            shape._top_id = self._top_id

    def facet(self, toler: float = 0.002):
        """Replace every arc edge with straight edges no further than ``toler`` from the arc."""
        for shape in self._shapes():
            for vertex in reversed(range(shape.edge_size())):
                end = shape[vertex + 1]
                if not end.is_arc():
                    continue
                faceter = Faceter(shape[vertex], end, True, False, toler)
                end.sweep = 0.0
                new_pos = vertex + 1
                while not faceter.is_at_end():
                    faceter.next()
                    shape._vertices.insert(new_pos, PolyPoint.from_point(faceter.get_vertex(), 0.0, 0))
                    new_pos += 1

    def set_base_level(self, z: float):
        for shape in self._shapes():
            for vertex in shape:
                vertex.z = z

    def align_to(self, plane):
        """Move every vertex vertically onto ``plane``."""
        for shape in self._shapes():
            for vertex in shape:
                vertex.z = plane.height_at(vertex)
