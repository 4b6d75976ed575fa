## intersection point lists for polykernel

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

"""Intersection points and the filtered lists that collect them.

An intersection is always between two components, each playing a *role*:
the target (the component being cut or classified) and the blade (the
component doing the cutting).  Every :class:`XPoint` carries one
:class:`XInfo` per role recording where the point lies on that component
and which polygon vertex/part the component came from.

An :class:`XList` holds a filter per role.  Intersection routines consult
:meth:`XList.is_pos` to decide which classifications they need to compute
and the list rejects points whose classification does not match a
role's filter mask.  A routine that plays the opposite role to its caller
(for example an arc computing intersections with a polygon's straight
edge) brackets the call with :meth:`XList.swap_filters`; while swapped the
role accessors are seen from the callee's side and :meth:`XList.insert`
maps the incoming point back to the caller's roles.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, List, Optional

from polykernel.point import Point
from polykernel.position import Position
from polykernel.tolerance import EPS, is_equal, is_less

__all__ = [
    "Role",
    "XInfo",
    "XPoint",
    "XList",
    "compare_position",
    "along_length_of",
    "create_intersect",
]


class Role(IntEnum):
    TARGET = 0
    BLADE = 1


def _other(role: Role) -> Role:
    return Role.BLADE if role == Role.TARGET else Role.TARGET


@dataclass
class XInfo:
    """Relationship of an intersection point to one of the intersecting components.

    ``vertex_index`` identifies the polygon vertex at the end of the
    intersecting edge and ``part_index`` the polygon boundary it belongs
    to (0 for the outer boundary, ``k`` for hole ``k - 1``).
    """

    pos: Position = Position.UNDEFINED
    vertex_index: Optional[int] = None
    part_index: Optional[int] = None

    def copy(self) -> "XInfo":
        return XInfo(self.pos, self.vertex_index, self.part_index)


class XPoint(Point):
    """An intersection point with per-role :class:`XInfo`."""

    __slots__ = ("info",)

    def __init__(self, source: Optional[Point] = None, target_pos: Position = Position.UNDEFINED,
                 blade_pos: Position = Position.UNDEFINED):
        if source is None:
            super().__init__()
        else:
            super().__init__(source.x, source.y, source.z)
        self.info = [XInfo(target_pos), XInfo(blade_pos)]

    def __copy__(self):
        result = XPoint(self)
        result.info = [info.copy() for info in self.info]
        return result

    def __repr__(self):
        return "XPoint({}, {}, {}, target={!r}, blade={!r})".format(self.x, self.y, self.z, *self.info)

    def get_info(self, role: Role) -> XInfo:
        return self.info[role]

    def set_info(self, role: Role, info: XInfo):
        self.info[role] = info.copy()

    def get_pos(self, role: Role) -> Position:
        return self.info[role].pos

    def set_pos(self, role: Role, pos: Position):
        self.info[role].pos = pos

    def get_vertex(self, role: Role) -> Optional[int]:
        return self.info[role].vertex_index

    def set_vertex(self, role: Role, vertex_index: Optional[int]):
        self.info[role].vertex_index = vertex_index

    def get_part(self, role: Role) -> Optional[int]:
        return self.info[role].part_index

    def set_part(self, role: Role, part_index: Optional[int]):
        self.info[role].part_index = part_index

    def swap_intercept(self):
        self.info.reverse()


class XList:
    """An insertion-ordered collection of :class:`XPoint` accepted through per-role filters."""

    def __init__(self, target_filter: Optional[XInfo] = None, blade_filter: Optional[XInfo] = None):
        self._points: List[XPoint] = []
        self._filter = [XInfo() if target_filter is None else target_filter.copy(),
                        XInfo() if blade_filter is None else blade_filter.copy()]
        self._is_swapped = False

    def __repr__(self):
        return "XList({!r})".format(self._points)

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(list(self._points))

    def __getitem__(self, index) -> XPoint:
        return self._points[index]

    def empty(self) -> bool:
        return not self._points

    def front(self) -> Optional[XPoint]:
        return self._points[0] if self._points else None

    def back(self) -> Optional[XPoint]:
        return self._points[-1] if self._points else None

    def index(self, pt: XPoint) -> int:
        """Return the position of ``pt`` (compared by identity) in the list."""
        for i, item in enumerate(self._points):
            if item is pt:
                return i
        raise ValueError('point is not in the intersection list')

    ## filters

    def _slot(self, role: Role) -> Role:
        return _other(role) if self._is_swapped else role

    def slot(self, role: Role) -> Role:
        """Return the role under which inserted points record data for ``role`` in the current swap state."""
        return self._slot(role)

    def get_filter(self, role: Role) -> XInfo:
        return self._filter[self._slot(role)]

    def set_filter(self, role: Role, info: XInfo):
        self._filter[self._slot(role)] = info.copy()

    def set_vertex(self, role: Role, vertex_index: Optional[int]):
        self._filter[self._slot(role)].vertex_index = vertex_index

    def set_part(self, role: Role, part_index: Optional[int]):
        self._filter[self._slot(role)].part_index = part_index

    def add_pos(self, role: Role, pos: Position):
        info = self._filter[self._slot(role)]
        info.pos = info.pos | pos

    def is_pos(self, role: Role) -> bool:
        """Return ``True`` if points are filtered on their position relative to the ``role`` component."""
        return self._filter[self._slot(role)].pos != Position.UNDEFINED

    def with_pos(self, role: Role, pos: Position) -> bool:
        """Return ``True`` if the list accepts points at ``pos`` relative to the ``role`` component."""
        return self._accepts(self._slot(role), pos)

    def _accepts(self, slot, pos):
        mask = self._filter[slot].pos
        return mask == Position.UNDEFINED or (mask & pos) != Position.UNDEFINED

    def swap_filters(self):
        self._is_swapped = not self._is_swapped

    ## contents

    def insert(self, pt: XPoint) -> Optional[XPoint]:
        """Stamp ``pt`` with the current vertex/part indices and add it if the filters accept it.

        Returns the inserted point, or ``None`` if it was rejected.
        """
        for role in Role:
            pt.set_vertex(role, self._filter[role].vertex_index)
            pt.set_part(role, self._filter[role].part_index)
        if self._is_swapped:
            target_pos = pt.get_pos(Role.TARGET)
            pt.set_pos(Role.TARGET, pt.get_pos(Role.BLADE))
            pt.set_pos(Role.BLADE, target_pos)
        if self._accepts(Role.TARGET, pt.get_pos(Role.TARGET)) and \
                self._accepts(Role.BLADE, pt.get_pos(Role.BLADE)):
            self._points.append(pt)
            return pt
        return None

    def erase(self, pt: XPoint):
        del self._points[self.index(pt)]

    def release(self, pt: XPoint) -> XPoint:
        """Remove ``pt`` from the list and hand it to the caller."""
        return self._points.pop(self.index(pt))

    def clear(self):
        self._points.clear()

    def remove_duplicates(self, prec: float = EPS):
        """Drop points coinciding (in 2D) with a later point from the same target and blade parts."""
        result = []
        for i, pt in enumerate(self._points):
            if not any(pt.get_part(Role.BLADE) == later.get_part(Role.BLADE) and
                       pt.get_part(Role.TARGET) == later.get_part(Role.TARGET) and
                       pt.is_equal_2d(later, prec) for later in self._points[i + 1:]):
                result.append(pt)
        self._points = result

    def sort(self, comparator: Callable[[XPoint, XPoint], int]):
        """Stable sort using a three-way ``comparator`` such as :func:`compare_position`."""
        self._points.sort(key=functools.cmp_to_key(comparator))

    def reverse(self):
        self._points.reverse()


def compare_position(prec: float = EPS) -> Callable[[Point, Point], int]:
    """Return a comparator ordering points by x then y."""

    def _compare(pos1, pos2):
        if is_less(pos1.x, pos2.x, prec) or (is_equal(pos1.x, pos2.x, prec) and is_less(pos1.y, pos2.y, prec)):
            return -1
        if is_less(pos2.x, pos1.x, prec) or (is_equal(pos1.x, pos2.x, prec) and is_less(pos2.y, pos1.y, prec)):
            return 1
        return 0

    return _compare


def along_length_of(edge) -> Callable[[Point, Point], int]:
    """Return a comparator ordering points by their distance along ``edge`` from its origin.

    The distance to each point is measured along an edge of the same
    curvature as ``edge``, so points on an arc edge sort by arc length.
    """
    from polykernel.polyedge import PolyEdge
    from polykernel.position import Rotation

    origin = edge.origin.as_point()
    radius = edge.get_radius(True)
    rotation = Rotation.CLOCKWISE if edge.end.sweep < 0.0 else Rotation.ANTICLOCKWISE

    def _length(pt):
        return PolyEdge.from_radius(origin, pt, radius, rotation).length_2d()

    def _compare(pos1, pos2):
        len1, len2 = _length(pos1), _length(pos2)
        return (len1 > len2) - (len1 < len2)

    return _compare


def create_intersect(pt: Point, inter: XList, classify_target: Callable[[Point], Position],
                     classify_blade: Callable[[Point], Position]) -> Optional[XPoint]:
    """Classify ``pt`` against both components (as far as the filters need) and submit it to ``inter``."""
    target_pos = classify_target(pt) if inter.is_pos(Role.TARGET) else Position.UNDEFINED
    blade_pos = classify_blade(pt) if inter.is_pos(Role.BLADE) else Position.UNDEFINED
    return inter.insert(XPoint(pt, target_pos, blade_pos))

