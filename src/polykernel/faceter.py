## edge tessellation for polykernel

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

"""Tessellation of polygon edges into straight segments.

A :class:`Faceter` walks either an arc edge, in angular steps chosen so
that no chord strays further than a tolerance from the arc, or a straight
edge in steps of fixed length.  Steps on an arc are aligned to multiples
of the angular increment, so adjacent arcs on the same circle share
vertices.
"""

from __future__ import annotations

import math

from polykernel.arc import Arc
from polykernel.point import Point
from polykernel.polyedge import PolyEdge
from polykernel.polypoint import PolyPoint
from polykernel.tolerance import PI2, fmod_prec, is_less_or_equal, is_zero, round_down, round_to

__all__ = ["Faceter"]


class Faceter:
    """Step through the facet vertices of the edge from ``origin`` to ``end``.

    ``is_start``/``is_end`` decide whether the arc's own start and end
    points are part of the walk.  ``toler`` is the largest distance
    allowed between a chord and the arc.  Use :meth:`along` for the
    fixed-step walk over a straight edge.
    """

    def __init__(self, origin: Point, end: PolyPoint, is_start: bool = False, is_end: bool = True,
                 toler: float = 0.002):
        self._arc = Arc.from_edge(origin, end)
        self._edge = None
        self._step = 0.0
        self._remainder = 0.0
        self._inc_angle = 0.0
        self._current_step = self._start_step = self._end_step = 0
        arc = self._arc
        if not arc.is_valid() or is_less_or_equal(arc.radius, 2.0 * toler):
            return
        self._inc_angle = 2.0 * math.acos(arc.radius / (arc.radius + toler))
        start_angle, end_angle = arc.start_angle, arc.get_end_angle()
        is_reverse = arc.sweep < 0.0
        if is_reverse:
            is_start, is_end = is_end, is_start
            start_angle, end_angle = end_angle, start_angle
        arc_steps = int(PI2 / self._inc_angle)
        if not is_zero(math.fmod(PI2, self._inc_angle)):
            arc_steps += 1
            self._inc_angle = PI2 / arc_steps
        if end_angle < start_angle:
            end_angle += PI2
        self._start_step = math.floor(round_to(start_angle / self._inc_angle))
        if not is_start:
            self._start_step += 1
            start_angle = self._inc_angle * self._start_step
        self._end_step = math.floor(round_to(end_angle / self._inc_angle))
        at_angle = is_zero(fmod_prec(end_angle, self._inc_angle))
        if not is_end:
            if at_angle:
                self._end_step -= 1
            end_angle = self._inc_angle * self._end_step
        elif not at_angle:
            self._end_step += 1
        if start_angle > end_angle:
            start_angle = end_angle
        if self._end_step < self._start_step:
            self._end_step = self._start_step
        if is_reverse:
            start_angle, end_angle = end_angle, start_angle
            self._start_step, self._end_step = self._end_step, self._start_step
        arc.start_angle = start_angle
        arc.sweep = end_angle - start_angle

    @classmethod
    def along(cls, origin: Point, end: PolyPoint, step: float) -> "Faceter":
        """Return a walk along the edge from ``origin`` to ``end`` in steps of ``step``.

        The final step lands on ``end``; its length is :meth:`get_remainder`
        unless the edge is an exact multiple of ``step``.
        """
        result = cls.__new__(cls)
        result._arc = None
        result._edge = PolyEdge(origin, end)
        result._step = abs(step)
        result._inc_angle = 0.0
        result._current_step = result._start_step = result._end_step = 0
        result._remainder = 0.0
        if not is_zero(result._step):
            length = result._edge.length_3d()
            result._remainder = fmod_prec(length, result._step)
            result._end_step = int(round_down(length / result._step, 1.0))
            if not is_zero(result._remainder):
                result._end_step += 1
        return result

    def __repr__(self):
        return "Faceter(step={} of {}..{})".format(self._current_step, self._start_step, self._end_step)

    def copy(self) -> "Faceter":
        result = Faceter.__new__(Faceter)
        result.__dict__.update(self.__dict__)
        result._arc = None if self._arc is None else self._arc.copy()
        result._edge = None if self._edge is None else self._edge.copy()
        return result

    def __iter__(self):
        """Yield the remaining vertices, from the current one to the end."""
        while True:
            yield self.get_vertex()
            if self.is_at_end():
                return
            self.next()

    def is_along(self) -> bool:
        return self._edge is not None

    def next(self):
        """Advance one step; does nothing at the end."""
        if not self.is_at_end():
            self._current_step += -1 if self._end_step < self._start_step else 1

    def is_at_start(self) -> bool:
        return self._current_step == 0

    def is_at_end(self) -> bool:
        return self._current_step == self._end_step - self._start_step

    def get_remainder(self) -> float:
        return self._remainder

    def get_vertex(self) -> Point:
        if self._edge is not None:
            if self.is_at_end():
                return self._edge.end.as_point()
            temp = self._edge.copy().flip()
            temp.extend(-self._current_step * self._step)
            return temp.flip().origin
        if self.is_at_end():
            angle = self._arc.get_end_angle()
        elif self.is_at_start():
            angle = self._arc.start_angle
        else:
            angle = (self._start_step + self._current_step) * self._inc_angle
        return self._arc.centre.moved_polar(self._arc.radius, angle)
