## polygon vertices for polykernel

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

"""Polygon vertices."""

from __future__ import annotations

import math
from typing import Optional

from polykernel.linequation import LinEquation
from polykernel.point import Point
from polykernel.position import Side
from polykernel.tolerance import EPS, PI2, angle_mod, is_zero

__all__ = ["PolyPoint"]


class PolyPoint(Point):
    """A point carrying the sweep of the edge that ends at it, and an id.

    A sweep of 0 means the incoming edge is straight; otherwise it is the
    signed angle of a circular arc (negative is clockwise).  The id is
    unique within a polygon, and 0 marks an anonymous vertex.
    """

    __slots__ = ("sweep", "id")

    def __init__(self, x=0.0, y=0.0, z=0.0, sweep: float = 0.0, id: int = 0):
        super().__init__(x, y, z)
        self.sweep = float(sweep)
        self.id = int(id)

    @classmethod
    def from_point(cls, source: Point, sweep: Optional[float] = None, id: Optional[int] = None) -> "PolyPoint":
        """Return a vertex at ``source``, inheriting its sweep and id when it is a vertex itself."""
        if sweep is None:
            sweep = getattr(source, "sweep", 0.0)
        if id is None:
            id = getattr(source, "id", 0)
        return cls(source.x, source.y, source.z, sweep, id)

    def __repr__(self):
        return "PolyPoint({}, {}, {}, sweep={}, id={})".format(self.x, self.y, self.z, self.sweep, self.id)

    def as_poly_point(self) -> "PolyPoint":
        """Return a plain vertex copy, dropping any subclass data."""
        return PolyPoint(self.x, self.y, self.z, self.sweep, self.id)

    def assign(self, source: Point) -> "PolyPoint":
        super().assign(source)
        if isinstance(source, PolyPoint):
            self.sweep, self.id = source.sweep, source.id
        return self

    def is_arc(self, prec: float = EPS) -> bool:
        return not is_zero(self.sweep, prec)

    def length_from_2d(self, ref: Point) -> float:
        """Return the length of the edge from ``ref`` to this vertex (the arc length for arc edges)."""
        if self.is_arc():
            from polykernel.arc import Arc

            return Arc.from_edge(ref, self).length_2d()
        return super().length_from_2d(ref)

    def set_sweep(self, ref):
        """Set the sweep of an arc centred on ``ref.origin`` that starts at ``ref.end`` and ends here."""
        radius = ref.length_2d()
        if self == ref.end:
            sweep = PI2
        else:
            sweep = 2.0 * math.asin(min(1.0, ref.end.length_from_2d(self) / (2.0 * radius)))
        equation = LinEquation.create(ref.origin, ref.end)
        if equation is None:
            return
        self.sweep = -sweep if equation.position_of(self) == Side.RIGHT else sweep

    def set_sweep_parallel(self, ref):
        """Set the sweep of an arc leaving ``ref.end`` tangent to ``ref`` and ending here."""
        equation = LinEquation.create(ref.origin, ref.end)
        side = Side.UNDEFINED if equation is None else equation.position_of(self)
        if side not in (Side.LEFT, Side.RIGHT):
            self.sweep = 0.0
            return
        delta = angle_mod(ref.end.azimuth_angle_to(self) - ref.azimuth_angle())
        if side == Side.RIGHT:
            self.sweep = -2.0 * (PI2 - delta)
        else:
            self.sweep = 2.0 * delta
