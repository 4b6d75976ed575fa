## tolerance-aware comparisons for polykernel

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

"""Tolerance-aware scalar and angle comparisons.

Every predicate in polykernel takes an explicit ``prec`` argument.  The
defaults below are a single linear tolerance for lengths and coordinates
and an angular tolerance of a tenth of a degree.
"""

from __future__ import annotations

import math

__all__ = [
    "EPS",
    "EPS_ANGLE",
    "PI",
    "PI2",
    "RADIAN_TO_DEGREE",
    "DEGREE_TO_RADIAN",
    "is_less",
    "is_equal",
    "is_greater",
    "compare",
    "is_less_or_equal",
    "is_greater_or_equal",
    "is_less_zero",
    "is_less_or_equal_zero",
    "is_zero",
    "is_greater_or_equal_zero",
    "is_greater_zero",
    "is_between",
    "is_within",
    "fmod_prec",
    "round_to",
    "round_up",
    "round_down",
    "sign",
    "sgn",
    "flow_sgn",
    "angle_mod",
    "divides_into",
    "is_angle_between",
    "is_angle_within",
    "is_equal_angle",
    "is_parallel_angle",
    "is_perpendicular_angle",
    "angle_delta",
]

PI = math.pi
PI2 = 2.0 * math.pi

## default linear tolerance
EPS = 1e-5
## default angular tolerance (0.1 degree)
EPS_ANGLE = PI / 1800

RADIAN_TO_DEGREE = 180.0 / PI
DEGREE_TO_RADIAN = 1.0 / RADIAN_TO_DEGREE


def is_less(val1: float, val2: float, prec: float = EPS) -> bool:
    """Return ``True`` if ``val1`` is less than ``val2`` by more than ``prec``."""
    return val2 - val1 > prec


def is_equal(val1: float, val2: float, prec: float = EPS) -> bool:
    return abs(val1 - val2) <= prec


def is_greater(val1: float, val2: float, prec: float = EPS) -> bool:
    return val1 - val2 > prec


def compare(val1: float, val2: float, prec: float = EPS) -> int:
    """Return -1, 0 or 1 as ``val1`` is less than, equal to or greater than ``val2``."""
    if is_equal(val1, val2, prec):
        return 0
    return -1 if is_less(val1, val2, prec) else 1


def is_less_or_equal(val1: float, val2: float, prec: float = EPS) -> bool:
    return is_equal(val1, val2, prec) or is_less(val1, val2, prec)


def is_greater_or_equal(val1: float, val2: float, prec: float = EPS) -> bool:
    return is_equal(val1, val2, prec) or is_greater(val1, val2, prec)


def is_less_zero(val: float, prec: float = EPS) -> bool:
    return is_less(val, 0.0, prec)


def is_less_or_equal_zero(val: float, prec: float = EPS) -> bool:
    return is_less_or_equal(val, 0.0, prec)


def is_zero(val: float, prec: float = EPS) -> bool:
    return is_equal(val, 0.0, prec)


def is_greater_or_equal_zero(val: float, prec: float = EPS) -> bool:
    return is_greater_or_equal(val, 0.0, prec)


def is_greater_zero(val: float, prec: float = EPS) -> bool:
    return is_greater(val, 0.0, prec)


def is_between(val: float, lower: float, upper: float, prec: float = EPS) -> bool:
    """Strict test: ``val`` lies inside ``(lower, upper)`` by more than ``prec``."""
    return is_greater(val, lower, prec) and is_less(val, upper, prec)


def is_within(val: float, lower: float, upper: float, prec: float = EPS) -> bool:
    """Inclusive test: ``val`` lies inside ``[lower, upper]`` within ``prec``."""
    return is_greater_or_equal(val, lower, prec) and is_less_or_equal(val, upper, prec)


def fmod_prec(val: float, module: float, prec: float = EPS) -> float:
    """Floating point modulus, snapping results within ``prec`` of 0 or ``module`` to 0."""
    val = math.fmod(val, module)
    if is_zero(val, prec) or is_equal(abs(val), abs(module), prec):
        return 0.0
    return val


def round_to(val: float, module: float = EPS) -> float:
    return math.floor((val / module) + 0.5) * module


def round_up(val: float, module: float = EPS, tolerance: float = EPS) -> float:
    """Round ``val`` up to a multiple of ``module``.

    When ``module`` is coarser than ``tolerance`` and ``val`` already sits
    within ``tolerance`` of a multiple, that multiple is returned instead of
    stepping to the next one.
    """
    if module > tolerance:
        rounded = round_to(val, module)
        if is_equal(val, rounded, tolerance):
            return rounded
    return math.ceil(val / module) * module


def round_down(val: float, module: float = EPS, tolerance: float = EPS) -> float:
    if module > tolerance:
        rounded = round_to(val, module)
        if is_equal(val, rounded, tolerance):
            return rounded
    return math.floor(val / module) * module


def sign(val: float, prec: float = EPS) -> float:
    """Return 0 for values within ``prec`` of zero, otherwise -1 or 1."""
    if is_zero(val, prec):
        return 0.0
    return -1.0 if val < 0 else 1.0


def sgn(val: float) -> float:
    if val == 0:
        return 0.0
    return 1.0 if val > 0 else -1.0


def flow_sgn(val: float) -> float:
    """Sign where zero counts as positive."""
    return 1.0 if val >= 0 else -1.0


def angle_mod(angle: float) -> float:
    """Normalise ``angle`` to the range [0, 2π)."""
    angle = math.fmod(angle, PI2)
    if angle < 0.0:
        angle += PI2
    return angle


def divides_into(val: float, div: float, prec: float = EPS) -> bool:
    return is_zero(fmod_prec(val, div, prec), prec)


def _angle_window(val: float, lower: float, upper: float):
    min_a, max_a = angle_mod(lower), angle_mod(upper)
    if max_a < min_a:
        if val > min_a:
            max_a += PI2
        else:
            min_a -= PI2
    return min_a, max_a


def is_angle_between(val: float, lower: float, upper: float, prec: float = EPS) -> bool:
    """Strict angular containment, wrapping through 2π when ``upper < lower``."""
    min_a, max_a = _angle_window(val, lower, upper)
    return is_between(val, min_a, max_a, prec)


def is_angle_within(val: float, lower: float, upper: float, prec: float = EPS) -> bool:
    min_a, max_a = _angle_window(val, lower, upper)
    return is_within(val, min_a, max_a, prec)


def is_equal_angle(angle1: float, angle2: float, prec: float = EPS) -> bool:
    angle1 = angle_mod(angle1)
    angle2 = angle_mod(angle2)
    if is_equal(angle1, angle2, prec):
        return True
    if is_equal(angle1, PI2, prec):
        angle1 = 0.0
    if is_equal(angle2, PI2, prec):
        angle2 = 0.0
    return is_equal(angle1, angle2, prec)


def is_parallel_angle(angle1: float, angle2: float, prec: float = EPS) -> bool:
    """Return ``True`` if two directions are equal modulo π."""
    delta = angle_mod(angle1 - angle2)
    return is_equal(delta, 0.0, prec) or is_equal(delta, PI, prec) or is_equal(delta, PI2, prec)


def is_perpendicular_angle(angle1: float, angle2: float, prec: float = EPS) -> bool:
    return is_parallel_angle(angle1 - PI / 2.0, angle2, prec)


def angle_delta(angle1: float, angle2: float) -> float:
    """Return the signed turn from ``angle1`` to ``angle2``, in the range (-π, π]."""
    delta = angle2 - angle1
    if delta <= -PI:
        delta += PI2
    elif delta > PI:
        delta -= PI2
    return delta
