import math

import pytest

from polykernel.tolerance import *

## unit tests for polykernel tolerance.py


class TestCompare:
    """tolerant scalar comparisons"""

    def test_equal(self):
        assert is_equal(1.0, 1.0 + EPS / 2)
        assert not is_equal(1.0, 1.0 + 2 * EPS)
        assert is_zero(EPS / 10)
        assert not is_zero(0.1)
        assert is_zero(0.05, 0.1)

    def test_ordering(self):
        assert is_less(1.0, 2.0)
        assert not is_less(1.0, 1.0 + EPS / 2)
        assert is_greater(2.0, 1.0)
        assert is_less_or_equal(1.0 + EPS / 2, 1.0)
        assert is_greater_or_equal(1.0 - EPS / 2, 1.0)
        assert compare(1.0, 2.0) == -1
        assert compare(2.0, 1.0) == 1
        assert compare(1.0, 1.0 + EPS / 2) == 0

    def test_zero_shorthands(self):
        assert is_less_zero(-1.0)
        assert is_less_or_equal_zero(EPS / 2)
        assert is_greater_zero(1.0)
        assert not is_greater_zero(EPS / 2)
        assert is_greater_or_equal_zero(-EPS / 2)

    def test_between_within(self):
        assert is_between(0.5, 0.0, 1.0)
        assert not is_between(1.0, 0.0, 1.0)
        assert is_within(1.0, 0.0, 1.0)
        assert not is_within(1.1, 0.0, 1.0)


class TestRounding:
    def test_round(self):
        assert round_to(1.26, 0.1) == pytest.approx(1.3)
        assert round_up(1.21, 0.1) == pytest.approx(1.3)
        assert round_up(1.2 + EPS / 10, 0.1) == pytest.approx(1.2)
        assert round_down(1.29, 0.1) == pytest.approx(1.2)

    def test_fmod(self):
        assert fmod_prec(5.0, 2.0) == pytest.approx(1.0)
        assert fmod_prec(4.0 - EPS / 10, 2.0) == 0.0
        assert divides_into(6.0, 3.0)
        assert not divides_into(7.0, 3.0)

    def test_signs(self):
        assert sign(EPS / 2) == 0.0
        assert sign(-3.0) == -1.0
        assert sgn(1e-12) == 1.0
        assert sgn(0.0) == 0.0
        assert flow_sgn(0.0) == 1.0
        assert flow_sgn(-0.5) == -1.0


class TestAngles:
    def test_angle_mod(self):
        assert angle_mod(-PI / 2) == pytest.approx(3 * PI / 2)
        assert angle_mod(5 * PI) == pytest.approx(PI)

    def test_wrapping_window(self):
        assert is_angle_between(0.1, 3 * PI / 2, PI / 2)
        assert is_angle_between(PI, PI / 2, 3 * PI / 2)
        assert not is_angle_between(PI, 3 * PI / 2, PI / 2)
        assert is_angle_within(PI / 2, 0.0, PI / 2)
        assert not is_angle_between(PI / 2, 0.0, PI / 2)

    def test_relations(self):
        assert is_equal_angle(0.0, PI2)
        assert is_parallel_angle(0.25, 0.25 + PI)
        assert is_perpendicular_angle(0.0, PI / 2)
        assert angle_delta(0.0, PI / 4) == pytest.approx(PI / 4)

    @pytest.mark.parametrize("angle1, angle2, expected", [
        (0.0, 3 * PI / 2, -PI / 2),
        (3 * PI / 2, 0.0, PI / 2),
        (0.1, PI2 - 0.1, -0.2),
        (PI2 - 0.1, 0.1, 0.2),
        (0.0, PI, PI),
    ])
    def test_angle_delta_wraps(self, angle1, angle2, expected):
        assert angle_delta(angle1, angle2) == pytest.approx(expected)

    def test_conversion(self):
        assert 90.0 * DEGREE_TO_RADIAN == pytest.approx(PI / 2)
        assert math.isclose(PI * RADIAN_TO_DEGREE, 180.0)
        assert EPS_ANGLE == pytest.approx(PI / 1800)
