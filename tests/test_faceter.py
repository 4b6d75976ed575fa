import pytest

from polykernel.faceter import Faceter
from polykernel.point import Point
from polykernel.polypoint import PolyPoint
from polykernel.tolerance import EPS, PI

## unit tests for polykernel faceter.py


def _max_sagitta(points, centre, radius):
    return max(radius - centre.length_from_2d((first + second) / 2) for first, second in zip(points, points[1:]))


class TestArcFacets:
    def test_anticlockwise(self):
        origin = Point(10, 0)
        points = list(Faceter(origin, PolyPoint(0, 10, 0, PI / 2), toler=0.01))
        assert points[0] != origin
        assert points[-1] == Point(0, 10)
        for pt in points:
            assert pt.length_from_2d(Point()) == pytest.approx(10.0)
        assert _max_sagitta([origin] + points, Point(), 10.0) <= 0.01 + EPS

    def test_include_start(self):
        origin = Point(10, 0)
        points = list(Faceter(origin, PolyPoint(0, 10, 0, PI / 2), is_start=True, toler=0.01))
        assert points[0] == origin

    def test_exclude_end(self):
        points = list(Faceter(Point(10, 0), PolyPoint(0, 10, 0, PI / 2), is_end=False, toler=0.01))
        assert points[-1] != Point(0, 10)
        assert points[-1].y < 10.0

    def test_clockwise(self):
        origin = Point(0, 10)
        points = list(Faceter(origin, PolyPoint(10, 0, 0, -PI / 2), toler=0.01))
        assert points[0] != origin
        assert points[-1] == Point(10, 0)
        ## walking clockwise from the top
        assert all(first.x < second.x for first, second in zip(points, points[1:]))
        assert _max_sagitta([origin] + points, Point(), 10.0) <= 0.01 + EPS

    def test_steps_shared_between_arcs(self):
        ## arcs on one circle share their facet angles
        first = list(Faceter(Point(10, 0), PolyPoint(0, 10, 0, PI / 2), toler=0.05))
        whole = list(Faceter(Point(10, 0), PolyPoint(-10, 0, 0, PI), toler=0.05))
        assert all(any(pt == other for other in whole) for pt in first[:-1])

    def test_tiny_arc(self):
        faceter = Faceter(Point(0.001, 0), PolyPoint(0, 0.001, 0, PI / 2))
        assert faceter.is_at_end()
        assert list(faceter) == [Point(0, 0.001)]

    def test_stepping(self):
        faceter = Faceter(Point(10, 0), PolyPoint(0, 10, 0, PI / 2), toler=0.5)
        assert faceter.is_at_start()
        copy = faceter.copy()
        faceter.next()
        assert not faceter.is_at_start()
        assert copy.is_at_start()


class TestAlongFacets:
    def test_remainder(self):
        faceter = Faceter.along(Point(0, 0), PolyPoint(10, 0), 3.0)
        assert faceter.is_along()
        assert faceter.get_remainder() == pytest.approx(1.0)
        assert list(faceter) == [Point(0, 0), Point(3, 0), Point(6, 0), Point(9, 0), Point(10, 0)]

    def test_exact_multiple(self):
        faceter = Faceter.along(Point(0, 0), PolyPoint(0, 9), 3.0)
        assert faceter.get_remainder() == pytest.approx(0.0)
        assert list(faceter) == [Point(0, 0), Point(0, 3), Point(0, 6), Point(0, 9)]

    def test_zero_step(self):
        assert list(Faceter.along(Point(0, 0), PolyPoint(5, 0), 0.0)) == [Point(5, 0)]
