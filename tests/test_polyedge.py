import math

import pytest

from polykernel.arc import Arc
from polykernel.point import Point
from polykernel.polyedge import PolyEdge
from polykernel.polypoint import PolyPoint
from polykernel.position import Position, Rotation
from polykernel.tolerance import PI, is_equal_angle
from polykernel.xlist import Role, XInfo, XList

## unit tests for polykernel polyedge.py

ROOT2 = math.sqrt(2.0)


def straight():
    return PolyEdge(Point(0, 0), PolyPoint(4, 0))


def bend():
    return PolyEdge(Point(10, 0), PolyPoint(10, 10, 0, PI / 2))


class TestShape:
    def test_straight(self):
        edge = straight()
        assert not edge.is_arc()
        assert edge.as_arc() is None
        assert edge.length_2d() == pytest.approx(4.0)
        assert edge.get_radius() == 0.0
        assert edge.midpoint() == Point(2, 0)
        assert edge.get_area() == 0.0

    def test_arc(self):
        edge = bend()
        assert edge.is_arc()
        assert edge.length_2d() == pytest.approx(5 * ROOT2 * PI / 2)
        assert edge.centre() == Point(5, 5)
        assert edge.get_radius() == pytest.approx(5 * ROOT2)
        ## the centre is on the left of travel
        assert edge.get_radius(True) == pytest.approx(-5 * ROOT2)
        assert edge.get_area() == pytest.approx(25 * (PI / 2 - 1))

    def test_tangents(self):
        edge = bend()
        assert is_equal_angle(edge.start_tangent(), PI / 4)
        assert is_equal_angle(edge.end_tangent(), 3 * PI / 4)
        follow = PolyEdge(Point(10, 10), PolyPoint(10 - ROOT2, 10 + ROOT2))
        assert follow.is_tangential_to_2d(edge)


class TestEquality:
    def test_reverse_matches(self):
        edge = bend()
        flipped = bend().flip()
        assert flipped.origin == Point(10, 10)
        assert flipped.end.sweep == pytest.approx(-PI / 2)
        assert edge.is_equal_2d(flipped)
        assert edge == bend()

    def test_colinear(self):
        assert straight().is_parallel_to_2d(PolyEdge(Point(0, 2), PolyPoint(1, 2)))
        assert not straight().is_colinear_to_2d(PolyEdge(Point(0, 2), PolyPoint(1, 2)))
        assert straight().is_colinear_to_2d(PolyEdge(Point(6, 0), PolyPoint(9, 0)))
        assert not straight().is_parallel_to_2d(bend())

    def test_overlap(self):
        assert straight().overlaps_2d(PolyEdge(Point(2, 0), PolyPoint(6, 0)))
        assert not straight().overlaps_2d(PolyEdge(Point(4, 0), PolyPoint(6, 0)))


class TestClassification:
    @pytest.mark.parametrize("pt, expected", [
        (Point(2, 0), Position.ALONG),
        (Point(5, 0), Position.AFTER),
        (Point(-1, 0), Position.BEFORE),
        (Point(0, 0), Position.ORIGIN),
        (Point(4, 0), Position.END),
    ])
    def test_position_straight(self, pt, expected):
        assert straight().position_of_2d(pt) == expected

    def test_position_arc(self):
        assert bend().position_of_2d(Point(5 + 5 * ROOT2, 5)) == Position.ALONG
        assert bend().encloses_2d(Point(10, 10))
        assert not bend().encloses_2d(Point(5, 5))

    def test_closest(self):
        assert straight().closest_point_along_2d(Point(9, 3)) == Point(4, 0)
        assert straight().closest_point_to_2d(Point(9, 3)) == Point(9, 0)


class TestIntersection:
    def test_line_against_arc(self):
        target = PolyEdge(Point(-2, 0.5), PolyPoint(2, 0.5))
        blade = PolyEdge(Point(1, 0), PolyPoint(0, 1, 0, PI / 2))
        assert target.intersection_with_2d(blade, XList()) == 2
        inter = XList(XInfo(), XInfo(Position.WITHIN))
        assert target.intersection_with_2d(blade, inter) == 1
        pt = inter.front()
        assert pt == Point(math.sqrt(0.75), 0.5)
        assert pt.get_pos(Role.BLADE) == Position.ALONG
        assert pt.get_pos(Role.TARGET) == Position.UNDEFINED

    def test_lines(self):
        inter = XList(XInfo(Position.WITHIN), XInfo(Position.WITHIN))
        assert straight().intersection_with_2d(PolyEdge(Point(1, -1), PolyPoint(1, 1)), inter) == 1
        assert inter.front() == Point(1, 0)


class TestMutation:
    def test_set_radius(self):
        edge = PolyEdge(Point(0, 0), PolyPoint(2, 0))
        edge.set_radius(1.0)
        assert edge.end.sweep == pytest.approx(PI)
        edge.set_radius(0.0)
        assert not edge.is_arc()
        clockwise = PolyEdge.from_radius(Point(0, 0), Point(2, 0), 1.0, Rotation.CLOCKWISE)
        assert clockwise.end.sweep == pytest.approx(-PI)
        ## too short to span the chord
        edge.set_radius(0.5)
        assert not edge.is_arc()

    def test_extend_straight(self):
        edge = straight()
        edge.extend(2.0)
        assert edge.end == Point(6, 0)
        edge.extend(1.0, False)
        assert edge.origin == Point(-1, 0)
        edge.extend(-3.0)
        assert edge.end == Point(3, 0)

    def test_extend_arc(self):
        edge = PolyEdge(Point(1, 0), PolyPoint(0, 1, 0, PI / 2))
        edge.extend(PI / 2)
        assert edge.end == Point(-1, 0)
        assert edge.end.sweep == pytest.approx(PI)
        edge.extend(10.0)
        assert edge.end.sweep == pytest.approx(2 * PI)

    def test_extend_to_point(self):
        edge = straight()
        edge.extend(Point(7, 3))
        assert edge.end == Point(7, 0)
        edge.extend(Point(-2, 1), False)
        assert edge.origin == Point(-2, 0)

    def test_split(self):
        edge = straight()
        offcut = edge.split(Point(1, 0))
        assert edge.origin == Point(0, 0) and edge.end == Point(1, 0)
        assert offcut.origin == Point(1, 0) and offcut.end == Point(4, 0)
        edge = straight()
        offcut = edge.split(Point(1, 0), False)
        assert edge.end == Point(4, 0) and edge.origin == Point(1, 0)
        assert offcut.origin == Point(0, 0)

    def test_split_arc(self):
        edge = PolyEdge(Point(1, 0), PolyPoint(-1, 0, 0, PI))
        offcut = edge.split(Point(0, 1))
        assert edge.end == Point(0, 1)
        assert edge.end.sweep == pytest.approx(PI / 2)
        assert offcut.end.sweep == pytest.approx(PI / 2)

    def test_offset(self):
        edge = straight()
        edge.offset(1.0)
        assert edge.origin == Point(0, 1) and edge.end == Point(4, 1)
        arc = PolyEdge(Point(1, 0), PolyPoint(0, 1, 0, PI / 2))
        arc.offset(0.5)
        assert arc.get_radius() == pytest.approx(0.5)

    def test_flip_keeps_id(self):
        edge = PolyEdge(Point(0, 0), PolyPoint(4, 0, 0, 0.0, 7))
        edge.flip()
        assert edge.end.id == 7
        assert edge.end == Point(0, 0)

    def test_stretch(self):
        edge = straight()
        edge.stretch_end(Point(6, 1))
        assert edge.end == Point(6, 0)
        edge.stretch_origin(Point(1, 5))
        assert edge.origin == Point(1, 0) and edge.end == Point(6, 0)

    def test_from_arc(self):
        edge = PolyEdge.from_arc(Arc(Point(), 1.0, PI / 2, 0.0))
        assert edge.origin == Point(1, 0)
        assert edge.end == Point(0, 1)
        assert edge.end.sweep == pytest.approx(PI / 2)
