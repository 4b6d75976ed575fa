import math

import pytest

from polykernel.box import Box
from polykernel.line import Line
from polykernel.matrix import Matrix4x4
from polykernel.plane import Plane
from polykernel.point import Point
from polykernel.position import Face
from polykernel.vector import Vector3

## unit tests for polykernel plane.py


class TestPlane:
    """planes in normal/offset form"""

    def test_create(self):
        assert Plane.create(1.0, Vector3()) is None
        assert Plane.create_from_points(Point(0, 0), Point(1, 1), Point(2, 2)) is None
        plane = Plane.create_from_points(Point(0, 0, 2), Point(0, 1, 2), Point(1, 0, 2))
        assert plane.get_normal() == Vector3(0, 0, 1)
        assert plane.offset == pytest.approx(2.0)
        assert Plane.create_from_point(Point(0, 0, 3), Vector3(0, 0, 5)) == Plane(3.0)

    def test_bad_normal(self):
        plane = Plane()
        with pytest.raises(ValueError):
            plane.set_normal(Vector3())

    def test_position(self):
        plane = Plane(2.0)
        assert plane.position_of(Point(5, 5, 3)) == Face.FRONT
        assert plane.position_of(Point(5, 5, 1)) == Face.BACK
        assert plane.position_of(Point(5, 5, 2)) == Face.ALONG
        assert plane.length_to(Point(0, 0, -1)) == pytest.approx(-3.0)
        assert plane.closest_point_to(Point(1, 2, 7)) == Point(1, 2, 2)

    def test_height(self):
        plane = Plane.create_from_point(Point(0, 0, 0), Vector3(-1, 0, 1))
        assert plane.height_at(Point(3, 7)) == pytest.approx(3.0)
        wall = Plane.create_from_point(Point(0, 0, 0), Vector3(1, 0, 0))
        assert wall.height_at(Point(3, 7, 4)) == 4.0

    def test_intersections(self):
        plane = Plane(2.0)
        line = Line(Point(0, 0, 0), Point(1, 1, 1))
        assert plane.intersection_with_line(line) == Point(2, 2, 2)
        assert plane.intersection_with_line(Line(Point(0, 0), Point(1, 0))) is None
        wall = Plane.create_from_point(Point(1, 0, 0), Vector3(1, 0, 0))
        meet = plane.intersection_with_plane(wall)
        assert meet.origin.x == pytest.approx(1.0) and meet.origin.z == pytest.approx(2.0)
        assert Vector3.from_line(meet).is_parallel_to(Vector3(0, 1, 0))
        assert plane.intersection_with_plane(Plane(5.0)) is None
        assert plane.is_parallel_to(Plane(5.0))

    def test_cuts_through(self):
        plane = Plane(2.0)
        assert plane.cuts_through(Box(Point(0, 0, 0), Point(1, 1, 3)))
        assert not plane.cuts_through(Box(Point(0, 0, 3), Point(1, 1, 4)))

    def test_transform(self):
        plane = Plane(2.0) + Point(0, 0, 1)
        assert plane.offset == pytest.approx(3.0)
        moved = Plane(2.0) * Matrix4x4.create_translate(0, 0, 1)
        assert moved.offset == pytest.approx(3.0)
        turned = Plane(2.0) * Matrix4x4.create_x_rotate(math.pi / 2)
        assert turned.get_normal() == Vector3(0, -1, 0)
