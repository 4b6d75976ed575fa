import math

import pytest

from polykernel.box import Anchor2D, Box
from polykernel.point import Point
from polykernel.position import Region

## unit tests for polykernel box.py


class TestBox:
    """bounding box queries"""

    def test_create(self):
        box = Box(Point(4, 3, 1), Point(0, 0, 0))
        assert box.width() == 4.0
        assert box.depth() == 3.0
        assert box.height() == 1.0
        assert box.area() == 12.0
        assert box.volume() == 12.0
        assert box.max_length() == 4.0
        box.sort()
        assert box.origin == Point(0, 0, 0) and box.end == Point(4, 3, 1)
        assert Box(Point(1, 1)).end == Point(1, 1)

    def test_corners_are_copied(self):
        pt = Point(1, 1)
        box = Box(pt, Point(2, 2))
        pt.x = 5
        assert box.origin == Point(1, 1)

    def test_position(self):
        box = Box.from_size(4, 4)
        assert box.position_of_2d(Point(2, 2)) == Region.INSIDE
        assert box.position_of_2d(Point(0, 2)) == Region.ALONG
        assert box.position_of_2d(Point(5, 2)) == Region.OUTSIDE
        cube = Box.from_coords(0, 0, 0, 2, 2, 2)
        assert cube.position_of_3d(Point(1, 1, 1)) == Region.INSIDE
        assert cube.position_of_3d(Point(1, 1, 2)) == Region.ALONG
        assert cube.position_of_3d(Point(1, 1, 3)) == Region.OUTSIDE

    def test_enclose_overlap(self):
        box = Box.from_size(4, 4)
        assert box.encloses_2d(Box(Point(1, 1), Point(4, 2)))
        assert not box.encloses_2d(Box(Point(1, 1), Point(5, 2)))
        assert box.overlaps_2d(Box(Point(3, 3), Point(6, 6)))
        assert not box.overlaps_2d(Box(Point(4, 0), Point(6, 6)))

    def test_merge(self):
        box = Box(Point(0, 0), Point(1, 1))
        box.merge(Point(-1, 3))
        assert box.origin == Point(-1, 0) and box.end == Point(1, 3)
        box.merge(Box(Point(5, 5, 5), Point(6, 6, 6)))
        assert box.end == Point(6, 6, 6)

    def test_anchors(self):
        box = Box.from_size(4, 2)
        assert box.get_anchor_2d(Anchor2D.LEFT_FRONT) == Point(0, 0)
        assert box.get_anchor_2d(Anchor2D.CENTRE_HALF) == Point(2, 1)
        assert box.get_anchor_2d(Anchor2D.RIGHT_BACK) == Point(4, 2)
        assert box.get_anchor_2d(Anchor2D.LEFT_HALF) == Point(0, 1)

    def test_resize(self):
        box = Box.from_size(4, 2)
        box.magnify(2)
        assert box.origin.is_equal_2d(Point(-2, -1)) and box.end.is_equal_2d(Point(6, 3))
        box = Box.from_size(4, 2)
        box.resize(1)
        assert box.origin == Point(-1, -1, -1) and box.end == Point(5, 3, 1)
        assert box.get_centre() == Point(2, 1, 0)

    def test_rotate(self):
        box = Box.from_size(2, 2)
        box.rotate(math.pi / 4)
        assert box.width() == pytest.approx(2 * math.sqrt(2))
        assert box.get_centre().is_equal_2d(Point(1, 1))
