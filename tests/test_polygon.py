import math

import pytest

from polykernel.box import Box
from polykernel.line import Line
from polykernel.linequation import LinEquation
from polykernel.matrix import Matrix3x3
from polykernel.plane import Plane
from polykernel.point import Point
from polykernel.polygon import Polygon, PolyVector
from polykernel.polypoint import PolyPoint
from polykernel.position import Position, Region, Rotation, Side
from polykernel.tolerance import EPS, PI
from polykernel.xlist import Role

## unit tests for polykernel polygon.py

SEGMENT = 25 * (PI / 2 - 1)


def square(x1, y1, x2, y2):
    return Polygon([Point(x1, y1), Point(x2, y1), Point(x2, y2), Point(x1, y2)])


def triangle():
    return Polygon([Point(1, 2), Point(3, 2), Point(1, 4)])


def bulge():
    ## the edge from (10,0) to (10,10) is a quarter circle about (5,5)
    return Polygon([Point(0, 0), Point(10, 0), PolyPoint(10, 10, 0, PI / 2)])


def bowtie():
    return Polygon([Point(0, 0), Point(4, 4), Point(0, 4), Point(4, 0)])


def circle():
    ## radius 5 about the origin, as two half circles
    return Polygon([PolyPoint(5, 0, 0, PI), PolyPoint(-5, 0, 0, PI)])


def holed():
    poly = square(0, 0, 10, 10)
    poly.insert_hole(square(3, 3, 7, 7))
    return poly


def total_area(polys):
    return sum(poly.get_area() for poly in polys)


def check_ids(poly):
    ids = [vertex.id for shape in [poly] + poly.get_holes() for vertex in shape]
    assert 0 not in ids
    assert len(set(ids)) == len(ids)
    assert poly.get_top_id() >= max(ids)
    assert all(hole.get_top_id() == poly.get_top_id() for hole in poly.get_holes())


class TestContainer:
    def test_wrapped_indexing(self):
        poly = square(0, 0, 10, 10)
        assert poly[-1] == Point(0, 10)
        assert poly[4] == Point(0, 0)
        assert poly.wrap_index(-5) == 3
        assert Polygon().wrap_index(7) == 0

    def test_vertices_are_copied(self):
        pt = PolyPoint(1, 1, 0, 0.5, 3)
        poly = Polygon([pt])
        assert isinstance(poly[0], PolyPoint)
        assert poly[0].sweep == 0.5 and poly[0].id == 3
        poly[0].x = 9
        assert pt.x == 1

    def test_editing(self):
        poly = square(0, 0, 10, 10)
        poly.append(Point(-1, 5))
        assert len(poly) == 5 and isinstance(poly[4], PolyPoint)
        poly.pop()
        poly.insert(1, Point(5, 0))
        assert poly[1] == Point(5, 0)
        del poly[1]
        assert poly == square(0, 0, 10, 10)

    def test_sizes(self):
        poly = square(0, 0, 10, 10)
        poly.insert_hole(square(2, 2, 4, 4))
        assert poly.vert_size() == 4
        assert poly.vert_size(False) == 8
        assert poly.edge_size() == 4
        assert Polygon([Point(), Point(1, 0)], is_closed=False).edge_size() == 1

    def test_validity(self):
        assert triangle().is_valid()
        assert not Polygon([Point(), Point(1, 0)]).is_valid()
        assert Polygon([Point(), PolyPoint(1, 0, 0, PI)]).is_valid()
        assert Polygon([Point(), Point(1, 0)], is_closed=False).is_valid()
        assert square(0, 0, 10, 10).is_valid(True)
        assert not bowtie().is_valid(True)

    def test_from_box(self):
        poly = Polygon.from_box(Box(Point(0, 0, 2), Point(2, 3, 1)))
        assert poly.get_area() == pytest.approx(6.0)
        assert all(vertex.z == pytest.approx(1.0) for vertex in poly)
        turned = Polygon.from_box(Box(Point(0, 0), Point(2, 3)), PI / 2)
        assert turned[1] == Point(0, 2)


class TestEquality:
    def test_translation(self):
        moved = triangle() + Point(1, 1)
        assert moved != triangle()
        assert moved[0] == Point(2, 3)
        assert moved - Point(1, 1) == triangle()

    def test_holes_count(self):
        with_hole = square(0, 0, 10, 10)
        with_hole.insert_hole(square(2, 2, 4, 4))
        assert with_hole != square(0, 0, 10, 10)
        assert with_hole == with_hole.copy()

    def test_2d_ignores_level(self):
        raised = square(0, 0, 10, 10)
        raised.set_base_level(5.0)
        assert raised.is_equal_2d(square(0, 0, 10, 10))
        assert not raised.is_equal_3d(square(0, 0, 10, 10))

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(triangle())


class TestArithmetic:
    def test_scale(self):
        poly = square(0, 0, 1, 1) * 3
        assert poly.get_area() == pytest.approx(9.0)
        poly /= 3
        assert poly == square(0, 0, 1, 1)

    def test_mirror_reverses_arcs(self):
        mirrored = bulge() * Matrix3x3.create_scale(-1, 1)
        assert mirrored[2].sweep == pytest.approx(-PI / 2)
        assert mirrored.get_area() == pytest.approx(50 + SEGMENT)
        assert mirrored.bounds().origin.x == pytest.approx(-5 - 5 * math.sqrt(2))

    def test_rotation_keeps_arcs(self):
        turned = bulge() * Matrix3x3.create_z_rotate(PI / 2)
        assert turned[2].sweep == pytest.approx(PI / 2)
        assert turned.get_area() == pytest.approx(50 + SEGMENT)


class TestHoles:
    def test_insert_and_release(self):
        poly = square(0, 0, 10, 10)
        hole = square(2, 2, 4, 4)
        inserted = poly.insert_hole(hole)
        assert inserted is not hole and inserted.is_hole
        assert not hole.is_hole
        assert poly.get_hole_size() == 1
        assert poly.get_shape(1) is inserted
        released = poly.release_hole(0)
        assert released is inserted
        assert poly.get_hole_size() == 0

    def test_bad_index(self):
        poly = square(0, 0, 10, 10)
        with pytest.raises(IndexError):
            poly.get_hole(0)
        poly.insert_hole(square(2, 2, 4, 4))
        with pytest.raises(IndexError):
            poly.remove_hole(1)
        with pytest.raises(IndexError):
            poly.get_shape(2)

    def test_set_and_clear(self):
        poly = square(0, 0, 10, 10)
        poly.set_holes([square(1, 1, 2, 2), square(5, 5, 6, 6)])
        assert poly.get_hole_size() == 2
        holes = poly.release_holes()
        assert isinstance(holes, PolyVector) and len(holes) == 2
        poly.set_holes(holes)
        poly.clear(all_vertices=False)
        assert poly.get_hole_size() == 0 and len(poly) == 4
        poly.clear()
        assert len(poly) == 0

    def test_net_area(self):
        poly = square(0, 0, 10, 10)
        poly.insert_hole(square(2, 2, 4, 4))
        assert poly.get_area() == pytest.approx(96.0)
        assert poly.get_area(False) == pytest.approx(100.0)


class TestMeasurement:
    def test_triangle_area(self):
        assert triangle().get_area() == pytest.approx(2.0)
        assert triangle().get_area(True, True) == pytest.approx(2.0)
        assert triangle().get_direction() == Rotation.ANTICLOCKWISE

    def test_area_sign(self):
        poly = square(0, 0, 10, 10)
        assert poly.get_area(False, True) > 0
        poly.reverse()
        assert poly.get_area(False, True) < 0
        assert poly.get_direction() == Rotation.CLOCKWISE

    def test_arc_area(self):
        poly = bulge()
        assert poly.get_area() == pytest.approx(50 + SEGMENT)
        poly.reverse()
        assert poly.get_area(True, True) == pytest.approx(-(50 + SEGMENT))

    def test_invalid_has_no_area(self):
        assert Polygon([Point(), Point(1, 1)]).get_area() == 0.0

    def test_bounds(self):
        box = bulge().bounds()
        assert box.origin == Point(0, 0)
        assert box.end.x == pytest.approx(5 + 5 * math.sqrt(2))
        assert box.end.y == pytest.approx(10.0)
        assert Polygon().bounds() is None

    @pytest.mark.parametrize("poly", [triangle(), bulge(), square(-3, -3, 7, 2)])
    def test_bounds_contain_vertices(self, poly):
        box = poly.bounds()
        assert all(box.position_of_2d(vertex) != Region.OUTSIDE for vertex in poly)

    def test_perimeter(self):
        assert square(0, 0, 10, 10).get_perimeter_2d() == pytest.approx(40.0)
        assert bulge().get_perimeter_3d() == pytest.approx(10 + 10 * math.sqrt(2) + 5 * math.sqrt(2) * PI / 2)

    def test_trace_perimeter(self):
        poly = square(0, 0, 10, 10)
        index, pt = poly.trace_perimeter(15.0)
        assert index == 1 and pt == Point(10, 5)
        index, pt = poly.trace_perimeter(0.0)
        assert index == 0 and pt == Point(0, 0)
        index, pt = poly.trace_perimeter(100.0)
        assert index == 3 and pt == Point(0, 0)

    def test_internal_angle(self):
        poly = square(0, 0, 10, 10)
        assert poly.get_internal_angle_at(1) == pytest.approx(PI / 2)
        poly.reverse()
        assert poly.get_internal_angle_at(1) == pytest.approx(PI / 2)

    def test_tangential(self):
        assert not square(0, 0, 10, 10).is_tangential_at(1)
        ## a half circle bulging out of the right side
        poly = Polygon([Point(0, 0), Point(10, 0), PolyPoint(10, 10, 0, PI), Point(0, 10)])
        assert poly.is_tangential_at(1)
        assert poly.is_tangential_at(2)
        assert not poly.is_tangential_at(0)


class TestClassification:
    def test_triangle(self):
        poly = triangle()
        assert poly.position_of(Point(2, 2.5)) == Region.INSIDE
        assert poly.position_of(Point(5, 6)) == Region.OUTSIDE
        assert poly.position_of(Point(2, 2)) == Region.ALONG
        assert poly.position_of(Point(1, 4)) == Region.ALONG

    def test_concave_notch(self):
        poly = Polygon([Point(0, 0), Point(10, 0), Point(10, 10), Point(5, 5), Point(0, 10)])
        assert poly.position_of(Point(2, 5)) == Region.INSIDE
        assert poly.position_of(Point(5, 8)) == Region.OUTSIDE

    def test_holes(self):
        poly = square(0, 0, 10, 10)
        poly.insert_hole(square(2, 2, 4, 4))
        assert poly.position_of(Point(3, 3)) == Region.OUTSIDE
        assert poly.position_of(Point(2, 3)) == Region.ALONG
        assert poly.position_of(Point(6, 6)) == Region.INSIDE

    def test_arc_edge(self):
        poly = bulge()
        assert poly.position_of(Point(11, 5)) == Region.INSIDE
        assert poly.position_of(Point(12.5, 5)) == Region.OUTSIDE
        assert poly.position_of(Point(5 + 5 * math.sqrt(2), 5)) == Region.ALONG

    def test_is_reflection(self):
        poly = square(0, 0, 10, 10)
        ## the line touches only the corner at (10,0)
        assert poly.is_reflection(1, LinEquation.create(Point(5, -5), Point(15, 5)))
        ## the diagonal passes through the corner
        assert not poly.is_reflection(0, LinEquation.create(Point(0, 0), Point(10, 10)))

    def test_overlap(self):
        poly = square(1, 2, 3, 4)
        assert poly.overlaps(poly + Point(1, 1))
        assert not poly.overlaps(poly + Point(2, 0))
        assert not poly.overlaps(poly + Point(5, 5))

    def test_encloses(self):
        big = square(0, 0, 10, 10)
        small = square(2, 2, 4, 4)
        assert big.encloses(small)
        assert big.overlaps(small)
        assert not small.encloses(big)
        assert big.encloses(Point(10, 5))
        assert not big.encloses(Point(11, 5))
        assert big.encloses(square(0, 0, 5, 5))

    @pytest.mark.parametrize("outer, inner", [
        (square(0, 0, 10, 10), square(2, 2, 4, 4)),
        (square(0, 0, 10, 10), square(0, 0, 5, 5)),
        (square(0, 0, 10, 10), triangle()),
        (holed(), square(8, 8, 9, 9)),
        (bulge(), square(6, 1, 8, 3)),
        (bulge(), Polygon([Point(10.5, 2), Point(11, 5), Point(10.5, 8)])),
    ])
    def test_enclosed_overlaps(self, outer, inner):
        assert outer.encloses(inner)
        assert outer.overlaps(inner)

    def test_encloses_respects_holes(self):
        big = square(0, 0, 10, 10)
        big.insert_hole(square(2, 2, 4, 4))
        assert not big.encloses(square(1, 1, 5, 5))
        assert big.encloses(square(6, 6, 8, 8))

    def test_crosses(self):
        poly = square(0, 0, 10, 10)
        assert poly.crosses(Line(Point(-5, 5), Point(15, 5)))
        assert not poly.crosses(Line(Point(-5, -5), Point(15, -5)))
        assert not poly.crosses(Line(Point(0, 0), Point(10, 0)))

    def test_internal_point(self):
        poly = Polygon([Point(0, 0), Point(10, 0), Point(10, 10), Point(8, 10), Point(8, 2), Point(2, 2),
                        Point(2, 10), Point(0, 10)])
        pt = poly.get_internal_point()
        assert pt is not None
        assert poly.position_of(pt) == Region.INSIDE

    def test_closest_point(self):
        poly = square(0, 0, 10, 10)
        pt = poly.closest_point_along_2d(Point(5, -3))
        assert pt == Point(5, 0)
        assert pt.get_pos(Role.TARGET) == Position.ALONG
        assert pt.get_vertex(Role.TARGET) == 1
        assert pt.get_part(Role.TARGET) == 0
        corner = poly.closest_point_along_2d(Point(12, 12))
        assert corner == Point(10, 10)
        assert corner.get_pos(Role.TARGET) in (Position.ORIGIN, Position.END)

    def test_closest_point_in_hole(self):
        poly = square(0, 0, 10, 10)
        poly.insert_hole(square(4, 4, 6, 6))
        pt = poly.closest_point_along_2d(Point(5, 5.5))
        assert pt == Point(5, 6)
        assert pt.get_part(Role.TARGET) == 1
        outer = poly.closest_point_along_2d(Point(5, 5.5), with_holes=False)
        assert outer.get_part(Role.TARGET) == 0


class TestSplitByLine:
    def test_diagonal(self):
        right, left = square(0, 0, 10, 10).split_with(Line(Point(0, 0), Point(10, 10)))
        assert len(right) == 1 and len(left) == 1
        assert right[0].get_area() == pytest.approx(50.0)
        assert left[0].get_area() == pytest.approx(50.0)
        assert right[0].encloses(Point(8, 2))
        assert left[0].encloses(Point(2, 8))
        for poly in right + left:
            assert all(vertex.id != 0 for vertex in poly)

    def test_new_nodes(self):
        right, left = square(0, 0, 10, 10).split_with(Line(Point(5, -1), Point(5, 11)))
        assert total_area(right) == pytest.approx(50.0)
        assert total_area(left) == pytest.approx(50.0)
        for poly in right + left:
            assert poly.find_vertex_by_location(Point(5, 0)) is not None
            assert poly.find_vertex_by_location(Point(5, 10)) is not None
            assert all(vertex.id != 0 for vertex in poly)
        assert left[0].encloses(Point(1, 5))

    def test_hole_goes_left(self):
        poly = square(0, 0, 10, 10)
        poly.insert_hole(square(2, 2, 4, 4))
        right, left = poly.split_with(Line(Point(5, 0), Point(5, 10)))
        assert len(right) == 1 and len(left) == 1
        assert left[0].get_hole_size() == 1
        assert right[0].get_hole_size() == 0
        assert total_area(right) + total_area(left) == pytest.approx(poly.get_area())

    def test_equation_blade(self):
        right, left = triangle().split_with(LinEquation.create(Point(0, 3), Point(4, 3)))
        assert total_area(right) + total_area(left) == pytest.approx(2.0)
        assert total_area(left) == pytest.approx(0.5)

    def test_missed(self):
        right, left = square(0, 0, 10, 10).split_with(Line(Point(20, 0), Point(20, 10)))
        assert len(right) == 0 and len(left) == 1
        assert left[0] == square(0, 0, 10, 10)

    def test_touching_corner_is_no_cut(self):
        right, left = square(0, 0, 10, 10).split_with(Line(Point(5, -5), Point(15, 5)))
        assert len(right) + len(left) == 1

    def test_zero_length(self):
        with pytest.raises(ValueError):
            square(0, 0, 10, 10).split_with(Line(Point(1, 1), Point(1, 1)))

    def test_concave(self):
        poly = Polygon([Point(0, 0), Point(10, 0), Point(10, 10), Point(8, 10), Point(8, 2), Point(2, 2),
                        Point(2, 10), Point(0, 10)])
        right, left = poly.split_with(Line(Point(-1, 5), Point(11, 5)))
        ## above the line the two prongs come out separately
        assert len(left) == 2
        assert len(right) == 1
        assert total_area(left) + total_area(right) == pytest.approx(poly.get_area())

    def test_source_unchanged(self):
        poly = square(0, 0, 10, 10)
        poly.split_with(Line(Point(0, 0), Point(10, 10)))
        assert poly == square(0, 0, 10, 10)

    def test_arc_edge(self):
        poly = bulge()
        right, left = poly.split_with(Line(Point(5, -1), Point(5, 11)))
        assert len(right) == 1 and len(left) == 1
        assert total_area(right) + total_area(left) == pytest.approx(poly.get_area())
        ## the arc stays with the piece beyond the line
        assert any(vertex.is_arc() for vertex in right[0])
        assert right[0].encloses(Point(11, 5))

    def test_circle_by_chord(self):
        poly = circle()
        assert poly.get_area() == pytest.approx(25 * PI)
        right, left = poly.split_with(Line(Point(-10, 2), Point(10, 2)))
        areas = sorted(poly.get_area() for poly in right + left)
        assert areas == pytest.approx([19.82, 58.72], abs=0.01)

    def test_crossed_hole(self):
        right, left = holed().split_with(Line(Point(5, -1), Point(5, 11)))
        assert total_area(right) == pytest.approx(42.0)
        assert total_area(left) == pytest.approx(42.0)
        ## the hole is cut open, not carried
        assert all(poly.get_hole_size() == 0 for poly in right + left)
        for poly in right + left:
            check_ids(poly)

    def test_ids_with_kept_hole(self):
        poly = square(0, 0, 10, 10)
        poly.insert_hole(square(2, 2, 4, 4))
        right, left = poly.split_with(Line(Point(5, 0), Point(5, 10)))
        assert left[0].get_hole_size() == 1
        for piece in right + left:
            check_ids(piece)


class TestSplitByPolygon:
    def test_overlapping_squares(self):
        a = square(0, 0, 4, 4)
        b = square(2, 2, 6, 6)
        assert a.overlaps(b)
        inside, outside = a.split_with(b)
        assert len(inside) == 1 and len(outside) == 1
        assert inside[0].get_area() == pytest.approx(4.0)
        assert all(inside[0].find_vertex_by_location(pt) is not None
                   for pt in (Point(2, 2), Point(4, 2), Point(4, 4), Point(2, 4)))
        assert outside[0].get_area() == pytest.approx(12.0)
        assert outside[0].position_of(Point(3, 3)) == Region.OUTSIDE
        assert outside[0].position_of(Point(1, 1)) == Region.INSIDE

    def test_disjoint(self):
        inside, outside = square(0, 0, 4, 4).split_with(square(10, 10, 12, 12))
        assert len(inside) == 0
        assert len(outside) == 1 and outside[0].get_area() == pytest.approx(16.0)

    def test_blade_encloses_target(self):
        inside, outside = square(2, 2, 4, 4).split_with(square(0, 0, 10, 10))
        assert len(inside) == 1 and len(outside) == 0
        assert inside[0].get_area() == pytest.approx(4.0)

    def test_blade_within_target(self):
        inside, outside = square(0, 0, 10, 10).split_with(square(2, 2, 4, 4))
        assert len(inside) == 1 and inside[0].get_area() == pytest.approx(4.0)
        assert len(outside) == 1
        assert outside[0].get_hole_size() == 1
        assert outside[0].get_area() == pytest.approx(96.0)

    def test_blade_with_hole(self):
        blade = square(0, 0, 10, 10)
        blade.insert_hole(square(4, 4, 6, 6))
        inside, outside = square(3, 3, 7, 7).split_with(blade)
        assert total_area(inside) == pytest.approx(12.0)
        assert total_area(outside) == pytest.approx(4.0)
        for poly in inside + outside:
            check_ids(poly)

    def test_crossed_hole(self):
        inside, outside = holed().split_with(square(5, -1, 11, 11))
        assert total_area(inside) == pytest.approx(42.0)
        assert total_area(outside) == pytest.approx(42.0)
        for poly in inside + outside:
            check_ids(poly)

    def test_arc_edge(self):
        poly = bulge()
        inside, outside = poly.split_with(square(5, -1, 15, 11))
        assert total_area(inside) + total_area(outside) == pytest.approx(poly.get_area())
        assert total_area(outside) == pytest.approx(12.5)

    def test_ids_with_blade_held(self):
        inside, outside = square(0, 0, 10, 10).split_with(square(2, 2, 4, 4))
        check_ids(outside[0])
        check_ids(inside[0])
        ## the hole takes fresh ids rather than the blade's
        outer_ids = {vertex.id for vertex in outside[0]}
        assert not outer_ids & {vertex.id for vertex in outside[0].get_hole(0)}


class TestSelfIntersection:
    def test_bowtie(self):
        pieces = bowtie().resolve_self_intersect()
        assert isinstance(pieces, PolyVector)
        assert len(pieces) == 2
        for poly in pieces:
            assert poly.is_valid() and poly.is_closed
            assert poly.get_area() == pytest.approx(4.0)
        assert any(poly.encloses(Point(2, 3.5)) for poly in pieces)
        assert any(poly.encloses(Point(2, 0.5)) for poly in pieces)

    def test_simple_polygon(self):
        assert square(0, 0, 10, 10).resolve_self_intersect() == []

    def test_with_hole(self):
        poly = bowtie()
        poly.insert_hole(square(1.5, 3, 2.5, 3.5))
        pieces = poly.resolve_self_intersect()
        assert len(pieces) == 2
        assert total_area(pieces) == pytest.approx(7.5)
        assert sum(piece.get_hole_size() for piece in pieces) == 1
        holder = next(piece for piece in pieces if piece.get_hole_size() == 1)
        assert holder.encloses(Point(2, 3.8))
        assert not holder.encloses(Point(2, 3.25))
        for piece in pieces:
            check_ids(piece)

    def test_pieces_are_numbered(self):
        for piece in bowtie().resolve_self_intersect():
            check_ids(piece)

    def test_largest(self):
        pieces = PolyVector([square(0, 0, 1, 1), square(0, 0, 3, 3), square(0, 0, 2, 2)])
        assert pieces.find_largest() == 1
        assert PolyVector().find_largest() is None


class TestEditing:
    def test_set_direction_idempotent(self):
        poly = square(0, 0, 10, 10)
        poly.insert_hole(square(2, 2, 4, 4))
        poly.set_direction(Rotation.CLOCKWISE)
        once = poly.copy()
        poly.set_direction(Rotation.CLOCKWISE)
        assert poly == once
        assert poly.get_direction() == Rotation.CLOCKWISE
        assert poly.get_hole(0).get_direction() == Rotation.CLOCKWISE

    def test_set_direction_inverts_holes(self):
        poly = square(0, 0, 10, 10)
        poly.insert_hole(square(2, 2, 4, 4))
        poly.set_direction(Rotation.CLOCKWISE, invert_hole_dir=True)
        assert poly.get_direction() == Rotation.CLOCKWISE
        assert poly.get_hole(0).get_direction() == Rotation.ANTICLOCKWISE

    def test_reverse_involution(self):
        poly = bulge()
        poly.reverse()
        assert poly[1].sweep == pytest.approx(-PI / 2)
        poly.reverse()
        assert poly == bulge()
        assert [vertex.sweep for vertex in poly] == [vertex.sweep for vertex in bulge()]

    def test_remove_duplicates(self):
        poly = Polygon([Point(0, 0), Point(0, 0), Point(4, 0), Point(4, 4), Point(4, 4 + EPS / 2), Point(0, 4),
                        Point(0, 0)])
        assert poly.remove_duplicates_2d()
        assert len(poly) == 4
        assert all(not poly[index].is_equal_2d(poly[index + 1]) for index in range(len(poly)))
        assert not poly.remove_duplicates_2d()

    def test_remove_duplicates_3d(self):
        poly = Polygon([Point(0, 0), Point(0, 0, 1), Point(4, 0), Point(4, 4)])
        assert not poly.remove_duplicates_3d()
        assert poly.remove_duplicates_2d()

    def test_optimise(self):
        poly = Polygon([Point(0, 0), Point(5, 0), Point(10, 0), Point(10, 0), Point(10, 10), Point(0, 10)])
        poly.optimise()
        assert len(poly) == 5
        poly.optimise(True)
        assert len(poly) == 4
        assert poly.get_area() == pytest.approx(100.0)

    def test_renumber(self):
        poly = square(0, 0, 10, 10)
        poly.insert_hole(square(2, 2, 4, 4))
        poly.renumber()
        ids = [vertex.id for shape in [poly] + poly.get_holes() for vertex in shape]
        assert 0 not in ids
        assert len(set(ids)) == 8
        assert poly.get_top_id() == 8
        found = poly.find_vertex_by_id(ids[5])
        assert found.part == 1 and found.vertex == 1

    def test_add_node_along(self):
        poly = square(0, 0, 10, 10)
        poly.renumber()
        node_id = poly.add_node_along(0, Point(5, 0))
        assert node_id == 5
        assert len(poly) == 5 and poly[1] == Point(5, 0)
        assert poly.add_node_along(0, Point(10, 0)) == poly[2].id
        assert poly.add_node_along(0, Point(20, 20)) == 0

    def test_add_node_along_hole(self):
        poly = square(0, 0, 10, 10)
        poly.insert_hole(square(2, 2, 4, 4))
        poly.renumber()
        assert poly.add_node_along(0, Point(5, 0)) == 9
        ## holes draw ids from the outer boundary's counter
        hole_id = poly.add_node_along(poly.get_hole(0)[0].id, Point(3, 2))
        assert hole_id == 10
        assert poly.find_vertex_by_id(hole_id).part == 1
        assert poly.get_hole(0).vert_size() == 5
        assert poly.add_node_along(0, Point(2, 3), part=1) == 11
        assert poly.get_hole(0).vert_size() == 6
        check_ids(poly)
        assert poly.get_top_id() == 11

    def test_add_node_along_arc(self):
        poly = Polygon([Point(0, 0), PolyPoint(10, 0, 0, PI)])
        ## the half circle runs below the chord
        node_id = poly.add_node_along(0, Point(5, -5))
        found = poly.find_vertex_by_id(node_id)
        assert found.vertex == 1
        assert found.point.sweep == pytest.approx(PI / 2)
        assert poly[2].sweep == pytest.approx(PI / 2)
        assert poly.get_area() == pytest.approx(PI * 25 / 2)

    def test_insert_unique_vertex(self):
        poly = square(0, 0, 10, 10)
        assert not poly.insert_unique_vertex(Point(10, 10))
        assert poly.insert_unique_vertex(Point(5, 0), 1)
        assert poly[1] == Point(5, 0)

    def test_facet(self):
        poly = bulge()
        poly.facet(0.01)
        assert not any(vertex.is_arc() for vertex in poly)
        assert len(poly) > 3
        area = poly.get_area()
        assert 50.0 < area < 50 + SEGMENT
        assert area == pytest.approx(50 + SEGMENT, abs=0.01 * 5 * math.sqrt(2) * PI / 2)
        centre, radius = Point(5, 5), 5 * math.sqrt(2)
        for index in range(1, len(poly) - 1):
            assert poly[index].length_from_2d(centre) == pytest.approx(radius)
            midpoint = (poly[index] + poly[index + 1]) / 2
            assert radius - midpoint.length_from_2d(centre) <= 0.01 + EPS

    def test_levels(self):
        poly = square(0, 0, 10, 10)
        poly.set_base_level(3.0)
        assert all(vertex.z == 3.0 for vertex in poly)
        poly.align_to(Plane.create_from_points(Point(0, 0, 0), Point(1, 0, 1), Point(0, 1, 0)))
        assert all(vertex.z == pytest.approx(vertex.x) for vertex in poly)


class TestLookup:
    def test_by_location(self):
        poly = square(0, 0, 10, 10)
        poly.insert_hole(square(2, 2, 4, 4))
        found = poly.find_vertex_by_location(Point(4, 2))
        assert found.part == 1 and found.vertex == 1
        assert poly.find_vertex_by_location(Point(5, 5)) is None

    def test_open_polyline(self):
        line = Polygon([Point(0, 0), Point(10, 0), Point(10, 10)], is_closed=False)
        assert line.get_perimeter_2d() == pytest.approx(20.0)
        assert line.add_node_along(0, Point(5, 5)) == 0
        assert line.add_node_along(0, Point(10, 5)) != 0
