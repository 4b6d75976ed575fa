import json

import pytest

from polykernel.io import SCHEMA_ID, geometry_from_json, geometry_from_xml, geometry_to_json, geometry_to_xml
from polykernel.point import Point
from polykernel.polygon import Polygon
from polykernel.polypoint import PolyPoint
from polykernel.tolerance import PI

## unit tests for polykernel io package


def _make_plate():
    poly = Polygon([Point(0, 0), Point(10, 0), PolyPoint(10, 10, 0, PI / 2), Point(0, 10)])
    poly.insert_hole(Polygon([Point(2, 2), Point(4, 2), Point(4, 4, 1.5), Point(2, 4)]))
    poly.renumber()
    return poly


def _check_plate(poly, source):
    assert poly == source
    assert poly.get_top_id() == source.get_top_id()
    assert [vertex.id for vertex in poly] == [vertex.id for vertex in source]
    assert poly[2].sweep == pytest.approx(PI / 2)
    assert poly.get_hole_size() == 1
    hole = poly.get_hole(0)
    assert hole.is_hole
    assert hole[2].z == pytest.approx(1.5)
    assert [vertex.id for vertex in hole] == [vertex.id for vertex in source.get_hole(0)]
    assert poly.get_area() == pytest.approx(source.get_area())


def test_geometry_json_roundtrip():
    plate = _make_plate()
    doc = geometry_to_json([plate, Point(1, 2, 3), PolyPoint(4, 5, 0, -PI, 7)], generator="tests")
    assert doc['schema'] == SCHEMA_ID
    assert doc['generator'] == "tests"
    assert [entry['type'] for entry in doc['entities']] == ['polygon', 'point', 'polypoint']

    # JSON encode/decode sanity
    entities = geometry_from_json(json.loads(json.dumps(doc)))
    assert len(entities) == 3
    _check_plate(entities[0], plate)
    assert type(entities[1]) is Point and entities[1] == Point(1, 2, 3)
    assert isinstance(entities[2], PolyPoint)
    assert entities[2].sweep == pytest.approx(-PI) and entities[2].id == 7


def test_geometry_json_omits_zero_fields():
    doc = geometry_to_json([Polygon([Point(0, 0), Point(1, 0), Point(0, 1)])])
    entry = doc['entities'][0]
    assert 'hole' not in entry
    assert entry['vertex'][1] == {'x': 1.0, 'y': 0.0}
    point_entry = geometry_to_json([Point(1, 2)])['entities'][0]
    assert point_entry == {'x': 1.0, 'y': 2.0, 'type': 'point'}


def test_geometry_json_rejects_bad_documents():
    with pytest.raises(ValueError):
        geometry_from_json({'schema': 'other-schema', 'entities': []})
    with pytest.raises(ValueError):
        geometry_from_json({'schema': SCHEMA_ID, 'entities': [{'type': 'spline'}]})
    with pytest.raises(ValueError):
        geometry_from_json({'schema': SCHEMA_ID, 'entities': [{'type': 'point', 'y': 1.0}]})
    with pytest.raises(ValueError):
        geometry_to_json(["not geometry"])


def test_geometry_xml_roundtrip():
    plate = _make_plate()
    text = geometry_to_xml([plate, PolyPoint(4, 5, 0, -PI, 7)])
    assert text.startswith('<geometry>')
    entities = geometry_from_xml(text)
    assert len(entities) == 2
    _check_plate(entities[0], plate)
    assert entities[1].sweep == pytest.approx(-PI) and entities[1].id == 7


def test_geometry_xml_omits_zero_fields():
    text = geometry_to_xml([Polygon([Point(0, 0), Point(1, 0), Point(0, 1)])])
    assert 'sweep=' not in text
    assert 'z=' not in text
    assert 'id=' not in text
    assert '<hole' not in text


def test_geometry_xml_rejects_bad_documents():
    with pytest.raises(ValueError):
        geometry_from_xml('<drawing><point x="1" y="2"/></drawing>')
    with pytest.raises(ValueError):
        geometry_from_xml('<geometry><spline/></geometry>')
    with pytest.raises(ValueError):
        geometry_from_xml('<geometry><point y="2"/></geometry>')


@pytest.mark.parametrize("text", [
    "",
    "<geometry><point x='1' y='2'></geometry>",
    "not xml at all",
])
def test_geometry_xml_rejects_malformed_text(text):
    with pytest.raises(ValueError, match="malformed"):
        geometry_from_xml(text)
