"""Attribute-valued XML envelope for points and polygons.

A polygon is written as::

    <polygon topID="4">
      <vertex x="0.0" y="0.0" id="1"/>
      ...
      <hole topID="4"><vertex .../>...</hole>
    </polygon>

with the same omission rules as the JSON envelope: ``z``, ``sweep`` and
``id`` only appear when non-zero.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Iterable, List, Union

from polykernel.point import Point
from polykernel.polygon import Polygon
from polykernel.polypoint import PolyPoint

ROOT_TAG = "geometry"

Entity = Union[Point, PolyPoint, Polygon]


def _set_point_attributes(element: ET.Element, pt: Point):
    element.set("x", repr(float(pt.x)))
    element.set("y", repr(float(pt.y)))
    if pt.z != 0.0:
        element.set("z", repr(float(pt.z)))
    if isinstance(pt, PolyPoint):
        if pt.sweep != 0.0:
            element.set("sweep", repr(float(pt.sweep)))
        if pt.id != 0:
            element.set("id", str(int(pt.id)))


def _fill_polygon(element: ET.Element, poly: Polygon):
    element.set("topID", str(poly.get_top_id()))
    for vertex in poly:
        _set_point_attributes(ET.SubElement(element, "vertex"), vertex)
    for hole in poly.get_holes():
        _fill_polygon(ET.SubElement(element, "hole"), hole)


def entity_to_element(entity: Entity) -> ET.Element:
    if isinstance(entity, Polygon):
        element = ET.Element("polygon")
        _fill_polygon(element, entity)
    elif isinstance(entity, PolyPoint):
        element = ET.Element("polypoint")
        _set_point_attributes(element, entity)
    elif isinstance(entity, Point):
        element = ET.Element("point")
        _set_point_attributes(element, entity)
    else:
        raise ValueError("unsupported entity type for serialization")
    return element


def geometry_to_xml(entities: Iterable[Entity]) -> str:
    """Return an XML document holding ``entities``."""
    root = ET.Element(ROOT_TAG)
    for entity in entities:
        root.append(entity_to_element(entity))
    return ET.tostring(root, encoding="unicode")


def _read_point(element: ET.Element) -> Point:
    try:
        return Point(float(element.attrib["x"]), float(element.attrib["y"]), float(element.get("z", 0.0)))
    except KeyError as exc:
        raise ValueError(f"<{element.tag}> missing attribute {exc}") from exc


def _read_polypoint(element: ET.Element) -> PolyPoint:
    return PolyPoint.from_point(_read_point(element), float(element.get("sweep", 0.0)), int(element.get("id", 0)))


def _read_polygon(element: ET.Element, is_hole: bool = False) -> Polygon:
    poly = Polygon([_read_polypoint(child) for child in element.findall("vertex")], is_hole=is_hole)
    poly.set_top_id(int(element.get("topID", 0)))
    poly.set_holes([_read_polygon(child, True) for child in element.findall("hole")])
    return poly


def element_to_entity(element: ET.Element) -> Entity:
    if element.tag == "polygon":
        return _read_polygon(element)
    if element.tag == "polypoint":
        return _read_polypoint(element)
    if element.tag == "point":
        return _read_point(element)
    raise ValueError(f"unsupported element <{element.tag}>")


def geometry_from_xml(text: str) -> List[Entity]:
    """Parse a document written by :func:`geometry_to_xml`."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise ValueError(f"malformed geometry document: {exc}") from exc
    if root.tag != ROOT_TAG:
        raise ValueError(f"unsupported geometry document <{root.tag}>")
    return [element_to_entity(child) for child in root]


__all__ = [
    "entity_to_element",
    "element_to_entity",
    "geometry_to_xml",
    "geometry_from_xml",
]
