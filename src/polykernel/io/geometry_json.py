"""Geometry JSON serialization/deserialization helpers.

Documents are plain dictionaries (ready for :func:`json.dumps`)::

    {"schema": "polykernel-geometry-json-v0.1",
     "entities": [{"type": "polygon", "topID": 4,
                   "vertex": [{"x": 0.0, "y": 0.0, "id": 1}, ...],
                   "hole": [{"topID": 4, "vertex": [...]}]}]}

Coordinates ``x`` and ``y`` are always written; ``z``, ``sweep`` and
``id`` are left out when zero.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Union

from polykernel.point import Point
from polykernel.polygon import Polygon
from polykernel.polypoint import PolyPoint

SCHEMA_ID = "polykernel-geometry-json-v0.1"

Entity = Union[Point, PolyPoint, Polygon]


def _point_fields(pt: Point) -> Dict[str, Any]:
    fields: Dict[str, Any] = {"x": float(pt.x), "y": float(pt.y)}
    if pt.z != 0.0:
        fields["z"] = float(pt.z)
    if isinstance(pt, PolyPoint):
        if pt.sweep != 0.0:
            fields["sweep"] = float(pt.sweep)
        if pt.id != 0:
            fields["id"] = int(pt.id)
    return fields


def _serialize_polygon(poly: Polygon) -> Dict[str, Any]:
    entry: Dict[str, Any] = {
        "topID": poly.get_top_id(),
        "vertex": [_point_fields(vertex) for vertex in poly],
    }
    holes = poly.get_holes()
    if holes:
        entry["hole"] = [_serialize_polygon(hole) for hole in holes]
    return entry


def serialize_entity(entity: Entity) -> Dict[str, Any]:
    """Return the tagged dictionary of a single point, vertex or polygon."""
    if isinstance(entity, Polygon):
        entry = _serialize_polygon(entity)
        entry["type"] = "polygon"
        return entry
    if isinstance(entity, PolyPoint):
        entry = _point_fields(entity)
        entry["type"] = "polypoint"
        return entry
    if isinstance(entity, Point):
        entry = _point_fields(entity)
        entry["type"] = "point"
        return entry
    raise ValueError("unsupported entity type for serialization")


def geometry_to_json(entities: Iterable[Entity], *, generator: Optional[str] = None) -> Dict[str, Any]:
    """Serialize points, vertices and polygons into a geometry JSON document."""
    doc: Dict[str, Any] = {
        "schema": SCHEMA_ID,
        "entities": [serialize_entity(entity) for entity in entities],
    }
    if generator:
        doc["generator"] = generator
    return doc


def _rehydrate_point(entry: Dict[str, Any]) -> Point:
    try:
        return Point(float(entry["x"]), float(entry["y"]), float(entry.get("z", 0.0)))
    except KeyError as exc:
        raise ValueError(f"point missing coordinate {exc}") from exc


def _rehydrate_polypoint(entry: Dict[str, Any]) -> PolyPoint:
    return PolyPoint.from_point(_rehydrate_point(entry), float(entry.get("sweep", 0.0)), int(entry.get("id", 0)))


def _rehydrate_polygon(entry: Dict[str, Any], is_hole: bool = False) -> Polygon:
    poly = Polygon([_rehydrate_polypoint(vertex) for vertex in entry.get("vertex", [])], is_hole=is_hole)
    poly.set_top_id(int(entry.get("topID", 0)))
    poly.set_holes([_rehydrate_polygon(hole, True) for hole in entry.get("hole", [])])
    return poly


def deserialize_entity(entry: Dict[str, Any]) -> Entity:
    kind = entry.get("type")
    if kind == "polygon":
        return _rehydrate_polygon(entry)
    if kind == "polypoint":
        return _rehydrate_polypoint(entry)
    if kind == "point":
        return _rehydrate_point(entry)
    raise ValueError(f"unsupported entity type: {kind}")


def geometry_from_json(doc: Dict[str, Any]) -> List[Entity]:
    """Deserialize a geometry JSON document into points, vertices and polygons."""
    if doc.get("schema") != SCHEMA_ID:
        raise ValueError(f"unsupported geometry schema: {doc.get('schema')}")
    return [deserialize_entity(entry) for entry in doc.get("entities", [])]


__all__ = [
    "SCHEMA_ID",
    "serialize_entity",
    "deserialize_entity",
    "geometry_to_json",
    "geometry_from_json",
]
