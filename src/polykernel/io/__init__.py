"""Serialisation of points and polygons for polykernel."""

from .geometry_json import SCHEMA_ID, geometry_from_json, geometry_to_json
from .geometry_xml import geometry_from_xml, geometry_to_xml

__all__ = ['SCHEMA_ID', 'geometry_to_json', 'geometry_from_json', 'geometry_to_xml', 'geometry_from_xml']
