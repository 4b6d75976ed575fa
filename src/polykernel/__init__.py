# -*- coding: utf-8 -*-
"""polykernel: 2D/3D geometry with arc-edged polygons, holes and polygon cutting."""

import logging as _logging

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("polykernel")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from polykernel.arc import Arc
from polykernel.box import Anchor2D, Box
from polykernel.faceter import Faceter
from polykernel.leveller import Leveller
from polykernel.line import Line
from polykernel.linequation import LinEquation
from polykernel.matrix import Matrix3x3, Matrix4x4
from polykernel.plane import Plane
from polykernel.point import Point
from polykernel.polyedge import PolyEdge
from polykernel.polygon import Polygon, PolyVector
from polykernel.polypoint import PolyPoint
from polykernel.position import Face, Position, Region, Rotation, Side
from polykernel.rotater import XRotater, YRotater, ZRotater
from polykernel.tolerance import EPS, EPS_ANGLE
from polykernel.vector import Vector3, Vector4
from polykernel.xlist import Role, XInfo, XList, XPoint

__all__ = [
    "__version__",
    "Anchor2D", "Arc", "Box", "EPS", "EPS_ANGLE", "Face", "Faceter", "Leveller", "Line", "LinEquation",
    "Matrix3x3", "Matrix4x4", "Plane", "Point", "PolyEdge", "Polygon", "PolyPoint", "PolyVector",
    "Position", "Region", "Role", "Rotation", "Side", "Vector3", "Vector4", "XInfo", "XList", "XPoint",
    "XRotater", "YRotater", "ZRotater",
]
