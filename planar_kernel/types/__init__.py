"""Composite and multi geometries built from primitives."""

from .geometry import GEOMETRY_CLASSES, GEOMETRY_KINDS, Geometry, GeometryKind, envelope, kind_of
from .line_string import MIN_LINE_POSITIONS, MIN_RING_POSITIONS, LineString
from .multi import MultiLineString, MultiPoint, MultiPolygon
from .point import Point
from .polygon import Polygon

__all__ = [
    "Point",
    "LineString",
    "Polygon",
    "MultiPoint",
    "MultiLineString",
    "MultiPolygon",
    "Geometry",
    "GeometryKind",
    "GEOMETRY_CLASSES",
    "GEOMETRY_KINDS",
    "MIN_LINE_POSITIONS",
    "MIN_RING_POSITIONS",
    "envelope",
    "kind_of",
]
