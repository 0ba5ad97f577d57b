"""The closed set of geometry kinds."""

from __future__ import annotations

from typing import Dict, Literal, Tuple, Type, Union

from ..primitives import Envelope
from .line_string import LineString
from .multi import MultiLineString, MultiPoint, MultiPolygon
from .point import Point
from .polygon import Polygon

GeometryKind = Literal[
    "Point",
    "LineString",
    "Polygon",
    "MultiPoint",
    "MultiLineString",
    "MultiPolygon",
]

Geometry = Union[Point, LineString, Polygon, MultiPoint, MultiLineString, MultiPolygon]

GEOMETRY_CLASSES: Tuple[Type, ...] = (
    Point,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
)

GEOMETRY_KINDS: Tuple[GeometryKind, ...] = tuple(cls.kind for cls in GEOMETRY_CLASSES)  # type: ignore[assignment]

_CLASS_BY_KIND: Dict[str, Type] = {cls.kind: cls for cls in GEOMETRY_CLASSES}


def kind_of(geometry: object) -> GeometryKind:
    """Return the kind tag of ``geometry``; reject anything outside the closed set."""

    kind = getattr(type(geometry), "kind", None)
    if kind not in _CLASS_BY_KIND or not isinstance(geometry, _CLASS_BY_KIND[kind]):
        raise TypeError(f"unsupported geometry type: {type(geometry).__name__}")
    return kind  # type: ignore[return-value]


def envelope(geometry: Geometry) -> Envelope:
    kind_of(geometry)
    return geometry.envelope()


__all__ = [
    "Geometry",
    "GeometryKind",
    "GEOMETRY_CLASSES",
    "GEOMETRY_KINDS",
    "kind_of",
    "envelope",
]
