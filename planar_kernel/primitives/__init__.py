"""Primitive value types: positions, segments, triangles, rects, envelopes."""

from .envelope import Envelope
from .position import Coordinate, Position, PositionLike, lexicographic_key
from .rect import Rect
from .segment import IntersectionKind, PositionLocation, Segment, SegmentIntersection
from .triangle import Orientation, Triangle

__all__ = [
    "Coordinate",
    "Position",
    "PositionLike",
    "lexicographic_key",
    "Segment",
    "SegmentIntersection",
    "PositionLocation",
    "IntersectionKind",
    "Triangle",
    "Orientation",
    "Rect",
    "Envelope",
]
