"""Exact point location and ring relations shared by validation and predicates."""

from .locate import (
    Location,
    line_boundary,
    locate_in_points,
    locate_in_polygon,
    locate_in_polygons,
    locate_in_ring,
    locate_on_lines,
)
from .ring_relation import RingRelation, classify_rings, ring_relation

__all__ = [
    "Location",
    "line_boundary",
    "locate_in_points",
    "locate_in_polygon",
    "locate_in_polygons",
    "locate_in_ring",
    "locate_on_lines",
    "RingRelation",
    "classify_rings",
    "ring_relation",
]
