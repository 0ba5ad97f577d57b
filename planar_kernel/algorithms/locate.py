"""Exact location of a position relative to rings, lines and polygons."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Literal, Sequence

from ..primitives import Position
from ..types import LineString, Polygon

Location = Literal["interior", "boundary", "exterior"]


def locate_in_ring(position: Position, ring: LineString) -> Location:
    """Winding-number location of ``position`` against the area bounded by ``ring``.

    ``ring`` is assumed closed; for an open path the answer is meaningless.
    """

    winding = 0
    for seg in ring.segments():
        a, b = seg.start, seg.end
        # Only segments level with the position, reaching to its right, matter.
        if position.y < min(a.y, b.y) or position.y > max(a.y, b.y) or position.x > max(a.x, b.x):
            continue
        if seg.contains_position(position):
            return "boundary"
        winding += seg.winding_contribution(position)
    return "interior" if winding != 0 else "exterior"


def locate_in_polygon(position: Position, polygon: Polygon) -> Location:
    """Location against a polygon; a position inside a hole is exterior."""

    if not polygon.envelope().contains_position(position):
        return "exterior"
    where = locate_in_ring(position, polygon.exterior)
    if where != "interior":
        return where
    for hole in polygon.holes:
        in_hole = locate_in_ring(position, hole)
        if in_hole == "interior":
            return "exterior"
        if in_hole == "boundary":
            return "boundary"
    return "interior"


def locate_in_polygons(position: Position, polygons: Iterable[Polygon]) -> Location:
    result: Location = "exterior"
    for polygon in polygons:
        where = locate_in_polygon(position, polygon)
        if where == "interior":
            return where
        if where == "boundary":
            result = where
    return result


def line_boundary(lines: Sequence[LineString]) -> List[Position]:
    """End points of open lines occurring an odd number of times (mod-2 rule)."""

    counts: Counter = Counter()
    for line in lines:
        if line.is_closed():
            continue
        counts[line.start] += 1
        counts[line.end] += 1
    return [p for p, n in counts.items() if n % 2 == 1]


def locate_on_lines(position: Position, lines: Sequence[LineString]) -> Location:
    on_line = False
    for line in lines:
        if not line.envelope().contains_position(position):
            continue
        if any(seg.contains_position(position) for seg in line.segments()):
            on_line = True
            break
    if not on_line:
        return "exterior"
    if any(position == p for p in line_boundary(lines)):
        return "boundary"
    return "interior"


def locate_in_points(position: Position, points: Iterable[Position]) -> Location:
    return "interior" if any(position == p for p in points) else "exterior"


__all__ = [
    "Location",
    "locate_in_ring",
    "locate_in_polygon",
    "locate_in_polygons",
    "locate_on_lines",
    "locate_in_points",
    "line_boundary",
]
