"""Spatial predicates over every pair of geometry kinds.

``intersects`` and ``contains`` are dispatched through tables keyed by the
``(kind, kind)`` pair.  Each call first compares envelopes, which is a
necessary condition only, and then runs an exact test.

``contains`` is boundary-inclusive: ``contains(a, b)`` holds when every point
of ``b`` lies in ``a`` or on its boundary, so a polygon contains the points
of its own outline.  A point inside a hole is not contained.  Anything with
an empty envelope (an empty multi geometry) is neither contained nor
intersecting.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Literal, Sequence, Tuple

import numpy as np

from .algorithms import Location, locate_in_points, locate_in_polygon, locate_in_polygons, locate_on_lines
from .logging_utils import apply_debug_logging
from .primitives import Position, PositionLike, Segment
from .types import (
    GEOMETRY_KINDS,
    Geometry,
    GeometryKind,
    LineString,
    MultiLineString,
    MultiPolygon,
    Polygon,
    kind_of,
)

logger = logging.getLogger(__name__)

Family = Literal["puntal", "lineal", "polygonal"]
Predicate = Callable[[Geometry, Geometry], bool]

_FAMILY: Dict[str, Family] = {
    "Point": "puntal",
    "MultiPoint": "puntal",
    "LineString": "lineal",
    "MultiLineString": "lineal",
    "Polygon": "polygonal",
    "MultiPolygon": "polygonal",
}


def _points(geometry: Geometry) -> List[Position]:
    return list(geometry.positions())


def _lines(geometry: Geometry) -> List[LineString]:
    if isinstance(geometry, MultiLineString):
        return list(geometry.line_strings)
    return [geometry]  # type: ignore[list-item]


def _polygons(geometry: Geometry) -> List[Polygon]:
    if isinstance(geometry, MultiPolygon):
        return list(geometry.polygons)
    return [geometry]  # type: ignore[list-item]


def _segments(lines: Sequence[LineString]) -> List[Segment]:
    return [seg for line in lines for seg in line.segments()]


def _boundary_segments(polygons: Sequence[Polygon]) -> List[Segment]:
    return [seg for polygon in polygons for ring in polygon.rings() for seg in ring.segments()]


def _any_segments_meet(first: Sequence[Segment], second: Sequence[Segment]) -> bool:
    second_bounds = [seg.bounds() for seg in second]
    for seg_a in first:
        bounds_a = seg_a.bounds()
        for seg_b, bounds_b in zip(second, second_bounds):
            if bounds_a.intersects(bounds_b) and seg_a.intersects_segment(seg_b):
                return True
    return False


def _split_probes(seg: Segment, cutters: Sequence[Segment]) -> List[Position]:
    """Positions that decide on which side of ``cutters`` the segment runs.

    The segment is cut at every point it shares with ``cutters``; between two
    consecutive cuts it cannot change side, so its end points plus one
    midpoint per piece are enough.  Pieces running along a cutter are on the
    boundary by construction and get no probe.
    """

    if seg.is_degenerate():
        return [seg.start]
    cuts = {0.0, 1.0}
    along: List[Tuple[float, float]] = []
    bounds = seg.bounds()
    for cutter in cutters:
        if not bounds.intersects(cutter.bounds()):
            continue
        hit = seg.intersect_segment(cutter)
        if hit.kind == "position":
            cuts.add(seg.parameter_of(hit.position))
        elif hit.kind == "segment":
            t0 = seg.parameter_of(hit.segment.start)
            t1 = seg.parameter_of(hit.segment.end)
            cuts.update((t0, t1))
            along.append((min(t0, t1), max(t0, t1)))

    ordered = sorted(t for t in cuts if 0.0 <= t <= 1.0)
    probes = [seg.start, seg.end]
    direction = seg.vector
    for lo, hi in zip(ordered, ordered[1:]):
        if any(a <= lo and hi <= b for a, b in along):
            continue
        probes.append(seg.start + direction * ((lo + hi) * 0.5))
    return probes


def _line_in_area(segments: Sequence[Segment], polygons: Sequence[Polygon]) -> bool:
    cutters = _boundary_segments(polygons)
    for seg in segments:
        for probe in _split_probes(seg, cutters):
            if locate_in_polygons(probe, polygons) == "exterior":
                return False
    return True


def _segment_covered(seg: Segment, cover: Sequence[Segment]) -> bool:
    """True when the union of ``cover`` contains the whole of ``seg``."""

    if seg.is_degenerate():
        return any(c.contains_position(seg.start) for c in cover)
    spans: List[Tuple[float, float]] = []
    bounds = seg.bounds()
    for other in cover:
        if not bounds.intersects(other.bounds()):
            continue
        hit = seg.intersect_segment(other)
        if hit.kind == "segment":
            t0 = seg.parameter_of(hit.segment.start)
            t1 = seg.parameter_of(hit.segment.end)
            spans.append((min(t0, t1), max(t0, t1)))
    spans.sort()
    reached = 0.0
    for lo, hi in spans:
        if lo > reached:
            return False
        reached = max(reached, hi)
        if reached >= 1.0:
            return True
    return False


def _polygon_covers_polygon(outer: Polygon, inner: Polygon) -> bool:
    if not outer.envelope().contains(inner.envelope()):
        return False
    if not _line_in_area(list(inner.exterior.segments()), [outer]):
        return False
    # With the outline inside, only a hole of ``outer`` can still poke into ``inner``.
    inner_cutters = _boundary_segments([inner])
    for hole in outer.holes:
        if not hole.envelope().intersects(inner.envelope()):
            continue
        for seg in hole.segments():
            for probe in _split_probes(seg, inner_cutters):
                if locate_in_polygon(probe, inner) == "interior":
                    return False
        sample = Polygon(hole).representative_point()
        if sample is not None and locate_in_polygon(sample, inner) == "interior":
            return False
    return True


# -- intersects, per family pair ---------------------------------------------


def _puntal_intersects_puntal(a: Geometry, b: Geometry) -> bool:
    points_b = _points(b)
    return any(locate_in_points(p, points_b) != "exterior" for p in _points(a))


def _puntal_intersects_lineal(a: Geometry, b: Geometry) -> bool:
    segments = _segments(_lines(b))
    return any(seg.contains_position(p) for p in _points(a) for seg in segments)


def _puntal_intersects_polygonal(a: Geometry, b: Geometry) -> bool:
    polygons = _polygons(b)
    return any(locate_in_polygons(p, polygons) != "exterior" for p in _points(a))


def _lineal_intersects_lineal(a: Geometry, b: Geometry) -> bool:
    return _any_segments_meet(_segments(_lines(a)), _segments(_lines(b)))


def _lineal_intersects_polygonal(a: Geometry, b: Geometry) -> bool:
    lines = _lines(a)
    polygons = _polygons(b)
    if _any_segments_meet(_segments(lines), _boundary_segments(polygons)):
        return True
    # No boundary contact: each line is wholly inside or wholly outside.
    return any(locate_in_polygons(line.start, polygons) != "exterior" for line in lines)


def _polygonal_intersects_polygonal(a: Geometry, b: Geometry) -> bool:
    for first in _polygons(a):
        for second in _polygons(b):
            if not first.envelope().intersects(second.envelope()):
                continue
            if _any_segments_meet(_boundary_segments([first]), _boundary_segments([second])):
                return True
            if locate_in_polygon(first.exterior.start, second) != "exterior":
                return True
            if locate_in_polygon(second.exterior.start, first) != "exterior":
                return True
    return False


def _swap(predicate: Predicate) -> Predicate:
    def swapped(a: Geometry, b: Geometry) -> bool:
        return predicate(b, a)

    swapped.__name__ = f"{predicate.__name__}_swapped"
    return swapped


_INTERSECTS_BY_FAMILY: Dict[Tuple[Family, Family], Predicate] = {
    ("puntal", "puntal"): _puntal_intersects_puntal,
    ("puntal", "lineal"): _puntal_intersects_lineal,
    ("puntal", "polygonal"): _puntal_intersects_polygonal,
    ("lineal", "puntal"): _swap(_puntal_intersects_lineal),
    ("lineal", "lineal"): _lineal_intersects_lineal,
    ("lineal", "polygonal"): _lineal_intersects_polygonal,
    ("polygonal", "puntal"): _swap(_puntal_intersects_polygonal),
    ("polygonal", "lineal"): _swap(_lineal_intersects_polygonal),
    ("polygonal", "polygonal"): _polygonal_intersects_polygonal,
}


# -- contains (boundary-inclusive), per family pair --------------------------


def _collapsed_into_points(b: Geometry, points_a: Sequence[Position]) -> bool:
    # A line or area is inside a finite point set only if it degenerates to those points.
    for seg in _all_segments(b):
        if not seg.is_degenerate() or locate_in_points(seg.start, points_a) == "exterior":
            return False
    return True


def _all_segments(geometry: Geometry) -> List[Segment]:
    if _FAMILY[kind_of(geometry)] == "polygonal":
        return _boundary_segments(_polygons(geometry))
    return _segments(_lines(geometry))


def _puntal_contains_puntal(a: Geometry, b: Geometry) -> bool:
    points_a = _points(a)
    return all(locate_in_points(p, points_a) != "exterior" for p in _points(b))


def _puntal_contains_other(a: Geometry, b: Geometry) -> bool:
    return _collapsed_into_points(b, _points(a))


def _lineal_contains_puntal(a: Geometry, b: Geometry) -> bool:
    lines = _lines(a)
    return all(locate_on_lines(p, lines) != "exterior" for p in _points(b))


def _lineal_contains_lineal(a: Geometry, b: Geometry) -> bool:
    cover = _segments(_lines(a))
    return all(_segment_covered(seg, cover) for seg in _segments(_lines(b)))


def _lineal_contains_polygonal(a: Geometry, b: Geometry) -> bool:
    # Only a polygon without area can lie on a line.
    if any(polygon.area() != 0 for polygon in _polygons(b)):
        return False
    cover = _segments(_lines(a))
    return all(_segment_covered(seg, cover) for seg in _boundary_segments(_polygons(b)))


def _polygonal_contains_puntal(a: Geometry, b: Geometry) -> bool:
    polygons = _polygons(a)
    return all(locate_in_polygons(p, polygons) != "exterior" for p in _points(b))


def _polygonal_contains_lineal(a: Geometry, b: Geometry) -> bool:
    return _line_in_area(_segments(_lines(b)), _polygons(a))


def _polygonal_contains_polygonal(a: Geometry, b: Geometry) -> bool:
    # Members of a valid multipolygon only touch at points, so a connected
    # polygon inside their union is inside one of them.
    outers = _polygons(a)
    return all(any(_polygon_covers_polygon(outer, inner) for outer in outers) for inner in _polygons(b))


_CONTAINS_BY_FAMILY: Dict[Tuple[Family, Family], Predicate] = {
    ("puntal", "puntal"): _puntal_contains_puntal,
    ("puntal", "lineal"): _puntal_contains_other,
    ("puntal", "polygonal"): _puntal_contains_other,
    ("lineal", "puntal"): _lineal_contains_puntal,
    ("lineal", "lineal"): _lineal_contains_lineal,
    ("lineal", "polygonal"): _lineal_contains_polygonal,
    ("polygonal", "puntal"): _polygonal_contains_puntal,
    ("polygonal", "lineal"): _polygonal_contains_lineal,
    ("polygonal", "polygonal"): _polygonal_contains_polygonal,
}


def _kind_table(by_family: Dict[Tuple[Family, Family], Predicate]) -> Dict[Tuple[str, str], Predicate]:
    return {(ka, kb): by_family[(_FAMILY[ka], _FAMILY[kb])] for ka in GEOMETRY_KINDS for kb in GEOMETRY_KINDS}


_INTERSECTS: Dict[Tuple[str, str], Predicate] = _kind_table(_INTERSECTS_BY_FAMILY)
_CONTAINS: Dict[Tuple[str, str], Predicate] = _kind_table(_CONTAINS_BY_FAMILY)


# -- public API --------------------------------------------------------------


def locate_position(position: PositionLike, geometry: Geometry) -> Location:
    """Return ``"interior"``, ``"boundary"`` or ``"exterior"`` for ``position``."""

    p = Position.coerce(position)
    family = _FAMILY[kind_of(geometry)]
    if family == "puntal":
        return locate_in_points(p, _points(geometry))
    if family == "lineal":
        return locate_on_lines(p, _lines(geometry))
    return locate_in_polygons(p, _polygons(geometry))


def intersects(a: Geometry, b: Geometry) -> bool:
    """True when ``a`` and ``b`` share at least one point (boundaries included)."""

    key: Tuple[GeometryKind, GeometryKind] = (kind_of(a), kind_of(b))
    if not a.envelope().intersects(b.envelope()):
        return False
    return _INTERSECTS[key](a, b)


def contains(a: Geometry, b: Geometry) -> bool:
    """True when every point of ``b`` lies in ``a`` or on its boundary."""

    key: Tuple[GeometryKind, GeometryKind] = (kind_of(a), kind_of(b))
    if not a.envelope().contains(b.envelope()):
        return False
    return _CONTAINS[key](a, b)


def disjoint(a: Geometry, b: Geometry) -> bool:
    return not intersects(a, b)


def within(a: Geometry, b: Geometry) -> bool:
    return contains(b, a)


def contains_positions(geometry: Geometry, coords) -> np.ndarray:
    """Boolean mask telling which rows of an ``(n, 2)`` array ``geometry`` contains.

    Rows outside the envelope are rejected in one vectorised pass; the
    remaining rows are located one by one.
    """

    arr = np.asarray(coords, dtype=float).reshape(-1, 2)
    result = np.zeros(arr.shape[0], dtype=bool)
    rect = geometry.envelope().rect
    if rect is None:
        return result
    candidates = (
        (arr[:, 0] >= rect.min_x)
        & (arr[:, 0] <= rect.max_x)
        & (arr[:, 1] >= rect.min_y)
        & (arr[:, 1] <= rect.max_y)
    )
    for index in np.flatnonzero(candidates):
        position = Position(arr[index, 0], arr[index, 1])
        result[index] = locate_position(position, geometry) != "exterior"
    logger.debug("contains_positions: %d of %d candidates inside", int(result.sum()), int(candidates.sum()))
    return result


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "Location",
    "locate_position",
    "intersects",
    "contains",
    "disjoint",
    "within",
    "contains_positions",
]
