"""On-demand topological validity checks.

Constructors only check structure (position counts, ring closure).  The
checks here are the expensive, whole-geometry ones: simple rings, holes
nested in the exterior, members of multi geometries not overlapping.  They
follow the OGC simple-feature rules; a valid line string is also simple.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import Dict, Hashable, Iterable, List, Optional, Sequence, Set, Tuple

from .algorithms import classify_rings, line_boundary, ring_relation
from .config import ValidationConfig, get_validation_config
from .logging_utils import apply_debug_logging
from .primitives import Position, Segment
from .types import LineString, MultiLineString, MultiPoint, MultiPolygon, Point, Polygon, kind_of

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidityReport:
    valid: bool
    reason: Optional[str] = None
    location: Optional[Position] = None

    def __bool__(self) -> bool:
        return self.valid

    def __str__(self) -> str:
        if self.valid:
            return "valid"
        if self.location is not None:
            return f"invalid: {self.reason} at {self.location}"
        return f"invalid: {self.reason}"


_VALID = ValidityReport(True)


def _invalid(reason: str, location: Optional[Position] = None) -> ValidityReport:
    logger.debug("validation failed: %s (location=%s)", reason, location)
    return ValidityReport(False, reason, location)


def _check_positions(positions: Iterable[Position], config: ValidationConfig) -> ValidityReport:
    if not config.require_finite:
        return _VALID
    for position in positions:
        if not position.is_finite():
            return _invalid("non-finite coordinate", position)
    return _VALID


def _collapse_repeats(vertices: Sequence[Position]) -> List[Position]:
    kept = [vertices[0]]
    for position in vertices[1:]:
        if not position == kept[-1]:
            kept.append(position)
    return kept


def _check_simple(vertices: Sequence[Position], closed: bool) -> ValidityReport:
    segments = [Segment(a, b) for a, b in zip(vertices, vertices[1:])]
    bounds = [seg.bounds() for seg in segments]
    last = len(segments) - 1
    for i, j in combinations(range(len(segments)), 2):
        if not bounds[i].intersects(bounds[j]):
            continue
        hit = segments[i].intersect_segment(segments[j])
        if hit.kind == "none":
            continue
        if hit.kind == "segment":
            return _invalid("self-intersection", hit.segment.start)
        p = hit.position
        # Neighbours share a vertex; so do the first and last segment of a loop.
        if j == i + 1 and p == segments[i].end:
            continue
        if closed and i == 0 and j == last and p == segments[i].start:
            continue
        return _invalid("self-intersection", p)
    return _VALID


def _check_line(line: LineString, config: ValidationConfig) -> ValidityReport:
    report = _check_positions(line.vertices, config)
    if not report:
        return report
    vertices = list(line.vertices)
    if config.allow_repeated_points:
        vertices = _collapse_repeats(vertices)
        if len(vertices) < 2:
            return _invalid("line string collapses to a single position", vertices[0])
    else:
        for a, b in zip(vertices, vertices[1:]):
            if a == b:
                return _invalid("repeated position", a)
    return _check_simple(vertices, line.is_closed())


def _check_ring(ring: LineString, config: ValidationConfig, label: str) -> ValidityReport:
    distinct = _collapse_repeats(list(ring.vertices))
    if len(distinct) < 4:
        return _invalid(f"{label} ring has fewer than three distinct positions", ring.start)
    report = _check_line(ring, config)
    if not report:
        return ValidityReport(False, f"{label} ring: {report.reason}", report.location)
    return report


def validate_point(point: Point, config: Optional[ValidationConfig] = None) -> ValidityReport:
    return _check_positions(point.positions(), config or get_validation_config())


def validate_multi_point(multi: MultiPoint, config: Optional[ValidationConfig] = None) -> ValidityReport:
    return _check_positions(multi.positions(), config or get_validation_config())


def validate_line_string(line: LineString, config: Optional[ValidationConfig] = None) -> ValidityReport:
    return _check_line(line, config or get_validation_config())


def _first_cut_point(touch_graph: Sequence[Tuple[int, int, List[Position]]]) -> Optional[Position]:
    """Touch point closing a cycle in the ring/touch-point graph, if any.

    Rings and touch points are the nodes; a ring is joined to every point
    where it touches another ring.  The interior is connected exactly when
    this graph is a forest.
    """

    parent: Dict[Hashable, Hashable] = {}

    def find(node: Hashable) -> Hashable:
        parent.setdefault(node, node)
        while parent[node] != node:
            parent[node] = parent[parent[node]]
            node = parent[node]
        return node

    joined: Set[Tuple[int, Position]] = set()
    for ring_a, ring_b, points in touch_graph:
        for p in points:
            for ring in (ring_a, ring_b):
                if (ring, p) in joined:
                    continue
                joined.add((ring, p))
                root_ring, root_point = find(("ring", ring)), find(("at", p))
                if root_ring == root_point:
                    return p
                parent[root_ring] = root_point
    return None


def validate_polygon(polygon: Polygon, config: Optional[ValidationConfig] = None) -> ValidityReport:
    cfg = config or get_validation_config()
    report = _check_ring(polygon.exterior, cfg, "exterior")
    if not report:
        return report
    # Ring 0 is the exterior, ring i + 1 is hole i.
    touch_graph: List[Tuple[int, int, List[Position]]] = []
    for index, hole in enumerate(polygon.holes):
        report = _check_ring(hole, cfg, f"hole {index}")
        if not report:
            return report
        relation, touches = classify_rings(polygon.exterior, hole)
        if relation != "contains":
            return _invalid(f"hole {index} is not inside the exterior", hole.start)
        touch_graph.append((0, index + 1, touches))
    for (i, first), (j, second) in combinations(enumerate(polygon.holes), 2):
        relation, touches = classify_rings(first, second)
        if relation != "separate":
            return _invalid(f"holes {i} and {j} intersect", second.start)
        touch_graph.append((i + 1, j + 1, touches))
    cut = _first_cut_point(touch_graph)
    if cut is not None:
        return _invalid("interior is disconnected", cut)
    return _VALID


def validate_multi_line_string(
    multi: MultiLineString, config: Optional[ValidationConfig] = None
) -> ValidityReport:
    cfg = config or get_validation_config()
    for line in multi.line_strings:
        report = _check_line(line, cfg)
        if not report:
            return report
    for first, second in combinations(multi.line_strings, 2):
        if not first.envelope().intersects(second.envelope()):
            continue
        # Members may only meet where both have an end point.
        shared_ends = [p for p in line_boundary([first]) if any(p == q for q in line_boundary([second]))]
        for seg_1 in first.segments():
            for seg_2 in second.segments():
                hit = seg_1.intersect_segment(seg_2)
                if hit.kind == "segment":
                    return _invalid("member line strings overlap", hit.segment.start)
                if hit.kind == "position" and not any(hit.position == p for p in shared_ends):
                    return _invalid("member line strings intersect", hit.position)
    return _VALID


def validate_multi_polygon(multi: MultiPolygon, config: Optional[ValidationConfig] = None) -> ValidityReport:
    cfg = config or get_validation_config()
    for polygon in multi.polygons:
        report = validate_polygon(polygon, cfg)
        if not report:
            return report
    for first, second in combinations(multi.polygons, 2):
        relation = ring_relation(first.exterior, second.exterior)
        if relation == "separate":
            continue
        if relation == "crosses":
            return _invalid("member polygons intersect", second.exterior.start)
        outer, inner = (first, second) if relation == "contains" else (second, first)
        # The nested polygon must sit inside exactly one hole of the outer one.
        nested = False
        for hole in outer.holes:
            hole_relation = ring_relation(inner.exterior, hole)
            if hole_relation == "separate":
                continue
            if hole_relation == "within":
                nested = True
                break
            return _invalid("member polygons intersect", inner.exterior.start)
        if not nested:
            return _invalid("member polygons intersect", inner.exterior.start)
    return _VALID


_VALIDATORS = {
    "Point": validate_point,
    "LineString": validate_line_string,
    "Polygon": validate_polygon,
    "MultiPoint": validate_multi_point,
    "MultiLineString": validate_multi_line_string,
    "MultiPolygon": validate_multi_polygon,
}


def validate(geometry, config: Optional[ValidationConfig] = None) -> ValidityReport:
    """Return a :class:`ValidityReport` describing the first rule ``geometry`` breaks."""

    return _VALIDATORS[kind_of(geometry)](geometry, config)


def is_valid(geometry, config: Optional[ValidationConfig] = None) -> bool:
    return validate(geometry, config).valid


def is_simple(line: LineString) -> bool:
    """True when the line string never touches itself except at a loop's closing vertex."""

    if any(a == b for a, b in zip(line.vertices, line.vertices[1:])):
        return False
    return _check_simple(list(line.vertices), line.is_closed()).valid


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "ValidityReport",
    "validate",
    "is_valid",
    "is_simple",
    "validate_point",
    "validate_multi_point",
    "validate_line_string",
    "validate_polygon",
    "validate_multi_line_string",
    "validate_multi_polygon",
]
