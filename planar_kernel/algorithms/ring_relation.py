"""Relation between two closed rings, used by polygon validation."""

from __future__ import annotations

import logging
from typing import List, Literal, Sequence, Tuple

from ..primitives import Position
from ..types import LineString
from .locate import locate_in_ring

logger = logging.getLogger(__name__)

RingRelation = Literal["separate", "contains", "within", "crosses"]
_Side = Literal["outside", "inside", "crosses"]


def _probe_positions(ring: LineString) -> List[Position]:
    # Midpoints settle rings whose every vertex sits on the other boundary.
    return list(ring.vertices[:-1]) + [seg.midpoint for seg in ring.segments()]


def _side_of(probes: Sequence[Position], touches: List[Position], other: LineString) -> _Side:
    outside = inside = False
    for vertex in probes:
        if any(vertex == t for t in touches):
            continue
        where = locate_in_ring(vertex, other)
        if where == "boundary":
            continue
        if where == "interior":
            inside = True
        else:
            outside = True
        if inside and outside:
            return "crosses"
    # A ring touching the other at every vertex counts as outside.
    return "inside" if inside else "outside"


def classify_rings(ring_1: LineString, ring_2: LineString) -> Tuple[RingRelation, List[Position]]:
    """Classify how ``ring_1`` relates to ``ring_2`` and list where they touch.

    * ``separate``: each ring lies outside the other, except for finitely many
      touching points.
    * ``contains``: ``ring_2`` lies inside ``ring_1`` (touching points allowed).
    * ``within``: ``ring_1`` lies inside ``ring_2``.
    * ``crosses``: the rings share a stretch of boundary, or each has parts
      on both sides of the other.

    The touch points are distinct and in discovery order; they are only
    complete when the relation is not ``crosses``.  Both rings must be
    closed; the result is meaningless otherwise.
    """

    touches: List[Position] = []
    if not ring_1.envelope().intersects(ring_2.envelope()):
        return "separate", touches

    segments_2 = list(ring_2.segments())
    for seg_1 in ring_1.segments():
        bounds_1 = seg_1.bounds()
        for seg_2 in segments_2:
            if not bounds_1.intersects(seg_2.bounds()):
                continue
            hit = seg_1.intersect_segment(seg_2)
            if hit.kind == "segment":
                return "crosses", touches
            if hit.kind == "position":
                p = hit.position
                if not any(p == q for q in (seg_1.start, seg_1.end, seg_2.start, seg_2.end)):
                    return "crosses", touches
                if not any(p == t for t in touches):
                    touches.append(p)

    side_1 = _side_of(_probe_positions(ring_1), touches, ring_2)
    if side_1 == "crosses":
        return "crosses", touches
    side_2 = _side_of(_probe_positions(ring_2), touches, ring_1)
    if side_2 == "crosses":
        return "crosses", touches

    if side_1 == "outside" and side_2 == "outside":
        return "separate", touches
    if side_1 == "inside" and side_2 == "outside":
        return "within", touches
    if side_1 == "outside" and side_2 == "inside":
        return "contains", touches
    logger.debug("rings found inside each other; treating as crossing")
    return "crosses", touches


def ring_relation(ring_1: LineString, ring_2: LineString) -> RingRelation:
    """Relation of ``ring_1`` to ``ring_2``; see :func:`classify_rings`."""

    return classify_rings(ring_1, ring_2)[0]


__all__ = ["RingRelation", "classify_rings", "ring_relation"]
