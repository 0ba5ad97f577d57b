"""Polygons: an exterior ring plus zero or more hole rings.

Only structural checks (ring size and closure) happen here.  Whether the
holes really sit inside the exterior, or the rings are simple, is left to
:func:`planar_kernel.validation.validate`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from ..primitives import Envelope, Position, PositionLike
from .line_string import LineString, check_ring

RingLike = Union[LineString, Sequence[PositionLike]]


def _as_ring(ring: RingLike) -> LineString:
    if isinstance(ring, LineString):
        check_ring(ring.vertices)
        return ring
    return LineString.ring(ring)


@dataclass(frozen=True)
class Polygon:
    exterior: LineString
    holes: Tuple[LineString, ...] = ()

    kind: ClassVar[str] = "Polygon"
    geometry_type: ClassVar[str] = "Polygon"
    dimension: ClassVar[int] = 2

    def __post_init__(self) -> None:
        object.__setattr__(self, "exterior", _as_ring(self.exterior))
        object.__setattr__(self, "holes", tuple(_as_ring(h) for h in self.holes))

    @classmethod
    def from_coords(
        cls,
        exterior: Sequence[PositionLike],
        holes: Iterable[Sequence[PositionLike]] = (),
    ) -> "Polygon":
        return cls(LineString.ring(exterior), tuple(LineString.ring(h) for h in holes))

    def rings(self) -> Iterator[LineString]:
        yield self.exterior
        yield from self.holes

    def positions(self) -> Iterator[Position]:
        for ring in self.rings():
            yield from ring.vertices

    def is_empty(self) -> bool:
        return False

    def envelope(self) -> Envelope:
        # Holes of a valid polygon lie inside the exterior.
        return self.exterior.envelope()

    def area(self) -> float:
        return abs(self.exterior.signed_area()) - sum(abs(h.signed_area()) for h in self.holes)

    def perimeter(self) -> float:
        return sum(ring.length() for ring in self.rings())

    def oriented(self, ccw_exterior: bool = True) -> "Polygon":
        """Copy with the exterior wound one way and the holes the other."""

        def wind(ring: LineString, ccw: bool) -> LineString:
            return ring if ring.is_ccw() == ccw else ring.reversed()

        return Polygon(
            wind(self.exterior, ccw_exterior),
            tuple(wind(h, not ccw_exterior) for h in self.holes),
        )

    def translate(self, dx: float, dy: float) -> "Polygon":
        return Polygon(self.exterior.translate(dx, dy), tuple(h.translate(dx, dy) for h in self.holes))

    def scale(
        self, fx: float, fy: Optional[float] = None, origin: Optional[PositionLike] = None
    ) -> "Polygon":
        return Polygon(
            self.exterior.scale(fx, fy, origin),
            tuple(h.scale(fx, fy, origin) for h in self.holes),
        )

    def representative_point(self) -> Optional[Position]:
        """A position in the interior of the polygon, or ``None`` when it has no height.

        A horizontal scan line is placed in the widest gap between vertex
        ordinates, so it never passes through a vertex; the widest interval
        between consecutive boundary crossings (even-odd) is halved.
        """

        ys = sorted({p.y for p in self.positions()})
        if len(ys) < 2:
            return None
        gaps = [(ys[i + 1] - ys[i], i) for i in range(len(ys) - 1)]
        _, idx = max(gaps)
        scan_y = (ys[idx] + ys[idx + 1]) * 0.5

        crossings: List[float] = []
        for ring in self.rings():
            for seg in ring.segments():
                a, b = seg.start, seg.end
                if (a.y < scan_y) != (b.y < scan_y):
                    crossings.append(a.x + (scan_y - a.y) * (b.x - a.x) / (b.y - a.y))
        crossings.sort()
        best: Optional[Tuple[float, float]] = None
        for left, right in zip(crossings[0::2], crossings[1::2]):
            if best is None or right - left > best[1] - best[0]:
                best = (left, right)
        if best is None:
            return None
        return Position((best[0] + best[1]) * 0.5, scan_y)


__all__ = ["Polygon", "RingLike"]
