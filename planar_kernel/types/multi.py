"""Homogeneous, ordered, possibly empty collections."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import ClassVar, Iterable, Iterator, List, Optional, Set, Tuple, Union

from ..primitives import Envelope, Position, PositionLike
from .line_string import LineString
from .point import Point
from .polygon import Polygon


def _as_point(value: Union[Point, PositionLike]) -> Point:
    return value if isinstance(value, Point) else Point(Position.coerce(value))


def _as_line_string(value: Union[LineString, Iterable[PositionLike]]) -> LineString:
    return value if isinstance(value, LineString) else LineString(tuple(value))


def _is_position_like(value: object) -> bool:
    if isinstance(value, Position):
        return True
    try:
        x, y = value  # type: ignore[misc]
    except (TypeError, ValueError):
        return False
    return isinstance(x, numbers.Real) and isinstance(y, numbers.Real)


def _as_polygon(value: object) -> Polygon:
    """Coerce a member: a ``Polygon``, an exterior ring, or an ``(exterior, holes)`` pair."""

    if isinstance(value, Polygon):
        return value
    if isinstance(value, LineString):
        return Polygon(value)
    items = list(value)  # type: ignore[call-overload]
    # A ring has at least four positions, so a two-item sequence whose first
    # item is not a position can only be an (exterior, holes) pair.
    if len(items) == 2 and not _is_position_like(items[0]):
        exterior, holes = items
        return Polygon(exterior, tuple(holes))
    return Polygon.from_coords(items)


@dataclass(frozen=True)
class MultiPoint:
    points: Tuple[Point, ...] = ()

    kind: ClassVar[str] = "MultiPoint"
    geometry_type: ClassVar[str] = "MultiPoint"
    dimension: ClassVar[int] = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(_as_point(p) for p in self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    def positions(self) -> Iterator[Position]:
        for point in self.points:
            yield point.position

    def is_empty(self) -> bool:
        return not self.points

    def envelope(self) -> Envelope:
        return Envelope.from_positions(self.positions())

    def is_simple(self) -> bool:
        """True when no position repeats (a NaN position is never simple)."""

        seen: Set[Position] = set()
        for position in self.positions():
            if position in seen or position != position:
                return False
            seen.add(position)
        return True

    def deduplicated(self) -> "MultiPoint":
        kept: List[Point] = []
        seen: Set[Position] = set()
        for point in self.points:
            if point.position in seen:
                continue
            seen.add(point.position)
            kept.append(point)
        return MultiPoint(tuple(kept))

    def translate(self, dx: float, dy: float) -> "MultiPoint":
        return MultiPoint(tuple(p.translate(dx, dy) for p in self.points))

    def scale(
        self, fx: float, fy: Optional[float] = None, origin: Optional[PositionLike] = None
    ) -> "MultiPoint":
        return MultiPoint(tuple(p.scale(fx, fy, origin) for p in self.points))


@dataclass(frozen=True)
class MultiLineString:
    line_strings: Tuple[LineString, ...] = ()

    kind: ClassVar[str] = "MultiLineString"
    geometry_type: ClassVar[str] = "MultiLineString"
    dimension: ClassVar[int] = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "line_strings", tuple(_as_line_string(ls) for ls in self.line_strings))

    def __len__(self) -> int:
        return len(self.line_strings)

    def __iter__(self) -> Iterator[LineString]:
        return iter(self.line_strings)

    def __getitem__(self, index: int) -> LineString:
        return self.line_strings[index]

    def positions(self) -> Iterator[Position]:
        for line in self.line_strings:
            yield from line.vertices

    def is_empty(self) -> bool:
        return not self.line_strings

    def envelope(self) -> Envelope:
        return Envelope.union_all(line.envelope() for line in self.line_strings)

    def length(self) -> float:
        return sum(line.length() for line in self.line_strings)

    def translate(self, dx: float, dy: float) -> "MultiLineString":
        return MultiLineString(tuple(ls.translate(dx, dy) for ls in self.line_strings))

    def scale(
        self, fx: float, fy: Optional[float] = None, origin: Optional[PositionLike] = None
    ) -> "MultiLineString":
        return MultiLineString(tuple(ls.scale(fx, fy, origin) for ls in self.line_strings))


@dataclass(frozen=True)
class MultiPolygon:
    polygons: Tuple[Polygon, ...] = ()

    kind: ClassVar[str] = "MultiPolygon"
    geometry_type: ClassVar[str] = "MultiPolygon"
    dimension: ClassVar[int] = 2

    def __post_init__(self) -> None:
        object.__setattr__(self, "polygons", tuple(_as_polygon(p) for p in self.polygons))

    def __len__(self) -> int:
        return len(self.polygons)

    def __iter__(self) -> Iterator[Polygon]:
        return iter(self.polygons)

    def __getitem__(self, index: int) -> Polygon:
        return self.polygons[index]

    def positions(self) -> Iterator[Position]:
        for polygon in self.polygons:
            yield from polygon.positions()

    def is_empty(self) -> bool:
        return not self.polygons

    def envelope(self) -> Envelope:
        return Envelope.union_all(polygon.envelope() for polygon in self.polygons)

    def area(self) -> float:
        return sum(polygon.area() for polygon in self.polygons)

    def translate(self, dx: float, dy: float) -> "MultiPolygon":
        return MultiPolygon(tuple(p.translate(dx, dy) for p in self.polygons))

    def scale(
        self, fx: float, fy: Optional[float] = None, origin: Optional[PositionLike] = None
    ) -> "MultiPolygon":
        return MultiPolygon(tuple(p.scale(fx, fy, origin) for p in self.polygons))


__all__ = ["MultiPoint", "MultiLineString", "MultiPolygon"]
