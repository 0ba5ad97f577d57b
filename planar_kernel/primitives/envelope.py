"""Optional bounding rectangles.

An :class:`Envelope` is either absent (the bounds of an empty geometry) or
wraps a :class:`Rect`.  The absent envelope is the identity of ``union`` and
is never part of an ``intersects``/``contains`` relation, not even with
another absent envelope: there is no extent to compare.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np

from .position import Position, PositionLike
from .rect import Rect


@dataclass(frozen=True)
class Envelope:
    rect: Optional[Rect] = None

    @classmethod
    def empty(cls) -> "Envelope":
        return cls(None)

    @classmethod
    def of(cls, rect: Rect) -> "Envelope":
        return cls(rect)

    @classmethod
    def from_position(cls, position: PositionLike) -> "Envelope":
        return cls(Rect.from_position(position))

    @classmethod
    def from_positions(cls, positions: Iterable[PositionLike]) -> "Envelope":
        coords = np.array(
            [Position.coerce(p).as_tuple() for p in positions], dtype=float
        ).reshape(-1, 2)
        return cls.from_array(coords)

    @classmethod
    def from_array(cls, coords: np.ndarray) -> "Envelope":
        """Fold an ``(n, 2)`` coordinate array; NaNs are skipped per axis."""

        if coords.shape[0] == 0:
            return cls(None)
        lo = np.fmin.reduce(coords, axis=0)
        hi = np.fmax.reduce(coords, axis=0)
        return cls(Rect(float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1])))

    @classmethod
    def union_all(cls, envelopes: Iterable["Envelope"]) -> "Envelope":
        result = cls(None)
        for envelope in envelopes:
            result = result.union(envelope)
        return result

    @property
    def is_empty(self) -> bool:
        return self.rect is None

    def union(self, other: "Envelope") -> "Envelope":
        if self.rect is None:
            return other
        if other.rect is None:
            return self
        return Envelope(self.rect.union(other.rect))

    def intersects(self, other: "Envelope") -> bool:
        if self.rect is None or other.rect is None:
            return False
        return self.rect.intersects(other.rect)

    def contains(self, other: "Envelope") -> bool:
        if self.rect is None or other.rect is None:
            return False
        return self.rect.contains(other.rect)

    def contains_position(self, position: PositionLike) -> bool:
        if self.rect is None:
            return False
        return self.rect.contains_position(position)

    def __str__(self) -> str:
        if self.rect is None:
            return "Envelope(empty)"
        r = self.rect
        return f"Envelope({r.min_x:.6g}, {r.min_y:.6g}, {r.max_x:.6g}, {r.max_y:.6g})"


__all__ = ["Envelope"]
