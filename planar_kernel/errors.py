"""Structural construction errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .primitives.position import Position


class GeometryError(ValueError):
    """Raised when coordinate data cannot form the requested geometry."""


class TooFewPoints(GeometryError):
    """A line string or ring was given fewer positions than its minimum."""

    def __init__(self, kind: str, required: int, actual: int):
        super().__init__(f"{kind} needs at least {required} positions, got {actual}")
        self.kind = kind
        self.required = required
        self.actual = actual


class UnclosedRing(GeometryError):
    """A ring's first and last positions differ."""

    def __init__(self, first: "Position", last: "Position"):
        super().__init__(f"ring is not closed: first {first} != last {last}")
        self.first = first
        self.last = last


__all__ = ["GeometryError", "TooFewPoints", "UnclosedRing"]
