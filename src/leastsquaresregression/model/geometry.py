"""
Geometric primitives of the graph: positions, ranges and rectangular bounds.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple
import math

from leastsquaresregression.model.exceptions import InvalidPointError


@dataclass(frozen=True)
class Position:
    """A position on the graph, in graph coordinates."""
    x: float
    y: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise InvalidPointError(f"Coordinates must be finite, got ({self.x}, {self.y}).")

    def to_tuple(self) -> Tuple[float, float]:
        return self.x, self.y


@dataclass(frozen=True)
class Range:
    """Closed interval [min, max]."""
    min: float
    max: float

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise ValueError(f"Range minimum {self.min} is larger than maximum {self.max}.")

    @property
    def length(self) -> float:
        return self.max - self.min

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned rectangle, closed on both axes."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self) -> None:
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError("Bounds minimum must not exceed maximum.")

    @classmethod
    def from_ranges(cls, x_range: Range, y_range: Range) -> Bounds:
        return cls(x_range.min, y_range.min, x_range.max, y_range.max)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def x_range(self) -> Range:
        return Range(self.min_x, self.max_x)

    @property
    def y_range(self) -> Range:
        return Range(self.min_y, self.max_y)

    def contains(self, position: Position) -> bool:
        return self.min_x <= position.x <= self.max_x and self.min_y <= position.y <= self.max_y


def is_within_bounds(position: Position, bounds: Bounds) -> bool:
    """Acceptance test for a released data point. Has no side effects."""
    return bounds.contains(position)
