"""
Residuals
=========
The vertical signed distance between a data point and a line, and the
ordered collection of residuals kept for one line.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from leastsquaresregression.model.data_point import DataPoint
from leastsquaresregression.model.exceptions import NotFoundError
from leastsquaresregression.model.geometry import Position
from leastsquaresregression.model.line import Line

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Residual:
    """
    point1 is the data point position, point2 the point on the line directly
    above or below it. The displacement is positive when the data point lies
    above the line.
    """
    data_point: DataPoint
    point1: Position
    point2: Position
    vertical_displacement: float
    # Which side of the data point the squared residual is drawn on, chosen
    # so that the square does not overlap the line
    is_square_to_the_left: bool

    @classmethod
    def from_point(cls, data_point: DataPoint, line: Line) -> Residual:
        position = data_point.position
        y_on_line = line.y_at(position.x)
        displacement = position.y - y_on_line
        return cls(
            data_point=data_point,
            point1=position,
            point2=Position(position.x, y_on_line),
            vertical_displacement=displacement,
            is_square_to_the_left=line.slope * displacement > 0,
        )

    @property
    def squared(self) -> float:
        return self.vertical_displacement ** 2


class ResidualCollection:
    """Residuals of one line, in the same order as the point set."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._residuals: List[Residual] = []

    def __len__(self) -> int:
        return len(self._residuals)

    def __iter__(self) -> Iterator[Residual]:
        return iter(tuple(self._residuals))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, size={len(self)})"

    def as_tuple(self) -> Tuple[Residual, ...]:
        return tuple(self._residuals)

    def find(self, data_point: DataPoint) -> Optional[Residual]:
        index = self._index_of(data_point)
        return None if index is None else self._residuals[index]

    def add(self, data_point: DataPoint, line: Line) -> Residual:
        residual = Residual.from_point(data_point, line)
        self._residuals.append(residual)
        return residual

    def remove(self, data_point: DataPoint) -> None:
        index = self._index_of(data_point)
        if index is None:
            raise NotFoundError(f"No residual for {data_point!r} in {self.name}.")
        del self._residuals[index]

    def update(self, data_point: DataPoint, line: Line) -> Residual:
        """Recompute the residual of one point in place."""
        index = self._index_of(data_point)
        if index is None:
            raise NotFoundError(f"No residual for {data_point!r} in {self.name}.")
        residual = Residual.from_point(data_point, line)
        self._residuals[index] = residual
        return residual

    def rebuild(self, data_points: Iterable[DataPoint], line: Line) -> None:
        """Replace every residual with one computed against `line`."""
        self._residuals = [Residual.from_point(p, line) for p in data_points]

    def clear(self) -> None:
        self._residuals.clear()

    def sum_of_squares(self) -> float:
        return float(sum(r.squared for r in self._residuals))

    def _index_of(self, data_point: DataPoint) -> Optional[int]:
        for i, r in enumerate(self._residuals):
            if r.data_point is data_point:
                return i
        return None
