"""
Point Set
=========
Observable collection of the data points that currently participate in the
regression.

Signals:
    point_added(DataPoint): after a point joined the set.
    point_removed(DataPoint): after a point left the set (also once per point on clear()).
    point_moved(DataPoint): a member changed its position.
"""
from __future__ import annotations

import logging
from typing import Iterator, List, Optional

import numpy as np
from PySide6.QtCore import QObject, Signal

from leastsquaresregression.model.data_point import DataPoint
from leastsquaresregression.model.exceptions import InvalidPointError, NotFoundError

logger = logging.getLogger(__name__)


class PointSet(QObject):
    point_added = Signal(object)
    point_removed = Signal(object)
    point_moved = Signal(object)

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._points: List[DataPoint] = []

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[DataPoint]:
        return iter(list(self._points))

    def __contains__(self, point: object) -> bool:
        return self._index_of(point) is not None

    @property
    def points(self) -> List[DataPoint]:
        """Snapshot of the members in insertion order."""
        return list(self._points)

    def positions(self) -> np.ndarray:
        """Coordinates of all members as an (n, 2) array."""
        if not self._points:
            return np.empty((0, 2), dtype=np.float64)
        return np.array([p.position.to_tuple() for p in self._points], dtype=np.float64)

    def add(self, point: DataPoint) -> None:
        if self._index_of(point) is not None:
            raise InvalidPointError(f"{point!r} is already a member of the point set.")
        self._points.append(point)
        point.position_changed.connect(self._on_point_moved)
        logger.debug(f"Added {point!r}, {len(self._points)} point(s) in set.")
        self.point_added.emit(point)

    def add_position(self, x: float, y: float) -> DataPoint:
        """Create a data point at (x, y), add it and return it."""
        point = DataPoint(x, y)
        self.add(point)
        return point

    def remove(self, point: DataPoint) -> None:
        index = self._index_of(point)
        if index is None:
            raise NotFoundError(f"{point!r} is not a member of the point set.")
        del self._points[index]
        point.position_changed.disconnect(self._on_point_moved)
        logger.debug(f"Removed {point!r}, {len(self._points)} point(s) in set.")
        self.point_removed.emit(point)

    def move(self, point: DataPoint, x: float, y: float) -> None:
        """Change the position of a member."""
        if self._index_of(point) is None:
            raise NotFoundError(f"{point!r} is not a member of the point set.")
        point.set_position(x, y)

    def clear(self) -> None:
        # One removal notification per point, newest first
        while self._points:
            self.remove(self._points[-1])

    def _index_of(self, point: object) -> Optional[int]:
        for i, p in enumerate(self._points):
            if p is point:
                return i
        return None

    def _on_point_moved(self, point: DataPoint) -> None:
        self.point_moved.emit(point)
