from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from leastsquaresregression.model.geometry import Position

logger = logging.getLogger(__name__)


class DataPoint(QObject):
    """
    A data point placed on the graph.

    Identity matters: two data points at the same position are still two
    distinct points. The position may be replaced while the point is live
    (e.g. being dragged); every change emits `position_changed`.
    """
    position_changed = Signal(object)  # emits the DataPoint itself

    def __init__(self, x: float, y: float, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._position = Position(float(x), float(y))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(x={self.x}, y={self.y})"

    @property
    def position(self) -> Position:
        return self._position

    @property
    def x(self) -> float:
        return self._position.x

    @property
    def y(self) -> float:
        return self._position.y

    def set_position(self, x: float, y: float) -> None:
        """Replace the coordinates. Raises InvalidPointError for non-finite values."""
        position = Position(float(x), float(y))
        if position == self._position:
            return
        self._position = position
        self.position_changed.emit(self)
