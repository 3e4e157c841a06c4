"""
Line Models
===========
Defines the straight lines drawn over the data points.

Classes:
    LineKind: Identifies "My Line" and the "Best Fit Line".
    Line: Immutable y = slope * x + intercept.
    UserLine: "My Line", controlled by the user through angle and intercept.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import logging
import math
from typing import Optional

from PySide6.QtCore import QObject, Signal

from leastsquaresregression import config

logger = logging.getLogger(__name__)


class LineKind(StrEnum):
    MY_LINE = "my_line"
    BEST_FIT_LINE = "best_fit_line"


@dataclass(frozen=True)
class Line:
    slope: float
    intercept: float

    def y_at(self, x: float) -> float:
        return self.slope * x + self.intercept

    @property
    def angle(self) -> float:
        return math.atan(self.slope)

    def equation(self, decimals: int = 2) -> str:
        """Readout in the form 'y = 1.50 x - 2.00'."""
        sign = "-" if self.intercept < 0 else "+"
        return f"y = {self.slope:.{decimals}f} x {sign} {abs(self.intercept):.{decimals}f}"


class UserLine(QObject):
    """
    "My Line". The user sets the angle (slope = tan(angle)) and the intercept.
    Emits `changed(Line)` whenever either parameter actually changes.
    """
    changed = Signal(object)

    def __init__(
        self,
        angle: float = config.DEFAULT_MY_LINE_ANGLE,
        intercept: float = config.DEFAULT_MY_LINE_INTERCEPT,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._check_angle(angle)
        self._check_intercept(intercept)
        self._angle = float(angle)
        self._intercept = float(intercept)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(angle={self._angle}, intercept={self._intercept})"

    @property
    def angle(self) -> float:
        return self._angle

    @property
    def intercept(self) -> float:
        return self._intercept

    @property
    def slope(self) -> float:
        return math.tan(self._angle)

    @property
    def line(self) -> Line:
        return Line(slope=self.slope, intercept=self._intercept)

    def set_angle(self, angle: float) -> None:
        self._check_angle(angle)
        self._update(float(angle), self._intercept)

    def set_slope(self, slope: float) -> None:
        if not math.isfinite(slope):
            raise ValueError(f"Slope must be finite, got {slope}.")
        angle = math.atan(slope)
        self._check_angle(angle)
        self._update(angle, self._intercept)

    def set_intercept(self, intercept: float) -> None:
        self._check_intercept(intercept)
        self._update(self._angle, float(intercept))

    def set_parameters(self, angle: float, intercept: float) -> None:
        """Set both parameters with a single notification."""
        self._check_angle(angle)
        self._check_intercept(intercept)
        self._update(float(angle), float(intercept))

    def reset(self) -> None:
        self._update(config.DEFAULT_MY_LINE_ANGLE, config.DEFAULT_MY_LINE_INTERCEPT)

    def _update(self, angle: float, intercept: float) -> None:
        if angle == self._angle and intercept == self._intercept:
            return
        self._angle = angle
        self._intercept = intercept
        logger.debug(f"My line changed to angle={angle:.4f}, intercept={intercept:.4f}")
        self.changed.emit(self.line)

    @staticmethod
    def _check_angle(angle: float) -> None:
        if not math.isfinite(angle) or abs(angle) >= config.MAX_ANGLE:
            raise ValueError(f"Angle must be finite and strictly between -pi/2 and pi/2, got {angle}.")

    @staticmethod
    def _check_intercept(intercept: float) -> None:
        if not math.isfinite(intercept):
            raise ValueError(f"Intercept must be finite, got {intercept}.")
