"""
Regression Engine
=================
Keeps the best fit line, the residuals of both lines and the summary
statistics consistent with the point set and with "My Line".

Why is this class needed?
-------------------------
1. Single owner: the fit and both residual collections live here; views only
   read them.
2. Consistency: it subscribes to the point set and to the user line, so every
   read reflects every mutation committed before it.
3. Notification: it re-emits what changed, so a view can redraw the residual
   squares, the sum of squares chart or the equation readout.

Signals:
    fit_changed(LinearFit | None): the best fit was recomputed.
    residuals_changed(str): the residuals of the given LineKind were updated.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from PySide6.QtCore import QObject, Signal

from leastsquaresregression.model.data_point import DataPoint
from leastsquaresregression.model.geometry import Bounds, Position, is_within_bounds
from leastsquaresregression.model.line import Line, LineKind, UserLine
from leastsquaresregression.model.point_set import PointSet
from leastsquaresregression.model.regression import LinearFit, compute_linear_fit
from leastsquaresregression.model.residual import Residual, ResidualCollection

logger = logging.getLogger(__name__)


class RegressionEngine(QObject):
    fit_changed = Signal(object)
    residuals_changed = Signal(str)

    def __init__(
        self,
        point_set: PointSet,
        user_line: UserLine,
        bounds: Bounds,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._point_set = point_set
        self._user_line = user_line
        self._bounds = bounds

        self._fit: Optional[LinearFit] = None
        self._residuals: Dict[LineKind, ResidualCollection] = {
            kind: ResidualCollection(kind.value) for kind in LineKind
        }

        # Start from whatever the point set already holds
        self._refresh_fit()
        self._rebuild_residuals(LineKind.MY_LINE, self._user_line.line)
        self._rebuild_residuals(LineKind.BEST_FIT_LINE, self.get_line(LineKind.BEST_FIT_LINE))

        self._point_set.point_added.connect(self._on_point_added)
        self._point_set.point_removed.connect(self._on_point_removed)
        self._point_set.point_moved.connect(self._on_point_moved)
        self._user_line.changed.connect(self._on_user_line_changed)

    # ---- Read API ----

    @property
    def point_set(self) -> PointSet:
        return self._point_set

    @property
    def user_line(self) -> UserLine:
        return self._user_line

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    def get_fit(self) -> Optional[LinearFit]:
        return self._fit

    def is_fit_defined(self) -> bool:
        return self._fit is not None

    def get_pearson_correlation(self) -> Optional[float]:
        return None if self._fit is None else self._fit.pearson_correlation

    def get_line(self, kind: LineKind) -> Optional[Line]:
        """Current parameters of a line; None for the best fit while it is undefined."""
        if kind == LineKind.MY_LINE:
            return self._user_line.line
        return None if self._fit is None else self._fit.line

    def get_residuals(self, kind: LineKind) -> Tuple[Residual, ...]:
        return self._residuals[LineKind(kind)].as_tuple()

    def get_sum_of_squared_residuals(self, kind: LineKind) -> float:
        return self._residuals[LineKind(kind)].sum_of_squares()

    # ---- Placement ----

    def is_within_bounds(self, position: Position) -> bool:
        return is_within_bounds(position, self._bounds)

    def place_point(self, point: DataPoint) -> bool:
        """
        Add a released data point to the graph if it lies within the bounds.

        Returns:
            False when the point is outside; the point set is left untouched and
            the caller is expected to return the point to its origin.
        """
        if not self.is_within_bounds(point.position):
            logger.debug(f"Rejected {point!r}: outside of {self._bounds}.")
            return False
        self._point_set.add(point)
        return True

    def reset(self) -> None:
        """Remove every data point and restore the default "My Line"."""
        self._point_set.clear()
        self._user_line.reset()
        logger.info("Regression model has been reset.")

    # ---- Maintenance ----
    # State is brought fully up to date before any signal is emitted, so
    # slots always read a consistent engine.

    def _refresh_fit(self) -> None:
        positions = self._point_set.positions()
        fit = compute_linear_fit(positions[:, 0], positions[:, 1])
        if (fit is None) != (self._fit is None):
            state = "defined" if fit is not None else "undefined"
            logger.info(f"Best fit line is now {state} ({len(self._point_set)} point(s)).")
        self._fit = fit

    def _rebuild_residuals(self, kind: LineKind, line: Optional[Line]) -> None:
        """Recompute every residual of one line, or drop them all if the line does not exist."""
        collection = self._residuals[kind]
        if line is None:
            collection.clear()
        else:
            collection.rebuild(self._point_set, line)

    def _after_point_change(self) -> None:
        self._refresh_fit()
        self._rebuild_residuals(LineKind.BEST_FIT_LINE, self.get_line(LineKind.BEST_FIT_LINE))
        logger.debug(f"Recomputed fit and residuals for {len(self._point_set)} point(s).")

        self.residuals_changed.emit(LineKind.MY_LINE.value)
        self.fit_changed.emit(self._fit)
        self.residuals_changed.emit(LineKind.BEST_FIT_LINE.value)

    def _on_point_added(self, point: DataPoint) -> None:
        self._residuals[LineKind.MY_LINE].add(point, self._user_line.line)
        self._after_point_change()

    def _on_point_removed(self, point: DataPoint) -> None:
        self._residuals[LineKind.MY_LINE].remove(point)
        self._after_point_change()

    def _on_point_moved(self, point: DataPoint) -> None:
        self._residuals[LineKind.MY_LINE].update(point, self._user_line.line)
        self._after_point_change()

    def _on_user_line_changed(self, line: Line) -> None:
        self._rebuild_residuals(LineKind.MY_LINE, line)
        self.residuals_changed.emit(LineKind.MY_LINE.value)
