"""
Linear Regression
=================
Ordinary least squares fit of a set of 2-D points and the Pearson
correlation coefficient, computed from the raw moments of the data.

The fit is undefined (None) for fewer than two points, when all points
share the same x-coordinate, or when the coordinates are too large for the
moments to be represented. No NaN or infinity ever leaves this module.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Optional, TYPE_CHECKING

import numpy as np

from leastsquaresregression import config
from leastsquaresregression.model.line import Line

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Moments:
    """Averages of the data and of its second-order products."""
    n: int
    mean_x: float
    mean_y: float
    mean_xx: float
    mean_xy: float
    mean_yy: float

    @classmethod
    def from_arrays(cls, xs: npt.ArrayLike, ys: npt.ArrayLike) -> Moments:
        x = np.asarray(xs, dtype=np.float64)
        y = np.asarray(ys, dtype=np.float64)
        if x.shape != y.shape or x.ndim != 1:
            raise ValueError("x and y must be one-dimensional arrays of equal length.")
        n = x.size
        if n == 0:
            raise ValueError("Moments of an empty data set are undefined.")
        # Huge coordinates overflow to inf; callers check `is_finite`
        with np.errstate(over="ignore", invalid="ignore"):
            return cls(
                n=n,
                mean_x=float(np.sum(x)) / n,
                mean_y=float(np.sum(y)) / n,
                mean_xx=float(np.sum(x * x)) / n,
                mean_xy=float(np.sum(x * y)) / n,
                mean_yy=float(np.sum(y * y)) / n,
            )

    @property
    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (
            self.mean_x, self.mean_y, self.mean_xx, self.mean_xy, self.mean_yy,
            self.slope_numerator, self.slope_denominator, self.variance_y,
        ))

    @property
    def slope_numerator(self) -> float:
        return self.mean_xy - self.mean_x * self.mean_y

    @property
    def slope_denominator(self) -> float:
        return self.mean_xx - self.mean_x * self.mean_x

    @property
    def variance_y(self) -> float:
        return self.mean_yy - self.mean_y * self.mean_y


@dataclass(frozen=True)
class LinearFit:
    slope: float
    intercept: float
    pearson_correlation: Optional[float]

    @property
    def line(self) -> Line:
        return Line(slope=self.slope, intercept=self.intercept)


def _is_negligible(value: float, scale: float, tolerance: float) -> bool:
    # A variance computed as E[v^2] - E[v]^2 loses precision relative to E[v^2]
    return value <= tolerance * scale


def compute_linear_fit(
    xs: npt.ArrayLike,
    ys: npt.ArrayLike,
    tolerance: float = config.FIT_TOLERANCE,
) -> Optional[LinearFit]:
    """
    Least squares line through the points (xs[i], ys[i]).

    Args:
        xs: x-coordinates.
        ys: y-coordinates, same length as xs.
        tolerance: Relative threshold below which a variance counts as zero.

    Returns:
        The fit, or None when it is undefined (fewer than two points, all
        x-coordinates equal, or overflowing moments). The correlation
        coefficient is None when all y-coordinates are equal.
    """
    if np.size(xs) < 2:
        return None

    m = Moments.from_arrays(xs, ys)
    if not m.is_finite:
        logger.warning("Fit undefined: coordinates too large for the moments to be represented.")
        return None

    slope_denominator = m.slope_denominator
    if _is_negligible(slope_denominator, m.mean_xx, tolerance):
        logger.debug(f"Fit undefined: x-variance {slope_denominator:.3e} is negligible.")
        return None

    slope = m.slope_numerator / slope_denominator
    intercept = m.mean_y - slope * m.mean_x
    if not (math.isfinite(slope) and math.isfinite(intercept)):
        logger.warning(f"Fit undefined: non-finite parameters (slope={slope}, intercept={intercept}).")
        return None

    pearson: Optional[float] = None
    variance_y = m.variance_y
    if not _is_negligible(variance_y, m.mean_yy, tolerance):
        pearson_denominator = math.sqrt(slope_denominator) * math.sqrt(variance_y)
        pearson = m.slope_numerator / pearson_denominator
        if math.isfinite(pearson):
            # Rounding can push |r| marginally past 1
            pearson = min(1.0, max(-1.0, pearson))
        else:
            pearson = None

    return LinearFit(slope=slope, intercept=intercept, pearson_correlation=pearson)
