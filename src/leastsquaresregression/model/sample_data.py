from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from leastsquaresregression.model.data_point import DataPoint
from leastsquaresregression.model.geometry import Bounds
from leastsquaresregression.model.point_set import PointSet

logger = logging.getLogger(__name__)


def seed_random_points(
    point_set: PointSet,
    bounds: Bounds,
    count: int,
    rng: Optional[np.random.Generator] = None,
) -> List[DataPoint]:
    """
    Add `count` points drawn uniformly from within `bounds`.

    Args:
        point_set: Set receiving the points.
        bounds: Region the points are drawn from.
        count: Number of points, must not be negative.
        rng: Random generator; a fresh default generator when omitted.

    Returns:
        The added points in insertion order.
    """
    if count < 0:
        raise ValueError(f"Point count must not be negative, got {count}.")
    rng = rng if rng is not None else np.random.default_rng()

    xs = rng.uniform(bounds.min_x, bounds.max_x, size=count)
    ys = rng.uniform(bounds.min_y, bounds.max_y, size=count)

    points = [point_set.add_position(float(x), float(y)) for x, y in zip(xs, ys)]
    logger.debug(f"Seeded {count} random point(s).")
    return points
