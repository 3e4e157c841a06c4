"""Command-line interface."""
import argparse
import logging
import math
from typing import List, Optional

import numpy as np

from leastsquaresregression import config
from leastsquaresregression.logging_config import setup_logging
from leastsquaresregression.model.engine import RegressionEngine
from leastsquaresregression.model.geometry import Bounds, Range
from leastsquaresregression.model.line import LineKind, UserLine
from leastsquaresregression.model.point_set import PointSet
from leastsquaresregression.model.sample_data import seed_random_points

logger = logging.getLogger("leastsquaresregression")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Least squares regression of random points")
    p.add_argument("--points", type=int, default=config.DEFAULT_SEED_POINT_COUNT)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--angle", type=float, default=math.degrees(config.DEFAULT_MY_LINE_ANGLE),
                   help="angle of My Line in degrees")
    p.add_argument("--intercept", type=float, default=config.DEFAULT_MY_LINE_INTERCEPT)
    p.add_argument("--debug", action="store_true")
    p.add_argument("--log-file", default=None, help="also write the log to this file")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    bounds = Bounds.from_ranges(Range(*config.GRAPH_X_RANGE), Range(*config.GRAPH_Y_RANGE))
    point_set = PointSet()
    user_line = UserLine(angle=math.radians(args.angle), intercept=args.intercept)
    engine = RegressionEngine(point_set, user_line, bounds)

    seed_random_points(point_set, bounds, args.points, np.random.default_rng(args.seed))

    logger.info(f"My line: {user_line.line.equation()}")
    logger.info(f"Sum of squared residuals (my line): {engine.get_sum_of_squared_residuals(LineKind.MY_LINE):.4f}")

    fit = engine.get_fit()
    if fit is None:
        logger.info("Best fit line is undefined for this data.")
        return

    logger.info(f"Best fit line: {fit.line.equation()}")
    logger.info(f"Sum of squared residuals (best fit): "
                f"{engine.get_sum_of_squared_residuals(LineKind.BEST_FIT_LINE):.4f}")
    if fit.pearson_correlation is None:
        logger.info("Correlation coefficient is undefined (constant y).")
    else:
        logger.info(f"r = {fit.pearson_correlation:.4f}")


if __name__ == "__main__":
    main()
