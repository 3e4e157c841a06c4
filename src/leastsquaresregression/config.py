"""
Configuration & Global Constants
================================
This module serves as the central registry for the constants of the
regression model.

Exports:
    GRAPH_X_RANGE (tuple): Horizontal extent of the graph (min, max).
    GRAPH_Y_RANGE (tuple): Vertical extent of the graph (min, max).
    DEFAULT_MY_LINE_ANGLE (float): Initial angle of "My Line" in radians.
    DEFAULT_MY_LINE_INTERCEPT (float): Initial intercept of "My Line".
    MAX_ANGLE (float): Exclusive bound on |angle| of "My Line".
    FIT_TOLERANCE (float): Relative threshold below which a variance term
        is treated as zero.
    DEFAULT_SEED_POINT_COUNT (int): Number of random points used by the demo.
"""
import math
from typing import Tuple

# Graph
GRAPH_X_RANGE: Tuple[float, float] = (0.0, 100.0)
GRAPH_Y_RANGE: Tuple[float, float] = (0.0, 100.0)

# My Line
DEFAULT_MY_LINE_ANGLE: float = 0.0
DEFAULT_MY_LINE_INTERCEPT: float = 0.0
MAX_ANGLE: float = math.pi / 2

# Numerics
FIT_TOLERANCE: float = 1e-12

# Demo
DEFAULT_SEED_POINT_COUNT: int = 10
