import numpy as np
import pytest

from leastsquaresregression.model.geometry import Bounds
from leastsquaresregression.model.sample_data import seed_random_points


def test_seeded_points_lie_within_bounds(point_set):
    bounds = Bounds(2.0, -3.0, 10.0, 4.0)
    points = seed_random_points(point_set, bounds, 25, np.random.default_rng(0))
    assert len(points) == 25
    assert point_set.points == points
    assert all(bounds.contains(p.position) for p in points)


def test_same_seed_same_points(point_set):
    bounds = Bounds(0.0, 0.0, 20.0, 20.0)
    first = seed_random_points(point_set, bounds, 5, np.random.default_rng(42))
    second = seed_random_points(point_set, bounds, 5, np.random.default_rng(42))
    assert [p.position for p in first] == [p.position for p in second]


def test_negative_count_is_rejected(point_set):
    with pytest.raises(ValueError):
        seed_random_points(point_set, Bounds(0.0, 0.0, 1.0, 1.0), -1)
