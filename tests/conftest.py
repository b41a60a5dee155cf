import numpy as np
import pytest

from spatial_dbscan.clustering.models.euclidean_point import EuclideanPoint

SCENARIO_COORDS = [(1, 1), (2, 2), (3, 3), (5, 5), (1000, 1000), (1001, 1001), (2000, 2000)]
SCENARIO_IDS = [1, 2, 3, 5, 1000, 1001, 2000]


@pytest.fixture
def scenario_points():
    """Seven 2D points: a group of four, a pair, and one far-away point."""
    return [EuclideanPoint(pid, xy) for pid, xy in zip(SCENARIO_IDS, SCENARIO_COORDS)]


@pytest.fixture
def scenario_rows():
    """The scenario points as an (id, x, y) float matrix, as read from a point file."""
    return np.array([[pid, x, y] for pid, (x, y) in zip(SCENARIO_IDS, SCENARIO_COORDS)], dtype=float)
