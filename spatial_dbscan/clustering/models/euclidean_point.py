# spatial_dbscan/clustering/models/euclidean_point.py

import math

from ..errors import CoordinateIndexError
from .identifiers import PointId
from .spatial_point import SpatialPoint


class EuclideanPoint(SpatialPoint):
    """
    A point in n-dimensional Cartesian space with the Euclidean metric.

    The comparison value is the squared distance, so range queries never take
    a square root.
    """
    __slots__ = ('_id', 'coords')

    def __init__(self, point_id, coords):
        if not isinstance(point_id, PointId):
            point_id = PointId(int(point_id))
        self._id = point_id
        self.coords = tuple(float(c) for c in coords)

    def point_id(self):
        return self._id

    def distance_to(self, other):
        return math.sqrt(self.comparison_value(other))

    def dimension(self):
        return len(self.coords)

    def coordinate_at(self, axis):
        if not 0 <= axis < len(self.coords):
            raise CoordinateIndexError(
                f"Axis {axis} out of range for a {len(self.coords)}-dimensional point"
            )
        return self.coords[axis]

    def comparison_value(self, other):
        total = 0.0
        for a, b in zip(self.coords, other.coords):
            diff = a - b
            total += diff * diff
        return total

    def threshold_for(self, radius):
        return radius * radius

    def axis_radius(self, radius, axis):
        return radius

    def __eq__(self, other):
        if not isinstance(other, EuclideanPoint):
            return NotImplemented
        return self._id == other._id and self.coords == other.coords

    def __hash__(self):
        return hash((self._id, self.coords))

    def __repr__(self):
        return f"EuclideanPoint(id={self._id.value}, coords={self.coords})"
