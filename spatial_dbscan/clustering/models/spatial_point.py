# spatial_dbscan/clustering/models/spatial_point.py

from abc import ABC, abstractmethod


class SpatialPoint(ABC):
    """
    Capability interface every point handed to the k-d tree or DBSCAN must provide.

    Besides the true distance metric, implementations expose two hooks used to
    speed up range queries:

      - comparison_value() is a value that grows monotonically with the true
        distance but is cheaper to compute (e.g. squared Euclidean distance).
      - threshold_for() maps a real-world radius onto the scale of
        comparison_value(), and axis_radius() maps it onto the linear units of
        a single coordinate axis (e.g. metres to degrees of longitude).

    The tree trusts these hooks: a non-monotonic comparison value or an
    axis_radius() that underestimates the reach of the radius silently drops
    neighbours instead of raising.

    All points used in one run must share the same dimension and coordinate
    semantics.
    """
    __slots__ = ()

    @abstractmethod
    def point_id(self):
        """Returns the PointId of this point, unique inside the dataset."""

    @abstractmethod
    def distance_to(self, other):
        """True distance to another point of the same concrete type."""

    @abstractmethod
    def dimension(self):
        """Number of coordinate axes. Must be positive."""

    @abstractmethod
    def coordinate_at(self, axis):
        """
        Coordinate along the given axis.

        Raises:
            CoordinateIndexError: if axis is outside [0, dimension()).
        """

    @abstractmethod
    def comparison_value(self, other):
        """Cheap value monotonic in distance_to(other)."""

    @abstractmethod
    def threshold_for(self, radius):
        """Maps radius onto the scale of comparison_value()."""

    @abstractmethod
    def axis_radius(self, radius, axis):
        """Maps radius onto the linear units of the given axis."""
