# spatial_dbscan/clustering/errors.py


class DBScanError(Exception):
    """Base class for all errors raised by the clustering core."""


class InvalidDimensionError(DBScanError, ValueError):
    """
    A point reported a non-positive dimension while building the index, or a
    query point's dimension does not match the index it is run against.
    """


class InvalidParameterError(DBScanError, ValueError):
    """A clustering parameter (eps, min_points, point type, ...) is invalid."""


class CoordinateIndexError(DBScanError, IndexError):
    """A coordinate was requested for an axis outside [0, dimension())."""
