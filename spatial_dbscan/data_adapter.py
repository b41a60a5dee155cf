# spatial_dbscan/data_adapter.py

import logging

import numpy as np

from .clustering.errors import InvalidParameterError
from .clustering.models.euclidean_point import EuclideanPoint
from .clustering.models.lat_lng_point import LatLngPoint


def adapt_array_to_points(data, params):
    """
    Converts an NxD array of raw rows into SpatialPoint objects the clustering
    engine can process.

    Rows with a NaN or infinite value in any column that is read are dropped
    with a warning. Without an id column, the surviving points keep their
    original row index as id.

    Args:
        data (np.ndarray): Array of shape (N, D); one row per point.
        params (dict): Parameters from define_parameters(); 'point_params' decides
            the point type and which columns hold the id and coordinates.

    Returns:
        list: EuclideanPoint or LatLngPoint objects, in row order.
    """
    data = np.asarray(data, dtype=float)
    if data.size == 0:
        return []

    # A single row loaded from file comes back 1D
    if data.ndim == 1:
        data = data.reshape(1, -1)

    point_params = params.get('point_params', {})
    point_type = point_params.get('point_type', 'euclidean')
    id_column = point_params.get('id_column')

    if point_type == 'latlng':
        value_columns = [point_params.get('lat_column', 0), point_params.get('lng_column', 1)]
    elif point_type == 'euclidean':
        value_columns = point_params.get('coord_columns')
        if value_columns is None:
            value_columns = [c for c in range(data.shape[1]) if c != id_column]
    else:
        raise InvalidParameterError(f"Unknown point_type '{point_type}'")

    # --- Drop malformed rows ---
    read_columns = list(value_columns) + ([id_column] if id_column is not None else [])
    finite = np.isfinite(data[:, read_columns]).all(axis=1)
    if not finite.all():
        dropped = np.flatnonzero(~finite)
        logging.warning(f"Dropping {len(dropped)} rows with non-finite values: {dropped.tolist()}")

    if id_column is not None:
        ids = data[finite, id_column].astype(int)
    else:
        ids = np.flatnonzero(finite)
    values = data[finite][:, value_columns]

    if len(np.unique(ids)) != len(ids):
        raise InvalidParameterError("Point ids must be unique within a dataset")

    if point_type == 'latlng':
        return [LatLngPoint(int(pid), lat, lng) for pid, (lat, lng) in zip(ids, values)]
    return [EuclideanPoint(int(pid), row) for pid, row in zip(ids, values)]


def adapt_points_to_array(points, axes=None):
    """
    Stacks the coordinates of a list of points into an (N, k) array for
    plotting. LatLngPoints come back as (lng, lat) rows, following their axes.

    Args:
        points (Sequence[SpatialPoint]): Points to stack.
        axes (int): Number of leading axes to keep; all of them if None.
    """
    if not points:
        return np.empty((0, 2 if axes is None else axes))
    k = points[0].dimension() if axes is None else axes
    return np.array([[p.coordinate_at(axis) for axis in range(k)] for p in points], dtype=float)
