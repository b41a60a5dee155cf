# spatial_dbscan/clustering/parameters.py

import math
import numbers

from .errors import InvalidParameterError

POINT_TYPES = ('euclidean', 'latlng')


def define_parameters():
    """
    Defines all parameters for a clustering session.
    """
    params = {}

    # --- DBSCAN Parameters ---
    # eps is in the units of the point type's distance: coordinate units for
    # 'euclidean', meters for 'latlng'.
    params['dbscan_params'] = {'eps': 5.0, 'min_points': 2}

    # --- Point Construction Parameters ---
    params['point_params'] = {
        'point_type': 'euclidean',
        'id_column': None,       # None = use the row index as the point id
        'coord_columns': None,   # None = every column (except id_column)
        'lat_column': 0,         # used when point_type is 'latlng'
        'lng_column': 1,
    }

    # --- Input / Output Parameters ---
    params['io_params'] = {
        'output_dir': 'output',
        'mat_variable': 'points',
        'save_mat': False,
        'csv_delimiter': ',',
        'save_plot': False,
    }

    # --- Live Viewer Parameters ---
    params['viewer_params'] = {
        'num_blobs': 5,
        'points_per_blob': 200,
        'blob_spread': 2.0,
        'area_size': 100.0,
        'num_noise_points': 100,
        'seed': 42,
    }

    params['debug_mode'] = False

    return params


def check_dbscan_values(eps, min_points):
    """Raises InvalidParameterError unless eps is finite and > 0 and min_points is an int >= 0."""
    if isinstance(eps, bool) or not isinstance(eps, numbers.Real) or not math.isfinite(eps) or eps <= 0:
        raise InvalidParameterError(f"eps must be a finite positive number, got {eps!r}")
    if isinstance(min_points, bool) or not isinstance(min_points, numbers.Integral) or min_points < 0:
        raise InvalidParameterError(f"min_points must be a non-negative integer, got {min_points!r}")


def validate_parameters(params):
    """
    Checks a parameter dictionary before any clustering work starts.

    Raises:
        InvalidParameterError: on a missing section or an out-of-range value.
    """
    if 'dbscan_params' not in params:
        raise InvalidParameterError("Missing 'dbscan_params' section")

    check_dbscan_values(
        params['dbscan_params'].get('eps'),
        params['dbscan_params'].get('min_points'),
    )

    point_type = params.get('point_params', {}).get('point_type', 'euclidean')
    if point_type not in POINT_TYPES:
        raise InvalidParameterError(f"Unknown point_type '{point_type}'. Expected one of {POINT_TYPES}")

    return params
