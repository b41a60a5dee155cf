# spatial_dbscan/clustering/utils/sample_data.py

import numpy as np

from ..models.euclidean_point import EuclideanPoint
from ..models.lat_lng_point import LatLngPoint


def generate_random_points(count, max_coord, seed=42):
    """
    Uniformly random LatLngPoints with lat and lng in [0, max_coord) degrees.

    A fixed seed keeps benchmark inputs reproducible.
    """
    rng = np.random.default_rng(seed)
    lats = rng.random(count) * max_coord
    lngs = rng.random(count) * max_coord
    return [LatLngPoint(i, lat, lng) for i, (lat, lng) in enumerate(zip(lats, lngs))]


def generate_blobs(viewer_params):
    """
    Gaussian blobs plus uniform background noise in a square area, as 2D
    EuclideanPoints.

    Args:
        viewer_params (dict): 'num_blobs', 'points_per_blob', 'blob_spread',
            'area_size', 'num_noise_points' and 'seed'.

    Returns:
        list: The generated points, blob points first.
    """
    rng = np.random.default_rng(viewer_params.get('seed'))
    area = viewer_params['area_size']
    spread = viewer_params['blob_spread']

    centers = rng.uniform(0.1 * area, 0.9 * area, size=(viewer_params['num_blobs'], 2))
    chunks = [
        center + rng.normal(0.0, spread, size=(viewer_params['points_per_blob'], 2))
        for center in centers
    ]
    chunks.append(rng.uniform(0.0, area, size=(viewer_params['num_noise_points'], 2)))
    xy = np.vstack(chunks)

    return [EuclideanPoint(i, row) for i, row in enumerate(xy)]
