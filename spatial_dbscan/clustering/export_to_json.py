# spatial_dbscan/clustering/export_to_json.py

import logging

import numpy as np

from .models.lat_lng_point import LatLngPoint


def _sanitize_for_json(value):
    """
    Prepares a value for JSON serialization.
    - Converts infinity and NaN to None (which becomes 'null').
    - Unwraps numpy scalars.
    """
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float) and (np.isinf(value) or np.isnan(value)):
        return None
    return value


def _point_to_dict(point):
    if isinstance(point, LatLngPoint):
        point_dict = {
            'id': point.point_id().value,
            'lat': _sanitize_for_json(point.lat),
            'lng': _sanitize_for_json(point.lng),
        }
        if point.info is not None:
            point_dict['info'] = point.info
        return point_dict

    return {
        'id': point.point_id().value,
        'coords': [_sanitize_for_json(point.coordinate_at(axis)) for axis in range(point.dimension())],
    }


def create_result_data(result, params=None):
    """
    Builds a JSON-ready dictionary from a ClusteringResult.

    Keys:
        'clusters': one entry per cluster with its id, size and member points.
        'labels': point id -> raw label value (-1 = noise, >0 = cluster id).
        'noise': ids of the noise points.
        'summary': counts and the parameters the run used.
    """
    params = params or {}
    debug_mode = params.get('debug_mode', False)
    if debug_mode: logging.info("Building result data structure for JSON export...")

    clusters_list = []
    for cluster_id, members in sorted(result.clusters.items()):
        clusters_list.append({
            'id': cluster_id.value,
            'size': len(members),
            'points': [_point_to_dict(p) for p in members],
        })

    labels = {str(point_id.value): label.value for point_id, label in result.labels.items()}
    noise = [point_id.value for point_id in result.noise_ids()]

    dbscan_params = params.get('dbscan_params', {})
    summary = {
        'numPoints': len(result.labels),
        'numClusters': result.num_clusters,
        'numNoise': len(noise),
        'eps': _sanitize_for_json(dbscan_params.get('eps')),
        'minPoints': dbscan_params.get('min_points'),
    }

    if debug_mode: logging.info(f"Result data built: {summary}")

    return {
        'clusters': clusters_list,
        'labels': labels,
        'noise': noise,
        'summary': summary,
    }
