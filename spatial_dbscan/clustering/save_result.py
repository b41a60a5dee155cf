# spatial_dbscan/clustering/save_result.py

import json
import logging
import os

import numpy as np
import scipy.io as sio

from .export_to_json import create_result_data


class NumpyEncoder(json.JSONEncoder):
    """ Custom encoder for numpy data types """
    def default(self, obj):
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.bool_):
            return bool(obj)
        return json.JSONEncoder.default(self, obj)


def _labels_to_matrix(result):
    """
    Returns an (N, 2) int array of [point id, label value] rows in input order,
    which is how the labels are stored in the .mat export.
    """
    if not result.labels:
        return np.zeros((0, 2), dtype=int)
    return np.array(
        [[point_id.value, label.value] for point_id, label in result.labels.items()],
        dtype=int,
    )


def save_clustering_result(result, filename, params=None):
    """
    Saves a ClusteringResult as JSON and, if params['io_params']['save_mat']
    is set, as a .mat file next to it.

    Args:
        result (ClusteringResult): The result to save.
        filename (str): Target .json path. Missing directories are created.
        params (dict): Parameters from define_parameters().

    Returns:
        dict: The data structure that was written.
    """
    params = params or {}
    logging.info("\n--- Saving clustering result ---")

    result_data = create_result_data(result, params)

    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(filename, 'w') as f:
        json.dump(result_data, f, cls=NumpyEncoder, indent=2)
    logging.info(f"Clustering result saved to {filename}")

    if params.get('io_params', {}).get('save_mat', False):
        mat_filename = os.path.splitext(filename)[0] + '.mat'
        sio.savemat(mat_filename, {
            'labels': _labels_to_matrix(result),
            'clusterSizes': np.array(
                [[cid.value, size] for cid, size in sorted(result.cluster_sizes().items())],
                dtype=int,
            ).reshape(-1, 2),
        })
        logging.info(f"Label matrix saved to {mat_filename}")

    return result_data
