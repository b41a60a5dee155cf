# spatial_dbscan/clustering/data_loader.py

import json
import logging
import os

import numpy as np
import scipy.io as sio


def load_points(file_path, params):
    """
    Loads a point matrix (one row per point) from a .mat, .csv or .json file.

    .mat files must hold the matrix in the variable named by
    params['io_params']['mat_variable']; .json files a list of rows, or an
    object with a 'points' key holding one.

    Returns:
        np.ndarray or None: An (N, D) float array, or None if the file could
        not be read.
    """
    if not os.path.exists(file_path):
        logging.error(f"Error: Point file not found at {file_path}")
        return None

    io_params = params.get('io_params', {})
    extension = os.path.splitext(file_path)[1].lower()

    try:
        if extension == '.mat':
            variable = io_params.get('mat_variable', 'points')
            mat_data = sio.loadmat(file_path, squeeze_me=False)
            if variable not in mat_data:
                logging.error(f"Error: '{variable}' variable not found in the .mat file.")
                return None
            data = np.asarray(mat_data[variable], dtype=float)

        elif extension == '.csv':
            data = np.loadtxt(
                file_path,
                delimiter=io_params.get('csv_delimiter', ','),
                ndmin=2,
                comments='#',
            )

        elif extension == '.json':
            with open(file_path, 'r') as f:
                raw = json.load(f)
            if isinstance(raw, dict):
                raw = raw.get('points', [])
            data = np.asarray(raw, dtype=float)

        else:
            logging.error(f"Error: Unsupported point file format '{extension}'.")
            return None

    except (OSError, ValueError) as e:
        logging.error(f"An error occurred while loading the point file: {e}")
        return None

    if data.ndim == 1:
        data = data.reshape(1, -1) if data.size > 0 else data.reshape(0, 0)

    logging.info(f"Successfully loaded {data.shape[0]} points from {os.path.basename(file_path)}.")
    return data
