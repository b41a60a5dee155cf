# spatial_dbscan/main_batch.py

import logging
import os
from datetime import datetime

from .clustering.data_loader import load_points
from .clustering.dbscan import DBScan
from .clustering.parameters import define_parameters, validate_parameters
from .clustering.save_result import save_clustering_result
from .console_logger import setup_logging
from .data_adapter import adapt_array_to_points


def run_batch(points_path=None, output_path=None, params=None):
    """
    Clusters a point file in one pass and saves the result.

    Args:
        points_path (str): Path of a .mat/.csv/.json point file. Prompted for if None.
        output_path (str): Target .json file. Defaults to a timestamped file in
            params['io_params']['output_dir'].
        params (dict): Parameters from define_parameters(); defaults are used if None.

    Returns:
        ClusteringResult or None: The result, or None if the input could not be loaded.
    """
    logging.info("--- Starting DBSCAN in Batch Mode ---")

    if params is None:
        params = define_parameters()
    validate_parameters(params)

    if points_path is None:
        points_path = input("Please enter the path to the point file (.mat, .csv or .json): ")
    data = load_points(points_path, params)
    if data is None:
        logging.error("Failed to load point file. Exiting batch run.")
        return None

    points = adapt_array_to_points(data, params)
    dbscan_params = params['dbscan_params']
    logging.info(f"Clustering {len(points)} points with eps={dbscan_params['eps']}, "
                 f"min_points={dbscan_params['min_points']}")

    dbscan = DBScan(eps=dbscan_params['eps'], min_points=dbscan_params['min_points'])
    result = dbscan.run(points)

    # --- Finalization ---
    logging.info("--- Batch Run Complete ---")
    logging.info(f"Found {result.num_clusters} clusters and {len(result.noise_ids())} noise points.")
    for cluster_id, size in sorted(result.cluster_sizes().items()):
        logging.info(f"  Cluster {cluster_id.value}: {size} points")

    if output_path is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = os.path.join(params['io_params']['output_dir'], f"clustering_result_{timestamp}.json")
    save_clustering_result(result, output_path, params=params)

    if params['io_params'].get('save_plot', False) and points and points[0].dimension() >= 2:
        # Imported here so batch runs without plotting never load matplotlib
        from .clustering.visualize_clusters import plot_clusters
        plot_path = os.path.splitext(output_path)[0] + '.png'
        plot_clusters(result, points, title=os.path.basename(points_path), save_path=plot_path)
        logging.info(f"Cluster plot saved to {plot_path}")

    return result


if __name__ == '__main__':
    setup_logging()
    run_batch()
