# spatial_dbscan/main_live.py

import sys
import logging

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import QThread, pyqtSignal, QObject

# --- Import project modules ---
from .clustering.dbscan import DBScan
from .clustering.errors import DBScanError
from .clustering.parameters import define_parameters, validate_parameters
from .clustering.utils.sample_data import generate_blobs
from .live_visualizer import LiveVisualizer
from .console_logger import setup_logging


class ClusteringWorker(QObject):
    """
    Runs one complete DBSCAN pass on its own thread.

    The worker owns a private copy of the points and reports back exactly once:
    either `result_ready` with the ClusteringResult or `failed` with the error
    message, followed by `finished`.
    """
    result_ready = pyqtSignal(object)
    failed = pyqtSignal(str)
    finished = pyqtSignal()

    def __init__(self, points, eps, min_points):
        super().__init__()
        self.points = tuple(points)
        self.eps = eps
        self.min_points = min_points

    def run(self):
        """The one-shot job executed when the thread starts."""
        logging.info(f"--- Clustering {len(self.points)} points on worker thread ---")
        try:
            result = DBScan(eps=self.eps, min_points=self.min_points).run(self.points)
        except DBScanError as e:
            logging.error(f"Clustering failed: {e}")
            self.failed.emit(str(e))
        else:
            logging.info(f"Found {result.num_clusters} clusters, {len(result.noise_ids())} noise points")
            self.result_ready.emit(result)
        self.finished.emit()


def main(params=None):
    """Viewer entry point: generates sample blobs, clusters them off the GUI thread and plots the result."""
    setup_logging()
    if params is None:
        params = define_parameters()
    validate_parameters(params)

    viewer_params = params['viewer_params']
    dbscan_params = params['dbscan_params']
    points = generate_blobs(viewer_params)

    app = QApplication(sys.argv)
    worker_thread = QThread()
    worker = ClusteringWorker(points, dbscan_params['eps'], dbscan_params['min_points'])
    worker.moveToThread(worker_thread)

    visualizer = LiveVisualizer(worker, worker_thread, points, area_size=viewer_params['area_size'])
    visualizer.show()

    worker_thread.started.connect(worker.run)
    worker.result_ready.connect(visualizer.show_result)
    worker.failed.connect(visualizer.show_error)
    worker.finished.connect(worker_thread.quit)
    worker.finished.connect(worker.deleteLater)
    worker_thread.start()
    sys.exit(app.exec_())


if __name__ == '__main__':
    main()
