# spatial_dbscan/live_visualizer.py

import logging

from PyQt5.QtWidgets import QMainWindow, QWidget, QVBoxLayout
import pyqtgraph as pg

from .data_adapter import adapt_points_to_array

NOISE_BRUSH = (150, 150, 150, 120)


def label_brushes(result, points):
    """
    One brush per point: grey for noise, a per-cluster hue otherwise.

    Args:
        result (ClusteringResult): The clustering to color by.
        points (Sequence[SpatialPoint]): Points in plotting order.

    Returns:
        list: pyqtgraph brushes, aligned with points.
    """
    num_clusters = max(result.num_clusters, 1)
    brushes = []
    for p in points:
        label = result.label_of(p.point_id())
        if label.is_member:
            brushes.append(pg.mkBrush(pg.intColor(label.value - 1, hues=num_clusters, alpha=200)))
        else:
            brushes.append(pg.mkBrush(NOISE_BRUSH))
    return brushes


class LiveVisualizer(QMainWindow):
    """
    Main window of the interactive viewer: a pyqtgraph scatter of the points,
    recolored by cluster once the worker thread delivers its result.
    """
    def __init__(self, worker, worker_thread, points, area_size=100.0):
        super().__init__()
        # --- Store references to the worker and its thread ---
        self.worker = worker
        self.worker_thread = worker_thread
        self.points = points
        self.xy = adapt_points_to_array(points, axes=2)

        self.setWindowTitle("Spatial DBSCAN - Live View")
        self.setGeometry(100, 100, 1000, 800)

        # --- Main Widget and Layout ---
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout(central_widget)

        # --- Create the Plot Widget ---
        self.plot_widget = pg.PlotWidget()
        layout.addWidget(self.plot_widget)

        # --- Configure Plot Aesthetics ---
        self.plot_widget.setBackground('k')
        self.plot_widget.setTitle("Clustering...", color="w", size="20pt")
        styles = {'color': 'w', 'font-size': '15px'}
        self.plot_widget.setLabel('left', 'Y', **styles)
        self.plot_widget.setLabel('bottom', 'X', **styles)
        self.plot_widget.showGrid(x=True, y=True)
        self.plot_widget.setAspectLocked(True)
        self.plot_widget.setXRange(0, area_size)
        self.plot_widget.setYRange(0, area_size)

        # --- Create a Scatter Item with the raw points ---
        self.scatter = pg.ScatterPlotItem(size=6, pen=None)
        self.scatter.setData(
            self.xy[:, 0],
            self.xy[:, 1],
            brush=pg.mkBrush(255, 255, 255, 150),
        )
        self.plot_widget.addItem(self.scatter)

    def show_result(self, result):
        """Recolors the scatter once the clustering result arrives."""
        self.scatter.setData(
            self.xy[:, 0],
            self.xy[:, 1],
            brush=label_brushes(result, self.points),
        )
        self.plot_widget.setTitle(
            f"{result.num_clusters} clusters, {len(result.noise_ids())} noise points",
            color="w", size="20pt",
        )

    def show_error(self, message):
        self.plot_widget.setTitle(f"Clustering failed: {message}", color="r", size="14pt")

    def closeEvent(self, event):
        """
        Called when the user closes the window. Waits for the worker thread so
        it never outlives the window.
        """
        logging.info("--- Window closed. Initiating shutdown... ---")
        self.worker_thread.quit()
        self.worker_thread.wait()
        logging.info("--- Shutdown complete. ---")
        event.accept()
