# spatial_dbscan/clustering/visualize_clusters.py

import matplotlib.pyplot as plt

from ..data_adapter import adapt_points_to_array

NOISE_COLOR = (0.6, 0.6, 0.6)


def plot_clusters(result, points, ax=None, title=None, save_path=None):
    """
    Scatter plot of a ClusteringResult. Only the first two axes are drawn.

    Args:
        result (ClusteringResult): Result of DBScan.run().
        points (Sequence[SpatialPoint]): The points that were clustered.
        ax (matplotlib.axes.Axes): Axes to draw on; a new figure is created if None.
        title (str): Optional plot title.
        save_path (str): If given, the figure is saved there.

    Returns:
        matplotlib.axes.Axes: The axes that were drawn on.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(10, 8))

    cmap = plt.get_cmap('tab20')
    by_id = {p.point_id(): p for p in points}

    noise = [by_id[pid] for pid in result.noise_ids() if pid in by_id]
    if noise:
        xy = adapt_points_to_array(noise, axes=2)
        ax.scatter(xy[:, 0], xy[:, 1], s=8, c=[NOISE_COLOR], marker='x', label='Noise')

    for i, (cluster_id, members) in enumerate(sorted(result.clusters.items())):
        xy = adapt_points_to_array(members, axes=2)
        ax.scatter(xy[:, 0], xy[:, 1], s=12, color=cmap(i % cmap.N), label=f"Cluster {cluster_id.value}")

    ax.set_xlabel("Axis 0")
    ax.set_ylabel("Axis 1")
    ax.grid(True)
    if title:
        ax.set_title(title)
    if result.num_clusters <= 20:
        ax.legend(loc='upper right', fontsize='small')

    if save_path:
        ax.figure.savefig(save_path, dpi=150)
    return ax
