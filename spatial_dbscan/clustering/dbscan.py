# spatial_dbscan/clustering/dbscan.py

import logging

from .index.kdtree import KDTree
from .models.cluster_label import ClusterLabel
from .models.clustering_result import ClusteringResult
from .models.identifiers import ClusterId
from .parameters import check_dbscan_values

logger = logging.getLogger(__name__)


class DBScan:
    """
    Density-Based Spatial Clustering of Applications with Noise.

      - Core points have at least min_points points (themselves included)
        within eps.
      - Border points are within eps of a core point but are not core points.
      - Noise points are neither.

    Clusters are grown from core points by breadth-first seed expansion over a
    k-d tree built once per run. Points first marked as noise are relabelled
    when a later cluster reaches them as border points; a cluster label is
    never changed once assigned.

    Args:
        eps (float): Neighborhood radius, in the units of the points' distance_to().
            Must be finite and positive.
        min_points (int): Minimum neighborhood size (including the point itself)
            for a core point. Must be a non-negative integer.

    Raises:
        InvalidParameterError: if eps or min_points is invalid.
    """

    def __init__(self, eps, min_points):
        check_dbscan_values(eps, min_points)
        self.eps = float(eps)
        self.min_points = int(min_points)

    def __repr__(self):
        return f"DBScan(eps={self.eps}, min_points={self.min_points})"

    def run(self, points):
        """
        Clusters the given points.

        Args:
            points (Sequence[SpatialPoint]): Points to cluster. Their ids must be
                unique. The order decides cluster numbering only.

        Returns:
            ClusteringResult: Cluster members per ClusterId and a label per PointId.
        """
        if len(points) == 0:
            return ClusteringResult(clusters={}, labels={})

        labels = {point.point_id(): ClusterLabel.UNDEFINED for point in points}
        clusters = {}

        kd_tree = KDTree.from_points(points)
        next_cluster = 1

        for point in points:
            if not labels[point.point_id()].is_undefined:
                continue

            neighbors = kd_tree.range_search(point, self.eps)

            if len(neighbors) < self.min_points:
                # Might still become a border point of a later cluster
                labels[point.point_id()] = ClusterLabel.NOISE
                continue

            cluster_id = ClusterId(next_cluster)
            next_cluster += 1
            self._expand_cluster(kd_tree, point, neighbors, cluster_id, labels, clusters)

        num_noise = sum(1 for label in labels.values() if label.is_noise)
        logger.debug(f"DBSCAN finished: {len(points)} points, {len(clusters)} clusters, {num_noise} noise")
        return ClusteringResult(clusters=clusters, labels=labels)

    def run_async(self, points, executor=None):
        """
        Runs the whole clustering off the calling thread.

        Returns:
            concurrent.futures.Future: Resolves to the ClusteringResult, or
            raises whatever the run raised.
        """
        from .worker import submit_clustering
        return submit_clustering(self, points, executor=executor)

    def _expand_cluster(self, kd_tree, point, neighbors, cluster_id, labels, clusters):
        """Grows cluster_id from the core point over its density-reachable points."""
        label = ClusterLabel.from_cluster_id(cluster_id)
        members = [point]
        clusters[cluster_id] = members
        labels[point.point_id()] = label

        start_id = point.point_id()
        queue = [n for n in neighbors if n.point_id() != start_id]
        seeded = {n.point_id() for n in queue}
        seeded.add(start_id)
        head = 0

        while head < len(queue):
            current = queue[head]
            head += 1
            current_id = current.point_id()

            # Already part of a cluster: nothing to do. Noise is rescued below.
            if labels[current_id].is_member:
                continue

            labels[current_id] = label
            members.append(current)

            current_neighbors = kd_tree.range_search(current, self.eps)
            if len(current_neighbors) >= self.min_points:
                for n in current_neighbors:
                    n_id = n.point_id()
                    if n_id not in seeded and not labels[n_id].is_member:
                        seeded.add(n_id)
                        queue.append(n)
