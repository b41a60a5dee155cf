# spatial_dbscan/clustering/models/clustering_result.py

from types import MappingProxyType

from .cluster_label import ClusterLabel


class ClusteringResult:
    """
    Immutable outcome of one DBSCAN run.

    Attributes:
        clusters (Mapping[ClusterId, tuple]): Points of each cluster, in the
            order they were assigned during expansion.
        labels (Mapping[PointId, ClusterLabel]): Final label of every input point.
    """
    __slots__ = ('_clusters', '_labels')

    def __init__(self, clusters=None, labels=None):
        clusters = clusters or {}
        labels = labels or {}
        object.__setattr__(self, '_clusters', MappingProxyType(
            {cluster_id: tuple(members) for cluster_id, members in clusters.items()}
        ))
        object.__setattr__(self, '_labels', MappingProxyType(dict(labels)))

    def __setattr__(self, name, value):
        raise AttributeError("ClusteringResult is immutable")

    @property
    def clusters(self):
        return self._clusters

    @property
    def labels(self):
        return self._labels

    @property
    def num_clusters(self):
        return len(self._clusters)

    def label_of(self, point_id):
        return self._labels.get(point_id, ClusterLabel.UNDEFINED)

    def noise_ids(self):
        """Ids of every point labelled as noise, in input order."""
        return [point_id for point_id, label in self._labels.items() if label.is_noise]

    def cluster_sizes(self):
        return {cluster_id: len(members) for cluster_id, members in self._clusters.items()}

    def __eq__(self, other):
        if not isinstance(other, ClusteringResult):
            return NotImplemented
        return dict(self._clusters) == dict(other._clusters) and dict(self._labels) == dict(other._labels)

    def __repr__(self):
        return (f"ClusteringResult(clusters={self.num_clusters}, "
                f"points={len(self._labels)}, noise={len(self.noise_ids())})")
