# spatial_dbscan/clustering/models/cluster_label.py

from dataclasses import dataclass

from .identifiers import ClusterId

# Raw label values, matching the convention of the grid-based DBSCAN this
# package grew out of: 0 = not yet processed, -1 = noise, >0 = cluster id.
UNDEFINED_VALUE = 0
NOISE_VALUE = -1


@dataclass(frozen=True)
class ClusterLabel:
    """
    Per-point classification produced by a clustering run.

    A label is either UNDEFINED (processing has not reached the point yet),
    NOISE (provisionally or permanently outside every cluster), or the id of
    the cluster the point belongs to.
    """
    value: int

    @classmethod
    def from_cluster_id(cls, cluster_id):
        return cls(cluster_id.value)

    @property
    def is_undefined(self):
        return self.value == UNDEFINED_VALUE

    @property
    def is_noise(self):
        return self.value == NOISE_VALUE

    @property
    def is_member(self):
        return self.value > 0

    @property
    def cluster_id(self):
        """The ClusterId this label refers to, or None for undefined/noise."""
        if self.value > 0:
            return ClusterId(self.value)
        return None

    def __repr__(self):
        if self.is_noise:
            return "ClusterLabel.NOISE"
        if self.is_undefined:
            return "ClusterLabel.UNDEFINED"
        return f"ClusterLabel({self.value})"


ClusterLabel.UNDEFINED = ClusterLabel(UNDEFINED_VALUE)
ClusterLabel.NOISE = ClusterLabel(NOISE_VALUE)
