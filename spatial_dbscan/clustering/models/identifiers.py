# spatial_dbscan/clustering/models/identifiers.py

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class PointId:
    """Unique identifier of a point inside one clustering run."""
    value: int

    def __repr__(self):
        return f"PointId({self.value})"


@dataclass(frozen=True, order=True)
class ClusterId:
    """Identifier of a discovered cluster. Issued as 1, 2, 3, ... per run."""
    value: int

    def __repr__(self):
        return f"ClusterId({self.value})"
