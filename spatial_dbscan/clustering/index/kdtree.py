# spatial_dbscan/clustering/index/kdtree.py

import logging

from ..algorithms.quickselect import quick_select
from ..errors import InvalidDimensionError

logger = logging.getLogger(__name__)


class Node:
    """
    A k-d tree node. Owns one point and at most one left and one right subtree.

    Points in the left subtree have a coordinate <= the node's on the node's
    splitting axis, points in the right subtree a coordinate >= it.
    """
    __slots__ = ('point', 'left', 'right')

    def __init__(self, point, left=None, right=None):
        self.point = point
        self.left = left
        self.right = right


class KDTree:
    """
    Balanced k-d tree over SpatialPoint objects, built for DBSCAN range queries.

    Level d of the tree splits on axis d % k. Each level's median is placed
    with Floyd-Rivest selection on disjoint slices of a single working list,
    which keeps construction at O(n log n) expected without copying sub-lists.
    Range queries walk the tree with an explicit stack and prune a far subtree
    when the radius, converted to that axis's units by the query point, cannot
    reach across the splitting plane.

    The tree is immutable once built; rebuild it to change the point set.
    """

    def __init__(self, root=None, k=0, size=0):
        self.root = root
        self.k = k
        self.size = size

    @classmethod
    def from_points(cls, points):
        """
        Builds a balanced tree from a collection of points.

        The dimensionality of the tree is taken from the first point.

        Args:
            points (Sequence[SpatialPoint]): Points to index. Not modified.

        Returns:
            KDTree: The built tree; an empty tree (root None, k 0) for no points.

        Raises:
            InvalidDimensionError: if the first point reports a non-positive dimension,
                or any other point reports a different one.
        """
        if len(points) == 0:
            return cls(root=None, k=0, size=0)

        k = points[0].dimension()
        if k <= 0:
            raise InvalidDimensionError("Dimension must be positive")
        if any(p.dimension() != k for p in points):
            raise InvalidDimensionError(f"All points must have the tree dimension ({k})")

        working = list(points)
        root = _build(working, k, 0, len(working) - 1, 0)
        logger.debug(f"Built k-d tree over {len(working)} points (k={k})")
        return cls(root=root, k=k, size=len(working))

    def __len__(self):
        return self.size

    @property
    def is_empty(self):
        return self.root is None

    def range_search(self, query, radius):
        """
        Finds every indexed point within radius of the query point.

        Args:
            query (SpatialPoint): Center of the search.
            radius (float): Search radius in the units of query.distance_to().

        Returns:
            list: Points whose distance to query is <= radius (in no particular order).
                Empty for a negative radius.

        Raises:
            InvalidDimensionError: if query.dimension() differs from the tree's k.
        """
        if self.root is None:
            return []

        if query.dimension() != self.k:
            raise InvalidDimensionError(
                f"Query point dimension ({query.dimension()}) "
                f"does not match tree dimension ({self.k})"
            )

        if radius < 0:
            return []

        k = self.k
        threshold = query.threshold_for(radius)
        # Per-axis reach of the radius only depends on the query, not the node
        axis_reach = [query.axis_radius(radius, axis) for axis in range(k)]
        query_coords = [query.coordinate_at(axis) for axis in range(k)]

        results = []
        stack = [(self.root, 0)]
        while stack:
            node, depth = stack.pop()
            axis = depth % k
            point = node.point

            if point.comparison_value(query) <= threshold:
                results.append(point)

            q = query_coords[axis]
            split = point.coordinate_at(axis)
            reach = axis_reach[axis]
            d = depth + 1

            if node.left is not None and (q <= split or q - reach <= split):
                stack.append((node.left, d))
            if node.right is not None and (q >= split or q + reach >= split):
                stack.append((node.right, d))

        return results

    def __iter__(self):
        """Yields the indexed points in pre-order."""
        if self.root is None:
            return
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node.point
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)


def _build(points, k, start, end, depth):
    """Recursively builds the subtree for points[start:end + 1] in place."""
    if start > end:
        return None
    if start == end:
        return Node(points[start])

    axis = depth % k
    median_idx = start + (end - start) // 2

    def compare_on_axis(a, b):
        va = a.coordinate_at(axis)
        vb = b.coordinate_at(axis)
        return (va > vb) - (va < vb)

    quick_select(points, median_idx, start, end, compare_on_axis)

    return Node(
        points[median_idx],
        left=_build(points, k, start, median_idx - 1, depth + 1),
        right=_build(points, k, median_idx + 1, end, depth + 1),
    )
