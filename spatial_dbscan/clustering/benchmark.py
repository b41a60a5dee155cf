# spatial_dbscan/clustering/benchmark.py

import logging
import time

from .dbscan import DBScan
from .index.kdtree import KDTree
from .utils.sample_data import generate_random_points


def time_call(fn, repeats=3):
    """Runs fn() `repeats` times and returns the best wall-clock time in seconds."""
    best = float('inf')
    for _ in range(max(1, repeats)):
        start = time.perf_counter()
        fn()
        best = min(best, time.perf_counter() - start)
    return best


def run_benchmarks(repeats=3):
    """
    Times DBSCAN runs, k-d tree construction and range search on random
    geographic points.

    Returns:
        dict: Benchmark name -> best time in seconds.
    """
    timings = {}

    def report(name, fn):
        elapsed = time_call(fn, repeats)
        timings[name] = elapsed
        logging.info(f"{name}: {elapsed * 1000:.2f} ms")

    # --- Dataset size ---
    for count, max_coord, eps in [(100, 0.01, 50), (1000, 0.1, 100), (10000, 1.0, 200)]:
        points = generate_random_points(count, max_coord)
        dbscan = DBScan(eps=eps, min_points=4)
        report(f"DBScan(points={count}, eps={eps}, min_points=4)", lambda: dbscan.run(points))

    # --- Neighborhood radius ---
    test_points = generate_random_points(5000, 0.5)
    for eps in (50, 500, 5000):
        dbscan = DBScan(eps=eps, min_points=4)
        report(f"DBScan(points=5000, eps={eps}, min_points=4)", lambda: dbscan.run(test_points))

    # --- Index ---
    report(f"KDTree.from_points({len(test_points)} points)", lambda: KDTree.from_points(test_points))

    kd_tree = KDTree.from_points(test_points)
    query = test_points[len(test_points) // 2]
    report(f"range_search(radius=500, {len(test_points)} points)", lambda: kd_tree.range_search(query, 500))

    return timings


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
    run_benchmarks()
