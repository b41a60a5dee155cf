# spatial_dbscan/clustering/worker.py

import logging
from concurrent.futures import ThreadPoolExecutor

logger = logging.getLogger(__name__)


def _run_job(dbscan, points):
    logger.debug(f"Worker started: {len(points)} points with {dbscan}")
    return dbscan.run(points)


def submit_clustering(dbscan, points, executor=None):
    """
    Hands one complete clustering run to a worker thread.

    The worker receives its own snapshot of the point list and sends back a
    single ClusteringResult (or a single exception) through the returned
    future. There are no partial results and the run cannot be cancelled
    once it has started.

    Args:
        dbscan (DBScan): Configured clustering engine.
        points (Sequence[SpatialPoint]): Points to cluster.
        executor (concurrent.futures.Executor): Optional executor to run on. When
            omitted, a single-use worker thread is started and released as
            soon as the run completes.

    Returns:
        concurrent.futures.Future: The pending ClusteringResult.
    """
    snapshot = tuple(points)

    if executor is not None:
        return executor.submit(_run_job, dbscan, snapshot)

    one_shot = ThreadPoolExecutor(max_workers=1, thread_name_prefix="dbscan-worker")
    try:
        future = one_shot.submit(_run_job, dbscan, snapshot)
    finally:
        # Already-submitted work still runs; the thread exits once it is done
        one_shot.shutdown(wait=False)
    return future
