"""A fixed-size pool of workers consuming jobs from a shared queue."""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 3


@dataclass(frozen=True)
class Job:
    """Input for one unit of work."""

    id: int


@dataclass(frozen=True)
class JobResult:
    """The outcome of one job."""

    job_id: int
    output: int


def _double(job: Job) -> int:
    return job.id * 2


def run_worker_pool(
    jobs: Iterable[Job],
    handler: Callable[[Job], int] = _double,
    num_workers: int = DEFAULT_WORKERS,
) -> list[JobResult]:
    """Run ``handler`` over ``jobs`` with ``num_workers`` threads.

    Results are returned in the order the jobs finished. An exception raised
    by the handler is re-raised once all workers have stopped.
    """
    if num_workers <= 0:
        raise ValueError(f"number of workers must be positive, got {num_workers}")

    pending: queue.Queue[Job | None] = queue.Queue()
    for job in jobs:
        pending.put(job)
    for _ in range(num_workers):
        pending.put(None)

    results: list[JobResult] = []
    errors: list[BaseException] = []
    lock = threading.Lock()

    def worker(worker_id: int) -> None:
        while (job := pending.get()) is not None:
            logger.debug("worker %d started job %d", worker_id, job.id)
            try:
                output = handler(job)
            except BaseException as exc:
                with lock:
                    errors.append(exc)
                continue
            logger.debug("worker %d finished job %d", worker_id, job.id)
            with lock:
                results.append(JobResult(job.id, output))
        logger.debug("worker %d stopping", worker_id)

    threads = [
        threading.Thread(target=worker, args=(worker_id,), daemon=True)
        for worker_id in range(1, num_workers + 1)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    if errors:
        raise errors[0]
    return results