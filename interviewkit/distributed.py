"""Query several database replicas in parallel and return the first success."""

from __future__ import annotations

import logging
import queue
import threading
import time
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 3
RETRY_INTERVAL = 0.5
TOTAL_TIMEOUT = 2.0


class NotFoundError(Exception):
    """A replica's definitive answer that the data does not exist; never retried."""


class AllReplicasFailedError(Exception):
    """Raised when no replica produced a successful answer."""


class QueryTimeoutError(TimeoutError):
    """Raised when the overall timeout expires before any success."""


class DatabaseHost(ABC):
    """A replica that can run a query.

    ``cancelled`` is an event that is set once the caller no longer needs
    the answer; long-running hosts should watch it and give up.
    """

    @abstractmethod
    def do_query(self, cancelled: threading.Event, query: str) -> str:
        """Run ``query`` and return its result, or raise on failure."""


@dataclass
class _Response:
    host: DatabaseHost
    message: str = ""
    error: Exception | None = None


_DONE = object()


def _ask_replica(
    replica: DatabaseHost,
    query: str,
    cancelled: threading.Event,
    results: queue.Queue,
    max_attempts: int,
    retry_interval: float,
) -> None:
    for _ in range(max_attempts):
        if cancelled.is_set():
            return
        try:
            message = replica.do_query(cancelled, query)
        except NotFoundError as exc:
            results.put(_Response(replica, error=exc))
            return
        except Exception as exc:  # any other failure is retried
            logger.debug("replica %r failed: %s", replica, exc)
            if cancelled.wait(retry_interval):
                return
            continue
        results.put(_Response(replica, message=message))
        return


def distributed_query(
    query: str,
    replicas: Sequence[DatabaseHost],
    *,
    max_attempts: int = MAX_ATTEMPTS,
    retry_interval: float = RETRY_INTERVAL,
    total_timeout: float = TOTAL_TIMEOUT,
) -> str:
    """Send ``query`` to every replica at once and return the first successful result.

    Transient errors are retried up to ``max_attempts`` times per replica with
    ``retry_interval`` seconds between attempts; :class:`NotFoundError` is final
    for that replica. Raises :class:`QueryTimeoutError` if ``total_timeout``
    seconds pass, or :class:`AllReplicasFailedError` once every replica gave up.
    """
    cancelled = threading.Event()
    results: queue.Queue = queue.Queue()
    deadline = time.monotonic() + total_timeout

    workers = [
        threading.Thread(
            target=_ask_replica,
            args=(replica, query, cancelled, results, max_attempts, retry_interval),
            daemon=True,
        )
        for replica in replicas
    ]
    for worker in workers:
        worker.start()

    def close_when_done() -> None:
        for worker in workers:
            worker.join()
        results.put(_DONE)

    threading.Thread(target=close_when_done, daemon=True).start()

    try:
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise QueryTimeoutError(f"query timed out after {total_timeout}s")
            try:
                response = results.get(timeout=remaining)
            except queue.Empty:
                raise QueryTimeoutError(
                    f"query timed out after {total_timeout}s"
                ) from None
            if response is _DONE:
                raise AllReplicasFailedError("all replicas failed after multiple retries")
            if response.error is None:
                logger.info("success from %r: %s", response.host, response.message)
                return response.message
            logger.info("result from %r: %s", response.host, response.error)
    finally:
        cancelled.set()