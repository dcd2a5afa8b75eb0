"""Concurrent aggregation of log messages through a chain of transformers."""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime

logger = logging.getLogger(__name__)


@dataclass
class LogMessage:
    """One log entry."""

    level: str
    message: str
    timestamp: datetime = field(default_factory=datetime.now)


Reader = Callable[[], LogMessage]
Transformer = Callable[[LogMessage], LogMessage]
Storage = Callable[[LogMessage], None]

_STOP = object()


class LogAggregator:
    """Reads log messages and hands them to a pool of workers.

    ``reader`` is called repeatedly and raises :class:`EOFError` when the
    source is exhausted; any other exception is logged and reading goes on.
    Each worker runs a message through every transformer in order and then
    stores it. A transformer that raises drops the message; a storage
    failure is logged.
    """

    def __init__(
        self,
        reader: Reader,
        transformers: Sequence[Transformer],
        storage: Storage,
        num_workers: int,
    ) -> None:
        if num_workers <= 0:
            raise ValueError(f"number of workers must be positive, got {num_workers}")
        self._reader = reader
        self._transformers = list(transformers)
        self._storage = storage
        self._num_workers = num_workers

    def _process(self, worker_id: int, message: LogMessage) -> LogMessage | None:
        logger.debug("[worker %d] processing: %s", worker_id, message.message)
        original = message.message
        current = message
        for transform in self._transformers:
            try:
                current = transform(current)
            except Exception as exc:
                logger.warning(
                    "[worker %d] error transforming log %r: %s; log skipped",
                    worker_id,
                    original,
                    exc,
                )
                return None
        try:
            self._storage(current)
        except Exception as exc:
            logger.warning(
                "[worker %d] error storing log %r: %s", worker_id, original, exc
            )
            return None
        logger.debug("[worker %d] stored: %s", worker_id, current.message)
        return current

    def aggregate(self) -> list[LogMessage]:
        """Run the aggregation and return the messages that were stored."""
        pending: queue.Queue = queue.Queue(maxsize=self._num_workers)
        stored: list[LogMessage] = []
        lock = threading.Lock()

        def worker(worker_id: int) -> None:
            while (message := pending.get()) is not _STOP:
                result = self._process(worker_id, message)
                if result is not None:
                    with lock:
                        stored.append(result)

        threads = [
            threading.Thread(target=worker, args=(worker_id,), daemon=True)
            for worker_id in range(self._num_workers)
        ]
        for thread in threads:
            thread.start()

        try:
            while True:
                try:
                    message = self._reader()
                except EOFError:
                    logger.info("log source exhausted; reading finished")
                    break
                except Exception as exc:
                    logger.warning("error reading log: %s", exc)
                    continue
                pending.put(message)
        finally:
            for _ in threads:
                pending.put(_STOP)
            for thread in threads:
                thread.join()

        logger.info("all processing finished")
        return stored