"""A group of threads that share cancellation and report the first error, plus fan-in helpers."""

from __future__ import annotations

import logging
import queue
import threading
import time
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_FETCH_LIMIT = 10


class TaskGroup:
    """Runs callables in threads and waits for all of them.

    The first exception raised by a task sets :attr:`cancelled` so the
    others can stop early, and is raised again by :meth:`wait`. With a
    ``limit``, :meth:`go` blocks until fewer than ``limit`` tasks are running.
    """

    def __init__(self, limit: int | None = None) -> None:
        if limit is not None and limit <= 0:
            raise ValueError(f"limit must be positive, got {limit}")
        self.cancelled = threading.Event()
        self._slots = threading.Semaphore(limit) if limit is not None else None
        self._threads: list[threading.Thread] = []
        self._lock = threading.Lock()
        self._error: BaseException | None = None

    def _run(self, func: Callable[[], object]) -> None:
        try:
            func()
        except Exception as exc:
            with self._lock:
                if self._error is None:
                    self._error = exc
            self.cancelled.set()
        finally:
            if self._slots is not None:
                self._slots.release()

    def go(self, func: Callable[[], object]) -> None:
        """Start ``func`` in a new thread, waiting for a free slot if limited."""
        if self._slots is not None:
            self._slots.acquire()
        thread = threading.Thread(target=self._run, args=(func,), daemon=True)
        with self._lock:
            self._threads.append(thread)
        thread.start()

    def _join(self) -> None:
        with self._lock:
            threads = list(self._threads)
        for thread in threads:
            thread.join()

    def wait(self) -> None:
        """Wait for every task, then raise the first error if there was one."""
        self._join()
        self.cancelled.set()
        if self._error is not None:
            raise self._error

    def __enter__(self) -> TaskGroup:
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is not None:
            self.cancelled.set()
            self._join()
            return False
        self.wait()
        return False


def _mock_client(cancelled: threading.Event, address: str) -> bytes:
    return ("data from " + address).encode()


def fetch_all(
    addresses: Iterable[str],
    client: Callable[[threading.Event, str], bytes] = _mock_client,
    limit: int = DEFAULT_FETCH_LIMIT,
) -> list[bytes]:
    """Call ``client`` for every address with at most ``limit`` calls at once.

    ``client`` receives the group's cancellation event and an address.
    Responses are returned in the order they arrived; the first client error
    is raised once all calls have finished.
    """
    responses: list[bytes] = []
    lock = threading.Lock()
    group = TaskGroup(limit)

    def fetch(address: str) -> None:
        response = client(group.cancelled, address)
        with lock:
            responses.append(response)
        logger.debug("received: %r", response)

    for address in addresses:
        group.go(lambda address=address: fetch(address))
    group.wait()
    return responses


@dataclass(frozen=True)
class City:
    """A named request that takes ``duration`` seconds to complete."""

    name: str
    duration: float


def _request(city: City, results: queue.Queue) -> None:
    time.sleep(city.duration)
    results.put(city.name)


def fan_in(cities: Iterable[City]) -> Iterator[str]:
    """Start a request per city at once and yield city names as they finish."""
    results: queue.Queue[str] = queue.Queue()
    started = 0
    for city in cities:
        if city.duration < 0:
            raise ValueError(f"duration must not be negative, got {city.duration}")
        threading.Thread(target=_request, args=(city, results), daemon=True).start()
        started += 1
    for _ in range(started):
        yield results.get()