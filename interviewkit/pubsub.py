"""A thread-safe publish/subscribe manager with fan-out to bounded subscriber buffers."""

from __future__ import annotations

import logging
import threading
import time
from collections import deque
from collections.abc import Iterator
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 10


class SubscriptionClosed(Exception):
    """Raised when reading from a subscription that is closed and drained."""


class Subscription:
    """A bounded buffer of messages delivered to one subscriber.

    Messages already buffered stay readable after the subscription closes.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        self._buffer: deque[Any] = deque()
        self._size = buffer_size
        self._closed = False
        self._cond = threading.Condition()

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def _offer(self, message: Any) -> bool:
        """Add ``message`` without blocking; return False if full or closed."""
        with self._cond:
            if self._closed or len(self._buffer) >= self._size:
                return False
            self._buffer.append(message)
            self._cond.notify()
            return True

    def _close(self) -> None:
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def get(self, timeout: float | None = None) -> Any:
        """Return the next message, waiting up to ``timeout`` seconds.

        Raises :class:`SubscriptionClosed` once closed and empty, or
        :class:`TimeoutError` if nothing arrives in time.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._cond:
            while not self._buffer:
                if self._closed:
                    raise SubscriptionClosed("subscription is closed")
                if deadline is None:
                    self._cond.wait()
                    continue
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise TimeoutError("no message received in time")
                self._cond.wait(remaining)
            return self._buffer.popleft()

    def __iter__(self) -> Iterator[Any]:
        while True:
            try:
                yield self.get()
            except SubscriptionClosed:
                return


class PubSubManager:
    """Routes messages published to a topic to every subscriber of that topic."""

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        self._buffer_size = buffer_size
        self._lock = threading.RLock()
        self._topics: dict[str, list[Subscription]] = {}

    def publish(self, topic: str, message: Any) -> None:
        """Deliver ``message`` to each subscriber of ``topic`` without blocking.

        A subscriber whose buffer is full misses the message.
        """
        with self._lock:
            subscribers = list(self._topics.get(topic, ()))
        for subscription in subscribers:
            if not subscription._offer(message):
                logger.warning(
                    "subscriber of topic %r is blocked; message dropped", topic
                )

    def subscribe(self, topic: str) -> Subscription:
        """Register a new subscriber of ``topic`` and return its subscription."""
        subscription = Subscription(self._buffer_size)
        with self._lock:
            self._topics.setdefault(topic, []).append(subscription)
        return subscription

    def unsubscribe(self, topic: str, subscription: Subscription) -> None:
        """Remove ``subscription`` from ``topic`` and close it."""
        with self._lock:
            subscribers = self._topics.get(topic)
            if subscribers is None:
                return
            self._topics[topic] = [s for s in subscribers if s is not subscription]
            subscription._close()

    def close(self) -> None:
        """Close every subscription and forget all topics."""
        with self._lock:
            for subscribers in self._topics.values():
                for subscription in subscribers:
                    subscription._close()
            self._topics.clear()

    def __enter__(self) -> PubSubManager:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()