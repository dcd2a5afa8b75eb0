"""A cache-aside decorator for key/value repositories."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Mapping

logger = logging.getLogger(__name__)


class KeyNotFoundError(KeyError):
    """Raised when a key is absent from a repository."""


class Repository(ABC):
    """Common interface for key/value data access."""

    @abstractmethod
    def get(self, key: str) -> str:
        """Return the value stored under ``key``."""

    @abstractmethod
    def mget(self, *args: str) -> list[str]:
        """Return the values of several keys, in the order given."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key``."""


class InMemoryRepository(Repository):
    """A dictionary-backed repository.

    ``get`` raises :class:`KeyNotFoundError` for a missing key, while
    ``mget`` yields an empty string in its place.
    """

    def __init__(self, data: Mapping[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(data or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> str:
        with self._lock:
            try:
                return self._data[key]
            except KeyError:
                raise KeyNotFoundError(key) from None

    def mget(self, *args: str) -> list[str]:
        with self._lock:
            return [self._data.get(key, "") for key in args]

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)


class CachedRepository(Repository):
    """Wraps another repository with an in-memory cache.

    Reads go to the cache first and fall back to the wrapped repository;
    writes and deletions update the cache and then the wrapped repository.
    """

    def __init__(self, repo: Repository) -> None:
        self._repo = repo
        self._cache: dict[str, str] = {}
        self._lock = threading.RLock()

    @property
    def cache(self) -> dict[str, str]:
        """A snapshot of the cached entries."""
        with self._lock:
            return dict(self._cache)

    def get(self, key: str) -> str:
        with self._lock:
            if key in self._cache:
                logger.debug("cache hit: get %s", key)
                return self._cache[key]
        logger.debug("cache miss: get %s", key)
        value = self._repo.get(key)
        with self._lock:
            self._cache[key] = value
        return value

    def mget(self, *args: str) -> list[str]:
        results: list[str | None] = []
        missing: list[str] = []
        with self._lock:
            for key in args:
                if key in self._cache:
                    logger.debug("cache hit: mget %s", key)
                    results.append(self._cache[key])
                else:
                    logger.debug("cache miss: mget %s", key)
                    results.append(None)
                    if key not in missing:
                        missing.append(key)

        if missing:
            logger.debug("mget fetching %d missing keys: %s", len(missing), missing)
            fetched = dict(zip(missing, self._repo.mget(*missing)))
            with self._lock:
                self._cache.update(fetched)
            results = [
                fetched[key] if value is None else value
                for key, value in zip(args, results)
            ]
        return [value for value in results if value is not None]

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._cache[key] = value
        self._repo.set(key, value)

    def delete(self, key: str) -> None:
        with self._lock:
            self._cache.pop(key, None)
        self._repo.delete(key)