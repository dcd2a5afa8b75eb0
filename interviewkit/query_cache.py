"""A caching decorator for database query objects."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class Database(ABC):
    """Anything that can answer a query with a string result."""

    @abstractmethod
    def query(self, query: str) -> str:
        """Run ``query`` and return its result."""


class CachingDatabase(Database):
    """Wraps a database and remembers the result of every query it has run."""

    def __init__(self, db: Database) -> None:
        self.db = db
        self._cache: dict[str, str] = {}
        self._lock = threading.RLock()

    @property
    def cache(self) -> dict[str, str]:
        """A snapshot of the cached query results."""
        with self._lock:
            return dict(self._cache)

    def query(self, query: str) -> str:
        with self._lock:
            if query in self._cache:
                logger.debug("cache hit: %s", query)
                return self._cache[query]
        logger.debug("cache miss, querying the database: %s", query)
        result = self.db.query(query)
        with self._lock:
            self._cache[query] = result
        return result