"""Adapting a third-party logger to the ``Logger`` interface."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO

CLIENT_MESSAGE = "Сообщение от клиентского кода"


class Logger(ABC):
    """The interface client code expects."""

    @abstractmethod
    def log(self, message: str) -> None:
        """Record ``message``."""


class ThirdPartyLogger:
    """A logger with an incompatible method name."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def print_log(self, msg: str) -> None:
        """Write ``msg`` prefixed with ``ThirdPartyLog:`` on its own line."""
        stream = self._stream if self._stream is not None else sys.stdout
        print("ThirdPartyLog:", msg, file=stream)


class LoggerAdapter(Logger):
    """Presents a :class:`ThirdPartyLogger` as a :class:`Logger`."""

    def __init__(self, backend: ThirdPartyLogger) -> None:
        self.backend = backend

    def log(self, message: str) -> None:
        self.backend.print_log(message)


def client_code(logger: Logger) -> None:
    """Code that depends only on the :class:`Logger` interface."""
    logger.log(CLIENT_MESSAGE)