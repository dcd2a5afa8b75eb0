"""Validate strings against a set of regular expressions."""

from __future__ import annotations

import re
from collections.abc import Iterable
from os import PathLike


class PatternError(ValueError):
    """Raised when a pattern cannot be compiled."""

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line


def _compile(pattern: str, line: int | None = None) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        where = f" on line {line}" if line is not None else ""
        raise PatternError(
            f"cannot compile pattern{where} ({pattern!r}): {exc}", line
        ) from exc


class StringValidator:
    """Holds compiled patterns; a string is valid when it matches all of them."""

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        self._patterns = [_compile(pattern) for pattern in patterns]

    @classmethod
    def from_file(cls, filename: str | PathLike[str]) -> StringValidator:
        """Load one pattern per line from ``filename``, skipping empty lines."""
        validator = cls()
        compiled = []
        with open(filename, encoding="utf-8") as handle:
            for number, raw in enumerate(handle, start=1):
                line = raw.rstrip("\n").rstrip("\r")
                if not line:
                    continue
                compiled.append(_compile(line, number))
        validator._patterns = compiled
        return validator

    @property
    def patterns(self) -> list[str]:
        """The source text of the loaded patterns, in order."""
        return [pattern.pattern for pattern in self._patterns]

    def validate(self, text: str) -> bool:
        """Return True if every pattern matches somewhere in ``text``."""
        return all(pattern.search(text) for pattern in self._patterns)