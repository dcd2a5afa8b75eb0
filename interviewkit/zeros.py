"""Moving zero elements to the end of a list while keeping the order of the rest."""

from __future__ import annotations

from collections.abc import Iterable


def move_zeros_new(values: Iterable[int]) -> list[int]:
    """Return a new list with the non-zero values in order followed by all zeros."""
    items = list(values)
    non_zero = [value for value in items if value != 0]
    return non_zero + [0] * (len(items) - len(non_zero))


def move_zeros_in_place(values: list[int]) -> None:
    """Rearrange ``values`` in place so that all zeros end up at the end."""
    non_zero = [value for value in values if value != 0]
    values[: len(non_zero)] = non_zero
    values[len(non_zero):] = [0] * (len(values) - len(non_zero))