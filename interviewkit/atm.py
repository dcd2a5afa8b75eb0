"""Greedy cash dispensing: split an amount into available banknotes."""

from __future__ import annotations

NOTES: tuple[int, ...] = (5000, 2000, 1000, 500, 100, 50, 10)


class InvalidAmountError(ValueError):
    """Raised when the requested amount is not a positive number."""


class CannotDispenseError(ValueError):
    """Raised when the amount cannot be made up from the available notes."""


def get_money(value: int) -> dict[int, int]:
    """Return a mapping of note denomination to count that sums to ``value``.

    Notes are taken greedily from the largest denomination down.
    """
    if value <= 0:
        raise InvalidAmountError("amount must be a positive number")

    result: dict[int, int] = {}
    remaining = value
    for note in sorted(NOTES, reverse=True):
        if note > remaining:
            continue
        count, remaining = divmod(remaining, note)
        if count:
            result[note] = count

    if remaining:
        raise CannotDispenseError(f"cannot dispense the requested amount {value}")
    return result