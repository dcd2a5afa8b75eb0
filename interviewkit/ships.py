"""Count ships (islands of ones) on a flat battle field."""

from __future__ import annotations

from collections.abc import Sequence


def count_ships(battle_field: Sequence[int], width: int) -> int:
    """Count groups of adjacent ones on a field stored row by row.

    A cell starts a new ship when it is set and neither its upper nor its
    left neighbour holds a 1.
    """
    if not battle_field:
        return 0
    if width <= 0:
        raise ValueError(f"field width must be positive, got {width}")
    if len(battle_field) % width:
        raise ValueError(
            f"field length ({len(battle_field)}) is not a multiple of its width ({width})"
        )

    ships = 0
    for index, cell in enumerate(battle_field):
        if cell == 0:
            continue
        row, col = divmod(index, width)
        has_top = row > 0 and battle_field[index - width] == 1
        has_left = col > 0 and battle_field[index - 1] == 1
        if not has_top and not has_left:
            ships += 1
    return ships