"""Run-length encoding of text."""

from itertools import groupby


def rle_encode(text: str) -> str:
    """Encode each run of equal characters as its length followed by the character."""
    return "".join(f"{len(list(run))}{char}" for char, run in groupby(text))