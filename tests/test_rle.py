import re

import pytest

from interviewkit.rle import rle_encode

SAMPLES = [
    "AAAbbc",
    "WWWWWWWWWWWWBWWWWWWWWWWWWBBBWWWWWWWWWWWWWWWWWWWWWWWWBWWWWWWWWWWWWWW",
    "abc",
    "AAAAA",
    "привет",
]

_RUN = re.compile(r"(\d+)(\D)")


def _runs(encoded):
    return [(int(count), char) for count, char in _RUN.findall(encoded)]


def test_documented_example():
    assert rle_encode("AAABBC") == "3A2B1C"


def test_empty():
    assert rle_encode("") == ""


@pytest.mark.parametrize("text", SAMPLES)
def test_encoding_is_fully_made_of_runs(text):
    encoded = rle_encode(text)
    assert "".join(f"{c}{ch}" for c, ch in _runs(encoded)) == encoded


@pytest.mark.parametrize("text", SAMPLES)
def test_expanding_runs_restores_text(text):
    assert "".join(ch * count for count, ch in _runs(rle_encode(text))) == text


@pytest.mark.parametrize("text", SAMPLES)
def test_adjacent_runs_differ(text):
    chars = [ch for _, ch in _runs(rle_encode(text))]
    assert all(a != b for a, b in zip(chars, chars[1:]))


def test_single_repeated_char():
    assert rle_encode("z" * 12) == "12z"