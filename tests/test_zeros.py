import pytest

from interviewkit.zeros import move_zeros_in_place, move_zeros_new

SOURCE_INPUTS = [
    [0, 1, 2, 3, 1, 2, 9, 2, 3, 4, 6, 0, 0, 12, 34, 34],
    [0, 0, 0, 1, 2, 3],
    [1, 2, 3, 0, 0, 0],
    [1, 2, 3],
    [0, 0, 0],
    [],
    [4, 0, 2, 0, 1, 0, 3],
]


def test_leading_zeros_move_to_end():
    assert move_zeros_new([0, 0, 0, 1, 2, 3]) == [1, 2, 3, 0, 0, 0]


@pytest.mark.parametrize("values", SOURCE_INPUTS)
def test_new_list_preserves_order_and_counts(values):
    result = move_zeros_new(values)
    non_zero = [v for v in values if v != 0]
    assert len(result) == len(values)
    assert result[: len(non_zero)] == non_zero
    assert all(v == 0 for v in result[len(non_zero):])


@pytest.mark.parametrize("values", SOURCE_INPUTS)
def test_new_list_leaves_input_untouched(values):
    original = list(values)
    move_zeros_new(values)
    assert values == original


@pytest.mark.parametrize("values", SOURCE_INPUTS)
def test_in_place_matches_new_list(values):
    expected = move_zeros_new(values)
    data = list(values)
    returned = move_zeros_in_place(data)
    assert returned is None
    assert data == expected


def test_in_place_keeps_identity():
    data = [0, 5, 0, 7]
    alias = data
    move_zeros_in_place(data)
    assert alias is data
    assert data == [5, 7, 0, 0]


def test_no_zeros_unchanged():
    assert move_zeros_new([1, 2, 3]) == [1, 2, 3]