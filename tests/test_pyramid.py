import pytest

from interviewkit.pyramid import pyramid_row_sum, pyramid_row_sum_naive


@pytest.mark.parametrize("n", range(1, 11))
def test_formula_matches_naive(n):
    assert pyramid_row_sum(n) == pyramid_row_sum_naive(n)


def test_first_rows_from_the_pyramid():
    assert pyramid_row_sum_naive(1) == 1
    assert pyramid_row_sum_naive(2) == 8
    assert pyramid_row_sum_naive(3) == 27


@pytest.mark.parametrize("n", range(1, 20))
def test_row_sums_strictly_increase(n):
    assert pyramid_row_sum_naive(n + 1) > pyramid_row_sum_naive(n)


def test_zero_row_is_empty():
    assert pyramid_row_sum_naive(0) == 0
    assert pyramid_row_sum(0) == 0


@pytest.mark.parametrize("n", range(1, 15))
def test_sum_parity_follows_row_index(n):
    # a row of n odd numbers has the same parity as n
    assert pyramid_row_sum_naive(n) % 2 == n % 2