"""Row sums of the pyramid of consecutive odd numbers.

Row 1 is ``1``, row 2 is ``3 5``, row 3 is ``7 9 11`` and so on; the sum of
row ``n`` is ``n ** 3``.
"""


def pyramid_row_sum(n: int) -> int:
    """Return the sum of row ``n`` using the closed form ``n ** 3``."""
    return n * n * n


def pyramid_row_sum_naive(n: int) -> int:
    """Return the sum of row ``n`` by generating the row's odd numbers."""
    count_before = n * (n - 1) // 2
    start = 2 * count_before + 1
    return sum(range(start, start + 2 * n, 2)) if n > 0 else 0