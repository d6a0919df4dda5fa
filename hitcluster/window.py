"""Sliding-window maximum hit sum over a square grid."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

SAMPLE_GRID: tuple[tuple[int, ...], ...] = (
    (0, 0, 0, 0, 0, 1, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 1, 0, 0),
    (0, 1, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 1, 0),
    (0, 0, 0, 0, 1, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 1, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
)
SAMPLE_K = 5


def find_max_sum(grid: Sequence[Sequence[int]], k: int, log: TextIO | None = None) -> int:
    """Return the largest running window sum found over ``grid``.

    The first stage accumulates the top-left and top-right ``k``-wide
    windows over the first ``k`` rows; the second stage runs down every
    row. Running sums and a size warning are written to ``log`` when given.
    """
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    rows, cols = len(grid), len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must all have the same length")
    if not 1 <= k <= min(rows, cols):
        raise ValueError(f"k must be between 1 and {min(rows, cols)}, got {k}")

    def note(message: str) -> None:
        if log is not None:
            log.write(message + "\n")

    if rows // 2 != k or cols // 2 != k:
        note(f"Rows = {rows}Cols = {cols}k = {k}")

    max_sum = 0
    sum1 = sum2 = 0
    for row in grid[:k]:
        for value in row[:k]:
            sum1 += value
            note(f"Stg1; sum1 = {sum1}")
        max_sum = max(max_sum, sum1)
        for value in row[cols - k:]:
            sum2 += value
            note(f"Stg1; sum2 = {sum2}")
        max_sum = max(max_sum, sum2)

    sum1 = sum2 = 0
    for row in grid:
        for value in row[rows - k:k]:
            sum1 += value
            note(f"Stg2; sum1 = {sum1}")
        max_sum = max(max_sum, sum1)
        for value in row[k - 1:]:
            sum2 += value
            note(f"Stg2; sum2 = {sum2}")
        max_sum = max(max_sum, sum2)
    return max_sum


def main(argv: list[str] | None = None) -> int:
    """Run the window search over the built-in sample grid."""
    find_max_sum(SAMPLE_GRID, SAMPLE_K, sys.stdout)
    sys.stdout.write("Clustering completed. Results written\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())