"""Hit grids: cluster placement around a seed hit and overlap checks."""

from __future__ import annotations

import random
from collections.abc import Iterator, Sequence

Grid = list[list[int]]

NROW = 10
NCOL = 10
MAX_HITS = 9
SINGLE_MAX_HITS = 6
MAX_CLUSTERS = 9

# Neighbour positions around a hit, numbered as
#   0 1 2
#   3 x 4
#   5 6 7
OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


def new_grid(nrow: int = NROW, ncol: int = NCOL) -> Grid:
    """Return an empty grid of ``nrow`` rows and ``ncol`` columns."""
    if nrow < 1 or ncol < 1:
        raise ValueError(f"grid must have at least one row and column, got {nrow}x{ncol}")
    return [[0] * ncol for _ in range(nrow)]


def _neighbour(row: int, col: int, position: int, nrow: int, ncol: int) -> tuple[int, int] | None:
    drow, dcol = OFFSETS[position]
    r, c = row + drow, col + dcol
    if 0 <= r < nrow and 0 <= c < ncol:
        return r, c
    return None


def neighbours(row: int, col: int, nrow: int, ncol: int) -> Iterator[tuple[int, int]]:
    """Yield the in-grid neighbours of a cell in positional order 0..7."""
    for position in range(len(OFFSETS)):
        cell = _neighbour(row, col, position, nrow, ncol)
        if cell is not None:
            yield cell


def _shape(grid: Sequence[Sequence[int]]) -> tuple[int, int]:
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    ncol = len(grid[0])
    if any(len(row) != ncol for row in grid):
        raise ValueError("grid rows must all have the same length")
    return len(grid), ncol


def insert_cluster(grid: Grid, rng: random.Random, max_hits: int = MAX_HITS) -> tuple[int, int]:
    """Place a random cluster in ``grid`` and return its seed cell.

    The seed hit lands on a random cell; fewer than ``max_hits`` further
    hits are then tried in random neighbour positions, and those that
    would fall off the grid are dropped.
    """
    if max_hits < 1:
        raise ValueError(f"max_hits must be at least 1, got {max_hits}")
    nrow, ncol = _shape(grid)
    x = rng.randrange(nrow)
    y = rng.randrange(ncol)
    grid[x][y] = 1
    for _ in range(rng.randrange(max_hits)):
        cell = _neighbour(x, y, rng.randrange(len(OFFSETS)), nrow, ncol)
        if cell is not None:
            r, c = cell
            grid[r][c] = 1
    return x, y


def _check_same_shape(grid: Sequence[Sequence[int]], cluster_grid: Sequence[Sequence[int]]) -> tuple[int, int]:
    shape = _shape(grid)
    if _shape(cluster_grid) != shape:
        raise ValueError("grid and cluster grid differ in shape")
    return shape


def has_overlap(grid: Sequence[Sequence[int]], cluster_grid: Sequence[Sequence[int]]) -> bool:
    """Tell whether any hit of ``cluster_grid`` sits on or next to a hit of ``grid``."""
    nrow, ncol = _check_same_shape(grid, cluster_grid)
    for i, row in enumerate(cluster_grid):
        for j, value in enumerate(row):
            if value != 1:
                continue
            if grid[i][j] == 1:
                return True
            if any(grid[r][c] == 1 for r, c in neighbours(i, j, nrow, ncol)):
                return True
    return False


def merge_cluster(grid: Grid, cluster_grid: Sequence[Sequence[int]]) -> bool:
    """Copy the hits of ``cluster_grid`` into ``grid`` unless they overlap.

    Returns True when the cluster was merged.
    """
    if has_overlap(grid, cluster_grid):
        return False
    for grid_row, cluster_row in zip(grid, cluster_grid):
        for j, value in enumerate(cluster_row):
            if value == 1:
                grid_row[j] = 1
    return True


def format_grid(grid: Sequence[Sequence[int]]) -> str:
    """Render a grid as one line of concatenated values per row."""
    return "\n".join("".join(str(value) for value in row) for row in grid)