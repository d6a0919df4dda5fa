"""Generate hit grids populated with random, non-touching clusters."""

from __future__ import annotations

import argparse
import random
import sys
from typing import TextIO

from hitcluster.grid import (
    MAX_CLUSTERS,
    MAX_HITS,
    NCOL,
    NROW,
    SINGLE_MAX_HITS,
    Grid,
    format_grid,
    has_overlap,
    insert_cluster,
    merge_cluster,
    new_grid,
)


def _write_grid(out: TextIO, grid: Grid, title: str | None = None, blank: bool = True) -> None:
    if title is not None:
        out.write(title + "\n")
    out.write(format_grid(grid) + "\n")
    if blank:
        out.write("\n")


def generate_single_cluster(
    rng: random.Random | None = None,
    out: TextIO | None = None,
    nrow: int = NROW,
    ncol: int = NCOL,
    max_hits: int = SINGLE_MAX_HITS,
) -> Grid:
    """Print an empty grid, place one cluster in it, print and return it."""
    rng = rng if rng is not None else random.Random()
    out = out if out is not None else sys.stdout
    grid = new_grid(nrow, ncol)
    _write_grid(out, grid)
    insert_cluster(grid, rng, max_hits)
    _write_grid(out, grid, blank=False)
    return grid


def generate_clustered_grid(
    rng: random.Random | None = None,
    out: TextIO | None = None,
    nrow: int = NROW,
    ncol: int = NCOL,
    max_hits: int = MAX_HITS,
    max_clusters: int = MAX_CLUSTERS,
) -> Grid:
    """Build a grid of clusters that neither overlap nor touch, reporting each step.

    One cluster is always placed; then fewer than ``max_clusters`` further
    candidates are drawn, and each is kept only when it is clear of the
    hits already on the grid.
    """
    if max_clusters < 1:
        raise ValueError(f"max_clusters must be at least 1, got {max_clusters}")
    rng = rng if rng is not None else random.Random()
    out = out if out is not None else sys.stdout

    grid = new_grid(nrow, ncol)
    insert_cluster(grid, rng, max_hits)
    _write_grid(out, grid, "empty grid with one cluster")

    for attempt in range(rng.randrange(max_clusters)):
        if attempt:
            _write_grid(out, grid, "current grid")
        candidate = new_grid(nrow, ncol)
        insert_cluster(candidate, rng, max_hits)
        if has_overlap(grid, candidate):
            out.write("the following cluster grid has overlap with the current grid\n")
        _write_grid(out, candidate, "cluster grid")
        merge_cluster(grid, candidate)

    _write_grid(out, grid, "final grid")
    return grid


def _positive(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def main(argv: list[str] | None = None) -> int:
    """Generate a grid from the command line and print it."""
    parser = argparse.ArgumentParser(description="Generate random hit clusters on a grid.")
    parser.add_argument("--mode", choices=("clusters", "single"), default="clusters")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--rows", type=_positive, default=NROW)
    parser.add_argument("--cols", type=_positive, default=NCOL)
    parser.add_argument("--max-hits", type=_positive, default=None)
    parser.add_argument("--max-clusters", type=_positive, default=MAX_CLUSTERS)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    if args.mode == "single":
        max_hits = args.max_hits if args.max_hits is not None else SINGLE_MAX_HITS
        generate_single_cluster(rng, sys.stdout, args.rows, args.cols, max_hits)
    else:
        max_hits = args.max_hits if args.max_hits is not None else MAX_HITS
        generate_clustered_grid(rng, sys.stdout, args.rows, args.cols, max_hits, args.max_clusters)
    return 0


if __name__ == "__main__":
    sys.exit(main())