"""Command line: read a point dataset, run k-means and print the clusters."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from hitcluster.kmeans import DEFAULT_SEED, kmeans
from hitcluster.points import format_cluster, read_points

DATA_DIR = "../data/"
DATA_FILES = (
    "2spiral.csv", "3MC.csv", "banana.csv",
    "complex9.csv", "cure-t2-4k.csv", "curves1.csv",
    "curves2.csv", "dartboard1.csv", "dartboard2.csv",
    "diamond9.csv", "donut3.csv", "donutcurves.csv",
    "ds2c2sc13.csv", "pearl.csv", "rings.csv",
    "smile2.csv", "spherical_6_2.csv", "spiralsquare.csv",
    "target.csv", "twenty.csv", "twodiamonds.csv",
    "zelnik1.csv", "zelnik3.csv", "zelnik6.csv",
)
DEFAULT_K = 3


def _positive(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def main(argv: list[str] | None = None) -> int:
    """Cluster a dataset with k-means and print each cluster's centroid."""
    parser = argparse.ArgumentParser(description="Run k-means over an x,y CSV dataset.")
    parser.add_argument("path", nargs="?", default=None, help="CSV file to read")
    parser.add_argument("--data-dir", default=DATA_DIR)
    parser.add_argument("--dataset", choices=DATA_FILES, default=DATA_FILES[0])
    parser.add_argument("-k", type=_positive, default=DEFAULT_K)
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument("--all", action="store_true", help="also print every point")
    args = parser.parse_args(argv)

    path = Path(args.path) if args.path is not None else Path(args.data_dir) / args.dataset

    try:
        points = read_points(path)
    except OSError:
        print(f"Error opening file: {path}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    if not points:
        print(f"No points in file: {path}", file=sys.stderr)
        return 1

    for cluster in kmeans(points, args.k, args.seed):
        print(format_cluster(cluster, args.all))
    return 0


if __name__ == "__main__":
    sys.exit(main())