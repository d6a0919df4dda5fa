# hitcluster

Small tools for working with clusters of hits on a rectangular grid and with
clusters of points in the plane:

- **Grid generation** (`hitcluster.grid`, `hitcluster.generation`) — place
  random clusters of neighbouring hits on a grid, rejecting any new cluster
  that lands on or next to a hit already there.
- **Window sums** (`hitcluster.window`) — accumulate hit sums over fixed
  `k`-wide column windows of a grid and report the largest running sum.
- **k-means** (`hitcluster.points`, `hitcluster.kmeans`, `hitcluster.cli`) —
  read 2D points from a CSV file, group them with Lloyd's algorithm and report
  each cluster's centroid.

No third-party libraries are needed.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `hitcluster-generate`

```
hitcluster-generate [--mode {clusters,single}] [--seed N] [--rows N] [--cols N]
                    [--max-hits N] [--max-clusters N]
```

Grids are printed one row per line, cell values written side by side
(`0` for empty, `1` for a hit). Defaults are a 10×10 grid.

- `--mode clusters` (default): places one cluster, then draws fewer than
  `--max-clusters` (default 9) further candidates. Before each candidate after
  the first it prints the `current grid`; each candidate is printed as
  `cluster grid`, preceded by a line saying it overlaps when it does, and is
  merged only when it does not. The result is printed as `final grid`.
  `--max-hits` defaults to 9.
- `--mode single`: prints the empty grid, places one cluster and prints the
  grid again. `--max-hits` defaults to 6.

A cluster is a random seed cell plus fewer than `--max-hits` extra hits, each
placed in a random one of the eight neighbouring cells; extra hits that would
fall off the grid are dropped. `--seed` makes the run repeatable.

### `hitcluster-window`

Runs the window search on a built-in 10×10 sample grid with `k = 5`, printing
every running sum, then `Clustering completed. Results written`. It takes no
options and writes no files.

### `hitcluster-kmeans`

```
hitcluster-kmeans [path] [--data-dir DIR] [--dataset NAME] [-k N] [--seed N] [--all]
```

Reads a CSV file whose first line is a header and whose rows start with
`x,y` (further columns are ignored), runs k-means and prints one
`Cluster centroid: x: ..., y: ...` line per cluster; `--all` also prints every
point of each cluster. Without `path`, the file is `--data-dir` (default
`../data/`) joined with `--dataset` (one of a fixed list of names such as
`2spiral.csv`, `banana.csv`, `zelnik6.csv`; default `2spiral.csv`). `-k`
defaults to 3 and `--seed` to 12345. An unreadable, malformed or empty file is
reported on standard error and the command exits with status 1.

## Library use

```python
import random

from hitcluster.grid import new_grid, insert_cluster, has_overlap, merge_cluster, format_grid

rng = random.Random(1)
grid = new_grid(10, 10)
insert_cluster(grid, rng, 9)          # returns the seed cell (row, col)

candidate = new_grid(10, 10)
insert_cluster(candidate, rng, 9)
if not has_overlap(grid, candidate):
    merge_cluster(grid, candidate)    # also returns False itself on overlap

print(format_grid(grid))
```

`neighbours(row, col, nrow, ncol)` yields the in-grid neighbours of a cell.
`generate_clustered_grid` and `generate_single_cluster` in
`hitcluster.generation` do what the command does and return the grid; pass a
`random.Random` and a text stream to control randomness and output.

Window sums:

```python
from hitcluster.window import find_max_sum

best = find_max_sum(grid, 5, log=None)
```

The first stage accumulates, over the first `k` rows, the sums of the first
`k` and of the last `k` columns; the second stage accumulates over every row.
The sums are running totals across rows, and the largest value reached is
returned. Pass a text stream as `log` to see each running sum. `k` must lie
between 1 and the smaller grid dimension, or `ValueError` is raised.

k-means on points from a file:

```python
from hitcluster.points import read_points, format_cluster
from hitcluster.kmeans import kmeans

points = read_points("data/banana.csv")
for cluster in kmeans(points, 3, seed=12345):
    print(format_cluster(cluster, print_all=False))
```

`Point` is a frozen dataclass with `x` and `y`; `Cluster` holds `points` and
`centroid`. `kmeans` draws its starting centroids from the points (with
replacement) using a generator seeded with `seed`, so the same input and seed
always give the same clusters. A cluster left without points has its centroid
set to the origin. Iteration stops once no centroid moves by `1e-5` or more;
there is no iteration limit.

## What it does not do

- No point datasets are included; `hitcluster-kmeans` expects them in the
  data directory you point it at.
- Cluster memberships and centroids are only printed; they are not written to
  CSV or any other file.
- The window search only reports the largest sum; it does not pick out
  clusters or compute their centroids.