"""K-means clustering of points in the plane."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence

from hitcluster.points import Cluster, Point

DEFAULT_SEED = 12345
THRESHOLD = 1e-5


def _distance(a: Point, b: Point) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def kmeans(points: Sequence[Point], k: int, seed: int = DEFAULT_SEED) -> list[Cluster]:
    """Cluster ``points`` into ``k`` groups with Lloyd's algorithm.

    Initial centroids are points drawn at random (with replacement) from
    the input. A cluster that ends up empty gets its centroid reset to the
    origin. Iteration stops once no centroid moves by ``THRESHOLD`` or more.
    """
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    if not points:
        raise ValueError("cannot cluster an empty set of points")

    rng = random.Random(seed)
    centroids = [points[rng.randrange(len(points))] for _ in range(k)]
    members: list[list[Point]] = [[] for _ in range(k)]

    converged = False
    while not converged:
        members = [[] for _ in range(k)]
        for point in points:
            nearest = min(range(k), key=lambda idx: _distance(point, centroids[idx]))
            members[nearest].append(point)

        new_centroids = [
            Point(
                sum(p.x for p in group) / len(group),
                sum(p.y for p in group) / len(group),
            )
            if group
            else Point()
            for group in members
        ]

        converged = all(
            _distance(old, new) < THRESHOLD for old, new in zip(centroids, new_centroids)
        )
        centroids = new_centroids

    return [Cluster(group, centroid) for group, centroid in zip(members, centroids)]