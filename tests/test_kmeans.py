import statistics

import pytest

from hitcluster.kmeans import kmeans
from hitcluster.points import Point

BLOBS = [
    Point(0.0, 0.0),
    Point(1.0, 0.0),
    Point(0.0, 1.0),
    Point(1.0, 1.0),
    Point(20.0, 20.0),
    Point(21.0, 20.0),
    Point(20.0, 21.0),
    Point(21.0, 21.0),
]


def test_single_cluster_takes_every_point():
    clusters = kmeans(BLOBS, 1)
    assert len(clusters) == 1
    assert sorted(clusters[0].points, key=lambda p: (p.x, p.y)) == sorted(
        BLOBS, key=lambda p: (p.x, p.y)
    )
    assert clusters[0].centroid.x == pytest.approx(statistics.fmean(p.x for p in BLOBS))
    assert clusters[0].centroid.y == pytest.approx(statistics.fmean(p.y for p in BLOBS))


@pytest.mark.parametrize("k", [1, 2, 3, 4])
def test_points_are_partitioned(k):
    clusters = kmeans(BLOBS, k)
    assert len(clusters) == k
    assigned = [p for cluster in clusters for p in cluster.points]
    assert len(assigned) == len(BLOBS)
    assert sorted(assigned, key=lambda p: (p.x, p.y)) == sorted(BLOBS, key=lambda p: (p.x, p.y))


@pytest.mark.parametrize("seed", [0, 1, 12345])
def test_centroids_are_member_means(seed):
    for cluster in kmeans(BLOBS, 2, seed=seed):
        if cluster.points:
            assert cluster.centroid.x == pytest.approx(statistics.fmean(p.x for p in cluster.points))
            assert cluster.centroid.y == pytest.approx(statistics.fmean(p.y for p in cluster.points))


def test_same_seed_gives_same_result():
    first = kmeans(BLOBS, 3, seed=7)
    second = kmeans(BLOBS, 3, seed=7)
    assert len(first) == 3
    assert sum(len(cluster.points) for cluster in first) == len(BLOBS)
    assert [c.centroid for c in first] == [c.centroid for c in second]
    assert [c.points for c in first] == [c.points for c in second]


def test_identical_points_leave_other_clusters_empty_at_origin():
    points = [Point(5.0, 5.0)] * 4
    clusters = kmeans(points, 3)
    assert clusters[0].points == points
    assert clusters[0].centroid == Point(5.0, 5.0)
    for cluster in clusters[1:]:
        assert cluster.points == []
        assert cluster.centroid == Point(0.0, 0.0)


def test_empty_points_rejected():
    with pytest.raises(ValueError):
        kmeans([], 2)


@pytest.mark.parametrize("k", [0, -1])
def test_bad_k_rejected(k):
    with pytest.raises(ValueError):
        kmeans(BLOBS, k)