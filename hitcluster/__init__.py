"""Random hit-cluster grids, window hit sums and k-means clustering of 2D points."""

__version__ = "0.1.0"
__all__ = ["grid", "generation", "window", "points", "kmeans", "cli"]