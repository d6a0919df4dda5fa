[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hitcluster"
version = "0.1.0"
description = "Random hit-cluster generation on detector grids, sliding-window hit sums and k-means clustering of 2D points"
requires-python = ">=3.10"
dependencies = []
keywords = ["clustering", "k-means", "detector", "hits", "grid", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hitcluster-generate = "hitcluster.generation:main"
hitcluster-window = "hitcluster.window:main"
hitcluster-kmeans = "hitcluster.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hitcluster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
