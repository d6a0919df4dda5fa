"""Two-dimensional points, clusters of them, and reading them from CSV files."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from os import PathLike


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Cluster:
    """A group of points together with their centroid."""

    points: list[Point] = field(default_factory=list)
    centroid: Point = field(default_factory=Point)


def read_points(path: str | PathLike[str]) -> list[Point]:
    """Read ``x,y[,...]`` rows from a CSV file whose first line is a header.

    Columns after the second are ignored. Raises ``OSError`` when the file
    cannot be opened and ``ValueError`` when a coordinate is not a number.
    """
    points: list[Point] = []
    with open(path, encoding="utf-8") as handle:
        handle.readline()
        for lineno, line in enumerate(handle, start=2):
            fields = line.rstrip("\r\n").split(",")
            x_text = fields[0]
            y_text = fields[1] if len(fields) > 1 else ""
            try:
                points.append(Point(float(x_text), float(y_text)))
            except ValueError as exc:
                raise ValueError(f"{path}:{lineno}: invalid coordinates {line.strip()!r}") from exc
    return points


def _format_number(value: float) -> str:
    """Shortest round-trip text of a float, fixed or scientific, whichever is shorter."""
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "-inf" if value < 0 else "inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    point = len(digits) + exponent

    if exponent >= 0:
        fixed = digits + "0" * exponent
    elif point > 0:
        fixed = f"{digits[:point]}.{digits[point:]}"
    else:
        fixed = "0." + "0" * (-point) + digits

    sci_exp = point - 1
    mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
    scientific = f"{mantissa}e{'-' if sci_exp < 0 else '+'}{abs(sci_exp):02d}"

    text = scientific if len(scientific) < len(fixed) else fixed
    return ("-" if sign else "") + text


def format_cluster(cluster: Cluster, print_all: bool = False) -> str:
    """Describe a cluster by its centroid and, if asked, every one of its points."""
    lines = [
        f"Cluster centroid: x: {_format_number(cluster.centroid.x)}, "
        f"y: {_format_number(cluster.centroid.y)}"
    ]
    if print_all:
        lines.extend(
            f"x: {_format_number(point.x)}, y: {_format_number(point.y)}" for point in cluster.points
        )
    return "\n".join(lines)