"""
Point formatting for sampled paths.
"""

from collections.abc import Iterable
from typing import TextIO

from pathsampler import config
from pathsampler.motion.types import Point3D


def format_point(point: Point3D, precision: int | None = None) -> str:
    """Format a point as "x, y, z" with fixed decimal places."""
    p = config.OUTPUT_PRECISION if precision is None else precision
    return f"{point.x:.{p}f}, {point.y:.{p}f}, {point.z:.{p}f}"


def write_points(points: Iterable[Point3D], stream: TextIO, precision: int | None = None) -> int:
    """
    Write one formatted line per point.

    Returns:
        Number of points written
    """
    count = 0
    for point in points:
        stream.write(format_point(point, precision) + "\n")
        count += 1
    return count
