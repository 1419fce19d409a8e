"""
Arc-length resampling.

Converts a stroke of arbitrary point density into a fixed number of points
spaced evenly along its length, so vertex counting downstream does not
depend on how fast the hand moved.
"""

from typing import Iterable

from ..utils.gesture_utils import Path, Point, GeometryUtils

DEFAULT_RESAMPLE_COUNT = 100


def resample(points: Iterable[Point], n: int = DEFAULT_RESAMPLE_COUNT) -> Path:
    """
    Resample points to ``n`` points with equal arc-length spacing.

    Args:
        points: Stroke in temporal order
        n: Number of output points (at least 2)

    Returns:
        Exactly ``n`` points, the first equal to the first input point.
        Inputs with fewer than 2 points are returned unchanged.

    Raises:
        ValueError: If n < 2
    """
    if n < 2:
        raise ValueError("Resample count must be at least 2")

    points = tuple(points)
    if len(points) < 2:
        return points

    interval = GeometryUtils.calculate_path_length(points) / (n - 1)
    D = 0.0
    resampled = [points[0]]

    for i in range(1, len(points)):
        prev_point = points[i-1]
        curr_point = points[i]
        d = GeometryUtils.calculate_distance(prev_point, curr_point)

        # An edge can hold several interval boundaries; keep cutting it
        while d > 0 and D + d >= interval and len(resampled) < n:
            ratio = (interval - D) / d
            q = Point(prev_point.x + ratio * (curr_point.x - prev_point.x),
                      prev_point.y + ratio * (curr_point.y - prev_point.y))
            resampled.append(q)
            prev_point = q
            d = GeometryUtils.calculate_distance(q, curr_point)
            D = 0.0
        D += d

    # Rounding can leave us short of the final boundary
    while len(resampled) < n:
        resampled.append(points[-1])

    return tuple(resampled)
