"""
Douglas-Peucker path simplification algorithm implementation.

This module reduces a dense stroke to its geometrically salient vertices,
used both to count polygon corners and to build low-vertex outlines.
"""

from typing import Iterable, List, Sequence

from .gesture_utils import Path, Point, GeometryUtils


class DouglasPeucker:
    """
    Douglas-Peucker path simplification algorithm.

    The recursion works on index ranges of a single backing sequence and
    marks the vertices to keep, so no sub-path copies are made.
    """

    def __init__(self, epsilon: float = 15.0):
        """
        Initialize the Douglas-Peucker algorithm.

        Args:
            epsilon: Maximum distance threshold for point elimination, in
                    the same units as the path coordinates.
                    Higher values = more aggressive simplification.

        Raises:
            ValueError: If epsilon is negative
        """
        if epsilon < 0:
            raise ValueError("epsilon must not be negative")
        self.epsilon = epsilon

    def simplify(self, points: Iterable[Point]) -> Path:
        """
        Simplify a path using the Douglas-Peucker algorithm.

        Args:
            points: Points of the path in order

        Returns:
            Simplified path; inputs of 2 points or fewer are returned unchanged

        Performance:
            O(n log n) average case, O(n²) worst case
        """
        points = tuple(points)
        if len(points) <= 2:
            return points

        keep = [False] * len(points)
        keep[0] = keep[-1] = True
        self._douglas_peucker(points, 0, len(points) - 1, keep)

        return tuple(p for p, kept in zip(points, keep) if kept)

    def _douglas_peucker(self, points: Sequence[Point], first: int, last: int,
                         keep: List[bool]):
        """
        Core Douglas-Peucker step over points[first..last].

        Args:
            points: Backing sequence
            first: Index of the range start (already kept)
            last: Index of the range end (already kept)
            keep: Per-index keep flags, updated in place
        """
        if last - first < 2:
            return

        start = points[first]
        end = points[last]

        # Find point with maximum perpendicular distance from the chord
        max_dist = 0.0
        max_index = first
        for i in range(first + 1, last):
            dist = GeometryUtils.calculate_perpendicular_distance(points[i], start, end)
            if dist > max_dist:
                max_dist = dist
                max_index = i

        # If max distance is greater than epsilon, split there and recurse;
        # otherwise everything between the endpoints is dropped
        if max_dist > self.epsilon:
            keep[max_index] = True
            self._douglas_peucker(points, first, max_index, keep)
            self._douglas_peucker(points, max_index, last, keep)

    def simplify_polygon(self, points: Iterable[Point]) -> Path:
        """
        Simplify a closed stroke and drop a redundant seam vertex.

        The stroke is first split at the point farthest from its start, which
        on a convex outline is always a corner, instead of at the short and
        arbitrarily oriented start-end chord.

        The first and last points of a closed stroke are the same corner of
        the polygon. When the stroke started in the middle of an edge that
        corner is not real: if it lies within epsilon of the chord joining
        its two neighbours it is removed and the polygon is re-closed on the
        next vertex.

        Returns:
            Simplified polygon whose last point closes onto its first
        """
        points = tuple(points)
        if len(points) < 4:
            return self.simplify(points)

        start = points[0]
        last = len(points) - 1
        far = max(range(1, last), key=lambda i: start.distance_to(points[i]))
        if start.distance_to(points[far]) <= self.epsilon:
            return self.simplify(points)

        keep = [False] * len(points)
        keep[0] = keep[far] = keep[last] = True
        self._douglas_peucker(points, 0, far, keep)
        self._douglas_peucker(points, far, last, keep)
        simplified = tuple(p for p, kept in zip(points, keep) if kept)

        if len(simplified) < 5:
            return simplified

        seam = simplified[0]
        after = simplified[1]
        before = simplified[-2]
        if GeometryUtils.calculate_perpendicular_distance(seam, before, after) <= self.epsilon:
            return simplified[1:-1] + (simplified[1],)
        return simplified

    def get_compression_ratio(self, original: Sequence[Point], simplified: Sequence[Point]) -> float:
        """
        Calculate the compression ratio achieved by simplification.

        Args:
            original: Original list of points
            simplified: Simplified list of points

        Returns:
            Compression ratio (original_length / simplified_length)
        """
        if not original or not simplified:
            return 1.0
        return len(original) / len(simplified)


def douglas_peucker(points: Iterable[Point], epsilon: float = 15.0) -> Path:
    """
    Convenience function for Douglas-Peucker simplification.

    Args:
        points: Points to simplify
        epsilon: Distance threshold in path units (default: 15.0)

    Returns:
        Simplified path

    Example:
        >>> points = [Point(0, 0), Point(1, 1), Point(2, 2), Point(3, 3)]
        >>> douglas_peucker(points, epsilon=0.5)
        (Point(0.000, 0.000), Point(3.000, 3.000))
    """
    dp = DouglasPeucker(epsilon)
    return dp.simplify(points)
