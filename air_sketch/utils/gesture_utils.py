"""
Shared utilities for stroke capture and shape analysis.

This module provides the point/path value types and the common geometry
used by the filter, the path buffer, and every analysis stage.
"""

import math
from dataclasses import dataclass
from typing import Any, Iterable, List, Tuple

import numpy as np


@dataclass(frozen=True)
class Point:
    """Immutable 2D point, normalized (0..1) during capture."""
    x: float
    y: float

    def __repr__(self):
        return f"Point({self.x:.3f}, {self.y:.3f})"

    def distance_to(self, other: 'Point') -> float:
        """Calculate Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def scaled(self, sx: float, sy: float) -> 'Point':
        """Return this point with each axis multiplied, e.g. into pixel space."""
        return Point(self.x * sx, self.y * sy)


# Ordered, immutable sequence of points in gesture (temporal) order.
Path = Tuple[Point, ...]


class GeometryUtils:
    """Utility class for geometric calculations."""

    @staticmethod
    def calculate_centroid(points: Iterable[Point]) -> Point:
        """Calculate the centroid of a list of points."""
        points = list(points)
        if not points:
            return Point(0.0, 0.0)
        sum_x = sum(p.x for p in points)
        sum_y = sum(p.y for p in points)
        return Point(sum_x / len(points), sum_y / len(points))

    @staticmethod
    def calculate_distance(p1: Point, p2: Point) -> float:
        """Calculate Euclidean distance between two points."""
        return math.hypot(p1.x - p2.x, p1.y - p2.y)

    @staticmethod
    def calculate_path_length(points: List[Point]) -> float:
        """Calculate total path length."""
        if len(points) < 2:
            return 0.0

        length = 0.0
        for i in range(1, len(points)):
            length += GeometryUtils.calculate_distance(points[i-1], points[i])
        return length

    @staticmethod
    def calculate_perpendicular_distance(point: Point, line_start: Point, line_end: Point) -> float:
        """Calculate perpendicular distance from point to the line through two points."""
        # Zero-length chord: measure straight to the start point
        if line_start.x == line_end.x and line_start.y == line_end.y:
            return GeometryUtils.calculate_distance(point, line_start)

        # Line equation: Ax + By + C = 0
        A = line_end.y - line_start.y
        B = line_start.x - line_end.x
        C = line_end.x * line_start.y - line_start.x * line_end.y

        denominator = math.hypot(A, B)
        if denominator < 1e-9:
            return GeometryUtils.calculate_distance(point, line_start)

        return abs(A * point.x + B * point.y + C) / denominator


class PathUtils:
    """Utility class for path conversion."""

    @staticmethod
    def to_points(raw: Iterable[Any]) -> Path:
        """
        Convert (x, y) pairs, {'x', 'y'} dicts or Points into a Path.

        Raises:
            ValueError: If an entry has no usable x/y coordinates
        """
        points = []
        for item in raw:
            if isinstance(item, Point):
                points.append(item)
            elif isinstance(item, dict):
                if 'x' not in item or 'y' not in item:
                    raise ValueError("Each point dict must contain 'x' and 'y'")
                points.append(Point(float(item['x']), float(item['y'])))
            else:
                try:
                    x, y = item
                except (TypeError, ValueError):
                    raise ValueError(f"Cannot interpret {item!r} as a point")
                points.append(Point(float(x), float(y)))
        return tuple(points)

    @staticmethod
    def scale_path(points: Iterable[Point], sx: float, sy: float) -> Path:
        """Scale every point of a path, e.g. normalized -> pixel space."""
        return tuple(p.scaled(sx, sy) for p in points)

    @staticmethod
    def as_array(points: Iterable[Point]) -> np.ndarray:
        """Return an (n, 2) float array of coordinates."""
        coords = [(p.x, p.y) for p in points]
        if not coords:
            return np.zeros((0, 2), dtype=float)
        return np.array(coords, dtype=float)
