"""
Geometric descriptors of a stroke.

Every value is derived from the path passed in and recomputed per call;
nothing is cached between classifications.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

import numpy as np

from ..config.settings import SketchConfig
from ..utils.gesture_utils import Path, Point, PathUtils


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounding box of a path."""
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def diagonal(self) -> float:
        return math.hypot(self.width, self.height)

    @property
    def center(self) -> Point:
        return Point((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)


@dataclass(frozen=True)
class FeatureVector:
    """Scalar descriptors the shape rules work on."""
    bounding_box: BoundingBox
    perimeter: float
    signed_area: float
    closed: bool
    linearity: float
    circularity: float
    fill_ratio: float
    vertex_count: int
    closure_distance: float
    polygon: Path

    @property
    def area(self) -> float:
        return abs(self.signed_area)


def bounding_box(points: Iterable[Point]) -> BoundingBox:
    coords = PathUtils.as_array(points)
    if len(coords) == 0:
        return BoundingBox(0.0, 0.0, 0.0, 0.0)
    min_x, min_y = coords.min(axis=0)
    max_x, max_y = coords.max(axis=0)
    return BoundingBox(float(min_x), float(max_x), float(min_y), float(max_y))


def perimeter_length(points: Iterable[Point]) -> float:
    """Sum of distances between consecutive points (the stroke is not closed)."""
    coords = PathUtils.as_array(points)
    if len(coords) < 2:
        return 0.0
    steps = np.diff(coords, axis=0)
    return float(np.sum(np.hypot(steps[:, 0], steps[:, 1])))


def signed_area(points: Iterable[Point]) -> float:
    """
    Shoelace area of the path treated as a closed polygon.

    Positive for counter-clockwise order in a y-up frame; callers that only
    need the size take ``abs``.
    """
    coords = PathUtils.as_array(points)
    if len(coords) < 3:
        return 0.0
    x = coords[:, 0]
    y = coords[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def closure_distance(points: Sequence[Point]) -> float:
    """Distance between the first and last point."""
    if len(points) < 2:
        return 0.0
    return points[0].distance_to(points[-1])


def is_closed(points: Sequence[Point], threshold: float) -> bool:
    return len(points) >= 3 and closure_distance(points) < threshold


def linearity(points: Sequence[Point]) -> float:
    """Closure distance over path length: near 1 for a straight stroke."""
    length = perimeter_length(points)
    if length <= 0:
        return 0.0
    return closure_distance(points) / length


def closed_perimeter(points: Sequence[Point]) -> float:
    """Stroke length plus the closing segment back to the start."""
    return perimeter_length(points) + closure_distance(points)


def circularity(points: Sequence[Point]) -> float:
    """
    4*pi*area / perimeter^2: 1.0 for a circle, lower for anything else.

    Area is taken over the implicitly closed polygon, so the perimeter
    includes the closing segment too.
    """
    length = closed_perimeter(points)
    if length <= 0:
        return 0.0
    return 4 * math.pi * abs(signed_area(points)) / (length * length)


def fill_ratio(points: Sequence[Point]) -> float:
    """Polygon area over bounding box area: low for spiky outlines."""
    box_area = bounding_box(points).area
    if box_area <= 0:
        return 0.0
    return abs(signed_area(points)) / box_area


def vertex_count(polygon: Sequence[Point]) -> int:
    """Corners of a simplified polygon; its closing point repeats the first."""
    return max(len(polygon) - 1, 0)


class FeatureExtractor:
    """Computes a FeatureVector from a resampled stroke and its simplified polygon."""

    def __init__(self, config: Optional[SketchConfig] = None):
        self.config = config or SketchConfig()

    def is_closed(self, points: Sequence[Point]) -> bool:
        """Closure test using the configured gap threshold."""
        return is_closed(points, self.config.closure_threshold(perimeter_length(points)))

    def extract(self, points: Sequence[Point], polygon: Optional[Sequence[Point]] = None) -> FeatureVector:
        """
        Args:
            points: Stroke to describe (normally the resampled path)
            polygon: Simplified outline used for the vertex count; defaults
                    to ``points`` itself

        Returns:
            FeatureVector for the stroke
        """
        points = tuple(points)
        polygon = points if polygon is None else tuple(polygon)

        perimeter = perimeter_length(points)

        return FeatureVector(
            bounding_box=bounding_box(points),
            perimeter=perimeter,
            signed_area=signed_area(points),
            closed=is_closed(points, self.config.closure_threshold(perimeter)),
            linearity=linearity(points),
            circularity=circularity(points),
            fill_ratio=fill_ratio(points),
            vertex_count=vertex_count(polygon),
            closure_distance=closure_distance(points),
            polygon=polygon,
        )
