"""
Shape Classification System for Air-Drawn Strokes

This module maps a finished stroke to one geometric primitive. The stroke is
resampled, simplified to its corners, described by a FeatureVector and then
run through an ordered rule cascade: the first rule that matches wins and a
fallback arm catches everything else.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Optional, Sequence

from ..config.settings import SketchConfig
from ..utils.gesture_utils import Path, Point, GeometryUtils, PathUtils
from ..utils.path_simplifier import DouglasPeucker
from .features import BoundingBox, FeatureExtractor, FeatureVector, bounding_box
from .resampler import resample

logger = logging.getLogger(__name__)


class ShapeLabel(Enum):
    LINE = "line"
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    SQUARE = "square"
    RECTANGLE = "rectangle"
    DIAMOND = "diamond"
    PENTAGON = "pentagon"
    STAR = "star"
    BLOB = "blob"


@dataclass(frozen=True)
class Rule:
    """One arm of the cascade: ``label`` applies when ``predicate`` holds."""
    name: str
    label: ShapeLabel
    predicate: Callable[[FeatureVector, SketchConfig], bool]


@dataclass(frozen=True)
class Classification:
    """Label plus the name of the rule that produced it ('fallback' if none)."""
    label: ShapeLabel
    rule: str


FALLBACK_RULE = "fallback"


@dataclass(frozen=True)
class ShapeResult:
    """What the renderer receives for one recognized stroke."""
    label: ShapeLabel
    bounding_box: BoundingBox
    outline: Optional[Path]
    features: FeatureVector
    center: Point
    rule: str


def opposite_vertices_aligned(corners: Sequence[Point], box: BoundingBox, tolerance: float) -> bool:
    """
    True when every pair of opposite corners shares an x or a y coordinate.

    This is the diamond test: a diamond's opposite corners sit on the box's
    axes of symmetry, while an axis-aligned quad's opposite corners are
    diagonal from each other. Offsets are measured as a fraction of the
    box width (for x) or height (for y).
    """
    count = len(corners)
    if count < 4 or count % 2:
        return False

    half = count // 2
    for i in range(half):
        a = corners[i]
        b = corners[i + half]
        same_x = abs(a.x - b.x) <= tolerance * box.width
        same_y = abs(a.y - b.y) <= tolerance * box.height
        if not (same_x or same_y):
            return False
    return True


def _is_line(features: FeatureVector, config: SketchConfig) -> bool:
    return not features.closed and features.linearity > config.LINE_MIN_LINEARITY


def _is_circle(features: FeatureVector, config: SketchConfig) -> bool:
    return (features.circularity > config.CIRCLE_MIN_CIRCULARITY
            and features.vertex_count >= config.CIRCLE_MIN_VERTICES)


def _is_star(features: FeatureVector, config: SketchConfig) -> bool:
    return (features.fill_ratio < config.STAR_MAX_FILL_RATIO
            and features.vertex_count >= config.STAR_MIN_VERTICES)


def _is_triangle(features: FeatureVector, config: SketchConfig) -> bool:
    return features.vertex_count == 3


def _is_quad(features: FeatureVector, config: SketchConfig) -> bool:
    return features.vertex_count in config.QUAD_VERTEX_COUNTS


def _is_diamond(features: FeatureVector, config: SketchConfig) -> bool:
    if not _is_quad(features, config):
        return False
    corners = features.polygon[:features.vertex_count]
    return opposite_vertices_aligned(corners, features.bounding_box,
                                     config.DIAMOND_ALIGNMENT_TOLERANCE)


def _is_square(features: FeatureVector, config: SketchConfig) -> bool:
    if not _is_quad(features, config):
        return False
    box = features.bounding_box
    short_side = min(box.width, box.height)
    if short_side <= 0:
        return False
    return max(box.width, box.height) / short_side - 1 <= config.SQUARE_ASPECT_TOLERANCE


def _is_pentagon(features: FeatureVector, config: SketchConfig) -> bool:
    return features.vertex_count == 5


# Order is priority: round and spiky shapes are claimed before corner counts,
# since a noisy circle or star can simplify to 4 or 5 vertices.
RULES = (
    Rule("line", ShapeLabel.LINE, _is_line),
    Rule("circle", ShapeLabel.CIRCLE, _is_circle),
    Rule("star", ShapeLabel.STAR, _is_star),
    Rule("triangle", ShapeLabel.TRIANGLE, _is_triangle),
    Rule("diamond", ShapeLabel.DIAMOND, _is_diamond),
    Rule("square", ShapeLabel.SQUARE, _is_square),
    Rule("rectangle", ShapeLabel.RECTANGLE, _is_quad),
    Rule("pentagon", ShapeLabel.PENTAGON, _is_pentagon),
)


def fallback_label(features: FeatureVector, config: SketchConfig) -> ShapeLabel:
    """Label for strokes no rule claimed."""
    if features.circularity > config.CIRCLE_FALLBACK_CIRCULARITY:
        return ShapeLabel.CIRCLE
    if features.closed:
        return ShapeLabel.BLOB
    return ShapeLabel.LINE


class ShapeClassifier:
    """
    Classifies finished strokes into ShapeLabels.

    ``classify_path`` runs the whole analysis pipeline;
    ``classify_features`` is the rule cascade on its own.
    """

    def __init__(self, config: Optional[SketchConfig] = None, rules: Sequence[Rule] = RULES):
        self.config = config or SketchConfig()
        self.rules = tuple(rules)
        self.extractor = FeatureExtractor(self.config)

    def classify_features(self, features: FeatureVector) -> Classification:
        """Run the rule cascade; every feature vector gets exactly one label."""
        for rule in self.rules:
            if rule.predicate(features, self.config):
                return Classification(rule.label, rule.name)
        return Classification(fallback_label(features, self.config), FALLBACK_RULE)

    def extract_features(self, path: Iterable[Point]) -> FeatureVector:
        """
        Resample, simplify and describe a stroke.

        Closed strokes are simplified as polygons so a start point in the
        middle of an edge is not counted as a corner.
        """
        resampled = resample(path, self.config.RESAMPLE_COUNT)
        simplifier = self._simplifier_for(resampled)

        if self.extractor.is_closed(resampled):
            polygon = simplifier.simplify_polygon(resampled)
        else:
            polygon = simplifier.simplify(resampled)

        logger.debug(
            f"Simplified {len(resampled)} -> {len(polygon)} points "
            f"(epsilon {simplifier.epsilon:.2f}, "
            f"ratio {simplifier.get_compression_ratio(resampled, polygon):.1f})"
        )
        return self.extractor.extract(resampled, polygon)

    def classify_path(self, path: Iterable[Any]) -> ShapeResult:
        """
        Classify a finished stroke.

        Args:
            path: Points, (x, y) pairs or {'x', 'y'} dicts in gesture
                  order, in analysis (pixel) units

        Returns:
            ShapeResult with label, bounding box, centre and, for blobs,
            the simplified outline of the stroke. The outline is the polygon
            simplified from the resampled stroke, so the simplifier never
            recurses deeper than RESAMPLE_COUNT points.

        Raises:
            ValueError: If the path has fewer than two points or an entry
                        is not a point
        """
        points = PathUtils.to_points(path)
        if len(points) < 2:
            raise ValueError("Path needs at least two points")

        features = self.extract_features(points)
        classification = self.classify_features(features)

        outline = None
        if classification.label is ShapeLabel.BLOB:
            outline = features.polygon

        logger.debug(
            f"Classified as {classification.label.value} by rule '{classification.rule}' "
            f"(vertices={features.vertex_count}, circularity={features.circularity:.3f}, "
            f"fill={features.fill_ratio:.3f}, linearity={features.linearity:.3f}, "
            f"closed={features.closed})"
        )
        return ShapeResult(
            label=classification.label,
            bounding_box=features.bounding_box,
            outline=outline,
            features=features,
            center=GeometryUtils.calculate_centroid(points),
            rule=classification.rule,
        )

    def get_path_stats(self, path: Iterable[Any]) -> Dict[str, Any]:
        """
        Get detailed statistics about a stroke for debugging/analysis.

        Returns:
            Dictionary with point_count, perimeter, area, closed, linearity,
            circularity, fill_ratio, vertex_count, width, height
        """
        points = PathUtils.to_points(path)
        if len(points) < 2:
            return {}

        features = self.extract_features(points)
        return {
            'point_count': len(points),
            'perimeter': features.perimeter,
            'area': features.area,
            'closed': features.closed,
            'linearity': features.linearity,
            'circularity': features.circularity,
            'fill_ratio': features.fill_ratio,
            'vertex_count': features.vertex_count,
            'width': features.bounding_box.width,
            'height': features.bounding_box.height,
        }

    def _simplifier_for(self, points: Sequence[Point]) -> DouglasPeucker:
        return DouglasPeucker(self.config.simplify_epsilon(bounding_box(points)))


# Convenience function for simple usage
def classify_path(path: Iterable[Any], config: Optional[SketchConfig] = None) -> ShapeResult:
    """
    Simple interface to classify a stroke.

    Args:
        path: Points, pairs or dicts in gesture order, in analysis units

    Returns:
        ShapeResult
    """
    classifier = ShapeClassifier(config)
    return classifier.classify_path(path)


def get_path_stats(path: Iterable[Any], config: Optional[SketchConfig] = None) -> Dict[str, Any]:
    """
    Get detailed statistics about a stroke.

    Args:
        path: Points, pairs or dicts in gesture order, in analysis units

    Returns:
        Dictionary with stroke statistics
    """
    classifier = ShapeClassifier(config)
    return classifier.get_path_stats(path)
