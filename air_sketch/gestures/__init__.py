"""
Shape analysis and classification.

This module provides the end-of-gesture pipeline: arc-length resampling,
geometric feature extraction and the rule cascade that names the shape.
"""

from .features import BoundingBox, FeatureExtractor, FeatureVector
from .resampler import resample
from .shape_classifier import (
    Classification,
    Rule,
    RULES,
    ShapeClassifier,
    ShapeLabel,
    ShapeResult,
    classify_path,
    get_path_stats,
)

__all__ = [
    'BoundingBox',
    'FeatureExtractor',
    'FeatureVector',
    'resample',
    'Classification',
    'Rule',
    'RULES',
    'ShapeClassifier',
    'ShapeLabel',
    'ShapeResult',
    'classify_path',
    'get_path_stats',
]
