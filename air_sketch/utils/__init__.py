"""
Utilities package for stroke capture and processing.

This package provides the shared point types, geometry helpers, smoothing
filters, the path buffer and path simplification.
"""

from .gesture_utils import (
    Point,
    Path,
    GeometryUtils,
    PathUtils
)
from .path_buffer import PathBuffer
from .path_simplifier import DouglasPeucker, douglas_peucker
from .smoothing import AdaptiveFilter, LowPassFilter, PointFilter

__all__ = [
    'Point',
    'Path',
    'GeometryUtils',
    'PathUtils',
    'PathBuffer',
    'DouglasPeucker',
    'douglas_peucker',
    'AdaptiveFilter',
    'LowPassFilter',
    'PointFilter'
]
