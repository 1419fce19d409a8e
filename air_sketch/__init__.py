"""
Air Sketch Package
Fingertip stroke stabilization and geometric shape recognition.
"""

from .core.controller import GestureController, GestureSession
from .config.settings import SketchConfig
from .gestures.shape_classifier import ShapeClassifier, ShapeLabel, ShapeResult
from .utils.gesture_utils import Point

__version__ = "1.0.0"
__all__ = [
    "GestureController",
    "GestureSession",
    "SketchConfig",
    "ShapeClassifier",
    "ShapeLabel",
    "ShapeResult",
    "Point",
]
