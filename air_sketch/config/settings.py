"""
Configuration settings for air-sketch capture and shape recognition.
"""

from typing import Optional


class SketchConfig:
    """
    Tunable constants for stroke stabilization and shape classification.

    Class attributes are the defaults. An instance can override any of them
    by keyword, e.g. ``SketchConfig(CIRCLE_MIN_CIRCULARITY=0.75)``.
    """

    # Adaptive filter (normalized units, per axis)
    FILTER_MIN_CUTOFF = 1.2        # Hz at rest
    FILTER_BETA = 0.5              # cutoff gain per unit/s of speed
    FILTER_DERIVATIVE_CUTOFF = 1.0
    SAMPLE_RATE = 30.0             # tracker frames per second

    # Path capture (normalized units)
    MOVEMENT_THRESHOLD = 0.005     # ignore tremor below this
    MIN_GESTURE_POINTS = 6
    MAX_TRACKING_LOSS_FRAMES = 15  # ~0.5s of lost hand before completing

    # Analysis space (pixels)
    CANVAS_WIDTH = 1280
    CANVAS_HEIGHT = 720
    MIN_SHAPE_SIZE = 30.0          # larger box side, smaller strokes are dropped

    # Resampling and simplification
    RESAMPLE_COUNT = 100
    SIMPLIFY_EPSILON: Optional[float] = None  # absolute; overrides the ratio
    SIMPLIFY_EPSILON_RATIO = 0.05             # of the bounding box diagonal
    CLOSURE_DISTANCE: Optional[float] = None  # absolute; overrides the ratio
    CLOSURE_RATIO = 0.2                       # of the stroke length

    # Rule thresholds
    LINE_MIN_LINEARITY = 0.85
    CIRCLE_MIN_CIRCULARITY = 0.8
    CIRCLE_MIN_VERTICES = 7
    STAR_MAX_FILL_RATIO = 0.45
    STAR_MIN_VERTICES = 6
    QUAD_VERTEX_COUNTS = (4,)
    DIAMOND_ALIGNMENT_TOLERANCE = 0.2  # fraction of box width/height
    SQUARE_ASPECT_TOLERANCE = 0.3
    CIRCLE_FALLBACK_CIRCULARITY = 0.65

    def __init__(self, **overrides):
        """
        Raises:
            ValueError: If a name is not a known setting or a value is out of range
        """
        for name, value in overrides.items():
            if not name.isupper() or not hasattr(type(self), name):
                raise ValueError(f"Unknown setting: {name}")
            setattr(self, name, value)
        self.validate()

    def validate(self):
        """Check ranges of the current values."""
        if self.RESAMPLE_COUNT < 2:
            raise ValueError("RESAMPLE_COUNT must be at least 2")
        if self.MIN_GESTURE_POINTS < 2:
            raise ValueError("MIN_GESTURE_POINTS must be at least 2")
        if self.FILTER_MIN_CUTOFF <= 0 or self.FILTER_DERIVATIVE_CUTOFF <= 0:
            raise ValueError("Filter cutoffs must be positive")
        if self.SAMPLE_RATE <= 0:
            raise ValueError("SAMPLE_RATE must be positive")
        if self.CANVAS_WIDTH <= 0 or self.CANVAS_HEIGHT <= 0:
            raise ValueError("Canvas size must be positive")

        non_negative = [
            'FILTER_BETA', 'MOVEMENT_THRESHOLD', 'MAX_TRACKING_LOSS_FRAMES',
            'MIN_SHAPE_SIZE', 'SIMPLIFY_EPSILON_RATIO', 'CLOSURE_RATIO',
            'DIAMOND_ALIGNMENT_TOLERANCE', 'SQUARE_ASPECT_TOLERANCE',
        ]
        for name in non_negative:
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")
        for name in ('SIMPLIFY_EPSILON', 'CLOSURE_DISTANCE'):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must not be negative")

    def simplify_epsilon(self, box) -> float:
        """Simplification tolerance for a stroke with bounding box ``box``."""
        if self.SIMPLIFY_EPSILON is not None:
            return self.SIMPLIFY_EPSILON
        return self.SIMPLIFY_EPSILON_RATIO * box.diagonal

    def closure_threshold(self, perimeter: float) -> float:
        """Largest start-end gap that still counts as a closed stroke."""
        if self.CLOSURE_DISTANCE is not None:
            return self.CLOSURE_DISTANCE
        return self.CLOSURE_RATIO * perimeter
