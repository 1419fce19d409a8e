"""
Logging utilities for gestures and recognized shapes.
"""

import datetime
import logging
from typing import Optional

logger = logging.getLogger(__name__)

SHAPE_ICONS = {
    'line': '📏',
    'circle': '⭕',
    'triangle': '🔺',
    'square': '🟥',
    'rectangle': '▭',
    'diamond': '🔷',
    'pentagon': '⬟',
    'star': '⭐',
    'blob': '🫧',
}


class SketchLogger:
    """Handles console reporting of gestures and recognized shapes."""

    def __init__(self, debug_file: Optional[str] = None):
        self.debug_file = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'w')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not open debug file: {e}")

    def _timestamp(self) -> str:
        return datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]

    def log_gesture_start(self):
        """Log the start of a drawing gesture."""
        print(f"[{self._timestamp()}] ✍️  DRAWING STARTED")

    def log_gesture_discarded(self, point_count: int, reason: str):
        """Log a gesture that was too short or too small to analyse."""
        print(f"[{self._timestamp()}] 🗑️  GESTURE DISCARDED: {point_count} point(s), {reason}")

    def log_shape(self, result):
        """Log a recognized shape."""
        timestamp = self._timestamp()
        label = result.label.value
        icon = SHAPE_ICONS.get(label, '❔')
        features = result.features
        box = result.bounding_box

        print(f"[{timestamp}] {icon} {label.upper()} (rule: {result.rule})")
        print(f"   Box: ({box.min_x:.0f}, {box.min_y:.0f}) {box.width:.0f}x{box.height:.0f}px")
        print(f"   Center: ({result.center.x:.0f}, {result.center.y:.0f})")
        print(f"   Vertices: {features.vertex_count}, circularity: {features.circularity:.2f}, "
              f"fill ratio: {features.fill_ratio:.2f}, linearity: {features.linearity:.2f}")
        if result.outline:
            print(f"   Outline: {len(result.outline)} points")

        # Debug file logging
        if self.debug_file:
            try:
                self.debug_file.write(f"[{timestamp}] {result}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not write debug file: {e}")

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
