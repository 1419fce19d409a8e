"""
Point accumulation for the gesture in progress.
"""

from typing import List, Optional

from .gesture_utils import Path, Point


class PathBuffer:
    """
    Accumulates filtered points for one gesture.

    A point is kept only if it moved more than ``movement_threshold`` from
    the last kept point, which drops tremor while the hand is holding still.
    Whether the finished gesture is long enough to analyse is left to the
    caller.
    """

    def __init__(self, movement_threshold: float = 0.005):
        if movement_threshold < 0:
            raise ValueError("movement_threshold must not be negative")
        self.movement_threshold = movement_threshold
        self._points: List[Point] = []

    def __len__(self) -> int:
        return len(self._points)

    @property
    def last_point(self) -> Optional[Point]:
        return self._points[-1] if self._points else None

    def append(self, point: Point) -> bool:
        """Add ``point`` if it moved far enough; return whether it was kept."""
        if self._points and self._points[-1].distance_to(point) <= self.movement_threshold:
            return False
        self._points.append(point)
        return True

    def reset(self):
        self._points.clear()

    def snapshot(self) -> Path:
        """Immutable copy of the current contents; the buffer is not cleared."""
        return tuple(self._points)
