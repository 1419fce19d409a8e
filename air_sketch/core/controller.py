"""
Gesture controller that turns per-frame fingertip samples into shapes.
"""

import logging
from typing import Callable, Optional

from ..config.settings import SketchConfig
from ..gestures.features import bounding_box
from ..gestures.shape_classifier import ShapeClassifier, ShapeResult
from ..utils.gesture_utils import Path, Point, PathUtils
from ..utils.path_buffer import PathBuffer
from ..utils.smoothing import PointFilter

logger = logging.getLogger(__name__)


class GestureSession:
    """Filter and buffer state for one gesture; created at gesture start."""

    def __init__(self, config: SketchConfig):
        self.filter = PointFilter(
            config.FILTER_MIN_CUTOFF,
            config.FILTER_BETA,
            config.FILTER_DERIVATIVE_CUTOFF,
            config.SAMPLE_RATE,
        )
        self.buffer = PathBuffer(config.MOVEMENT_THRESHOLD)

    def add_sample(self, raw: Point) -> Point:
        """Smooth one raw sample and offer it to the buffer."""
        smooth = self.filter.filter(raw)
        self.buffer.append(smooth)
        return smooth


class GestureController:
    """
    Orchestrates capture and analysis for a single tracked fingertip.

    Feed it once per tracker frame with ``on_frame``. While the gesturing flag
    is set, samples are smoothed and buffered; when it clears (or the hand
    stays lost for too long) the buffered stroke is frozen, gated, scaled to
    the analysis canvas and classified.
    """

    def __init__(self, config: Optional[SketchConfig] = None,
                 classifier: Optional[ShapeClassifier] = None,
                 on_gesture_complete: Optional[Callable[[Path], None]] = None,
                 on_shape: Optional[Callable[[ShapeResult], None]] = None,
                 reporter=None):
        """
        Args:
            config: Tunable constants; defaults to SketchConfig()
            classifier: Shape classifier; defaults to one built from config
            on_gesture_complete: Called with the frozen normalized path of
                                every gesture that passes the length gate
            on_shape: Called with every ShapeResult
            reporter: Optional SketchLogger for console output
        """
        self.config = config or SketchConfig()
        self.classifier = classifier or ShapeClassifier(self.config)
        self.on_gesture_complete = on_gesture_complete
        self.on_shape = on_shape
        self.reporter = reporter

        self.session: Optional[GestureSession] = None
        self.last_path: Path = ()
        self.tracking_loss_frames = 0

    @property
    def drawing(self) -> bool:
        return self.session is not None

    @property
    def current_path(self) -> Path:
        """Live stroke while drawing, otherwise the last finished stroke."""
        if self.session is not None:
            return self.session.buffer.snapshot()
        return self.last_path

    def clear_path(self):
        self.last_path = ()

    def on_frame(self, point: Optional[Point], gesturing: bool) -> Optional[ShapeResult]:
        """
        Process one tracker frame.

        Args:
            point: Normalized fingertip position, or None if no hand was found
            gesturing: Whether the external pinch detector reports drawing

        Returns:
            ShapeResult when this frame finished a recognized gesture, else None
        """
        if point is None:
            self.tracking_loss_frames += 1
            if self.drawing and self.tracking_loss_frames > self.config.MAX_TRACKING_LOSS_FRAMES:
                logger.debug(f"Hand lost for {self.tracking_loss_frames} frames, completing gesture")
                return self.end_gesture()
            return None

        self.tracking_loss_frames = 0

        if gesturing:
            if self.session is None:
                self.start_gesture()
            self.session.add_sample(point)
            return None

        if self.drawing:
            return self.end_gesture()
        return None

    def start_gesture(self):
        """Begin a new gesture with fresh filter and buffer state."""
        self.session = GestureSession(self.config)
        self.last_path = ()
        logger.debug("Gesture started")
        if self.reporter:
            self.reporter.log_gesture_start()

    def end_gesture(self) -> Optional[ShapeResult]:
        """Freeze the current stroke and analyse it."""
        session, self.session = self.session, None
        if session is None:
            return None

        path = session.buffer.snapshot()
        self.last_path = path

        if len(path) < self.config.MIN_GESTURE_POINTS:
            self._discard(path, f"only {len(path)} points")
            return None

        if self.on_gesture_complete:
            self.on_gesture_complete(path)

        result = self.analyze(path)
        if result is None:
            return None

        if self.reporter:
            self.reporter.log_shape(result)
        if self.on_shape:
            self.on_shape(result)
        return result

    def analyze(self, path: Path) -> Optional[ShapeResult]:
        """
        Classify a frozen normalized stroke.

        Returns:
            ShapeResult, or None when the stroke is too small to be deliberate
        """
        pixel_path = PathUtils.scale_path(path, self.config.CANVAS_WIDTH, self.config.CANVAS_HEIGHT)
        box = bounding_box(pixel_path)
        if max(box.width, box.height) < self.config.MIN_SHAPE_SIZE:
            self._discard(path, f"{box.width:.0f}x{box.height:.0f}px is below the minimum size")
            return None
        return self.classifier.classify_path(pixel_path)

    def _discard(self, path: Path, reason: str):
        logger.debug(f"Gesture discarded: {reason}")
        if self.reporter:
            self.reporter.log_gesture_discarded(len(path), reason)
