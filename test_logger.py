#!/usr/bin/env python3
"""Tests for console and debug-file reporting."""

from air_sketch.gestures.shape_classifier import classify_path
from air_sketch.utils.gesture_utils import Point
from air_sketch.utils.logger import SketchLogger


def test_log_shape_prints_summary(capsys):
    result = classify_path([Point(i * 10.0, 0.0) for i in range(30)])
    SketchLogger().log_shape(result)

    out = capsys.readouterr().out
    assert "LINE (rule: line)" in out
    assert "Vertices: 1" in out


def test_gesture_events(capsys):
    reporter = SketchLogger()
    reporter.log_gesture_start()
    reporter.log_gesture_discarded(3, "only 3 points")

    out = capsys.readouterr().out
    assert "DRAWING STARTED" in out
    assert "3 point(s), only 3 points" in out


def test_debug_file(tmp_path):
    debug_file = tmp_path / "sketch.log"
    reporter = SketchLogger(str(debug_file))
    reporter.log_shape(classify_path([Point(0.0, i * 10.0) for i in range(30)]))
    reporter.close()

    content = debug_file.read_text()
    assert content.startswith("Debug logging started")
    assert "ShapeLabel.LINE" in content
    assert reporter.debug_file is None


def test_unwritable_debug_file_is_not_fatal(tmp_path):
    reporter = SketchLogger(str(tmp_path / "missing" / "sketch.log"))
    assert reporter.debug_file is None
    reporter.close()
