#!/usr/bin/env python3
"""Tests for stroke feature extraction."""

import math

from air_sketch.config.settings import SketchConfig
from air_sketch.gestures import features
from air_sketch.gestures.features import FeatureExtractor
from air_sketch.utils.gesture_utils import Point

UNIT_SQUARE = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]


def regular_polygon(k, radius=100.0, closed=True):
    points = [Point(radius * math.cos(2 * math.pi * i / k),
                    radius * math.sin(2 * math.pi * i / k))
              for i in range(k)]
    if closed:
        points.append(points[0])
    return points


def test_unit_square_area():
    assert features.signed_area(UNIT_SQUARE) == 1.0
    assert features.signed_area(list(reversed(UNIT_SQUARE))) == -1.0


def test_area_needs_three_points():
    assert features.signed_area([Point(0, 0), Point(5, 5)]) == 0.0


def test_bounding_box():
    box = features.bounding_box([Point(3, -1), Point(-2, 4), Point(0, 0)])
    assert (box.min_x, box.max_x, box.min_y, box.max_y) == (-2, 3, -1, 4)
    assert box.width == 5
    assert box.height == 5
    assert box.center == Point(0.5, 1.5)
    assert abs(box.diagonal - math.hypot(5, 5)) < 1e-12


def test_perimeter_is_open_sum():
    assert features.perimeter_length(UNIT_SQUARE) == 3.0
    assert features.perimeter_length(UNIT_SQUARE + [Point(0, 0)]) == 4.0
    assert features.perimeter_length([Point(1, 1)]) == 0.0


def test_closed_square_circularity():
    value = features.circularity(UNIT_SQUARE + [Point(0, 0)])
    assert abs(value - math.pi / 4) < 1e-12


def test_circularity_approaches_one():
    values = [features.circularity(regular_polygon(k)) for k in (4, 8, 32, 128)]
    assert values == sorted(values)
    assert values[-1] > 0.99
    assert all(v <= 1.0 for v in values)


def test_linearity():
    straight = [Point(i * 10.0, i * 1.0) for i in range(20)]
    assert abs(features.linearity(straight) - 1.0) < 1e-9
    assert features.linearity(UNIT_SQUARE + [Point(0, 0)]) == 0.0


def test_fill_ratio():
    assert features.fill_ratio(UNIT_SQUARE) == 1.0
    diamond = [Point(0, -1), Point(1, 0), Point(0, 1), Point(-1, 0)]
    assert abs(features.fill_ratio(diamond) - 0.5) < 1e-12


def test_degenerate_inputs_do_not_divide_by_zero():
    flat = [Point(0, 0), Point(5, 0), Point(10, 0)]
    assert features.fill_ratio(flat) == 0.0
    assert features.circularity([Point(2, 2)] * 5) == 0.0
    assert features.linearity([Point(2, 2)] * 5) == 0.0

    result = FeatureExtractor().extract([Point(2, 2)] * 5)
    assert result.circularity == 0.0
    assert result.linearity == 0.0
    assert result.fill_ratio == 0.0


def test_is_closed():
    square = UNIT_SQUARE + [Point(0.05, 0)]
    assert features.is_closed(square, 0.1)
    assert not features.is_closed(square, 0.05)
    assert not features.is_closed([Point(0, 0), Point(0, 0)], 1.0)


def test_vertex_count():
    assert features.vertex_count(UNIT_SQUARE + [Point(0, 0)]) == 4
    assert features.vertex_count([]) == 0


def test_extract_regular_polygon():
    points = regular_polygon(64)
    result = FeatureExtractor().extract(points, polygon=regular_polygon(8))

    assert result.closed
    assert result.vertex_count == 8
    assert result.circularity > 0.99
    assert result.linearity < 0.01
    assert abs(result.area - 0.5 * 64 * 100 ** 2 * math.sin(2 * math.pi / 64)) < 1e-6
    assert result.closure_distance < 1e-9


def test_closure_threshold_from_config():
    gap = [Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100), Point(0, 30)]
    # Stroke length 370, gap 30
    assert FeatureExtractor(SketchConfig(CLOSURE_RATIO=0.2)).is_closed(gap)
    assert not FeatureExtractor(SketchConfig(CLOSURE_RATIO=0.05)).is_closed(gap)
    assert not FeatureExtractor(SketchConfig(CLOSURE_DISTANCE=10.0)).is_closed(gap)


def test_circularity_closes_the_stroke():
    """Area closes the polygon implicitly, so the perimeter does too."""
    assert abs(features.circularity(UNIT_SQUARE) - math.pi / 4) < 1e-12
    assert features.closed_perimeter(UNIT_SQUARE) == 4.0
    assert features.perimeter_length(UNIT_SQUARE) == 3.0


def test_unclosed_circle_never_exceeds_one():
    circle = regular_polygon(100, closed=False)
    value = features.circularity(circle)
    assert 0.99 < value <= 1.0


def test_extract_uses_module_measures():
    points = regular_polygon(7, closed=False) + [Point(150, 20)]
    result = FeatureExtractor().extract(points)
    assert result.circularity == features.circularity(points)
    assert result.linearity == features.linearity(points)
    assert result.fill_ratio == features.fill_ratio(points)
    assert result.perimeter == features.perimeter_length(points)
