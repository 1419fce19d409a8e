#!/usr/bin/env python3
"""Tests for arc-length resampling."""

import math

import pytest

from air_sketch.gestures.resampler import resample
from air_sketch.utils.gesture_utils import GeometryUtils, Point


def zigzag(count=9):
    return [Point(i * 20.0, 0.0 if i % 2 == 0 else 35.0) for i in range(count)]


def uneven_line():
    # Dense at the start, sparse at the end
    xs = [0, 1, 2, 3, 4, 5, 50, 120, 300]
    return [Point(float(x), float(x) / 2) for x in xs]


def circle(count=37, radius=50.0):
    return [Point(radius * math.cos(2 * math.pi * i / (count - 1)),
                  radius * math.sin(2 * math.pi * i / (count - 1)))
            for i in range(count)]


def with_repeats():
    return [Point(0, 0), Point(0, 0), Point(10, 0), Point(10, 0), Point(10, 10)]


PATHS = [zigzag(), uneven_line(), circle(), with_repeats()]


@pytest.mark.parametrize("points", PATHS)
@pytest.mark.parametrize("n", [2, 3, 10, 64, 100, 257])
def test_exact_point_count(points, n):
    assert len(resample(points, n)) == n


@pytest.mark.parametrize("points", PATHS)
def test_first_point_preserved(points):
    result = resample(points, 50)
    assert result[0] == points[0]


@pytest.mark.parametrize("points", PATHS)
def test_last_point_reached(points):
    result = resample(points, 50)
    assert result[-1].distance_to(points[-1]) < 1e-6


def test_even_spacing_on_straight_line():
    result = resample([Point(0, 0), Point(3, 0), Point(10, 0)], 11)
    for i, p in enumerate(result):
        assert abs(p.x - i) < 1e-9
        assert p.y == 0


def test_spacing_never_exceeds_interval():
    """Consecutive samples are at most one arc-length interval apart."""
    points = zigzag()
    n = 40
    interval = GeometryUtils.calculate_path_length(points) / (n - 1)
    result = resample(points, n)
    for a, b in zip(result, result[1:]):
        assert a.distance_to(b) <= interval + 1e-9


def test_one_long_edge_holds_many_samples():
    result = resample([Point(0, 0), Point(100, 0)], 5)
    assert [round(p.x, 9) for p in result] == [0, 25, 50, 75, 100]


def test_short_input_returned_unchanged():
    assert resample([], 10) == ()
    assert resample([Point(1, 2)], 10) == (Point(1, 2),)


def test_zero_length_path():
    result = resample([Point(5, 5)] * 4, 6)
    assert result == (Point(5, 5),) * 6


def test_invalid_count():
    with pytest.raises(ValueError):
        resample(zigzag(), 1)


def test_input_not_mutated():
    points = zigzag()
    original = list(points)
    resample(points, 30)
    assert points == original
