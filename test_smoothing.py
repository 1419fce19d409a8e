#!/usr/bin/env python3
"""Tests for the adaptive fingertip filter."""

import pytest

from air_sketch.utils.gesture_utils import Point
from air_sketch.utils.smoothing import (
    AdaptiveFilter, LowPassFilter, PointFilter, smoothing_factor
)


def test_smoothing_factor_range():
    """Higher cutoffs weight the new sample more, always within (0, 1)."""
    low = smoothing_factor(1.0, 30.0)
    high = smoothing_factor(10.0, 30.0)
    assert 0.0 < low < high < 1.0


def test_first_sample_passes_through():
    f = AdaptiveFilter()
    assert f.filter(0.42) == 0.42
    assert f.last_value == 0.42


def test_constant_input_never_drifts():
    """A stream that starts at v and stays at v comes out exactly v."""
    for value in (0.0, 0.37, 1.0, 512.5):
        f = AdaptiveFilter()
        outputs = [f.filter(value) for _ in range(200)]
        assert all(out == value for out in outputs)


def test_step_converges_and_holds_steady():
    f = AdaptiveFilter()
    f.filter(0.0)
    outputs = [f.filter(1.0) for _ in range(500)]

    # Tracks the new level within a second of samples
    assert abs(outputs[29] - 1.0) < 0.01
    # Output never overshoots the step
    assert all(0.0 < out <= 1.0 for out in outputs)
    # ...and eventually stops moving entirely
    tail = outputs[-50:]
    assert all(out == tail[0] for out in tail)
    assert abs(tail[0] - 1.0) < 1e-9


def test_fast_motion_raises_cutoff():
    """With beta > 0 a sudden jump is followed more closely than by a fixed filter."""
    adaptive = AdaptiveFilter(min_cutoff=1.2, beta=1.0)
    fixed = AdaptiveFilter(min_cutoff=1.2, beta=0.0)
    for _ in range(10):
        adaptive.filter(0.0)
        fixed.filter(0.0)

    fast = adaptive.filter(1.0)
    slow = fixed.filter(1.0)
    assert fast > slow


def test_zero_beta_is_plain_low_pass():
    fixed = AdaptiveFilter(min_cutoff=2.0, beta=0.0, rate=30.0)
    reference = LowPassFilter()
    alpha = smoothing_factor(2.0, 30.0)

    samples = [0.0, 0.1, 0.5, 0.4, 0.9, 1.0, 0.2]
    for sample in samples:
        assert fixed.filter(sample) == reference.filter(sample, alpha)


def test_reset_forgets_state():
    f = AdaptiveFilter()
    f.filter(0.0)
    f.filter(0.5)
    f.reset()
    assert f.last_value is None
    assert f.filter(0.9) == 0.9


@pytest.mark.parametrize("kwargs", [
    {'min_cutoff': 0.0},
    {'min_cutoff': -1.0},
    {'derivative_cutoff': 0.0},
    {'rate': 0.0},
    {'beta': -0.1},
])
def test_invalid_parameters(kwargs):
    with pytest.raises(ValueError):
        AdaptiveFilter(**kwargs)


def test_point_filter_axes_are_independent():
    """Moving only along x leaves y untouched."""
    f = PointFilter()
    first = f.filter(Point(0.2, 0.6))
    assert first == Point(0.2, 0.6)

    for i in range(1, 20):
        out = f.filter(Point(0.2 + i * 0.02, 0.6))
        assert out.y == 0.6
        assert 0.2 < out.x <= 0.2 + i * 0.02


def test_point_filter_reset():
    f = PointFilter()
    f.filter(Point(0.0, 0.0))
    f.filter(Point(0.5, 0.5))
    f.reset()
    assert f.filter(Point(0.9, 0.1)) == Point(0.9, 0.1)
