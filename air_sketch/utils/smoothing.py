"""
Adaptive fingertip smoothing.

A speed-adaptive low-pass filter (the "1 Euro" scheme): the cutoff frequency
rises with the filtered speed of the signal, so holds are smoothed heavily
while deliberate strokes keep up with the hand.
"""

import math
from typing import Optional

from .gesture_utils import Point


def smoothing_factor(cutoff: float, rate: float) -> float:
    """
    Exponential smoothing factor for a cutoff frequency.

    Args:
        cutoff: Cutoff frequency in Hz
        rate: Sampling rate in Hz

    Returns:
        Weight of the new sample, in (0, 1)
    """
    te = 1.0 / rate
    tau = 1.0 / (2 * math.pi * cutoff)
    return 1.0 / (1.0 + tau / te)


class LowPassFilter:
    """First-order exponential low-pass filter."""

    def __init__(self):
        self.value: Optional[float] = None

    def filter(self, raw: float, alpha: float) -> float:
        if self.value is None:
            self.value = raw
        else:
            self.value = self.value + alpha * (raw - self.value)
        return self.value

    def reset(self):
        self.value = None


class AdaptiveFilter:
    """
    Single-axis low-pass filter whose cutoff adapts to signal speed.

    State is the last filtered value, the last raw value and the
    low-passed derivative. Not reentrant: one instance per axis per gesture.
    """

    def __init__(self, min_cutoff: float = 1.2, beta: float = 0.5,
                 derivative_cutoff: float = 1.0, rate: float = 30.0):
        """
        Args:
            min_cutoff: Cutoff (Hz) at rest; lower = smoother holds
            beta: Cutoff increase per unit/s of filtered speed
            derivative_cutoff: Cutoff (Hz) used to smooth the derivative
            rate: Assumed sampling rate (Hz) of incoming samples

        Raises:
            ValueError: If a cutoff or the rate is not positive, or beta is negative
        """
        if min_cutoff <= 0 or derivative_cutoff <= 0:
            raise ValueError("Cutoff frequencies must be positive")
        if rate <= 0:
            raise ValueError("Sample rate must be positive")
        if beta < 0:
            raise ValueError("beta must not be negative")

        self.min_cutoff = min_cutoff
        self.beta = beta
        self.derivative_cutoff = derivative_cutoff
        self.rate = rate

        self._value_filter = LowPassFilter()
        self._derivative_filter = LowPassFilter()
        self._last_raw: Optional[float] = None

    def filter(self, raw: float) -> float:
        """Filter one sample and return the smoothed value."""
        if self._last_raw is None:
            self._last_raw = raw
            self._derivative_filter.filter(0.0, 1.0)
            return self._value_filter.filter(raw, 1.0)

        derivative = (raw - self._last_raw) * self.rate
        self._last_raw = raw

        speed = abs(self._derivative_filter.filter(
            derivative, smoothing_factor(self.derivative_cutoff, self.rate)
        ))
        cutoff = self.min_cutoff + self.beta * speed
        return self._value_filter.filter(raw, smoothing_factor(cutoff, self.rate))

    @property
    def last_value(self) -> Optional[float]:
        return self._value_filter.value

    def reset(self):
        """Forget all state; the next sample passes through unchanged."""
        self._value_filter.reset()
        self._derivative_filter.reset()
        self._last_raw = None


class PointFilter:
    """Pair of independent AdaptiveFilters, one per axis."""

    def __init__(self, min_cutoff: float = 1.2, beta: float = 0.5,
                 derivative_cutoff: float = 1.0, rate: float = 30.0):
        self.x_filter = AdaptiveFilter(min_cutoff, beta, derivative_cutoff, rate)
        self.y_filter = AdaptiveFilter(min_cutoff, beta, derivative_cutoff, rate)

    def filter(self, point: Point) -> Point:
        return Point(self.x_filter.filter(point.x), self.y_filter.filter(point.y))

    def reset(self):
        self.x_filter.reset()
        self.y_filter.reset()
