"""
Device management for touchscreen discovery, used as a fingertip source.
"""

import logging
from typing import Optional, Tuple

import evdev
from evdev import ecodes

from ..utils.gesture_utils import Point

logger = logging.getLogger(__name__)


class DeviceManager:
    """Finds a multitouch device and maps its raw coordinates to 0..1."""

    def __init__(self):
        self.device = None
        self.x_range: Tuple[int, int] = (0, 1919)  # Default
        self.y_range: Tuple[int, int] = (0, 1079)  # Default

    def find_device(self):
        """Find and configure the touchscreen device."""
        devices = [evdev.InputDevice(path) for path in evdev.list_devices()]

        for device in devices:
            caps = device.capabilities()
            if ecodes.EV_ABS not in caps:
                continue

            abs_info = {code: info for code, info in caps.get(ecodes.EV_ABS, [])}

            # Look for multitouch slots
            if ecodes.ABS_MT_SLOT not in abs_info:
                continue

            if ecodes.ABS_MT_POSITION_X in abs_info:
                info = abs_info[ecodes.ABS_MT_POSITION_X]
                self.x_range = (info.min, info.max)
            if ecodes.ABS_MT_POSITION_Y in abs_info:
                info = abs_info[ecodes.ABS_MT_POSITION_Y]
                self.y_range = (info.min, info.max)

            self.device = device
            logger.info(f"Found touchscreen: {device.name}")
            logger.info(f"Coordinate range: x={self.x_range} y={self.y_range}")
            return device

        logger.error("No touchscreen device found")
        return None

    def normalize(self, x: int, y: int) -> Point:
        """Map raw device coordinates into the 0..1 capture space."""
        return Point(self._scale(x, self.x_range), self._scale(y, self.y_range))

    @staticmethod
    def _scale(value: int, value_range: Tuple[int, int]) -> float:
        low, high = value_range
        if high <= low:
            return 0.0
        return (value - low) / (high - low)

    def get_device_info(self) -> dict:
        """Get device and coordinate information."""
        return {
            'device': self.device,
            'name': self.device.name if self.device else None,
            'x_range': self.x_range,
            'y_range': self.y_range,
        }
