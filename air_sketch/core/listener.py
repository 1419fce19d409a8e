"""
Touchscreen listener that feeds a GestureController.

One finger on the touchscreen stands in for the tracked fingertip: finger
down is "gesturing", its position is the raw sample.
"""

import logging
import threading
from typing import Optional

from evdev import ecodes

from ..device.device_manager import DeviceManager
from .controller import GestureController

logger = logging.getLogger(__name__)


class TouchListener:
    """Reads touch events on a background thread and drives the controller."""

    def __init__(self, controller: Optional[GestureController] = None,
                 device_manager: Optional[DeviceManager] = None):
        self.device_manager = device_manager or DeviceManager()
        self.controller = controller or GestureController()

        # State management
        self.running = False
        self.current_slot = 0
        self.tracked_slot: Optional[int] = None
        self.raw_x: Optional[int] = None
        self.raw_y: Optional[int] = None

        # Thread management
        self.thread = None
        self.state_lock = threading.Lock()

    def start(self) -> bool:
        """Start the touchscreen listener."""
        device = self.device_manager.find_device()
        if not device:
            print("❌ No touchscreen found")
            return False

        self.running = True
        print(f"✅ Found: {device.name}")
        print("🎯 Ready! Draw a shape with one finger.")

        self.thread = threading.Thread(target=self._event_loop)
        self.thread.daemon = True
        self.thread.start()
        return True

    def stop(self):
        """Stop the touchscreen listener."""
        self.running = False
        if self.thread:
            self.thread.join(timeout=1)

    def _event_loop(self):
        """Main event processing loop."""
        try:
            event_batch = []
            for event in self.device_manager.device.read_loop():
                if not self.running:
                    break

                event_batch.append(event)

                if event.type == ecodes.EV_SYN and event.code == ecodes.SYN_REPORT:
                    with self.state_lock:
                        self._process_event_batch(event_batch)
                    event_batch = []

        except OSError as e:
            logger.error(f"Error in event loop: {e}")

    def _process_event_batch(self, event_batch):
        """Apply a batch of events, then hand one frame to the controller."""
        lifted = False
        for ev in event_batch:
            if ev.type != ecodes.EV_ABS:
                continue
            if ev.code == ecodes.ABS_MT_SLOT:
                self.current_slot = ev.value
            elif ev.code == ecodes.ABS_MT_TRACKING_ID:
                lifted = self._handle_tracking_id(ev.value) or lifted
            elif self.current_slot == self.tracked_slot:
                if ev.code == ecodes.ABS_MT_POSITION_X:
                    self.raw_x = ev.value
                elif ev.code == ecodes.ABS_MT_POSITION_Y:
                    self.raw_y = ev.value

        if self.raw_x is None or self.raw_y is None:
            return None

        point = self.device_manager.normalize(self.raw_x, self.raw_y)
        gesturing = self.tracked_slot is not None and not lifted
        result = self.controller.on_frame(point, gesturing)
        if lifted:
            self.raw_x = self.raw_y = None
        return result

    def _handle_tracking_id(self, value: int) -> bool:
        """Track the first finger down; return True if it was lifted."""
        if value == -1:
            if self.current_slot == self.tracked_slot:
                self.tracked_slot = None
                return True
        elif self.tracked_slot is None:
            # Finger placed; position events for this slot follow
            self.tracked_slot = self.current_slot
            self.raw_x = self.raw_y = None
        return False
