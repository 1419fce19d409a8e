#!/usr/bin/env python3
"""
Air Sketch - Main Entry Point
Draw on a touchscreen with one finger and get the recognized shape.
"""

import logging
import time

from air_sketch.core.controller import GestureController
from air_sketch.core.listener import TouchListener
from air_sketch.utils.logger import SketchLogger


def main():
    """Main entry point for the touchscreen shape recognizer."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    reporter = SketchLogger()
    listener = TouchListener(GestureController(reporter=reporter))

    if not listener.start():
        return

    try:
        while True:
            time.sleep(0.1)
    except KeyboardInterrupt:
        print("\n👋 Stopping...")
    finally:
        listener.stop()
        reporter.close()


if __name__ == "__main__":
    main()
