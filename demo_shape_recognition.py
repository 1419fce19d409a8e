#!/usr/bin/env python3
"""Shape Recognition Demo with Visual Feedback.

The mouse stands in for the tracked fingertip: hold the left button to draw,
release to finish the gesture. The stroke goes through the same smoothing,
buffering and classification pipeline a hand tracker would feed, once per
frame at the tracker's frame rate.
"""

from typing import Optional, Tuple

import pygame

from air_sketch.config.settings import SketchConfig
from air_sketch.core.controller import GestureController
from air_sketch.gestures.shape_classifier import ShapeResult
from air_sketch.utils.gesture_utils import Point

WINDOW_SIZE = (1280, 720)


class ShapeRecognitionDemo:
    """Interactive demo for shape recognition."""

    def __init__(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Air Sketch Shape Recognition Demo")

        self.config = SketchConfig(CANVAS_WIDTH=WINDOW_SIZE[0], CANVAS_HEIGHT=WINDOW_SIZE[1])
        self.controller = GestureController(self.config, on_shape=self.show_result)
        self.result: Optional[ShapeResult] = None
        self.message = "Hold the left button and draw a shape"

        # Colors
        self.BLACK = (0, 0, 0)
        self.WHITE = (255, 255, 255)
        self.CYAN = (0, 200, 220)
        self.GREEN = (0, 160, 0)
        self.GRAY = (128, 128, 128)
        self.ORANGE = (230, 120, 0)

        # Fonts
        self.font = pygame.font.Font(None, 48)
        self.small_font = pygame.font.Font(None, 28)

    def run(self) -> None:
        """Run the demo loop, one tracker frame per tick."""
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                elif event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_q, pygame.K_ESCAPE):
                        return
                    elif event.key == pygame.K_c:
                        self.clear_screen()

            drawing = pygame.mouse.get_pressed()[0]
            if drawing and not self.controller.drawing:
                self.result = None
                self.message = "Drawing..."
            self.controller.on_frame(self.normalize(pygame.mouse.get_pos()), drawing)
            if not drawing and self.message == "Drawing..." and self.result is None:
                self.message = "Stroke too short or too small, try again"

            self.draw()
            clock.tick(int(self.config.SAMPLE_RATE))

    def normalize(self, pos: Tuple[int, int]) -> Point:
        """Mouse pixels -> the 0..1 space a hand tracker reports."""
        return Point(pos[0] / WINDOW_SIZE[0], pos[1] / WINDOW_SIZE[1])

    def show_result(self, result: ShapeResult) -> None:
        self.result = result
        self.message = f"Recognized: {result.label.value} (rule: {result.rule})"

    def clear_screen(self) -> None:
        """Clear the drawing and results."""
        self.controller.clear_path()
        self.result = None
        self.message = "Hold the left button and draw a shape"

    def to_screen(self, point: Point) -> Tuple[int, int]:
        return int(point.x * WINDOW_SIZE[0]), int(point.y * WINDOW_SIZE[1])

    def draw(self) -> None:
        """Render the UI and current drawing."""
        self.screen.fill(self.WHITE)

        instructions = [
            "Shapes: line, circle, triangle, square, rectangle, diamond, pentagon, star",
            "C: Clear   Q/Esc: Quit",
        ]
        y = 10
        for line in instructions:
            self.screen.blit(self.small_font.render(line, True, self.BLACK), (10, y))
            y += 28

        # Smoothed trail
        pts = [self.to_screen(p) for p in self.controller.current_path]
        if len(pts) > 1:
            pygame.draw.lines(self.screen, self.CYAN, False, pts, 5)

        if self.result:
            box = self.result.bounding_box
            rect = pygame.Rect(int(box.min_x), int(box.min_y),
                               max(int(box.width), 1), max(int(box.height), 1))
            pygame.draw.rect(self.screen, self.GRAY, rect, 1)

            corners = [(int(p.x), int(p.y)) for p in self.result.features.polygon]
            if len(corners) > 1:
                pygame.draw.lines(self.screen, self.ORANGE, False, corners, 2)
            if self.result.outline and len(self.result.outline) > 1:
                outline = [(int(p.x), int(p.y)) for p in self.result.outline]
                pygame.draw.lines(self.screen, self.GREEN, True, outline, 3)

            center = (int(self.result.center.x), int(self.result.center.y))
            pygame.draw.circle(self.screen, self.GREEN, center, 6)

        self.screen.blit(self.font.render(self.message, True, self.GREEN),
                         (10, WINDOW_SIZE[1] - 60))
        pygame.display.flip()


def main() -> None:
    """Entry point for the demo."""
    demo = ShapeRecognitionDemo()
    try:
        demo.run()
    except KeyboardInterrupt:
        pass
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
