#!/usr/bin/env python3
"""
Pygame window that feeds the animation loop.

PygameEventSource turns the pygame event queue into FrameEvent/DestroyEvent:
- QUIT becomes DestroyEvent().
- VIDEORESIZE recreates the display surface; the next FrameEvent reports the new size.
- After invalidate(), the next poll waits for the frame clock (FPS cap) and
  returns a FrameEvent whose present() draws onto the window.
- A pygame.error raised while drawing is kept and reported as DestroyEvent(error)
  on the next poll.
"""
import logging
from typing import Optional, Sequence, Tuple

import pygame
from pygame import gfxdraw

from .config import SimulationConfig
from .data_models import Shape
from .events import DestroyEvent, Event, FrameEvent

logger = logging.getLogger(__name__)

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000


def _safe_point(x: int, y: int) -> Optional[Tuple[int, int]]:
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (int(x), int(y))
    return None


def draw_shapes(surface: pygame.Surface, shapes: Sequence[Shape]) -> int:
    """
    Draw shapes onto surface in the given order; later shapes paint over earlier.

    Shapes with a radius below one pixel are skipped. Returns the number drawn.
    """
    drawn = 0
    for shape in shapes:
        if shape.radius < 1:
            continue
        pt = _safe_point(shape.x, shape.y)
        if pt is None:
            continue
        gfxdraw.filled_circle(surface, pt[0], pt[1], shape.radius, shape.color)
        gfxdraw.aacircle(surface, pt[0], pt[1], shape.radius, shape.color)
        drawn += 1
    return drawn


class PygameEventSource:
    """
    Event source backed by a resizable pygame window.
    """

    def __init__(self, config: SimulationConfig):
        self.config = config
        self.surface = None
        self.clock = None
        self.error: Optional[BaseException] = None
        self._pending = True

    def open(self) -> None:
        pygame.init()
        pygame.display.set_caption(self.config.title)
        self.surface = pygame.display.set_mode(
            (self.config.window_width, self.config.window_height), pygame.RESIZABLE
        )
        self.clock = pygame.time.Clock()
        logger.info("Opened %dx%d window", self.config.window_width, self.config.window_height)

    def close(self) -> None:
        pygame.quit()
        self.surface = None

    def __enter__(self) -> "PygameEventSource":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def next_event(self) -> Event:
        while True:
            if self.error is not None:
                return DestroyEvent(self.error)
            try:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return DestroyEvent()
                    elif event.type == pygame.VIDEORESIZE:
                        self.surface = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                        logger.debug("Display resized to %dx%d", event.w, event.h)
            except pygame.error as exc:
                return DestroyEvent(exc)

            # Limit FPS
            self.clock.tick(self.config.fps)
            if self._pending:
                self._pending = False
                width, height = self.surface.get_size()
                return FrameEvent(width, height, self.present)

    def invalidate(self) -> None:
        self._pending = True

    def present(self, shapes: Sequence[Shape]) -> None:
        try:
            self.surface.fill(self.config.background_color)
            draw_shapes(self.surface, shapes)
            pygame.display.flip()
        except pygame.error as exc:
            logger.debug("Drawing failed: %s", exc)
            self.error = exc
