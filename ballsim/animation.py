#!/usr/bin/env python3
"""
Animation loop: one ball, one trail, one event source.

Per FrameEvent the loop runs, strictly in this order:
  BodySimulator.update -> Trail.push (if enabled) -> present(trail shapes + ball)
and then asks the source for the next frame. A DestroyEvent ends the loop and its
error is returned to the caller unchanged.
"""
import logging
from typing import List, Optional

from .config import SimulationConfig
from .data_models import Shape
from .events import DestroyEvent, FrameEvent
from .physics import BodySimulator
from .trail import Trail

logger = logging.getLogger(__name__)


class Animation:
    def __init__(self, config: SimulationConfig):
        self.config = config
        self.body = BodySimulator(config)
        self.trail = Trail.from_config(config)
        self.frame_count = 0
        self._extents = (config.window_width, config.window_height)

    def step(self, width: int, height: int) -> List[Shape]:
        """
        Run one frame in a width x height window and return the shapes to draw,
        trail first (oldest to newest) and the ball last.
        """
        if (width, height) != self._extents:
            logger.debug("Window resized %dx%d -> %dx%d", *self._extents, width, height)
            self._extents = (width, height)

        fraction = self.config.ball_radius_fraction
        if fraction is not None:
            self.body.set_radius(int(width * fraction))

        self.body.update(width, height)
        self.frame_count += 1

        shapes: List[Shape] = []
        if self.config.trail_enabled:
            s = self.body.state
            self.trail.push(s.x, s.y)
            shapes.extend(self.trail.render())
        shapes.append(self.body.shape())
        return shapes

    def run(self, source) -> Optional[BaseException]:
        """
        Drive the animation from `source` until it reports DestroyEvent.

        Returns the DestroyEvent's error (None on a clean close).
        """
        logger.info("Animation started")
        while True:
            event = source.next_event()
            if isinstance(event, DestroyEvent):
                if event.error is None:
                    logger.info("Animation stopped after %d frames", self.frame_count)
                else:
                    logger.info("Animation stopped after %d frames: %s", self.frame_count, event.error)
                return event.error
            elif isinstance(event, FrameEvent):
                shapes = self.step(event.width, event.height)
                event.present(shapes)
                source.invalidate()
            else:
                raise TypeError(f"unexpected event {event!r}")
