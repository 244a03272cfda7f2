#!/usr/bin/env python3
"""
Events delivered to the animation loop, and a scripted event source.

An event source is any object with two methods:
- next_event(): block until the next event and return a FrameEvent or DestroyEvent.
- invalidate(): ask for another FrameEvent once the current frame is presented.

FrameEvent carries the window size of this frame and the sink that draws the
shapes. DestroyEvent ends the loop and carries the platform error, if any.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple, Union

from .data_models import Shape

logger = logging.getLogger(__name__)

PresentFn = Callable[[Sequence[Shape]], None]


@dataclass(frozen=True)
class FrameEvent:
    width: int
    height: int
    present: PresentFn


@dataclass(frozen=True)
class DestroyEvent:
    error: Optional[BaseException] = None


Event = Union[FrameEvent, DestroyEvent]


class ScriptedEventSource:
    """
    Display-free event source: a fixed number of frames, then a DestroyEvent.

    Window extents come either from a single (width, height) or from a list of
    extents, one per frame, to replay resizes. Every presented frame is recorded
    in `frames` as a list of shapes (only the last `keep` frames are kept when
    keep is set).
    """

    def __init__(self, frames: int, width: int = 0, height: int = 0,
                 extents: Optional[Sequence[Tuple[int, int]]] = None,
                 error: Optional[BaseException] = None, keep: Optional[int] = None):
        if extents is None:
            extents = [(width, height)] * frames
        if len(extents) < frames:
            raise ValueError(f"need {frames} extents, got {len(extents)}")
        self.extents = list(extents)
        self.total = frames
        self.error = error
        self.keep = keep
        self.frames: List[List[Shape]] = []
        self.emitted = 0
        self.invalidations = 0
        self._pending = True

    def next_event(self) -> Event:
        if self.emitted >= self.total:
            logger.debug("Scripted source exhausted after %d frames", self.emitted)
            return DestroyEvent(self.error)
        if not self._pending:
            raise RuntimeError("next frame requested without invalidate()")
        self._pending = False
        width, height = self.extents[self.emitted]
        self.emitted += 1
        return FrameEvent(width, height, self._present)

    def invalidate(self) -> None:
        self.invalidations += 1
        self._pending = True

    def _present(self, shapes: Sequence[Shape]) -> None:
        self.frames.append(list(shapes))
        if self.keep is not None and len(self.frames) > self.keep:
            del self.frames[0]
