#!/usr/bin/env python3
"""
Fading trail of past ball positions.

The trail is a bounded deque of Shape snapshots, oldest first. Rendering never
touches the stored entries: each call builds fresh, faded copies whose fade only
depends on how far an entry is from the newest one.
"""
from collections import deque
from typing import Deque, Iterator

from .config import SimulationConfig
from .data_models import Color, Shape
from .vector_utils import scale_alpha


class Trail:
    def __init__(self, max_length: int, start_radius: int, color: Color):
        self.max_length = int(max_length)
        self.start_radius = int(start_radius)
        self.color = color
        self._entries: Deque[Shape] = deque(maxlen=self.max_length)

    @classmethod
    def from_config(cls, config: SimulationConfig) -> "Trail":
        return cls(config.trail_max_length, config.trail_start_radius, config.trail_color)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._entries)

    def push(self, x: int, y: int) -> None:
        """Append a snapshot at (x, y); the oldest entry drops out when full."""
        self._entries.append(Shape(int(x), int(y), self.start_radius, self.color))

    def clear(self) -> None:
        self._entries.clear()

    def render(self) -> Iterator[Shape]:
        """
        Yield faded copies of the entries, oldest first.

        The entry at rank i from the newest (i = 0 is newest) is scaled by
        decay = 1 - i / len(trail) in both radius and alpha.
        """
        n = len(self._entries)
        for idx, entry in enumerate(self._entries):
            rank = n - idx - 1
            decay = 1.0 - rank / n
            # fade starts from the trail color's own alpha, not from opaque
            yield Shape(
                entry.x,
                entry.y,
                int(entry.radius * decay),
                scale_alpha(entry.color, decay),
            )
