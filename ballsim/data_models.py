#!/usr/bin/env python3
"""
Data models for Bouncy Ball.

This module defines the two value types shared between physics, trail and rendering.

Units and usage
- Positions and radii are integer pixels; x grows right, y grows down.
- Velocity is in pixels per frame, acceleration in pixels per frame squared.
- Colors are RGBA tuples in 0..255.
- KinematicState is the live, mutable ball owned by BodySimulator.
- Shape is an immutable snapshot handed to the trail and the renderer. A Shape is
  always built by copying fields out of a KinematicState, never by sharing it.
"""
from dataclasses import dataclass
from typing import Tuple

Color = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Shape:
    """
    A circle to present.

    Fields:
    - x, y: center in pixels
    - radius: radius in pixels
    - color: RGBA tuple
    """
    x: int
    y: int
    radius: int
    color: Color


@dataclass
class KinematicState:
    """
    Mutable state of the simulated ball.

    Fields:
    - x, y: center in whole pixels
    - radius: radius in pixels
    - vx, vy: velocity in pixels/frame
    - ax, ay: acceleration in pixels/frame^2
    - color: RGBA tuple
    """
    x: int
    y: int
    radius: int
    vx: float = 0.0
    vy: float = 0.0
    ax: float = 0.0
    ay: float = 0.0
    color: Color = (255, 255, 255, 255)

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def velocity(self) -> Tuple[float, float]:
        return (self.vx, self.vy)

    @property
    def acceleration(self) -> Tuple[float, float]:
        return (self.ax, self.ay)

    def to_shape(self) -> Shape:
        """Copy the drawable part of the state into an immutable Shape."""
        return Shape(self.x, self.y, self.radius, self.color)
