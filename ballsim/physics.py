#!/usr/bin/env python3
"""
Body simulator for Bouncy Ball.

Responsibilities
- Advance the single ball by one frame: gravity, integer displacement, acceleration.
- Resolve collisions with the window edges with a damped, sign-flipping bounce.

Units and conventions
- One update is one frame; there is no dt. Velocity is pixels/frame.
- Position stays on whole pixels. Displacement is the velocity truncated toward
  zero, so a velocity below 1 px/frame on an axis does not move the ball on that
  axis, and the ball comes to rest against the floor.
- Window extents are passed on every call and never cached; the window may have
  been resized between frames.

Numerical notes
- Acceleration is added to velocity after the position update, so it only affects
  the next frame's displacement.
- A bounce scales velocity by damping, so each bounce keeps damping^2 of that
  axis' kinetic energy.
- Non-finite values (e.g. an absurd initial velocity) are not guarded against.
"""

from typing import Optional

from .config import SimulationConfig
from .data_models import KinematicState, Shape
from .vector_utils import vec_add, vec_scale, vec_trunc


class BodySimulator:
    """
    Owns the ball's KinematicState and advances it frame by frame.

    The simulator never exposes the state for external mutation by the renderer;
    consumers take a Shape snapshot via shape().
    """

    def __init__(self, config: SimulationConfig, state: Optional[KinematicState] = None):
        """
        Initialize the simulator.

        Args:
            config: physics constants (gravity, damping, optional decay)
            state: starting state; built from the config's initial values if omitted
        """
        self.config = config
        if state is None:
            x, y = config.start_position()
            vx, vy = config.initial_velocity
            ax, ay = config.initial_acceleration
            state = KinematicState(
                x=x,
                y=y,
                radius=config.ball_radius,
                vx=float(vx),
                vy=float(vy),
                ax=float(ax),
                ay=float(ay),
                color=config.ball_color,
            )
        self.state = state

    def update(self, width: int, height: int) -> None:
        """
        Advance the ball by exactly one frame inside a width x height window.
        """
        s = self.state
        s.vy += self.config.gravity

        dx, dy = vec_trunc(s.velocity)
        s.x += dx
        s.y += dy

        s.vx, s.vy = vec_add(s.velocity, s.acceleration)

        decay = self.config.acceleration_decay
        if decay is not None:
            s.ax, s.ay = vec_scale(s.acceleration, decay)

        self.handle_collision(width, height)

    def handle_collision(self, width: int, height: int) -> None:
        """
        Push the ball back inside the window and bounce it.

        Each axis is checked on its own, so a corner hit bounces both.
        """
        s = self.state
        r = s.radius
        damping = self.config.damping

        if s.x - r < 0:
            s.x = r
            s.vx = -s.vx * damping
            s.ax = -s.ax * damping
        elif s.x + r > width:
            s.x = width - r
            s.vx = -s.vx * damping
            s.ax = -s.ax * damping

        if s.y - r < 0:
            s.y = r
            s.vy = -s.vy * damping
            s.ay = -s.ay * damping
        elif s.y + r > height:
            s.y = height - r
            s.vy = -s.vy * damping
            s.ay = -s.ay * damping

    def set_radius(self, radius: int) -> None:
        """Change the ball radius (minimum 1 px)."""
        self.state.radius = max(1, int(radius))

    def shape(self) -> Shape:
        return self.state.to_shape()
