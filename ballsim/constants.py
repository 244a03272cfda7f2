#!/usr/bin/env python3
"""
Shared constants for Bouncy Ball (pixels and frames unless stated otherwise).

These are the default values of SimulationConfig. Keeping them in one place
makes presets and tests agree on what "default" means.
"""

# Window (pixels)
WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 1000
TITLE = "Bouncy Ball"
FPS = 60
BACKGROUND_COLOR = (16, 16, 16, 255)

# Ball
BALL_RADIUS = 80
BALL_COLOR = (255, 255, 255, 255)

# Trail
TRAIL_START_RADIUS = 25
TRAIL_COLOR = (0, 255, 255, 100)
TRAIL_MAX_LENGTH = 100

# Physics (per frame)
GRAVITY = 0.2  # px/frame^2, downward
DAMPING = 0.95  # velocity kept on each bounce
ACCELERATION_DECAY = 0.99  # acceleration kept each frame
INITIAL_VELOCITY = (10.0, 5.0)  # px/frame
INITIAL_ACCELERATION = (0.1, 0.1)  # px/frame^2
