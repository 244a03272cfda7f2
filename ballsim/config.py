#!/usr/bin/env python3
"""
Simulation configuration.

SimulationConfig bundles every tunable of the animation into one immutable value
that is passed to BodySimulator, Trail and Animation at construction. Defaults are
the values in ballsim.constants.

Optional fields
- initial_position: None places the ball at the center of the initial window.
- acceleration_decay: None disables the per-frame decay; acceleration then only
  carries the damped impulse flipped on each bounce.
- ball_radius_fraction: None keeps ball_radius fixed; otherwise the radius is
  re-derived every frame as this fraction of the current window width.
"""
import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Tuple

from . import constants
from .data_models import Color


_INT_FIELDS = ("window_width", "window_height", "fps", "ball_radius", "trail_start_radius", "trail_max_length")
_BOOL_FIELDS = ("trail_enabled",)


def _coerce_color(c: Sequence[Any]) -> Color:
    """Turn a JSON list into an RGBA tuple; a missing alpha means opaque."""
    if not isinstance(c, (list, tuple)):
        raise ValueError(f"color must be a list of 3 or 4 channels, got {c!r}")
    channels = [_coerce_int(v) for v in c]
    if len(channels) == 3:
        channels.append(255)
    if len(channels) != 4:
        raise ValueError(f"color must have 3 or 4 channels, got {len(channels)}")
    if any(not 0 <= v <= 255 for v in channels):
        raise ValueError(f"color channels must be in 0..255, got {list(c)!r}")
    r, g, b, a = channels
    return (r, g, b, a)


def _coerce_int(value: Any) -> int:
    """Accept whole numbers only (80 or 80.0, not 80.5 or true)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a whole number, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"expected a whole number, got {value!r}")
    return int(value)


def _coerce_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"expected true or false, got {value!r}")
    return value


def _coerce_pair(p: Sequence[Any]) -> Tuple[float, float]:
    return (float(p[0]), float(p[1]))


@dataclass(frozen=True)
class SimulationConfig:
    window_width: int = constants.WINDOW_WIDTH
    window_height: int = constants.WINDOW_HEIGHT
    title: str = constants.TITLE
    fps: int = constants.FPS
    background_color: Color = constants.BACKGROUND_COLOR

    ball_radius: int = constants.BALL_RADIUS
    ball_radius_fraction: Optional[float] = None
    ball_color: Color = constants.BALL_COLOR

    trail_enabled: bool = True
    trail_start_radius: int = constants.TRAIL_START_RADIUS
    trail_color: Color = constants.TRAIL_COLOR
    trail_max_length: int = constants.TRAIL_MAX_LENGTH

    gravity: float = constants.GRAVITY
    damping: float = constants.DAMPING
    acceleration_decay: Optional[float] = constants.ACCELERATION_DECAY

    initial_position: Optional[Tuple[int, int]] = None
    initial_velocity: Tuple[float, float] = constants.INITIAL_VELOCITY
    initial_acceleration: Tuple[float, float] = constants.INITIAL_ACCELERATION

    def __post_init__(self):
        if self.window_width <= 0 or self.window_height <= 0:
            raise ValueError(f"window size must be positive, got {self.window_width}x{self.window_height}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.ball_radius <= 0:
            raise ValueError(f"ball_radius must be positive, got {self.ball_radius}")
        if self.ball_radius_fraction is not None and not 0.0 < self.ball_radius_fraction <= 0.5:
            raise ValueError(f"ball_radius_fraction must be in (0, 0.5], got {self.ball_radius_fraction}")
        if self.trail_start_radius <= 0:
            raise ValueError(f"trail_start_radius must be positive, got {self.trail_start_radius}")
        if self.trail_max_length < 1:
            raise ValueError(f"trail_max_length must be at least 1, got {self.trail_max_length}")
        if not 0.0 < self.damping < 1.0:
            raise ValueError(f"damping must be in (0, 1), got {self.damping}")
        if self.acceleration_decay is not None and not 0.0 < self.acceleration_decay <= 1.0:
            raise ValueError(f"acceleration_decay must be in (0, 1], got {self.acceleration_decay}")

    def start_position(self) -> Tuple[int, int]:
        """Initial ball center; the window center unless set explicitly."""
        if self.initial_position is not None:
            return (int(self.initial_position[0]), int(self.initial_position[1]))
        return (self.window_width // 2, self.window_height // 2)

    def replace(self, **changes) -> "SimulationConfig":
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SimulationConfig":
        """
        Build a config from a JSON-like mapping.

        Unknown keys are ignored and missing keys keep their defaults. Colors are RGB
        or RGBA lists of 0..255, pairs are lists. Pixel sizes, lengths and fps must be
        whole numbers and flags must be JSON booleans. Anything else raises ValueError.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        kwargs = {}
        for key, value in data.items():
            if key not in known:
                continue
            if key.endswith("_color"):
                value = _coerce_color(value)
            elif key in _INT_FIELDS:
                value = _coerce_int(value)
            elif key in _BOOL_FIELDS:
                value = _coerce_bool(value)
            elif key == "initial_position" and value is not None:
                value = tuple(int(v) for v in _coerce_pair(value))
            elif key in ("initial_velocity", "initial_acceleration"):
                value = _coerce_pair(value)
            kwargs[key] = value
        return cls(**kwargs)
