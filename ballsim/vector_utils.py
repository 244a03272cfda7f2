#!/usr/bin/env python3
"""
Vector helper functions for 2D operations.

Small functions used by the simulator and the trail renderer.
"""
import math
from typing import Tuple


def clamp(x: float, a: float, b: float) -> float:
    """Clamp x to the inclusive range [a, b]."""
    return max(a, min(b, x))


def vec_add(a: Tuple[float, float], b: Tuple[float, float]) -> Tuple[float, float]:
    return (a[0] + b[0], a[1] + b[1])


def vec_scale(a: Tuple[float, float], s: float) -> Tuple[float, float]:
    return (a[0] * s, a[1] * s)


def vec_trunc(a: Tuple[float, float]) -> Tuple[int, int]:
    """Truncate both components toward zero (pixel displacement of a velocity)."""
    return (math.trunc(a[0]), math.trunc(a[1]))


def scale_alpha(color: Tuple[int, int, int, int], factor: float) -> Tuple[int, int, int, int]:
    """Return color with its alpha channel multiplied by factor (clamped to 0..255)."""
    r, g, b, a = color
    return (r, g, b, int(clamp(a * factor, 0, 255)))
