"""Random helpers for gameplay: uniform ranges and points in the unit circle."""

from __future__ import annotations

import math
import random

from engine2d.vector2 import Vector2

_default_rng = random.Random()


def random_range(low: float, high: float, rng: random.Random | None = None) -> float:
    """Uniform float in [low, high)."""
    if low > high:
        raise ValueError(f"low ({low}) must not exceed high ({high})")
    generator = rng if rng is not None else _default_rng
    return low + (high - low) * generator.random()


def random_inside_unit_circle(rng: random.Random | None = None) -> Vector2:
    """Uniformly distributed point inside the unit circle."""
    generator = rng if rng is not None else _default_rng
    angle = random_range(0.0, 2.0 * math.pi, generator)
    radius = math.sqrt(random_range(0.0, 1.0, generator))
    return Vector2(radius * math.cos(angle), radius * math.sin(angle))