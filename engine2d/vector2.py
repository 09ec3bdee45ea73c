"""Two-dimensional float vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

FLT_EPSILON = 1.1920928955078125e-07
_ZERO_TOLERANCE = FLT_EPSILON + 1.1e-13


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector with float components."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Vector2:
        return cls(1.0, 1.0)

    @classmethod
    def up(cls) -> Vector2:
        return cls(0.0, 1.0)

    @classmethod
    def down(cls) -> Vector2:
        return cls(0.0, -1.0)

    @classmethod
    def left(cls) -> Vector2:
        return cls(-1.0, 0.0)

    @classmethod
    def right(cls) -> Vector2:
        return cls(1.0, 0.0)

    def is_zero(self) -> bool:
        """True when both components fall below the float epsilon threshold.

        The comparison is signed, so negative components also count as zero.
        """
        return self.x < _ZERO_TOLERANCE and self.y < _ZERO_TOLERANCE

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalize(self) -> Vector2:
        """Unit vector in the same direction, or zero for a near-zero vector."""
        length = self.magnitude()
        if length < FLT_EPSILON:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / length, self.y / length)

    @staticmethod
    def lerp(start: Vector2, end: Vector2, t: float) -> Vector2:
        """Linear interpolation between two vectors."""
        return (1.0 - t) * start + t * end

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vector2:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)

    def __str__(self) -> str:
        return f"{self.x:g}, {self.y:g}"