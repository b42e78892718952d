"""
2D vector math for the punch scene.

Scene coordinates are centimetres with the canvas convention: x grows to
the right and y grows downward.
"""

from __future__ import annotations
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """Immutable 2D point / vector in centimetres."""
    x: float
    y: float

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def distance_to(self, other: Vec2) -> float:
        return (other - self).length()

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {"x": self.x, "y": self.y}

    @staticmethod
    def from_angle(angle: float, length: float = 1.0) -> Vec2:
        """Vector of the given length pointing along angle (radians)."""
        return Vec2(math.cos(angle) * length, math.sin(angle) * length)

    @staticmethod
    def zero() -> Vec2:
        return Vec2(0, 0)


# Up the screen (canvas y+ points down)
UP = Vec2(0, -1)
