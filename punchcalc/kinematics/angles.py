"""
Joint angle sources.

A joint angle comes either from a rotation speed integrated over elapsed
time (while the animation plays) or from a fixed, user-set angle (while it
is stopped). `resolve` turns either into degrees for a given elapsed time.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Speed:
    """Angle driven by a constant rotation speed."""
    degrees_per_second: float

    def resolve(self, elapsed_time: float) -> float:
        return wrap_degrees(elapsed_time * self.degrees_per_second)


@dataclass(frozen=True)
class Fixed:
    """Angle held at a user-set value."""
    degrees: float

    def resolve(self, elapsed_time: float) -> float:
        return self.degrees


AngleSource = Union[Speed, Fixed]


def wrap_degrees(degrees: float) -> float:
    """Wrap an angle into [0, 360) for non-negative input.

    Negative input keeps its sign (math.fmod), matching the truncating
    remainder the animation has always used.
    """
    return math.fmod(degrees, 360.0)


def to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0
