"""
Punch presets - rotation patterns for each punch type.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass

from .state import Scene

logger = logging.getLogger(__name__)


class UnknownPresetError(KeyError):
    """Raised when a punch name has no preset."""


@dataclass(frozen=True)
class PunchPreset:
    name: str
    hip_rotation: float
    spine_spring: float
    shoulder_rotation: float
    elbow_rotation: float

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "hip_rotation": self.hip_rotation,
            "spine_spring": self.spine_spring,
            "shoulder_rotation": self.shoulder_rotation,
            "elbow_rotation": self.elbow_rotation,
        }


PUNCH_PRESETS: dict[str, PunchPreset] = {
    "jab": PunchPreset("Jab", hip_rotation=20, spine_spring=30, shoulder_rotation=150, elbow_rotation=200),
    "cross": PunchPreset("Cross", hip_rotation=40, spine_spring=50, shoulder_rotation=200, elbow_rotation=300),
    "hook": PunchPreset("Hook", hip_rotation=60, spine_spring=80, shoulder_rotation=180, elbow_rotation=150),
    "uppercut": PunchPreset("Uppercut", hip_rotation=50, spine_spring=70, shoulder_rotation=220, elbow_rotation=280),
}


def get_preset(punch: str) -> PunchPreset:
    try:
        return PUNCH_PRESETS[punch]
    except KeyError:
        raise UnknownPresetError(punch) from None


def apply_preset(scene: Scene, punch: str) -> Scene:
    """
    Overwrite the four rotation parameters from a preset.

    Instantaneous angles and elapsed time are left alone.
    """
    preset = get_preset(punch)
    logger.info("Applied %s preset: %s", preset.name, preset.to_dict())
    return scene.with_rotation(
        hip_rotation=preset.hip_rotation,
        spine_spring=preset.spine_spring,
        shoulder_rotation=preset.shoulder_rotation,
        elbow_rotation=preset.elbow_rotation,
        selected_punch=punch,
    )
