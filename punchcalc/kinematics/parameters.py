"""
Punch parameters: rotation speeds, initial bone angles and segment lengths.

Three groups drive the kinetic chain:
- Rotation speeds (degrees/second): hip, spine spring, shoulder, elbow
- Initial angles (degrees): hip, shoulder, elbow
- Segment lengths (centimetres): hip, collar bone, upper arm, forearm

The ranges below are the slider bounds of the UI. The kinematic model accepts
any value; ranges only matter for sensible visuals and are enforced where
values enter the system (see `clamp_parameter`).
"""

from __future__ import annotations
from dataclasses import dataclass, fields, replace
from enum import Enum


class UnknownParameterError(KeyError):
    """Raised when a parameter name is not part of PunchParameters."""


class ParameterGroup(str, Enum):
    ROTATION = "rotation"
    INITIAL_ANGLE = "initial_angle"
    LENGTH = "length"


@dataclass(frozen=True)
class ParameterRange:
    """Slider bounds for one parameter."""
    label: str
    group: ParameterGroup
    minimum: float
    maximum: float
    step: float
    unit: str

    def clamp(self, value: float) -> float:
        return max(self.minimum, min(self.maximum, value))

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "group": self.group.value,
            "min": self.minimum,
            "max": self.maximum,
            "step": self.step,
            "unit": self.unit,
        }


PARAMETER_RANGES: dict[str, ParameterRange] = {
    # Rotation speeds - the kinetic chain starts at the hip
    "hip_rotation": ParameterRange("Hip Rotation Speed", ParameterGroup.ROTATION, 0, 180, 5, "deg/s"),
    "spine_spring": ParameterRange("Spine Spring (k)", ParameterGroup.ROTATION, 0, 180, 5, "k"),
    "shoulder_rotation": ParameterRange("Shoulder Speed", ParameterGroup.ROTATION, 0, 360, 10, "deg/s"),
    "elbow_rotation": ParameterRange("Elbow Speed", ParameterGroup.ROTATION, 0, 540, 10, "deg/s"),
    # Initial bone angles
    "hip_initial_angle": ParameterRange("Hip Initial", ParameterGroup.INITIAL_ANGLE, -45, 45, 1, "deg"),
    "shoulder_initial_angle": ParameterRange("Shoulder Initial", ParameterGroup.INITIAL_ANGLE, -90, 90, 1, "deg"),
    "elbow_initial_angle": ParameterRange("Elbow Initial", ParameterGroup.INITIAL_ANGLE, -150, 30, 1, "deg"),
    # Segment lengths
    "hip_length": ParameterRange("Hip Length", ParameterGroup.LENGTH, 10, 40, 1, "cm"),
    "collar_length": ParameterRange("Collar Bone Length", ParameterGroup.LENGTH, 10, 40, 1, "cm"),
    "upper_arm_length": ParameterRange("Upper Arm Length", ParameterGroup.LENGTH, 20, 60, 1, "cm"),
    "forearm_length": ParameterRange("Forearm Length", ParameterGroup.LENGTH, 20, 50, 1, "cm"),
}


@dataclass(frozen=True)
class PunchParameters:
    """
    The full adjustable parameter set.

    Immutable: every change produces a new instance via `with_value`.
    """

    # Rotation speeds (degrees/second)
    hip_rotation: float = 45.0
    spine_spring: float = 45.0      # Accepted but has no kinematic effect (see pose.spine_response_time)
    shoulder_rotation: float = 180.0
    elbow_rotation: float = 270.0

    # Initial bone angles (degrees)
    hip_initial_angle: float = 0.0
    shoulder_initial_angle: float = 0.0
    elbow_initial_angle: float = 0.0

    # Segment lengths (centimetres)
    hip_length: float = 20.0
    collar_length: float = 20.0
    upper_arm_length: float = 35.0
    forearm_length: float = 30.0

    def with_value(self, name: str, value: float) -> PunchParameters:
        """Return a copy with one parameter replaced."""
        if name not in PARAMETER_RANGES:
            raise UnknownParameterError(name)
        return replace(self, **{name: float(value)})

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict) -> PunchParameters:
        """Create from dictionary, ignoring keys that are not parameters."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: float(v) for k, v in data.items() if k in known})


def clamp_parameter(name: str, value: float) -> float:
    """Clamp a value to the UI range of the named parameter."""
    try:
        return PARAMETER_RANGES[name].clamp(value)
    except KeyError:
        raise UnknownParameterError(name) from None
