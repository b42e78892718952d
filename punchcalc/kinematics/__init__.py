"""
Kinematic model of the punch chain.

Pure functions from a `Scene` (parameters + animation state) to a `Pose`.
"""

from .angles import AngleSource, Fixed, Speed
from .parameters import (
    PARAMETER_RANGES,
    ParameterGroup,
    ParameterRange,
    PunchParameters,
    UnknownParameterError,
    clamp_parameter,
)
from .pose import JointAngles, Pose, Segment, compute_pose, resolve_angles, spine_response_time
from .presets import PUNCH_PRESETS, PunchPreset, UnknownPresetError, apply_preset, get_preset
from .state import AnimationState, Scene
from .vec2 import Vec2

__all__ = [
    "AngleSource",
    "AnimationState",
    "Fixed",
    "JointAngles",
    "PARAMETER_RANGES",
    "PUNCH_PRESETS",
    "ParameterGroup",
    "ParameterRange",
    "Pose",
    "PunchParameters",
    "PunchPreset",
    "Scene",
    "Segment",
    "Speed",
    "UnknownParameterError",
    "UnknownPresetError",
    "Vec2",
    "apply_preset",
    "clamp_parameter",
    "compute_pose",
    "get_preset",
    "resolve_angles",
    "spine_response_time",
]
