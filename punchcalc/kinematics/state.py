"""
Animation state and the scene record.

A `Scene` is everything needed to compute one frame: the parameter set,
the animation state and the selected punch. Scenes are immutable; every
user event or clock tick produces a new one.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace

from .parameters import PunchParameters
from .angles import wrap_degrees

DEFAULT_PUNCH = "jab"

# Rotation speed -> instantaneous angle it drives
_SPEED_TO_ANGLE = {
    "hip_rotation": "hip_angle_deg",
    "shoulder_rotation": "shoulder_angle_deg",
    "elbow_rotation": "elbow_angle_deg",
}

# Initial angle -> instantaneous angle it sets
_INITIAL_TO_ANGLE = {
    "hip_initial_angle": "hip_angle_deg",
    "shoulder_initial_angle": "shoulder_angle_deg",
    "elbow_initial_angle": "elbow_angle_deg",
}


@dataclass(frozen=True)
class AnimationState:
    """Play/stop flag, elapsed time and the instantaneous (stopped) angles."""
    is_playing: bool = False
    elapsed_time: float = 0.0       # Seconds

    # Used only while stopped (degrees)
    hip_angle_deg: float = 0.0
    shoulder_angle_deg: float = 0.0
    elbow_angle_deg: float = 0.0

    def to_dict(self) -> dict:
        return {
            "is_playing": self.is_playing,
            "elapsed_time": self.elapsed_time,
            "hip_angle_deg": self.hip_angle_deg,
            "shoulder_angle_deg": self.shoulder_angle_deg,
            "elbow_angle_deg": self.elbow_angle_deg,
        }

    @classmethod
    def from_dict(cls, data: dict) -> AnimationState:
        return cls(
            is_playing=bool(data.get("is_playing", False)),
            elapsed_time=float(data.get("elapsed_time", 0.0)),
            hip_angle_deg=float(data.get("hip_angle_deg", 0.0)),
            shoulder_angle_deg=float(data.get("shoulder_angle_deg", 0.0)),
            elbow_angle_deg=float(data.get("elbow_angle_deg", 0.0)),
        )


@dataclass(frozen=True)
class Scene:
    """Immutable per-frame state record."""
    parameters: PunchParameters = field(default_factory=PunchParameters)
    animation: AnimationState = field(default_factory=AnimationState)
    selected_punch: str = DEFAULT_PUNCH

    @classmethod
    def initial(cls, parameters: PunchParameters | None = None,
                selected_punch: str = DEFAULT_PUNCH) -> Scene:
        """Stopped scene whose instantaneous angles start at the initial angles."""
        parameters = parameters or PunchParameters()
        animation = AnimationState(
            hip_angle_deg=parameters.hip_initial_angle,
            shoulder_angle_deg=parameters.shoulder_initial_angle,
            elbow_angle_deg=parameters.elbow_initial_angle,
        )
        return cls(parameters=parameters, animation=animation, selected_punch=selected_punch)

    @property
    def is_playing(self) -> bool:
        return self.animation.is_playing

    @property
    def elapsed_time(self) -> float:
        return self.animation.elapsed_time

    # =========================================================================
    # Transitions
    # =========================================================================

    def play(self) -> Scene:
        return replace(self, animation=replace(self.animation, is_playing=True))

    def pause(self) -> Scene:
        return replace(self, animation=replace(self.animation, is_playing=False))

    def reset(self) -> Scene:
        """Stop and rewind to time zero. Instantaneous angles are kept."""
        return replace(
            self, animation=replace(self.animation, is_playing=False, elapsed_time=0.0)
        )

    def advance(self, dt: float) -> Scene:
        """Advance elapsed time by dt. Time only moves while playing."""
        if not self.animation.is_playing:
            return self
        return replace(
            self,
            animation=replace(self.animation, elapsed_time=self.animation.elapsed_time + dt),
        )

    def set_parameter(self, name: str, value: float) -> Scene:
        """
        Change one parameter.

        Rotation speeds also move the matching instantaneous angle to where
        that speed would put it at the current time; initial angles set the
        matching instantaneous angle directly.
        """
        parameters = self.parameters.with_value(name, value)
        animation = self.animation

        if name in _SPEED_TO_ANGLE:
            angle = wrap_degrees(animation.elapsed_time * getattr(parameters, name))
            animation = replace(animation, **{_SPEED_TO_ANGLE[name]: angle})
        elif name in _INITIAL_TO_ANGLE:
            animation = replace(animation, **{_INITIAL_TO_ANGLE[name]: getattr(parameters, name)})

        return replace(self, parameters=parameters, animation=animation)

    def with_rotation(self, hip_rotation: float, spine_spring: float,
                      shoulder_rotation: float, elbow_rotation: float,
                      selected_punch: str) -> Scene:
        """Overwrite the four rotation parameters without touching angles or time."""
        parameters = replace(
            self.parameters,
            hip_rotation=float(hip_rotation),
            spine_spring=float(spine_spring),
            shoulder_rotation=float(shoulder_rotation),
            elbow_rotation=float(elbow_rotation),
        )
        return replace(self, parameters=parameters, selected_punch=selected_punch)

    def to_dict(self) -> dict:
        return {
            "parameters": self.parameters.to_dict(),
            "animation": self.animation.to_dict(),
            "selected_punch": self.selected_punch,
        }
