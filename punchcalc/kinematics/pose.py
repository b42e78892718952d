"""
Pose computation for the kinetic chain.

hip -> collar/spine -> shoulder -> elbow -> fist

Each segment is a rigid rod. Hip and collar bones rotate about the shared
scene centre; the shoulder sits on the collar bone's end and the arm hangs
off it segment by segment.
"""

from __future__ import annotations
from dataclasses import dataclass

from .angles import AngleSource, Fixed, Speed, to_radians
from .state import Scene
from .vec2 import UP, Vec2

TARGET_OFFSET_CM = 50.0


@dataclass(frozen=True)
class Segment:
    """A rod drawn symmetrically about its centre."""
    start: Vec2
    end: Vec2
    center: Vec2

    def to_dict(self) -> dict:
        return {
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
            "center": self.center.to_dict(),
        }


@dataclass(frozen=True)
class JointAngles:
    """Resolved joint angles for one frame (radians)."""
    hip: float
    collar: float
    shoulder: float
    elbow: float

    def to_dict(self) -> dict:
        return {
            "hip": self.hip,
            "collar": self.collar,
            "shoulder": self.shoulder,
            "elbow": self.elbow,
        }


@dataclass(frozen=True)
class Pose:
    """All joint and segment positions for one frame, in centimetres."""
    hip: Segment
    collar: Segment
    shoulder: Vec2
    elbow: Vec2
    fist: Vec2
    target: Vec2
    angles: JointAngles
    spine_response_time: float      # Seconds; computed but not applied

    def to_dict(self) -> dict:
        return {
            "hip": self.hip.to_dict(),
            "collar": self.collar.to_dict(),
            "shoulder": self.shoulder.to_dict(),
            "elbow": self.elbow.to_dict(),
            "fist": self.fist.to_dict(),
            "target": self.target.to_dict(),
            "angles": self.angles.to_dict(),
            "spine_response_time": self.spine_response_time,
        }


@dataclass(frozen=True)
class JointSources:
    hip: AngleSource
    shoulder: AngleSource
    elbow: AngleSource


def joint_sources(scene: Scene) -> JointSources:
    """Speeds while playing, instantaneous angles while stopped."""
    params = scene.parameters
    anim = scene.animation
    if anim.is_playing:
        return JointSources(
            hip=Speed(params.hip_rotation),
            shoulder=Speed(params.shoulder_rotation),
            elbow=Speed(params.elbow_rotation),
        )
    return JointSources(
        hip=Fixed(anim.hip_angle_deg),
        shoulder=Fixed(anim.shoulder_angle_deg),
        elbow=Fixed(anim.elbow_angle_deg),
    )


def resolve_angles(scene: Scene) -> JointAngles:
    """
    Resolve the joint angles for a scene.

    While playing, the elbow is relative to the shoulder; while stopped it
    is an absolute angle of its own.
    """
    sources = joint_sources(scene)
    t = scene.elapsed_time

    hip = to_radians(sources.hip.resolve(t))
    shoulder = to_radians(sources.shoulder.resolve(t))
    elbow = to_radians(sources.elbow.resolve(t))
    if scene.is_playing:
        elbow = shoulder + elbow

    # Collar follows the hip exactly
    return JointAngles(hip=hip, collar=hip, shoulder=shoulder, elbow=elbow)


def spine_response_time(spine_spring: float) -> float:
    """
    Map the spine spring constant k to a response time in seconds.

    Higher k gives a faster response: 1.0s at k=0 down to 0.2s at k>=100.
    """
    # TODO: feed this into a lagged collar angle once the spring response is designed
    k = max(0.0001, spine_spring)
    return 0.2 + (100 - min(100, k)) / 100 * 0.8


def centered_segment(center: Vec2, angle: float, length: float) -> Segment:
    half = Vec2.from_angle(angle, length / 2)
    return Segment(start=center - half, end=center + half, center=center)


def compute_pose(scene: Scene, center: Vec2 | None = None) -> Pose:
    """Compute the full pose for a scene around the given centre."""
    center = center if center is not None else Vec2.zero()
    params = scene.parameters
    angles = resolve_angles(scene)

    hip = centered_segment(center, angles.hip, params.hip_length)
    collar = centered_segment(center, angles.collar, params.collar_length)

    shoulder = collar.end
    elbow = shoulder + Vec2.from_angle(angles.shoulder, params.upper_arm_length)
    fist = elbow + Vec2.from_angle(angles.elbow, params.forearm_length)

    return Pose(
        hip=hip,
        collar=collar,
        shoulder=shoulder,
        elbow=elbow,
        fist=fist,
        target=center + UP * TARGET_OFFSET_CM,
        angles=angles,
        spine_response_time=spine_response_time(params.spine_spring),
    )
