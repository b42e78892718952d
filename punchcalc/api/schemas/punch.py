"""Pydantic schemas for the punch animation API."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

ParameterName = Literal[
    "hip_rotation",
    "spine_spring",
    "shoulder_rotation",
    "elbow_rotation",
    "hip_initial_angle",
    "shoulder_initial_angle",
    "elbow_initial_angle",
    "hip_length",
    "collar_length",
    "upper_arm_length",
    "forearm_length",
]


class PunchParametersSchema(BaseModel):
    """Full parameter set. Sessions clamp values to the slider ranges."""

    hip_rotation: float = 45.0
    spine_spring: float = 45.0
    shoulder_rotation: float = 180.0
    elbow_rotation: float = 270.0
    hip_initial_angle: float = 0.0
    shoulder_initial_angle: float = 0.0
    elbow_initial_angle: float = 0.0
    hip_length: float = 20.0
    collar_length: float = 20.0
    upper_arm_length: float = 35.0
    forearm_length: float = 30.0


class AnimationStateSchema(BaseModel):
    """Animation state. Instantaneous angles apply only while stopped."""

    is_playing: bool = False
    elapsed_time: float = Field(default=0.0, ge=0)
    hip_angle_deg: float = 0.0
    shoulder_angle_deg: float = 0.0
    elbow_angle_deg: float = 0.0


class Position2DSchema(BaseModel):
    """2D point in centimetres."""

    x: float = 0.0
    y: float = 0.0


class SegmentSchema(BaseModel):
    start: Position2DSchema
    end: Position2DSchema
    center: Position2DSchema


class JointAnglesSchema(BaseModel):
    """Resolved joint angles in radians."""

    hip: float
    collar: float
    shoulder: float
    elbow: float


class PoseSchema(BaseModel):
    """Computed pose for one frame."""

    hip: SegmentSchema
    collar: SegmentSchema
    shoulder: Position2DSchema
    elbow: Position2DSchema
    fist: Position2DSchema
    target: Position2DSchema
    angles: JointAnglesSchema
    spine_response_time: float


class CreateSessionRequest(BaseModel):
    """Request to create a new punch session."""

    parameters: Optional[PunchParametersSchema] = None
    punch: Optional[str] = None


class SessionResponse(BaseModel):
    """Response containing session information."""

    session_id: str
    selected_punch: str
    parameters: PunchParametersSchema
    animation: AnimationStateSchema
    pose: PoseSchema


class SetParameterRequest(BaseModel):
    """Request to change one parameter. Values are clamped to the slider range."""

    name: ParameterName
    value: float


class ApplyPresetRequest(BaseModel):
    """Request to apply a punch preset."""

    punch: str


class PoseRequest(BaseModel):
    """Stateless pose query."""

    parameters: PunchParametersSchema = Field(default_factory=PunchParametersSchema)
    animation: AnimationStateSchema = Field(default_factory=AnimationStateSchema)
    center: Position2DSchema = Field(default_factory=Position2DSchema)


class ParameterRangeSchema(BaseModel):
    label: str
    group: Literal["rotation", "initial_angle", "length"]
    min: float
    max: float
    step: float
    unit: str


class PunchPresetSchema(BaseModel):
    name: str
    hip_rotation: float
    spine_spring: float
    shoulder_rotation: float
    elbow_rotation: float


# WebSocket message types

class WSMessageBase(BaseModel):
    """Base WebSocket message."""

    type: str


class SetParameterMessage(WSMessageBase):
    """Client message to change one parameter."""

    type: Literal["set_parameter"] = "set_parameter"
    name: ParameterName
    value: float


class ApplyPresetMessage(WSMessageBase):
    """Client message to apply a punch preset."""

    type: Literal["apply_preset"] = "apply_preset"
    punch: str
