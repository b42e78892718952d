"""REST API router for punch animation sessions."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from punchcalc.api.schemas.punch import (
    ApplyPresetRequest,
    CreateSessionRequest,
    ParameterRangeSchema,
    PoseRequest,
    PoseSchema,
    PunchPresetSchema,
    SessionResponse,
    SetParameterRequest,
)
from punchcalc.api.services.session_manager import PunchSession, get_session_manager
from punchcalc.kinematics import (
    PARAMETER_RANGES,
    PUNCH_PRESETS,
    AnimationState,
    PunchParameters,
    Scene,
    UnknownPresetError,
    Vec2,
    clamp_parameter,
    compute_pose,
)

router = APIRouter(prefix="/punch", tags=["punch"])


def clamped_parameters(data: dict) -> PunchParameters:
    """Build a parameter set with every value clamped to its slider range."""
    return PunchParameters.from_dict(
        {name: clamp_parameter(name, value) for name, value in data.items()}
    )


def session_to_payload(session: PunchSession) -> dict:
    """Convert PunchSession to a plain payload dict."""
    controller = session.controller
    scene = controller.scene
    return {
        "session_id": str(session.session_id),
        "selected_punch": scene.selected_punch,
        "parameters": scene.parameters.to_dict(),
        "animation": scene.animation.to_dict(),
        "pose": controller.current_pose().to_dict(),
    }


def _session_to_response(session: PunchSession) -> SessionResponse:
    return SessionResponse(**session_to_payload(session))


def _parse_session_id(session_id: str) -> UUID:
    try:
        return UUID(session_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid session ID format",
        )


async def _require_session(session_id: str) -> PunchSession:
    session = await get_session_manager().get_session(_parse_session_id(session_id))
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Session not found",
        )
    return session


def _unknown_preset(punch: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Unknown punch preset: {punch}. Available: {list(PUNCH_PRESETS)}",
    )


@router.get("/parameters", response_model=dict[str, ParameterRangeSchema])
async def list_parameters() -> dict:
    """Slider ranges for every parameter."""
    return {name: rng.to_dict() for name, rng in PARAMETER_RANGES.items()}


@router.get("/presets", response_model=dict[str, PunchPresetSchema])
async def list_presets() -> dict:
    """Available punch presets."""
    return {key: preset.to_dict() for key, preset in PUNCH_PRESETS.items()}


@router.post("/pose", response_model=PoseSchema)
async def compute_pose_once(request: PoseRequest) -> dict:
    """Compute a pose for the given parameters and animation state without a session."""
    scene = Scene(
        parameters=PunchParameters.from_dict(request.parameters.model_dump()),
        animation=AnimationState.from_dict(request.animation.model_dump()),
    )
    center = Vec2(request.center.x, request.center.y)
    return compute_pose(scene, center=center).to_dict()


@router.post("/sessions", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session(request: Optional[CreateSessionRequest] = None) -> SessionResponse:
    """Create a new punch animation session."""
    manager = get_session_manager()

    parameters = None
    punch = None

    if request:
        if request.parameters:
            parameters = clamped_parameters(request.parameters.model_dump())
        punch = request.punch

    try:
        session = await manager.create_session(parameters=parameters, punch=punch)
    except UnknownPresetError:
        raise _unknown_preset(punch)

    return _session_to_response(session)


@router.get("/sessions", response_model=list[str])
async def list_sessions() -> list[str]:
    """List all active punch session IDs."""
    manager = get_session_manager()
    sessions = await manager.list_sessions()
    return [str(s) for s in sessions]


@router.get("/sessions/{session_id}", response_model=SessionResponse)
async def get_session(session_id: str) -> SessionResponse:
    """Get a punch session by ID."""
    session = await _require_session(session_id)
    return _session_to_response(session)


@router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(session_id: str) -> None:
    """Delete a punch session, stopping its animation."""
    manager = get_session_manager()
    deleted = await manager.delete_session(_parse_session_id(session_id))
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Session not found",
        )


@router.get("/sessions/{session_id}/pose", response_model=PoseSchema)
async def get_pose(session_id: str) -> dict:
    """Current pose of a session."""
    session = await _require_session(session_id)
    return session.controller.current_pose().to_dict()


@router.post("/sessions/{session_id}/play", response_model=SessionResponse)
async def play(session_id: str) -> SessionResponse:
    """Start animating. No effect if already playing."""
    session = await _require_session(session_id)
    session.controller.play()
    return _session_to_response(session)


@router.post("/sessions/{session_id}/pause", response_model=SessionResponse)
async def pause(session_id: str) -> SessionResponse:
    """Stop animating, keeping elapsed time."""
    session = await _require_session(session_id)
    session.controller.pause()
    return _session_to_response(session)


@router.post("/sessions/{session_id}/reset", response_model=SessionResponse)
async def reset(session_id: str) -> SessionResponse:
    """Stop animating and rewind elapsed time to zero."""
    session = await _require_session(session_id)
    session.controller.reset()
    return _session_to_response(session)


@router.put("/sessions/{session_id}/parameters", response_model=SessionResponse)
async def set_parameter(session_id: str, request: SetParameterRequest) -> SessionResponse:
    """Change one parameter; the value is clamped to its slider range."""
    session = await _require_session(session_id)
    session.controller.set_parameter(request.name, clamp_parameter(request.name, request.value))
    return _session_to_response(session)


@router.post("/sessions/{session_id}/preset", response_model=SessionResponse)
async def apply_preset(session_id: str, request: ApplyPresetRequest) -> SessionResponse:
    """Apply a punch preset to the four rotation parameters."""
    session = await _require_session(session_id)
    try:
        session.controller.apply_preset(request.punch)
    except UnknownPresetError:
        raise _unknown_preset(request.punch)
    return _session_to_response(session)
