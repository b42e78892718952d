"""WebSocket router for real-time punch animation frames."""

import asyncio
import json
import logging
from uuid import UUID

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from punchcalc.api.routers.punch import session_to_payload
from punchcalc.api.schemas.punch import ApplyPresetMessage, SetParameterMessage
from punchcalc.api.services.session_manager import get_session_manager
from punchcalc.kinematics import Pose, Scene, UnknownPresetError, clamp_parameter

logger = logging.getLogger(__name__)

router = APIRouter(tags=["punch-websocket"])


def _frame_payload(pose: Pose, scene: Scene) -> dict:
    return {
        "animation": scene.animation.to_dict(),
        "pose": pose.to_dict(),
    }


async def _send_error(websocket: WebSocket, message: str, code: str) -> None:
    await websocket.send_json({"type": "error", "message": message, "code": code})


@router.websocket("/ws/punch/{session_id}")
async def punch_websocket(websocket: WebSocket, session_id: str) -> None:
    """
    WebSocket endpoint for a punch animation session.

    Client messages:
    - play: Start animating
    - pause: Stop animating, keep elapsed time
    - reset: Stop animating and rewind to zero
    - set_parameter: Change one parameter ({name, value})
    - apply_preset: Apply a punch preset ({punch})
    - request_sync: Request full state sync

    Server messages:
    - frame: Sent after every render with animation state and pose
    - state_sync: Full session state on connect or request
    - error: Error message
    """
    await websocket.accept()

    manager = get_session_manager()

    # Validate session ID
    try:
        uuid = UUID(session_id)
    except ValueError:
        await _send_error(websocket, "Invalid session ID format", "INVALID_SESSION_ID")
        await websocket.close()
        return

    session = await manager.get_session(uuid)
    if session is None:
        await _send_error(websocket, "Session not found", "SESSION_NOT_FOUND")
        await websocket.close()
        return

    controller = session.controller

    async def send_sync() -> None:
        await websocket.send_json({
            "type": "state_sync",
            "payload": session_to_payload(session),
        })

    # Renders happen synchronously on the loop; queue them for an ordered sender
    frames: asyncio.Queue = asyncio.Queue()

    def on_frame(pose: Pose, scene: Scene) -> None:
        frames.put_nowait(_frame_payload(pose, scene))

    async def send_frames() -> None:
        while True:
            payload = await frames.get()
            await websocket.send_json({"type": "frame", "payload": payload})

    await send_sync()
    session.subscribe(on_frame)
    sender = asyncio.create_task(send_frames())

    try:
        while True:
            data = await websocket.receive_text()
            try:
                message = json.loads(data)
            except json.JSONDecodeError:
                await _send_error(websocket, "Invalid JSON", "INVALID_JSON")
                continue

            msg_type = message.get("type") if isinstance(message, dict) else None

            if session.closed:
                await _send_error(websocket, "Session not found", "SESSION_NOT_FOUND")
                await websocket.close()
                return

            if msg_type == "play":
                controller.play()

            elif msg_type == "pause":
                controller.pause()

            elif msg_type == "reset":
                controller.reset()

            elif msg_type == "set_parameter":
                try:
                    msg = SetParameterMessage.model_validate(message)
                except ValidationError:
                    await _send_error(websocket, "Invalid set_parameter message", "INVALID_PARAMETER")
                    continue
                controller.set_parameter(msg.name, clamp_parameter(msg.name, msg.value))

            elif msg_type == "apply_preset":
                try:
                    msg = ApplyPresetMessage.model_validate(message)
                    controller.apply_preset(msg.punch)
                except (ValidationError, UnknownPresetError):
                    await _send_error(websocket, "Unknown punch preset", "UNKNOWN_PRESET")
                    continue
                await send_sync()

            elif msg_type == "request_sync":
                await send_sync()

            else:
                await _send_error(websocket, f"Unknown message type: {msg_type}", "UNKNOWN_MESSAGE")

    except WebSocketDisconnect:
        logger.info("WebSocket closed for punch session %s", uuid)
    finally:
        controller.pause()
        session.unsubscribe(on_frame)
        sender.cancel()
