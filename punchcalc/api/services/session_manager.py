"""Session manager for punch animation sessions."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional
from uuid import UUID, uuid4

from punchcalc.animation import AnimationController, AsyncioFrameScheduler
from punchcalc.config import get_config
from punchcalc.kinematics import Pose, PunchParameters, Scene, apply_preset

logger = logging.getLogger(__name__)

FrameListener = Callable[[Pose, Scene], None]


@dataclass
class PunchSession:
    """A punch animation session."""

    session_id: UUID
    controller: AnimationController
    scheduler: AsyncioFrameScheduler
    closed: bool = False

    # Frame subscribers (WebSocket connections)
    _listeners: list[FrameListener] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Route controller renders to every subscriber."""
        self.controller.on_render = self._broadcast

    def subscribe(self, listener: FrameListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: FrameListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _broadcast(self, pose: Pose, scene: Scene) -> None:
        for listener in list(self._listeners):
            try:
                listener(pose, scene)
            except Exception:
                logger.exception("Frame listener failed for session %s", self.session_id)


class PunchSessionManager:
    """
    Manages active punch animation sessions.

    All sessions tick on the running asyncio loop; the lock only guards the
    session table.
    """

    def __init__(self) -> None:
        """Initialize the session manager."""
        self._sessions: dict[UUID, PunchSession] = {}
        self._lock = asyncio.Lock()

    @property
    def active_sessions(self) -> list[UUID]:
        return list(self._sessions.keys())

    async def create_session(
        self,
        parameters: Optional[PunchParameters] = None,
        punch: Optional[str] = None,
        tick_seconds: Optional[float] = None,
        frame_interval: Optional[float] = None,
    ) -> PunchSession:
        """
        Create a new punch session.

        Args:
            parameters: Initial parameter set (defaults to PunchParameters())
            punch: Preset to apply on top of the parameters
            tick_seconds: Animation time added per frame (defaults to config)
            frame_interval: Wall-clock seconds between frames (defaults to config)

        Returns:
            New PunchSession
        """
        config = get_config()
        scheduler = AsyncioFrameScheduler(
            frame_interval=frame_interval if frame_interval is not None else config.frame_interval,
        )

        scene = Scene.initial(parameters)
        if punch is not None:
            scene = apply_preset(scene, punch)

        controller = AnimationController(
            scene=scene,
            scheduler=scheduler,
            tick_seconds=tick_seconds if tick_seconds is not None else config.tick_seconds,
        )

        session_id = uuid4()
        session = PunchSession(session_id=session_id, controller=controller, scheduler=scheduler)

        async with self._lock:
            self._sessions[session_id] = session

        logger.info("Created punch session %s", session_id)
        return session

    async def get_session(self, session_id: UUID) -> Optional[PunchSession]:
        """Get a session by ID."""
        async with self._lock:
            return self._sessions.get(session_id)

    async def delete_session(self, session_id: UUID) -> bool:
        """
        Delete a session.

        Stops the animation if running.
        Returns True if session existed and was deleted.
        """
        async with self._lock:
            session = self._sessions.pop(session_id, None)
            if session is None:
                return False

            session.closed = True
            session.controller.stop()
            session.scheduler.cancel_all()

        logger.info("Deleted punch session %s", session_id)
        return True

    async def list_sessions(self) -> list[UUID]:
        """List all active session IDs."""
        async with self._lock:
            return list(self._sessions.keys())

    async def cleanup_all(self) -> None:
        """Stop and remove every session."""
        for session_id in self.active_sessions:
            await self.delete_session(session_id)


# Global session manager instance
_session_manager: Optional[PunchSessionManager] = None


def get_session_manager() -> PunchSessionManager:
    """Get the global session manager instance."""
    global _session_manager
    if _session_manager is None:
        _session_manager = PunchSessionManager()
    return _session_manager
