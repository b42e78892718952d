"""
Animation controller.

Owns the current `Scene` and drives it with a frame scheduler:

    Stopped --play--> Playing --pause/reset--> Stopped

While playing, every frame advances the clock by one fixed step, renders,
and requests the next frame. Pausing or resetting cancels the pending frame
through its stored handle, so no further ticks run once stopped.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from punchcalc.kinematics import Pose, PunchParameters, Scene, apply_preset, compute_pose

from .clock import Clock, DEFAULT_TICK_SECONDS
from .scheduler import FrameScheduler, ManualFrameScheduler

logger = logging.getLogger(__name__)

RenderCallback = Callable[[Pose, Scene], None]


class AnimationController:
    """Single-threaded animation loop around an immutable scene."""

    def __init__(
        self,
        scene: Optional[Scene] = None,
        scheduler: Optional[FrameScheduler] = None,
        tick_seconds: float = DEFAULT_TICK_SECONDS,
        on_render: Optional[RenderCallback] = None,
    ) -> None:
        self._scene = scene or Scene.initial()
        self.scheduler = scheduler or ManualFrameScheduler()
        self.clock = Clock(tick_rate=tick_seconds, current_time=self._scene.elapsed_time)
        self.on_render = on_render
        self._frame_handle: Optional[int] = None

    @property
    def scene(self) -> Scene:
        return self._scene

    @property
    def parameters(self) -> PunchParameters:
        return self._scene.parameters

    @property
    def is_playing(self) -> bool:
        return self._scene.is_playing

    @property
    def has_pending_frame(self) -> bool:
        return self._frame_handle is not None

    def current_pose(self) -> Pose:
        return compute_pose(self._scene)

    # =========================================================================
    # Commands
    # =========================================================================

    def play(self) -> None:
        """Start the animation. Ignored if already playing."""
        if self._scene.is_playing:
            return
        self._scene = self._scene.play()
        logger.info("Animation started")
        self._animate()

    def pause(self) -> None:
        self._scene = self._scene.pause()
        self._cancel_frame()
        logger.info("Animation paused")

    def reset(self) -> None:
        self._scene = self._scene.reset()
        self._cancel_frame()
        self.clock.reset()
        self.render()
        logger.info("Animation reset")

    def set_parameter(self, name: str, value: float) -> None:
        self._scene = self._scene.set_parameter(name, value)
        logger.debug("Parameter %s = %s", name, value)
        self.render()

    def apply_preset(self, punch: str) -> None:
        self._scene = apply_preset(self._scene, punch)

    def render(self) -> Pose:
        """Compute the current pose and hand it to the render callback."""
        pose = compute_pose(self._scene)
        if self.on_render is not None:
            try:
                self.on_render(pose, self._scene)
            except Exception:
                logger.exception("Render callback failed")
        return pose

    def stop(self) -> None:
        """Pause without logging; used when the owner is being torn down."""
        self._scene = self._scene.pause()
        self._cancel_frame()

    # =========================================================================
    # Frame loop
    # =========================================================================

    def _animate(self) -> None:
        self._frame_handle = None
        if not self._scene.is_playing:
            return
        dt = self.clock.tick()
        self._scene = self._scene.advance(dt)
        self.render()
        # Render callbacks may pause or reset the animation
        if self._scene.is_playing:
            self._frame_handle = self.scheduler.request_frame(self._animate)

    def _cancel_frame(self) -> None:
        if self._frame_handle is not None:
            self.scheduler.cancel_frame(self._frame_handle)
            self._frame_handle = None
