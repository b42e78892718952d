"""Animation clock, frame scheduling and the controller that drives a scene."""

from .clock import DEFAULT_TICK_SECONDS, Clock
from .controller import AnimationController, RenderCallback
from .scheduler import (
    DEFAULT_FRAME_INTERVAL,
    AsyncioFrameScheduler,
    FrameScheduler,
    ManualFrameScheduler,
)

__all__ = [
    "AnimationController",
    "AsyncioFrameScheduler",
    "Clock",
    "DEFAULT_FRAME_INTERVAL",
    "DEFAULT_TICK_SECONDS",
    "FrameScheduler",
    "ManualFrameScheduler",
    "RenderCallback",
]
