"""
Frame schedulers.

A frame scheduler runs a callback on the next display refresh and returns a
handle that can cancel it before it fires. The animation controller only
ever has one pending frame at a time.
"""

from __future__ import annotations

import asyncio
import itertools
from collections import OrderedDict
from typing import Callable, Optional, Protocol

FrameCallback = Callable[[], None]

DEFAULT_FRAME_INTERVAL = 1.0 / 60.0


class FrameScheduler(Protocol):
    """Host frame-presentation mechanism."""

    def request_frame(self, callback: FrameCallback) -> int:
        """Schedule callback for the next frame and return its handle."""
        ...

    def cancel_frame(self, handle: int) -> None:
        """Cancel a pending frame. Unknown or already-run handles are ignored."""
        ...


class ManualFrameScheduler:
    """
    Frame scheduler stepped explicitly by the caller.

    Used for headless runs and tests: nothing happens until `run_frame` or
    `run_frames` is called.
    """

    def __init__(self) -> None:
        self._pending: OrderedDict[int, FrameCallback] = OrderedDict()
        self._ids = itertools.count(1)

    def request_frame(self, callback: FrameCallback) -> int:
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        self._pending.pop(handle, None)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def run_frame(self) -> bool:
        """
        Present one frame: run every callback pending right now.

        Callbacks requested while running wait for the next frame.
        Returns False if nothing was pending.
        """
        if not self._pending:
            return False
        due = list(self._pending.items())
        self._pending.clear()
        for _, callback in due:
            callback()
        return True

    def run_frames(self, count: int) -> int:
        """Run up to count frames, stopping early when idle. Returns frames run."""
        ran = 0
        for _ in range(count):
            if not self.run_frame():
                break
            ran += 1
        return ran


class AsyncioFrameScheduler:
    """Frame scheduler backed by `loop.call_later` on an asyncio event loop."""

    def __init__(
        self,
        frame_interval: float = DEFAULT_FRAME_INTERVAL,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> None:
        self.frame_interval = frame_interval
        self._loop = loop
        self._handles: dict[int, asyncio.TimerHandle] = {}
        self._ids = itertools.count(1)

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is not None:
            return self._loop
        return asyncio.get_running_loop()

    def request_frame(self, callback: FrameCallback) -> int:
        handle = next(self._ids)

        def fire() -> None:
            self._handles.pop(handle, None)
            callback()

        self._handles[handle] = self.loop.call_later(self.frame_interval, fire)
        return handle

    def cancel_frame(self, handle: int) -> None:
        timer = self._handles.pop(handle, None)
        if timer is not None:
            timer.cancel()

    def cancel_all(self) -> None:
        for timer in self._handles.values():
            timer.cancel()
        self._handles.clear()

    @property
    def pending(self) -> int:
        return len(self._handles)
