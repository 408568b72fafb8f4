"""Frame-scheduling capabilities.

A scheduler runs a callback once, shortly before the next paint, passing a
monotonic timestamp in milliseconds.  Callers re-request every frame, and a
pending request can be cancelled through the handle it returned.
"""

from __future__ import annotations

import itertools
from typing import Callable, Hashable, Protocol

from mechclock.constants import DEFAULT_FRAME_INTERVAL_MS
from mechclock.core.clock import monotonic_ms

FrameCallback = Callable[[float], None]


class FrameScheduler(Protocol):
    def request_frame(self, callback: FrameCallback) -> Hashable:
        ...

    def cancel_frame(self, handle: Hashable) -> None:
        ...


class ManualFrameScheduler:
    """Scheduler driven by hand, with synthetic timestamps.

    ``fire(t)`` runs every callback pending at the time of the call; callbacks
    requested while firing wait for the next ``fire``, and a callback
    cancelled by an earlier one in the same batch does not run.
    """

    def __init__(self) -> None:
        self._pending: dict[int, FrameCallback] = {}
        self._firing: dict[int, FrameCallback] = {}
        self._ids = itertools.count(1)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request_frame(self, callback: FrameCallback) -> int:
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: Hashable) -> None:
        self._pending.pop(handle, None)
        self._firing.pop(handle, None)

    def fire(self, timestamp_ms: float) -> int:
        """Run the pending callbacks with ``timestamp_ms``; return how many ran."""
        self._firing, self._pending = self._pending, {}
        ran = 0
        while self._firing:
            handle = next(iter(self._firing))
            callback = self._firing.pop(handle)
            callback(timestamp_ms)
            ran += 1
        return ran

    def run(self, timestamps: list[float]) -> None:
        for t in timestamps:
            self.fire(t)


class QtFrameScheduler:
    """Schedules frames with single-shot QTimers on the Qt event loop."""

    def __init__(self, interval_ms: int = DEFAULT_FRAME_INTERVAL_MS, parent=None) -> None:
        self.interval_ms = interval_ms
        self._parent = parent
        self._timers: dict[int, object] = {}
        self._ids = itertools.count(1)

    def request_frame(self, callback: FrameCallback) -> int:
        from PySide6.QtCore import QTimer

        handle = next(self._ids)
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.setInterval(self.interval_ms)

        def _fire():
            self._release(handle)
            callback(monotonic_ms())

        timer.timeout.connect(_fire)
        self._timers[handle] = timer
        timer.start()
        return handle

    def cancel_frame(self, handle: Hashable) -> None:
        timer = self._timers.get(handle)
        if timer is not None:
            timer.stop()
            self._release(handle)

    def _release(self, handle: int) -> None:
        timer = self._timers.pop(handle, None)
        if timer is not None:
            timer.deleteLater()
