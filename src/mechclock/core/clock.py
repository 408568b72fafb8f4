"""Time sources: wall-clock sampling and monotonic frame timestamps."""

import time
from datetime import datetime
from typing import Callable, Iterable, Optional, Protocol

from mechclock.core.state import ClockTime


def monotonic_ms() -> float:
    """Monotonic timestamp in milliseconds, for frame scheduling."""
    return time.perf_counter() * 1000.0


class TimeSampler(Protocol):
    def sample(self) -> ClockTime:
        ...


class SystemTimeSampler:
    """Reads the host's local wall-clock time."""

    def __init__(self, now: Optional[Callable[[], datetime]] = None):
        self._now = now or datetime.now

    def sample(self) -> ClockTime:
        return ClockTime.from_datetime(self._now())


class FixedTimeSampler:
    """Replays a scripted sequence of times; the last one repeats once exhausted."""

    def __init__(self, times: Iterable[ClockTime]):
        self._times = list(times)
        if not self._times:
            raise ValueError("FixedTimeSampler needs at least one ClockTime")
        self._index = 0

    @property
    def remaining(self) -> int:
        return max(0, len(self._times) - self._index)

    def push(self, t: ClockTime) -> None:
        self._times.append(t)

    def sample(self) -> ClockTime:
        if self._index < len(self._times):
            t = self._times[self._index]
            self._index += 1
            return t
        return self._times[-1]

