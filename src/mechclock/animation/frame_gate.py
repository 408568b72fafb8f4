"""Frame-rate throttle between the scheduler and the per-frame clock logic."""

import logging
import math
from typing import Optional

from mechclock.constants import MAX_RATE_HZ, NO_FRAME_ACCEPTED
from mechclock.core.state import FrameGateState

logger = logging.getLogger(__name__)


class FrameGate:
    """Accepts at most ``max_rate_hz`` frames per second.

    Frames arriving sooner than ``1000 / max_rate_hz`` ms after the last
    accepted one are rejected without touching the gate state.  The caller
    still re-arms its scheduler on rejection; it only skips the frame's work.
    """

    def __init__(self, max_rate_hz: float = MAX_RATE_HZ, state: Optional[FrameGateState] = None):
        if not math.isfinite(max_rate_hz) or max_rate_hz <= 0:
            raise ValueError(f"max_rate_hz must be a positive number, got {max_rate_hz!r}")
        self.state = state or FrameGateState()
        self.state.max_rate_hz = max_rate_hz

    @property
    def period_ms(self) -> float:
        return 1000.0 / self.state.max_rate_hz

    @property
    def measured_rate_hz(self) -> Optional[int]:
        return self.state.measured_rate_hz

    def accept(self, timestamp_ms: float) -> bool:
        state = self.state
        if state.last_accepted_timestamp_ms == NO_FRAME_ACCEPTED:
            state.last_accepted_timestamp_ms = timestamp_ms
            return True

        delta = timestamp_ms - state.last_accepted_timestamp_ms
        if delta < self.period_ms:
            return False

        rate = round(1000.0 / delta)
        if rate != state.measured_rate_hz:
            logger.debug("Refresh rate: %d Hz", rate)
            state.measured_rate_hz = rate
        state.last_accepted_timestamp_ms = timestamp_ms
        return True

    def reset(self) -> None:
        self.state.last_accepted_timestamp_ms = NO_FRAME_ACCEPTED
        self.state.measured_rate_hz = None
