"""Per-clock motion controller.

Runs once per scheduler callback: gates the frame, samples the wall clock,
advances the second hand, recomputes the hour/minute angles and hands the
resulting :class:`HandAngles` to the renderer.  Each controller owns its own
gate and second-hand state, so several clocks can share one event loop.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Hashable, Optional

from mechclock.animation.frame_gate import FrameGate
from mechclock.animation.hand_angles import hand_angles
from mechclock.animation.second_hand import SecondHandPhaseMachine
from mechclock.constants import MAX_RATE_HZ
from mechclock.core.clock import SystemTimeSampler, TimeSampler
from mechclock.core.events import EventBus, EventType
from mechclock.core.state import HandAngles, PhysicsConfig
from mechclock.coordination.scheduler import FrameScheduler

logger = logging.getLogger(__name__)


class HandSweep(Enum):
    """How often the hour and minute hands are recomputed."""
    STEPPED = "stepped"        # on whole-second ticks only
    CONTINUOUS = "continuous"  # every accepted frame, milliseconds included


class ClockMotionController:
    """Drives one clock's hands from a frame scheduler.

    Parameters
    ----------
    scheduler : FrameScheduler
        Source of per-frame callbacks.
    time_sampler : TimeSampler, optional
        Wall-clock source; defaults to the host's local time.
    physics : PhysicsConfig, optional
        Second-hand tick parameters.
    max_rate_hz : float
        Upper bound on accepted frames per second.
    event_bus : EventBus, optional
        Receives HANDS_UPDATED, TICK, PHASE_CHANGED and lifecycle events.
        TICK fires on every whole-second change; PHASE_CHANGED only when
        the phase differs from the previous frame, so a tick that lands
        during OVERSHOOT raises TICK alone.
    on_frame : callable, optional
        Called with the HandAngles of every accepted frame.
    sweep : HandSweep
        Hour/minute recompute policy.
    """

    def __init__(
        self,
        scheduler: FrameScheduler,
        time_sampler: Optional[TimeSampler] = None,
        physics: Optional[PhysicsConfig] = None,
        max_rate_hz: float = MAX_RATE_HZ,
        event_bus: Optional[EventBus] = None,
        on_frame: Optional[Callable[[HandAngles], None]] = None,
        sweep: HandSweep = HandSweep.STEPPED,
    ) -> None:
        self._scheduler = scheduler
        self._sampler = time_sampler or SystemTimeSampler()
        self.physics = physics or PhysicsConfig()
        self.event_bus = event_bus
        self.on_frame = on_frame
        self.sweep = HandSweep(sweep)

        self.gate = FrameGate(max_rate_hz)
        self.second_hand = SecondHandPhaseMachine(self.physics)

        self._running = False
        self._handle: Optional[Hashable] = None
        self._hour_angle = 0.0
        self._minute_angle = 0.0
        self.last_angles: Optional[HandAngles] = None

        # Diagnostics
        self.accepted_frames = 0
        self.rejected_frames = 0

    # ── Lifecycle ─────────────────────────────────────────────────

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            return
        self.second_hand.reset()
        self.gate.reset()
        self.last_angles = None
        self.accepted_frames = 0
        self.rejected_frames = 0
        self._running = True
        self._handle = self._scheduler.request_frame(self._on_frame)
        logger.info("Clock started (max %.0f Hz, %s sweep)",
                    self.gate.state.max_rate_hz, self.sweep.value)
        if self.event_bus:
            self.event_bus.publish(EventType.CLOCK_STARTED)

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        if self._handle is not None:
            self._scheduler.cancel_frame(self._handle)
            self._handle = None
        logger.info("Clock stopped after %d accepted / %d rejected frames",
                    self.accepted_frames, self.rejected_frames)
        if self.event_bus:
            self.event_bus.publish(EventType.CLOCK_STOPPED)

    # ── Per-frame callback ────────────────────────────────────────

    def _on_frame(self, timestamp_ms: float) -> None:
        self._handle = None
        if not self._running:
            return

        if self.gate.accept(timestamp_ms):
            self.accepted_frames += 1
            self.last_angles = self._update()
            self._emit(self.last_angles)
        else:
            self.rejected_frames += 1

        # The renderer may have stopped (and restarted) us from inside _emit
        if self._running and self._handle is None:
            self._handle = self._scheduler.request_frame(self._on_frame)

    def _update(self) -> HandAngles:
        now = self._sampler.sample()
        ticked = self.second_hand.is_tick(now)
        previous = self.second_hand.phase
        state = self.second_hand.advance(now)

        if self.sweep is HandSweep.CONTINUOUS:
            self._hour_angle, self._minute_angle = hand_angles(now, include_milliseconds=True)
        elif ticked:
            self._hour_angle, self._minute_angle = hand_angles(now)

        if ticked and self.event_bus:
            self.event_bus.publish(EventType.TICK, second=now.seconds)
        if state.phase is not previous and self.event_bus:
            self.event_bus.publish(EventType.PHASE_CHANGED, previous=previous, phase=state.phase)

        return HandAngles(
            hour_angle_degrees=self._hour_angle,
            minute_angle_degrees=self._minute_angle,
            second_hand_visual_angle_degrees=state.visual_angle_degrees,
            phase=state.phase,
        )

    def _emit(self, angles: HandAngles) -> None:
        if self.event_bus:
            self.event_bus.publish(EventType.HANDS_UPDATED, angles=angles)
        if self.on_frame:
            self.on_frame(angles)
