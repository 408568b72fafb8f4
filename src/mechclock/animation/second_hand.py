"""Second-hand tick animation.

The second hand does not sweep.  Each whole second it runs through:

    SETTLED → CREEPING → (tick) OVERSHOOT → RECOIL → SETTLED

CREEPING covers the last ``creep_duration_ms`` of a second, easing the hand
forward by up to ``creep_angle_degrees``.  On the tick the hand jumps past
the new base angle by ``overshoot_degrees``, falls back behind it by
``recoil_degrees`` on the next accepted frame, and rests on it the frame
after that.  OVERSHOOT and RECOIL each last exactly one accepted frame, so
their on-screen duration follows the frame rate.
"""

import logging
from typing import Optional

from mechclock.core.math_utils import clamp
from mechclock.core.state import AnimationPhase, ClockTime, PhysicsConfig, SecondHandState

logger = logging.getLogger(__name__)


def base_angle(seconds: int) -> float:
    """Resting angle for a whole second, in degrees."""
    return (seconds / 60) * 360


def is_tick(time: ClockTime, state: SecondHandState) -> bool:
    return time.seconds != state.last_observed_second


def ms_until_tick(time: ClockTime) -> int:
    return 1000 - time.milliseconds


def _in_creep_window(ms_left: float, config: PhysicsConfig) -> bool:
    return 0 < ms_left <= config.creep_duration_ms


def _settle(state: SecondHandState) -> None:
    state.phase = AnimationPhase.SETTLED
    state.visual_angle_degrees = state.target_base_angle_degrees


def _creep(time: ClockTime, config: PhysicsConfig, state: SecondHandState) -> None:
    ms_left = ms_until_tick(time)
    if not _in_creep_window(ms_left, config):
        # Window already passed, or the clock jumped
        _settle(state)
        return
    time_into_creep_ms = config.creep_duration_ms - ms_left
    progress = clamp(time_into_creep_ms / config.creep_duration_ms, 0.0, 1.0)
    state.visual_angle_degrees = (
        state.target_base_angle_degrees + progress * config.creep_angle_degrees
    )


def _tick(time: ClockTime, config: PhysicsConfig, state: SecondHandState) -> None:
    previous = state.last_observed_second
    if previous >= 0 and time.seconds != (previous + 1) % 60:
        logger.debug("Clock jumped from second %d to %d", previous, time.seconds)
    state.last_observed_second = time.seconds
    state.target_base_angle_degrees = base_angle(time.seconds)
    state.phase = AnimationPhase.OVERSHOOT
    state.visual_angle_degrees = state.target_base_angle_degrees + config.overshoot_degrees


def advance(time: ClockTime, config: PhysicsConfig, state: SecondHandState) -> SecondHandState:
    """Move ``state`` one accepted frame forward and return it.

    Mutates only ``state``.  Call exactly once per accepted frame with a fresh
    sample; every call advances the phase.
    """
    if is_tick(time, state):
        _tick(time, config, state)
        return state

    phase = state.phase
    if phase is AnimationPhase.OVERSHOOT:
        state.phase = AnimationPhase.RECOIL
        state.visual_angle_degrees = state.target_base_angle_degrees + config.recoil_degrees
    elif phase is AnimationPhase.RECOIL:
        _settle(state)
    elif phase is AnimationPhase.SETTLED:
        if _in_creep_window(ms_until_tick(time), config):
            state.phase = AnimationPhase.CREEPING
            _creep(time, config, state)
        else:
            _settle(state)
    elif phase is AnimationPhase.CREEPING:
        _creep(time, config, state)
    else:
        logger.error("Illegal second-hand phase %r; resetting", phase)
        state.target_base_angle_degrees = base_angle(time.seconds)
        _settle(state)
    return state


class SecondHandPhaseMachine:
    """Owns one SecondHandState and advances it with a fixed PhysicsConfig."""

    def __init__(self, config: Optional[PhysicsConfig] = None):
        self.config = config or PhysicsConfig()
        self.state = SecondHandState()

    @property
    def phase(self) -> AnimationPhase:
        return self.state.phase

    @property
    def visual_angle_degrees(self) -> float:
        return self.state.visual_angle_degrees

    def is_tick(self, time: ClockTime) -> bool:
        return is_tick(time, self.state)

    def advance(self, time: ClockTime) -> SecondHandState:
        return advance(time, self.config, self.state)

    def reset(self) -> None:
        self.state.reset()
