"""Clock state: time snapshots, physics parameters and per-frame hand state."""

import math
from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum

from mechclock.constants import (
    CREEP_ANGLE_DEGREES,
    CREEP_DURATION_MS,
    MAX_RATE_HZ,
    NO_FRAME_ACCEPTED,
    NO_SECOND_OBSERVED,
    OVERSHOOT_DEGREES,
    RECOIL_DEGREES,
)


@dataclass(frozen=True)
class ClockTime:
    """Wall-clock time broken into fields, sampled once per accepted frame."""
    hours: int = 0         # 0-23
    minutes: int = 0       # 0-59
    seconds: int = 0       # 0-59
    milliseconds: int = 0  # 0-999

    def __post_init__(self):
        for name, hi in (("hours", 23), ("minutes", 59), ("seconds", 59), ("milliseconds", 999)):
            value = getattr(self, name)
            if not 0 <= value <= hi:
                raise ValueError(f"{name} out of range 0-{hi}: {value}")

    @classmethod
    def from_datetime(cls, dt: datetime) -> "ClockTime":
        return cls(dt.hour, dt.minute, dt.second, dt.microsecond // 1000)


@dataclass(frozen=True)
class PhysicsConfig:
    """Second-hand tick parameters (degrees and milliseconds)."""
    creep_duration_ms: float = CREEP_DURATION_MS
    creep_angle_degrees: float = CREEP_ANGLE_DEGREES
    overshoot_degrees: float = OVERSHOOT_DEGREES
    recoil_degrees: float = RECOIL_DEGREES

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{f.name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"{f.name} must be finite, got {value!r}")
        if self.creep_duration_ms <= 0:
            raise ValueError(f"creep_duration_ms must be positive, got {self.creep_duration_ms}")
        if self.creep_angle_degrees < 0:
            raise ValueError(f"creep_angle_degrees must not be negative, got {self.creep_angle_degrees}")
        if self.overshoot_degrees < 0:
            raise ValueError(f"overshoot_degrees must not be negative, got {self.overshoot_degrees}")
        if self.recoil_degrees > 0:
            raise ValueError(f"recoil_degrees must not be positive, got {self.recoil_degrees}")

    def to_dict(self) -> dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


class AnimationPhase(Enum):
    SETTLED = "SETTLED"
    CREEPING = "CREEPING"
    OVERSHOOT = "OVERSHOOT"
    RECOIL = "RECOIL"


@dataclass
class SecondHandState:
    """Mutable second-hand state, owned by exactly one phase machine."""
    phase: AnimationPhase = AnimationPhase.SETTLED
    last_observed_second: int = NO_SECOND_OBSERVED  # -1 forces a tick on first sample
    target_base_angle_degrees: float = 0.0  # base angle of the last ticked second
    visual_angle_degrees: float = 0.0       # angle actually drawn

    def reset(self) -> None:
        self.phase = AnimationPhase.SETTLED
        self.last_observed_second = NO_SECOND_OBSERVED
        self.target_base_angle_degrees = 0.0
        self.visual_angle_degrees = 0.0

    def visual_bounds(self, config: PhysicsConfig) -> tuple[float, float]:
        """Range the visual angle may occupy around the current base angle."""
        base = self.target_base_angle_degrees
        lo = min(config.recoil_degrees, 0.0)
        hi = max(config.overshoot_degrees, config.creep_angle_degrees)
        return base + lo, base + hi


@dataclass
class FrameGateState:
    """Throttle bookkeeping; only mutated when a frame is accepted."""
    last_accepted_timestamp_ms: float = NO_FRAME_ACCEPTED
    max_rate_hz: float = MAX_RATE_HZ
    measured_rate_hz: int | None = None


@dataclass(frozen=True)
class HandAngles:
    """Angles emitted to the renderer. Degrees, 0 = 12 o'clock, clockwise."""
    hour_angle_degrees: float
    minute_angle_degrees: float
    second_hand_visual_angle_degrees: float
    phase: AnimationPhase
