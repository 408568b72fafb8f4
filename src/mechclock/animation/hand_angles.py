"""Hour and minute hand angles from a sampled time."""

from mechclock.constants import DEGREES_PER_HOUR, DEGREES_PER_MINUTE
from mechclock.core.state import ClockTime


def hand_angles(time: ClockTime, *, include_milliseconds: bool = False) -> tuple[float, float]:
    """Return ``(hour_angle, minute_angle)`` in degrees, 0 = 12 o'clock, clockwise.

    With ``include_milliseconds`` the fractional second is folded in, so the
    hands move on every call instead of once per whole second.
    """
    seconds = time.seconds + time.milliseconds / 1000 if include_milliseconds else time.seconds
    hour_angle = ((time.hours % 12) + time.minutes / 60 + seconds / 3600) * DEGREES_PER_HOUR
    minute_angle = (time.minutes + seconds / 60) * DEGREES_PER_MINUTE
    return hour_angle, minute_angle
