"""Flat hand and dial outlines for the 2D renderer.

Outlines are built pointing at 12 o'clock in dial space (unit radius, +y up)
and rotated into place per frame.  Clock angles are clockwise-positive while
the math rotation is counter-clockwise, hence the sign flip in
:func:`clock_deg_to_rad`.
"""

from dataclasses import dataclass

import numpy as np

from mechclock.core.math_utils import Points2, deg_to_rad, rotate_points, vec2, wrap_degrees


def clock_deg_to_rad(degrees: float) -> float:
    """Clock angle (0 = 12 o'clock, clockwise) to a CCW rotation in radians."""
    return -deg_to_rad(wrap_degrees(degrees))


@dataclass(frozen=True)
class HandShape:
    """Tapered hand outline, in fractions of the dial radius."""
    length: float
    tail: float
    base_width: float
    tip_width: float

    def outline(self) -> Points2:
        hb = self.base_width / 2
        ht = self.tip_width / 2
        return np.array([
            [-hb, -self.tail],
            [hb, -self.tail],
            [ht, self.length],
            [-ht, self.length],
        ], dtype=np.float64)


HOUR_HAND = HandShape(length=0.50, tail=0.08, base_width=0.060, tip_width=0.035)
MINUTE_HAND = HandShape(length=0.75, tail=0.10, base_width=0.045, tip_width=0.025)
SECOND_HAND = HandShape(length=0.85, tail=0.20, base_width=0.018, tip_width=0.008)


def posed_hand(shape: HandShape, angle_degrees: float) -> Points2:
    """Hand outline rotated to ``angle_degrees`` (clock convention)."""
    return rotate_points(shape.outline(), clock_deg_to_rad(angle_degrees))


def marker_segments(inner_minor: float = 0.90, inner_major: float = 0.82,
                    outer: float = 0.96) -> list[tuple[Points2, bool]]:
    """Sixty minute markers as (2x2 segment, is_hour_marker) pairs."""
    segments = []
    for i in range(60):
        major = i % 5 == 0
        inner = inner_major if major else inner_minor
        seg = np.stack([vec2(0.0, inner), vec2(0.0, outer)])
        segments.append((rotate_points(seg, clock_deg_to_rad(i * 6.0)), major))
    return segments


def numeral_positions(radius: float = 0.70) -> list[tuple[int, Points2]]:
    """Centre point of each hour numeral, 12 first."""
    out = []
    for hour in range(12):
        label = 12 if hour == 0 else hour
        out.append((label, rotate_points(vec2(0.0, radius)[None, :], clock_deg_to_rad(hour * 30.0))[0]))
    return out


ROMAN = ["XII", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X", "XI"]


def numeral_text(hour: int, roman: bool = False) -> str:
    if roman:
        return ROMAN[hour % 12]
    return str(hour)
