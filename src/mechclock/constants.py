"""Shared constants and defaults for MechClock."""

# Second-hand physics defaults
CREEP_DURATION_MS = 150.0
CREEP_ANGLE_DEGREES = 2.0
OVERSHOOT_DEGREES = 2.0
RECOIL_DEGREES = -1.5

# Frame gating
MAX_RATE_HZ = 50.0

# Scheduler interval; well above MAX_RATE_HZ, like a high-refresh display
DEFAULT_FRAME_INTERVAL_MS = 8

# Sentinels
NO_SECOND_OBSERVED = -1
NO_FRAME_ACCEPTED = -1.0

# Dial geometry
DEGREES_PER_MINUTE = 360.0 / 60.0  # minute hand
DEGREES_PER_HOUR = 360.0 / 12.0    # hour hand

# Appearance defaults (colours as hex strings)
TEXT_COLOR = "#080808"
MARKER_COLOR = "#202020"
FACE_COLOR = "#FFFFFF"
SECOND_HAND_COLOR = "#BB0000"
MINUTE_HAND_COLOR = "#101010"
HOUR_HAND_COLOR = "#101010"
FONT_FAMILY = "Work Sans"

# Widget defaults
DEFAULT_WIDGET_SIZE = 360
