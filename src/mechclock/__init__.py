"""MechClock: analogue clock hands with a mechanical second-hand tick."""

__version__ = "0.1.0"
