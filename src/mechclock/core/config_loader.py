"""JSON config file loading utilities.

Config files look like::

    {
        "secondHandPhysics": {"creepDurationMs": 120, "recoilDegrees": -1.0},
        "maxRateHz": 60,
        "sweep": "continuous",
        "appearance": {"faceColor": "#F4F0E6", "romanNumerals": true}
    }

Both the camelCase keys above and their snake_case forms are accepted.
Missing keys fall back to the defaults in :mod:`mechclock.constants`.
"""

import json
import logging
import math
import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

from mechclock.constants import (
    FACE_COLOR,
    FONT_FAMILY,
    HOUR_HAND_COLOR,
    MARKER_COLOR,
    MAX_RATE_HZ,
    MINUTE_HAND_COLOR,
    SECOND_HAND_COLOR,
    TEXT_COLOR,
)
from mechclock.core.state import PhysicsConfig

logger = logging.getLogger(__name__)

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def _snake(key: str) -> str:
    return _CAMEL_RE.sub("_", key).lower()


def _require_object(d: Any, what: str) -> dict[str, Any]:
    if not isinstance(d, dict):
        raise ValueError(f"{what} must be a JSON object, got {type(d).__name__}")
    return d


def _normalise_keys(d: dict[str, Any]) -> dict[str, Any]:
    return {_snake(k): v for k, v in d.items()}


@dataclass
class ClockAppearance:
    """Colours and dial decoration for the Qt front-end."""
    text_color: str = TEXT_COLOR
    marker_color: str = MARKER_COLOR
    face_color: str = FACE_COLOR
    second_hand_color: str = SECOND_HAND_COLOR
    minute_hand_color: str = MINUTE_HAND_COLOR
    hour_hand_color: str = HOUR_HAND_COLOR
    font_family: str = FONT_FAMILY
    roman_numerals: bool = False
    brand: Optional[str] = None  # static text between the pin and the 12


@dataclass
class ClockConfig:
    """Everything one clock instance is configured with."""
    physics: PhysicsConfig = field(default_factory=PhysicsConfig)
    max_rate_hz: float = MAX_RATE_HZ
    sweep: str = "stepped"
    appearance: ClockAppearance = field(default_factory=ClockAppearance)


def load_json(path: Path) -> Any:
    """Load and return parsed JSON from a file."""
    with open(path) as f:
        return json.load(f)


def physics_config_from_dict(d: Optional[dict[str, Any]]) -> PhysicsConfig:
    """Build a PhysicsConfig, overriding only the keys present in ``d``."""
    if d is None:
        return PhysicsConfig()
    _require_object(d, "secondHandPhysics")
    known = {f.name for f in fields(PhysicsConfig)}
    overrides = {}
    for key, value in _normalise_keys(d).items():
        if key in known:
            overrides[key] = value
        else:
            logger.warning("Ignoring unknown second-hand physics option %r", key)
    return PhysicsConfig(**overrides)


def appearance_from_dict(d: Optional[dict[str, Any]]) -> ClockAppearance:
    if d is None:
        return ClockAppearance()
    _require_object(d, "appearance")
    known = {f.name for f in fields(ClockAppearance)}
    overrides = {}
    for key, value in _normalise_keys(d).items():
        if key in known:
            overrides[key] = value
        else:
            logger.warning("Ignoring unknown appearance option %r", key)
    return ClockAppearance(**overrides)


def clock_config_from_dict(d: Optional[dict[str, Any]]) -> ClockConfig:
    if d is None:
        return ClockConfig()
    _require_object(d, "Clock config")
    opts = _normalise_keys(d)

    max_rate_hz = opts.get("max_rate_hz", MAX_RATE_HZ)
    if isinstance(max_rate_hz, bool) or not isinstance(max_rate_hz, (int, float)) \
            or not math.isfinite(max_rate_hz) or max_rate_hz <= 0:
        raise ValueError(f"max_rate_hz must be a positive number, got {max_rate_hz!r}")

    sweep = str(opts.get("sweep", "stepped")).lower()
    if sweep not in ("stepped", "continuous"):
        raise ValueError(f"sweep must be 'stepped' or 'continuous', got {sweep!r}")

    return ClockConfig(
        physics=physics_config_from_dict(opts.get("second_hand_physics")),
        max_rate_hz=float(max_rate_hz),
        sweep=sweep,
        appearance=appearance_from_dict(opts.get("appearance")),
    )


def load_clock_config(path: Path) -> ClockConfig:
    """Load a clock config file; see the module docstring for the format."""
    config = clock_config_from_dict(load_json(path))
    logger.info("Loaded clock config from %s", path)
    return config
