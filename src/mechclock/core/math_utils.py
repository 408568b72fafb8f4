"""NumPy-backed math utilities for 2D dial geometry.

Points are (N, 2) numpy arrays in dial space: origin at the pivot,
+x to the right, +y towards 12 o'clock.
"""

import numpy as np
from numpy.typing import NDArray

# Type aliases
Vec2 = NDArray[np.float64]
Mat2 = NDArray[np.float64]
Points2 = NDArray[np.float64]  # (N, 2)


def vec2(x: float = 0.0, y: float = 0.0) -> Vec2:
    return np.array([x, y], dtype=np.float64)


def mat2_rotation(angle_rad: float) -> Mat2:
    """Counter-clockwise rotation by ``angle_rad``."""
    c, s = np.cos(angle_rad), np.sin(angle_rad)
    return np.array([[c, -s], [s, c]], dtype=np.float64)


def rotate_points(points: Points2, angle_rad: float) -> Points2:
    pts = np.asarray(points, dtype=np.float64)
    return pts @ mat2_rotation(angle_rad).T


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def deg_to_rad(degrees: float) -> float:
    return degrees * np.pi / 180.0


def wrap_degrees(degrees: float) -> float:
    """Wrap an angle into [0, 360)."""
    return degrees % 360.0
