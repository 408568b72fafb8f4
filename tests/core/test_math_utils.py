"""Tests for math_utils module."""

import numpy as np
import pytest

from mechclock.core.math_utils import (
    vec2, mat2_rotation, rotate_points, clamp, deg_to_rad, wrap_degrees,
)


def test_vec2():
    v = vec2(1, 2)
    assert v.shape == (2,)
    np.testing.assert_array_equal(v, [1, 2])


def test_mat2_rotation_quarter_turn():
    m = mat2_rotation(np.pi / 2)
    np.testing.assert_array_almost_equal(m @ vec2(1, 0), [0, 1])


def test_rotate_points_batch():
    pts = np.array([[1.0, 0.0], [0.0, 2.0]])
    out = rotate_points(pts, np.pi)
    np.testing.assert_array_almost_equal(out, [[-1, 0], [0, -2]])


def test_rotate_points_keeps_length():
    pts = np.array([[3.0, 4.0]])
    out = rotate_points(pts, 0.7)
    assert np.linalg.norm(out[0]) == pytest.approx(5.0)


def test_clamp():
    assert clamp(1.5, 0.0, 1.0) == 1.0
    assert clamp(-0.5, 0.0, 1.0) == 0.0
    assert clamp(0.25, 0.0, 1.0) == 0.25


def test_deg_to_rad():
    assert deg_to_rad(180) == pytest.approx(np.pi)


def test_wrap_degrees():
    assert wrap_degrees(361.5) == pytest.approx(1.5)
    assert wrap_degrees(-1.5) == pytest.approx(358.5)
    assert wrap_degrees(0.0) == 0.0
