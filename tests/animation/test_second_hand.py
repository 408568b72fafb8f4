"""Tests for the second-hand tick phases."""

import logging

import pytest

from mechclock.animation.second_hand import (
    SecondHandPhaseMachine, advance, base_angle, is_tick, ms_until_tick,
)
from mechclock.core.state import AnimationPhase, ClockTime, PhysicsConfig, SecondHandState


def _t(seconds, ms=0):
    return ClockTime(10, 20, seconds, ms)


def _settled_at(seconds):
    """Machine that has ticked onto ``seconds`` and settled."""
    m = SecondHandPhaseMachine()
    m.advance(_t(seconds, 0))
    m.advance(_t(seconds, 20))
    m.advance(_t(seconds, 40))
    assert m.phase is AnimationPhase.SETTLED
    return m


def test_base_angle():
    assert base_angle(0) == 0.0
    assert base_angle(15) == 90.0
    assert base_angle(45) == 270.0


def test_ms_until_tick():
    assert ms_until_tick(_t(0, 0)) == 1000
    assert ms_until_tick(_t(0, 925)) == 75


def test_first_sample_is_a_tick():
    state = SecondHandState()
    assert is_tick(_t(0), state)


@pytest.mark.parametrize("s", range(60))
def test_tick_overshoots(s):
    m = SecondHandPhaseMachine()
    m.advance(_t(s, 3))
    assert m.phase is AnimationPhase.OVERSHOOT
    assert m.visual_angle_degrees == (s / 60 * 360) + 2


def test_overshoot_recoil_settle_sequence():
    m = SecondHandPhaseMachine()
    m.advance(_t(15, 0))
    assert (m.phase, m.visual_angle_degrees) == (AnimationPhase.OVERSHOOT, 92.0)
    m.advance(_t(15, 20))
    assert (m.phase, m.visual_angle_degrees) == (AnimationPhase.RECOIL, 88.5)
    m.advance(_t(15, 40))
    assert (m.phase, m.visual_angle_degrees) == (AnimationPhase.SETTLED, 90.0)


def test_settled_does_not_drift():
    m = _settled_at(15)
    for ms in range(60, 850, 20):
        m.advance(_t(15, ms))
        assert m.phase is AnimationPhase.SETTLED
        assert m.visual_angle_degrees == 90.0


def test_creep_entry_computes_same_frame():
    m = _settled_at(15)
    m.advance(_t(15, 925))  # 75 ms until tick
    assert m.phase is AnimationPhase.CREEPING
    assert m.visual_angle_degrees == pytest.approx(91.0)


def test_creep_boundary_is_inclusive():
    m = _settled_at(15)
    m.advance(_t(15, 850))  # exactly creep_duration_ms left
    assert m.phase is AnimationPhase.CREEPING
    assert m.visual_angle_degrees == 90.0


def test_creep_progress_non_decreasing():
    m = _settled_at(15)
    angles = []
    for ms in range(851, 1000, 7):
        m.advance(_t(15, ms))
        assert m.phase is AnimationPhase.CREEPING
        angles.append(m.visual_angle_degrees)
    assert angles == sorted(angles)
    assert angles[-1] <= 92.0


def test_creep_reverts_when_window_left():
    m = _settled_at(15)
    m.advance(_t(15, 900))
    assert m.phase is AnimationPhase.CREEPING
    # Sample from earlier in the second (clock stepped back)
    m.advance(_t(15, 500))
    assert m.phase is AnimationPhase.SETTLED
    assert m.visual_angle_degrees == 90.0


def test_tick_after_creep_jumps_to_overshoot():
    m = _settled_at(15)
    m.advance(_t(15, 990))
    m.advance(_t(16, 5))
    assert m.phase is AnimationPhase.OVERSHOOT
    assert m.state.target_base_angle_degrees == pytest.approx(96.0)
    assert m.visual_angle_degrees == pytest.approx(98.0)


def test_wraps_from_59_to_0():
    m = _settled_at(59)
    m.advance(_t(0, 10))
    assert m.phase is AnimationPhase.OVERSHOOT
    assert m.visual_angle_degrees == 2.0
    m.advance(_t(0, 30))
    assert m.visual_angle_degrees == -1.5


def test_multi_second_jump_is_one_tick(caplog):
    m = _settled_at(15)
    with caplog.at_level(logging.DEBUG, logger="mechclock.animation.second_hand"):
        m.advance(_t(42, 0))
    assert m.phase is AnimationPhase.OVERSHOOT
    assert m.state.last_observed_second == 42
    assert "jumped" in caplog.text


def test_unknown_phase_resets_to_settled(caplog):
    m = _settled_at(15)
    m.state.phase = "WOBBLING"
    m.state.target_base_angle_degrees = 12.0
    with caplog.at_level(logging.ERROR, logger="mechclock.animation.second_hand"):
        m.advance(_t(15, 100))
    assert m.phase is AnimationPhase.SETTLED
    assert m.visual_angle_degrees == 90.0
    assert "Illegal" in caplog.text


def test_each_call_advances_once():
    m = SecondHandPhaseMachine()
    same = _t(30, 0)
    m.advance(same)
    assert m.phase is AnimationPhase.OVERSHOOT
    m.advance(same)
    assert m.phase is AnimationPhase.RECOIL


def test_visual_angle_stays_in_bounds():
    cfg = PhysicsConfig()
    state = SecondHandState()
    for s in (7, 8):
        for ms in range(0, 1000, 13):
            advance(_t(s, ms), cfg, state)
            lo, hi = state.visual_bounds(cfg)
            assert lo <= state.visual_angle_degrees <= hi


def test_advance_returns_same_state():
    state = SecondHandState()
    assert advance(_t(1), PhysicsConfig(), state) is state


def test_custom_physics():
    cfg = PhysicsConfig(creep_duration_ms=200, creep_angle_degrees=4,
                        overshoot_degrees=3, recoil_degrees=-1)
    m = SecondHandPhaseMachine(cfg)
    m.advance(_t(0, 0))
    assert m.visual_angle_degrees == 3.0
    m.advance(_t(0, 10))
    assert m.visual_angle_degrees == -1.0
    m.advance(_t(0, 20))
    m.advance(_t(0, 900))  # 100 of 200 ms left
    assert m.visual_angle_degrees == pytest.approx(2.0)


def test_reset():
    m = _settled_at(15)
    m.reset()
    assert m.state == SecondHandState()
    m.advance(_t(15, 0))
    assert m.phase is AnimationPhase.OVERSHOOT
