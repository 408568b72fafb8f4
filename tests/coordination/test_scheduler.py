"""Tests for the manual frame scheduler."""

from mechclock.coordination.scheduler import ManualFrameScheduler


def test_fire_runs_pending_once():
    sched = ManualFrameScheduler()
    seen = []
    sched.request_frame(seen.append)
    assert sched.pending == 1
    assert sched.fire(16.0) == 1
    assert seen == [16.0]
    assert sched.fire(32.0) == 0


def test_cancel():
    sched = ManualFrameScheduler()
    seen = []
    handle = sched.request_frame(seen.append)
    sched.cancel_frame(handle)
    sched.fire(1.0)
    assert seen == []
    # Cancelling twice is harmless
    sched.cancel_frame(handle)


def test_rerequest_waits_for_next_fire():
    sched = ManualFrameScheduler()
    seen = []

    def cb(t):
        seen.append(t)
        sched.request_frame(cb)

    sched.request_frame(cb)
    sched.run([1.0, 2.0, 3.0])
    assert seen == [1.0, 2.0, 3.0]
    assert sched.pending == 1


def test_handles_are_unique():
    sched = ManualFrameScheduler()
    a = sched.request_frame(lambda t: None)
    b = sched.request_frame(lambda t: None)
    assert a != b


def test_cancel_within_same_fire():
    sched = ManualFrameScheduler()
    seen = []
    handles = {}

    def first(t):
        seen.append("first")
        sched.cancel_frame(handles["second"])

    handles["first"] = sched.request_frame(first)
    handles["second"] = sched.request_frame(lambda t: seen.append("second"))
    assert sched.fire(5.0) == 1
    assert seen == ["first"]
    assert sched.fire(10.0) == 0
