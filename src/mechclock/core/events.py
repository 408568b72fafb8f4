"""EventBus for decoupled publish/subscribe communication between a clock
controller and whatever draws or logs it."""

from enum import Enum, auto
from typing import Any, Callable
from collections import defaultdict


class EventType(Enum):
    # Controller lifecycle
    CLOCK_STARTED = auto()
    CLOCK_STOPPED = auto()

    # Frame events
    HANDS_UPDATED = auto()    # data: angles (HandAngles)
    TICK = auto()             # data: second (int); every whole-second change
    PHASE_CHANGED = auto()    # data: previous (AnimationPhase), phase (AnimationPhase)


class EventBus:
    """Publish/subscribe hub for one clock.

    A :class:`~mechclock.coordination.controller.ClockMotionController`
    publishes, within a single accepted frame and in this order:

    - ``TICK(second=...)`` when the whole second changed, including ticks
      that arrive while the hand is still in OVERSHOOT,
    - ``PHASE_CHANGED(previous=..., phase=...)`` only when the second-hand
      phase actually differs from the previous frame's,
    - ``HANDS_UPDATED(angles=...)`` once per accepted frame.

    ``CLOCK_STARTED`` and ``CLOCK_STOPPED`` carry no data.

    Handlers run synchronously in subscription order on the publishing
    thread.  A handler may unsubscribe itself (or others) while an event is
    being published; the change takes effect from the next publish.
    """

    def __init__(self):
        self._handlers: dict[EventType, list[Callable]] = defaultdict(list)

    def subscribe(self, event_type: EventType, handler: Callable) -> None:
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: EventType, handler: Callable) -> None:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event_type: EventType, **data: Any) -> None:
        for handler in list(self._handlers.get(event_type, ())):
            handler(**data)

    def clear(self) -> None:
        self._handlers.clear()
