"""MechClock application entry point.

Wires together the clock controllers, their frame schedulers and the Qt dial
widgets.  Each clock gets its own controller and event bus.
"""

import argparse
import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication, QHBoxLayout, QWidget

from mechclock.core.config_loader import ClockConfig, load_clock_config
from mechclock.core.events import EventBus
from mechclock.coordination.controller import ClockMotionController, HandSweep
from mechclock.coordination.scheduler import QtFrameScheduler
from mechclock.rendering.clock_widget import AnalogueClockWidget

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mechclock",
        description="Analogue clock with a mechanical second-hand tick.",
    )
    parser.add_argument("--config", type=Path, help="JSON clock config file")
    parser.add_argument("--max-rate", type=float, help="maximum frames per second")
    parser.add_argument("--sweep", choices=[s.value for s in HandSweep],
                        help="hour/minute hand recompute policy")
    parser.add_argument("--clocks", type=int, default=1, help="number of clocks to show")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def resolve_config(args: argparse.Namespace) -> ClockConfig:
    """Config file first, then command-line overrides."""
    config = load_clock_config(args.config) if args.config else ClockConfig()
    if args.max_rate is not None:
        if args.max_rate <= 0:
            raise ValueError(f"--max-rate must be positive, got {args.max_rate}")
        config.max_rate_hz = args.max_rate
    if args.sweep is not None:
        config.sweep = args.sweep
    return config


def create_clock(config: ClockConfig, parent=None) -> tuple[AnalogueClockWidget, ClockMotionController]:
    """One dial widget and the controller driving it."""
    bus = EventBus()
    widget = AnalogueClockWidget(config.appearance, parent)
    widget.attach(bus)
    controller = ClockMotionController(
        scheduler=QtFrameScheduler(parent=widget),
        physics=config.physics,
        max_rate_hz=config.max_rate_hz,
        event_bus=bus,
        sweep=HandSweep(config.sweep),
    )
    return widget, controller


def main(argv=None):
    """Launch the MechClock application."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(name)s: %(message)s")

    try:
        config = resolve_config(args)
    except (OSError, ValueError) as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    app = QApplication(sys.argv[:1])

    window = QWidget()
    window.setWindowTitle("MechClock")
    layout = QHBoxLayout(window)

    controllers = []
    for _ in range(max(1, args.clocks)):
        widget, controller = create_clock(config, window)
        layout.addWidget(widget)
        controllers.append(controller)

    def _shutdown():
        for c in controllers:
            c.stop()

    app.aboutToQuit.connect(_shutdown)

    window.show()
    for c in controllers:
        c.start()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
