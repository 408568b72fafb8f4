"""PySide6 widget that paints an analogue dial from HandAngles."""

import logging
import traceback
from typing import Optional

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QPainter, QPen, QPolygonF
from PySide6.QtWidgets import QWidget

from mechclock.constants import DEFAULT_WIDGET_SIZE
from mechclock.core.config_loader import ClockAppearance
from mechclock.core.events import EventBus, EventType
from mechclock.core.math_utils import Points2
from mechclock.core.state import HandAngles
from mechclock.rendering.hand_geometry import (
    HOUR_HAND,
    MINUTE_HAND,
    SECOND_HAND,
    marker_segments,
    numeral_positions,
    numeral_text,
    posed_hand,
)

logger = logging.getLogger(__name__)


class AnalogueClockWidget(QWidget):
    """Flat analogue clock face.

    Subscribe it to an :class:`EventBus` with :meth:`attach` (or call
    :meth:`set_angles` directly); it repaints on every HANDS_UPDATED.

    Parameters
    ----------
    appearance : ClockAppearance, optional
        Colours and dial decoration.
    parent : QWidget, optional
        Parent widget.
    """

    def __init__(self, appearance: Optional[ClockAppearance] = None, parent=None) -> None:
        super().__init__(parent)
        self.appearance = appearance or ClockAppearance()
        self.angles: Optional[HandAngles] = None
        self._bus: Optional[EventBus] = None

        # Static dial geometry, computed once
        self._markers = marker_segments()
        self._numerals = numeral_positions()

        self.setMinimumSize(120, 120)
        self.resize(DEFAULT_WIDGET_SIZE, DEFAULT_WIDGET_SIZE)

    # ------------------------------------------------------------------
    # Event wiring
    # ------------------------------------------------------------------

    def attach(self, bus: EventBus) -> None:
        self.detach()
        self._bus = bus
        bus.subscribe(EventType.HANDS_UPDATED, self._on_hands_updated)

    def detach(self) -> None:
        if self._bus is not None:
            self._bus.unsubscribe(EventType.HANDS_UPDATED, self._on_hands_updated)
            self._bus = None

    def _on_hands_updated(self, angles: HandAngles) -> None:
        self.set_angles(angles)

    def set_angles(self, angles: HandAngles) -> None:
        self.angles = angles
        self.update()

    # ------------------------------------------------------------------
    # Painting
    # ------------------------------------------------------------------

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            radius = min(self.width(), self.height()) / 2 * 0.95
            centre = QPointF(self.width() / 2, self.height() / 2)
            self._draw_face(painter, centre, radius)
            if self.angles is not None:
                self._draw_hands(painter, centre, radius, self.angles)
        except Exception:
            logger.error("paintEvent failed:\n%s", traceback.format_exc())
        finally:
            painter.end()

    def _to_widget(self, centre: QPointF, radius: float, x: float, y: float) -> QPointF:
        # Dial space is +y up, widget space is +y down
        return QPointF(centre.x() + x * radius, centre.y() - y * radius)

    def _polygon(self, centre: QPointF, radius: float, pts: Points2) -> QPolygonF:
        return QPolygonF([self._to_widget(centre, radius, x, y) for x, y in pts])

    def _draw_face(self, painter: QPainter, centre: QPointF, radius: float) -> None:
        app = self.appearance
        painter.setPen(QPen(QColor(app.marker_color), max(1.0, radius * 0.02)))
        painter.setBrush(QBrush(QColor(app.face_color)))
        painter.drawEllipse(centre, radius, radius)

        for seg, major in self._markers:
            width = radius * (0.02 if major else 0.008)
            painter.setPen(QPen(QColor(app.marker_color), max(1.0, width)))
            a = self._to_widget(centre, radius, *seg[0])
            b = self._to_widget(centre, radius, *seg[1])
            painter.drawLine(a, b)

        font = QFont(app.font_family)
        font.setPixelSize(max(8, int(radius * 0.14)))
        painter.setFont(font)
        painter.setPen(QColor(app.text_color))
        box = radius * 0.3
        for hour, pos in self._numerals:
            p = self._to_widget(centre, radius, *pos)
            rect = QRectF(p.x() - box / 2, p.y() - box / 2, box, box)
            painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, numeral_text(hour, app.roman_numerals))

        if app.brand:
            font.setPixelSize(max(6, int(radius * 0.07)))
            painter.setFont(font)
            p = self._to_widget(centre, radius, 0.0, 0.35)
            rect = QRectF(p.x() - radius / 2, p.y() - box / 4, radius, box / 2)
            painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, app.brand)

    def _draw_hands(self, painter: QPainter, centre: QPointF, radius: float,
                    angles: HandAngles) -> None:
        app = self.appearance
        painter.setPen(Qt.PenStyle.NoPen)
        for shape, angle, colour in (
            (HOUR_HAND, angles.hour_angle_degrees, app.hour_hand_color),
            (MINUTE_HAND, angles.minute_angle_degrees, app.minute_hand_color),
            (SECOND_HAND, angles.second_hand_visual_angle_degrees, app.second_hand_color),
        ):
            painter.setBrush(QBrush(QColor(colour)))
            painter.drawPolygon(self._polygon(centre, radius, posed_hand(shape, angle)))

        # Centre pin
        painter.setBrush(QBrush(QColor(app.second_hand_color)))
        pin = radius * 0.035
        painter.drawEllipse(centre, pin, pin)
