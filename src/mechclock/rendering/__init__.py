"""Rendering subsystem -- flat QPainter dial with PySide6 integration."""
