"""
QImage-backed pixel surface.

Implements the Surface operations on an off-screen QImage so the canvas
widget can blit the finished frame in its paintEvent.
"""

from contextlib import contextmanager
from typing import Optional

from PyQt6.QtCore import Qt, QRectF
from PyQt6.QtGui import QImage, QPainter, QColor, QPen

from models.raster import ImageBuffer, StrokeStyle


class QImageSurface:
    """Paints draw commands onto a QImage."""

    def __init__(self, width: int, height: int, background: str = "#ffffff"):
        self.background = QColor(background)
        self._frame_painter: Optional[QPainter] = None
        self.image = QImage(width, height, QImage.Format.Format_ARGB32)
        self.image.fill(self.background)

    @property
    def width(self) -> int:
        return self.image.width()

    @property
    def height(self) -> int:
        return self.image.height()

    @contextmanager
    def frame(self):
        """Share one QPainter across all draw calls of a redraw."""
        if self._frame_painter is not None:
            yield self
            return
        self._frame_painter = QPainter(self.image)
        try:
            yield self
        finally:
            self._frame_painter.end()
            self._frame_painter = None

    @contextmanager
    def _painter(self):
        if self._frame_painter is not None:
            yield self._frame_painter
            return
        painter = QPainter(self.image)
        try:
            yield painter
        finally:
            painter.end()

    def clear(self, width: int, height: int):
        with self._painter() as p:
            p.fillRect(0, 0, width, height, self.background)

    def fill_rect(self, x: int, y: int, w: int, h: int, color: str):
        with self._painter() as p:
            p.fillRect(x, y, w, h, QColor(color))

    def stroke_rect(self, x: float, y: float, w: float, h: float, style: StrokeStyle):
        pen = QPen(QColor(style.color), style.width)
        if style.dashed:
            # Qt dash lengths are in units of the pen width
            pen.setDashPattern([d / max(1, style.width) for d in style.dash])
        with self._painter() as p:
            p.save()
            p.setPen(pen)
            p.setBrush(Qt.BrushStyle.NoBrush)
            p.drawRect(QRectF(x, y, w, h))
            p.restore()

    def put_image_buffer(self, buffer: ImageBuffer):
        frame = QImage(
            bytes(buffer.data), buffer.width, buffer.height,
            buffer.width * 4, QImage.Format.Format_RGBA8888,
        ).copy()
        with self._painter() as p:
            p.save()
            p.setCompositionMode(QPainter.CompositionMode.CompositionMode_Source)
            p.drawImage(0, 0, frame)
            p.restore()

    def pixel_color(self, x: int, y: int) -> str:
        """Color at (x, y) as "#rrggbb"."""
        return self.image.pixelColor(x, y).name()
