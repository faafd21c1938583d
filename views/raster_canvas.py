"""
Raster canvas widget.

Translates pointer and keyboard events into EditorController operations
and shows the controller's QImage surface.
"""

import logging
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPainter, QMouseEvent, QKeyEvent
from PyQt6.QtWidgets import QWidget

from models.session import EditorSession
from services.shape_store import EditorController
from views.image_surface import QImageSurface

# Setup logger for this module
logger = logging.getLogger(__name__)


class RasterCanvas(QWidget):
    """Fixed-size drawing area bound to one controller and session."""

    def __init__(self, controller: EditorController, session: EditorSession,
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.controller = controller
        self.session = session

        if not isinstance(controller.surface, QImageSurface):
            width, height = controller.canvas_size
            controller.surface = QImageSurface(width, height)
        self.surface: QImageSurface = controller.surface

        self.setFixedSize(self.surface.width, self.surface.height)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setCursor(Qt.CursorShape.CrossCursor)

        controller.redrawn.connect(self.update)
        controller.redraw(session)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.drawImage(0, 0, self.surface.image)
        painter.end()

    def mousePressEvent(self, event: QMouseEvent):
        """Start a gesture, select, or apply the active transform."""
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        pos = event.position()
        self.controller.pointer_pressed(self.session, pos.x(), pos.y())
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent):
        """Finish a drawing gesture."""
        if event.button() != Qt.MouseButton.LeftButton:
            super().mouseReleaseEvent(event)
            return
        pos = event.position()
        self.controller.pointer_released(self.session, pos.x(), pos.y())
        event.accept()

    def keyPressEvent(self, event: QKeyEvent):
        """Handle keyboard shortcuts."""
        if event.key() in (Qt.Key.Key_Delete, Qt.Key.Key_Backspace):
            self.controller.delete_selected(self.session)
            event.accept()
        else:
            super().keyPressEvent(event)

    def show_image_buffer(self, buffer):
        """Write a whole frame (e.g. the fractal) until the next redraw."""
        logger.debug(f"Showing {buffer.width}x{buffer.height} image buffer")
        self.surface.put_image_buffer(buffer)
        self.update()
