"""
Pixel surfaces.

A Surface is the host rendering target the controller paints on. The
RecordingSurface keeps every command it receives, which makes redraws
inspectable in tests and usable headless; views.image_surface provides the
QImage-backed implementation.
"""

from contextlib import contextmanager
from typing import ContextManager, List, Protocol, Set, Tuple

from models.raster import (
    ImageBuffer, StrokeStyle,
    ClearCommand, FillRectCommand, StrokeRectCommand, PutImageCommand,
)


class Surface(Protocol):
    """Operations the engine needs from a rendering surface."""

    def clear(self, width: int, height: int): ...

    def fill_rect(self, x: int, y: int, w: int, h: int, color: str): ...

    def stroke_rect(self, x: float, y: float, w: float, h: float, style: StrokeStyle): ...

    def put_image_buffer(self, buffer: ImageBuffer): ...

    def frame(self) -> ContextManager: ...


class RecordingSurface:
    """
    Surface that records draw commands instead of painting.

    ``commands`` holds everything since the last clear, so after a redraw
    it is exactly that redraw's command list.
    """

    def __init__(self):
        self.commands: List = []

    def clear(self, width: int, height: int):
        self.commands = [ClearCommand(width, height)]

    def fill_rect(self, x: int, y: int, w: int, h: int, color: str):
        self.commands.append(FillRectCommand(x, y, w, h, color))

    def stroke_rect(self, x: float, y: float, w: float, h: float, style: StrokeStyle):
        self.commands.append(StrokeRectCommand(x, y, w, h, style))

    def put_image_buffer(self, buffer: ImageBuffer):
        self.commands.append(PutImageCommand(buffer))

    @contextmanager
    def frame(self):
        yield self

    # Inspection helpers

    def fills(self) -> List[FillRectCommand]:
        return [c for c in self.commands if isinstance(c, FillRectCommand)]

    def outlines(self) -> List[StrokeRectCommand]:
        return [c for c in self.commands if isinstance(c, StrokeRectCommand)]

    def filled_origins(self, color: str = None) -> Set[Tuple[int, int]]:
        """Top-left corners of filled blocks, optionally for one color."""
        return {(c.x, c.y) for c in self.fills() if color is None or c.color == color}
