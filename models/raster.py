"""
Raster output data models.

The rasterizer produces PixelRect blocks; the controller turns them into
DrawCommand objects that any Surface can replay. ImageBuffer is the
whole-frame RGBA buffer used by the fractal renderer.
"""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class PixelRect:
    """A square (or rectangular) block of pixels with its top-left corner at (x, y)."""
    x: int
    y: int
    w: int = 1
    h: int = 1

    @property
    def origin(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class StrokeStyle:
    """Outline style for stroke_rect (selection highlight)."""
    color: str = "#ff0000"
    width: int = 1
    dash: Tuple[int, ...] = (5, 3)

    @property
    def dashed(self) -> bool:
        return len(self.dash) > 0


@dataclass
class ImageBuffer:
    """
    Row-major RGBA8888 pixel buffer.

    ``data`` holds ``width * height * 4`` bytes; untouched pixels are
    fully transparent black.
    """
    width: int
    height: int
    data: bytearray = field(default=None, repr=False)

    def __post_init__(self):
        if self.data is None:
            self.data = bytearray(self.width * self.height * 4)

    def offset(self, x: int, y: int) -> int:
        return (y * self.width + x) * 4

    def set_rgba(self, x: int, y: int, r: int, g: int, b: int, a: int = 255):
        i = self.offset(x, y)
        self.data[i:i + 4] = bytes((r, g, b, a))

    def get_rgba(self, x: int, y: int) -> Tuple[int, int, int, int]:
        i = self.offset(x, y)
        return tuple(self.data[i:i + 4])


# =============================================================================
# Draw commands
# =============================================================================

@dataclass(frozen=True)
class ClearCommand:
    """Clear the region (0, 0, width, height)."""
    width: int
    height: int

    def apply_to(self, surface):
        surface.clear(self.width, self.height)


@dataclass(frozen=True)
class FillRectCommand:
    """Fill a pixel block with a solid color."""
    x: int
    y: int
    w: int
    h: int
    color: str

    def apply_to(self, surface):
        surface.fill_rect(self.x, self.y, self.w, self.h, self.color)


@dataclass(frozen=True)
class StrokeRectCommand:
    """Outline a rectangle; coordinates may be fractional."""
    x: float
    y: float
    w: float
    h: float
    style: StrokeStyle = StrokeStyle()

    def apply_to(self, surface):
        surface.stroke_rect(self.x, self.y, self.w, self.h, self.style)


@dataclass(frozen=True)
class PutImageCommand:
    """Write a whole-frame image buffer at the origin."""
    buffer: ImageBuffer

    def apply_to(self, surface):
        surface.put_image_buffer(self.buffer)
