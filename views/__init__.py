"""Views package."""

from .image_surface import QImageSurface
from .raster_canvas import RasterCanvas
from .main_window import MainWindow

__all__ = [
    "QImageSurface",
    "RasterCanvas",
    "MainWindow",
]
