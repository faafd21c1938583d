"""Services package."""

from .color_adjuster import (
    apply_lightness_brightness,
    hex_to_rgb,
    rgb_to_hex,
    normalize_hex,
)
from .rasterizer import (
    rasterize_line,
    rasterize_circle,
    rasterize_ellipse,
    bresenham_points,
    round_px,
)
from .hit_tester import (
    hit_test_line,
    hit_test_circle,
    hit_test_ellipse,
    distance_to_segment,
)
from .affine import rotate_point
from .primitive_registry import (
    EditorError,
    HitOptions,
    PrimitiveHandler,
    get_handler,
    register,
)
from .fractal import MandelbrotParams, render_mandelbrot_split
from .surface import Surface, RecordingSurface
from .settings_manager import (
    SettingsManager,
    AppSettings,
    CanvasSettings,
    DrawingDefaults,
    AffineSettings,
    SelectionSettings,
    FractalSettings,
)
from .shape_store import ShapeStore, EditorController, primitive_from_gesture

__all__ = [
    "apply_lightness_brightness",
    "hex_to_rgb",
    "rgb_to_hex",
    "normalize_hex",
    "rasterize_line",
    "rasterize_circle",
    "rasterize_ellipse",
    "bresenham_points",
    "round_px",
    "hit_test_line",
    "hit_test_circle",
    "hit_test_ellipse",
    "distance_to_segment",
    "rotate_point",
    "EditorError",
    "HitOptions",
    "PrimitiveHandler",
    "get_handler",
    "register",
    "MandelbrotParams",
    "render_mandelbrot_split",
    "Surface",
    "RecordingSurface",
    "SettingsManager",
    "AppSettings",
    "CanvasSettings",
    "DrawingDefaults",
    "AffineSettings",
    "SelectionSettings",
    "FractalSettings",
    "ShapeStore",
    "EditorController",
    "primitive_from_gesture",
]
