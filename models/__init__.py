"""
Models package.

This package contains all data models for the raster shape editor.

- Primitives (LinePrimitive, CirclePrimitive, EllipsePrimitive) and modes
- Raster output (PixelRect, StrokeStyle, ImageBuffer, draw commands)
- Editor session (EditorSession, SelectionSync)
"""

from .primitives import (
    PrimitiveKind,
    FillMode,
    ToolMode,
    AffineMode,
    LinePrimitive,
    CirclePrimitive,
    EllipsePrimitive,
    Primitive,
    is_fillable,
    with_color,
    with_fill_mode,
)
from .raster import (
    PixelRect,
    StrokeStyle,
    ImageBuffer,
    ClearCommand,
    FillRectCommand,
    StrokeRectCommand,
    PutImageCommand,
)
from .session import EditorSession, SelectionSync

__all__ = [
    "PrimitiveKind",
    "FillMode",
    "ToolMode",
    "AffineMode",
    "LinePrimitive",
    "CirclePrimitive",
    "EllipsePrimitive",
    "Primitive",
    "is_fillable",
    "with_color",
    "with_fill_mode",
    "PixelRect",
    "StrokeStyle",
    "ImageBuffer",
    "ClearCommand",
    "FillRectCommand",
    "StrokeRectCommand",
    "PutImageCommand",
    "EditorSession",
    "SelectionSync",
]
