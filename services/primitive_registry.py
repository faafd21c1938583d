"""
Primitive capability registry.

Maps each PrimitiveKind to the functions that rasterize, hit-test and
transform it. Adding a new primitive kind means adding its model class and
one ``register()`` call here; the controller only talks to the registry.

Usage:
    handler = get_handler(primitive)
    rects = handler.rasterize(primitive)
    moved = handler.translate(primitive, 10, 10)
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from models.primitives import Primitive, PrimitiveKind
from models.raster import PixelRect
from services import rasterizer, hit_tester, affine


class EditorError(Exception):
    """Raised for misuse of the registry (duplicate or unknown kinds)."""
    pass


@dataclass(frozen=True)
class HitOptions:
    """Tolerances used by hit tests."""
    padding: float = hit_tester.DEFAULT_HIT_PADDING
    ellipse_tolerance: float = hit_tester.DEFAULT_ELLIPSE_TOLERANCE


@dataclass(frozen=True)
class PrimitiveHandler:
    """Per-kind capability table."""
    kind: PrimitiveKind
    rasterize: Callable[[Primitive], List[PixelRect]]
    hit_test: Callable[[Primitive, float, float, HitOptions], bool]
    translate: Callable[[Primitive, float, float], Primitive]
    scale: Callable[[Primitive, float], Primitive]
    rotate: Callable[[Primitive, Tuple[float, float], float], Primitive]


_handlers: Dict[PrimitiveKind, PrimitiveHandler] = {}


def register(handler: PrimitiveHandler):
    if handler.kind in _handlers:
        raise EditorError(f"Primitive kind already registered: {handler.kind.value}")
    _handlers[handler.kind] = handler


def get_handler(primitive_or_kind) -> PrimitiveHandler:
    """Look up the handler for a primitive or a PrimitiveKind."""
    kind = primitive_or_kind if isinstance(primitive_or_kind, PrimitiveKind) else primitive_or_kind.kind
    try:
        return _handlers[kind]
    except KeyError:
        raise EditorError(f"No handler registered for primitive kind: {kind}") from None


def registered_kinds() -> List[PrimitiveKind]:
    return list(_handlers.keys())


# =============================================================================
# Built-in kinds
# =============================================================================

register(PrimitiveHandler(
    kind=PrimitiveKind.LINE,
    rasterize=rasterizer.rasterize_line,
    hit_test=lambda p, x, y, opts: hit_tester.hit_test_line(p, x, y, opts.padding),
    translate=affine.translate_line,
    scale=affine.scale_line,
    rotate=affine.rotate_line,
))

register(PrimitiveHandler(
    kind=PrimitiveKind.CIRCLE,
    rasterize=rasterizer.rasterize_circle,
    hit_test=lambda p, x, y, opts: hit_tester.hit_test_circle(p, x, y, opts.padding),
    translate=affine.translate_center,
    scale=affine.scale_circle,
    rotate=affine.rotate_center,
))

register(PrimitiveHandler(
    kind=PrimitiveKind.ELLIPSE,
    rasterize=rasterizer.rasterize_ellipse,
    hit_test=lambda p, x, y, opts: hit_tester.hit_test_ellipse(p, x, y, opts.ellipse_tolerance),
    translate=affine.translate_center,
    scale=affine.scale_ellipse,
    rotate=affine.rotate_center,
))
