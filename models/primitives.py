"""
Vector primitive data models.

These models hold the geometry and appearance of every shape drawn on the
canvas. They carry no drawing logic; rasterization, hit-testing and
transforms live in the services package and dispatch on ``kind``.

Key concepts:
- LinePrimitive: segment between two float endpoints
- CirclePrimitive: center + radius, optional solid fill
- EllipsePrimitive: axis-aligned center + two radii, optional solid fill
- color vs base_color: the displayed color and the last explicitly chosen one
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple, Union


# =============================================================================
# Enumerations
# =============================================================================

class PrimitiveKind(Enum):
    """Kinds of primitives the engine can draw."""
    LINE = "line"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"


class FillMode(Enum):
    """Interior fill for closed primitives."""
    NONE = "none"
    SOLID = "solid"


class ToolMode(Enum):
    """What a pointer gesture on the canvas does."""
    NONE = "none"
    LINE = "line"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    SELECT = "select"

    @property
    def draws(self) -> bool:
        """True for modes that create a primitive on pointer-up."""
        return self in (ToolMode.LINE, ToolMode.CIRCLE, ToolMode.ELLIPSE)


class AffineMode(Enum):
    """Transform applied to the selection on pointer-down."""
    NONE = "none"
    MOVE = "move"
    SCALE = "scale"
    ROTATE = "rotate"


# =============================================================================
# Helper Functions
# =============================================================================

def _clamp_width(width) -> int:
    """Stroke widths are whole pixels, never below 1."""
    return max(1, int(width))


def _coerce_fill(fill) -> FillMode:
    if isinstance(fill, str):
        return FillMode(fill)
    return fill


# =============================================================================
# Data Classes
# =============================================================================

@dataclass
class LinePrimitive:
    """
    A straight segment.

    Attributes:
        x1, y1: Start point
        x2, y2: End point
        color: Displayed color ("#rrggbb")
        base_color: Last explicitly chosen color, None until first selected
        stroke_width: Side of the square block painted per pixel
    """
    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0
    color: str = "#000000"
    base_color: Optional[str] = None
    stroke_width: int = 1

    def __post_init__(self):
        self.stroke_width = _clamp_width(self.stroke_width)

    @property
    def kind(self) -> PrimitiveKind:
        return PrimitiveKind.LINE

    @property
    def fill_mode(self) -> FillMode:
        # Lines are never filled
        return FillMode.NONE

    @property
    def length(self) -> float:
        return ((self.x2 - self.x1) ** 2 + (self.y2 - self.y1) ** 2) ** 0.5

    def bounds(self) -> Tuple[float, float, float, float]:
        """Axis-aligned bounds as (min_x, min_y, max_x, max_y)."""
        return (
            min(self.x1, self.x2), min(self.y1, self.y2),
            max(self.x1, self.x2), max(self.y1, self.y2),
        )


@dataclass
class CirclePrimitive:
    """
    A circle around (x, y).

    Negative radii can come out of a degenerate drag; they are kept as-is
    here and clamped to zero by the rasterizer and bounds.
    """
    x: float = 0.0
    y: float = 0.0
    radius: float = 0.0
    color: str = "#000000"
    base_color: Optional[str] = None
    stroke_width: int = 1
    fill_mode: FillMode = FillMode.NONE

    def __post_init__(self):
        self.stroke_width = _clamp_width(self.stroke_width)
        self.fill_mode = _coerce_fill(self.fill_mode)

    @property
    def kind(self) -> PrimitiveKind:
        return PrimitiveKind.CIRCLE

    def bounds(self) -> Tuple[float, float, float, float]:
        r = max(0.0, self.radius)
        return (self.x - r, self.y - r, self.x + r, self.y + r)


@dataclass
class EllipsePrimitive:
    """An axis-aligned ellipse around (x, y) with radii rx, ry."""
    x: float = 0.0
    y: float = 0.0
    radius_x: float = 0.0
    radius_y: float = 0.0
    color: str = "#000000"
    base_color: Optional[str] = None
    stroke_width: int = 1
    fill_mode: FillMode = FillMode.NONE

    def __post_init__(self):
        self.stroke_width = _clamp_width(self.stroke_width)
        self.fill_mode = _coerce_fill(self.fill_mode)

    @property
    def kind(self) -> PrimitiveKind:
        return PrimitiveKind.ELLIPSE

    def bounds(self) -> Tuple[float, float, float, float]:
        rx = max(0.0, self.radius_x)
        ry = max(0.0, self.radius_y)
        return (self.x - rx, self.y - ry, self.x + rx, self.y + ry)


Primitive = Union[LinePrimitive, CirclePrimitive, EllipsePrimitive]


def is_fillable(primitive: Primitive) -> bool:
    """Whether the primitive has an interior that can be filled."""
    return primitive.kind in (PrimitiveKind.CIRCLE, PrimitiveKind.ELLIPSE)


def with_color(primitive: Primitive, color: str, base_color: Optional[str] = None) -> Primitive:
    """
    Return a copy of ``primitive`` with a new displayed color.

    When ``base_color`` is omitted the copy keeps its current base color.
    """
    if base_color is None:
        base_color = primitive.base_color
    return replace(primitive, color=color, base_color=base_color)


def with_fill_mode(primitive: Primitive, fill_mode: FillMode) -> Primitive:
    """Return a copy with a new fill mode; lines are returned unchanged."""
    if not is_fillable(primitive):
        return primitive
    return replace(primitive, fill_mode=_coerce_fill(fill_mode))
