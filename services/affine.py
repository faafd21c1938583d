"""
Affine Transformer.

Pure transforms returning a new primitive value:
- translate: shift every position-defining coordinate
- scale: grow about the primitive's own centroid
- rotate: turn about an external pivot (circles/ellipses move their center
  only; radii are untouched)
"""

import math
from dataclasses import replace
from typing import Tuple

from models.primitives import LinePrimitive, CirclePrimitive, EllipsePrimitive

Point = Tuple[float, float]

DEFAULT_MOVE_OFFSET = (10.0, 10.0)
DEFAULT_SCALE_FACTOR = 1.2
DEFAULT_ROTATE_DEGREES = 15.0


def rotate_point(x: float, y: float, pivot: Point, angle_deg: float) -> Point:
    """Rotate (x, y) by ``angle_deg`` degrees about ``pivot``."""
    px, py = pivot
    angle = math.radians(angle_deg)
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    dx = x - px
    dy = y - py
    return (px + dx * cos_a - dy * sin_a, py + dx * sin_a + dy * cos_a)


# =============================================================================
# Line
# =============================================================================

def translate_line(line: LinePrimitive, dx: float, dy: float) -> LinePrimitive:
    return replace(line, x1=line.x1 + dx, y1=line.y1 + dy,
                   x2=line.x2 + dx, y2=line.y2 + dy)


def scale_line(line: LinePrimitive, factor: float) -> LinePrimitive:
    """Scale both endpoints away from the midpoint."""
    cx = (line.x1 + line.x2) / 2
    cy = (line.y1 + line.y2) / 2
    return replace(
        line,
        x1=cx + (line.x1 - cx) * factor, y1=cy + (line.y1 - cy) * factor,
        x2=cx + (line.x2 - cx) * factor, y2=cy + (line.y2 - cy) * factor,
    )


def rotate_line(line: LinePrimitive, pivot: Point, angle_deg: float) -> LinePrimitive:
    x1, y1 = rotate_point(line.x1, line.y1, pivot, angle_deg)
    x2, y2 = rotate_point(line.x2, line.y2, pivot, angle_deg)
    return replace(line, x1=x1, y1=y1, x2=x2, y2=y2)


# =============================================================================
# Circle / Ellipse
# =============================================================================

def translate_center(shape, dx: float, dy: float):
    """Translate a circle or ellipse."""
    return replace(shape, x=shape.x + dx, y=shape.y + dy)


def rotate_center(shape, pivot: Point, angle_deg: float):
    """Rotate the center of a circle or ellipse about ``pivot``."""
    x, y = rotate_point(shape.x, shape.y, pivot, angle_deg)
    return replace(shape, x=x, y=y)


def scale_circle(circle: CirclePrimitive, factor: float) -> CirclePrimitive:
    return replace(circle, radius=circle.radius * factor)


def scale_ellipse(ellipse: EllipsePrimitive, factor: float) -> EllipsePrimitive:
    return replace(ellipse, radius_x=ellipse.radius_x * factor,
                   radius_y=ellipse.radius_y * factor)
