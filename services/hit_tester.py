"""
Hit Tester.

Decides whether a pointer position lies on a primitive's boundary.
Lines and circles accept points within ``stroke_width + padding`` pixels
of the boundary; ellipses use a fixed tolerance on the normalized
implicit equation regardless of stroke width.
"""

import math

from models.primitives import LinePrimitive, CirclePrimitive, EllipsePrimitive

DEFAULT_HIT_PADDING = 2
DEFAULT_ELLIPSE_TOLERANCE = 0.2


def stroke_tolerance(stroke_width: int, padding: float = DEFAULT_HIT_PADDING) -> float:
    """Pixel tolerance for stroke-based hit tests."""
    return (stroke_width or 1) + padding


def distance_to_segment(px: float, py: float,
                        x1: float, y1: float, x2: float, y2: float) -> float:
    """
    Distance from (px, py) to the segment (x1, y1)-(x2, y2).

    A zero-length segment is treated as a point.
    """
    dx = x2 - x1
    dy = y2 - y1
    length2 = dx * dx + dy * dy
    if length2 == 0:
        return math.hypot(px - x1, py - y1)

    t = ((px - x1) * dx + (py - y1) * dy) / length2
    t = max(0.0, min(1.0, t))
    return math.hypot(px - (x1 + t * dx), py - (y1 + t * dy))


def hit_test_line(line: LinePrimitive, px: float, py: float,
                  padding: float = DEFAULT_HIT_PADDING) -> bool:
    dist = distance_to_segment(px, py, line.x1, line.y1, line.x2, line.y2)
    return dist <= stroke_tolerance(line.stroke_width, padding)


def hit_test_circle(circle: CirclePrimitive, px: float, py: float,
                    padding: float = DEFAULT_HIT_PADDING) -> bool:
    dist = math.hypot(px - circle.x, py - circle.y)
    return abs(dist - circle.radius) <= stroke_tolerance(circle.stroke_width, padding)


def hit_test_ellipse(ellipse: EllipsePrimitive, px: float, py: float,
                     tolerance: float = DEFAULT_ELLIPSE_TOLERANCE) -> bool:
    """
    Normalized test: |dx²/rx² + dy²/ry² - 1| <= tolerance.

    An ellipse with a zero radius is never hit.
    """
    rx = ellipse.radius_x
    ry = ellipse.radius_y
    if rx == 0 or ry == 0:
        return False
    dx = px - ellipse.x
    dy = py - ellipse.y
    value = (dx * dx) / (rx * rx) + (dy * dy) / (ry * ry)
    return abs(value - 1) <= tolerance
