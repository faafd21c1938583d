"""
Rasterizer.

Scan-converts primitives into pixel blocks:
- Lines with Bresenham's algorithm
- Circle outlines with the midpoint circle algorithm
- Ellipse outlines with the two-region midpoint ellipse algorithm
- Solid circle/ellipse interiors with a row-by-row scanline fill

Outline points are painted as stroke_width x stroke_width blocks; fills are
always 1x1 pixels. All functions are pure and return a de-duplicated list
of PixelRect in paint order.
"""

import math
from typing import Iterable, List, Tuple

from models.primitives import (
    LinePrimitive, CirclePrimitive, EllipsePrimitive, FillMode,
)
from models.raster import PixelRect


def round_px(value: float) -> int:
    """Round a coordinate to a pixel, halves toward +infinity."""
    return int(math.floor(value + 0.5))


def _unique(rects: Iterable[PixelRect]) -> List[PixelRect]:
    return list(dict.fromkeys(rects))


def _blocks(points: Iterable[Tuple[float, float]], size: int) -> List[PixelRect]:
    return [PixelRect(round_px(px), round_px(py), size, size) for px, py in points]


# =============================================================================
# Line
# =============================================================================

def bresenham_points(x1: int, y1: int, x2: int, y2: int) -> List[Tuple[int, int]]:
    """
    Integer points of the segment (x1, y1)-(x2, y2), both endpoints included.

    Consecutive points differ by at most one step on each axis.
    """
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy

    points = []
    while True:
        points.append((x1, y1))
        if x1 == x2 and y1 == y2:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x1 += sx
        if e2 < dx:
            err += dx
            y1 += sy
    return points


def rasterize_line(line: LinePrimitive) -> List[PixelRect]:
    """Rasterize a line; a zero-length line paints a single block."""
    points = bresenham_points(
        round_px(line.x1), round_px(line.y1),
        round_px(line.x2), round_px(line.y2),
    )
    w = line.stroke_width
    return _unique(PixelRect(x, y, w, w) for x, y in points)


# =============================================================================
# Circle
# =============================================================================

def circle_fill(cx: float, cy: float, radius: float) -> List[PixelRect]:
    """Solid interior of a circle as 1x1 pixels; empty for radius < 1."""
    r = max(0, round_px(radius))
    if r <= 0:
        return []
    rects = []
    for yy in range(-r, r + 1):
        half = int(math.floor(math.sqrt(r * r - yy * yy)))
        for xx in range(-half, half + 1):
            rects.append(PixelRect(round_px(cx + xx), round_px(cy + yy)))
    return rects


def midpoint_circle_points(cx: float, cy: float, radius: float) -> List[Tuple[float, float]]:
    """Outline points (unrounded) of a circle via the midpoint algorithm."""
    r = max(0.0, radius)
    d = 1 - r
    xi = 0
    yi = r

    points = []
    while xi <= yi:
        points.extend((
            (cx + xi, cy + yi), (cx + yi, cy + xi),
            (cx - yi, cy + xi), (cx - xi, cy + yi),
            (cx - xi, cy - yi), (cx - yi, cy - xi),
            (cx + yi, cy - xi), (cx + xi, cy - yi),
        ))
        if d < 0:
            d += 2 * xi + 3
        else:
            d += 2 * (xi - yi) + 5
            yi -= 1
        xi += 1
    return points


def rasterize_circle(circle: CirclePrimitive) -> List[PixelRect]:
    """Fill (if solid) then outline."""
    rects = []
    if circle.fill_mode == FillMode.SOLID:
        rects.extend(circle_fill(circle.x, circle.y, circle.radius))
    rects.extend(_blocks(
        midpoint_circle_points(circle.x, circle.y, circle.radius),
        circle.stroke_width,
    ))
    return _unique(rects)


# =============================================================================
# Ellipse
# =============================================================================

def ellipse_fill(cx: float, cy: float, rx: float, ry: float) -> List[PixelRect]:
    """Solid interior of an ellipse; empty when either rounded radius is 0."""
    rx_i = max(0, round_px(rx))
    ry_i = max(0, round_px(ry))
    if rx_i <= 0 or ry_i <= 0:
        return []
    rects = []
    for yy in range(-ry_i, ry_i + 1):
        t = 1 - (yy * yy) / (ry_i * ry_i)
        if t < 0:
            continue
        half = int(math.floor(rx_i * math.sqrt(t)))
        for xx in range(-half, half + 1):
            rects.append(PixelRect(round_px(cx + xx), round_px(cy + yy)))
    return rects


def _plot4(points: list, cx: float, cy: float, x: float, y: float):
    points.extend((
        (cx + x, cy + y), (cx - x, cy + y),
        (cx + x, cy - y), (cx - x, cy - y),
    ))


def _degenerate_ellipse_points(cx: float, cy: float, rx: float, ry: float) -> List[Tuple[float, float]]:
    # One axis is zero: the outline collapses onto the other axis
    points = []
    if rx > 0:
        for x in range(0, round_px(rx) + 1):
            points.extend(((cx + x, cy), (cx - x, cy)))
    elif ry > 0:
        for y in range(0, round_px(ry) + 1):
            points.extend(((cx, cy + y), (cx, cy - y)))
    else:
        points.append((cx, cy))
    return points


def midpoint_ellipse_points(cx: float, cy: float, rx: float, ry: float) -> List[Tuple[float, float]]:
    """
    Outline points (unrounded) of an axis-aligned ellipse.

    Region 1 covers the part of each quadrant where the slope magnitude is
    at most 1 and steps x; region 2 covers the rest and steps y down to 0.
    Decision terms use the already-advanced coordinate, so the outline can
    sit one pixel inside variants that update before stepping.
    """
    rx = max(0.0, rx)
    ry = max(0.0, ry)
    if rx == 0 or ry == 0:
        return _degenerate_ellipse_points(cx, cy, rx, ry)

    rx2 = rx * rx
    ry2 = ry * ry
    points = []

    # Region 1
    xi = 0
    yi = ry
    p1 = ry2 - rx2 * ry + 0.25 * rx2
    while 2 * ry2 * xi <= 2 * rx2 * yi:
        _plot4(points, cx, cy, xi, yi)
        xi += 1
        if p1 < 0:
            p1 += 2 * ry2 * xi + ry2
        else:
            yi -= 1
            p1 += 2 * ry2 * xi - 2 * rx2 * yi + ry2

    # Region 2
    p2 = ry2 * (xi + 0.5) ** 2 + rx2 * (yi - 1) ** 2 - rx2 * ry2
    while yi >= 0:
        _plot4(points, cx, cy, xi, yi)
        yi -= 1
        if p2 > 0:
            p2 += rx2 - 2 * rx2 * yi
        else:
            xi += 1
            p2 += 2 * ry2 * xi - 2 * rx2 * yi + rx2
    return points


def rasterize_ellipse(ellipse: EllipsePrimitive) -> List[PixelRect]:
    """Fill (if solid) then outline."""
    rects = []
    if ellipse.fill_mode == FillMode.SOLID:
        rects.extend(ellipse_fill(ellipse.x, ellipse.y, ellipse.radius_x, ellipse.radius_y))
    rects.extend(_blocks(
        midpoint_ellipse_points(ellipse.x, ellipse.y, ellipse.radius_x, ellipse.radius_y),
        ellipse.stroke_width,
    ))
    return _unique(rects)
