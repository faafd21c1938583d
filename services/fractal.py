"""
Fractal Generator.

Renders a split Mandelbrot frame: the left half uses an escape-time color
ramp, the right half shows the luminance-weighted grayscale of the same
pixels. Independent of the shape engine; only the output surface is shared.
"""

import math
from dataclasses import dataclass

from models.raster import ImageBuffer


@dataclass(frozen=True)
class MandelbrotParams:
    """Complex-plane window and iteration limits."""
    max_iterations: int = 100
    x_min: float = -2.5
    x_max: float = 1.0
    y_min: float = -1.2
    y_max: float = 1.2
    color_step: int = 10


def _clamp_color(v: float) -> int:
    return int(max(0, min(255, v)))


def escape_iterations(x0: float, y0: float, max_iterations: int) -> int:
    """Iterations of z <- z² + c before |z|² reaches 4, capped at max_iterations."""
    zx = 0.0
    zy = 0.0
    iteration = 0
    while zx * zx + zy * zy < 4 and iteration < max_iterations:
        xt = zx * zx - zy * zy + x0
        zy = 2 * zx * zy + y0
        zx = xt
        iteration += 1
    return iteration


def luminance(r: float, g: float, b: float) -> int:
    """Rounded Rec. 601 luma, clamped to a byte."""
    return _clamp_color(math.floor(0.299 * r + 0.587 * g + 0.114 * b + 0.5))


def render_mandelbrot_split(width: int, height: int,
                            params: MandelbrotParams = MandelbrotParams()) -> ImageBuffer:
    """
    Render the split frame into a new RGBA buffer.

    Column ``px`` of the left half maps to the real axis over ``width // 2``
    columns; its grayscale twin is written at ``px + width // 2``. For odd
    widths the last column stays transparent.
    """
    buffer = ImageBuffer(width, height)
    half_w = width // 2
    if half_w == 0 or height == 0:
        return buffer

    x_span = params.x_max - params.x_min
    y_span = params.y_max - params.y_min

    for py in range(height):
        y0 = params.y_min + (py / height) * y_span
        for px in range(half_w):
            x0 = params.x_min + (px / half_w) * x_span
            iteration = escape_iterations(x0, y0, params.max_iterations)

            c = 0 if iteration == params.max_iterations else iteration * params.color_step
            r1, g1, b1 = c, c * 2, c * 4
            buffer.set_rgba(px, py, _clamp_color(r1), _clamp_color(g1), _clamp_color(b1))

            gray = luminance(r1, g1, b1)
            buffer.set_rgba(px + half_w, py, gray, gray, gray)

    return buffer
