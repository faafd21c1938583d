"""
Unit tests for model classes.

Tests:
- Primitive creation, coercion and bounds
- Color / fill copy helpers
- EditorSession mode exclusivity and selection sync
- ImageBuffer pixel access
"""

import pytest
from models.primitives import (
    LinePrimitive, CirclePrimitive, EllipsePrimitive,
    PrimitiveKind, FillMode, ToolMode, AffineMode,
    is_fillable, with_color, with_fill_mode,
)
from models.session import EditorSession, SelectionSync
from models.raster import ImageBuffer, PixelRect, StrokeStyle


class TestPrimitives:
    """Tests for the primitive dataclasses."""

    def test_kinds(self):
        assert LinePrimitive().kind == PrimitiveKind.LINE
        assert CirclePrimitive().kind == PrimitiveKind.CIRCLE
        assert EllipsePrimitive().kind == PrimitiveKind.ELLIPSE

    @pytest.mark.parametrize("width,expected", [(0, 1), (-3, 1), (1, 1), (5, 5), (2.7, 2)])
    def test_stroke_width_clamped(self, width, expected):
        assert LinePrimitive(stroke_width=width).stroke_width == expected
        assert CirclePrimitive(stroke_width=width).stroke_width == expected

    def test_fill_mode_coerced_from_string(self):
        circle = CirclePrimitive(0, 0, 5, fill_mode="solid")
        assert circle.fill_mode == FillMode.SOLID

    def test_line_is_never_filled(self, horizontal_line):
        assert horizontal_line.fill_mode == FillMode.NONE
        assert not is_fillable(horizontal_line)

    def test_line_bounds_and_length(self):
        line = LinePrimitive(10, 20, 30, 5)
        assert line.bounds() == (10, 5, 30, 20)
        assert line.length == pytest.approx(25.0)

    def test_circle_bounds(self, solid_circle):
        assert solid_circle.bounds() == (40, 40, 60, 60)

    def test_negative_radius_bounds_collapse(self):
        assert CirclePrimitive(5, 5, -2).bounds() == (5, 5, 5, 5)
        assert EllipsePrimitive(5, 5, -2, 3).bounds() == (5, 2, 5, 8)

    def test_ellipse_bounds(self, outline_ellipse):
        assert outline_ellipse.bounds() == (80, 70, 120, 90)


class TestCopyHelpers:
    """Tests for with_color / with_fill_mode."""

    def test_with_color_keeps_base(self):
        circle = CirclePrimitive(0, 0, 5, color="#111111", base_color="#222222")
        recolored = with_color(circle, "#333333")
        assert recolored.color == "#333333"
        assert recolored.base_color == "#222222"
        assert circle.color == "#111111"

    def test_with_color_sets_base(self):
        line = LinePrimitive(color="#111111")
        recolored = with_color(line, "#abcdef", base_color="#abcdef")
        assert recolored.base_color == "#abcdef"
        assert line.base_color is None

    def test_with_fill_mode(self, outline_ellipse):
        filled = with_fill_mode(outline_ellipse, FillMode.SOLID)
        assert filled.fill_mode == FillMode.SOLID
        assert outline_ellipse.fill_mode == FillMode.NONE

    def test_with_fill_mode_ignores_lines(self, horizontal_line):
        assert with_fill_mode(horizontal_line, FillMode.SOLID) is horizontal_line


class TestEditorSession:
    """Tests for EditorSession."""

    def test_defaults(self):
        session = EditorSession()
        assert session.tool_mode == ToolMode.NONE
        assert session.affine_mode == AffineMode.NONE
        assert session.stroke_width == 2
        assert not session.has_selection

    def test_string_modes_coerced(self):
        session = EditorSession(tool_mode="circle", affine_mode="none", fill_mode="solid")
        assert session.tool_mode == ToolMode.CIRCLE
        assert session.fill_mode == FillMode.SOLID

    def test_tool_mode_clears_affine(self, session):
        session.set_affine_mode(AffineMode.ROTATE)
        session.set_tool_mode(ToolMode.ELLIPSE)
        assert session.tool_mode == ToolMode.ELLIPSE
        assert session.affine_mode == AffineMode.NONE

    def test_affine_mode_clears_tool(self, session):
        session.set_tool_mode(ToolMode.SELECT)
        session.set_affine_mode("move")
        assert session.affine_mode == AffineMode.MOVE
        assert session.tool_mode == ToolMode.NONE

    def test_draws(self):
        assert ToolMode.LINE.draws
        assert ToolMode.ELLIPSE.draws
        assert not ToolMode.SELECT.draws
        assert not ToolMode.NONE.draws

    def test_sync_from(self, session):
        session.lightness = 40
        session.brightness = -20
        session.sync_from(SelectionSync(index=2, color="#ff0000", fill_mode=FillMode.SOLID))
        assert session.stroke_color == "#ff0000"
        assert session.fill_mode == FillMode.SOLID
        assert session.lightness == 0
        assert session.brightness == 0

    def test_reset_adjustments(self, session):
        session.lightness = 10
        session.brightness = 10
        session.reset_adjustments()
        assert (session.lightness, session.brightness) == (0, 0)


class TestRasterModels:
    """Tests for raster output types."""

    def test_image_buffer_starts_transparent(self):
        buf = ImageBuffer(4, 3)
        assert len(buf.data) == 4 * 3 * 4
        assert buf.get_rgba(3, 2) == (0, 0, 0, 0)

    def test_image_buffer_set_get(self):
        buf = ImageBuffer(4, 3)
        buf.set_rgba(1, 2, 10, 20, 30)
        assert buf.get_rgba(1, 2) == (10, 20, 30, 255)
        assert buf.offset(1, 2) == (2 * 4 + 1) * 4

    def test_pixel_rect_defaults(self):
        rect = PixelRect(3, 4)
        assert (rect.w, rect.h) == (1, 1)
        assert rect.origin == (3, 4)

    def test_stroke_style_dashed(self):
        assert StrokeStyle().dashed
        assert not StrokeStyle(dash=()).dashed
