"""
Unit tests for the color adjuster.

Tests:
- Hex parsing (short form, invalid input)
- Brightness and lightness math, application order
- Identity and idempotence
"""

import pytest
from services.color_adjuster import (
    hex_to_rgb, rgb_to_hex, normalize_hex, clamp_channel, apply_lightness_brightness,
)


class TestHexParsing:
    """Tests for hex <-> rgb conversion."""

    def test_six_digit(self):
        assert hex_to_rgb("#336699") == (0x33, 0x66, 0x99)

    def test_three_digit_expands(self):
        assert hex_to_rgb("#abc") == (0xaa, 0xbb, 0xcc)

    def test_hash_optional(self):
        assert hex_to_rgb("ff0000") == (255, 0, 0)

    @pytest.mark.parametrize("bad", ["", None, "#12345", "#zzzzzz", "#1234567", "red"])
    def test_invalid(self, bad):
        assert hex_to_rgb(bad) is None

    def test_rgb_to_hex_lowercase(self):
        assert rgb_to_hex(171, 205, 239) == "#abcdef"

    def test_normalize(self):
        assert normalize_hex("#ABC") == "#aabbcc"
        assert normalize_hex("nope") == "nope"

    def test_clamp(self):
        assert clamp_channel(-4) == 0
        assert clamp_channel(300) == 255
        assert clamp_channel(17) == 17


class TestAdjustment:
    """Tests for apply_lightness_brightness."""

    @pytest.mark.parametrize("color", ["#000000", "#ffffff", "#336699", "#0a0b0c", "#FFAA00", "FFAA00"])
    def test_zero_deltas_identity(self, color):
        assert apply_lightness_brightness(color, 0, 0) == color

    def test_zero_deltas_normalizes_short_form(self):
        assert apply_lightness_brightness("#abc", 0, 0) == "#aabbcc"

    def test_uppercase_adjusted_output_is_lowercase(self):
        assert apply_lightness_brightness("#FFAA00", 0, -50) == "#805500"

    @pytest.mark.parametrize("bad", ["#12345", "#zzzzzz", ""])
    def test_invalid_returned_unchanged(self, bad):
        assert apply_lightness_brightness(bad, 30, 30) == bad

    def test_brightness_doubles_and_clamps(self):
        assert apply_lightness_brightness("#808080", 0, 100) == "#ffffff"

    def test_brightness_halves(self):
        assert apply_lightness_brightness("#804020", 0, -50) == "#402010"

    def test_full_lightness(self):
        assert apply_lightness_brightness("#336699", 100, 0) == "#ffffff"
        assert apply_lightness_brightness("#336699", -100, 0) == "#000000"

    def test_half_lightness_rounds_half_up(self):
        assert apply_lightness_brightness("#000000", 50, 0) == "#808080"

    def test_brightness_applied_before_lightness(self):
        # 100 * 2 = 200, then 200 + 55 * 0.5 = 227.5 -> 228
        assert apply_lightness_brightness("#646464", 50, 100) == "#e4e4e4"

    def test_mixed_example(self):
        assert apply_lightness_brightness("#336699", 20, -10) == "#587ca1"

    def test_idempotent_from_same_base(self):
        first = apply_lightness_brightness("#336699", 35, 15)
        second = apply_lightness_brightness("#336699", 35, 15)
        assert first == second

    def test_output_always_valid_hex(self):
        for l in (-100, -37, 0, 42, 100):
            for b in (-100, -5, 0, 60, 200):
                out = apply_lightness_brightness("#7f3a10", l, b)
                assert hex_to_rgb(out) is not None
                assert out == out.lower()
