# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""Tests for CSS color string parsing."""

import logging
import math

import pytest

from huekit.errors import (
    ColorError,
    InvalidColorSyntax,
    InvalidComponentRange,
)
from huekit.parse import parser
from huekit.parse.named import NAMED_COLORS, name_of
from huekit.parse.parser import (
    get_color_format,
    is_valid_css_color,
    parse,
    parse_multiple,
    parse_to_rgb,
    supported_formats,
    try_parse,
)
from huekit.schema.color import RGBA, CanonicalColor, ColorSpace

RED = CanonicalColor(ColorSpace.RGB, (1.0, 0.0, 0.0))


class TestHexAndNames:

    def test_hex(self):
        assert parse("#ff0000") == RED

    def test_short_hex(self):
        assert parse("#f00") == RED

    def test_hex_alpha(self):
        c = parse("#ff000080")
        assert c.alpha == 0.502

    def test_hex_is_case_insensitive(self):
        assert parse("#FF0000") == RED

    def test_bad_hex(self):
        with pytest.raises(InvalidColorSyntax):
            parse("#ff00g0")
        with pytest.raises(InvalidColorSyntax):
            parse("#ff00000")

    def test_named(self):
        assert parse("red") == RED
        assert parse("  RebeccaPurple ") == CanonicalColor.from_rgb255(102, 51, 153)

    def test_transparent(self):
        c = parse("transparent")
        assert c.components == (0.0, 0.0, 0.0)
        assert c.alpha == 0.0

    def test_named_table(self):
        assert len(NAMED_COLORS) == 148
        assert NAMED_COLORS["gray"] == NAMED_COLORS["grey"]
        assert "transparent" not in NAMED_COLORS

    def test_name_of(self):
        assert name_of((0, 255, 255)) == "aqua"
        assert name_of((1, 2, 3)) is None


class TestRGB:

    def test_percent_equals_hex(self):
        assert parse("rgb(100%, 0%, 0%)") == parse("#ff0000") == RED

    def test_modern_syntax(self):
        assert parse("rgb(255 0 0)") == RED

    def test_slash_alpha(self):
        assert parse("rgb(255 0 0 / 50%)").alpha == 0.5
        assert parse("rgb(255 0 0 / .25)").alpha == 0.25

    def test_legacy_alpha(self):
        assert parse("rgba(255, 0, 0, 0.5)").alpha == 0.5

    def test_trailing_alpha_without_slash(self):
        assert parse("rgb(255 0 0 0.5)").alpha == 0.5

    def test_no_alpha_is_none(self):
        assert parse("rgb(255, 0, 0)").alpha is None

    def test_none_keyword(self):
        assert parse("rgb(255 none 0)") == RED

    def test_whitespace_and_case(self):
        assert parse("  RGB( 255 ,0, 0 )  ") == RED

    def test_wrong_component_count(self):
        with pytest.raises(InvalidColorSyntax, match="expected 3 components"):
            parse("rgb(1 2)")

    def test_bad_unit(self):
        with pytest.raises(InvalidColorSyntax, match="unexpected unit"):
            parse("rgb(10px 0 0)")

    def test_not_a_number(self):
        with pytest.raises(InvalidColorSyntax, match="not a number"):
            parse("rgb(a b c)")


class TestRangePolicy:

    def test_lenient_clamps(self):
        assert parse("rgb(300 0 0)") == RED
        assert parse("rgb(255 0 0 / 2)").alpha == 1.0

    def test_lenient_clamp_is_logged(self, caplog):
        parser._parse.cache_clear()
        with caplog.at_level(logging.DEBUG, logger="huekit.parse.parser"):
            parse("rgb(301 0 0)")
        assert "clamping red=301.0" in caplog.text

    def test_strict_rejects(self):
        with pytest.raises(InvalidComponentRange, match="red"):
            parse("rgb(300 0 0)", strict=True)

    def test_strict_accepts_in_range(self):
        assert parse("rgb(255 0 0)", strict=True) == RED

    def test_strict_alpha(self):
        with pytest.raises(InvalidComponentRange, match="alpha"):
            parse("hsl(0 50% 50% / 1.5)", strict=True)

    def test_strict_hue_never_out_of_range(self):
        assert parse("hsl(720 50% 50%)", strict=True).components[0] == 0.0


class TestCylindrical:

    def test_hsl(self):
        assert parse("hsl(120deg 100% 50%)").components == (120.0, 100.0, 50.0)

    def test_hsla_legacy(self):
        c = parse("hsla(120, 100%, 50%, 0.3)")
        assert c.space is ColorSpace.HSL
        assert c.alpha == 0.3

    def test_bare_numbers_mean_percent(self):
        assert parse("hsl(120 100 50)") == parse("hsl(120 100% 50%)")

    @pytest.mark.parametrize("text, hue", [
        ("hsl(0.5turn 50% 50%)", 180.0),
        ("hsl(200grad 50% 50%)", 180.0),
        ("hsl(400 50% 50%)", 40.0),
        ("hsl(-90 50% 50%)", 270.0),
    ])
    def test_hue_units(self, text, hue):
        assert parse(text).components[0] == pytest.approx(hue)

    def test_radians(self):
        c = parse(f"hsl({math.pi}rad 50% 50%)")
        assert c.components[0] == pytest.approx(180.0)

    def test_hwb(self):
        c = parse("hwb(210 20% 30%)")
        assert c.space is ColorSpace.HWB
        assert c.components == (210.0, 20.0, 30.0)

    def test_hsv_and_hsi_extensions(self):
        assert parse("hsv(0 100% 100%)").space is ColorSpace.HSV
        assert parse("hsva(0, 100%, 100%, 0.5)").alpha == 0.5
        assert parse("hsi(0 100% 33.3%)").space is ColorSpace.HSI

    def test_none_hue(self):
        assert parse("hsl(none 0% 50%)").components[0] == 0.0


class TestCIE:

    def test_lab(self):
        c = parse("lab(50% 40 -20)")
        assert c.space is ColorSpace.LAB
        assert c.components == pytest.approx((50.0, 40.0, -20.0))

    def test_lab_percent_ab(self):
        assert parse("lab(50 100% -100%)").components == pytest.approx((50.0, 125.0, -125.0))

    def test_lab_ab_clamped(self):
        assert parse("lab(50 200 -200)").components == pytest.approx((50.0, 128.0, -128.0))

    def test_lch(self):
        c = parse("lch(60% 50 400)")
        assert c.components == pytest.approx((60.0, 50.0, 40.0))

    def test_lch_percent_chroma(self):
        assert parse("lch(60 100% 0)").components[1] == pytest.approx(150.0)

    def test_negative_chroma_clamped(self):
        assert parse("lch(60 -5 0)").components[1] == 0.0

    def test_oklab(self):
        c = parse("oklab(0.5 -0.1 0.1 / 0.5)")
        assert c.components == pytest.approx((0.5, -0.1, 0.1))
        assert c.alpha == 0.5

    def test_oklab_percent(self):
        assert parse("oklab(50% 100% -50%)").components == pytest.approx((0.5, 0.4, -0.2))

    def test_oklch(self):
        assert parse("oklch(70% 0.1 200)").components == pytest.approx((0.7, 0.1, 200.0))

    def test_oklch_percent_chroma(self):
        assert parse("oklch(0.7 50% 200)").components[1] == pytest.approx(0.2)


class TestColorFunction:

    def test_display_p3(self):
        c = parse("color(display-p3 1 0 0)")
        assert c.space is ColorSpace.DISPLAY_P3
        assert c.components == (1.0, 0.0, 0.0)

    @pytest.mark.parametrize("name, space", [
        ("srgb", ColorSpace.RGB),
        ("rec2020", ColorSpace.REC2020),
        ("prophoto-rgb", ColorSpace.PROPHOTO_RGB),
        ("a98-rgb", ColorSpace.A98_RGB),
        ("xyz", ColorSpace.XYZ_D65),
        ("xyz-d65", ColorSpace.XYZ_D65),
        ("xyz-d50", ColorSpace.XYZ_D50),
    ])
    def test_spaces(self, name, space):
        assert parse(f"color({name} 0.5 0.5 0.5)").space is space

    def test_percent(self):
        assert parse("color(rec2020 100% 50% 0%)").components == (1.0, 0.5, 0.0)

    def test_alpha(self):
        assert parse("color(display-p3 1 0 0 / 0.4)").alpha == 0.4

    def test_rgb_spaces_clamped(self):
        assert parse("color(display-p3 1.5 0 0)").components[0] == 1.0

    def test_xyz_unbounded(self):
        assert parse("color(xyz-d50 2 0 -0.1)").components == (2.0, 0.0, -0.1)

    def test_unknown_space(self):
        with pytest.raises(InvalidColorSyntax, match="unsupported color\\(\\) space"):
            parse("color(cmy 1 0 0)")

    def test_missing_components(self):
        with pytest.raises(InvalidColorSyntax):
            parse("color(display-p3)")


class TestDeviceCMYK:

    def test_numbers(self):
        c = parse("device-cmyk(0 1 1 0)")
        assert c.space is ColorSpace.CMYK
        assert c.components == (0.0, 100.0, 100.0, 0.0)

    def test_percentages(self):
        assert parse("device-cmyk(0% 100% 100% 0%)").components == (0.0, 100.0, 100.0, 0.0)

    def test_clamped(self):
        assert parse("device-cmyk(0 150% 1 0)").components[1] == 100.0


class TestErrors:

    @pytest.mark.parametrize("text", ["", "   ", "notacolor", "rgb(", "#", "12"])
    def test_invalid_syntax(self, text):
        with pytest.raises(InvalidColorSyntax):
            parse(text)

    def test_unknown_function(self):
        with pytest.raises(InvalidColorSyntax, match="unknown color function"):
            parse("foo(1 2 3)")

    def test_non_string(self):
        with pytest.raises(InvalidColorSyntax, match="expected a string"):
            parse(None)

    def test_errors_share_base(self):
        with pytest.raises(ColorError):
            parse("rgb(1 2)")

    def test_alpha_slash_needs_single_value(self):
        with pytest.raises(InvalidColorSyntax, match="single alpha"):
            parse("rgb(1 2 3 / 0.5 0.5)")


class TestPermissiveAPI:

    def test_try_parse(self):
        assert try_parse("red") == RED
        assert try_parse("nope") is None

    def test_try_parse_logs(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="huekit.parse.parser"):
            try_parse("nope!")
        assert "could not parse 'nope!'" in caplog.text

    def test_try_parse_strict(self):
        assert try_parse("rgb(300 0 0)", strict=True) is None

    def test_parse_to_rgb(self):
        assert parse_to_rgb("hsl(120 100% 50%)") == RGBA(0, 255, 0, None)
        assert parse_to_rgb("#ff000080") == RGBA(255, 0, 0, 0.502)
        assert parse_to_rgb("nope") is None

    def test_parse_to_rgb_clips_wide_gamut(self):
        assert parse_to_rgb("color(display-p3 1 0 0)") == RGBA(255, 0, 0, None)

    @pytest.mark.parametrize("text, valid", [
        ("red", True),
        ("#abc", True),
        ("rgb(1 2 3)", True),
        ("oklch(0.5 0.1 200)", True),
        ("color(display-p3 1 0 0)", True),
        ("transparent", True),
        ("hsv(0 100% 100%)", False),
        ("hsi(0 100% 50%)", False),
        ("#12", False),
        ("nope", False),
        (123, False),
    ])
    def test_is_valid_css_color(self, text, valid):
        assert is_valid_css_color(text) is valid

    @pytest.mark.parametrize("text, family", [
        ("#fff", "hex"),
        ("rgba(0, 0, 0, 1)", "rgb"),
        ("hsla(0, 0%, 0%, 1)", "hsl"),
        ("HWB(0 0% 0%)", "hwb"),
        ("hsv(0 0% 0%)", "hsv"),
        ("color(display-p3 1 0 0)", "color"),
        ("device-cmyk(0 0 0 1)", "device-cmyk"),
        ("red", "named"),
        ("transparent", "transparent"),
        ("nope", None),
        ("rgb(1 2)", None),
    ])
    def test_get_color_format(self, text, family):
        assert get_color_format(text) == family

    def test_parse_multiple(self):
        colors = parse_multiple("rgb(1, 2, 3), #fff; red, bogus")
        assert len(colors) == 3
        assert colors[0] == CanonicalColor.from_rgb255(1, 2, 3)
        assert colors[2] == RED

    def test_parse_multiple_empty(self):
        assert parse_multiple("") == []
        assert parse_multiple(None) == []

    def test_supported_formats(self):
        formats = supported_formats()
        for name in ("hex", "named", "rgb", "hsl", "hwb", "lab", "lch", "oklab", "oklch",
                     "color", "device-cmyk"):
            assert name in formats
        assert "rgba" not in formats

    def test_cached_results_are_shared(self):
        assert parse("oklch(0.5 0.1 10)") is parse("oklch(0.5 0.1 10)")
