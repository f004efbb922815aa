# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""Tests for colorimetric kernels (sRGB ↔ XYZ ↔ Lab/LCH, sRGB ↔ OKLab ↔ OKLCH)."""

import numpy as np
import pytest

from huekit.convert import transfer
from huekit.convert.colorspace import (
    WHITE_POINTS,
    lab_to_lch,
    lab_to_srgb,
    lab_to_xyz,
    lch_to_lab,
    linear_rgb_to_oklab,
    linear_to_srgb,
    oklab_to_linear_rgb,
    oklab_to_oklch,
    oklch_to_oklab,
    oklch_to_srgb,
    srgb_to_lab,
    srgb_to_linear,
    srgb_to_oklch,
    srgb_to_xyz,
    xyz_d50_to_d65,
    xyz_d65_to_d50,
    xyz_to_lab,
    xyz_to_srgb,
)


class TestSRGBLinearRoundtrip:
    """sRGB ↔ Linear RGB conversions must roundtrip accurately."""

    def test_roundtrip_mid_gray(self):
        srgb = np.array([0.5, 0.5, 0.5])
        linear = srgb_to_linear(srgb)
        recovered = linear_to_srgb(linear)
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_white_is_exact(self):
        assert float(srgb_to_linear(np.array([1.0]))[0]) == 1.0

    def test_gamma_threshold(self):
        """Values below 0.04045 use linear segment."""
        val = 0.03
        linear = srgb_to_linear(np.array([val]))
        assert float(linear[0]) == pytest.approx(val / 12.92, abs=1e-10)

    def test_negative_values_keep_sign(self):
        linear = srgb_to_linear(np.array([-0.5, 1.2]))
        assert linear[0] < 0.0
        assert linear[1] > 1.0
        np.testing.assert_allclose(linear_to_srgb(linear), [-0.5, 1.2], atol=1e-10)

    def test_batch_roundtrip(self):
        srgb = np.random.RandomState(42).random((100, 3))
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)


class TestTransferCurves:

    @pytest.mark.parametrize("curve", [
        transfer.SRGB,
        transfer.REC2020,
        transfer.PROPHOTO,
        transfer.A98,
    ])
    def test_roundtrip(self, curve):
        values = np.linspace(0.0, 1.0, 101)
        np.testing.assert_allclose(curve.decode(curve.encode(values)), values, atol=1e-10)

    def test_srgb_segments_meet(self):
        c = transfer.SRGB
        toe = c.linear_cutoff * c.slope
        power = c.scale * c.linear_cutoff ** (1.0 / c.gamma) - (c.scale - 1.0)
        assert toe == pytest.approx(power, abs=1e-6)

    def test_rec2020_segments_meet(self):
        c = transfer.REC2020
        toe = c.linear_cutoff * c.slope
        power = c.scale * c.linear_cutoff ** (1.0 / c.gamma) - (c.scale - 1.0)
        assert toe == pytest.approx(power, abs=1e-6)

    def test_pure_gamma(self):
        assert float(transfer.A98.decode(np.array(0.5))) == pytest.approx(0.5 ** 2.2)
        assert float(transfer.PROPHOTO.decode(np.array(0.5))) == pytest.approx(0.5 ** 1.8)

    def test_display_p3_shares_srgb_curve(self):
        assert transfer.DISPLAY_P3 is transfer.SRGB


class TestXYZ:

    def test_white_is_d65(self):
        xyz = srgb_to_xyz(np.array([1.0, 1.0, 1.0]))
        np.testing.assert_allclose(xyz, WHITE_POINTS["D65"], atol=1e-6)

    def test_black_is_zero(self):
        np.testing.assert_allclose(srgb_to_xyz(np.zeros(3)), np.zeros(3), atol=1e-12)

    def test_roundtrip(self):
        srgb = np.random.RandomState(7).random((50, 3))
        np.testing.assert_allclose(xyz_to_srgb(srgb_to_xyz(srgb)), srgb, atol=1e-5)

    def test_bradford_maps_white(self):
        d50 = xyz_d65_to_d50(WHITE_POINTS["D65"])
        np.testing.assert_allclose(d50, WHITE_POINTS["D50"], atol=1e-3)

    def test_bradford_roundtrip(self):
        xyz = np.array([[0.2, 0.3, 0.4], [0.9, 1.0, 1.1]])
        np.testing.assert_allclose(xyz_d50_to_d65(xyz_d65_to_d50(xyz)), xyz, atol=1e-12)


class TestLab:

    def test_white(self):
        lab = srgb_to_lab(np.array([1.0, 1.0, 1.0]))
        np.testing.assert_allclose(lab, [100.0, 0.0, 0.0], atol=1e-3)

    def test_black(self):
        lab = srgb_to_lab(np.zeros(3))
        np.testing.assert_allclose(lab, [0.0, 0.0, 0.0], atol=1e-9)

    def test_red(self):
        lab = srgb_to_lab(np.array([1.0, 0.0, 0.0]))
        np.testing.assert_allclose(lab, [53.24, 80.09, 67.20], atol=0.02)

    def test_linear_segment_roundtrip(self):
        """Very dark values go through the kappa branch both ways."""
        xyz = np.array([0.001, 0.001, 0.001])
        np.testing.assert_allclose(lab_to_xyz(xyz_to_lab(xyz)), xyz, atol=1e-12)

    def test_roundtrip(self):
        srgb = np.random.RandomState(3).random((50, 3))
        np.testing.assert_allclose(lab_to_srgb(srgb_to_lab(srgb)), srgb, atol=1e-5)

    def test_d50_white(self):
        lab = xyz_to_lab(WHITE_POINTS["D50"], white="D50")
        np.testing.assert_allclose(lab, [100.0, 0.0, 0.0], atol=1e-9)


class TestLCH:

    def test_roundtrip_chromatic(self):
        lab = np.array([60.0, 20.0, -35.0])
        np.testing.assert_allclose(lch_to_lab(lab_to_lch(lab)), lab, atol=1e-10)

    def test_hue_of_positive_b_axis(self):
        lch = lab_to_lch(np.array([50.0, 0.0, 10.0]))
        assert lch[1] == pytest.approx(10.0)
        assert lch[2] == pytest.approx(90.0)

    def test_hue_range(self):
        """Hue must be in [0, 360)."""
        lch = lab_to_lch(np.array([50.0, 10.0, -0.001]))
        assert 0.0 <= lch[2] < 360.0


class TestOKLabRoundtrip:
    """Linear RGB ↔ OKLab conversions must roundtrip accurately."""

    def test_roundtrip_white(self):
        rgb = np.array([1.0, 1.0, 1.0])
        lab = linear_rgb_to_oklab(rgb)
        recovered = oklab_to_linear_rgb(lab)
        np.testing.assert_allclose(recovered, rgb, atol=1e-8)

    def test_white_lightness_is_one(self):
        lab = linear_rgb_to_oklab(np.array([1.0, 1.0, 1.0]))
        assert lab[0] == pytest.approx(1.0, abs=1e-6)
        assert lab[1] == pytest.approx(0.0, abs=1e-6)

    def test_black_lightness_is_zero(self):
        lab = linear_rgb_to_oklab(np.array([0.0, 0.0, 0.0]))
        assert lab[0] == pytest.approx(0.0, abs=1e-6)

    def test_out_of_gamut_survives(self):
        """Negative linear values (wide-gamut colors) must not turn into NaN."""
        rgb = np.array([1.2, -0.05, -0.02])
        recovered = oklab_to_linear_rgb(linear_rgb_to_oklab(rgb))
        np.testing.assert_allclose(recovered, rgb, atol=1e-8)

    def test_batch_roundtrip(self):
        rgb = np.random.RandomState(42).random((50, 3))
        recovered = oklab_to_linear_rgb(linear_rgb_to_oklab(rgb))
        np.testing.assert_allclose(recovered, rgb, atol=1e-8)


class TestOKLCH:

    def test_red(self):
        lch = srgb_to_oklch(np.array([1.0, 0.0, 0.0]))
        np.testing.assert_allclose(lch, [0.62796, 0.25768, 29.2339], atol=1e-3)

    def test_chroma_calculation(self):
        lch = oklab_to_oklch(np.array([0.5, 0.3, 0.4]))
        assert lch[1] == pytest.approx(0.5, abs=1e-10)

    def test_achromatic_zero_chroma(self):
        lch = oklab_to_oklch(np.array([0.5, 0.0, 0.0]))
        assert lch[1] == pytest.approx(0.0, abs=1e-10)

    def test_inverse_alias(self):
        lab = np.array([0.7, 0.1, -0.05])
        np.testing.assert_allclose(oklch_to_oklab(oklab_to_oklch(lab)), lab, atol=1e-10)

    @pytest.mark.parametrize("srgb", [
        [1.0, 0.0, 0.0],
        [0.0, 1.0, 0.0],
        [0.0, 0.0, 1.0],
        [0.2, 0.4, 0.6],
    ])
    def test_full_chain_roundtrip(self, srgb):
        srgb = np.array(srgb)
        np.testing.assert_allclose(oklch_to_srgb(srgb_to_oklch(srgb)), srgb, atol=1e-8)
