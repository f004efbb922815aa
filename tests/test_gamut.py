# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""Tests for wide-gamut profiles and HDR transfer functions."""

import numpy as np
import pytest

from huekit.convert import transfer
from huekit.errors import ColorError, InvalidComponentRange, UnsupportedColorSpace
from huekit.gamut import (
    PROFILES,
    GamutProfile,
    TransferFunction,
    apply_transfer,
    decode_transfer,
    from_wide_gamut,
    get_profile,
    to_wide_gamut,
)
from huekit.schema.color import ColorSpace

WIDE_SPACES = [
    ColorSpace.DISPLAY_P3,
    ColorSpace.REC2020,
    ColorSpace.PROPHOTO_RGB,
    ColorSpace.A98_RGB,
]


# =============================================================================
# Wide gamut
# =============================================================================


class TestWideGamut:

    @pytest.mark.parametrize("space", WIDE_SPACES)
    def test_white_maps_to_white(self, space):
        np.testing.assert_allclose(to_wide_gamut(np.ones(3), space), np.ones(3), atol=1e-3)

    def test_p3_white_is_tight(self):
        np.testing.assert_allclose(to_wide_gamut(np.ones(3), "display-p3"), np.ones(3), atol=1e-4)

    @pytest.mark.parametrize("space", WIDE_SPACES)
    def test_black_maps_to_black(self, space):
        np.testing.assert_allclose(to_wide_gamut(np.zeros(3), space), np.zeros(3), atol=1e-12)

    @pytest.mark.parametrize("space", WIDE_SPACES)
    def test_extended_roundtrip(self, space):
        linear = np.random.RandomState(11).uniform(0.05, 0.95, (40, 3))
        encoded = to_wide_gamut(linear, space, extended=True)
        np.testing.assert_allclose(from_wide_gamut(encoded, space, extended=True), linear, atol=1e-6)

    @pytest.mark.parametrize("space", WIDE_SPACES)
    def test_extended_scales_by_headroom(self, space):
        linear = np.random.RandomState(5).uniform(0.1, 0.9, (20, 3))
        plain = to_wide_gamut(linear, space)
        extended = to_wide_gamut(linear, space, extended=True)
        np.testing.assert_allclose(extended, plain * get_profile(space).headroom, atol=1e-12)

    def test_p3_red_is_outside_srgb(self):
        linear = from_wide_gamut(np.array([1.0, 0.0, 0.0]), ColorSpace.DISPLAY_P3)
        assert linear[0] > 1.0
        assert linear[1] < 0.0
        assert linear[2] < 0.0

    def test_srgb_is_inside_rec2020(self):
        profile = get_profile("rec2020")
        encoded = to_wide_gamut(np.eye(3), profile.space, extended=True) / profile.headroom
        assert np.all(encoded >= -1e-9)
        assert np.all(encoded <= 1.0 + 1e-9)

    def test_non_extended_clips(self):
        out = to_wide_gamut(np.array([2.0, -0.5, 0.0]), ColorSpace.DISPLAY_P3)
        assert np.all(out >= 0.0)
        assert np.all(out <= 1.0)

    def test_extended_does_not_clip(self):
        out = to_wide_gamut(np.array([2.0, 0.0, 0.0]), ColorSpace.DISPLAY_P3, extended=True)
        assert out.max() > 1.0

    def test_batch_shape(self):
        linear = np.random.RandomState(0).random((2, 4, 3))
        assert to_wide_gamut(linear, "a98-rgb").shape == (2, 4, 3)

    def test_get_profile(self):
        profile = get_profile("prophoto-rgb")
        assert profile.space is ColorSpace.PROPHOTO_RGB
        assert profile.white == "D50"
        assert profile.curve is transfer.PROPHOTO
        assert set(PROFILES) == set(WIDE_SPACES)

    def test_get_profile_rejects_device_space(self):
        with pytest.raises(UnsupportedColorSpace, match="not a wide-gamut space"):
            get_profile(ColorSpace.RGB)

    def test_get_profile_rejects_unknown(self):
        with pytest.raises(ColorError):
            get_profile("not-a-space")

    def test_headroom_below_one_rejected(self):
        base = PROFILES[ColorSpace.DISPLAY_P3]
        with pytest.raises(ValueError, match="headroom"):
            GamutProfile(
                space=base.space, to_xyz=base.to_xyz, white="D65",
                curve=base.curve, headroom=0.9,
            )

    def test_unknown_white_rejected(self):
        base = PROFILES[ColorSpace.DISPLAY_P3]
        with pytest.raises(ValueError, match="white"):
            GamutProfile(
                space=base.space, to_xyz=base.to_xyz, white="D55",
                curve=base.curve, headroom=1.0,
            )


# =============================================================================
# HDR
# =============================================================================


class TestPQ:

    def test_reference_white_at_100_nits(self):
        assert apply_transfer(1.0, 100.0, TransferFunction.PQ) == pytest.approx(0.508, abs=1e-3)

    def test_peak(self):
        assert apply_transfer(1.0, 10000.0, TransferFunction.PQ) == pytest.approx(1.0, abs=1e-9)

    def test_black(self):
        assert apply_transfer(0.0, 100.0, TransferFunction.PQ) == pytest.approx(0.0, abs=1e-6)

    def test_above_peak_is_clipped(self):
        assert apply_transfer(3.0, 10000.0) == pytest.approx(1.0, abs=1e-9)

    def test_monotonic(self):
        signal = apply_transfer(np.linspace(0.0, 10.0, 50), 100.0)
        assert np.all(np.diff(signal) > 0)

    def test_decode_roundtrip(self):
        lum = np.linspace(0.01, 1.0, 25)
        signal = apply_transfer(lum, 100.0)
        np.testing.assert_allclose(decode_transfer(signal, 100.0), lum, rtol=1e-6)


class TestHLG:

    def test_reference_white_is_one(self):
        assert apply_transfer(1.0, 100.0, TransferFunction.HLG) == pytest.approx(1.0, abs=1e-4)

    def test_segment_boundary(self):
        assert apply_transfer(1.0 / 12.0, 100.0, "rec2100-hlg") == pytest.approx(0.5, abs=1e-9)

    def test_scale_changes_signal(self):
        low = apply_transfer(0.5, 50.0, TransferFunction.HLG)
        high = apply_transfer(0.5, 100.0, TransferFunction.HLG)
        assert low < high

    def test_decode_roundtrip(self):
        lum = np.linspace(0.0, 1.0, 41)
        signal = apply_transfer(lum, 100.0, TransferFunction.HLG)
        np.testing.assert_allclose(
            decode_transfer(signal, 100.0, TransferFunction.HLG), lum, atol=1e-9,
        )


class TestLinear:

    def test_half(self):
        assert apply_transfer(0.5, 100.0, TransferFunction.LINEAR) == pytest.approx(0.5)

    def test_scale(self):
        assert apply_transfer(0.25, 200.0, "linear") == pytest.approx(0.5)

    def test_clipped(self):
        assert apply_transfer(2.0, 100.0, TransferFunction.LINEAR) == 1.0


class TestApplyTransferAPI:

    def test_scalar_returns_float(self):
        assert isinstance(apply_transfer(0.5), float)

    def test_array_keeps_shape(self):
        out = apply_transfer(np.full((3, 2), 0.5), 100.0, TransferFunction.HLG)
        assert isinstance(out, np.ndarray)
        assert out.shape == (3, 2)

    def test_default_is_pq(self):
        assert apply_transfer(1.0) == apply_transfer(1.0, 100.0, TransferFunction.PQ)

    @pytest.mark.parametrize("scale", [0.0, -100.0, float("nan"), float("inf")])
    def test_bad_scale(self, scale):
        with pytest.raises(InvalidComponentRange, match="scale_nits"):
            apply_transfer(1.0, scale)

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_luminance(self, value):
        with pytest.raises(InvalidComponentRange, match="luminance"):
            apply_transfer(value)

    def test_non_finite_in_array(self):
        with pytest.raises(InvalidComponentRange):
            apply_transfer(np.array([0.1, np.nan]))

    def test_unknown_function(self):
        with pytest.raises(UnsupportedColorSpace, match="transfer function"):
            apply_transfer(1.0, 100.0, "gamma-2.2")
        with pytest.raises(ColorError):
            decode_transfer(0.5, 100.0, "gamma-2.2")
