# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""Tests for ΔE color difference."""

import numpy as np
import pytest

from huekit.convert.engine import convert
from huekit.metrics.difference import delta_e_76, delta_e_ok, delta_e_oklch_batch
from huekit.schema.color import CanonicalColor, ColorSpace


@pytest.fixture
def black():
    return CanonicalColor(ColorSpace.RGB, (0.0, 0.0, 0.0))


@pytest.fixture
def white():
    return CanonicalColor(ColorSpace.RGB, (1.0, 1.0, 1.0))


class TestDeltaE:

    def test_identical_is_zero(self, white):
        assert delta_e_ok(white, white) == 0.0
        assert delta_e_76(white, white) == 0.0

    def test_black_white_ok(self, black, white):
        assert delta_e_ok(black, white) == pytest.approx(1.0, abs=1e-3)

    def test_black_white_76(self, black, white):
        assert delta_e_76(black, white) == pytest.approx(100.0, abs=0.01)

    def test_symmetric(self, white):
        other = CanonicalColor(ColorSpace.HSL, (30, 80, 40))
        assert delta_e_ok(white, other) == pytest.approx(delta_e_ok(other, white))

    def test_independent_of_space(self):
        red = CanonicalColor(ColorSpace.RGB, (1.0, 0.0, 0.0))
        assert delta_e_ok(red, convert(red, "oklch", precision=10)) == pytest.approx(0.0, abs=1e-6)
        assert delta_e_76(red, convert(red, "lab", precision=8)) == pytest.approx(0.0, abs=1e-4)

    def test_small_difference_is_small(self):
        a = CanonicalColor.from_rgb255(100, 100, 100)
        b = CanonicalColor.from_rgb255(101, 100, 100)
        assert 0.0 < delta_e_ok(a, b) < 0.02
        assert 0.0 < delta_e_76(a, b) < 2.3

    def test_wide_gamut_is_unclipped(self):
        red = CanonicalColor(ColorSpace.RGB, (1.0, 0.0, 0.0))
        p3_red = CanonicalColor(ColorSpace.DISPLAY_P3, (1.0, 0.0, 0.0))
        assert delta_e_ok(red, p3_red) > 0.01


class TestBatch:

    def test_shape(self):
        a = np.random.RandomState(0).uniform([0, 0, 0], [1, 0.3, 360], (12, 3))
        b = np.random.RandomState(1).uniform([0, 0, 0], [1, 0.3, 360], (12, 3))
        assert delta_e_oklch_batch(a, b).shape == (12,)

    def test_identical_rows(self):
        a = np.array([[0.5, 0.1, 120.0], [0.9, 0.02, 300.0]])
        np.testing.assert_allclose(delta_e_oklch_batch(a, a), [0.0, 0.0], atol=1e-15)

    def test_hue_wraparound(self):
        a = np.array([[0.5, 0.1, 359.0]])
        b = np.array([[0.5, 0.1, 1.0]])
        expected = 2 * 0.1 * np.sin(np.radians(1.0))
        np.testing.assert_allclose(delta_e_oklch_batch(a, b), [expected], rtol=1e-9)

    def test_lightness_only(self):
        a = np.array([[0.3, 0.0, 0.0]])
        b = np.array([[0.7, 0.0, 90.0]])
        np.testing.assert_allclose(delta_e_oklch_batch(a, b), [0.4], atol=1e-12)

    def test_matches_scalar(self):
        c1 = CanonicalColor(ColorSpace.OKLCH, (0.6, 0.12, 40.0))
        c2 = CanonicalColor(ColorSpace.OKLCH, (0.7, 0.08, 200.0))
        batch = delta_e_oklch_batch(np.array([c1.components]), np.array([c2.components]))
        assert batch[0] == pytest.approx(delta_e_ok(c1, c2), abs=1e-6)
