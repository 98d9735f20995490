# Copyright (c) 2026 Colorvalue
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (HSL ↔ sRGB ↔ XYZ ↔ CIELab, CMYK)."""

import numpy as np
import pytest

from colorvalue.convert.colorspace import (
    cielab_to_xyz,
    cmyk_to_srgb,
    hsl_to_srgb,
    linear_rgb_to_xyz,
    linear_to_srgb,
    srgb_to_cmyk,
    srgb_to_hsl,
    srgb_to_linear,
    srgb_uint8_to_xyz,
    xyz_to_cielab,
    xyz_to_linear_rgb,
    xyz_to_srgb_uint8,
)


class TestHSL:
    """HSL ↔ sRGB conversions."""

    def test_reference_color(self):
        rgb = hsl_to_srgb([55.0, 0.55, 0.67])
        np.testing.assert_allclose(rgb * 255, [217.1325, 209.41875, 124.5675], atol=1e-9)

    def test_primaries(self):
        hsl = np.array([[0.0, 1.0, 0.5], [120.0, 1.0, 0.5], [240.0, 1.0, 0.5]])
        np.testing.assert_allclose(hsl_to_srgb(hsl), np.eye(3), atol=1e-12)

    def test_hue_360_equals_0(self):
        np.testing.assert_allclose(
            hsl_to_srgb([360.0, 0.8, 0.4]), hsl_to_srgb([0.0, 0.8, 0.4]), atol=1e-12
        )

    def test_gray_ignores_hue(self):
        for hue in (0.0, 90.0, 200.0, 330.0):
            np.testing.assert_allclose(hsl_to_srgb([hue, 0.0, 0.3]), [0.3, 0.3, 0.3])

    def test_each_sector(self):
        """One hue per 60° sector maps back to itself."""
        hues = np.array([30.0, 90.0, 150.0, 210.0, 270.0, 330.0])
        hsl = np.stack([hues, np.full(6, 0.6), np.full(6, 0.4)], axis=-1)
        recovered = srgb_to_hsl(hsl_to_srgb(hsl))
        np.testing.assert_allclose(recovered, hsl, atol=1e-10)

    def test_batch_roundtrip(self):
        rng = np.random.RandomState(42)
        hsl = np.stack([
            rng.uniform(0.0, 359.0, 100),
            rng.uniform(0.05, 1.0, 100),
            rng.uniform(0.05, 0.95, 100),
        ], axis=-1)
        np.testing.assert_allclose(srgb_to_hsl(hsl_to_srgb(hsl)), hsl, atol=1e-9)

    def test_achromatic_has_zero_hue_and_saturation(self):
        np.testing.assert_allclose(srgb_to_hsl([1.0, 1.0, 1.0]), [0.0, 0.0, 1.0])
        np.testing.assert_allclose(srgb_to_hsl([0.0, 0.0, 0.0]), [0.0, 0.0, 0.0])

    def test_blue_hue(self):
        assert srgb_to_hsl([0.0, 0.0, 1.0])[0] == pytest.approx(240.0)


class TestSRGBLinearRoundtrip:
    """sRGB ↔ Linear RGB conversions must roundtrip accurately."""

    def test_roundtrip_mid_gray(self):
        srgb = np.array([0.5, 0.5, 0.5])
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_gamma_threshold(self):
        """Values below 0.04045 use linear segment."""
        val = 0.03
        linear = srgb_to_linear(np.array([val]))
        assert float(linear[0]) == pytest.approx(val / 12.92, abs=1e-10)

    def test_batch_roundtrip(self):
        srgb = np.random.RandomState(42).random((100, 3))
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)


class TestXYZ:
    """Linear RGB ↔ XYZ conversions."""

    def test_white(self):
        xyz = linear_rgb_to_xyz([1.0, 1.0, 1.0])
        np.testing.assert_allclose(xyz, [95.05, 100.0, 108.9], atol=1e-9)

    def test_black(self):
        np.testing.assert_allclose(linear_rgb_to_xyz([0.0, 0.0, 0.0]), [0.0, 0.0, 0.0])

    def test_roundtrip(self):
        rgb = np.random.RandomState(42).random((50, 3))
        np.testing.assert_allclose(xyz_to_linear_rgb(linear_rgb_to_xyz(rgb)), rgb, atol=1e-10)

    def test_uint8_chain(self):
        xyz = srgb_uint8_to_xyz([73, 72, 54])
        np.testing.assert_allclose(xyz, [5.7309, 6.3175, 4.4074], atol=1e-4)

    def test_uint8_roundtrip(self):
        pixels = np.array([[217, 209, 125], [73, 72, 54], [0, 128, 255]])
        recovered = xyz_to_srgb_uint8(srgb_uint8_to_xyz(pixels))
        np.testing.assert_allclose(recovered, pixels, atol=1e-6)


class TestCIELab:
    """XYZ ↔ CIELab conversions."""

    def test_white_is_l_100(self):
        lab = xyz_to_cielab([95.047, 100.0, 108.883])
        np.testing.assert_allclose(lab, [100.0, 0.0, 0.0], atol=1e-9)

    def test_black_is_l_0(self):
        lab = xyz_to_cielab([0.0, 0.0, 0.0])
        np.testing.assert_allclose(lab, [0.0, 0.0, 0.0], atol=1e-9)

    def test_reference_color(self):
        lab = xyz_to_cielab([5.7309, 6.3175, 4.4074])
        np.testing.assert_allclose(lab, [30.20, -3.07, 10.98], atol=1e-2)

    def test_linear_segment(self):
        """Very dark colors use the linear part of f(t)."""
        lab = xyz_to_cielab([0.5, 0.5, 0.5])
        assert lab[0] == pytest.approx(903.2963 * 0.005, abs=1e-3)

    def test_roundtrip(self):
        xyz = np.array([[5.7309, 6.3175, 4.4074], [41.24, 21.26, 1.93], [0.2, 0.3, 0.1]])
        np.testing.assert_allclose(cielab_to_xyz(xyz_to_cielab(xyz)), xyz, atol=1e-9)

    def test_custom_white(self):
        white = (96.422, 100.0, 82.521)
        lab = xyz_to_cielab(list(white), white)
        np.testing.assert_allclose(lab, [100.0, 0.0, 0.0], atol=1e-9)


class TestCMYK:
    """sRGB ↔ CMYK conversions."""

    def test_black(self):
        np.testing.assert_allclose(srgb_to_cmyk([0.0, 0.0, 0.0]), [0.0, 0.0, 0.0, 1.0])

    def test_white(self):
        np.testing.assert_allclose(srgb_to_cmyk([1.0, 1.0, 1.0]), [0.0, 0.0, 0.0, 0.0])

    def test_red(self):
        np.testing.assert_allclose(srgb_to_cmyk([1.0, 0.0, 0.0]), [0.0, 1.0, 1.0, 0.0])

    def test_batch_with_black(self):
        cmyk = srgb_to_cmyk(np.array([[0.0, 0.0, 0.0], [0.5, 0.25, 0.0]]))
        assert cmyk.shape == (2, 4)
        np.testing.assert_allclose(cmyk[0], [0.0, 0.0, 0.0, 1.0])
        np.testing.assert_allclose(cmyk[1], [0.0, 0.5, 1.0, 0.5])

    def test_roundtrip(self):
        srgb = np.random.RandomState(42).random((50, 3))
        np.testing.assert_allclose(cmyk_to_srgb(srgb_to_cmyk(srgb)), srgb, atol=1e-10)
