# Copyright (c) 2026 Colorvalue
# SPDX-License-Identifier: MIT

"""Tests for conversion configuration."""

import pytest

from colorvalue import D65, ConversionConfig, Hsla, WhitePoint
from colorvalue.config import DEFAULT_CONFIG


class TestWhitePoint:

    def test_d65(self):
        assert D65.as_tuple() == (95.047, 100.0, 108.883)

    def test_must_be_positive(self):
        with pytest.raises(ValueError, match="White point"):
            WhitePoint(0.0, 100.0, 100.0)

    def test_y_must_be_100(self):
        with pytest.raises(ValueError, match="Y = 100"):
            WhitePoint(96.4, 90.0, 82.5)


class TestConversionConfig:

    def test_defaults(self):
        assert DEFAULT_CONFIG.white_point == D65
        assert DEFAULT_CONFIG.xyz_precision == 4
        assert DEFAULT_CONFIG.lab_precision == 2
        assert DEFAULT_CONFIG.hsl_precision == 2

    def test_negative_precision(self):
        with pytest.raises(ValueError, match="xyz_precision"):
            ConversionConfig(xyz_precision=-1)

    @pytest.mark.parametrize("name", ["xyz_precision", "lab_precision", "hsl_precision"])
    def test_precision_capped(self, name):
        with pytest.raises(ValueError, match=name):
            ConversionConfig(**{name: 16})

    def test_max_precision(self):
        lab = Hsla(55, 15, 25).to_cielab(ConversionConfig(lab_precision=15))
        assert lab.l == pytest.approx(30.2, abs=0.01)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.lab_precision = 3

    def test_xyz_precision(self):
        xyz = Hsla(55, 15, 25).to_xyz(ConversionConfig(xyz_precision=1))
        assert (xyz.x, xyz.y, xyz.z) == (5.7, 6.3, 4.4)
