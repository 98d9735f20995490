# Copyright (c) 2026 Colorvalue
# SPDX-License-Identifier: MIT

"""
Conversion settings.

The defaults reproduce the canonical sRGB / D65 results: XYZ rounded to
4 decimals, CIELab to 2, HSL channels derived from RGB to 2.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class WhitePoint:
    """
    Reference white in XYZ, scaled so that Y = 100.

    Attributes:
        x: X tristimulus value of the reference white
        y: Y tristimulus value of the reference white
        z: Z tristimulus value of the reference white
    """
    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        if min(self.x, self.y, self.z) <= 0.0:
            raise ValueError(f"White point must be positive, got {self.as_tuple()}")
        if self.y != 100.0:
            raise ValueError(f"White point must have Y = 100, got {self.y}")

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


# CIE standard illuminant D65, 2° observer
D65 = WhitePoint(x=95.047, y=100.0, z=108.883)


# Floats carry about 15 significant decimal digits
MAX_PRECISION = 15


@dataclass(frozen=True, slots=True)
class ConversionConfig:
    """Configuration for colorimetric conversions."""

    # Reference white used to normalize XYZ before the CIELab transform
    white_point: WhitePoint = field(default=D65)

    # Decimal places kept after each conversion (rounded half away from zero)
    xyz_precision: int = 4
    lab_precision: int = 2
    hsl_precision: int = 2

    def __post_init__(self) -> None:
        for name in ("xyz_precision", "lab_precision", "hsl_precision"):
            value = getattr(self, name)
            if not 0 <= value <= MAX_PRECISION:
                raise ValueError(f"{name} must be 0-{MAX_PRECISION}, got {value}")


DEFAULT_CONFIG = ConversionConfig()
