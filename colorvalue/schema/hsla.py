# Copyright (c) 2026 Colorvalue
# SPDX-License-Identifier: MIT

"""
HSLA color value.

HSLA is the canonical CSS form for designers: hue in degrees, saturation
and lightness in percent, alpha as an opacity fraction.

    Hsla(55, 55, 67, 0.5)                     # direct
    Hsla.from_string("hsla(55,55%,67%,0.5)")  # parsed
    str(hsla)                                 # "hsla(55,55%,67%,0.5)"

Every derived representation is computed on demand:

    HSLA → HSL → RGB → XYZ → CIELab
                  ├→ RGBA, Hex
                  └→ CMYK
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from colorvalue.config import ConversionConfig
from colorvalue.convert.numbers import bounded_number, format_number
from colorvalue.convert.parse import Channel, parse_functional
from colorvalue.schema.color_values import (
    CIELab,
    Cmyk,
    Hex,
    Hsl,
    Rgb,
    Rgba,
    Xyz,
    alpha_to_hex,
)


_HSLA_CHANNELS = (Channel.NUMBER, Channel.PERCENT, Channel.PERCENT, Channel.NUMBER)


@dataclass(frozen=True, slots=True)
class Hsla:
    """
    A color in HSL with opacity.

    All channels are stored as floats; ints are widened on construction.
    Values outside the domain are rejected, never wrapped or clamped.

    Attributes:
        hue: Degrees 0-360
        saturation: Percent 0-100
        lightness: Percent 0-100
        alpha: Opacity 0-1 (default 1.0)

    Raises:
        InvalidColorValue: Any channel is outside its domain.
    """
    hue: float
    saturation: float
    lightness: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "hue", bounded_number("Hue", self.hue, 0.0, 360.0))
        object.__setattr__(
            self, "saturation", bounded_number("Saturation", self.saturation, 0.0, 100.0)
        )
        object.__setattr__(
            self, "lightness", bounded_number("Lightness", self.lightness, 0.0, 100.0)
        )
        object.__setattr__(self, "alpha", bounded_number("Alpha", self.alpha, 0.0, 1.0))

    @classmethod
    def from_string(cls, text: str) -> Hsla:
        """
        Parse ``hsla(h, s%, l%, a)``.

        Leading/trailing whitespace and whitespace around commas and inside
        the parentheses are ignored. Percent signs on saturation and
        lightness are optional and do not change the value.

        Raises:
            InvalidColorValue: The text is not exactly one hsla() notation,
                or a channel is outside its domain.
        """
        hue, saturation, lightness, alpha = parse_functional(text, "hsla", _HSLA_CHANNELS)
        return cls(float(hue), float(saturation), float(lightness), float(alpha))

    def __str__(self) -> str:
        return (
            f"hsla({format_number(self.hue)},"
            f"{format_number(self.saturation)}%,"
            f"{format_number(self.lightness)}%,"
            f"{format_number(self.alpha)})"
        )

    # -------------------------------------------------------------------------
    # RGB channels
    # -------------------------------------------------------------------------

    @property
    def red(self) -> int:
        return self.to_rgb().red

    @property
    def green(self) -> int:
        return self.to_rgb().green

    @property
    def blue(self) -> int:
        return self.to_rgb().blue

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def to_hsla(self, alpha: Optional[float] = None) -> Hsla:
        """Copy, optionally with a different alpha."""
        return Hsla(
            self.hue,
            self.saturation,
            self.lightness,
            self.alpha if alpha is None else alpha,
        )

    def to_hsl(self) -> Hsl:
        return Hsl(self.hue, self.saturation, self.lightness)

    def to_rgb(self) -> Rgb:
        return self.to_hsl().to_rgb()

    def to_rgba(self, alpha: Optional[float] = None) -> Rgba:
        return self.to_rgb().to_rgba(self.alpha if alpha is None else alpha)

    def to_hex(self, alpha: Optional[str] = None) -> Hex:
        """
        Hex form.

        Args:
            alpha: Two hex digits used verbatim as the alpha byte. When
                omitted, this color's alpha is scaled to 0-255.
        """
        return self.to_rgb().to_hex(alpha_to_hex(self.alpha) if alpha is None else alpha)

    def to_cmyk(self) -> Cmyk:
        return self.to_rgb().to_cmyk()

    def to_xyz(self, config: Optional[ConversionConfig] = None) -> Xyz:
        return self.to_rgb().to_xyz(config)

    def to_cielab(self, config: Optional[ConversionConfig] = None) -> CIELab:
        return self.to_xyz(config).to_cielab(config)
