# Copyright (c) 2026 Colorvalue
# SPDX-License-Identifier: MIT

"""
Color value types other than HSLA.

Design principles:
- Immutable: All types are frozen dataclasses
- Validated: A value that exists is within its domain
- Round-trippable: ``T.from_string(str(value)) == value``

Each type owns one notation:

    Rgb      rgb(217,209,125)
    Rgba     rgba(217,209,125,0.5)
    Hsl      hsl(55,55%,67%)
    Hex      #d9d17d, #d9d17d80
    Cmyk     cmyk(0%,4%,42%,15%)
    Xyz      xyz(55.1174,61.8333,28.4321)
    CIELab   CIELab(30.2,-3.07,10.98)

The types are independent; conversions are methods that call the pure
routines in colorvalue.convert.colorspace.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import numpy as np

from colorvalue.config import DEFAULT_CONFIG, ConversionConfig
from colorvalue.convert import colorspace
from colorvalue.convert.numbers import bounded_number, format_number, round_half_away
from colorvalue.convert.parse import Channel, parse_functional, parse_hex
from colorvalue.exceptions import InvalidColorValue

if TYPE_CHECKING:
    from colorvalue.schema.hsla import Hsla


_HEX_CHANNEL_RE = re.compile(r"[0-9a-f]{2}", re.IGNORECASE)


def _rgb_channel(label: str, value: object) -> int:
    return bounded_number(label, value, 0, 255, integral=True)


def _alpha(value: object) -> float:
    return bounded_number("Alpha", value, 0.0, 1.0)


def _round_all(values: np.ndarray, ndigits: int = 0) -> tuple:
    return tuple(round_half_away(v, ndigits) for v in values)


def alpha_to_hex(alpha: float) -> str:
    """Scale an alpha in [0, 1] to a two-digit hex byte (0.5 -> "80")."""
    return f"{round_half_away(alpha * 255):02x}"


# =============================================================================
# RGB
# =============================================================================


@dataclass(frozen=True, slots=True)
class Rgb:
    """
    An 8-bit sRGB color.

    Attributes:
        red, green, blue: Channel values, whole numbers 0-255
    """
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "red", _rgb_channel("Red", self.red))
        object.__setattr__(self, "green", _rgb_channel("Green", self.green))
        object.__setattr__(self, "blue", _rgb_channel("Blue", self.blue))

    @classmethod
    def from_string(cls, text: str) -> Rgb:
        """Parse ``rgb(r,g,b)``."""
        red, green, blue = parse_functional(text, "rgb", (Channel.INTEGER,) * 3)
        return cls(int(red), int(green), int(blue))

    def __str__(self) -> str:
        return f"rgb({self.red},{self.green},{self.blue})"

    def _srgb(self) -> np.ndarray:
        return np.array([self.red, self.green, self.blue], dtype=np.float64) / 255.0

    def to_rgb(self) -> Rgb:
        return Rgb(self.red, self.green, self.blue)

    def to_rgba(self, alpha: Optional[float] = None) -> Rgba:
        return Rgba(self.red, self.green, self.blue, 1.0 if alpha is None else alpha)

    def to_hex(self, alpha: Optional[str] = None) -> Hex:
        """
        Hex form of this color.

        Args:
            alpha: Two hex digits used verbatim as the alpha byte
                (default "ff", opaque)
        """
        return Hex(
            f"{self.red:02x}",
            f"{self.green:02x}",
            f"{self.blue:02x}",
            "ff" if alpha is None else alpha,
        )

    def to_hsl(self, config: Optional[ConversionConfig] = None) -> Hsl:
        config = config or DEFAULT_CONFIG
        h, s, l = colorspace.srgb_to_hsl(self._srgb())
        return Hsl(
            round_half_away(h, config.hsl_precision),
            round_half_away(s * 100.0, config.hsl_precision),
            round_half_away(l * 100.0, config.hsl_precision),
        )

    def to_hsla(self, alpha: Optional[float] = None) -> Hsla:
        return self.to_hsl().to_hsla(alpha)

    def to_cmyk(self) -> Cmyk:
        """CMYK form, each channel rounded to a whole percent."""
        cmyk = colorspace.srgb_to_cmyk(self._srgb()) * 100.0
        return Cmyk(*_round_all(cmyk))

    def to_xyz(self, config: Optional[ConversionConfig] = None) -> Xyz:
        config = config or DEFAULT_CONFIG
        xyz = colorspace.linear_rgb_to_xyz(colorspace.srgb_to_linear(self._srgb()))
        return Xyz(*_round_all(xyz, config.xyz_precision))

    def to_cielab(self, config: Optional[ConversionConfig] = None) -> CIELab:
        """CIELab via the rounded XYZ value."""
        return self.to_xyz(config).to_cielab(config)


@dataclass(frozen=True, slots=True)
class Rgba:
    """
    An 8-bit sRGB color with opacity.

    Attributes:
        red, green, blue: Channel values, whole numbers 0-255
        alpha: Opacity 0-1
    """
    red: int
    green: int
    blue: int
    alpha: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "red", _rgb_channel("Red", self.red))
        object.__setattr__(self, "green", _rgb_channel("Green", self.green))
        object.__setattr__(self, "blue", _rgb_channel("Blue", self.blue))
        object.__setattr__(self, "alpha", _alpha(self.alpha))

    @classmethod
    def from_string(cls, text: str) -> Rgba:
        """Parse ``rgba(r,g,b,a)``."""
        red, green, blue, alpha = parse_functional(
            text, "rgba", (Channel.INTEGER,) * 3 + (Channel.NUMBER,)
        )
        return cls(int(red), int(green), int(blue), float(alpha))

    def __str__(self) -> str:
        return f"rgba({self.red},{self.green},{self.blue},{format_number(self.alpha)})"

    def to_rgb(self) -> Rgb:
        return Rgb(self.red, self.green, self.blue)

    def to_rgba(self, alpha: Optional[float] = None) -> Rgba:
        return Rgba(self.red, self.green, self.blue, self.alpha if alpha is None else alpha)

    def to_hex(self, alpha: Optional[str] = None) -> Hex:
        return self.to_rgb().to_hex(alpha_to_hex(self.alpha) if alpha is None else alpha)

    def to_hsla(self, alpha: Optional[float] = None) -> Hsla:
        return self.to_rgb().to_hsla(self.alpha if alpha is None else alpha)


# =============================================================================
# HSL
# =============================================================================


@dataclass(frozen=True, slots=True)
class Hsl:
    """
    A color in HSL.

    Attributes:
        hue: Degrees 0-360 (not wrapped; 360 is the same color as 0)
        saturation: Percent 0-100
        lightness: Percent 0-100
    """
    hue: float
    saturation: float
    lightness: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "hue", bounded_number("Hue", self.hue, 0.0, 360.0))
        object.__setattr__(
            self, "saturation", bounded_number("Saturation", self.saturation, 0.0, 100.0)
        )
        object.__setattr__(
            self, "lightness", bounded_number("Lightness", self.lightness, 0.0, 100.0)
        )

    @classmethod
    def from_string(cls, text: str) -> Hsl:
        """Parse ``hsl(h,s%,l%)``; the percent signs are optional."""
        hue, saturation, lightness = parse_functional(
            text, "hsl", (Channel.NUMBER, Channel.PERCENT, Channel.PERCENT)
        )
        return cls(float(hue), float(saturation), float(lightness))

    def __str__(self) -> str:
        return (
            f"hsl({format_number(self.hue)},"
            f"{format_number(self.saturation)}%,"
            f"{format_number(self.lightness)}%)"
        )

    def to_hsl(self) -> Hsl:
        return Hsl(self.hue, self.saturation, self.lightness)

    def to_hsla(self, alpha: Optional[float] = None) -> Hsla:
        from colorvalue.schema.hsla import Hsla
        return Hsla(self.hue, self.saturation, self.lightness, 1.0 if alpha is None else alpha)

    def to_rgb(self) -> Rgb:
        """
        RGB form: hue / 360, saturation and lightness / 100, the standard
        piecewise HSL formula, then x 255 rounded half away from zero.
        """
        srgb = colorspace.hsl_to_srgb(
            [self.hue, self.saturation / 100.0, self.lightness / 100.0]
        )
        return Rgb(*_round_all(srgb * 255.0))


# =============================================================================
# Hex
# =============================================================================


@dataclass(frozen=True, slots=True)
class Hex:
    """
    A color as hex bytes.

    Attributes:
        red, green, blue: Two hex digits each, stored lowercase
        alpha: Two hex digits, "ff" (opaque) by default
    """
    red: str
    green: str
    blue: str
    alpha: str = "ff"

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not isinstance(value, str) or not _HEX_CHANNEL_RE.fullmatch(value):
                raise InvalidColorValue(
                    f"{name.capitalize()} must be two hex digits, got {value!r}"
                )
            object.__setattr__(self, name, value.lower())

    @classmethod
    def from_string(cls, text: str) -> Hex:
        """Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``."""
        return cls(*parse_hex(text))

    def __str__(self) -> str:
        # Opaque colors keep the short six-digit form
        suffix = "" if self.alpha == "ff" else self.alpha
        return f"#{self.red}{self.green}{self.blue}{suffix}"

    def to_hex(self, alpha: Optional[str] = None) -> Hex:
        return Hex(self.red, self.green, self.blue, self.alpha if alpha is None else alpha)

    def to_rgb(self) -> Rgb:
        return Rgb(int(self.red, 16), int(self.green, 16), int(self.blue, 16))

    def to_rgba(self, alpha: Optional[float] = None) -> Rgba:
        if alpha is None:
            alpha = round_half_away(int(self.alpha, 16) / 255, 2)
        return self.to_rgb().to_rgba(alpha)

    def to_hsla(self, alpha: Optional[float] = None) -> Hsla:
        return self.to_rgba().to_hsla(alpha)


# =============================================================================
# CMYK
# =============================================================================


@dataclass(frozen=True, slots=True)
class Cmyk:
    """
    A color in CMYK.

    Attributes:
        cyan, magenta, yellow, key: Percent 0-100
    """
    cyan: float
    magenta: float
    yellow: float
    key: float

    def __post_init__(self) -> None:
        for name in ("cyan", "magenta", "yellow", "key"):
            value = bounded_number(name.capitalize(), getattr(self, name), 0.0, 100.0)
            object.__setattr__(self, name, value)

    @classmethod
    def from_string(cls, text: str) -> Cmyk:
        """Parse ``cmyk(c%,m%,y%,k%)``; the percent signs are optional."""
        return cls(*(float(v) for v in parse_functional(text, "cmyk", (Channel.PERCENT,) * 4)))

    def __str__(self) -> str:
        channels = (self.cyan, self.magenta, self.yellow, self.key)
        return "cmyk(" + ",".join(f"{format_number(c)}%" for c in channels) + ")"

    def to_cmyk(self) -> Cmyk:
        return Cmyk(self.cyan, self.magenta, self.yellow, self.key)

    def to_rgb(self) -> Rgb:
        """RGB form: 255 (1 - C)(1 - K) per channel, rounded."""
        cmyk = np.array([self.cyan, self.magenta, self.yellow, self.key]) / 100.0
        return Rgb(*_round_all(colorspace.cmyk_to_srgb(cmyk) * 255.0))

    @property
    def red(self) -> int:
        return self.to_rgb().red

    @property
    def green(self) -> int:
        return self.to_rgb().green

    @property
    def blue(self) -> int:
        return self.to_rgb().blue


# =============================================================================
# XYZ
# =============================================================================

# XYZ of sRGB white under the 4-digit sRGB matrix
_XYZ_MAX = (95.05, 100.0, 108.9)


@dataclass(frozen=True, slots=True)
class Xyz:
    """
    A color in CIE XYZ, scaled so that white has Y = 100.

    Attributes:
        x: 0-95.05
        y: 0-100
        z: 0-108.9
    """
    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        for name, high in zip(("x", "y", "z"), _XYZ_MAX):
            value = bounded_number(name.upper(), getattr(self, name), 0.0, high)
            object.__setattr__(self, name, value)

    @classmethod
    def from_string(cls, text: str) -> Xyz:
        """Parse ``xyz(x,y,z)``."""
        return cls(*(float(v) for v in parse_functional(text, "xyz", (Channel.NUMBER,) * 3)))

    def __str__(self) -> str:
        return f"xyz({format_number(self.x)},{format_number(self.y)},{format_number(self.z)})"

    def to_xyz(self) -> Xyz:
        return Xyz(self.x, self.y, self.z)

    def to_cielab(self, config: Optional[ConversionConfig] = None) -> CIELab:
        config = config or DEFAULT_CONFIG
        lab = colorspace.xyz_to_cielab(
            [self.x, self.y, self.z], config.white_point.as_tuple()
        )
        return CIELab(*_round_all(lab, config.lab_precision))

    def to_rgb(self) -> Rgb:
        """RGB form; colors outside the sRGB gamut are clipped."""
        return Rgb(*_round_all(colorspace.xyz_to_srgb_uint8([self.x, self.y, self.z])))


# =============================================================================
# CIELab
# =============================================================================


@dataclass(frozen=True, slots=True)
class CIELab:
    """
    A color in CIELab (D65 by default).

    Attributes:
        l: Lightness 0-100
        a: Green (-) to red (+), any finite number
        b: Blue (-) to yellow (+), any finite number
    """
    l: float
    a: float
    b: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "l", bounded_number("L", self.l, 0.0, 100.0))
        object.__setattr__(self, "a", bounded_number("a", self.a))
        object.__setattr__(self, "b", bounded_number("b", self.b))

    @classmethod
    def from_string(cls, text: str) -> CIELab:
        """Parse ``CIELab(l,a,b)``; the name is case-insensitive."""
        return cls(*(float(v) for v in parse_functional(text, "CIELab", (Channel.NUMBER,) * 3)))

    def __str__(self) -> str:
        return f"CIELab({format_number(self.l)},{format_number(self.a)},{format_number(self.b)})"

    def to_cielab(self) -> CIELab:
        return CIELab(self.l, self.a, self.b)

    def to_xyz(self, config: Optional[ConversionConfig] = None) -> Xyz:
        """
        XYZ form.

        Raises:
            InvalidColorValue: The color lies outside the XYZ domain of sRGB.
        """
        config = config or DEFAULT_CONFIG
        xyz = colorspace.cielab_to_xyz([self.l, self.a, self.b], config.white_point.as_tuple())
        return Xyz(*_round_all(xyz, config.xyz_precision))

    def to_rgb(self, config: Optional[ConversionConfig] = None) -> Rgb:
        """RGB form; colors outside the sRGB gamut are clipped."""
        config = config or DEFAULT_CONFIG
        xyz = colorspace.cielab_to_xyz([self.l, self.a, self.b], config.white_point.as_tuple())
        return Rgb(*_round_all(colorspace.xyz_to_srgb_uint8(xyz)))
