# Copyright (c) 2026 Colorvalue
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chains:
    HSL → sRGB → Linear RGB → XYZ (D65) → CIELab
    sRGB → CMYK, sRGB → HSL
and their inverses.

References:
- HSL: https://en.wikipedia.org/wiki/HSL_and_HSV#HSL_to_RGB
- sRGB: IEC 61966-2-1
- CIELab: CIE 15:2004

All functions take and return NumPy arrays of shape (..., 3) (CMYK: (..., 4)),
so a single color and a whole pixel array go through the same code. No
rounding happens here; the value types round the results.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from colorvalue.config import D65


# =============================================================================
# HSL ↔ sRGB
# =============================================================================


def hsl_to_srgb(hsl: ArrayLike) -> NDArray[np.float64]:
    """
    Convert HSL to sRGB [0,1].

    chroma = (1 - |2L - 1|) * S
    X      = chroma * (1 - |(H / 60) mod 2 - 1|)
    m      = L - chroma / 2

    (R', G', B') is picked by the 60° sector the hue falls in; 360° lands
    in the last sector and yields the same color as 0°.

    Args:
        hsl: Array of shape (..., 3) with hue in degrees [0, 360],
            saturation and lightness in [0, 1]

    Returns:
        Array of shape (..., 3) with sRGB values [0, 1]
    """
    hsl = np.asarray(hsl, dtype=np.float64)

    h6 = hsl[..., 0] / 60.0
    s = hsl[..., 1]
    l = hsl[..., 2]

    chroma = (1.0 - np.abs(2.0 * l - 1.0)) * s
    x = chroma * (1.0 - np.abs(np.mod(h6, 2.0) - 1.0))
    m = l - chroma / 2.0
    zero = np.zeros_like(chroma)

    sectors = (
        np.stack([chroma, x, zero], axis=-1),
        np.stack([x, chroma, zero], axis=-1),
        np.stack([zero, chroma, x], axis=-1),
        np.stack([zero, x, chroma], axis=-1),
        np.stack([x, zero, chroma], axis=-1),
        np.stack([chroma, zero, x], axis=-1),
    )
    sector = np.clip(np.floor(h6), 0, 5).astype(np.intp)
    rgb = np.choose(np.expand_dims(sector, -1), sectors)

    return rgb + np.expand_dims(m, -1)


def srgb_to_hsl(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to HSL.

    Achromatic colors (max == min) get hue 0 and saturation 0.

    Returns:
        Array of shape (..., 3) with hue in degrees [0, 360),
        saturation and lightness in [0, 1]
    """
    srgb = np.asarray(srgb, dtype=np.float64)

    r = srgb[..., 0]
    g = srgb[..., 1]
    b = srgb[..., 2]

    high = np.max(srgb, axis=-1)
    low = np.min(srgb, axis=-1)
    delta = high - low
    l = (high + low) / 2.0

    chromatic = delta > 0.0
    safe_delta = np.where(chromatic, delta, 1.0)

    denominator = 1.0 - np.abs(2.0 * l - 1.0)
    s = np.where(chromatic, delta / np.where(denominator > 0.0, denominator, 1.0), 0.0)

    h = np.where(
        high == r,
        np.mod((g - b) / safe_delta, 6.0),
        np.where(high == g, (b - r) / safe_delta + 2.0, (r - g) / safe_delta + 4.0),
    )
    h = np.where(chromatic, h * 60.0, 0.0)

    return np.stack([h, s, l], axis=-1)


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Inverse of srgb_to_linear. Out-of-gamut values are clipped.
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(linear, 0.0)
    srgb = np.where(
        linear_safe <= 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055,
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# Linear RGB ↔ XYZ
# =============================================================================

# sRGB primaries, D65 white
_SRGB_TO_XYZ = np.array([
    [0.4124, 0.3576, 0.1805],
    [0.2126, 0.7152, 0.0722],
    [0.0193, 0.1192, 0.9505],
], dtype=np.float64)

_XYZ_TO_SRGB = np.linalg.inv(_SRGB_TO_XYZ)


def linear_rgb_to_xyz(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear RGB [0,1] to XYZ scaled to Y = 100 for white.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with XYZ values
    """
    rgb = np.asarray(rgb, dtype=np.float64) * 100.0
    return np.einsum('...j,ij->...i', rgb, _SRGB_TO_XYZ)


def xyz_to_linear_rgb(xyz: ArrayLike) -> NDArray[np.float64]:
    """
    Convert XYZ (Y = 100 for white) to linear RGB.

    Returns:
        Array of shape (..., 3) with linear RGB values, unclipped
    """
    xyz = np.asarray(xyz, dtype=np.float64) / 100.0
    return np.einsum('...j,ij->...i', xyz, _XYZ_TO_SRGB)


# =============================================================================
# XYZ ↔ CIELab
# =============================================================================

_EPSILON = (6.0 / 29.0) ** 3
_DELTA = 6.0 / 29.0


def _lab_f(t: NDArray[np.float64]) -> NDArray[np.float64]:
    # Cube root above the knee, linear segment below
    return np.where(
        t > _EPSILON,
        np.cbrt(t),
        t / (3.0 * _DELTA ** 2) + 4.0 / 29.0,
    )


def _lab_f_inv(f: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.where(
        f > _DELTA,
        f ** 3,
        3.0 * _DELTA ** 2 * (f - 4.0 / 29.0),
    )


def xyz_to_cielab(
    xyz: ArrayLike,
    white: tuple[float, float, float] = D65.as_tuple(),
) -> NDArray[np.float64]:
    """
    Convert XYZ to CIELab.

    L* = 116 f(Y/Yn) - 16
    a* = 500 (f(X/Xn) - f(Y/Yn))
    b* = 200 (f(Y/Yn) - f(Z/Zn))

    Args:
        xyz: Array of shape (..., 3) with XYZ values (Y = 100 for white)
        white: Reference white (Xn, Yn, Zn), D65 by default

    Returns:
        Array of shape (..., 3) with (L*, a*, b*)
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    f = _lab_f(xyz / np.asarray(white, dtype=np.float64))

    fx = f[..., 0]
    fy = f[..., 1]
    fz = f[..., 2]

    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)

    return np.stack([L, a, b], axis=-1)


def cielab_to_xyz(
    lab: ArrayLike,
    white: tuple[float, float, float] = D65.as_tuple(),
) -> NDArray[np.float64]:
    """
    Convert CIELab to XYZ.

    Inverse of xyz_to_cielab for the same reference white.
    """
    lab = np.asarray(lab, dtype=np.float64)

    fy = (lab[..., 0] + 16.0) / 116.0
    fx = fy + lab[..., 1] / 500.0
    fz = fy - lab[..., 2] / 200.0

    f = np.stack([fx, fy, fz], axis=-1)
    return _lab_f_inv(f) * np.asarray(white, dtype=np.float64)


# =============================================================================
# sRGB ↔ CMYK
# =============================================================================


def srgb_to_cmyk(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to CMYK [0,1].

    k = min(1 - R, 1 - G, 1 - B); pure black maps to (0, 0, 0, 1).

    Returns:
        Array of shape (..., 4) with (C, M, Y, K)
    """
    srgb = np.asarray(srgb, dtype=np.float64)

    complement = 1.0 - srgb
    k = np.min(complement, axis=-1)
    black = k >= 1.0
    scale = np.where(black, 1.0, 1.0 - k)

    cmy = (complement - np.expand_dims(k, -1)) / np.expand_dims(scale, -1)
    cmy = np.where(np.expand_dims(black, -1), 0.0, cmy)

    return np.concatenate([cmy, np.expand_dims(k, -1)], axis=-1)


def cmyk_to_srgb(cmyk: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CMYK [0,1] to sRGB [0,1].

    R = (1 - C)(1 - K), and likewise for G and B.
    """
    cmyk = np.asarray(cmyk, dtype=np.float64)
    k = cmyk[..., 3:4]
    return (1.0 - cmyk[..., :3]) * (1.0 - k)


# =============================================================================
# Convenience: full chains
# =============================================================================


def srgb_uint8_to_xyz(pixels: ArrayLike) -> NDArray[np.float64]:
    """
    Convert 8-bit sRGB [0,255] to XYZ.

    Full chain: sRGB → Linear RGB → XYZ
    """
    srgb = np.asarray(pixels, dtype=np.float64) / 255.0
    return linear_rgb_to_xyz(srgb_to_linear(srgb))


def xyz_to_srgb_uint8(xyz: ArrayLike) -> NDArray[np.float64]:
    """
    Convert XYZ to sRGB scaled to [0,255], unrounded.

    Full chain: XYZ → Linear RGB → sRGB (gamut clipped)
    """
    return linear_to_srgb(xyz_to_linear_rgb(xyz)) * 255.0
