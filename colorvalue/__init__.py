# Copyright (c) 2026 Colorvalue
# SPDX-License-Identifier: MIT

"""
Colorvalue -- Immutable color values with strict parsing and conversion.

Quick start::

    from colorvalue import Hsla

    c = Hsla.from_string("hsla(55, 55%, 67%, 0.5)")
    str(c)             # "hsla(55,55%,67%,0.5)"
    c.to_rgb()         # Rgb(red=217, green=209, blue=125)
    str(c.to_hex())    # "#d9d17d80"
    c.to_cielab()      # CIELab(l=..., a=..., b=...)
"""

from __future__ import annotations

import logging

__version__ = "1.0.0"

from colorvalue.config import D65, ConversionConfig, WhitePoint
from colorvalue.exceptions import InvalidColorValue
from colorvalue.factory import from_string
from colorvalue.schema import (
    CIELab,
    Cmyk,
    Hex,
    Hsl,
    Hsla,
    Rgb,
    Rgba,
    Xyz,
)

# Library logging: emit nothing unless the application configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core API
    "Hsla",
    "from_string",
    "InvalidColorValue",
    # Sibling types
    "Rgb",
    "Rgba",
    "Hsl",
    "Hex",
    "Cmyk",
    "Xyz",
    "CIELab",
    # Configuration
    "ConversionConfig",
    "WhitePoint",
    "D65",
    # Version
    "__version__",
]
