# Copyright (c) 2026 Colorvalue
# SPDX-License-Identifier: MIT

"""
Color value types.

All types in this module are immutable (frozen dataclasses) and validate
their channels on construction. Each parses and prints one notation.
"""

from colorvalue.schema.color_values import (
    CIELab,
    Cmyk,
    Hex,
    Hsl,
    Rgb,
    Rgba,
    Xyz,
)
from colorvalue.schema.hsla import Hsla

__all__ = [
    # Core type
    "Hsla",
    # Sibling types
    "Rgb",
    "Rgba",
    "Hsl",
    "Hex",
    "Cmyk",
    "Xyz",
    "CIELab",
]
