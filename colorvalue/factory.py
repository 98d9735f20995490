# Copyright (c) 2026 Colorvalue
# SPDX-License-Identifier: MIT

"""Build a color value from any supported notation."""

from __future__ import annotations

import logging
from typing import Union

from colorvalue.exceptions import InvalidColorValue
from colorvalue.schema import CIELab, Cmyk, Hex, Hsl, Hsla, Rgb, Rgba, Xyz

logger = logging.getLogger(__name__)

ColorValue = Union[Rgb, Rgba, Hsl, Hsla, Hex, Cmyk, Xyz, CIELab]

# Notation prefix (lowercase) -> type that parses it
_NOTATIONS = (
    ("#", Hex),
    ("rgba(", Rgba),
    ("rgb(", Rgb),
    ("hsla(", Hsla),
    ("hsl(", Hsl),
    ("cmyk(", Cmyk),
    ("xyz(", Xyz),
    ("cielab(", CIELab),
)


def from_string(text: str) -> ColorValue:
    """
    Parse a color in any supported notation.

    The notation is picked from the start of the trimmed text, then the
    matching type's from_string does the strict parse.

    Examples::

        from_string("#d9d17d")                  # Hex
        from_string("hsla(55, 55%, 67%, 0.5)")  # Hsla
        from_string("CIELab(30.2,-3.07,10.98)") # CIELab

    Raises:
        InvalidColorValue: No notation matches, or the matching type
            rejects the text.
    """
    if not isinstance(text, str):
        raise InvalidColorValue(f"Color must be a string, got {text!r}")

    head = text.strip().lower()
    for prefix, color_type in _NOTATIONS:
        if head.startswith(prefix):
            logger.debug("Parsing %r as %s", text, color_type.__name__)
            return color_type.from_string(text)

    raise InvalidColorValue(f"String {text!r} is not a supported color notation")
