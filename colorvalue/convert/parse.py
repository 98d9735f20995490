# Copyright (c) 2026 Colorvalue
# SPDX-License-Identifier: MIT

"""
Parsers for textual color notations.

Functional notation: ``name(c1, c2, ...)``, e.g. ``hsla(205, 35%, 17%, 0.78)``.
Whitespace is allowed around commas and inside the parentheses, the
function name is case-insensitive, digits are ASCII only, and the match is
anchored to the whole trimmed string: ``"abc hsla(...) abc"`` is rejected.

Hex notation: ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``.

Parsers only check the shape of the text. Channel domains are validated by
the value type the tokens are handed to.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from functools import lru_cache

from colorvalue.exceptions import InvalidColorValue

logger = logging.getLogger(__name__)


_NUMBER = r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)"
_INTEGER = r"[-+]?\d+"

_HEX_RE = re.compile(
    r"#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})", re.IGNORECASE | re.ASCII
)


class Channel(Enum):
    """Token shape of one channel in a functional notation."""

    NUMBER = "number"    # 0.78, 205, .5
    PERCENT = "percent"  # 35 or 35% (the sign is cosmetic)
    INTEGER = "integer"  # 217


_CHANNEL_PATTERNS = {
    Channel.NUMBER: f"({_NUMBER})",
    Channel.PERCENT: f"({_NUMBER})%?",
    Channel.INTEGER: f"({_INTEGER})",
}


@lru_cache(maxsize=None)
def _functional_pattern(name: str, channels: tuple[Channel, ...]) -> re.Pattern:
    body = r"\s*,\s*".join(_CHANNEL_PATTERNS[channel] for channel in channels)
    return re.compile(rf"{re.escape(name)}\(\s*{body}\s*\)", re.IGNORECASE | re.ASCII)


def _reject(text: object, notation: str) -> InvalidColorValue:
    logger.debug("Rejected %s string %r", notation, text)
    return InvalidColorValue(f"String {text!r} is not a valid {notation} color")


def parse_functional(
    text: str,
    name: str,
    channels: tuple[Channel, ...],
) -> tuple[str, ...]:
    """
    Split a functional color notation into its channel tokens.

    Args:
        text: Input such as ``"  hsla( 205 , 35% , 17% , 0.89 ) "``
        name: Function name, e.g. "hsla"
        channels: Expected token shape of each channel, in order

    Returns:
        One numeric string per channel, percent signs removed.

    Raises:
        InvalidColorValue: The trimmed text is not exactly the notation.
    """
    if not isinstance(text, str):
        raise _reject(text, name)

    match = _functional_pattern(name, tuple(channels)).fullmatch(text.strip())
    if match is None:
        raise _reject(text, name)
    return match.groups()


def parse_hex(text: str) -> tuple[str, str, str, str]:
    """
    Split a hex color into lowercase two-digit (red, green, blue, alpha).

    Shorthand digits are doubled (``#f80`` -> ``ff``, ``88``, ``00``); alpha
    defaults to ``ff`` when absent.

    Raises:
        InvalidColorValue: The trimmed text is not a hex color.
    """
    if not isinstance(text, str):
        raise _reject(text, "hex")

    match = _HEX_RE.fullmatch(text.strip())
    if match is None:
        raise _reject(text, "hex")

    digits = match.group(1).lower()
    if len(digits) in (3, 4):
        digits = "".join(d * 2 for d in digits)
    if len(digits) == 6:
        digits += "ff"
    return digits[0:2], digits[2:4], digits[4:6], digits[6:8]
