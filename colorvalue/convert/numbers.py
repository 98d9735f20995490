# Copyright (c) 2026 Colorvalue
# SPDX-License-Identifier: MIT

"""Number helpers: channel validation, rounding, compact formatting."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

import numpy as np

from colorvalue.exceptions import InvalidColorValue


def round_half_away(value: float, ndigits: int = 0):
    """
    Round half away from zero (2.5 -> 3, -2.5 -> -3).

    Python's round() and np.round() round half to even, which disagrees with
    the reference results (0.5 * 255 must give 128). The float is rounded
    through its shortest decimal repr, so 1.005 rounds to 1.01.

    Returns an int when ndigits is 0, a float otherwise.
    """
    quantum = Decimal(1).scaleb(-ndigits)
    rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    if ndigits == 0:
        return int(rounded)
    # + 0.0 turns -0.0 into 0.0
    return float(rounded) + 0.0


def format_number(value: float) -> str:
    """
    Render a number in its most compact decimal form.

    55.0 -> "55", 0.4 -> "0.4", 1e-05 -> "0.00001". The output always parses
    back to the same float.
    """
    return np.format_float_positional(float(value) + 0.0, trim="-")


def bounded_number(
    label: str,
    value: object,
    low: float = -math.inf,
    high: float = math.inf,
    *,
    integral: bool = False,
):
    """
    Coerce a channel value and check it lies in [low, high].

    Args:
        label: Channel name used in the error message (e.g. "Hue")
        value: Anything float() accepts
        low, high: Inclusive bounds (unbounded by default)
        integral: Require a whole number and return it as int

    Raises:
        InvalidColorValue: Not a number (bools included), not finite, out of
            bounds, or fractional when integral is set.
    """
    if isinstance(value, (bool, np.bool_)):
        raise InvalidColorValue(f"{label} must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidColorValue(f"{label} must be a number, got {value!r}") from None

    if not math.isfinite(number):
        raise InvalidColorValue(f"{label} must be a finite number, got {value}")
    if not low <= number <= high:
        raise InvalidColorValue(
            f"{label} must be {format_number(low)}-{format_number(high)}, got {value}"
        )
    if integral:
        if not number.is_integer():
            raise InvalidColorValue(f"{label} must be a whole number, got {value}")
        return int(number)
    return number
