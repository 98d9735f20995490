# Copyright (c) 2026 Colorvalue
# SPDX-License-Identifier: MIT

"""
Pure conversion and parsing routines.

Nothing in this package knows about the value types; the types in
colorvalue.schema call into it.
"""

from colorvalue.convert.numbers import format_number, round_half_away
from colorvalue.convert.parse import Channel, parse_functional, parse_hex

__all__ = [
    "Channel",
    "format_number",
    "parse_functional",
    "parse_hex",
    "round_half_away",
]
