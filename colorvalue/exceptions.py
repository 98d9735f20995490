# Copyright (c) 2026 Colorvalue
# SPDX-License-Identifier: MIT

"""Errors raised by colorvalue."""


class InvalidColorValue(ValueError):
    """
    A color channel is out of its domain, or a string is not a valid notation.

    Subclasses ValueError so that callers that already guard against bad
    values keep working.
    """
