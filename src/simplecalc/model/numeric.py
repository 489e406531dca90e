"""
Numeric Policy
==============
Text <-> number conversion and the four binary operations.

Operands live in the display as text. Parsing is explicit: the longest leading
decimal literal is used and anything without one (empty text, the error
sentinel, 'inf') counts as zero. Arithmetic runs in single precision.
"""
from __future__ import annotations

import logging
import re

import numpy as np

logger = logging.getLogger(__name__)

NUMBER_DTYPE = np.float32

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_operand(text: str) -> np.float32:
    """
    Parse display text into a number, falling back to zero.

    Only the leading numeric prefix is read, so '1.2.3' parses as 1.2 and
    '12abc' as 12.

    Args:
        text: Raw display or expression token.

    Returns:
        The parsed value, or 0.0 when the text has no numeric prefix.
    """
    match = _LEADING_NUMBER.match(text)
    if match is None:
        logger.debug(f"No numeric prefix in {text!r}, using zero.")
        return NUMBER_DTYPE(0.0)

    with np.errstate(over="ignore"):
        return NUMBER_DTYPE(float(match.group(1)))


def apply_operator(glyph: str, first: np.float32, second: np.float32) -> np.float32:
    """
    Combine two operands with an operator glyph.

    Unknown glyphs add, like '+'. Division by zero is not checked here and
    yields inf or nan.
    """
    with np.errstate(all="ignore"):
        match glyph:
            case "-":
                return NUMBER_DTYPE(first - second)
            case "X":
                return NUMBER_DTYPE(first * second)
            case "/":
                return NUMBER_DTYPE(first / second)
            case _:
                return NUMBER_DTYPE(first + second)


def format_result(value: np.float32) -> str:
    """Shortest text that round-trips the value, e.g. '3.0', '0.5', 'inf'."""
    return str(NUMBER_DTYPE(value))
