"""
Display Formatter for PocketCalc
Turns numbers into display text and display text back into operands
"""
import math
import re
from decimal import Decimal

import config

# Leading numeric prefix, parsed leniently: "12abc" reads as 12
_NUMERIC_PREFIX = re.compile(
    r'^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))'
)


def format_number(value):
    """Render a result with bounded precision.

    Non-finite values become the divide-by-zero sentinel. Finite values are
    rounded to ``config.DISPLAY_PRECISION`` significant digits and shown as the
    shortest equivalent decimal string, so ``0.1 + 0.2`` reads ``0.3``.
    Magnitudes below 1e-6 or from 1e21 up use exponent form (``1e-7``).
    """
    if not math.isfinite(value):
        return config.DIVIDE_BY_ZERO_TEXT

    rounded = float(f"{value:.{config.DISPLAY_PRECISION}g}")
    if rounded == 0:
        # Covers -0.0 as well
        return "0"
    if rounded.is_integer() and abs(rounded) < 1e21:
        return str(int(rounded))

    text = repr(rounded)
    if abs(rounded) >= 1e-6 and abs(rounded) < 1e21:
        return format(Decimal(text), "f")

    mantissa, exponent = text.split("e")
    return f"{mantissa}e{int(exponent):+d}"


def is_error_sentinel(text):
    """True if the display is showing one of the error strings"""
    return text in config.ERROR_SENTINELS


def parse_operand(text):
    """Read the number on the display, NaN for errors or unparseable text"""
    if is_error_sentinel(text):
        return math.nan

    match = _NUMERIC_PREFIX.match(text)
    if not match:
        return math.nan
    return float(match.group(1).replace("Infinity", "inf"))
