"""Parse and format plain decimal numbers with configurable separators."""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

INFINITY = "∞"

# Longest leading run that reads as a float: sign, digits, fraction, exponent.
_NUMERIC_PREFIX = re.compile(
    r"\s*[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)


def parse_float(
    text: str,
    *,
    ignore_chars: str | re.Pattern[str] = r"[ ]",
    decimal_point: str | re.Pattern[str] = r"[.,]",
) -> float:
    """Parse user input as a plain decimal number.

    Parsing is lenient: trailing characters after the leading number are
    ignored, and input without any leading number gives ``0.0`` so that a
    field holding only ``"."`` or ``"-"`` stays editable.

    Args:
        text: The raw user input (e.g. ``"1 234,5"``, ``".5"``, ``"∞"``).
        ignore_chars: Pattern of characters removed before parsing.
        decimal_point: Pattern of characters treated as the decimal point.

    Returns:
        The parsed number, ``inf`` for the infinity glyph, or ``0.0``.
    """
    text = re.sub(ignore_chars, "", text)
    text = re.sub(decimal_point, ".", text)
    if text in (INFINITY, "+" + INFINITY):
        return math.inf
    if text == "-" + INFINITY:
        return -math.inf

    match = _NUMERIC_PREFIX.match(text)
    if match is None:
        return 0.0
    return float(match.group())


def _group_from_right(digits: str, sep: str) -> str:
    """Split a digit string into runs of 3 counted from the right."""
    if not sep or len(digits) <= 3:
        return digits
    head = len(digits) % 3
    runs = [digits[i : i + 3] for i in range(head, len(digits), 3)]
    if head:
        runs.insert(0, digits[:head])
    return sep.join(runs)


def _group_from_left(digits: str, sep: str) -> str:
    """Split a digit string into runs of 3 counted from the left."""
    if not sep:
        return digits
    return sep.join(digits[i : i + 3] for i in range(0, len(digits), 3))


def format_float(
    value: float,
    *,
    decimals: int = 3,
    thousand_sep: str = "",
    decimal_point: str = ".",
    explicit_plus: bool = False,
) -> str:
    """Format a number with a fixed count of fractional digits.

    Both the integer and the fractional digits are grouped in runs of three
    joined by ``thousand_sep``; the integer part from the right, the
    fractional part from the left (``"1 234.567 8"``).

    Args:
        value: The number to format.
        decimals: Count of fractional digits; halves round away from zero.
        thousand_sep: Separator between digit groups.
        decimal_point: Separator between the integer and fractional parts.
        explicit_plus: Prefix positive values with ``+``.

    Returns:
        The formatted number, ``"∞"``/``"-∞"`` for infinities, ``"NaN"`` for NaN.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return INFINITY if value > 0 else "-" + INFINITY

    sign = "-" if value < 0 else ("+" if explicit_plus else "")
    magnitude = Decimal(str(abs(value)))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, magnitude.adjusted() + decimals + 2)
        rounded = magnitude.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)

    int_digits, _, frac_digits = f"{rounded:f}".partition(".")
    result = sign + _group_from_right(int_digits, thousand_sep)
    if decimals:
        result += decimal_point + _group_from_left(frac_digits, thousand_sep)
    return result
