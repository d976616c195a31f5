"""Parse and format numbers with SI prefix suffixes (``2.5k``, ``300m``, ``1.2 µ``)."""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

from numfield.float_codec import INFINITY
from numfield.prefixes import MAX_EXPONENT, MIN_EXPONENT, SI_EXPONENTS, exponent_for, prefix_for

_SI_PATTERN = re.compile(
    r"(?P<sign>[+-]?)"
    r"(?P<int_part>[0-9]+(?: +[0-9]+)*)?"
    r"(?:[.,](?P<frac_part>[0-9]+(?: +[0-9]+)*)?)?"
    r"(?:[eE](?P<exp_part>[+-]?[0-9]+))?"
    r"(?: *(?P<prefix>[" + re.escape("".join(SI_EXPONENTS)) + r"]))?"
)


def parse_si(text: str | None, *, empty_value: float | None = math.nan) -> float | None:
    """Parse a number with an optional exponent and SI prefix.

    Spaces inside the digits are ignored (``"1 234.5k"``), either ``.`` or
    ``,`` works as the decimal point, and groups left out default to zero,
    so a lone ``"-"`` is ``-0.0``.

    Args:
        text: The raw user input.
        empty_value: Returned when ``text`` is ``None`` or empty.

    Returns:
        The parsed number; ``empty_value`` for empty input; ``None`` when the
        text is not a number at all.
    """
    if text is None or text == "":
        return empty_value

    # Spaces may only sit between digits or before the prefix, so no two
    # parts of the pattern compete for the same run of spaces.
    match = _SI_PATTERN.fullmatch(text.strip())
    if match is None:
        return None

    int_digits = (match["int_part"] or "").replace(" ", "") or "0"
    frac_digits = (match["frac_part"] or "").replace(" ", "") or "0"
    exponent = int(match["exp_part"] or 0) + exponent_for(match["prefix"] or "")
    # One decimal-to-float conversion keeps "300m" exactly 0.3.
    return float(f"{match['sign']}{int_digits}.{frac_digits}e{exponent}")


def format_si(value: float | None, *, significant_digits: int = 3) -> str:
    """Format a number scaled to the nearest SI prefix.

    The magnitude is brought into ``[1, 1000)`` in steps of 1000 and rounded
    to ``significant_digits``.  Beyond the prefix table (``y`` to ``Y``) the
    exponent saturates; above ``Y`` the significand is printed in full
    without fractional digits.

    Args:
        value: The number to format, or ``None``.
        significant_digits: Digits kept in the significand.

    Returns:
        Text like ``"2.5 k"`` or ``"300 n"``; the unit magnitude keeps the
        separating space (``"5 "``).  ``None`` gives ``""`` and zero ``"0"``.
    """
    if value is None:
        return ""
    if value == 0:
        return "0"
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return INFINITY if value > 0 else "-" + INFINITY

    sig = Decimal(str(abs(value)))
    exponent = 0
    while sig >= 1000 and exponent < MAX_EXPONENT:
        sig = sig.scaleb(-3)
        exponent += 3
    while sig < 1 and exponent > MIN_EXPONENT:
        sig = sig.scaleb(3)
        exponent -= 3

    sign = "-" if value < 0 else ""
    with localcontext() as ctx:
        ctx.rounding = ROUND_HALF_UP
        if sig > 1000:
            digits = f"{sig:.0f}"
        else:
            ctx.prec = significant_digits
            digits = f"{(+sig).normalize():f}"
    return f"{sign}{digits} {prefix_for(exponent)}"
