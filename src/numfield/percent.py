"""Percentages as a x100 view over the float codec."""

from __future__ import annotations

from numfield.float_codec import format_float, parse_float


def parse_percent(text: str, **parse_options) -> float:
    """Parse a percentage such as ``"12.5"`` into the fraction ``0.125``.

    Keyword arguments are passed through to :func:`parse_float`.
    """
    return parse_float(text, **parse_options) / 100


def format_percent(value: float, *, decimals: int = 2, **format_options) -> str:
    """Format a fraction such as ``0.125`` as the percentage ``"12.50"``.

    Keyword arguments other than ``decimals`` are passed through to
    :func:`format_float`.
    """
    return format_float(value * 100, decimals=decimals, **format_options)
