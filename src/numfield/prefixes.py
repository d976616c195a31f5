"""The fixed SI prefix table, usable in both directions."""

from __future__ import annotations

# Exponent of ten (a multiple of 3) to its SI symbol.
SI_PREFIXES: dict[int, str] = {
    24: "Y",
    21: "Z",
    18: "E",
    15: "P",
    12: "T",
    9: "G",
    6: "M",
    3: "k",
    0: "",
    -3: "m",
    -6: "µ",
    -9: "n",
    -12: "p",
    -15: "f",
    -18: "a",
    -21: "z",
    -24: "y",
}

MIN_EXPONENT = min(SI_PREFIXES)
MAX_EXPONENT = max(SI_PREFIXES)

# Symbol to exponent, including the ASCII and Greek spellings of micro.
SI_EXPONENTS: dict[str, int] = {
    symbol: exponent for exponent, symbol in SI_PREFIXES.items() if symbol
}
SI_EXPONENTS["u"] = -6
SI_EXPONENTS["μ"] = -6


def prefix_for(exponent: int) -> str:
    """Return the SI symbol for a power of ten.

    Args:
        exponent: A multiple of 3 between -24 and 24.

    Returns:
        The prefix symbol, or an empty string for exponent 0.

    Raises:
        KeyError: If the exponent is not in the table.
    """
    return SI_PREFIXES[exponent]


def exponent_for(symbol: str) -> int:
    """Return the power of ten for an SI symbol (0 for the empty symbol)."""
    if not symbol:
        return 0
    return SI_EXPONENTS[symbol]
