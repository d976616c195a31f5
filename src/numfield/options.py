"""Immutable format options records for each codec."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from numfield.errors import OptionsError


def _check_decimals(decimals: int) -> None:
    if not isinstance(decimals, int) or isinstance(decimals, bool) or decimals < 0:
        raise OptionsError(f"decimals must be a non-negative integer, got {decimals!r}")


@dataclass(frozen=True)
class FloatParseOptions:
    """How raw text is cleaned before it is read as a plain decimal.

    Both fields are regular expressions, given as a pattern string or a
    compiled pattern.  Every match of ``ignore_chars`` is removed and every
    match of ``decimal_point`` is replaced by ``.``.
    """

    ignore_chars: str | re.Pattern[str] = r"[ ]"
    decimal_point: str | re.Pattern[str] = r"[.,]"

    def __post_init__(self) -> None:
        for name in ("ignore_chars", "decimal_point"):
            pattern = getattr(self, name)
            if isinstance(pattern, re.Pattern):
                continue
            try:
                re.compile(pattern)
            except (re.error, TypeError) as exc:
                raise OptionsError(f"{name} is not a valid pattern: {pattern!r}") from exc


@dataclass(frozen=True)
class FloatFormatOptions:
    """How a plain decimal is rendered."""

    decimals: int = 3
    thousand_sep: str = ""
    decimal_point: str = "."
    explicit_plus: bool = False

    def __post_init__(self) -> None:
        _check_decimals(self.decimals)
        for name in ("thousand_sep", "decimal_point"):
            sep = getattr(self, name)
            if not isinstance(sep, str):
                raise OptionsError(f"{name} must be a string, got {sep!r}")
        if not self.decimal_point:
            raise OptionsError("decimal_point must not be empty")
        if not isinstance(self.explicit_plus, bool):
            raise OptionsError(f"explicit_plus must be a boolean, got {self.explicit_plus!r}")


@dataclass(frozen=True)
class PercentFormatOptions:
    """How a fraction is rendered as a percentage."""

    decimals: int = 2

    def __post_init__(self) -> None:
        _check_decimals(self.decimals)


@dataclass(frozen=True)
class SiParseOptions:
    """What an SI parse returns for empty input."""

    empty_value: float | None = math.nan


@dataclass(frozen=True)
class SiFormatOptions:
    """How many significant digits an SI rendering keeps."""

    significant_digits: int = 3

    def __post_init__(self) -> None:
        digits = self.significant_digits
        if not isinstance(digits, int) or isinstance(digits, bool) or digits < 1:
            raise OptionsError(
                f"significant_digits must be a positive integer, got {digits!r}"
            )
