"""Format/parse pairs with their options bound, ready for an editable field."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Callable, Generic, TypeVar

from numfield.float_codec import format_float, parse_float
from numfield.options import (
    FloatFormatOptions,
    FloatParseOptions,
    PercentFormatOptions,
    SiFormatOptions,
    SiParseOptions,
)
from numfield.percent import format_percent, parse_percent
from numfield.si import format_si, parse_si

T = TypeVar("T")


@dataclass(frozen=True)
class Codec(Generic[T]):
    """A matching pair of functions between a typed value and its text."""

    format: Callable[[T], str]
    parse: Callable[[str], T]


def _float_parse_kwargs(options: FloatParseOptions) -> dict:
    return {"ignore_chars": options.ignore_chars, "decimal_point": options.decimal_point}


def text_codec() -> Codec[str]:
    """Return the codec for plain text fields: identity both ways."""
    return Codec(format=str, parse=lambda text: text)


def float_codec(
    format_options: FloatFormatOptions | None = None,
    parse_options: FloatParseOptions | None = None,
) -> Codec[float]:
    """Return the plain decimal codec for the given options."""
    fmt = format_options or FloatFormatOptions()
    parse = parse_options or FloatParseOptions()
    return Codec(
        format=partial(
            format_float,
            decimals=fmt.decimals,
            thousand_sep=fmt.thousand_sep,
            decimal_point=fmt.decimal_point,
            explicit_plus=fmt.explicit_plus,
        ),
        parse=partial(parse_float, **_float_parse_kwargs(parse)),
    )


def percent_codec(
    format_options: PercentFormatOptions | None = None,
    parse_options: FloatParseOptions | None = None,
) -> Codec[float]:
    """Return the percentage codec for the given options."""
    fmt = format_options or PercentFormatOptions()
    parse = parse_options or FloatParseOptions()
    return Codec(
        format=partial(format_percent, decimals=fmt.decimals),
        parse=partial(parse_percent, **_float_parse_kwargs(parse)),
    )


def si_codec(
    format_options: SiFormatOptions | None = None,
    parse_options: SiParseOptions | None = None,
) -> Codec[float | None]:
    """Return the SI prefix codec for the given options."""
    fmt = format_options or SiFormatOptions()
    parse = parse_options or SiParseOptions()
    return Codec(
        format=partial(format_si, significant_digits=fmt.significant_digits),
        parse=partial(parse_si, empty_value=parse.empty_value),
    )
