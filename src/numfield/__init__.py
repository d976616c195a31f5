"""Parse and format numbers typed into input fields.

Three codecs turn text into numbers and back: plain decimals
(:mod:`numfield.float_codec`), percentages (:mod:`numfield.percent`) and
SI-prefixed magnitudes (:mod:`numfield.si`).  :class:`EditableValue` keeps
the text being typed apart from the value the application owns.
"""

from __future__ import annotations

from numfield.codecs import Codec, float_codec, percent_codec, si_codec, text_codec
from numfield.editable import EditableValue
from numfield.errors import NumfieldError, OptionsError
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

__all__ = [
    "Codec",
    "EditableValue",
    "FloatFormatOptions",
    "FloatParseOptions",
    "NumfieldError",
    "OptionsError",
    "PercentFormatOptions",
    "SiFormatOptions",
    "SiParseOptions",
    "float_codec",
    "format_float",
    "format_percent",
    "format_si",
    "parse_float",
    "parse_percent",
    "parse_si",
    "percent_codec",
    "si_codec",
    "text_codec",
]
