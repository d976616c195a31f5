"""Tests for the SI prefix codec and prefix table."""

from __future__ import annotations

import math
import random
import time

import pytest

from numfield.prefixes import SI_PREFIXES, exponent_for, prefix_for
from numfield.si import format_si, parse_si


class TestPrefixTable:
    """Tests for the bidirectional prefix lookup."""

    def test_kilo(self):
        assert prefix_for(3) == "k"
        assert exponent_for("k") == 3

    def test_unit_has_empty_symbol(self):
        assert prefix_for(0) == ""
        assert exponent_for("") == 0

    def test_micro_spellings(self):
        """The micro sign, Greek mu and ASCII 'u' all mean 10^-6."""
        assert prefix_for(-6) == "µ"
        assert exponent_for("µ") == -6
        assert exponent_for("μ") == -6
        assert exponent_for("u") == -6

    def test_every_symbol_maps_back(self):
        for exponent, symbol in SI_PREFIXES.items():
            assert exponent_for(symbol) == exponent

    def test_range(self):
        assert min(SI_PREFIXES) == -24
        assert max(SI_PREFIXES) == 24

    def test_unknown_exponent(self):
        with pytest.raises(KeyError):
            prefix_for(2)


class TestParseSi:
    """Tests for parse_si."""

    def test_kilo(self):
        assert parse_si("2.5k") == 2500

    def test_milli(self):
        assert parse_si("300m") == 0.3

    def test_plain_number(self):
        assert parse_si("42") == 42

    def test_space_before_prefix(self):
        assert parse_si("1.2 µ") == 1.2e-6

    def test_surrounding_whitespace(self):
        assert parse_si("  7  ") == 7

    def test_grouped_digits(self):
        """Spaces inside the digits are thousands grouping."""
        assert parse_si("1 234.5k") == 1234500

    def test_comma_decimal_point(self):
        assert parse_si("1,5M") == 1500000

    def test_negative_with_exponent(self):
        assert parse_si("-2.5e3") == -2500

    def test_exponent_and_prefix_add_up(self):
        assert parse_si("1e-3k") == 1

    def test_ascii_micro(self):
        assert parse_si("3u") == 3e-6

    def test_prefixes_are_case_sensitive(self):
        assert parse_si("1m") == 0.001
        assert parse_si("1M") == 1e6
        assert parse_si("1K") is None

    def test_exa_prefix_versus_exponent(self):
        """A bare 'E' is the exa prefix; followed by digits it is an exponent."""
        assert parse_si("1E") == 1e18
        assert parse_si("1E3") == 1000

    @pytest.mark.parametrize("exponent", sorted(SI_PREFIXES))
    def test_every_prefix(self, exponent: int):
        assert parse_si(f"1{SI_PREFIXES[exponent]}") == float(f"1e{exponent}")

    def test_empty_gives_nan_by_default(self):
        assert math.isnan(parse_si(""))

    def test_none_gives_empty_value(self):
        assert math.isnan(parse_si(None))

    def test_custom_empty_value(self):
        assert parse_si("", empty_value=0.0) == 0.0

    def test_garbage_is_unparseable(self):
        """Garbage gives None, which is not the empty value."""
        result = parse_si("abc")
        assert result is None

    @pytest.mark.parametrize("text", ["1.2.3", "5 kg", "k5", "--1", "1e", "12x"])
    def test_invalid_grammar(self, text: str):
        assert parse_si(text) is None

    def test_lone_sign_is_negative_zero(self):
        """Missing groups default to zero."""
        result = parse_si("-")
        assert result == 0
        assert math.copysign(1, result) == -1

    def test_lone_point_is_zero(self):
        assert parse_si(".") == 0

    def test_lone_prefix_is_zero(self):
        assert parse_si("k") == 0

    def test_huge_exponent_overflows_to_infinity(self):
        assert parse_si("1e400") == math.inf

    def test_long_run_of_spaces_fails_fast(self):
        """A pasted run of spaces before garbage is rejected in linear time."""
        start = time.perf_counter()
        assert parse_si(" " * 1000 + "x") is None
        assert parse_si("1" + " " * 1000 + "x") is None
        assert parse_si("1 " * 500 + ".5 x") is None
        assert time.perf_counter() - start < 1.0

    def test_long_run_of_spaces_before_prefix(self):
        assert parse_si("5" + " " * 1000 + "k") == 5000

    def test_spaces_only_parse_as_zero(self):
        """Whitespace is not empty input; every group defaults to zero."""
        assert parse_si("   ") == 0


class TestFormatSi:
    """Tests for format_si."""

    def test_kilo(self):
        assert format_si(2500) == "2.5 k"

    def test_zero(self):
        assert format_si(0) == "0"

    def test_nano(self):
        assert format_si(0.0000003) == "300 n"

    def test_none_is_empty(self):
        assert format_si(None) == ""

    def test_unit_magnitude_keeps_space(self):
        assert format_si(5) == "5 "

    def test_negative(self):
        assert format_si(-2500) == "-2.5 k"

    def test_rounds_to_significant_digits(self):
        assert format_si(1234567) == "1.23 M"

    def test_rounds_half_away_from_zero(self):
        assert format_si(1235) == "1.24 k"

    def test_more_significant_digits(self):
        assert format_si(123456.789, significant_digits=5) == "123.46 k"

    def test_no_trailing_zeros(self):
        assert format_si(1000) == "1 k"

    def test_exact_milli(self):
        assert format_si(0.001) == "1 m"

    def test_exact_micro(self):
        """Scaling is exact, so 1e-6 does not come out as '1000 n'."""
        assert format_si(1e-6) == "1 µ"

    def test_saturates_above_largest_prefix(self):
        """Past 'Y' the significand is printed in full without rounding."""
        assert format_si(1.5e30) == "1500000 Y"

    def test_saturates_below_smallest_prefix(self):
        assert format_si(1e-30) == "0.000001 y"

    def test_infinity(self):
        assert format_si(math.inf) == "∞"
        assert format_si(-math.inf) == "-∞"

    def test_nan(self):
        assert format_si(math.nan) == "NaN"


def _samples(count: int = 200) -> list[float]:
    """Nonzero values spread log-uniformly over [-1e20, 1e20]."""
    rng = random.Random(1234)
    values = []
    for _ in range(count):
        magnitude = 10 ** rng.uniform(-20, 20)
        values.append(magnitude if rng.random() < 0.5 else -magnitude)
    return values


@pytest.mark.parametrize("value", _samples())
def test_round_trip_to_four_significant_digits(value: float):
    """Parsing a formatted value agrees with it to the kept precision."""
    recovered = parse_si(format_si(value, significant_digits=4))
    assert math.isclose(recovered, value, rel_tol=5.001e-4)


@pytest.mark.parametrize("value", [1e-30, 2.5e-25, 1e26, 9.99e26])
def test_round_trip_outside_prefix_range(value: float):
    """Saturated renderings still parse back."""
    recovered = parse_si(format_si(value))
    assert math.isclose(recovered, value, rel_tol=5e-3)
