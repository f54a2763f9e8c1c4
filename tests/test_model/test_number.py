"""Tests for numbers, unit bookkeeping and number formatting."""

import math

import pytest

from sasscast.errors import SassTypeError
from sasscast.model import SassNumber, format_number
from sasscast.model.number import parse_unit


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


class TestFormatNumber:
    def test_integral_float(self):
        assert format_number(1.0) == "1"

    def test_trims_trailing_zeros(self):
        assert format_number(0.1 + 0.2) == "0.3"

    def test_ten_digit_precision(self):
        assert format_number(1 / 3) == "0.3333333333"

    def test_negative_zero(self):
        assert format_number(-0.0) == "0"

    def test_int_beyond_float_range(self):
        assert format_number(10**400) == "1" + "0" * 400
        assert SassNumber(-(10**400)).to_css() == "-1" + "0" * 400

    def test_special_values(self):
        assert format_number(math.inf) == "Infinity"
        assert format_number(-math.inf) == "-Infinity"
        assert format_number(math.nan) == "NaN"


# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------


class TestUnits:
    def test_parse_compound_unit(self):
        assert parse_unit("px*s/ms") == (("px", "s"), ("ms",))

    def test_parse_empty_unit(self):
        assert parse_unit("") == ((), ())

    def test_parse_percent(self):
        assert parse_unit("%") == (("%",), ())

    def test_parse_invalid_unit(self):
        with pytest.raises(ValueError):
            parse_unit("1px")

    def test_with_unit(self):
        n = SassNumber.with_unit(140, "px")
        assert n.numerator_units == ("px",)
        assert n.to_css() == "140px"

    def test_lists_stored_as_tuples(self):
        n = SassNumber(1, ["px"], ["s"])
        assert n.numerator_units == ("px",)
        assert n.denominator_units == ("s",)
        assert hash(n) == hash(SassNumber(1, ("px",), ("s",)))

    def test_unit_string_forms(self):
        assert SassNumber(1, ("px", "s"), ("ms",)).unit_string == "px*s/ms"
        assert SassNumber(1, (), ("s",)).unit_string == "s^-1"
        assert SassNumber(1, (), ("s", "ms")).unit_string == "(s*ms)^-1"
        assert SassNumber(1).unit_string == ""

    def test_units_are_literal(self):
        assert SassNumber(1, ("in",)) != SassNumber(96, ("px",))
        assert SassNumber(1, ("px",)) != SassNumber(1)

    def test_same_units_ignores_order(self):
        assert SassNumber(1, ("px", "s")).same_units(SassNumber(2, ("s", "px")))


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------


class TestArithmetic:
    def test_plus_same_units(self):
        assert SassNumber(1, ("px",)).plus(SassNumber(2, ("px",))) == SassNumber(3, ("px",))

    def test_plus_unitless_adopts_units(self):
        assert SassNumber(1).plus(SassNumber(2, ("px",))) == SassNumber(3, ("px",))

    def test_plus_incompatible_units(self):
        with pytest.raises(SassTypeError, match="Incompatible units"):
            SassNumber(1, ("px",)).plus(SassNumber(1, ("s",)))

    def test_times_multiplies_units(self):
        result = SassNumber(2, ("px",)).times(SassNumber(3, ("px",)))
        assert result.to_css() == "6px*px"

    def test_divide_cancels_units(self):
        result = SassNumber(6, ("px",)).divided_by(SassNumber(2, ("px",)))
        assert result == SassNumber(3)

    def test_divide_keeps_denominator(self):
        result = SassNumber(10, ("px",)).divided_by(SassNumber(2, ("s",)))
        assert result.to_css() == "5px/s"

    def test_divide_by_zero(self):
        assert SassNumber(1).divided_by(SassNumber(0)).to_css() == "Infinity"
        assert math.isnan(SassNumber(0).divided_by(SassNumber(0)).value)

    def test_modulo_takes_sign_of_divisor(self):
        assert SassNumber(-1).modulo(SassNumber(3)).value == 2
        assert SassNumber(7).modulo(SassNumber(3)).value == 1

    def test_negated(self):
        assert SassNumber(5, ("px",)).negated().to_css() == "-5px"

    def test_compare(self):
        assert SassNumber(1, ("px",)).compare(SassNumber(2, ("px",))) < 0


# ---------------------------------------------------------------------------
# Assertions
# ---------------------------------------------------------------------------


class TestAssertions:
    def test_assert_int(self):
        assert SassNumber(2.0).assert_int() == 2

    def test_assert_int_rejects_fraction(self):
        with pytest.raises(SassTypeError, match="is not an integer"):
            SassNumber(2.5).assert_int("n")

    def test_assert_unitless(self):
        with pytest.raises(SassTypeError, match="to have no units"):
            SassNumber(1, ("px",)).assert_unitless("value")

    def test_assert_string_on_number(self):
        with pytest.raises(SassTypeError, match=r"\$module: 1 is not a string"):
            SassNumber(1).assert_string("module")
