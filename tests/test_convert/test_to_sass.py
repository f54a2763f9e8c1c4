"""Tests for converting Python data into stylesheet values."""

from concurrent.futures import Future
from dataclasses import dataclass
from fractions import Fraction

import pytest

from sasscast import to_foreign, to_sass
from sasscast.model import (
    SassColor,
    SassList,
    SassMap,
    SassNumber,
    SassString,
    sass_false,
    sass_null,
    sass_true,
)
from sasscast.options import ToSassOptions


@dataclass
class Spacing:
    small: int
    large: str


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------


class TestScalars:
    def test_none(self):
        assert to_sass(None) is sass_null

    def test_booleans(self):
        assert to_sass(True) is sass_true
        assert to_sass(False) is sass_false

    def test_numbers(self):
        assert to_sass(1) == SassNumber(1)
        assert to_sass(1.5) == SassNumber(1.5)
        assert to_sass(Fraction(1, 2)) == SassNumber(0.5)

    def test_string_quoted_by_default(self):
        assert to_sass("foo") == SassString("'foo'")

    def test_string_quote_char(self):
        assert to_sass("foo", ToSassOptions(quote_char='"')) == SassString('"foo"')

    def test_string_unquoted(self):
        assert to_sass("foo", ToSassOptions(quote_char=None)) == SassString("foo")

    def test_already_quoted_string_keeps_delimiter(self):
        assert to_sass('"foo"') == SassString('"foo"')

    def test_stylesheet_value_passes_through(self):
        value = SassNumber(1, ("px",))
        assert to_sass(value) is value

    def test_unsupported_type_is_null(self):
        assert to_sass(object()) is sass_null

    def test_alias(self):
        assert to_foreign is to_sass


class TestParseUnquotedStrings:
    options = ToSassOptions(parse_unquoted_strings=True)

    def test_color(self):
        assert to_sass("rgb(100,20,255)", self.options) == SassColor(100, 20, 255)

    def test_hex_color_keeps_spelling(self):
        assert to_sass("#FF0000", self.options).to_css() == "#FF0000"

    def test_scientific_number(self):
        assert to_sass("1e3", self.options) == SassNumber(1000)

    def test_number(self):
        assert to_sass("10px", self.options) == SassNumber(10, ("px",))

    def test_other_text_stays_a_string(self):
        assert to_sass("not a color", self.options) == to_sass("not a color")

    def test_identifier_stays_quoted(self):
        assert to_sass("bold", self.options) == SassString("'bold'")

    def test_quoted_text_is_not_parsed(self):
        assert to_sass("'10px'", self.options) == SassString("'10px'")


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------


class TestCollections:
    def test_list(self):
        value = to_sass([2, "foo"])
        assert value == SassList([SassNumber(2), SassString("'foo'")])
        assert value.to_css() == "2, 'foo'"

    def test_tuple(self):
        assert to_sass((1,)).to_css() == "(1,)"

    def test_empty_list(self):
        assert to_sass([]).to_css() == "()"

    def test_map_keys_become_strings(self):
        value = to_sass({0: "first", 1: "last"})
        assert isinstance(value, SassMap)
        assert value.keys == [SassString("'0'"), SassString("'1'")]
        assert value.to_css() == "('0': 'first', '1': 'last')"

    def test_huge_int_key(self):
        value = to_sass({10**400: 1})
        assert value.keys == [SassString("'1" + "0" * 400 + "'")]

    def test_map_keys_quoted_without_quote_char(self):
        value = to_sass({"a": "b"}, ToSassOptions(quote_char=None))
        assert value.to_css() == "('a': b)"

    def test_nested(self):
        value = to_sass({"sizes": [1, 2], "theme": {"dark": True}})
        assert value.to_css() == "('sizes': (1, 2), 'theme': ('dark': true))"

    def test_dataclass_becomes_map(self):
        value = to_sass(Spacing(small=4, large="2rem"))
        assert value.to_css() == "('small': 4, 'large': '2rem')"


# ---------------------------------------------------------------------------
# Callables
# ---------------------------------------------------------------------------


class TestCallables:
    def test_not_resolved_by_default(self):
        assert to_sass(lambda: 3) is sass_null

    def test_resolved_with_no_arguments(self):
        assert to_sass(lambda: 3, ToSassOptions(resolve_functions=True)) == SassNumber(3)

    def test_resolved_with_arguments(self):
        options = ToSassOptions(resolve_functions=[5, 7])
        assert to_sass(lambda a, b: a + b, options) == SassNumber(12)

    def test_nested_callables_resolved(self):
        options = ToSassOptions(resolve_functions=True)
        assert to_sass({"n": lambda: "x"}, options).to_css() == "('n': 'x')"

    def test_exceptions_propagate(self):
        def broken():
            raise ValueError("nope")

        with pytest.raises(ValueError, match="nope"):
            to_sass(broken, ToSassOptions(resolve_functions=True))


# ---------------------------------------------------------------------------
# Futures
# ---------------------------------------------------------------------------


class TestFutures:
    def test_future_input(self):
        pending = Future()
        result = to_sass(pending)
        assert isinstance(result, Future)
        assert not result.done()
        pending.set_result([1, "a"])
        assert result.result() == SassList([SassNumber(1), SassString("'a'")])

    def test_callable_returning_future(self):
        pending = Future()
        result = to_sass(lambda: pending, ToSassOptions(resolve_functions=True))
        pending.set_result("x")
        assert result.result() == SassString("'x'")

    def test_future_inside_list(self):
        pending = Future()
        result = to_sass([1, pending])
        assert isinstance(result, Future)
        pending.set_result(2)
        assert result.result() == SassList([SassNumber(1), SassNumber(2)])

    def test_future_inside_map(self):
        pending = Future()
        result = to_sass({"a": pending})
        pending.set_result(True)
        assert result.result().to_css() == "('a': true)"

    def test_failed_future(self):
        pending = Future()
        result = to_sass(pending)
        pending.set_exception(RuntimeError("lost"))
        with pytest.raises(RuntimeError, match="lost"):
            result.result()
