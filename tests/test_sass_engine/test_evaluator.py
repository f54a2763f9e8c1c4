"""Tests for stylesheet evaluation, built-ins and custom functions."""

from concurrent.futures import Future

import pytest

from sasscast.engine import compile_file, compile_string, evaluate_expression
from sasscast.errors import CompileError, SassTypeError
from sasscast.model import (
    SassColor,
    SassList,
    SassMap,
    SassNumber,
    SassString,
    Separator,
    sass_false,
    sass_null,
    sass_true,
)


def ev(source, functions=None):
    return evaluate_expression(source, functions)


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------


class TestArithmetic:
    def test_addition_with_units(self):
        assert ev("1px + 2px") == SassNumber(3, ("px",))

    def test_division_is_numeric(self):
        assert ev("10px / 2") == SassNumber(5, ("px",))

    def test_precedence(self):
        assert ev("2 + 3 * 4") == SassNumber(14)

    def test_negation(self):
        assert ev("-(2px)") == SassNumber(-2, ("px",))

    def test_modulo(self):
        assert ev("7 % 3") == SassNumber(1)

    def test_incompatible_units(self):
        with pytest.raises(SassTypeError, match="Incompatible units"):
            ev("1px + 1s")


class TestStringsAndLogic:
    def test_string_concatenation(self):
        assert ev('"a" + b') == SassString('"ab"')

    def test_unquoted_left_stays_unquoted(self):
        assert ev("a + 'b'") == SassString("ab")

    def test_number_plus_string(self):
        assert ev("1 + 'px'") == SassString("'1px'")

    def test_equality_ignores_quotes(self):
        assert ev('"a" == a') is sass_true

    def test_number_equality_needs_same_units(self):
        assert ev("1px == 1") is sass_false
        assert ev("1px != 2px") is sass_true

    def test_comparisons(self):
        assert ev("1 < 2") is sass_true
        assert ev("2px >= 3px") is sass_false

    def test_and_or(self):
        assert ev("null or 3") == SassNumber(3)
        assert ev("false and 3") is sass_false
        assert ev("not null") is sass_true

    def test_undefined_operation(self):
        with pytest.raises(SassTypeError, match="Undefined operation"):
            ev("true * 2")


class TestCollections:
    def test_comma_list(self):
        value = ev("1, 2")
        assert value == SassList([SassNumber(1), SassNumber(2)])
        assert value.separator is Separator.COMMA

    def test_map(self):
        value = ev("(a: 1, b: 2)")
        assert isinstance(value, SassMap)
        assert value.get(SassString("b")) == SassNumber(2)

    def test_duplicate_map_key(self):
        with pytest.raises(CompileError, match="Duplicate key"):
            ev("(a: 1, 'a': 2)")

    def test_bracketed(self):
        assert ev("[a b]").to_css() == "[a b]"


# ---------------------------------------------------------------------------
# Built-in functions
# ---------------------------------------------------------------------------


class TestBuiltins:
    def test_rgb(self):
        assert ev("rgb(100, 20, 255)") == SassColor(100, 20, 255)

    def test_rgba_percent_alpha(self):
        assert ev("rgba(0, 0, 0, 50%)").alpha == 0.5

    def test_hsl(self):
        assert ev("hsl(120deg, 100%, 25%)") == SassColor(0, 128, 0)

    def test_map_get_nested(self):
        assert ev("map-get((a: (b: 2)), a, b)") == SassNumber(2)

    def test_map_get_missing(self):
        assert ev("map-get((a: 1), z)") is sass_null

    def test_nth(self):
        assert ev("nth(10px 20px 30px, 2)") == SassNumber(20, ("px",))
        assert ev("nth((a, b, c), -1)") == SassString("c")

    def test_nth_out_of_range(self):
        with pytest.raises(CompileError, match="Invalid index"):
            ev("nth((a, b), 3)")

    def test_length(self):
        assert ev("length((a, b, c))") == SassNumber(3)
        assert ev("length(5px)") == SassNumber(1)
        assert ev("length((a: 1, b: 2))") == SassNumber(2)

    def test_type_of(self):
        assert ev("type-of(1px)") == SassString("number")
        assert ev("type-of((a: 1))") == SassString("map")
        assert ev("type-of(null)") == SassString("null")

    def test_unit_and_unitless(self):
        assert ev("unit(1px)") == SassString('"px"')
        assert ev("unitless(3)") is sass_true

    def test_quote_and_unquote(self):
        assert ev("quote(foo)") == SassString('"foo"')
        assert ev("unquote('foo')") == SassString("foo")

    def test_keyword_arguments(self):
        assert ev("rgb($blue: 3, $green: 2, $red: 1)") == SassColor(1, 2, 3)

    def test_wrong_argument_type(self):
        with pytest.raises(SassTypeError, match=r"\$map: 1 is not a map"):
            ev("map-get(1, a)")

    def test_unknown_function_is_plain_css(self):
        assert ev("translate(1px, 2px)") == SassString("translate(1px, 2px)")


# ---------------------------------------------------------------------------
# Custom functions
# ---------------------------------------------------------------------------


def double(args):
    (n,) = args
    return SassNumber(n.value * 2, n.numerator_units, n.denominator_units)


class TestCustomFunctions:
    def test_call(self):
        assert ev("double(4px)", {"double($n)": double}) == SassNumber(8, ("px",))

    def test_default_argument(self):
        def greet(args):
            name, greeting = args
            return SassString(f"{greeting.value}-{name.value}")

        functions = {"greet($name, $greeting: hello)": greet}
        assert ev("greet(world)", functions) == SassString("hello-world")
        assert ev("greet(world, $greeting: hi)", functions) == SassString("hi-world")

    def test_rest_parameter(self):
        def count(args):
            (rest,) = args
            return SassNumber(len(rest))

        assert ev("count(a, b, c)", {"count($items...)": count}) == SassNumber(3)

    def test_spread_argument(self):
        def add(args):
            return args[0].plus(args[1])

        assert ev("add((1, 2)...)", {"add($a, $b)": add}) == SassNumber(3)

    def test_custom_shadows_builtin(self):
        functions = {"length($list)": lambda args: SassNumber(42)}
        assert ev("length(a)", functions) == SassNumber(42)

    def test_future_result(self):
        def later(args):
            future = Future()
            future.set_result(SassString("'done'"))
            return future

        assert ev("later()", {"later()": later}) == SassString("'done'")

    def test_exception_becomes_compile_error(self):
        def boom(args):
            raise RuntimeError("kaboom")

        with pytest.raises(CompileError, match=r"Error in boom\(\): kaboom") as exc_info:
            ev("boom()", {"boom()": boom})
        assert isinstance(exc_info.value.cause, RuntimeError)

    def test_non_value_result(self):
        with pytest.raises(CompileError, match="must return a stylesheet value"):
            ev("bad()", {"bad()": lambda args: 42})

    def test_missing_argument(self):
        with pytest.raises(CompileError, match=r"Missing argument \$n"):
            ev("double()", {"double($n)": double})

    def test_too_many_arguments(self):
        with pytest.raises(CompileError, match="Only 1 arguments allowed"):
            ev("double(1, 2)", {"double($n)": double})

    def test_unknown_keyword(self):
        with pytest.raises(CompileError, match=r"No argument named \$m"):
            ev("double(1, $m: 2)", {"double($n)": double})


# ---------------------------------------------------------------------------
# Stylesheets
# ---------------------------------------------------------------------------


class TestCompile:
    def test_variables(self):
        result = compile_string("$a: 1px + 2px;\n$b: $a * 2;")
        assert result.variables["a"] == SassNumber(3, ("px",))
        assert result.variables["b"] == SassNumber(6, ("px",))

    def test_default_flag_keeps_existing_value(self):
        result = compile_string("$a: 1; $a: 2 !default; $b: null; $b: 3 !default;")
        assert result.variables["a"] == SassNumber(1)
        assert result.variables["b"] == SassNumber(3)

    def test_rules(self):
        result = compile_string(
            "$pad: 4px;\n.a { padding: $pad * 2; margin: 0 auto; }\n.b { color: red; }"
        )
        assert result.css == ".a {\n  padding: 8px;\n  margin: 0 auto;\n}\n\n.b {\n  color: red;\n}\n"

    def test_null_declarations_dropped(self):
        assert compile_string(".a { color: null; }").css == ""

    def test_map_is_not_a_css_value(self):
        with pytest.raises(CompileError, match="isn't a valid CSS value"):
            compile_string(".a { color: (a: 1); }")

    def test_debug(self):
        result = compile_string('@debug "hello";')
        assert result.debug_messages == ["hello"]

    def test_error(self):
        with pytest.raises(CompileError, match="boom"):
            compile_string('@error "boom";')

    def test_undefined_variable(self):
        with pytest.raises(CompileError, match=r"Undefined variable: \$nope"):
            compile_string("$a: $nope;")

    def test_compile_file(self, tmp_path):
        path = tmp_path / "main.scss"
        path.write_text(".a { width: 10px; }\n")
        assert compile_file(path).css == ".a {\n  width: 10px;\n}\n"
