"""Built-in stylesheet functions."""

from __future__ import annotations

from sasscast.engine.functions import FunctionRegistry, SassFunction
from sasscast.errors import SassTypeError
from sasscast.model import (
    SassColor,
    SassMap,
    SassNumber,
    SassString,
    Value,
    sass_bool,
    sass_null,
)
from sasscast.text import quote_string


def _rgb_channel(value: Value, name: str) -> float:
    number = value.assert_number(name)
    if number.numerator_units == ("%",) and not number.denominator_units:
        return number.value * 255 / 100
    return number.assert_unitless(name).value


def _alpha(value: Value, name: str = "alpha") -> float:
    number = value.assert_number(name)
    if number.numerator_units == ("%",) and not number.denominator_units:
        return number.value / 100
    return number.assert_unitless(name).value


def _percentage(value: Value, name: str) -> float:
    number = value.assert_number(name)
    if number.has_units and number.numerator_units != ("%",):
        raise SassTypeError(f"${name}: Expected {number.to_css()} to be a percentage.")
    return number.value


def _hue(value: Value) -> float:
    number = value.assert_number("hue")
    if number.has_units and number.numerator_units != ("deg",):
        raise SassTypeError(f"$hue: Expected {number.to_css()} to be an angle in degrees.")
    return number.value


def rgb(args: list[Value]) -> Value:
    red, green, blue, alpha = args
    return SassColor(
        _rgb_channel(red, "red"),
        _rgb_channel(green, "green"),
        _rgb_channel(blue, "blue"),
        _alpha(alpha),
    )


def hsl(args: list[Value]) -> Value:
    hue, saturation, lightness, alpha = args
    return SassColor.from_hsl(
        _hue(hue),
        _percentage(saturation, "saturation"),
        _percentage(lightness, "lightness"),
        _alpha(alpha),
    )


def map_get(args: list[Value]) -> Value:
    mapping, key, keys = args
    value: Value | None = mapping.assert_map("map")
    for step in [key, *keys.as_list]:
        if not isinstance(value, SassMap):
            return sass_null
        value = value.get(step)
        if value is None:
            return sass_null
    return value


def nth(args: list[Value]) -> Value:
    items, n = args
    as_list = items.as_list
    index = n.assert_number("n").assert_int("n")
    if index == 0 or abs(index) > len(as_list):
        raise SassTypeError(f"$n: Invalid index {index} for a list with {len(as_list)} elements.")
    return as_list.items[index - 1 if index > 0 else index]


def length(args: list[Value]) -> Value:
    (value,) = args
    if isinstance(value, SassMap):
        return SassNumber(len(value))
    return SassNumber(len(value.as_list))


def type_of(args: list[Value]) -> Value:
    (value,) = args
    return SassString(value.type_name)


def unit(args: list[Value]) -> Value:
    (number,) = args
    return SassString(quote_string(number.assert_number("number").unit_string, '"'))


def unitless(args: list[Value]) -> Value:
    (number,) = args
    return sass_bool(not number.assert_number("number").has_units)


def quote(args: list[Value]) -> Value:
    (string,) = args
    return SassString(quote_string(string.assert_string("string").value, '"'))


def unquote(args: list[Value]) -> Value:
    (string,) = args
    return SassString(string.assert_string("string").value)


BUILTIN_FUNCTIONS: dict[str, SassFunction] = {
    "rgb($red, $green, $blue, $alpha: 1)": rgb,
    "rgba($red, $green, $blue, $alpha: 1)": rgb,
    "hsl($hue, $saturation, $lightness, $alpha: 1)": hsl,
    "hsla($hue, $saturation, $lightness, $alpha: 1)": hsl,
    "map-get($map, $key, $keys...)": map_get,
    "nth($list, $n)": nth,
    "length($list)": length,
    "type-of($value)": type_of,
    "unit($number)": unit,
    "unitless($number)": unitless,
    "quote($string)": quote,
    "unquote($string)": unquote,
}


def builtin_registry() -> FunctionRegistry:
    return FunctionRegistry.from_mapping(BUILTIN_FUNCTIONS)
