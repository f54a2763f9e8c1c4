"""Stylesheet value model -- public type re-exports."""

from sasscast.model.collections import SassList, SassMap, Separator
from sasscast.model.color import COLOR_CHANNELS, SassColor
from sasscast.model.number import SassNumber, format_number
from sasscast.model.string import SassString
from sasscast.model.value import (
    SassBoolean,
    SassNull,
    Value,
    sass_bool,
    sass_false,
    sass_null,
    sass_true,
)

__all__ = [
    # base
    "Value",
    "SassNull",
    "SassBoolean",
    "sass_null",
    "sass_true",
    "sass_false",
    "sass_bool",
    # scalars
    "SassNumber",
    "format_number",
    "SassColor",
    "COLOR_CHANNELS",
    "SassString",
    # collections
    "Separator",
    "SassList",
    "SassMap",
]
