"""Conversion between Python data and stylesheet values.

``to_sass`` and ``from_sass`` are total: every input converts to something.
Python values with no stylesheet counterpart become ``null``, and stylesheet
values with no Python counterpart are passed through.
"""

from __future__ import annotations

import dataclasses
import logging
import numbers
from collections.abc import Iterable, Mapping
from concurrent.futures import Future
from typing import Any, NamedTuple

from sasscast.model import (
    SassBoolean,
    SassColor,
    SassList,
    SassMap,
    SassNull,
    SassNumber,
    SassString,
    Separator,
    Value,
    format_number,
    sass_bool,
    sass_null,
)
from sasscast.futures import gather, then
from sasscast.options import FromSassOptions, ToSassOptions
from sasscast.sniff import parse_string
from sasscast.text import is_quoted, quote_string, unquote_string

logger = logging.getLogger(__name__)

__all__ = ["NumberWithUnits", "to_sass", "from_sass"]


class NumberWithUnits(NamedTuple):
    """A number returned by ``from_sass`` with ``preserve_units=True``."""

    value: float
    numerator_units: list[str]
    denominator_units: list[str]


# ---------------------------------------------------------------------------
# Python -> stylesheet
# ---------------------------------------------------------------------------


def to_sass(value: Any, options: ToSassOptions | None = None) -> Value | Future:
    """Convert a Python value into a stylesheet value.

    Lists, tuples, mappings and dataclass instances are converted recursively.
    Existing stylesheet values are returned as they are.  Callables become
    ``null`` unless ``options.resolve_functions`` is set, in which case they
    are called and their result converted.  When that result is a
    ``concurrent.futures.Future`` the return value is a Future too, resolving
    to the converted value.

    Cyclic data is not detected.
    """
    options = options or ToSassOptions()
    if isinstance(value, Value):
        return value
    if value is None:
        return sass_null
    if isinstance(value, bool):
        return sass_bool(value)
    if isinstance(value, (int, float)):
        return SassNumber(value)
    if isinstance(value, numbers.Real):
        return SassNumber(float(value))
    if isinstance(value, str):
        return _string_to_sass(value, options)
    if isinstance(value, Future):
        return then(value, lambda result: to_sass(result, options))
    if isinstance(value, Mapping):
        return _map_to_sass(value.items(), options)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        fields = dataclasses.fields(value)
        return _map_to_sass(((f.name, getattr(value, f.name)) for f in fields), options)
    if isinstance(value, (list, tuple)):
        items = [to_sass(item, options) for item in value]
        return gather(items, lambda values: SassList(values, separator=Separator.COMMA))
    if callable(value):
        if options.resolves_functions:
            return to_sass(value(*options.function_args), options)
        return sass_null
    logger.debug("No stylesheet equivalent for %s; using null", type(value).__name__)
    return sass_null


def _string_to_sass(value: str, options: ToSassOptions) -> Value:
    if options.parse_unquoted_strings and not is_quoted(value):
        parsed = parse_string(value)
        if isinstance(parsed, (SassColor, SassNumber)):
            return parsed
    return SassString(quote_string(value, options.quote_char))


def _key_text(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    if isinstance(key, (int, float)):
        return format_number(key)
    return str(key)


def _map_to_sass(pairs: Iterable[tuple[Any, Any]], options: ToSassOptions) -> Value | Future:
    # Keys are always quoted so the map stays valid whatever quote_char says.
    key_quote = options.quote_char or "'"
    keys: list[Value] = []
    values: list[Value | Future] = []
    for key, item in pairs:
        keys.append(SassString(quote_string(_key_text(key), key_quote)))
        values.append(to_sass(item, options))
    return gather(values, lambda converted: SassMap(zip(keys, converted)))


# ---------------------------------------------------------------------------
# Stylesheet -> Python
# ---------------------------------------------------------------------------


def from_sass(value: Any, options: FromSassOptions | None = None) -> Any:
    """Convert a stylesheet value into Python data.

    Numbers with units become CSS text (``"140px"``) unless
    ``preserve_units`` asks for a ``NumberWithUnits`` record.  Colors become
    CSS text unless ``rgb_colors`` asks for a channel dict.  Strings lose one
    pair of quotes unless ``preserve_quotes`` is set.  Maps become dicts with
    text keys.
    """
    options = options or FromSassOptions()
    if isinstance(value, SassNull):
        return None
    if isinstance(value, SassBoolean):
        return value.value
    if isinstance(value, SassNumber):
        if options.preserve_units:
            return NumberWithUnits(
                value.value, list(value.numerator_units), list(value.denominator_units)
            )
        if value.has_units:
            return value.to_css()
        return value.value
    if isinstance(value, SassColor):
        if options.rgb_colors:
            return value.channels()
        return value.to_css()
    if isinstance(value, SassString):
        return value.text if options.preserve_quotes else unquote_string(value.text)
    if isinstance(value, SassMap):
        return {_host_key(k): from_sass(v, options) for k, v in value.contents}
    if isinstance(value, (list, tuple)):
        return [from_sass(item, options) for item in value]
    if isinstance(value, SassList) or _is_indexable(value):
        return _indexable_to_list(value, options)
    if isinstance(value, Value):
        return value.real_null
    return value


def _host_key(key: Value) -> str:
    if isinstance(key, SassString):
        return unquote_string(key.text)
    return unquote_string(key.to_css())


def _is_indexable(value: Any) -> bool:
    return not isinstance(value, Mapping) and callable(getattr(value, "get", None))


def _indexable_to_list(value: Any, options: FromSassOptions) -> list[Any]:
    items: list[Any] = []
    index = 0
    item = value.get(index)
    while item is not None:
        items.append(from_sass(item, options))
        index += 1
        item = value.get(index)
    return items
