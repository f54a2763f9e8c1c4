"""String helpers shared by both conversion directions.

Quoting here is purely structural: a string counts as quoted when it starts
and ends with the same quote character.  ``quote_string`` escapes only the
active delimiter and ``unquote_string`` never reverses that escaping.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from sasscast.errors import PropertyPathError

__all__ = ["QUOTE_CHARS", "is_quoted", "quote_string", "unquote_string", "get_attr"]

QUOTE_CHARS = ("'", '"')


def is_quoted(text: str) -> bool:
    """Return True if *text* is wrapped in a matching pair of quotes."""
    return len(text) >= 2 and text[0] in QUOTE_CHARS and text[-1] == text[0]


def quote_string(text: str, quote_char: str | None) -> str:
    """Wrap *text* in *quote_char*, escaping inner occurrences of it.

    An empty or ``None`` *quote_char* disables quoting.  Text that is already
    quoted keeps its own delimiter, whichever one was requested.
    """
    if not quote_char:
        return text
    if is_quoted(text):
        quote_char = text[0]
        text = text[1:-1]
    return quote_char + text.replace(quote_char, "\\" + quote_char) + quote_char


def unquote_string(text: str) -> str:
    """Strip one pair of surrounding quotes; escapes are left untouched."""
    return text[1:-1] if is_quoted(text) else text


def _step(obj: Any, attr: Any) -> Any:
    if isinstance(obj, Mapping):
        if attr in obj:
            return obj[attr]
        return obj[str(attr)]
    if isinstance(obj, Sequence) and not isinstance(obj, str):
        if isinstance(attr, float) and attr.is_integer():
            attr = int(attr)
        return obj[attr]
    return getattr(obj, str(attr))


def get_attr(data: Any, path: Sequence[Any]) -> Any:
    """Walk *path* (keys, indices or attribute names) through *data*."""
    for attr in path:
        try:
            data = _step(data, attr)
        except (KeyError, IndexError, AttributeError, TypeError) as exc:
            raise PropertyPathError(list(path), attr, cause=exc) from exc
    return data
