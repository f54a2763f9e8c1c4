"""Conversion options for both directions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ToSassOptions:
    """Options for converting Python data into stylesheet values.

    Attributes:
        parse_unquoted_strings: Evaluate unquoted strings as stylesheet
            literals and keep the result when it is a color or a number.
        resolve_functions: Call callables and convert their return value.
            A sequence is passed as the positional arguments.
        quote_char: Delimiter wrapped around converted strings.  ``None`` or
            ``""`` leaves strings unquoted.  Map keys are always quoted.
    """

    parse_unquoted_strings: bool = False
    resolve_functions: bool | Sequence[Any] = False
    quote_char: str | None = "'"

    @property
    def function_args(self) -> tuple[Any, ...]:
        if isinstance(self.resolve_functions, (bool, str)) or not isinstance(
            self.resolve_functions, Sequence
        ):
            return ()
        return tuple(self.resolve_functions)

    @property
    def resolves_functions(self) -> bool:
        if isinstance(self.resolve_functions, Sequence) and not isinstance(
            self.resolve_functions, str
        ):
            return True
        return bool(self.resolve_functions)


@dataclass(frozen=True)
class FromSassOptions:
    """Options for converting stylesheet values back into Python data.

    Attributes:
        preserve_units: Return numbers as ``NumberWithUnits`` records.
        rgb_colors: Return colors as channel dicts instead of CSS text.
        preserve_quotes: Keep string delimiters and escapes.
    """

    preserve_units: bool = False
    rgb_colors: bool = False
    preserve_quotes: bool = False
