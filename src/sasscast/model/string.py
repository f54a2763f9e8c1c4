"""Quoted and unquoted strings."""

from __future__ import annotations

from dataclasses import dataclass

from sasscast.model.value import Value
from sasscast.text import is_quoted, quote_string, unquote_string


@dataclass(frozen=True)
class SassString(Value):
    """A string value.

    ``text`` is the raw payload: for quoted strings it includes the
    delimiters and any backslash escapes, exactly as written.
    """

    text: str
    type_name = "string"

    @property
    def quoted(self) -> bool:
        return is_quoted(self.text)

    @property
    def value(self) -> str:
        return unquote_string(self.text)

    @property
    def quote_char(self) -> str | None:
        return self.text[0] if self.quoted else None

    def assert_string(self, name: str | None = None) -> SassString:
        return self

    def concat(self, other: Value) -> SassString:
        """``+`` on strings: the left operand decides whether the result is quoted."""
        right = other.value if isinstance(other, SassString) else other.to_css()
        joined = self.value + right
        if self.quoted:
            return SassString(quote_string(joined, self.quote_char))
        return SassString(joined)

    def to_css(self) -> str:
        return self.text
