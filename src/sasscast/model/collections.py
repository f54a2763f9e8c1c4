"""Ordered lists and maps."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from sasscast.model.value import Value

__all__ = ["Separator", "SassList", "SassMap"]


class Separator(Enum):
    """List separator; affects rendering only, never equality."""

    COMMA = ","
    SPACE = " "
    SLASH = "/"
    UNDECIDED = None


@dataclass(frozen=True)
class SassList(Value):
    """An ordered sequence of values."""

    items: tuple[Value, ...] = ()
    separator: Separator = field(default=Separator.COMMA, compare=False)
    bracketed: bool = False
    type_name = "list"

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    @property
    def as_list(self) -> SassList:
        return self

    def get(self, index: int) -> Value | None:
        """Return the item at *index*, or ``None`` past either end."""
        if 0 <= index < len(self.items):
            return self.items[index]
        return None

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def _item_css(self, item: Value) -> str:
        text = item.to_css()
        if isinstance(item, SassMap):
            return text
        if isinstance(item, SassList) and len(item) > 1 and not item.bracketed:
            nested_comma = item.separator is Separator.COMMA
            if nested_comma or self.separator is not Separator.COMMA:
                return f"({text})"
        return text

    def to_css(self) -> str:
        if not self.items:
            return "[]" if self.bracketed else "()"
        sep = self.separator.value or " "
        joiner = ", " if sep == "," else (" / " if sep == "/" else " ")
        body = joiner.join(self._item_css(item) for item in self.items)
        if len(self.items) == 1 and self.separator is Separator.COMMA:
            body += ","
            if not self.bracketed:
                return f"({body})"
        if self.bracketed:
            return f"[{body}]"
        return body


@dataclass(frozen=True)
class SassMap(Value):
    """An ordered sequence of key/value pairs."""

    contents: tuple[tuple[Value, Value], ...] = ()
    type_name = "map"

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "contents", tuple((k, v) for k, v in self.contents)
        )

    @property
    def keys(self) -> list[Value]:
        return [k for k, _ in self.contents]

    @property
    def values(self) -> list[Value]:
        return [v for _, v in self.contents]

    def items(self) -> list[tuple[Value, Value]]:
        return list(self.contents)

    def get(self, key: Value) -> Value | None:
        """Return the value stored under *key*; the last duplicate wins."""
        found = None
        for k, v in self.contents:
            if _same_key(k, key):
                found = v
        return found

    def __len__(self) -> int:
        return len(self.contents)

    @property
    def as_list(self) -> SassList:
        pairs = [SassList((k, v), separator=Separator.SPACE) for k, v in self.contents]
        return SassList(pairs, separator=Separator.COMMA)

    def assert_map(self, name: str | None = None) -> SassMap:
        return self

    def to_css(self) -> str:
        if not self.contents:
            return "()"
        body = ", ".join(f"{k.to_css()}: {_map_value_css(v)}" for k, v in self.contents)
        return f"({body})"


def _map_value_css(value: Value) -> str:
    if isinstance(value, SassList) and value.separator is Separator.COMMA and len(value) > 1:
        return f"({value.to_css()})"
    return value.to_css()


def _same_key(a: Value, b: Value) -> bool:
    # Quoted and unquoted spellings of a string name the same key.
    from sasscast.model.string import SassString

    if isinstance(a, SassString) and isinstance(b, SassString):
        return a.value == b.value
    return a == b
