"""Base stylesheet value plus the null and boolean singletons."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sasscast.errors import SassTypeError

if TYPE_CHECKING:
    from sasscast.model.collections import SassList, SassMap
    from sasscast.model.color import SassColor
    from sasscast.model.number import SassNumber
    from sasscast.model.string import SassString


class Value:
    """Common behaviour shared by every stylesheet value."""

    type_name = "value"

    @property
    def is_truthy(self) -> bool:
        """Only ``null`` and ``false`` are falsey."""
        return True

    @property
    def real_null(self) -> Value | None:
        """``None`` for the null value, the value itself otherwise."""
        return self

    @property
    def as_list(self) -> SassList:
        """View this value as a list; scalars become single-element lists."""
        from sasscast.model.collections import SassList, Separator

        return SassList((self,), separator=Separator.UNDECIDED)

    def to_css(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.to_css()

    # --- assertions -----------------------------------------------------------

    def _expected(self, kind: str, name: str | None) -> SassTypeError:
        prefix = f"${name}: " if name else ""
        article = "an" if kind[0] in "aeiou" else "a"
        return SassTypeError(f"{prefix}{self.to_css()} is not {article} {kind}.")

    def assert_string(self, name: str | None = None) -> SassString:
        raise self._expected("string", name)

    def assert_number(self, name: str | None = None) -> SassNumber:
        raise self._expected("number", name)

    def assert_color(self, name: str | None = None) -> SassColor:
        raise self._expected("color", name)

    def assert_map(self, name: str | None = None) -> SassMap:
        raise self._expected("map", name)


@dataclass(frozen=True)
class SassNull(Value):
    """The ``null`` value.  Use the ``sass_null`` singleton."""

    type_name = "null"

    @property
    def is_truthy(self) -> bool:
        return False

    @property
    def real_null(self) -> None:
        return None

    def to_css(self) -> str:
        return "null"


@dataclass(frozen=True)
class SassBoolean(Value):
    """``true`` or ``false``.  Use the ``sass_true``/``sass_false`` singletons."""

    value: bool
    type_name = "bool"

    @property
    def is_truthy(self) -> bool:
        return self.value

    def to_css(self) -> str:
        return "true" if self.value else "false"


sass_null = SassNull()
sass_true = SassBoolean(True)
sass_false = SassBoolean(False)


def sass_bool(value: bool) -> SassBoolean:
    return sass_true if value else sass_false
