"""Numbers with literal unit tokens and the unit algebra between them."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from sasscast.errors import SassTypeError
from sasscast.model.value import Value

__all__ = ["SassNumber", "format_number", "parse_unit"]

# Sass prints at most ten fractional digits.
PRECISION = 10
_EPSILON = 10 ** -(PRECISION + 1)

_UNIT_TOKEN_RE = re.compile(r"^(?:%|[a-zA-Z_][a-zA-Z0-9_-]*)$")


def fuzzy_equals(a: float, b: float) -> bool:
    return abs(a - b) < _EPSILON


def format_number(value: float) -> str:
    """Render a magnitude the way Sass does: no trailing zeros, no ``-0``."""
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    rounded = round(value)
    if fuzzy_equals(value, rounded):
        return str(int(rounded)) if rounded != 0 else "0"
    text = f"{value:.{PRECISION}f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def parse_unit(unit: str) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Split a unit expression such as ``px*s/ms`` into token tuples."""
    if not unit:
        return (), ()
    numer, _, denom = unit.partition("/")
    numerators = tuple(u for u in numer.split("*") if u)
    denominators = tuple(u for u in denom.split("*") if u)
    for token in numerators + denominators:
        if not _UNIT_TOKEN_RE.match(token):
            raise ValueError(f"Invalid unit: {unit!r}")
    return numerators, denominators


def _cancel(
    numerators: list[str], denominators: list[str]
) -> tuple[tuple[str, ...], tuple[str, ...]]:
    remaining = list(denominators)
    kept: list[str] = []
    for unit in numerators:
        if unit in remaining:
            remaining.remove(unit)
        else:
            kept.append(unit)
    return tuple(kept), tuple(remaining)


@dataclass(frozen=True)
class SassNumber(Value):
    """A magnitude with numerator and denominator unit tokens.

    Units are carried literally; ``1in`` and ``96px`` are different numbers.
    """

    value: float
    numerator_units: tuple[str, ...] = ()
    denominator_units: tuple[str, ...] = ()
    type_name = "number"

    def __post_init__(self) -> None:
        # Accept lists for convenience but store tuples so instances hash.
        object.__setattr__(self, "numerator_units", tuple(self.numerator_units))
        object.__setattr__(self, "denominator_units", tuple(self.denominator_units))

    @classmethod
    def with_unit(cls, value: float, unit: str = "") -> SassNumber:
        numerators, denominators = parse_unit(unit)
        return cls(value, numerators, denominators)

    # --- introspection --------------------------------------------------------

    @property
    def has_units(self) -> bool:
        return bool(self.numerator_units or self.denominator_units)

    @property
    def unit_string(self) -> str:
        numer, denom = self.numerator_units, self.denominator_units
        if not denom:
            return "*".join(numer)
        if not numer:
            if len(denom) == 1:
                return f"{denom[0]}^-1"
            return "(" + "*".join(denom) + ")^-1"
        return "*".join(numer) + "/" + "*".join(denom)

    @property
    def is_int(self) -> bool:
        return fuzzy_equals(self.value, round(self.value))

    def assert_number(self, name: str | None = None) -> SassNumber:
        return self

    def assert_int(self, name: str | None = None) -> int:
        if not self.is_int:
            raise self._expected("integer", name)
        return int(round(self.value))

    def assert_unitless(self, name: str | None = None) -> SassNumber:
        if self.has_units:
            prefix = f"${name}: " if name else ""
            raise SassTypeError(f"{prefix}Expected {self.to_css()} to have no units.")
        return self

    def same_units(self, other: SassNumber) -> bool:
        return sorted(self.numerator_units) == sorted(other.numerator_units) and sorted(
            self.denominator_units
        ) == sorted(other.denominator_units)

    # --- arithmetic -----------------------------------------------------------

    def _coerced_units(self, other: SassNumber, op: str) -> SassNumber:
        """Pick the unit set for an additive operation or raise."""
        if not other.has_units or self.same_units(other):
            return self
        if not self.has_units:
            return other
        raise SassTypeError(
            f"Incompatible units {self.unit_string} and {other.unit_string} for {op!r}."
        )

    def plus(self, other: SassNumber) -> SassNumber:
        units = self._coerced_units(other, "+")
        return SassNumber(
            self.value + other.value, units.numerator_units, units.denominator_units
        )

    def minus(self, other: SassNumber) -> SassNumber:
        units = self._coerced_units(other, "-")
        return SassNumber(
            self.value - other.value, units.numerator_units, units.denominator_units
        )

    def times(self, other: SassNumber) -> SassNumber:
        numer, denom = _cancel(
            list(self.numerator_units + other.numerator_units),
            list(self.denominator_units + other.denominator_units),
        )
        return SassNumber(self.value * other.value, numer, denom)

    def divided_by(self, other: SassNumber) -> SassNumber:
        numer, denom = _cancel(
            list(self.numerator_units + other.denominator_units),
            list(self.denominator_units + other.numerator_units),
        )
        if other.value == 0:
            value = math.nan if self.value == 0 else math.copysign(math.inf, self.value)
        else:
            value = self.value / other.value
        return SassNumber(value, numer, denom)

    def modulo(self, other: SassNumber) -> SassNumber:
        units = self._coerced_units(other, "%")
        value = math.nan if other.value == 0 else math.fmod(self.value, other.value)
        if value and (value < 0) != (other.value < 0):
            value += other.value
        return SassNumber(value, units.numerator_units, units.denominator_units)

    def compare(self, other: SassNumber) -> float:
        self._coerced_units(other, "<")
        return self.value - other.value

    def negated(self) -> SassNumber:
        return SassNumber(-self.value, self.numerator_units, self.denominator_units)

    def to_css(self) -> str:
        return format_number(self.value) + self.unit_string
