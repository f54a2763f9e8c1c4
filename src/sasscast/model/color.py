"""RGBA colors with derived HSL and HWB channels."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from sasscast.model.named_colors import NAMED_COLORS
from sasscast.model.number import format_number
from sasscast.model.value import Value

__all__ = ["SassColor", "COLOR_CHANNELS"]

# Channel names exposed by ``from_sass(..., rgb_colors=True)``.
COLOR_CHANNELS = (
    "red",
    "green",
    "blue",
    "hue",
    "lightness",
    "saturation",
    "whiteness",
    "blackness",
    "alpha",
)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _round_channel(value: float) -> int:
    value = min(max(value, 0.0), 255.0)
    return int(math.floor(value + 0.5))


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _hue_to_rgb(m1: float, m2: float, hue: float) -> float:
    if hue < 0:
        hue += 1
    if hue > 1:
        hue -= 1
    if hue < 1 / 6:
        return m1 + (m2 - m1) * hue * 6
    if hue < 1 / 2:
        return m2
    if hue < 2 / 3:
        return m1 + (m2 - m1) * (2 / 3 - hue) * 6
    return m1


@dataclass(frozen=True)
class SassColor(Value):
    """A color stored as RGBA channels.

    ``original`` keeps the literal spelling (``red``, ``#FFF``) when the color
    came straight from source text; it is used for rendering only.
    """

    red: int
    green: int
    blue: int
    alpha: float = 1.0
    original: str | None = field(default=None, compare=False, repr=False)
    type_name = "color"

    def __post_init__(self) -> None:
        object.__setattr__(self, "red", _round_channel(self.red))
        object.__setattr__(self, "green", _round_channel(self.green))
        object.__setattr__(self, "blue", _round_channel(self.blue))
        object.__setattr__(self, "alpha", _clamp(float(self.alpha), 0.0, 1.0))

    # --- constructors ---------------------------------------------------------

    @classmethod
    def from_hsl(
        cls, hue: float, saturation: float, lightness: float, alpha: float = 1.0
    ) -> SassColor:
        h = (hue % 360) / 360
        s = _clamp(saturation, 0, 100) / 100
        l = _clamp(lightness, 0, 100) / 100
        m2 = l * (s + 1) if l <= 0.5 else l + s - l * s
        m1 = l * 2 - m2
        return cls(
            _hue_to_rgb(m1, m2, h + 1 / 3) * 255,
            _hue_to_rgb(m1, m2, h) * 255,
            _hue_to_rgb(m1, m2, h - 1 / 3) * 255,
            alpha,
        )

    @classmethod
    def from_hwb(
        cls, hue: float, whiteness: float, blackness: float, alpha: float = 1.0
    ) -> SassColor:
        w = _clamp(whiteness, 0, 100) / 100
        b = _clamp(blackness, 0, 100) / 100
        if w + b >= 1:
            gray = w / (w + b) * 255
            return cls(gray, gray, gray, alpha)
        base = cls.from_hsl(hue, 100, 50)

        def scale(channel: int) -> float:
            return (channel / 255 * (1 - w - b) + w) * 255

        return cls(scale(base.red), scale(base.green), scale(base.blue), alpha)

    @classmethod
    def from_hex(cls, text: str) -> SassColor:
        digits = text[1:] if text.startswith("#") else text
        if len(digits) not in (3, 4, 6, 8) or not set(digits) <= _HEX_DIGITS:
            raise ValueError(f"Invalid hex color: {text!r}")
        if len(digits) in (3, 4):
            digits = "".join(d * 2 for d in digits)
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        alpha = channels[3] / 255 if len(channels) == 4 else 1.0
        return cls(channels[0], channels[1], channels[2], alpha, original=text)

    @classmethod
    def from_name(cls, name: str) -> SassColor | None:
        """Return the named color, or ``None`` when *name* is not a color."""
        key = name.lower()
        if key == "transparent":
            return cls(0, 0, 0, 0.0, original=name)
        rgb = NAMED_COLORS.get(key)
        if rgb is None:
            return None
        return cls(*rgb, original=name)

    # --- derived channels -----------------------------------------------------

    def _scaled(self) -> tuple[float, float, float]:
        return self.red / 255, self.green / 255, self.blue / 255

    @property
    def hue(self) -> float:
        r, g, b = self._scaled()
        high, low = max(r, g, b), min(r, g, b)
        delta = high - low
        if delta == 0:
            return 0.0
        if high == r:
            return (60 * (g - b) / delta) % 360
        if high == g:
            return (120 + 60 * (b - r) / delta) % 360
        return (240 + 60 * (r - g) / delta) % 360

    @property
    def lightness(self) -> float:
        r, g, b = self._scaled()
        return 50 * (max(r, g, b) + min(r, g, b))

    @property
    def saturation(self) -> float:
        r, g, b = self._scaled()
        high, low = max(r, g, b), min(r, g, b)
        delta = high - low
        if delta == 0:
            return 0.0
        if self.lightness < 50:
            return 100 * delta / (high + low)
        return 100 * delta / (2 - high - low)

    @property
    def whiteness(self) -> float:
        return min(self.red, self.green, self.blue) / 255 * 100

    @property
    def blackness(self) -> float:
        return 100 - max(self.red, self.green, self.blue) / 255 * 100

    def channels(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in COLOR_CHANNELS}

    def assert_color(self, name: str | None = None) -> SassColor:
        return self

    def to_css(self) -> str:
        if self.original is not None:
            return self.original
        if self.alpha >= 1:
            return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"
        return (
            f"rgba({self.red}, {self.green}, {self.blue}, {format_number(self.alpha)})"
        )
