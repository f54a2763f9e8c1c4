"""Speculative evaluation of unquoted text as a stylesheet literal."""

from __future__ import annotations

import logging

from sasscast.engine import compile_string
from sasscast.errors import CompileError
from sasscast.model import Value

logger = logging.getLogger(__name__)

__all__ = ["parse_string"]


def parse_string(text: str) -> Value | str:
    """Evaluate *text* as a literal and return the resulting value.

    Runs a full parse/evaluate round trip, so callers should only use it when
    asked to.  Text that does not compile comes back unchanged.
    """
    captured: list[Value] = []

    def capture(args: list[Value]) -> Value:
        captured.append(args[0])
        return args[0]

    try:
        compile_string(f"$_: ___(({text}));", {"___($value)": capture})
    except CompileError as exc:
        logger.debug("Not a stylesheet literal: %r (%s)", text, exc)
        return text
    return captured[0] if captured else text
