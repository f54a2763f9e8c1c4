"""Custom function signatures and argument binding."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from concurrent.futures import Future
from dataclasses import dataclass, field

from sasscast.engine.ast import Expr
from sasscast.engine.parser import normalize_name, parse_expression
from sasscast.errors import CompileError
from sasscast.model import Value

__all__ = [
    "FunctionResult",
    "SassFunction",
    "Parameter",
    "Signature",
    "RegisteredFunction",
    "parse_signature",
    "FunctionRegistry",
]

FunctionResult = Value | Future
SassFunction = Callable[[list[Value]], FunctionResult]

_SIGNATURE_RE = re.compile(r"^\s*(?P<name>[a-zA-Z_-][a-zA-Z0-9_-]*)\s*\((?P<params>.*)\)\s*$", re.S)
_PARAM_RE = re.compile(
    r"^\s*\$(?P<name>[a-zA-Z_][a-zA-Z0-9_-]*)\s*(?:(?P<rest>\.\.\.)|:\s*(?P<default>.+?))?\s*$",
    re.S,
)


@dataclass(frozen=True)
class Parameter:
    name: str
    default: Expr | None = None
    rest: bool = False


@dataclass(frozen=True)
class Signature:
    """A parsed ``name($a, $b: default, $rest...)`` declaration."""

    name: str
    parameters: tuple[Parameter, ...] = ()

    def bind(
        self,
        args: list[Value],
        kwargs: Mapping[str, Value],
    ) -> tuple[list[Value | None], list[Value]]:
        """Match call arguments to parameters.

        Returns one slot per non-rest parameter (``None`` where the default
        applies) plus the values collected by a trailing rest parameter.
        """
        slots: list[Value | None] = []
        rest: list[Value] = []
        remaining = dict(kwargs)
        positional = list(args)
        for param in self.parameters:
            if param.rest:
                rest.extend(positional)
                positional = []
                continue
            if positional:
                if param.name in remaining:
                    raise CompileError(
                        f"Argument ${param.name} was passed both by position and by name."
                    )
                slots.append(positional.pop(0))
            elif param.name in remaining:
                slots.append(remaining.pop(param.name))
            elif param.default is not None:
                slots.append(None)
            else:
                raise CompileError(f"Missing argument ${param.name} in {self.name}().")
        if positional:
            raise CompileError(
                f"Only {len(slots)} arguments allowed in {self.name}(), "
                f"but {len(slots) + len(positional)} were passed."
            )
        if remaining:
            names = ", ".join(f"${n}" for n in remaining)
            raise CompileError(f"No argument named {names} in {self.name}().")
        return slots, rest


def _split_params(text: str) -> list[str]:
    """Split on top-level commas, ignoring those nested in parens or quotes."""
    parts: list[str] = []
    depth = 0
    quote: str | None = None
    current: list[str] = []
    for ch in text:
        if quote:
            if ch == quote:
                quote = None
        elif ch in "'\"":
            quote = ch
        elif ch in "([":
            depth += 1
        elif ch in ")]":
            depth -= 1
        elif ch == "," and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(ch)
    if "".join(current).strip():
        parts.append("".join(current))
    return parts


def parse_signature(signature: str) -> Signature:
    """Parse a signature string such as ``require($module, $properties: ())``."""
    match = _SIGNATURE_RE.match(signature)
    if match is None:
        raise CompileError(f"Invalid function signature: {signature!r}")
    params: list[Parameter] = []
    for raw in _split_params(match.group("params")):
        pmatch = _PARAM_RE.match(raw)
        if pmatch is None:
            raise CompileError(f"Invalid parameter {raw.strip()!r} in {signature!r}")
        default = pmatch.group("default")
        params.append(
            Parameter(
                name=normalize_name(pmatch.group("name")),
                default=parse_expression(default) if default is not None else None,
                rest=pmatch.group("rest") is not None,
            )
        )
    if any(p.rest for p in params[:-1]):
        raise CompileError(f"Only the last parameter may be variadic in {signature!r}")
    return Signature(normalize_name(match.group("name")), tuple(params))


@dataclass(frozen=True)
class RegisteredFunction:
    signature: Signature
    callback: SassFunction


@dataclass
class FunctionRegistry:
    """Functions callable from stylesheets, keyed by normalized name."""

    _functions: dict[str, RegisteredFunction] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, functions: Mapping[str, SassFunction] | None) -> FunctionRegistry:
        registry = cls()
        for signature, callback in (functions or {}).items():
            registry.register(signature, callback)
        return registry

    def register(self, signature: str, callback: SassFunction) -> None:
        parsed = parse_signature(signature)
        self._functions[parsed.name] = RegisteredFunction(parsed, callback)

    def get(self, name: str) -> RegisteredFunction | None:
        return self._functions.get(normalize_name(name))

    def __contains__(self, name: str) -> bool:
        return normalize_name(name) in self._functions

    def merged(self, other: FunctionRegistry) -> FunctionRegistry:
        """Return a registry where *other*'s functions shadow this one's."""
        return FunctionRegistry({**self._functions, **other._functions})
