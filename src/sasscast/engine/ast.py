"""Expression and statement nodes produced by the engine parser."""

from __future__ import annotations

from dataclasses import dataclass, field

from sasscast.model import Separator, Value


class Expr:
    """Base class for expression nodes."""


@dataclass(frozen=True)
class Literal(Expr):
    value: Value


@dataclass(frozen=True)
class Variable(Expr):
    name: str


@dataclass(frozen=True)
class Call(Expr):
    name: str
    args: tuple[Expr, ...] = ()
    kwargs: tuple[tuple[str, Expr], ...] = ()
    rest: Expr | None = None


@dataclass(frozen=True)
class BinaryOp(Expr):
    op: str  # "+", "-", "*", "/", "%", "==", "!=", "<", "<=", ">", ">=", "and", "or"
    left: Expr
    right: Expr


@dataclass(frozen=True)
class UnaryOp(Expr):
    op: str  # "-", "not"
    operand: Expr


@dataclass(frozen=True)
class ListExpr(Expr):
    items: tuple[Expr, ...]
    separator: Separator = Separator.COMMA
    bracketed: bool = False


@dataclass(frozen=True)
class MapExpr(Expr):
    pairs: tuple[tuple[Expr, Expr], ...]


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class VariableDecl:
    name: str
    expr: Expr
    flags: frozenset[str] = frozenset()


@dataclass(frozen=True)
class Declaration:
    property: str
    expr: Expr


@dataclass(frozen=True)
class Rule:
    selector: str
    declarations: tuple[Declaration, ...] = ()


@dataclass(frozen=True)
class Debug:
    expr: Expr


@dataclass(frozen=True)
class ErrorStmt:
    expr: Expr


Statement = VariableDecl | Rule | Debug | ErrorStmt


@dataclass(frozen=True)
class Stylesheet:
    statements: tuple[Statement, ...] = field(default_factory=tuple)
