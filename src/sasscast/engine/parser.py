"""Lark Transformer that converts SCSS source into engine AST nodes."""

from __future__ import annotations

import functools
import re
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, VisitError

from sasscast.engine.ast import (
    BinaryOp,
    Call,
    Debug,
    Declaration,
    ErrorStmt,
    Expr,
    ListExpr,
    Literal,
    MapExpr,
    Rule,
    Stylesheet,
    UnaryOp,
    Variable,
    VariableDecl,
)
from sasscast.errors import CompileError
from sasscast.model import (
    SassColor,
    SassNumber,
    SassString,
    Separator,
    sass_false,
    sass_null,
    sass_true,
)

__all__ = ["parse_stylesheet", "parse_expression", "normalize_name"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_NUMBER_RE = re.compile(r"^(\d*\.\d+|\d+)([eE][+-]?\d+)?(.*)$")


def normalize_name(name: str) -> str:
    """Sass treats ``-`` and ``_`` as the same character in names."""
    return name.replace("_", "-")


class _KeywordArgument:
    def __init__(self, name: str, expr: Expr):
        self.name = name
        self.expr = expr


class _RestArgument:
    def __init__(self, expr: Expr):
        self.expr = expr


def _binary(op: str):
    def method(self, items: list[Expr]) -> BinaryOp:
        return BinaryOp(op, items[0], items[1])

    return method


class ScssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into engine AST nodes."""

    # ---- literals ----

    def number(self, items: list[Token]) -> Literal:
        match = _NUMBER_RE.match(str(items[0]))
        assert match is not None
        digits, exponent, unit = match.groups()
        if exponent:
            value: float = float(digits + exponent)
        else:
            value = float(digits) if "." in digits else int(digits)
        return Literal(SassNumber.with_unit(value, unit))

    def hex_color(self, items: list[Token]) -> Literal:
        return Literal(SassColor.from_hex(str(items[0])))

    def string(self, items: list[Token]) -> Literal:
        return Literal(SassString(str(items[0])))

    def null(self, items: list[Token]) -> Literal:
        return Literal(sass_null)

    def true(self, items: list[Token]) -> Literal:
        return Literal(sass_true)

    def false(self, items: list[Token]) -> Literal:
        return Literal(sass_false)

    def ident(self, items: list[Token]) -> Literal:
        name = str(items[0])
        color = SassColor.from_name(name)
        return Literal(color if color is not None else SassString(name))

    def variable(self, items: list[Token]) -> Variable:
        return Variable(normalize_name(str(items[0])[1:]))

    # ---- calls ----

    def keyword_argument(self, items: list[object]) -> _KeywordArgument:
        return _KeywordArgument(normalize_name(str(items[0])[1:]), items[1])  # type: ignore[arg-type]

    def rest_argument(self, items: list[Expr]) -> _RestArgument:
        return _RestArgument(items[0])

    def arguments(self, items: list[object]) -> list[object]:
        return list(items)

    def call(self, items: list[object]) -> Call:
        name = str(items[0])[:-1]
        args: list[Expr] = []
        kwargs: list[tuple[str, Expr]] = []
        rest: Expr | None = None
        for item in items[1] or []:  # type: ignore[union-attr]
            if isinstance(item, _KeywordArgument):
                kwargs.append((item.name, item.expr))
            elif isinstance(item, _RestArgument):
                rest = item.expr
            elif kwargs or rest is not None:
                raise ValueError(f"Positional arguments must come before keyword arguments in {name}().")
            else:
                args.append(item)  # type: ignore[arg-type]
        return Call(name, tuple(args), tuple(kwargs), rest)

    # ---- collections ----

    def space_list(self, items: list[Expr]) -> ListExpr:
        return ListExpr(tuple(items), separator=Separator.SPACE)

    def comma_list(self, items: list[Expr]) -> ListExpr:
        return ListExpr(tuple(items), separator=Separator.COMMA)

    def single_comma_list(self, items: list[Expr]) -> ListExpr:
        return ListExpr((items[0],), separator=Separator.COMMA)

    def empty_list(self, items: list[Expr]) -> ListExpr:
        return ListExpr((), separator=Separator.UNDECIDED)

    def empty_bracketed(self, items: list[Expr]) -> ListExpr:
        return ListExpr((), separator=Separator.UNDECIDED, bracketed=True)

    def bracketed(self, items: list[Expr]) -> ListExpr:
        inner = items[0]
        if isinstance(inner, ListExpr) and not inner.bracketed:
            return ListExpr(inner.items, separator=inner.separator, bracketed=True)
        return ListExpr((inner,), separator=Separator.UNDECIDED, bracketed=True)

    def map_pair(self, items: list[Expr]) -> tuple[Expr, Expr]:
        return (items[0], items[1])

    def map(self, items: list[tuple[Expr, Expr]]) -> MapExpr:
        return MapExpr(tuple(items))

    # ---- operators ----

    or_op = _binary("or")
    and_op = _binary("and")
    eq = _binary("==")
    neq = _binary("!=")
    lt = _binary("<")
    lte = _binary("<=")
    gt = _binary(">")
    gte = _binary(">=")
    add = _binary("+")
    sub = _binary("-")
    mul = _binary("*")
    div = _binary("/")
    mod = _binary("%")

    def neg(self, items: list[Expr]) -> UnaryOp:
        return UnaryOp("-", items[0])

    def not_op(self, items: list[Expr]) -> UnaryOp:
        return UnaryOp("not", items[0])

    # ---- statements ----

    def variable_decl(self, items: list[object]) -> VariableDecl:
        name = normalize_name(str(items[0])[1:])
        flags = frozenset(str(flag)[1:] for flag in items[2:])
        return VariableDecl(name, items[1], flags)  # type: ignore[arg-type]

    def declaration(self, items: list[object]) -> Declaration:
        return Declaration(str(items[0]), items[1])  # type: ignore[arg-type]

    def rule(self, items: list[object]) -> Rule:
        selector = " ".join(str(items[0]).split())
        return Rule(selector, tuple(items[1:]))  # type: ignore[arg-type]

    def debug_stmt(self, items: list[Expr]) -> Debug:
        return Debug(items[0])

    def error_stmt(self, items: list[Expr]) -> ErrorStmt:
        return ErrorStmt(items[0])

    def stylesheet(self, items: list[object]) -> Stylesheet:
        return Stylesheet(tuple(items))  # type: ignore[arg-type]

    def expression(self, items: list[Expr]) -> Expr:
        return items[0]


@functools.lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        lexer="contextual",
        start=["stylesheet", "expression"],
    )


def _parse(source: str, start: str) -> object:
    try:
        tree = _parser().parse(source, start=start)
        return ScssTransformer().transform(tree)
    except VisitError as e:
        cause = e.orig_exc
        raise CompileError(str(cause), cause=cause) from cause
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise CompileError(str(e), line=line, column=column, cause=e) from e


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse SCSS source into a Stylesheet of statements."""
    return _parse(source, "stylesheet")  # type: ignore[return-value]


def parse_expression(source: str) -> Expr:
    """Parse a single SCSS expression, e.g. a function parameter default."""
    return _parse(source, "expression")  # type: ignore[return-value]
