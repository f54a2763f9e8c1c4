"""Tree-walking evaluator for parsed stylesheets."""

from __future__ import annotations

import logging
from concurrent.futures import Future

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
from sasscast.engine.builtins import builtin_registry
from sasscast.engine.functions import FunctionRegistry, RegisteredFunction
from sasscast.errors import CompileError, SassTypeError
from sasscast.model import (
    SassList,
    SassMap,
    SassNumber,
    SassString,
    Separator,
    Value,
    sass_bool,
)
from sasscast.text import quote_string

logger = logging.getLogger(__name__)


def values_equal(a: Value, b: Value) -> bool:
    """Sass ``==``: quoted and unquoted strings with the same text are equal."""
    if isinstance(a, SassString) and isinstance(b, SassString):
        return a.value == b.value
    if isinstance(a, SassNumber) and isinstance(b, SassNumber):
        return a.same_units(b) and abs(a.value - b.value) < 1e-11
    return a == b


def message_text(value: Value) -> str:
    return value.value if isinstance(value, SassString) else value.to_css()


class Evaluator:
    """Evaluate statements in order, tracking variables and emitting CSS.

    Custom functions shadow built-ins with the same name.  A custom function
    may return a ``Future``; the evaluator blocks on it before continuing.
    """

    def __init__(self, functions: FunctionRegistry | None = None) -> None:
        self._functions = builtin_registry().merged(functions or FunctionRegistry())
        self.variables: dict[str, Value] = {}
        self.debug_messages: list[str] = []

    # --- statements -----------------------------------------------------------

    def run(self, stylesheet: Stylesheet) -> str:
        blocks: list[str] = []
        for stmt in stylesheet.statements:
            if isinstance(stmt, VariableDecl):
                self._declare(stmt)
            elif isinstance(stmt, Rule):
                block = self._rule(stmt)
                if block:
                    blocks.append(block)
            elif isinstance(stmt, Debug):
                message = message_text(self.evaluate(stmt.expr))
                logger.info("DEBUG: %s", message)
                self.debug_messages.append(message)
            elif isinstance(stmt, ErrorStmt):
                raise CompileError(message_text(self.evaluate(stmt.expr)))
        return "\n\n".join(blocks) + ("\n" if blocks else "")

    def _declare(self, stmt: VariableDecl) -> None:
        if "default" in stmt.flags:
            current = self.variables.get(stmt.name)
            if current is not None and current.real_null is not None:
                return
        self.variables[stmt.name] = self.evaluate(stmt.expr)

    def _rule(self, rule: Rule) -> str:
        lines: list[str] = []
        for decl in rule.declarations:
            css = self._declaration(decl)
            if css is not None:
                lines.append(f"  {decl.property}: {css};")
        if not lines:
            return ""
        return rule.selector + " {\n" + "\n".join(lines) + "\n}"

    def _declaration(self, decl: Declaration) -> str | None:
        value = self.evaluate(decl.expr)
        if value.real_null is None:
            return None
        empty = isinstance(value, SassList) and not value.items and not value.bracketed
        if isinstance(value, SassMap) or empty:
            raise CompileError(f"{value.to_css()} isn't a valid CSS value.")
        return _css_value(value)

    # --- expressions ----------------------------------------------------------

    def evaluate(self, expr: Expr) -> Value:
        if isinstance(expr, Literal):
            return expr.value
        if isinstance(expr, Variable):
            try:
                return self.variables[expr.name]
            except KeyError:
                raise CompileError(f"Undefined variable: ${expr.name}.") from None
        if isinstance(expr, ListExpr):
            items = [self.evaluate(item) for item in expr.items]
            return SassList(items, separator=expr.separator, bracketed=expr.bracketed)
        if isinstance(expr, MapExpr):
            return self._map(expr)
        if isinstance(expr, UnaryOp):
            return self._unary(expr)
        if isinstance(expr, BinaryOp):
            return self._binary(expr)
        if isinstance(expr, Call):
            return self._call(expr)
        raise CompileError(f"Cannot evaluate {expr!r}")

    def _map(self, expr: MapExpr) -> SassMap:
        pairs: list[tuple[Value, Value]] = []
        for key_expr, value_expr in expr.pairs:
            key = self.evaluate(key_expr)
            if any(values_equal(key, k) for k, _ in pairs):
                raise CompileError(f"Duplicate key {key.to_css()}.")
            pairs.append((key, self.evaluate(value_expr)))
        return SassMap(pairs)

    def _unary(self, expr: UnaryOp) -> Value:
        operand = self.evaluate(expr.operand)
        if expr.op == "not":
            return sass_bool(not operand.is_truthy)
        if isinstance(operand, SassNumber):
            return operand.negated()
        return SassString("-" + operand.to_css())

    def _binary(self, expr: BinaryOp) -> Value:
        op = expr.op
        left = self.evaluate(expr.left)
        if op == "and":
            return self.evaluate(expr.right) if left.is_truthy else left
        if op == "or":
            return left if left.is_truthy else self.evaluate(expr.right)
        right = self.evaluate(expr.right)
        if op == "==":
            return sass_bool(values_equal(left, right))
        if op == "!=":
            return sass_bool(not values_equal(left, right))
        if isinstance(left, SassNumber) and isinstance(right, SassNumber):
            return _number_op(op, left, right)
        if op == "+":
            if isinstance(left, SassString):
                return left.concat(right)
            if isinstance(right, SassString):
                return SassString(quote_string(left.to_css() + right.value, right.quote_char))
        if op in ("-", "/"):
            return SassString(f"{left.to_css()}{op}{right.to_css()}")
        raise SassTypeError(
            f'Undefined operation "{left.to_css()} {op} {right.to_css()}".'
        )

    def _call(self, call: Call) -> Value:
        args = [self.evaluate(arg) for arg in call.args]
        kwargs = {name: self.evaluate(arg) for name, arg in call.kwargs}
        if call.rest is not None:
            rest = self.evaluate(call.rest)
            if isinstance(rest, SassMap):
                for key, value in rest.items():
                    kwargs[message_text(key).replace("_", "-")] = value
            else:
                args.extend(rest.as_list.items)

        fn = self._functions.get(call.name)
        if fn is None:
            if kwargs:
                raise CompileError(f"Plain CSS function {call.name}() doesn't support keyword arguments.")
            return SassString(f"{call.name}({', '.join(a.to_css() for a in args)})")

        slots, rest_values = fn.signature.bind(args, kwargs)
        values: list[Value] = []
        fixed = [p for p in fn.signature.parameters if not p.rest]
        for slot, param in zip(slots, fixed):
            if slot is None:
                assert param.default is not None
                slot = self.evaluate(param.default)
            values.append(slot)
        if len(fixed) != len(fn.signature.parameters):
            values.append(SassList(rest_values, separator=Separator.COMMA))
        return self._invoke(fn, values)

    def _invoke(self, fn: RegisteredFunction, values: list[Value]) -> Value:
        name = fn.signature.name
        try:
            result = fn.callback(values)
            if isinstance(result, Future):
                result = result.result()
        except CompileError:
            raise
        except Exception as exc:
            raise CompileError(f"Error in {name}(): {exc}", cause=exc) from exc
        if not isinstance(result, Value):
            raise CompileError(
                f"{name}() must return a stylesheet value, got {type(result).__name__}."
            )
        return result


def _number_op(op: str, left: SassNumber, right: SassNumber) -> Value:
    if op == "+":
        return left.plus(right)
    if op == "-":
        return left.minus(right)
    if op == "*":
        return left.times(right)
    if op == "/":
        return left.divided_by(right)
    if op == "%":
        return left.modulo(right)
    diff = left.compare(right)
    if op == "<":
        return sass_bool(diff < 0)
    if op == "<=":
        return sass_bool(diff <= 0)
    if op == ">":
        return sass_bool(diff > 0)
    if op == ">=":
        return sass_bool(diff >= 0)
    raise CompileError(f"Unknown operator {op!r}")


def _css_value(value: Value) -> str:
    if isinstance(value, SassList):
        parts = [_css_value(item) for item in value.items if item.real_null is not None]
        joiner = ", " if value.separator is Separator.COMMA else (
            " / " if value.separator is Separator.SLASH else " "
        )
        body = joiner.join(parts)
        return f"[{body}]" if value.bracketed else body
    return value.to_css()
