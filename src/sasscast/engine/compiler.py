"""Entry points for compiling stylesheets and evaluating expressions."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from sasscast.engine.evaluator import Evaluator
from sasscast.engine.functions import FunctionRegistry, SassFunction
from sasscast.engine.parser import parse_expression, parse_stylesheet
from sasscast.model import Value

__all__ = ["CompileResult", "compile_string", "compile_file", "evaluate_expression"]


@dataclass
class CompileResult:
    """Output of a successful compilation."""

    css: str
    variables: dict[str, Value] = field(default_factory=dict)
    debug_messages: list[str] = field(default_factory=list)


def compile_string(
    source: str, functions: Mapping[str, SassFunction] | None = None
) -> CompileResult:
    """Compile SCSS *source*, calling *functions* (``{signature: callable}``).

    Raises CompileError for syntax errors, evaluation errors and exceptions
    raised by custom functions.
    """
    stylesheet = parse_stylesheet(source)
    evaluator = Evaluator(FunctionRegistry.from_mapping(functions))
    css = evaluator.run(stylesheet)
    return CompileResult(
        css=css,
        variables=dict(evaluator.variables),
        debug_messages=list(evaluator.debug_messages),
    )


def compile_file(
    path: str | Path, functions: Mapping[str, SassFunction] | None = None
) -> CompileResult:
    """Read and compile a stylesheet file."""
    return compile_string(Path(path).read_text(encoding="utf-8"), functions)


def evaluate_expression(
    source: str, functions: Mapping[str, SassFunction] | None = None
) -> Value:
    """Evaluate a single SCSS expression with no variables in scope."""
    expr = parse_expression(source)
    return Evaluator(FunctionRegistry.from_mapping(functions)).evaluate(expr)
