"""A small SCSS expression engine: parse, evaluate and call host functions."""

from sasscast.engine.compiler import (
    CompileResult,
    compile_file,
    compile_string,
    evaluate_expression,
)
from sasscast.engine.functions import FunctionRegistry, SassFunction, parse_signature
from sasscast.engine.parser import parse_expression, parse_stylesheet

__all__ = [
    "CompileResult",
    "compile_string",
    "compile_file",
    "evaluate_expression",
    "FunctionRegistry",
    "SassFunction",
    "parse_signature",
    "parse_expression",
    "parse_stylesheet",
]
