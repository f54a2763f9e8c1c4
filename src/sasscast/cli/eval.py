"""CLI command: sasscast eval -- evaluate an expression and print it as JSON."""

from __future__ import annotations

import json
import sys

import click

from sasscast.bridge import sass_functions
from sasscast.convert import from_sass
from sasscast.engine import evaluate_expression
from sasscast.errors import CompileError
from sasscast.options import FromSassOptions


@click.command("eval")
@click.argument("expression")
@click.option("--preserve-units", is_flag=True, help="Emit numbers as [value, numerators, denominators].")
@click.option("--rgb-colors", is_flag=True, help="Emit colors as channel objects.")
@click.option("--preserve-quotes", is_flag=True, help="Keep quotes around strings.")
def eval_(
    expression: str, preserve_units: bool, rgb_colors: bool, preserve_quotes: bool
) -> None:
    """Evaluate a Sass EXPRESSION and print the converted value as JSON.

    ``require()`` is available, so data files can be inspected directly.
    """
    try:
        value = evaluate_expression(expression, sass_functions)
    except CompileError as exc:
        click.echo(f"Compile error: {exc}", err=True)
        sys.exit(1)

    options = FromSassOptions(
        preserve_units=preserve_units,
        rgb_colors=rgb_colors,
        preserve_quotes=preserve_quotes,
    )
    click.echo(json.dumps(from_sass(value, options)))
