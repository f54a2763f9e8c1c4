"""CLI command: sasscast compile -- compile a stylesheet with require() available."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from sasscast.bridge import sass_functions
from sasscast.engine import compile_file
from sasscast.errors import CompileError


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
@click.option("--debug/--no-debug", default=True, help="Echo @debug messages to stderr.")
def compile(stylesheet: str, debug: bool) -> None:
    """Compile STYLESHEET and print the resulting CSS.

    The ``require()`` function is registered, so the stylesheet can load JSON,
    TOML or Python data.  Exits with code 1 on a compile error.
    """
    try:
        result = compile_file(Path(stylesheet), sass_functions)
    except CompileError as exc:
        location = f" (line {exc.line}, column {exc.column})" if exc.line else ""
        click.echo(f"Compile error{location}: {exc}", err=True)
        sys.exit(1)

    if debug:
        for message in result.debug_messages:
            click.echo(f"DEBUG: {message}", err=True)
    click.echo(result.css, nl=False)
