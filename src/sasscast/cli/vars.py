"""CLI command: sasscast vars -- emit Python data as a Sass variable."""

from __future__ import annotations

import sys
from concurrent.futures import Future

import click

from sasscast.bridge import load_module
from sasscast.convert import to_sass
from sasscast.errors import SasscastError
from sasscast.options import ToSassOptions

_QUOTES = {"single": "'", "double": '"', "none": None}


@click.command("vars")
@click.argument("module")
@click.option("--name", default="data", show_default=True, help="Variable name to declare.")
@click.option(
    "--parse-unquoted-strings",
    is_flag=True,
    help="Turn strings that look like colors or numbers into those values.",
)
@click.option(
    "--resolve-functions", is_flag=True, help="Call functions and convert their results."
)
@click.option(
    "--quotes",
    type=click.Choice(sorted(_QUOTES)),
    default="single",
    show_default=True,
    help="Quote character for converted strings.",
)
def vars_(
    module: str,
    name: str,
    parse_unquoted_strings: bool,
    resolve_functions: bool,
    quotes: str,
) -> None:
    """Load MODULE (a data file or Python module) and print a Sass declaration.

    MODULE accepts the same forms as ``require()``: ``tokens.json``,
    ``theme.toml``, ``config.py`` or ``package.module:ATTRIBUTE``.
    """
    options = ToSassOptions(
        parse_unquoted_strings=parse_unquoted_strings,
        resolve_functions=resolve_functions,
        quote_char=_QUOTES[quotes],
    )
    try:
        data = load_module(module)
        if resolve_functions and callable(data):
            data = data()
        value = to_sass(data, options)
    except SasscastError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if isinstance(value, Future):
        value = value.result()
    click.echo(f"${name}: {value.to_css()};")
