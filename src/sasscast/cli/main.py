"""sasscast CLI entry point: Click group with subcommands."""

import logging

import click

from sasscast import __version__


@click.group()
@click.version_option(version=__version__, prog_name="sasscast")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """sasscast - move values between Python data and Sass stylesheets."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from sasscast.cli.compile import compile  # noqa: E402
from sasscast.cli.eval import eval_  # noqa: E402
from sasscast.cli.vars import vars_  # noqa: E402

cli.add_command(compile)
cli.add_command(vars_)
cli.add_command(eval_)
