"""minicss CLI entry point: Click group with subcommands."""

import logging

import click

from minicss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="minicss")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """minicss - parse, check and format a small subset of CSS."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Import and register subcommands
from minicss.cli.parse import parse  # noqa: E402
from minicss.cli.check import check  # noqa: E402
from minicss.cli.format import format_command  # noqa: E402

cli.add_command(parse)
cli.add_command(check)
cli.add_command(format_command)
