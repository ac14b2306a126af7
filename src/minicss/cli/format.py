"""CLI command: minicss format -- print the canonical form to stdout."""

from __future__ import annotations

from pathlib import Path

import click

from minicss.cli.common import load_tree
from minicss.render import serialize


@click.command("format")
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
def format_command(cssfile: str) -> None:
    """Print the canonical form of a stylesheet."""
    tree = load_tree(Path(cssfile))
    click.echo(serialize(tree), nl=False)
