"""CLI command: minicss check -- parse a stylesheet and report success."""

from __future__ import annotations

from pathlib import Path

import click

from minicss.cli.common import load_tree


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
def check(cssfile: str) -> None:
    """Check that a stylesheet parses and uses only known properties."""
    css_path = Path(cssfile)
    tree = load_tree(css_path)
    click.echo(f"OK: {css_path.name} ({len(tree)} block(s))")
