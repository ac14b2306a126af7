"""CLI command: minicss parse -- print the tree and write the canonical form."""

from __future__ import annotations

from pathlib import Path

import click

from minicss.cli.common import load_tree
from minicss.config import ParserConfig
from minicss.render import format_debug, write_tree


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    default=ParserConfig().output_path,
    show_default=True,
    help="Where to write the canonical stylesheet",
)
@click.option("--quiet", "-q", is_flag=True, help="Skip the debug listing")
def parse(cssfile: str, output: str, quiet: bool) -> None:
    """Parse a stylesheet, list its blocks and write its canonical form.

    Nothing is written when the stylesheet fails to parse.
    """
    config = ParserConfig(output_path=output)
    tree = load_tree(Path(cssfile), config)

    if not quiet:
        click.echo(format_debug(tree), err=True, nl=False)
    target = write_tree(tree, config.output_path)
    click.echo(f"Wrote {len(tree)} block(s) to {target}")
