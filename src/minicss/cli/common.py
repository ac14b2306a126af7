"""Helpers shared by the CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from minicss.config import ParserConfig
from minicss.model.diagnostic import Diagnostic
from minicss.model.tree import Tree
from minicss.parser import ParseError, parse_stylesheet


def echo_diagnostic(diagnostic: Diagnostic) -> None:
    click.echo(str(diagnostic), err=True)


def load_tree(path: Path, config: ParserConfig | None = None) -> Tree:
    """Read and parse *path*, exiting with status 1 on a parse error.

    The diagnostic has already been printed by the time the error surfaces.
    """
    source = path.read_bytes()
    try:
        return parse_stylesheet(source, config=config, reporter=echo_diagnostic)
    except ParseError:
        sys.exit(1)
