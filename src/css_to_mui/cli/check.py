"""CLI command: css-to-mui check -- verify stylesheets transpile cleanly."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from css_to_mui.errors import TranspileError
from css_to_mui.transpiler import transpile_file


@click.command()
@click.argument("sources", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
def check(sources: tuple[str, ...]) -> None:
    """Transpile each SOURCE without writing output.

    Prints one line per file and exits with code 1 if any file fails.
    """
    failures = 0
    for source in sources:
        name = Path(source).name
        try:
            transpile_file(source)
        except TranspileError as exc:
            failures += 1
            click.echo(f"FAIL: {name}\n{exc}\n", err=True)
            continue
        click.echo(f"OK: {name}")

    click.echo()
    click.echo(f"Summary: {len(sources) - failures} ok, {failures} failed")

    if failures:
        sys.exit(1)
