"""CLI command: css-to-mui transpile -- compile one stylesheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from css_to_mui.cli.options import build_config, config_options
from css_to_mui.errors import TranspileError
from css_to_mui.transpiler import transpile_file


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the generated module here instead of stdout.",
)
@config_options
def transpile(
    source: str, output: str | None, theme_name: str, module_format: str
) -> None:
    """Transpile a stylesheet into a JS module exporting a style function."""
    config = build_config(theme_name, module_format)

    try:
        code = transpile_file(source, config)
    except TranspileError as exc:
        click.echo(f"Error in {source}:\n{exc}", err=True)
        sys.exit(1)

    if output is None:
        click.echo(code, nl=False)
        return

    Path(output).write_text(code, encoding="utf-8")
    click.echo(f"Wrote {output}", err=True)
