"""CLI command: css-to-mui build -- transpile every stylesheet in a directory."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from css_to_mui.cli.options import build_config, config_options
from css_to_mui.errors import TranspileError
from css_to_mui.transpiler import transpile_file


def output_path(source: Path, directory: Path, out_dir: Path | None) -> Path:
    """Map ``<dir>/a/b.css`` to ``<out_dir>/a/b.js`` (or ``<dir>/a/b.js``)."""
    target = source.with_suffix(".js")
    if out_dir is None:
        return target
    return out_dir / target.relative_to(directory)


@click.command()
@click.argument("directory", type=click.Path(exists=True, file_okay=False))
@click.option(
    "--out-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Mirror generated modules under this directory.",
)
@click.option(
    "--pattern",
    default="*.css",
    show_default=True,
    help="Glob for stylesheets, matched recursively.",
)
@config_options
def build(
    directory: str,
    out_dir: str | None,
    pattern: str,
    theme_name: str,
    module_format: str,
) -> None:
    """Transpile every stylesheet under DIRECTORY to a sibling .js module.

    Stops at the first stylesheet that fails and exits with code 1.
    """
    config = build_config(theme_name, module_format)
    root = Path(directory)
    out_root = Path(out_dir) if out_dir else None

    sources = sorted(p for p in root.rglob(pattern) if p.is_file())
    if not sources:
        click.echo(f"No files matching {pattern} under {directory}")
        return

    for source in sources:
        try:
            code = transpile_file(source, config)
        except TranspileError as exc:
            click.echo(f"Error in {source}:\n{exc}", err=True)
            sys.exit(1)
        target = output_path(source, root, out_root)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(code, encoding="utf-8")
        click.echo(f"{source} -> {target}")

    click.echo(f"Built {len(sources)} module(s)")
