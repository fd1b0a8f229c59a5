"""css-to-mui CLI entry point: Click group with subcommands."""

import logging

import click

from css_to_mui import __version__


@click.group()
@click.version_option(version=__version__, prog_name="css-to-mui")
@click.option("-v", "--verbose", is_flag=True, help="Log pipeline stages to stderr.")
def cli(verbose: bool) -> None:
    """css-to-mui - compile stylesheets into Material UI style functions."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from css_to_mui.cli.transpile import transpile  # noqa: E402
from css_to_mui.cli.check import check  # noqa: E402
from css_to_mui.cli.build import build  # noqa: E402

cli.add_command(transpile)
cli.add_command(check)
cli.add_command(build)
