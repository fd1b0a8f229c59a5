"""Options shared by the commands that generate code."""

from __future__ import annotations

from typing import Callable

import click

from css_to_mui.config import MODULE_FORMATS, TranspileConfig


def config_options(func: Callable) -> Callable:
    """Add ``--theme-name`` and ``--module-format`` to a command."""
    func = click.option(
        "--module-format",
        type=click.Choice(MODULE_FORMATS),
        default="esm",
        show_default=True,
        envvar="CSS_TO_MUI_MODULE_FORMAT",
        help="Export style of the generated module.",
    )(func)
    func = click.option(
        "--theme-name",
        default="theme",
        show_default=True,
        envvar="CSS_TO_MUI_THEME_NAME",
        help="Name of the theme parameter in generated code.",
    )(func)
    return func


def build_config(theme_name: str, module_format: str) -> TranspileConfig:
    try:
        return TranspileConfig(theme_name=theme_name, module_format=module_format)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc
