"""Transpilation pipeline: parse, build the rule tree, emit."""

from __future__ import annotations

import logging
from pathlib import Path

from css_to_mui.builder import build_rule_tree
from css_to_mui.config import TranspileConfig
from css_to_mui.emitter import emit_module
from css_to_mui.errors import SourceDecodeError
from css_to_mui.parser import parse_stylesheet

__all__ = ["transpile", "transpile_file"]

logger = logging.getLogger(__name__)


def transpile(source: str, config: TranspileConfig | None = None) -> str:
    """Transpile stylesheet *source* into a JS module exporting ``(theme) => styles``.

    All-or-nothing: any TranspileError aborts without partial output.
    """
    config = config or TranspileConfig()
    stylesheet = parse_stylesheet(source)
    logger.debug("Parsed %d top-level rule(s)", len(stylesheet.rules))

    tree = build_rule_tree(stylesheet, root_selector=config.root_selector)
    logger.debug(
        "Built rule tree: %d rule(s), %d media block(s), %d keyframes, %d root variable(s)",
        len(tree.rules),
        len(tree.media),
        len(tree.keyframes),
        len(tree.root),
    )
    return emit_module(tree, config)


def transpile_file(path: str | Path, config: TranspileConfig | None = None) -> str:
    """Read *path* and transpile it.

    Undecodable bytes raise SourceDecodeError, so callers only need to
    handle TranspileError.
    """
    path = Path(path)
    logger.debug("Transpiling %s", path)
    try:
        source = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise SourceDecodeError(str(path), str(e)) from e
    return transpile(source, config)
