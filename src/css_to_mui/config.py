from __future__ import annotations

from dataclasses import dataclass

MODULE_FORMATS = ("esm", "commonjs")


@dataclass(frozen=True)
class TranspileConfig:
    """Generation-time constants for the emitted module."""

    theme_name: str = "theme"
    spacing_unit: str = "spacing.unit"  # attribute path under the theme
    mixin_property: str = "-mui-mixins"
    root_selector: str = ":root"
    module_format: str = "esm"  # "esm" or "commonjs"
    indent: int = 2

    def __post_init__(self) -> None:
        if not self.theme_name:
            raise ValueError("theme_name must be a non-empty string")
        if self.module_format not in MODULE_FORMATS:
            raise ValueError(
                f"module_format must be one of {', '.join(MODULE_FORMATS)}, "
                f"received: {self.module_format!r}"
            )

    @property
    def spacing_expression(self) -> str:
        """Expression evaluating to the theme's spacing unit, e.g. ``theme.spacing.unit``."""
        return f"{self.theme_name}.{self.spacing_unit}"
