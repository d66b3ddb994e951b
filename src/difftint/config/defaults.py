"""Default themes, overlay colours, and config file locations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ModeDefaults:
    theme: str
    plus_color: str
    minus_color: str


DEFAULT_MODE = "light"

MODE_DEFAULTS = {
    "light": ModeDefaults(theme="default", plus_color="#d0ffd0", minus_color="#ffd0d0"),
    "dark": ModeDefaults(theme="monokai", plus_color="#013B01", minus_color="#3f0001"),
}

DEFAULT_COLOR_SYSTEM = "truecolor"

CONFIG_DIRNAME = "difftint"
CONFIG_FILENAME = "config.toml"
