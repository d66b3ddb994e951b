"""Turn a DiffTintConfig into the immutable RenderConfig used by the painter."""

from __future__ import annotations

import logging
from typing import Optional

from rich.color import Color, ColorSystem

from difftint.config.defaults import DEFAULT_MODE, MODE_DEFAULTS
from difftint.config.loader import ConfigError
from difftint.config.schema import DiffTintConfig
from difftint.paint.colors import parse_color
from difftint.paint.models import RenderConfig
from difftint.paint.syntax import PygmentsTokenizer, SyntaxCatalog
from difftint.paint.themes import ThemeCatalog, ThemeError

logger = logging.getLogger(__name__)

_COLOR_SYSTEMS = {
    "truecolor": ColorSystem.TRUECOLOR,
    "256": ColorSystem.EIGHT_BIT,
    "standard": ColorSystem.STANDARD,
}


def _overlay(value: Optional[str], default: str) -> Color:
    color = parse_color(value)
    if color is None:
        return Color.parse(default)
    return color


def resolve_render_config(
    cfg: DiffTintConfig,
    themes: Optional[ThemeCatalog] = None,
) -> RenderConfig:
    """Resolve theme, overlay colours, and grammar catalog. Raises ConfigError."""
    themes = themes or ThemeCatalog()
    render = cfg.render
    defaults = MODE_DEFAULTS[render.mode or DEFAULT_MODE]

    theme_name = render.theme or defaults.theme
    try:
        theme = themes.load(theme_name)
    except ThemeError as exc:
        raise ConfigError(str(exc)) from exc

    color_system = _COLOR_SYSTEMS.get(render.color_system)
    if color_system is None:
        raise ConfigError(f"Invalid color system: '{render.color_system}'")

    plus_color = _overlay(render.plus_color, defaults.plus_color)
    minus_color = _overlay(render.minus_color, defaults.minus_color)
    logger.info(
        "Theme %s, plus %s, minus %s, width %s",
        theme_name, plus_color.name, minus_color.name, render.width,
    )

    return RenderConfig(
        theme_name=theme_name,
        theme=theme,
        plus_color=plus_color,
        minus_color=minus_color,
        syntaxes=SyntaxCatalog(cfg.languages),
        tokenizer=PygmentsTokenizer(theme),
        width=render.width,
        color_system=color_system,
    )
