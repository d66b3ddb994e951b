"""Configuration loading, schema, defaults, and render resolution."""

from difftint.config.loader import ConfigError, apply_overrides, load_config
from difftint.config.resolver import resolve_render_config
from difftint.config.schema import DiffTintConfig, RenderSettings

__all__ = [
    "ConfigError",
    "DiffTintConfig",
    "RenderSettings",
    "apply_overrides",
    "load_config",
    "resolve_render_config",
]
