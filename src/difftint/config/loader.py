"""Load and merge configuration from the config file, env vars, and CLI flags."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import yaml

from difftint.config.defaults import CONFIG_DIRNAME, CONFIG_FILENAME
from difftint.config.schema import COLOR_SYSTEMS, MODES, DiffTintConfig, RenderSettings

logger = logging.getLogger(__name__)

ENV_CONFIG = "DIFFTINT_CONFIG"

_STRING_SETTINGS = ("mode", "theme", "plus_color", "minus_color", "color_system", "languages_file")


class ConfigError(Exception):
    """Raised when config is malformed, contradictory, or unreadable."""


def default_config_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / CONFIG_DIRNAME / CONFIG_FILENAME


def find_config_file(override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override*, then $DIFFTINT_CONFIG, then XDG."""
    explicit = override or os.environ.get(ENV_CONFIG)
    if explicit:
        p = Path(explicit).expanduser()
        if not p.is_file():
            raise ConfigError(f"Config file not found: {explicit}")
        return p
    candidate = default_config_path()
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _clean_languages(data: Any, origin: Path) -> Dict[str, str]:
    if not isinstance(data, dict):
        raise ConfigError(f"Languages in {origin} must be a mapping of extension to lexer name")
    return {str(ext).lstrip(".").lower(): str(name) for ext, name in data.items()}


def _load_languages_file(path: Path) -> Dict[str, str]:
    """Read a YAML mapping of extension -> lexer name."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to read languages file {path}: {exc}") from exc
    if data is None:
        return {}
    return _clean_languages(data, path)


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    import dataclasses

    table = data.get(section, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[{section}] must be a table, got {type(table).__name__}")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in table.items() if k in valid_fields}
    return cls(**filtered)


def _merge_env_overrides(cfg: DiffTintConfig) -> None:
    """Apply DIFFTINT_* environment variable overrides."""
    if val := os.environ.get("DIFFTINT_THEME"):
        cfg.render.theme = val
    if val := os.environ.get("DIFFTINT_MODE"):
        if val in MODES:
            cfg.render.mode = val  # type: ignore[assignment]
    if val := os.environ.get("DIFFTINT_WIDTH"):
        try:
            cfg.render.width = int(val)
        except ValueError:
            logger.warning("Ignoring DIFFTINT_WIDTH=%r: not an integer", val)


def _validate(cfg: DiffTintConfig) -> None:
    render = cfg.render
    for name in _STRING_SETTINGS:
        value = getattr(render, name)
        if value is not None and not isinstance(value, str):
            raise ConfigError(f"Invalid {name}: {value!r} (expected a string)")
    if render.mode is not None and render.mode not in MODES:
        raise ConfigError(f"Invalid mode: '{render.mode}' (expected light or dark)")
    if render.color_system not in COLOR_SYSTEMS:
        raise ConfigError(
            f"Invalid color system: '{render.color_system}' "
            f"(expected one of {', '.join(COLOR_SYSTEMS)})"
        )
    if render.width is not None:
        if isinstance(render.width, bool) or not isinstance(render.width, int) or render.width <= 0:
            raise ConfigError(f"Invalid width: {render.width!r} (expected a positive integer)")


def load_config(config_override: Optional[str] = None) -> DiffTintConfig:
    """Load and return a DiffTintConfig (file + env, no CLI flags yet)."""
    config_path = find_config_file(config_override)

    if config_path is None:
        cfg = DiffTintConfig()
    else:
        logger.info("Reading config from %s", config_path)
        raw = _parse_toml(config_path)
        cfg = DiffTintConfig(
            version=str(raw.get("version", "1.0")),
            render=_build_section(raw, RenderSettings, "render"),
            languages=_clean_languages(raw.get("languages", {}), config_path),
            source=config_path,
        )
        _validate(cfg)
        if cfg.render.languages_file:
            languages_path = Path(cfg.render.languages_file).expanduser()
            if not languages_path.is_absolute():
                languages_path = config_path.parent / languages_path
            # Inline [languages] entries win over the file.
            cfg.languages = {**_load_languages_file(languages_path), **cfg.languages}

    _merge_env_overrides(cfg)
    _validate(cfg)
    return cfg


def apply_overrides(
    cfg: DiffTintConfig,
    *,
    light: bool = False,
    dark: bool = False,
    theme: Optional[str] = None,
    plus_color: Optional[str] = None,
    minus_color: Optional[str] = None,
    width: Optional[int] = None,
    color_system: Optional[str] = None,
) -> DiffTintConfig:
    """Apply command-line flags on top of *cfg*. Flags always win."""
    if light and dark:
        raise ConfigError("--light or --dark cannot be used together. Default is --light.")
    if light:
        cfg.render.mode = "light"
    elif dark:
        cfg.render.mode = "dark"
    if theme:
        cfg.render.theme = theme
    if plus_color:
        cfg.render.plus_color = plus_color
    if minus_color:
        cfg.render.minus_color = minus_color
    if width is not None:
        cfg.render.width = width
    if color_system:
        cfg.render.color_system = color_system  # type: ignore[assignment]
    _validate(cfg)
    return cfg
