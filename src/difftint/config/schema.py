"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Literal, Optional

Mode = Literal["light", "dark"]
ColorSystemName = Literal["truecolor", "256", "standard"]

MODES = ("light", "dark")
COLOR_SYSTEMS = ("truecolor", "256", "standard")


@dataclass
class RenderSettings:
    mode: Optional[Mode] = None  # None = light
    theme: Optional[str] = None  # None = the mode's default theme
    plus_color: Optional[str] = None
    minus_color: Optional[str] = None
    width: Optional[int] = None
    color_system: ColorSystemName = "truecolor"
    languages_file: Optional[str] = None  # YAML mapping: extension -> lexer name


@dataclass
class DiffTintConfig:
    version: str = "1.0"
    render: RenderSettings = field(default_factory=RenderSettings)
    languages: Dict[str, str] = field(default_factory=dict)
    source: Optional[Path] = None  # file the config was read from
