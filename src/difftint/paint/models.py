"""Data models for line painting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Type

from rich.color import Color, ColorSystem

if TYPE_CHECKING:
    from pygments.style import Style as PygmentsStyle

    from difftint.paint.syntax import SyntaxCatalog, Tokenizer


@dataclass(frozen=True, slots=True)
class Span:
    """A run of text sharing one syntax foreground colour."""

    text: str
    foreground: Optional[Color] = None


@dataclass(frozen=True)
class RenderConfig:
    """Everything the painter needs, resolved once per run."""

    theme_name: str
    theme: Type[PygmentsStyle]
    plus_color: Color
    minus_color: Color
    syntaxes: SyntaxCatalog
    tokenizer: Tokenizer
    width: Optional[int] = None  # None = overlay ends with the text
    color_system: ColorSystem = ColorSystem.TRUECOLOR
