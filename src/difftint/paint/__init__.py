"""Line painting — themes, grammars, tokenizing, and overlay composition."""

from difftint.paint.models import RenderConfig, Span
from difftint.paint.painter import compose, paint
from difftint.paint.syntax import PygmentsTokenizer, SyntaxCatalog, Tokenizer
from difftint.paint.themes import ThemeCatalog, ThemeError

__all__ = [
    "PygmentsTokenizer",
    "RenderConfig",
    "Span",
    "SyntaxCatalog",
    "ThemeCatalog",
    "ThemeError",
    "Tokenizer",
    "compose",
    "paint",
]
