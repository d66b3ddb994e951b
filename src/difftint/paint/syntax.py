"""Syntax lookup and tokenizing — grammar catalog backed by pygments lexers.

The painter only depends on the :class:`Tokenizer` protocol, so tests can
swap in a deterministic fake while the CLI uses :class:`PygmentsTokenizer`.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Protocol, Type

from pygments.lexer import Lexer
from pygments.lexers import find_lexer_class_by_name, get_lexer_by_name, get_lexer_for_filename
from pygments.style import Style as PygmentsStyle
from pygments.token import _TokenType
from pygments.util import ClassNotFound
from rich.color import Color

from difftint.paint.colors import from_pygments
from difftint.paint.models import Span

logger = logging.getLogger(__name__)

# A single diff line must come back from the lexer with its text intact.
_LEXER_OPTIONS = {"stripnl": False, "ensurenl": False}


class Tokenizer(Protocol):
    def tokenize(self, text: str, grammar: Lexer) -> List[Span]:
        """Split *text* into ordered spans coloured by *grammar*."""
        ...


class PygmentsTokenizer:
    """Tokenize with a pygments lexer and colour spans from a pygments style."""

    def __init__(self, theme: Type[PygmentsStyle]) -> None:
        self._theme = theme
        self._colors: Dict[_TokenType, Optional[Color]] = {}

    def foreground(self, ttype: _TokenType) -> Optional[Color]:
        if ttype not in self._colors:
            styled = ttype
            # Lexers may emit token subtypes the style never mentions.
            while not self._theme.styles_token(styled) and styled.parent is not None:
                styled = styled.parent
            self._colors[ttype] = from_pygments(self._theme.style_for_token(styled)["color"])
        return self._colors[ttype]

    def tokenize(self, text: str, grammar: Lexer) -> List[Span]:
        return [
            Span(value, self.foreground(ttype))
            for ttype, value in grammar.get_tokens(text)
            if value
        ]


def _normalise_extension(ext: str) -> str:
    return ext.lstrip(".").lower()


class SyntaxCatalog:
    """Map file extensions to pygments lexers.

    *aliases* maps an extension to a lexer name and wins over pygments' own
    file-name patterns. Aliases naming an unknown lexer are dropped.
    """

    def __init__(self, aliases: Optional[Mapping[str, str]] = None) -> None:
        self._aliases: Dict[str, str] = {}
        self._cache: Dict[str, Optional[Lexer]] = {}
        for ext, name in (aliases or {}).items():
            try:
                find_lexer_class_by_name(name)
            except ClassNotFound:
                logger.warning("Skipping language alias %s -> %s: unknown lexer", ext, name)
                continue
            self._aliases[_normalise_extension(ext)] = name

    def find_grammar(self, extension: Optional[str]) -> Optional[Lexer]:
        """Return a lexer for *extension*, or None if there is none."""
        if not extension:
            return None
        if extension not in self._cache:
            self._cache[extension] = self._lookup(extension)
        return self._cache[extension]

    def _lookup(self, extension: str) -> Optional[Lexer]:
        alias = self._aliases.get(_normalise_extension(extension))
        try:
            if alias is not None:
                return get_lexer_by_name(alias, **_LEXER_OPTIONS)
            return get_lexer_for_filename(f"file.{extension}", **_LEXER_OPTIONS)
        except ClassNotFound:
            return None
