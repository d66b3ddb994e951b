"""Pipeline driver — classify each diff line and paint hunk bodies.

Run state is the current section and the grammar picked by the last
``diff --`` header. Nothing else is remembered between lines.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, TextIO

import click
from pygments.lexer import Lexer

from difftint.diff.classifier import transition
from difftint.diff.extension import extract_extension
from difftint.diff.models import Section
from difftint.paint.models import RenderConfig
from difftint.paint.painter import paint

logger = logging.getLogger(__name__)


def strip_ansi(text: str) -> str:
    """Remove colour escapes an upstream producer may have added."""
    if "\x1b" not in text:
        return text
    return click.unstyle(text)


class Pipeline:
    """Stream filter over diff lines.

    Usage::

        pipeline = Pipeline(render_config)
        pipeline.run(sys.stdin, sys.stdout)
    """

    def __init__(self, config: RenderConfig) -> None:
        self.config = config
        self.section: Section = Section.UNKNOWN
        self.grammar: Optional[Lexer] = None

    def process_line(self, raw_line: str) -> str:
        """Return the output for one input line (without its newline)."""
        line = strip_ansi(raw_line)

        section = transition(line)
        if section is not None:
            self.section = section
            if section is Section.DIFF_META:
                self.grammar = self._resolve_grammar(line)
            return raw_line

        if self.section is Section.DIFF_HUNK and self.grammar is not None:
            return paint(line, self.grammar, self.config)
        return raw_line

    def _resolve_grammar(self, header: str) -> Optional[Lexer]:
        extension = extract_extension(header)
        grammar = self.config.syntaxes.find_grammar(extension)
        if grammar is None:
            logger.debug("No grammar for %r (extension %r)", header, extension)
        else:
            logger.debug("Using %s grammar for extension %r", grammar.name, extension)
        return grammar

    def run(self, lines: Iterable[str], out: TextIO) -> int:
        """Filter *lines* into *out*, one output line per input line.

        Returns the number of lines written. Write errors (including
        ``BrokenPipeError``) propagate to the caller.
        """
        count = 0
        for raw_line in lines:
            if raw_line.endswith("\n"):
                raw_line = raw_line[:-1]
            out.write(self.process_line(raw_line))
            out.write("\n")
            count += 1
        return count
