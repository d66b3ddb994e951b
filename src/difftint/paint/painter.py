"""Line painter — syntax foregrounds blended with an added/removed overlay.

The output of :func:`paint` is the input text with SGR escapes interleaved.
When a width is configured the overlay covers exactly that many columns:
short lines get overlay-coloured padding, long lines keep their text but the
overlay stops at the edge.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from pygments.lexer import Lexer
from rich.cells import cell_len, get_character_cell_size
from rich.color import Color
from rich.style import Style

from difftint.paint.models import RenderConfig, Span

logger = logging.getLogger(__name__)

PLUS_MARKER = "+"
MINUS_MARKER = "-"

Segment = Tuple[Span, Optional[Color]]


def overlay_for(line_text: str, config: RenderConfig) -> Optional[Color]:
    """Return the background for a hunk line, keyed on its diff marker."""
    if line_text.startswith(PLUS_MARKER):
        return config.plus_color
    if line_text.startswith(MINUS_MARKER):
        return config.minus_color
    return None


def compose(span: Span, overlay: Optional[Color]) -> Style:
    """Foreground from the syntax span, background from the diff overlay."""
    return Style(color=span.foreground, bgcolor=overlay)


def cover(text: str, spans: Iterable[Span]) -> List[Span]:
    """Return spans that tile *text* exactly.

    Spans are accepted while they match the text left to right. From the first
    mismatch on, the rest of the line becomes one uncoloured span.
    """
    covered: List[Span] = []
    pos = 0
    for span in spans:
        if not span.text:
            continue
        if not text.startswith(span.text, pos):
            logger.debug("Tokenizer output diverged from line at offset %d", pos)
            break
        covered.append(span)
        pos += len(span.text)
    if pos < len(text):
        covered.append(Span(text[pos:]))
    return covered


def _split_at_column(text: str, columns: int) -> Tuple[str, str]:
    """Split *text* so the head fits in *columns* display cells."""
    used = 0
    for index, char in enumerate(text):
        size = get_character_cell_size(char)
        if used + size > columns:
            return text[:index], text[index:]
        used += size
    return text, ""


def clamp(spans: List[Span], overlay: Optional[Color], width: Optional[int]) -> List[Segment]:
    """Pair each span with its background, honouring the overlay width."""
    if overlay is None:
        return [(span, None) for span in spans]
    if width is None:
        return [(span, overlay) for span in spans]

    segments: List[Segment] = []
    remaining = width
    for span in spans:
        if remaining <= 0:
            segments.append((span, None))
            continue
        size = cell_len(span.text)
        if size <= remaining:
            segments.append((span, overlay))
            remaining -= size
            continue
        head, tail = _split_at_column(span.text, remaining)
        if head:
            segments.append((Span(head, span.foreground), overlay))
        segments.append((Span(tail, span.foreground), None))
        # A wide character straddling the edge leaves the overlay one cell short.
        remaining = 0
    if remaining > 0:
        segments.append((Span(" " * remaining), overlay))
    return segments


def paint(line_text: str, grammar: Lexer, config: RenderConfig) -> str:
    """Render one hunk line with syntax colours and the diff overlay."""
    spans = cover(line_text, config.tokenizer.tokenize(line_text, grammar))
    overlay = overlay_for(line_text, config)
    return "".join(
        compose(span, background).render(span.text, color_system=config.color_system)
        for span, background in clamp(spans, overlay, config.width)
    )
