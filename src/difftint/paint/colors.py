"""Colour helpers — overlay colour parsing and pygments → rich conversion."""

from __future__ import annotations

import logging
from typing import Optional

from rich.color import Color, ColorParseError

logger = logging.getLogger(__name__)


def parse_color(value: Optional[str]) -> Optional[Color]:
    """Parse a user supplied colour (``#rrggbb`` or a named colour).

    Returns None for empty or unparsable input so callers can fall back to a
    default instead of aborting.
    """
    if not value or not value.strip():
        return None
    try:
        return Color.parse(value.strip())
    except ColorParseError:
        logger.warning("Ignoring invalid colour %r", value)
        return None


def _ansi_name(name: str) -> str:
    """Map a pygments ``ansi*`` colour name onto rich's naming."""
    name = name[len("ansi"):]
    if name == "gray":
        return "white"
    if name == "white":
        return "bright_white"
    if name.startswith("bright"):
        return "bright_" + name[len("bright"):]
    return name


def from_pygments(value: Optional[str]) -> Optional[Color]:
    """Convert a pygments style colour (``f8f8f2``, ``#f8f8f2``, ``ansired``)."""
    if not value:
        return None
    if value.startswith("ansi"):
        spec = _ansi_name(value)
    elif value.startswith("#"):
        spec = value
    else:
        spec = f"#{value}"
    try:
        return Color.parse(spec)
    except ColorParseError:
        logger.debug("Unsupported theme colour %r", value)
        return None
