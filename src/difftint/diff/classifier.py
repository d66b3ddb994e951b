"""Section classifier — prefix-driven state machine over diff lines.

Only three prefixes move the state. Every other line keeps the current
section, so metadata lines between a ``diff --`` header and the first ``@@``
stay in DIFF_META and every line after an ``@@`` stays in DIFF_HUNK.

A hunk line whose content happens to start with ``commit`` or ``diff --`` is
taken as a trigger. That is a known limitation of prefix matching and is kept.
"""

from __future__ import annotations

from typing import Optional, Tuple

from difftint.diff.models import Section

DIFF_HEADER_PREFIX = "diff --"
COMMIT_PREFIX = "commit"
HUNK_HEADER_PREFIX = "@@"

# Checked in order; first match wins.
_TRIGGERS: Tuple[Tuple[str, Section], ...] = (
    (DIFF_HEADER_PREFIX, Section.DIFF_META),
    (COMMIT_PREFIX, Section.COMMIT),
    (HUNK_HEADER_PREFIX, Section.DIFF_HUNK),
)


def transition(line: str) -> Optional[Section]:
    """Return the section *line* switches to, or None if it is not a trigger."""
    for prefix, section in _TRIGGERS:
        if line.startswith(prefix):
            return section
    return None


def classify(current: Section, line: str) -> Section:
    """Return the section in effect after *line*."""
    return transition(line) or current
