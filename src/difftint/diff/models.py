"""Data models for diff section tracking."""

from __future__ import annotations

from enum import Enum


class Section(str, Enum):
    COMMIT = "commit"
    DIFF_META = "diff_meta"
    DIFF_HUNK = "diff_hunk"
    UNKNOWN = "unknown"
