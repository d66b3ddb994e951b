"""Diff line classification — sections and file-type hints."""

from difftint.diff.classifier import classify, transition
from difftint.diff.extension import extract_extension, extract_path
from difftint.diff.models import Section

__all__ = [
    "Section",
    "classify",
    "extract_extension",
    "extract_path",
    "transition",
]
