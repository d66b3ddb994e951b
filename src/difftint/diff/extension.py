"""Extension resolver — file-type hint from a ``diff --`` header line."""

from __future__ import annotations

import posixpath
import re
from typing import Optional

# diff --git a/<old path> b/<new path>
_DIFF_HEADER_RE = re.compile(r"^diff --\S+ a/.* b/(?P<path>.+)$")


def extract_path(line: str) -> Optional[str]:
    """Return the new-side path of a two-path diff header, or None."""
    m = _DIFF_HEADER_RE.match(line.rstrip("\r"))
    if not m:
        return None
    return m.group("path")


def extract_extension(line: str) -> Optional[str]:
    """Return the extension (without the dot) of the file named by *line*.

    ``None`` when the header is malformed or the file has no extension.
    Dotfiles such as ``.bashrc`` count as having no extension.
    """
    path = extract_path(line)
    if path is None:
        return None
    _, ext = posixpath.splitext(posixpath.basename(path))
    return ext[1:] or None
