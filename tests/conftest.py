"""Shared test fixtures — sample diffs, a fake tokenizer, render configs."""

from __future__ import annotations

import re
import textwrap
from typing import List

import pytest
from pygments.styles import get_style_by_name
from rich.color import Color
from rich.text import Text

from difftint.paint.models import RenderConfig, Span
from difftint.paint.syntax import SyntaxCatalog

WORD = Color.parse("#0000ff")
PLUS = Color.parse("#d0ffd0")
MINUS = Color.parse("#ffd0d0")


class FakeTokenizer:
    """Word characters are blue, everything else is uncoloured."""

    def __init__(self) -> None:
        self.calls: List[str] = []

    def tokenize(self, text, grammar) -> List[Span]:
        self.calls.append(text)
        return [
            Span(m.group(0), WORD if re.match(r"\w", m.group(0)) else None)
            for m in re.finditer(r"\w+|\W+", text)
        ]


def overlay_cells(rendered: str, color: Color) -> int:
    """Count characters of *rendered* drawn on *color* background."""
    text = Text.from_ansi(rendered)
    total = 0
    for span in text.spans:
        bg = span.style.bgcolor
        if bg is not None and bg.triplet == color.triplet:
            total += span.end - span.start
    return total


@pytest.fixture
def fake_tokenizer() -> FakeTokenizer:
    return FakeTokenizer()


@pytest.fixture
def render_config(fake_tokenizer) -> RenderConfig:
    """A light-mode config that tokenizes with FakeTokenizer."""
    return RenderConfig(
        theme_name="default",
        theme=get_style_by_name("default"),
        plus_color=PLUS,
        minus_color=MINUS,
        syntaxes=SyntaxCatalog(),
        tokenizer=fake_tokenizer,
    )


@pytest.fixture
def sample_diff_rust() -> str:
    """A one-line change to a Rust file."""
    return textwrap.dedent("""\
        diff --git a/x.rs b/x.rs
        index 111..222
        @@ -1,1 +1,1 @@
        -let x = 1;
        +let x = 2;
    """)


@pytest.fixture
def sample_diff_unknown() -> str:
    """The same change to a file with no known grammar."""
    return textwrap.dedent("""\
        diff --git a/x.unknownlang b/x.unknownlang
        index 111..222
        @@ -1,1 +1,1 @@
        -let x = 1;
        +let x = 2;
    """)


@pytest.fixture
def sample_diff_malformed() -> str:
    """A header without a/ and b/ paths."""
    return textwrap.dedent("""\
        diff --git garbage
        index 111..222
        @@ -1,1 +1,1 @@
        -let x = 1;
        +let x = 2;
    """)


@pytest.fixture
def sample_log_two_files() -> str:
    """git log -p style output: a commit touching a Python and a text file."""
    return textwrap.dedent("""\
        commit 0123456789abcdef0123456789abcdef01234567
        Author: Test <test@test.com>
        Date:   Mon Jan 1 00:00:00 2024 +0000

            Touch two files

        diff --git a/app.py b/app.py
        index 1234567..abcdef0 100644
        --- a/app.py
        +++ b/app.py
        @@ -1,3 +1,3 @@
         import os
        -DEBUG = False
        +DEBUG = True
        @@ -10,2 +10,2 @@ def main():
        -    return 0
        +    return 1
        diff --git a/README b/README
        index 1234567..abcdef0 100644
        --- a/README
        +++ b/README
        @@ -1 +1 @@
        -old
        +new
    """)
