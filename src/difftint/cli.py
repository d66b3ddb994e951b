"""difftint CLI — Typer application that filters a diff from stdin to stdout."""

from __future__ import annotations

import io
import logging
import os
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from difftint import __version__

app = typer.Typer(
    name="difftint",
    help="A syntax-highlighter for git. Use 'difftint | less -R' as core.pager in .gitconfig",
    add_completion=False,
)

console = Console(stderr=True)


def _configure_logging(verbose: bool, debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False, show_path=debug)],
        force=True,
    )


def _utf8(stream):
    """Reconfigure a text stream for UTF-8, replacing undecodable bytes."""
    if isinstance(stream, io.TextIOWrapper):
        stream.reconfigure(encoding="utf-8", errors="replace")
    return stream


def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush stays quiet."""
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        # stdout has no file descriptor (e.g. captured in tests)
        pass


def _version_callback(value: bool) -> None:
    if value:
        print(f"difftint {__version__}")
        raise typer.Exit()


@app.command()
def main(
    light: bool = typer.Option(
        False, "--light",
        help="Use diff highlighting colors appropriate for a light terminal background. This is the default.",
    ),
    dark: bool = typer.Option(
        False, "--dark",
        help="Use diff highlighting colors appropriate for a dark terminal background.",
    ),
    plus_color: Optional[str] = typer.Option(
        None, "--plus-color",
        help="Background color (RGB hex) for added lines. Default #d0ffd0 (--light) or #013B01 (--dark).",
    ),
    minus_color: Optional[str] = typer.Option(
        None, "--minus-color",
        help="Background color (RGB hex) for removed lines. Default #ffd0d0 (--light) or #3f0001 (--dark).",
    ),
    theme: Optional[str] = typer.Option(None, "--theme", help="Syntax highlighting theme (see --list-themes)"),
    width: Optional[int] = typer.Option(
        None, "--width", "-w",
        help="Width in columns of the diff highlighting. By default it ends with each line.",
    ),
    color_system: Optional[str] = typer.Option(
        None, "--color-system", help="Terminal colors: truecolor | 256 | standard",
    ),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to config.toml"),
    list_themes: bool = typer.Option(False, "--list-themes", help="List available themes and exit"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output on stderr"),
    debug: bool = typer.Option(False, "--debug", help="Debug output on stderr"),
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """Add syntax highlighting to the diff hunks read from stdin."""
    from difftint.config.loader import ConfigError, apply_overrides, load_config
    from difftint.config.resolver import resolve_render_config
    from difftint.paint.themes import ThemeCatalog
    from difftint.pipeline import Pipeline

    _configure_logging(verbose, debug)

    if list_themes:
        for name in ThemeCatalog().names():
            print(name)
        raise typer.Exit(code=0)

    # --- Config ---
    try:
        cfg = load_config(config)
        apply_overrides(
            cfg,
            light=light,
            dark=dark,
            theme=theme,
            plus_color=plus_color,
            minus_color=minus_color,
            width=width,
            color_system=color_system,
        )
        render_config = resolve_render_config(cfg)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    # --- Filter ---
    pipeline = Pipeline(render_config)
    stdout = _utf8(sys.stdout)
    try:
        pipeline.run(_utf8(sys.stdin), stdout)
        stdout.flush()
    except BrokenPipeError:
        # Reader went away (e.g. the pager quit); not an error.
        _silence_stdout()
        raise typer.Exit(code=0)
    except OSError as exc:
        console.print(f"[bold red]I/O error:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc
