"""Text input/output helpers for the CLI.

Responsibilities:
- Read source text from a file path or standard input as UTF-8.
- Write cleaned text to a file, creating parent directories as needed.
"""

from __future__ import annotations

from pathlib import Path

import typer

STDIN_MARKER = "-"


def read_input_text(path: Path | None) -> str:
    """Read text from `path`, or from stdin when `path` is `None` or `-`."""

    if path is None or str(path) == STDIN_MARKER:
        return typer.get_text_stream("stdin", encoding="utf-8").read()
    return path.read_text(encoding="utf-8")


def write_output_text(path: Path, content: str) -> Path:
    """Save text content and return final path."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
