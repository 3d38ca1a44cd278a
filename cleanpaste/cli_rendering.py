"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation: failure diagnostics,
cleaning notices and effective configuration summaries. Everything except
the cleaned text itself goes to stderr so stdout can be piped.
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from .config import CleaningConfig
from .errors import STAGE_CONFIG, CommandStageError


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print a one-line diagnostic (plus optional hint) and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
        if exc.stage == STAGE_CONFIG:
            typer.secho(
                "Settings precedence: CLI flags > CLEANPASTE_* env > --config file > defaults.",
                err=True,
            )
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_empty_output_notice() -> None:
    """Tell the user nothing was written because cleaning left no text."""

    typer.secho("Cleaned output is empty; nothing written.", fg=typer.colors.YELLOW, err=True)


def echo_written_output(path: Path, char_count: int) -> None:
    """Confirm where cleaned text was written."""

    typer.echo(f"Cleaned output: {path} ({char_count} chars)")


def echo_config_summary(config: CleaningConfig) -> None:
    """Print effective rule flags in pipeline order."""

    for name, enabled in config.as_mapping().items():
        typer.echo(f"{name}: {'true' if enabled else 'false'}")
