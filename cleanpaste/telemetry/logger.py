"""Structured run logging utilities.

Responsibilities:
- Emit concise, deterministic phase-level runtime logs through `loguru`.
- Report which cleaning rules ran and changed text, never the text itself.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger

from ..errors import STAGE_CLEAN
from ..text.cleaners import TextCleaningReport


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    if isinstance(value, (list, tuple)):
        value = ",".join(str(item) for item in value)
    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/", ","} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class RunLogger:
    """Emit deterministic phase logs for CLI-observable cleaning activity."""

    def __init__(self, sink: TextIO | None = None) -> None:
        """Configure the loguru sink; stderr keeps stdout free for cleaned output."""

        self._sink = sink or sys.stderr
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level="INFO", colorize=False)

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured runtime log line."""

        line = f"[phase] level={level} stage={stage} event={event}{_format_context(context)}"
        _loguru_logger.log(level, line)

    def log_stage_start(self, stage: str, **context: object) -> None:
        """Emit a stage-start runtime event."""

        self._emit("INFO", "start", stage, **context)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        """Emit a stage-complete runtime event."""

        self._emit("INFO", "complete", stage, **context)

    def log_clean_report(self, report: TextCleaningReport, input_chars: int) -> None:
        """Emit the clean-stage completion event with rule diagnostics, never the text."""

        self._emit(
            "INFO",
            "complete",
            STAGE_CLEAN,
            applied=report.applied_rules,
            changed=report.changed_rules,
            chars_in=input_chars,
            chars_out=len(report.cleaned_text),
        )

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage-failure runtime event without payload details."""

        self._emit("ERROR", "failure", stage, error_type=error_type)
