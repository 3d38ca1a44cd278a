"""Domain exceptions for CLI diagnostics."""

from __future__ import annotations

STAGE_CONFIG = "config"
STAGE_INPUT = "input"
STAGE_CLEAN = "clean"
STAGE_OUTPUT = "output"

COMMAND_STAGES = (STAGE_CONFIG, STAGE_INPUT, STAGE_CLEAN, STAGE_OUTPUT)


class CommandStageError(RuntimeError):
    """Raised when loading settings, reading text or writing cleaned output fails.

    `stage` is one of `COMMAND_STAGES`; the cleaning stage itself never raises,
    so in practice it is `config`, `input` or `output`.
    """

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        if stage not in COMMAND_STAGES:
            raise ValueError(f"Unknown command stage `{stage}`.")
        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
