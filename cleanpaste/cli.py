"""Command-line interface for cleanpaste.

Responsibilities:
- Expose user-facing commands for cleaning text and inspecting configuration.
- Convert CLI arguments into `CleaningConfig` overrides and run the cleaner.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_config_summary,
    echo_empty_output_notice,
    echo_written_output,
    exit_with_command_error,
)
from .config import CleaningConfig, ConfigLoader
from .errors import (
    STAGE_CLEAN,
    STAGE_CONFIG,
    STAGE_INPUT,
    STAGE_OUTPUT,
    CommandStageError,
)
from .io.text_io import read_input_text, write_output_text
from .telemetry.logger import RunLogger
from .text.cleaners import TextCleaner

app = typer.Typer(
    name="cleanpaste",
    no_args_is_help=True,
    help="Clean pasted text: citation marks, spaces, line breaks and full-width characters.",
)

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        help="Path to YAML/JSON settings file with rule defaults.",
    ),
]
ReferenceMarksOption = Annotated[
    bool | None,
    typer.Option(
        "--remove-reference-marks/--keep-reference-marks",
        help="Toggle removal of numeric [..] and (..) citation markers.",
    ),
]
ExtraSpacesOption = Annotated[
    bool | None,
    typer.Option(
        "--remove-extra-spaces/--keep-extra-spaces",
        help="Toggle deletion of every ASCII space run.",
    ),
]
NewlinesOption = Annotated[
    bool | None,
    typer.Option(
        "--remove-newlines/--keep-newlines",
        help="Toggle deletion of line breaks.",
    ),
]
FullWidthOption = Annotated[
    bool | None,
    typer.Option(
        "--convert-full-width/--keep-full-width",
        help="Toggle full-width to half-width character conversion.",
    ),
]


def _resolve_config(
    config_file: Path | None,
    cli_overrides: dict[str, bool | None],
) -> CleaningConfig:
    """Resolve effective config and map loader failures to stage errors."""

    try:
        return ConfigLoader.resolve(config_path=config_file, cli_overrides=cli_overrides)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage=STAGE_CONFIG,
            detail=f"Config file not found: `{config_file}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage=STAGE_CONFIG,
            detail=f"Invalid configuration: {exc}",
            hint="Fix config keys/values (or `CLEANPASTE_*` env vars) and rerun.",
        ) from exc
    except OSError as exc:
        raise CommandStageError(
            stage=STAGE_CONFIG,
            detail=f"Failed to load config file `{config_file}`: {exc}",
            hint="Verify file permissions.",
        ) from exc


def _read_source(input_path: Path | None) -> str:
    """Read source text and map failures to stage errors."""

    try:
        return read_input_text(input_path)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage=STAGE_INPUT,
            detail=f"Input file not found: `{input_path}`.",
            hint="Pass an existing file path, or `-` to read from stdin.",
        ) from exc
    except UnicodeDecodeError as exc:
        raise CommandStageError(
            stage=STAGE_INPUT,
            detail=f"Input `{input_path}` is not valid UTF-8 text.",
            hint="Re-encode the file as UTF-8 and rerun.",
        ) from exc
    except OSError as exc:
        raise CommandStageError(
            stage=STAGE_INPUT,
            detail=f"Failed to read input `{input_path}`: {exc}",
        ) from exc


@app.command("clean")
def clean_command(
    input_path: Annotated[
        Path | None,
        typer.Argument(
            help="Text file to clean; omit or pass `-` to read stdin.",
            show_default=False,
        ),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write cleaned text to this file instead of stdout."),
    ] = None,
    config_file: ConfigOption = None,
    remove_reference_marks: ReferenceMarksOption = None,
    remove_extra_spaces: ExtraSpacesOption = None,
    remove_newlines: NewlinesOption = None,
    convert_full_width: FullWidthOption = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Emit phase logs on stderr."),
    ] = False,
) -> None:
    """Clean text from a file or stdin with the enabled rules."""

    run_logger = RunLogger() if verbose else None
    stage = STAGE_CONFIG
    try:
        config = _resolve_config(
            config_file,
            {
                "remove_reference_marks": remove_reference_marks,
                "remove_extra_spaces": remove_extra_spaces,
                "remove_newlines": remove_newlines,
                "convert_full_width": convert_full_width,
            },
        )
        stage = STAGE_INPUT
        raw_text = _read_source(input_path)

        stage = STAGE_CLEAN
        if run_logger is not None:
            run_logger.log_stage_start(
                stage, chars=len(raw_text), rules=config.enabled_rules()
            )
        report = TextCleaner().clean_with_report(raw_text, config)
        if run_logger is not None:
            run_logger.log_clean_report(report, input_chars=len(raw_text))

        if not report.cleaned_text:
            echo_empty_output_notice()
            return

        stage = STAGE_OUTPUT
        if out is None:
            typer.echo(report.cleaned_text)
            return
        try:
            written = write_output_text(out, report.cleaned_text)
        except OSError as exc:
            raise CommandStageError(
                stage=STAGE_OUTPUT,
                detail=f"Failed to write output `{out}`: {exc}",
                hint="Verify the output directory is writable.",
            ) from exc
        if run_logger is not None:
            run_logger.log_stage_complete(stage, target=written)
    except Exception as exc:
        if run_logger is not None:
            run_logger.log_stage_failure(
                getattr(exc, "stage", stage), error_type=type(exc).__name__
            )
        exit_with_command_error("clean", exc)

    echo_written_output(written, len(report.cleaned_text))


@app.command("show-config")
def show_config_command(
    config_file: ConfigOption = None,
    remove_reference_marks: ReferenceMarksOption = None,
    remove_extra_spaces: ExtraSpacesOption = None,
    remove_newlines: NewlinesOption = None,
    convert_full_width: FullWidthOption = None,
) -> None:
    """Print effective rule flags after merging file, env and CLI values."""

    try:
        config = _resolve_config(
            config_file,
            {
                "remove_reference_marks": remove_reference_marks,
                "remove_extra_spaces": remove_extra_spaces,
                "remove_newlines": remove_newlines,
                "convert_full_width": convert_full_width,
            },
        )
    except Exception as exc:
        exit_with_command_error("show-config", exc)

    echo_config_summary(config)


def main() -> None:
    """Run the cleanpaste CLI."""

    app()


if __name__ == "__main__":
    main()
