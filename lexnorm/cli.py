"""Command-line interface for lexnorm.

Responsibilities:
- Expose user-facing commands for tokenization, separator classification,
  and script/language detection.
- Convert CLI arguments and config files into `LexnormConfig`.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_normalizer_list,
    echo_separator_rows,
    echo_token_rows,
    exit_with_command_error,
)
from .config import ConfigLoader, LexnormConfig
from .detection import SpanDetection, default_classifier
from .errors import CONFIG_STAGE, INPUT_STAGE, PipelineStageError
from .parsing import split_name_list
from .pipeline import build_tokenizer
from .telemetry.logger import RunLogger
from .text.normalizers import DEFAULT_NORMALIZERS, resolve_normalizers
from .text.separators import classify_separator

app = typer.Typer(
    name="lexnorm",
    no_args_is_help=True,
    help="Multilingual token normalization CLI.",
)


def _load_yaml_config(config_path: Path | None) -> LexnormConfig | None:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return None

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise PipelineStageError(
            stage=CONFIG_STAGE,
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise PipelineStageError(
            stage=CONFIG_STAGE,
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc


def _resolve_command_config(
    config_file: Path | None,
    normalizers: str | None,
    detect_language: bool | None,
    scope: str | None,
) -> LexnormConfig:
    """Resolve effective config from YAML defaults and explicit CLI overrides."""

    base = _load_yaml_config(config_file) or LexnormConfig()
    resolved = replace(
        base,
        normalizers=split_name_list(normalizers) if normalizers is not None else base.normalizers,
        detect_language=detect_language if detect_language is not None else base.detect_language,
        detection_scope=scope.lower() if scope is not None else base.detection_scope,
    )
    try:
        resolved.validate()
    except ValueError as exc:
        raise PipelineStageError.from_exception(
            CONFIG_STAGE,
            exc,
            hint="Run `lexnorm normalizers` to list registered normalizer names.",
        ) from exc
    return resolved


def _read_input_text(text: str | None, input_file: Path | None) -> str:
    """Return command input from the positional argument or `--file`."""

    if text is not None and input_file is not None:
        raise PipelineStageError(
            stage=INPUT_STAGE,
            detail="Both TEXT and `--file` were provided.",
            hint="Pass either inline text or `--file <path>`, not both.",
        )
    if input_file is not None:
        try:
            return input_file.read_text(encoding="utf-8")
        except OSError as exc:
            raise PipelineStageError(
                stage=INPUT_STAGE,
                detail=f"Failed to read input file `{input_file}`: {exc}",
                hint="Verify the file exists and is UTF-8 encoded.",
            ) from exc
    if text is None:
        raise PipelineStageError(
            stage=INPUT_STAGE,
            detail="Input text is required.",
            hint="Pass TEXT or use `--file <path>`.",
        )
    return text


@app.command("tokenize")
def tokenize_command(
    text: Annotated[
        str | None,
        typer.Argument(help="Text to tokenize. Required unless `--file` is provided."),
    ] = None,
    input_file: Annotated[
        Path | None,
        typer.Option("--file", help="Read UTF-8 input text from this file."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with tokenizer defaults."),
    ] = None,
    normalizers: Annotated[
        str | None,
        typer.Option(
            "--normalizers",
            help="Comma-separated normalizer names, applied in the given order.",
        ),
    ] = None,
    detect_language: Annotated[
        bool | None,
        typer.Option(
            "--detect-language/--no-detect-language",
            help="Pass detected languages to normalizers (slower) or decide on script only.",
        ),
    ] = None,
    scope: Annotated[
        str | None,
        typer.Option("--scope", help="Detection scope: `clause` or `token`."),
    ] = None,
    words_only: Annotated[
        bool,
        typer.Option("--words-only", help="Omit separator tokens from the output."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Emit stage logs to stderr."),
    ] = False,
) -> None:
    """Segment and normalize text, printing one tab-separated row per token."""

    try:
        config = _resolve_command_config(config_file, normalizers, detect_language, scope)
        source = _read_input_text(text, input_file)
        run_logger = RunLogger(level=config.log_level) if verbose else None
        tokenizer = build_tokenizer(
            config,
            classifier=default_classifier(config.min_language_probability),
            run_logger=run_logger,
        )
        tokens = tokenizer.tokenize(source)
    except Exception as exc:
        exit_with_command_error("tokenize", exc)

    echo_token_rows(token for token in tokens if token.is_word or not words_only)


@app.command("classify")
def classify_command(
    chars: Annotated[str, typer.Argument(help="Characters to classify, one row each.")],
) -> None:
    """Print the separator strength of each code point."""

    echo_separator_rows([(char, classify_separator(char)) for char in chars])


@app.command("detect")
def detect_command(
    text: Annotated[str, typer.Argument(help="Text span to detect.")],
    language: Annotated[
        bool,
        typer.Option("--language/--no-language", help="Also detect the language."),
    ] = True,
) -> None:
    """Print the detected script and, optionally, language of a text span."""

    detection = SpanDetection(text, default_classifier())
    line = f"script={detection.script.value}"
    if language:
        line += f" language={detection.language.value}"
    typer.echo(line)


@app.command("normalizers")
def normalizers_command(
    names: Annotated[
        str | None,
        typer.Option("--names", help="Comma-separated names to resolve instead of the registry."),
    ] = None,
) -> None:
    """List normalizers in application order."""

    try:
        selected = (
            resolve_normalizers(split_name_list(names))
            if names is not None
            else DEFAULT_NORMALIZERS
        )
    except ValueError as exc:
        exit_with_command_error(
            "normalizers",
            PipelineStageError.from_exception(CONFIG_STAGE, exc),
        )
    echo_normalizer_list(selected)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
