"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
token rows, separator classification rows, and the normalizer registry.
"""

from __future__ import annotations

from typing import Iterable, NoReturn, Sequence

import typer

from .errors import PipelineStageError
from .models.datatypes import SeparatorKind, Token
from .text.normalizers import Normalizer


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, PipelineStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def format_token_row(token: Token) -> str:
    """Render one token as a tab-separated row.

    The language column shows `-` unless detection already ran for the
    token's span, so rendering never triggers language classification.
    """

    detection = token.detection
    language = detection.language_if_detected if detection is not None else None
    kind = token.separator_kind.value if token.separator_kind is not None else token.kind.value
    return "\t".join(
        [
            token.lemma,
            str(token.char_start),
            str(token.char_end),
            str(token.byte_start),
            str(token.byte_end),
            kind,
            token.script.value,
            language.value if language is not None else "-",
        ]
    )


def echo_token_rows(tokens: Iterable[Token]) -> None:
    """Print one row per token in stream order."""

    for token in tokens:
        typer.echo(format_token_row(token))


def echo_separator_rows(rows: Sequence[tuple[str, SeparatorKind | None]]) -> None:
    """Print code point and separator strength rows (`-` for non-separators)."""

    for char, kind in rows:
        typer.echo(f"U+{ord(char):04X}\t{kind.value if kind is not None else '-'}")


def echo_normalizer_list(normalizers: Sequence[Normalizer]) -> None:
    """Print the registry in application order."""

    for index, normalizer in enumerate(normalizers, start=1):
        typer.echo(f"{index}. {normalizer.name}")
