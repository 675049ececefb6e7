"""Shared pytest fixtures for the full lexnorm test suite."""

from __future__ import annotations

from typing import Callable

import pytest

from lexnorm.detection import Language, Script, SpanDetection
from lexnorm.models.datatypes import SeparatorKind, Token, TokenKind
from tests.fixture_classifiers import StubClassifier


@pytest.fixture
def stub_classifier() -> Callable[..., StubClassifier]:
    """Provide a factory for deterministic, call-counting classifiers."""

    return StubClassifier


@pytest.fixture
def make_token() -> Callable[..., Token]:
    """Provide a factory for tokens with preset script/language tags.

    Offsets default to a span starting at `char_start` that matches the lemma,
    with byte offsets derived from its UTF-8 encoding.
    """

    def _make_token(
        lemma: str,
        script: Script = Script.LATIN,
        language: Language | None = Language.OTHER,
        *,
        char_start: int = 0,
        byte_start: int | None = None,
        separator_kind: SeparatorKind | None = None,
    ) -> Token:
        resolved_byte_start = char_start if byte_start is None else byte_start
        return Token(
            lemma=lemma,
            char_start=char_start,
            char_end=char_start + len(lemma),
            byte_start=resolved_byte_start,
            byte_end=resolved_byte_start + len(lemma.encode("utf-8")),
            kind=TokenKind.SEPARATOR if separator_kind is not None else TokenKind.WORD,
            separator_kind=separator_kind,
            detection=SpanDetection(lemma, script=script, language=language),
        )

    return _make_token
