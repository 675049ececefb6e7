"""Normalizer protocol shared by all token transformations."""

from __future__ import annotations

from typing import Protocol

from ...detection import Language, Script
from ...models.datatypes import Token


class Normalizer(Protocol):
    """Protocol for script/language-aware token transformations.

    Implementations are stateless; one instance may serve any number of
    token streams.
    """

    name: str

    def should_normalize(self, script: Script, language: Language | None) -> bool:
        """Return whether this normalizer applies to tokens with these tags.

        `language` is `None` when language detection is disabled.
        """

    def normalize(self, token: Token) -> list[Token]:
        """Transform one token into zero or more tokens in left-to-right order."""
