"""Unicode compatibility normalization for every script."""

from __future__ import annotations

import unicodedata

from ...detection import Language, Script
from ...models.datatypes import Token

# Zero-width code points with no linguistic content (ZWJ/ZWNJ are kept).
_ZERO_WIDTH_ARTIFACTS = str.maketrans(
    {
        "\u200b": None,
        "\u2060": None,
        "\ufeff": None,
    }
)


class CompatibilityNormalizer:
    """Apply NFKC and drop zero-width artifacts.

    A token consisting only of zero-width artifacts is dropped.
    """

    name = "compatibility"

    def should_normalize(self, script: Script, language: Language | None) -> bool:
        return True

    def normalize(self, token: Token) -> list[Token]:
        lemma = unicodedata.normalize("NFKC", token.lemma.translate(_ZERO_WIDTH_ARTIFACTS))
        if not lemma and token.lemma:
            return []
        if lemma == token.lemma:
            return [token]
        return [token.with_lemma(lemma)]


COMPATIBILITY_NORMALIZER = CompatibilityNormalizer()
