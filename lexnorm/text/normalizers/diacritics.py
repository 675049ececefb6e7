"""Diacritic stripping for Latin script."""

from __future__ import annotations

import unicodedata

from ...detection import Language, Script
from ...models.datatypes import Token


def strip_diacritics(text: str) -> str:
    """Remove combining marks after compatibility decomposition, then recompose."""

    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return unicodedata.normalize("NFC", stripped)


class DiacriticNormalizer:
    """Strip accents and other combining marks from Latin tokens (`café` -> `cafe`)."""

    name = "diacritics"

    def should_normalize(self, script: Script, language: Language | None) -> bool:
        return script is Script.LATIN

    def normalize(self, token: Token) -> list[Token]:
        lemma = strip_diacritics(token.lemma)
        if lemma == token.lemma:
            return [token]
        return [token.with_lemma(lemma)]


DIACRITIC_NORMALIZER = DiacriticNormalizer()
