"""ASCII transliteration for Greek script."""

from __future__ import annotations

from unidecode import unidecode

from ...detection import Language, Script
from ...models.datatypes import Token


class DeunicodeNormalizer:
    """Transliterate Greek tokens to lowercase ASCII (`αθήνα` -> `athena`).

    `unidecode` emits capitals for some lowercase input (`ΐ` -> `I`, `£` -> `PS`),
    so the transliteration is lowercased again. Tokens whose transliteration is
    empty are kept unchanged.
    """

    name = "deunicode"

    def should_normalize(self, script: Script, language: Language | None) -> bool:
        return script is Script.GREEK

    def normalize(self, token: Token) -> list[Token]:
        lemma = unidecode(token.lemma).lower()
        if not lemma or lemma == token.lemma:
            return [token]
        return [token.with_lemma(lemma)]


DEUNICODE_NORMALIZER = DeunicodeNormalizer()
