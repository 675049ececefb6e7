"""Case folding for bicameral scripts."""

from __future__ import annotations

from ...detection import Language, Script
from ...models.datatypes import Token

_BICAMERAL_SCRIPTS = frozenset({Script.LATIN, Script.CYRILLIC, Script.GREEK})
_DOTTED_I_LANGUAGES = frozenset({Language.TUR, Language.AZE})
_DOTTED_I_MAP = str.maketrans({"I": "ı", "İ": "i"})


def fold_case(token: Token) -> str:
    """Return the lowercased lemma of `token`.

    Turkish and Azerbaijani keep the dotted/dotless `i` distinction
    (`I` -> `ı`, `İ` -> `i`) when the token language is already known.
    """

    lemma = token.lemma
    # Only a language already detected by the pipeline counts here.
    detected = token.detection.language_if_detected if token.detection else None
    if detected in _DOTTED_I_LANGUAGES:
        lemma = lemma.translate(_DOTTED_I_MAP)
    return lemma.lower()


class LowercaseNormalizer:
    """Lowercase Latin, Cyrillic and Greek tokens."""

    name = "lowercase"

    def should_normalize(self, script: Script, language: Language | None) -> bool:
        return script in _BICAMERAL_SCRIPTS

    def normalize(self, token: Token) -> list[Token]:
        lemma = fold_case(token)
        if lemma == token.lemma:
            return [token]
        return [token.with_lemma(lemma)]


LOWERCASE_NORMALIZER = LowercaseNormalizer()
