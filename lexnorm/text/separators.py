"""Separator classification for single code points.

Responsibilities:
- Decide whether a code point ends a word, and how strongly.
- Fold look-alike characters to ASCII with `unidecode` before matching.
"""

from __future__ import annotations

from unidecode import unidecode

from ..models.datatypes import SeparatorKind

_SOFT_SEPARATORS = frozenset("-_':/\\@\"+~=^*#")
_HARD_SEPARATORS = frozenset(".;,!?()[]{}|")

_CYRILLIC_BLOCK = range(0x0400, 0x0500)
_NO_BREAK_SPACE = "\u00a0"
# Zero-width code points stay inside words; `compatibility` strips the artifacts.
_ZERO_WIDTH = frozenset("\u200b\u200c\u200d\u2060\ufeff")


def classify_separator(char: str) -> SeparatorKind | None:
    """Classify one code point as a soft separator, a hard separator, or neither.

    Exceptions are checked on the original code point: Cyrillic letters fold
    to look-alike punctuation (`ь` becomes `'`) and the no-break space marks
    an unbreakable unit, so neither is ever a separator. Zero-width code points
    fold to a space in some `unidecode` releases and are excluded the same way.

    Raises:
        ValueError: If `char` is not exactly one code point.
    """

    if len(char) != 1:
        raise ValueError(f"Expected a single code point, got {len(char)} characters.")

    if ord(char) in _CYRILLIC_BLOCK or char == _NO_BREAK_SPACE or char in _ZERO_WIDTH:
        return None
    if char.isspace():
        return SeparatorKind.SOFT

    folded = unidecode(char)
    if not folded:
        return None
    first = folded[0]
    if first.isspace():
        return SeparatorKind.SOFT
    if first in _SOFT_SEPARATORS:
        return SeparatorKind.SOFT
    if first in _HARD_SEPARATORS:
        return SeparatorKind.HARD
    return None
