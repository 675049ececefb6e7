"""Core datatypes shared across lexnorm modules.

Responsibilities:
- Represent tokens exchanged between segmentation and normalization stages.
- Keep offsets into the original source text explicit and validated.

Key types:
- `SeparatorKind`, `TokenKind`, and `Token`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import cast

from ..detection import Language, Script, SpanDetection


class SeparatorKind(str, Enum):
    """Strength of a token boundary."""

    SOFT = "soft"
    HARD = "hard"


class TokenKind(str, Enum):
    """Whether a token carries word content or a separator run."""

    WORD = "word"
    SEPARATOR = "separator"


@dataclass(frozen=True, slots=True)
class Token:
    """One unit of the evolving token stream.

    Attributes:
        lemma: Current text content, progressively rewritten by normalizers.
        char_start: Inclusive code point offset in the original text.
        char_end: Exclusive code point offset in the original text.
        byte_start: Inclusive UTF-8 byte offset in the original text.
        byte_end: Exclusive UTF-8 byte offset in the original text.
        kind: Word or separator.
        separator_kind: Boundary strength for separators, `None` for words.
        detection: Shared lazy script/language detection of the originating
            span. Defaults to a fresh detection over `lemma`.
    """

    lemma: str
    char_start: int = 0
    char_end: int = 0
    byte_start: int = 0
    byte_end: int = 0
    kind: TokenKind = TokenKind.WORD
    separator_kind: SeparatorKind | None = None
    detection: SpanDetection | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.char_start < 0 or self.char_start > self.char_end:
            raise ValueError(
                f"Invalid char span [{self.char_start}, {self.char_end}) for token."
            )
        if self.byte_start < 0 or self.byte_start > self.byte_end:
            raise ValueError(
                f"Invalid byte span [{self.byte_start}, {self.byte_end}) for token."
            )
        if self.kind is TokenKind.SEPARATOR and self.separator_kind is None:
            raise ValueError("Separator tokens require a `separator_kind`.")
        if self.kind is TokenKind.WORD and self.separator_kind is not None:
            raise ValueError("Word tokens must not carry a `separator_kind`.")
        if self.detection is None:
            object.__setattr__(self, "detection", SpanDetection(self.lemma))

    @property
    def script(self) -> Script:
        return cast(SpanDetection, self.detection).script

    @property
    def language(self) -> Language:
        return cast(SpanDetection, self.detection).language

    @property
    def is_word(self) -> bool:
        return self.kind is TokenKind.WORD

    @property
    def is_separator(self) -> bool:
        return self.kind is TokenKind.SEPARATOR

    @property
    def char_len(self) -> int:
        return self.char_end - self.char_start

    @property
    def byte_len(self) -> int:
        return self.byte_end - self.byte_start

    def with_lemma(self, lemma: str) -> Token:
        """Return this token with rewritten content and unchanged offsets."""

        return replace(self, lemma=lemma)

    def derive(
        self,
        lemma: str,
        char_start: int,
        char_end: int,
        byte_start: int,
        byte_end: int,
    ) -> Token:
        """Return a sub-token inside this token's span sharing its detection."""

        return replace(
            self,
            lemma=lemma,
            char_start=char_start,
            char_end=char_end,
            byte_start=byte_start,
            byte_end=byte_end,
        )
