"""Split raw text into word and separator tokens.

Responsibilities:
- Walk text with `classify_separator` and emit maximal word/separator runs.
- Record code point and UTF-8 byte offsets into the original text.
- Attach one shared `SpanDetection` per detection group (clause or token).
"""

from __future__ import annotations

from dataclasses import dataclass

from ..detection import SpanDetection, TextClassifier
from ..models.datatypes import SeparatorKind, Token, TokenKind
from .separators import classify_separator

SUPPORTED_DETECTION_SCOPES = frozenset({"clause", "token"})


@dataclass(slots=True)
class _Run:
    """Mutable accumulator for one word or separator run."""

    char_start: int
    byte_start: int
    is_separator: bool
    is_hard: bool = False
    char_end: int = 0
    byte_end: int = 0


class Segmenter:
    """Segment text into raw tokens ready for normalization.

    With `detection_scope="clause"`, every token up to and including a separator
    run holding a hard separator shares one detection over that clause's text.
    With `"token"`, each token is detected on its own lemma.
    """

    def __init__(
        self,
        classifier: TextClassifier | None = None,
        *,
        detection_scope: str = "clause",
    ) -> None:
        if detection_scope not in SUPPORTED_DETECTION_SCOPES:
            supported = ", ".join(sorted(SUPPORTED_DETECTION_SCOPES))
            raise ValueError(
                f"Unsupported detection scope `{detection_scope}`; supported: {supported}."
            )
        self.classifier = classifier
        self.detection_scope = detection_scope

    def segment(self, text: str) -> list[Token]:
        """Return ordered, non-overlapping raw tokens covering all of `text`."""

        runs = self._runs(text)
        if self.detection_scope == "token":
            return [
                self._build_token(text, run, SpanDetection(self._lemma(text, run), self.classifier))
                for run in runs
            ]

        tokens: list[Token] = []
        clause: list[_Run] = []
        for run in runs:
            clause.append(run)
            if run.is_separator and run.is_hard:
                tokens.extend(self._clause_tokens(text, clause))
                clause = []
        if clause:
            tokens.extend(self._clause_tokens(text, clause))
        return tokens

    def _runs(self, text: str) -> list[_Run]:
        """Group consecutive code points by separator membership."""

        runs: list[_Run] = []
        current: _Run | None = None
        byte_offset = 0
        for char_offset, char in enumerate(text):
            kind = classify_separator(char)
            is_separator = kind is not None
            if current is None or current.is_separator != is_separator:
                current = _Run(
                    char_start=char_offset,
                    byte_start=byte_offset,
                    is_separator=is_separator,
                )
                runs.append(current)
            if kind is SeparatorKind.HARD:
                current.is_hard = True
            byte_offset += len(char.encode("utf-8"))
            current.char_end = char_offset + 1
            current.byte_end = byte_offset
        return runs

    def _clause_tokens(self, text: str, clause: list[_Run]) -> list[Token]:
        clause_text = text[clause[0].char_start : clause[-1].char_end]
        detection = SpanDetection(clause_text, self.classifier)
        return [self._build_token(text, run, detection) for run in clause]

    @staticmethod
    def _lemma(text: str, run: _Run) -> str:
        return text[run.char_start : run.char_end]

    def _build_token(self, text: str, run: _Run, detection: SpanDetection) -> Token:
        if run.is_separator:
            kind = TokenKind.SEPARATOR
            separator_kind: SeparatorKind | None = (
                SeparatorKind.HARD if run.is_hard else SeparatorKind.SOFT
            )
        else:
            kind = TokenKind.WORD
            separator_kind = None
        return Token(
            lemma=self._lemma(text, run),
            char_start=run.char_start,
            char_end=run.char_end,
            byte_start=run.byte_start,
            byte_end=run.byte_end,
            kind=kind,
            separator_kind=separator_kind,
            detection=detection,
        )
