"""Contraction splitting for Latin and Cyrillic words."""

from __future__ import annotations

from ...detection import Language, Script
from ...models.datatypes import Token
from .lowercase import fold_case

_APOSTROPHE = "'"


def _piece_spans(lengths: list[int], start: int, end: int) -> list[tuple[int, int]]:
    """Place pieces separated by one-unit apostrophes inside `[start, end)`.

    Pieces are laid out left to right from `start`. When the pieces no longer
    add up to the parent width (an earlier rewrite changed the lemma length),
    the last non-empty piece is anchored to `end` and every span is clamped,
    so spans stay ordered, disjoint, and inside the parent.
    """

    spans: list[tuple[int, int]] = []
    cursor = start
    for length in lengths:
        spans.append((cursor, cursor + length))
        cursor += length + 1
    if cursor - 1 == end:
        return spans

    last = max((index for index, length in enumerate(lengths) if length), default=None)
    if last is None:
        return [(min(piece_start, end), min(piece_end, end)) for piece_start, piece_end in spans]

    tail_end = max(end - (len(lengths) - 1 - last), start)
    tail_start = max(tail_end - lengths[last], start)
    placed = [
        (min(piece_start, tail_start), min(piece_end, tail_start))
        for piece_start, piece_end in spans[:last]
    ]
    placed.append((tail_start, tail_end))
    placed.extend((tail_end, tail_end) for _ in spans[last + 1 :])
    return placed


class ApostropheNormalizer:
    """Split a word on apostrophes and case-fold the pieces (`L'Avion` -> `l`, `avion`).

    Offsets are computed on the lemma as received, before case folding, since
    folding may change piece lengths (`İ` lowercases to two code points). Empty
    pieces are dropped but still advance the offsets. Separator tokens pass
    through unchanged.
    """

    name = "apostrophe"

    def should_normalize(self, script: Script, language: Language | None) -> bool:
        return script in (Script.LATIN, Script.CYRILLIC)

    def normalize(self, token: Token) -> list[Token]:
        if not token.is_word:
            return [token]

        if _APOSTROPHE not in token.lemma:
            lemma = fold_case(token)
            return [token if lemma == token.lemma else token.with_lemma(lemma)]

        pieces = token.lemma.split(_APOSTROPHE)
        char_spans = _piece_spans(
            [len(piece) for piece in pieces], token.char_start, token.char_end
        )
        byte_spans = _piece_spans(
            [len(piece.encode("utf-8")) for piece in pieces], token.byte_start, token.byte_end
        )

        tokens: list[Token] = []
        for piece, (char_start, char_end), (byte_start, byte_end) in zip(
            pieces, char_spans, byte_spans
        ):
            if not piece:
                continue
            sub_token = token.derive(piece, char_start, char_end, byte_start, byte_end)
            tokens.append(sub_token.with_lemma(fold_case(sub_token)))
        return tokens


APOSTROPHE_NORMALIZER = ApostropheNormalizer()
