"""End-to-end tokenizer scenarios across scripts with deterministic detection."""

from __future__ import annotations

from lexnorm import Language, Script, build_tokenizer
from lexnorm.config import LexnormConfig


def _words(tokens):
    return [token.lemma for token in tokens if token.is_word]


def test_french_clause_splits_contractions_and_strips_accents(stub_classifier) -> None:
    """French text should be lowercased, split on apostrophes, and unaccented."""

    classifier = stub_classifier(script="Latin", language="fr")
    tokenizer = build_tokenizer(LexnormConfig(), classifier=classifier)

    tokens = tokenizer.tokenize("L'Avion décolle aujourd'hui")

    assert _words(tokens) == ["l", "avion", "decolle", "aujourd", "hui"]
    assert {token.language for token in tokens} == {Language.FRA}
    assert classifier.language_calls == 1


def test_each_clause_is_classified_once(stub_classifier) -> None:
    """Language detection should run once per clause, not once per token."""

    classifier = stub_classifier(script="Latin", language="en")
    tokenizer = build_tokenizer(LexnormConfig(), classifier=classifier)

    tokenizer.tokenize("One two three. Four five six! Seven")

    assert classifier.language_calls == 3
    assert classifier.script_calls == 3


def test_disabled_language_detection_never_classifies_language(stub_classifier) -> None:
    """With detection disabled, the classifier only ever sees script requests."""

    classifier = stub_classifier(script="Latin", language="tr")
    tokenizer = build_tokenizer(LexnormConfig(detect_language=False), classifier=classifier)

    tokens = tokenizer.tokenize("ISTANBUL. IZMIR")

    assert _words(tokens) == ["istanbul", "izmir"]
    assert classifier.language_calls == 0


def test_turkish_keeps_dotless_i(stub_classifier) -> None:
    """Detected Turkish should fold `I` to `ı` and `İ` to `i`."""

    tokenizer = build_tokenizer(
        LexnormConfig(), classifier=stub_classifier(script="Latin", language="tr")
    )

    tokens = tokenizer.tokenize("ISTANBUL'DA İZMİR")

    assert _words(tokens) == ["ıstanbul", "da", "izmir"]


def test_greek_is_lowercased_and_transliterated(stub_classifier) -> None:
    """Greek text should end as lowercase ASCII transliteration."""

    tokenizer = build_tokenizer(
        LexnormConfig(), classifier=stub_classifier(script="Greek", language="el")
    )

    tokens = tokenizer.tokenize("ΑΘΗΝΑ")

    assert _words(tokens) == ["athena"]
    assert tokens[0].script is Script.GREEK
    assert (tokens[0].char_start, tokens[0].char_end) == (0, 5)
    assert (tokens[0].byte_start, tokens[0].byte_end) == (0, 10)


def test_cyrillic_soft_sign_survives_normalization(stub_classifier) -> None:
    """Cyrillic words keep their letters, including the soft sign."""

    tokenizer = build_tokenizer(
        LexnormConfig(), classifier=stub_classifier(script="Cyrillic", language="ru")
    )

    tokens = tokenizer.tokenize("ПОДЪЕЗД СЕМЬЯ")

    assert _words(tokens) == ["подъезд", "семья"]


def test_han_text_only_receives_compatibility_folding(stub_classifier) -> None:
    """Scripts without case are left alone except for compatibility forms."""

    tokenizer = build_tokenizer(
        LexnormConfig(), classifier=stub_classifier(script="Han", language="zh")
    )

    tokens = tokenizer.tokenize("中文１２３")

    assert _words(tokens) == ["中文123"]
    assert tokens[0].language is Language.CMN


def test_offsets_reference_the_original_text(stub_classifier) -> None:
    """Rewritten lemmas keep spans into the untouched input."""

    tokenizer = build_tokenizer(
        LexnormConfig(), classifier=stub_classifier(script="Latin", language="fr")
    )
    text = "Ｌ＇Avion a\u200bb"

    tokens = tokenizer.tokenize(text)

    assert [
        (token.lemma, text[token.char_start : token.char_end]) for token in tokens
    ] == [
        ("l", "Ｌ"),
        ("'", "＇"),
        ("avion", "Avion"),
        (" ", " "),
        ("ab", "a\u200bb"),
    ]
    encoded = text.encode("utf-8")
    assert encoded[tokens[1].byte_start : tokens[1].byte_end].decode("utf-8") == "＇"


def test_unidentified_script_passes_through_with_compatibility_only(stub_classifier) -> None:
    """Unknown scripts only get compatibility folding."""

    tokenizer = build_tokenizer(LexnormConfig(), classifier=stub_classifier())

    tokens = tokenizer.tokenize("Ωmega ＡＢＣ")

    assert _words(tokens) == ["Ωmega", "ABC"]
    assert {token.script for token in tokens} == {Script.OTHER}
    assert {token.language for token in tokens} == {Language.OTHER}
