"""Unit tests for script/language detection and label narrowing."""

from __future__ import annotations

from typing import Callable

import pytest

from lexnorm.detection import (
    DefaultTextClassifier,
    Language,
    Script,
    SpanDetection,
    detect_language,
    detect_script,
    language_from_label,
    script_from_label,
)
from tests.fixture_classifiers import StubClassifier


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("Latin", Script.LATIN),
        (" cyrillic ", Script.CYRILLIC),
        ("Han", Script.HAN),
        ("Mandarin", Script.HAN),
        ("Armenian", Script.OTHER),
        ("", Script.OTHER),
        (None, Script.OTHER),
    ],
)
def test_script_labels_narrow_to_closed_set(label: str | None, expected: Script) -> None:
    """Unmapped or absent script labels should fall back to `Script.OTHER`."""

    assert script_from_label(label) is expected


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("en", Language.ENG),
        ("eng", Language.ENG),
        ("zh-cn", Language.CMN),
        ("zh-TW", Language.CMN),
        ("no", Language.NOB),
        ("fa", Language.PES),
        ("sw", Language.OTHER),
        ("klingon", Language.OTHER),
        (None, Language.OTHER),
    ],
)
def test_language_labels_narrow_to_closed_set(
    label: str | None, expected: Language
) -> None:
    """Unmapped or absent language labels should fall back to `Language.OTHER`."""

    assert language_from_label(label) is expected


def test_every_script_except_other_has_a_label() -> None:
    """Each supported script should be reachable from at least one label."""

    for script in Script:
        if script is Script.OTHER:
            continue
        assert script_from_label(script.value) is script


def test_every_language_except_other_has_a_label() -> None:
    """Each supported language should be reachable from its own ISO 639-3 code."""

    for language in Language:
        if language is Language.OTHER:
            continue
        assert language_from_label(language.value) is language


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_empty_input_detects_other_without_calling_classifier(
    text: str, stub_classifier: Callable[..., StubClassifier]
) -> None:
    """Blank spans should short-circuit to `OTHER` for both tags."""

    classifier = stub_classifier(script="Latin", language="en")

    assert detect_script(text, classifier) is Script.OTHER
    assert detect_language(text, classifier) is Language.OTHER
    assert classifier.script_calls == 0
    assert classifier.language_calls == 0


def test_ambiguous_input_detects_other(stub_classifier: Callable[..., StubClassifier]) -> None:
    """A classifier without a confident answer should yield `OTHER`, never an error."""

    classifier = stub_classifier(script=None, language=None)

    assert detect_script("?!", classifier) is Script.OTHER
    assert detect_language("?!", classifier) is Language.OTHER


def test_span_detection_is_lazy_and_memoized(
    stub_classifier: Callable[..., StubClassifier],
) -> None:
    """Each tag should be classified at most once, and only when read."""

    classifier = stub_classifier(script="Latin", language="fr")
    detection = SpanDetection("Bonjour le monde", classifier)

    assert detection.script_if_detected is None
    assert detection.script is Script.LATIN
    assert detection.script is Script.LATIN
    assert classifier.script_calls == 1
    assert classifier.language_calls == 0
    assert detection.language_if_detected is None

    assert detection.language is Language.FRA
    assert detection.language is Language.FRA
    assert classifier.language_calls == 1
    assert detection.language_if_detected is Language.FRA


def test_span_detection_presets_skip_classifier(
    stub_classifier: Callable[..., StubClassifier],
) -> None:
    """Preset tags should be returned without consulting the classifier."""

    classifier = stub_classifier(script="Greek", language="el")
    detection = SpanDetection("x", classifier, script=Script.LATIN, language=Language.ENG)

    assert detection.script is Script.LATIN
    assert detection.language is Language.ENG
    assert classifier.script_calls == 0
    assert classifier.language_calls == 0
    assert repr(detection) == "SpanDetection(script=Latin, language=eng)"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Hello world", "Latin"),
        ("Привет мир", "Cyrillic"),
        ("Αθήνα", "Greek"),
        ("中文字", "Han"),
        ("Բարեւ", "Armenian"),
        ("ab αβ", "Latin"),
        ("123 !?", None),
    ],
)
def test_default_classifier_reports_dominant_unicode_script(
    text: str, expected: str | None
) -> None:
    """Script labels should come from counting Unicode script properties."""

    assert DefaultTextClassifier().script_label(text) == expected


def test_default_classifier_returns_none_without_language_features() -> None:
    """Texts without letters should produce no language label."""

    assert DefaultTextClassifier().language_label("12345 !!") is None


def test_default_classifier_script_outside_closed_set_maps_to_other() -> None:
    """A detected script without dedicated support should become `Script.OTHER`."""

    assert detect_script("Բարեւ", DefaultTextClassifier()) is Script.OTHER
    assert detect_script("Hello", DefaultTextClassifier()) is Script.LATIN
