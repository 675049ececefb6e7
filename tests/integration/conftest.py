"""Integration-test fixtures for deterministic classifier behavior."""

from __future__ import annotations

from typing import Callable

import pytest

from tests.fixture_classifiers import StubClassifier


@pytest.fixture
def cli_classifier(monkeypatch: pytest.MonkeyPatch) -> Callable[..., StubClassifier]:
    """Route CLI detection through a stub classifier with the given labels."""

    def _install(script: str | None = None, language: str | None = None) -> StubClassifier:
        classifier = StubClassifier(script=script, language=language)

        def _default_classifier(min_language_probability: float = 0.5) -> StubClassifier:
            """Return the installed stub regardless of the configured threshold."""

            _ = min_language_probability
            return classifier

        monkeypatch.setattr("lexnorm.cli.default_classifier", _default_classifier)
        return classifier

    return _install
