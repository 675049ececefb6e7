"""Deterministic classifier doubles shared by the test suite."""

from __future__ import annotations


class StubClassifier:
    """Return fixed labels and count how often each detection ran."""

    def __init__(self, script: str | None = None, language: str | None = None) -> None:
        self.script = script
        self.language = language
        self.script_calls = 0
        self.language_calls = 0

    def script_label(self, text: str) -> str | None:
        self.script_calls += 1
        return self.script

    def language_label(self, text: str) -> str | None:
        self.language_calls += 1
        return self.language
