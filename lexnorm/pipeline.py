"""Normalizer pipeline and tokenizer orchestration.

Responsibilities:
- Select applicable normalizers per token from an ordered, immutable registry.
- Thread each token through those normalizers, flat-mapping expansions.
- Chain segmentation and normalization behind a single `Tokenizer` facade.

Key types:
- `NormalizerPipeline`: token stream -> normalized token stream.
- `Tokenizer`: raw text -> normalized token list, with stage logging.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Sequence

from .config import LexnormConfig
from .detection import TextClassifier, default_classifier
from .errors import NORMALIZE_STAGE, SEGMENT_STAGE
from .models.datatypes import Token
from .telemetry.logger import RunLogger
from .text.normalizers import DEFAULT_NORMALIZERS, Normalizer, resolve_normalizers
from .text.segmenter import Segmenter


class NormalizerPipeline:
    """Apply registry-ordered normalizers to a token stream.

    Applicability is decided once per source token from its script and
    language tags; every token produced by a stage is fed to the next stage
    independently, and expansions stay contiguous in the output.
    """

    def __init__(
        self,
        normalizers: Sequence[Normalizer] | None = None,
        *,
        detect_language: bool = True,
        run_logger: RunLogger | None = None,
    ) -> None:
        self.normalizers: tuple[Normalizer, ...] = tuple(
            DEFAULT_NORMALIZERS if normalizers is None else normalizers
        )
        self.detect_language = detect_language
        self._run_logger = run_logger

    def applicable(self, token: Token) -> tuple[Normalizer, ...]:
        """Return the registry-ordered normalizers that apply to `token`."""

        script = token.script
        language = token.language if self.detect_language else None
        return tuple(
            normalizer
            for normalizer in self.normalizers
            if normalizer.should_normalize(script, language)
        )

    def normalize_token(self, token: Token) -> list[Token]:
        """Normalize one source token into its ordered output tokens."""

        stages = self.applicable(token)
        current = [token]
        for normalizer in stages:
            current = [produced for item in current for produced in normalizer.normalize(item)]
        if self._run_logger is not None:
            self._run_logger.log_token_trace(
                NORMALIZE_STAGE,
                char_start=token.char_start,
                normalizers=",".join(normalizer.name for normalizer in stages) or "none",
                produced=len(current),
            )
        return current

    def normalize(self, tokens: Iterable[Token]) -> Iterator[Token]:
        """Lazily yield the normalized stream in original document order."""

        for token in tokens:
            yield from self.normalize_token(token)


class Tokenizer:
    """Segment raw text and normalize the resulting tokens."""

    def __init__(
        self,
        segmenter: Segmenter | None = None,
        pipeline: NormalizerPipeline | None = None,
        *,
        run_logger: RunLogger | None = None,
    ) -> None:
        self.segmenter = segmenter or Segmenter()
        self.pipeline = pipeline or NormalizerPipeline()
        self._run_logger = run_logger

    def segment(self, text: str) -> list[Token]:
        """Return raw tokens for `text` without normalization."""

        return self._run_stage(SEGMENT_STAGE, lambda: self.segmenter.segment(text))

    def tokenize(self, text: str) -> list[Token]:
        """Return normalized tokens for `text`."""

        raw_tokens = self.segment(text)
        return self._run_stage(NORMALIZE_STAGE, lambda: list(self.pipeline.normalize(raw_tokens)))

    def _run_stage(self, stage: str, action: Callable[[], list[Token]]) -> list[Token]:
        """Run one stage while emitting start/complete/failure events."""

        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage)
        try:
            tokens = action()
        except Exception as exc:
            if self._run_logger is not None:
                self._run_logger.log_stage_failure(stage, type(exc).__name__)
            raise
        if self._run_logger is not None:
            self._run_logger.log_stage_complete(stage, tokens=len(tokens))
        return tokens


def build_tokenizer(
    config: LexnormConfig,
    *,
    classifier: TextClassifier | None = None,
    run_logger: RunLogger | None = None,
) -> Tokenizer:
    """Build a tokenizer from validated configuration.

    When no classifier is injected, the shared default classifier for the
    configured language threshold is used.
    """

    config.validate()
    active_classifier = (
        classifier
        if classifier is not None
        else default_classifier(config.min_language_probability)
    )
    return Tokenizer(
        segmenter=Segmenter(active_classifier, detection_scope=config.detection_scope),
        pipeline=NormalizerPipeline(
            resolve_normalizers(config.normalizers),
            detect_language=config.detect_language,
            run_logger=run_logger,
        ),
        run_logger=run_logger,
    )
