"""Domain exceptions for tokenizer and CLI diagnostics.

Stage names are shared by CLI diagnostics and run logs:
- `config`: YAML/env/CLI option resolution and validation.
- `input`: reading the text to tokenize.
- `segment` and `normalize`: the two tokenizer stages.
"""

from __future__ import annotations

CONFIG_STAGE = "config"
INPUT_STAGE = "input"
SEGMENT_STAGE = "segment"
NORMALIZE_STAGE = "normalize"

KNOWN_STAGES = frozenset({CONFIG_STAGE, INPUT_STAGE, SEGMENT_STAGE, NORMALIZE_STAGE})


class PipelineStageError(RuntimeError):
    """Raised when configuration, input, or a tokenizer stage fails.

    The normalization core never raises for well-formed input; this error
    only surfaces from the outer layers that resolve settings, read input,
    or drive a tokenizer run from the CLI.
    """

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped error.

        Raises:
            ValueError: If `stage` is not one of `KNOWN_STAGES`.
        """

        if stage not in KNOWN_STAGES:
            supported = ", ".join(sorted(KNOWN_STAGES))
            raise ValueError(f"Unknown stage `{stage}`; supported: {supported}.")
        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint

    @classmethod
    def from_exception(
        cls, stage: str, exc: Exception, *, hint: str | None = None
    ) -> PipelineStageError:
        """Wrap a lower-level failure, keeping its message as the detail."""

        return cls(stage=stage, detail=str(exc), hint=hint)
