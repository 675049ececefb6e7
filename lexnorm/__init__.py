"""Top-level package for lexnorm.

This package turns raw multilingual text into normalized tokens for indexing
and search. The main entry points are `Tokenizer` (segment + normalize) and
`NormalizerPipeline` (normalize an existing token stream).
"""

from .detection import Language, Script, SpanDetection
from .models import SeparatorKind, Token, TokenKind
from .pipeline import NormalizerPipeline, Tokenizer, build_tokenizer
from .text.separators import classify_separator

__all__ = [
    "Language",
    "NormalizerPipeline",
    "Script",
    "SeparatorKind",
    "SpanDetection",
    "Token",
    "TokenKind",
    "Tokenizer",
    "__version__",
    "build_tokenizer",
    "classify_separator",
]

__version__ = "0.1.0"
