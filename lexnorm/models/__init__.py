"""Shared typed data models for lexnorm.

This package contains the token types passed between the segmenter and the
normalizer pipeline.
"""

from .datatypes import SeparatorKind, Token, TokenKind

__all__ = [
    "SeparatorKind",
    "Token",
    "TokenKind",
]
