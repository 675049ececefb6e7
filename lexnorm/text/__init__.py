"""Text segmentation and normalization components.

This package provides separator classification, segmentation into raw tokens,
and the script/language-aware normalizers applied by the pipeline.
"""

from .normalizers import DEFAULT_NORMALIZERS, NORMALIZERS_BY_NAME, Normalizer
from .segmenter import Segmenter
from .separators import classify_separator

__all__ = [
    "DEFAULT_NORMALIZERS",
    "NORMALIZERS_BY_NAME",
    "Normalizer",
    "Segmenter",
    "classify_separator",
]
