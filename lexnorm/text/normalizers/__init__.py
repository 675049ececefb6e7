"""Token normalizers and the default ordered registry.

Registry order is the application order: when several normalizers apply to
the same token, they run in the order declared in `DEFAULT_NORMALIZERS`.
"""

from __future__ import annotations

from typing import Mapping

from .apostrophe import APOSTROPHE_NORMALIZER, ApostropheNormalizer
from .base import Normalizer
from .compatibility import COMPATIBILITY_NORMALIZER, CompatibilityNormalizer
from .deunicode import DEUNICODE_NORMALIZER, DeunicodeNormalizer
from .diacritics import DIACRITIC_NORMALIZER, DiacriticNormalizer, strip_diacritics
from .lowercase import LOWERCASE_NORMALIZER, LowercaseNormalizer

DEFAULT_NORMALIZERS: tuple[Normalizer, ...] = (
    COMPATIBILITY_NORMALIZER,
    APOSTROPHE_NORMALIZER,
    LOWERCASE_NORMALIZER,
    DIACRITIC_NORMALIZER,
    DEUNICODE_NORMALIZER,
)

NORMALIZERS_BY_NAME: Mapping[str, Normalizer] = {
    normalizer.name: normalizer for normalizer in DEFAULT_NORMALIZERS
}


def resolve_normalizers(names: tuple[str, ...]) -> tuple[Normalizer, ...]:
    """Resolve registry names to normalizers, keeping the given order.

    Raises:
        ValueError: If a name is not registered.
    """

    unknown = [name for name in names if name not in NORMALIZERS_BY_NAME]
    if unknown:
        supported = ", ".join(NORMALIZERS_BY_NAME)
        raise ValueError(
            f"Unknown normalizer(s): {', '.join(unknown)}; supported: {supported}."
        )
    return tuple(NORMALIZERS_BY_NAME[name] for name in names)


__all__ = [
    "APOSTROPHE_NORMALIZER",
    "COMPATIBILITY_NORMALIZER",
    "DEFAULT_NORMALIZERS",
    "DEUNICODE_NORMALIZER",
    "DIACRITIC_NORMALIZER",
    "LOWERCASE_NORMALIZER",
    "NORMALIZERS_BY_NAME",
    "ApostropheNormalizer",
    "CompatibilityNormalizer",
    "DeunicodeNormalizer",
    "DiacriticNormalizer",
    "LowercaseNormalizer",
    "Normalizer",
    "resolve_normalizers",
    "strip_diacritics",
]
