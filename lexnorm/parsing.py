"""Shared parsing helpers for configuration and CLI value normalization."""

from __future__ import annotations


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def split_name_list(value: object) -> tuple[str, ...]:
    """Split a comma-separated name list (or a sequence) into stripped lowercase names.

    Blank entries are skipped, order is preserved.
    """

    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        raw_items = [str(item) for item in value]
    else:
        raw_items = str(value).split(",")

    names: list[str] = []
    for item in raw_items:
        normalized = normalize_optional_string(item)
        if normalized is not None:
            names.append(normalized.lower())
    return tuple(names)


def parse_probability(value: object, field_name: str) -> float:
    """Parse a probability in the half-open interval `(0, 1]`.

    Raises:
        ValueError: If the value is not numeric or falls outside `(0, 1]`.
    """

    if isinstance(value, bool):
        raise ValueError(f"`{field_name}` must be a number in (0, 1].")
    if isinstance(value, (int, float)):
        parsed = float(value)
    else:
        normalized = normalize_optional_string(value)
        if normalized is None:
            raise ValueError(f"`{field_name}` must be a number in (0, 1].")
        try:
            parsed = float(normalized)
        except ValueError as exc:
            raise ValueError(f"`{field_name}` must be a number in (0, 1].") from exc

    if not 0.0 < parsed <= 1.0:
        raise ValueError(f"`{field_name}` must be a number in (0, 1].")
    return parsed
