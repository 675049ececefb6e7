"""Unit tests for shared config and CLI parsing helpers."""

import pytest

from lexnorm.parsing import (
    normalize_optional_string,
    parse_permissive_boolean,
    parse_probability,
    split_name_list,
)


def test_normalize_optional_string_handles_blank_values() -> None:
    """Normalization should return `None` for `None` and blank textual values."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("") is None
    assert normalize_optional_string("   ") is None


def test_normalize_optional_string_strips_non_blank_values() -> None:
    """Normalization should return stripped content for non-empty values."""

    assert normalize_optional_string("  value  ") == "value"
    assert normalize_optional_string(42) == "42"


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("TrUe", True),
        ("  ON ", True),
        ("YeS", True),
        ("FALSE", False),
        (" oFf ", False),
        ("nO", False),
        (True, True),
    ],
)
def test_parse_permissive_boolean_accepts_mixed_case_tokens(
    token: object, expected: bool
) -> None:
    """Permissive parsing should accept valid tokens case-insensitively."""

    assert parse_permissive_boolean(token) is expected


@pytest.mark.parametrize("value", ["", "   ", "maybe", "2", object()])
def test_parse_permissive_boolean_returns_none_for_invalid_tokens(value: object) -> None:
    """Permissive parsing should return `None` for invalid or blank inputs."""

    assert parse_permissive_boolean(value) is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Compatibility, LOWERCASE", ("compatibility", "lowercase")),
        (" apostrophe,, ,diacritics ", ("apostrophe", "diacritics")),
        (["Deunicode", " lowercase "], ("deunicode", "lowercase")),
        ("", ()),
        (None, ()),
    ],
)
def test_split_name_list_normalizes_and_keeps_order(
    value: object, expected: tuple[str, ...]
) -> None:
    """Name lists should be stripped, lowercased, and free of blank entries."""

    assert split_name_list(value) == expected


@pytest.mark.parametrize(("value", "expected"), [("0.75", 0.75), (1, 1.0), (0.2, 0.2)])
def test_parse_probability_accepts_values_in_range(value: object, expected: float) -> None:
    """Probabilities in (0, 1] should parse from numbers or numeric strings."""

    assert parse_probability(value, "threshold") == expected


@pytest.mark.parametrize("value", ["0", 0, "1.5", -0.1, "high", "", True, None])
def test_parse_probability_rejects_out_of_range_and_non_numeric(value: object) -> None:
    """Invalid probabilities should raise with the field name in the message."""

    with pytest.raises(ValueError, match=r"`threshold` must be a number in \(0, 1\]\."):
        parse_probability(value, "threshold")
