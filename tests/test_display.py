"""Tests for display helpers."""

import pytest

from newsfeed.display import format_published_at


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2025-03-20T14:30:00", "March 20, 2025 at 02:30 PM"),
        ("2025-01-01T00:00:00", "January 01, 2025 at 12:00 AM"),
        ("2025-03-19", "March 19, 2025 at 12:00 AM"),
    ],
)
def test_format_published_at(value: str, expected: str) -> None:
    assert format_published_at(value) == expected


@pytest.mark.parametrize("value", ["", "yesterday", "20/03/2025"])
def test_unparseable_values_returned_unchanged(value: str) -> None:
    assert format_published_at(value) == value
