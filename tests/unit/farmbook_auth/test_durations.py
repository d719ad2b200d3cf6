"""Unit tests for token lifetime parsing."""

from datetime import timedelta

import pytest

from farmbook_auth import parse_duration


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("7d", timedelta(days=7)),
        ("12h", timedelta(hours=12)),
        ("90m", timedelta(minutes=90)),
        ("30s", timedelta(seconds=30)),
        ("2 weeks", timedelta(weeks=2)),
        ("1y", timedelta(days=365.25)),
        ("1.5h", timedelta(minutes=90)),
        ("3600", timedelta(seconds=3600)),
        (3600, timedelta(seconds=3600)),
        (" 7D ", timedelta(days=7)),
    ],
)
def test_parses_supported_forms(value, expected):
    assert parse_duration(value) == expected


@pytest.mark.parametrize("value", ["", "abc", "7 fortnights", "d7", "-5m", True])
def test_rejects_unparseable_values(value):
    with pytest.raises(ValueError):
        parse_duration(value)


@pytest.mark.parametrize("value", ["0", 0, "0d", -10])
def test_rejects_non_positive_durations(value):
    with pytest.raises(ValueError, match="positive"):
        parse_duration(value)
