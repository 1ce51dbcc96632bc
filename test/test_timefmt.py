from datetime import datetime, timedelta, timezone

import pytest

from jwt_inspect.timefmt import (
    Instant,
    datetime_to_epoch_nanos,
    epoch_to_instant,
    format_iso,
    humanize_delta,
    in_timestamp_window,
)

NOW = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
BASE = int(NOW.timestamp())


@pytest.mark.parametrize(
    "value, expected",
    [
        (1_000_000_000, False),
        (1_000_000_000.5, True),
        (1_516_239_022, True),
        (9_999_999_999, True),
        (10_000_000_000, False),
        (0, False),
        (-1_516_239_022, False),
        (1.5e10, False),
    ],
)
def test_timestamp_window_is_exclusive(value: float, expected: bool) -> None:
    """Test that only numbers strictly between 1e9 and 1e10 count as timestamps."""
    assert in_timestamp_window(value) is expected


def test_epoch_to_instant_keeps_fraction() -> None:
    """Test that the fractional part of epoch seconds becomes nanoseconds."""
    assert epoch_to_instant(1516239022.0) == Instant(1516239022, 0)
    assert epoch_to_instant(1516239022.5) == Instant(1516239022, 500_000_000)


@pytest.mark.parametrize(
    "instant, expected",
    [
        (Instant(1516239022), "2018-01-18T01:30:22Z"),
        (Instant(1516239022, 500_000_000), "2018-01-18T01:30:22.5Z"),
        (Instant(1516239022, 123_000_000), "2018-01-18T01:30:22.123Z"),
        (Instant(1516239022, 1), "2018-01-18T01:30:22.000000001Z"),
        (Instant(0), "1970-01-01T00:00:00Z"),
    ],
)
def test_format_iso(instant: Instant, expected: str) -> None:
    """Test RFC 3339 formatting with trimmed nanosecond fractions."""
    assert format_iso(instant) == expected


def test_datetime_to_epoch_nanos_handles_offsets() -> None:
    """Test that aware datetimes in other zones map to the same epoch value."""
    plus_two = NOW.astimezone(timezone(timedelta(hours=2)))

    assert datetime_to_epoch_nanos(plus_two) == BASE * 1_000_000_000
    assert datetime_to_epoch_nanos(NOW.replace(tzinfo=None)) == BASE * 1_000_000_000


@pytest.mark.parametrize(
    "instant, expected",
    [
        (Instant(BASE), "less than a minute ago"),
        (Instant(BASE - 30), "less than a minute ago"),
        (Instant(BASE + 30), "in less than a minute"),
        (Instant(BASE, 500_000_000), "in less than a minute"),
        (Instant(BASE - 60, 1), "less than a minute ago"),
        (Instant(BASE - 60), "1 minute(s) ago"),
        (Instant(BASE + 60), "in 1 minute(s)"),
        (Instant(BASE - 59 * 60 - 59), "59 minute(s) ago"),
        (Instant(BASE - 3600), "1 hour(s) ago"),
        (Instant(BASE - 5400), "1 hour(s) ago"),
        (Instant(BASE + 7200), "in 2 hour(s)"),
        (Instant(BASE - 86399), "23 hour(s) ago"),
        (Instant(BASE - 86400), "1 day(s) ago"),
        (Instant(BASE + 3 * 86400 + 5), "in 3 day(s)"),
        (Instant(BASE - 400 * 86400 - 3600), "400 day(s) ago"),
    ],
)
def test_humanize_delta(instant: Instant, expected: str) -> None:
    """Test phrase selection, direction and truncation of unit counts."""
    assert humanize_delta(instant, NOW) == expected


def test_humanize_delta_reference_token(reference_now) -> None:
    """Test the iat claim of the jwt.io sample token against a fixed clock."""
    assert humanize_delta(epoch_to_instant(1516239022), reference_now) == "2648 day(s) ago"
