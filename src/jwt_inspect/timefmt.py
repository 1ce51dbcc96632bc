"""Recognize epoch-second values and describe them relative to "now".

No schema says which claims hold timestamps, so any number inside
``TIMESTAMP_WINDOW`` (roughly the years 2001 to 2286) is treated as one.
Arithmetic is done in integer nanoseconds so that fractional seconds survive
both the ISO-8601 text and the relative phrase.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Tuple

TIMESTAMP_WINDOW: Tuple[float, float] = (1_000_000_000, 10_000_000_000)

NANOSECOND = 1
SECOND = 1_000_000_000 * NANOSECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class Instant:
    seconds: int
    nanos: int = 0

    @property
    def epoch_nanos(self) -> int:
        return self.seconds * SECOND + self.nanos


def in_timestamp_window(value: float) -> bool:
    lower, upper = TIMESTAMP_WINDOW
    return lower < value < upper


def epoch_to_instant(value: float) -> Instant:
    seconds = int(value)
    nanos = int((value - seconds) * SECOND)
    return Instant(seconds=seconds, nanos=nanos)


def datetime_to_epoch_nanos(moment: datetime) -> int:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    delta = moment - _EPOCH
    return (delta.days * 86_400 + delta.seconds) * SECOND + delta.microseconds * 1_000


def format_iso(instant: Instant) -> str:
    """
    RFC 3339 in UTC with a nanosecond fraction, trailing zeros trimmed:
    2018-01-18T01:30:22Z, 2018-01-18T01:30:22.5Z
    """
    moment = datetime.fromtimestamp(instant.seconds, tz=timezone.utc)
    text = moment.strftime("%Y-%m-%dT%H:%M:%S")
    if instant.nanos:
        text += "." + f"{instant.nanos:09d}".rstrip("0")
    return text + "Z"


def humanize_delta(instant: Instant, now: datetime) -> str:
    diff = datetime_to_epoch_nanos(now) - instant.epoch_nanos
    abs_diff = abs(diff)
    future = diff < 0

    if abs_diff < MINUTE:
        return "in less than a minute" if future else "less than a minute ago"

    if abs_diff < HOUR:
        count, unit = abs_diff // MINUTE, "minute"
    elif abs_diff < DAY:
        count, unit = abs_diff // HOUR, "hour"
    else:
        count, unit = abs_diff // DAY, "day"

    if future:
        return f"in {count} {unit}(s)"
    return f"{count} {unit}(s) ago"
