from __future__ import annotations
from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    return datetime.now(timezone.utc)


def fixed_clock(moment: datetime) -> Clock:
    """
    Return a clock that always reports `moment`.
    Naive datetimes are taken to be UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)

    def clock() -> datetime:
        return moment

    return clock


def pad_base64(segment: str) -> str:
    # tokens usually drop the trailing "=" padding
    padding = (-len(segment)) % 4
    if padding:
        segment += "=" * padding
    return segment
