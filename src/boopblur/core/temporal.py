"""Temporal keys for artifacts — calendar day, ISO week, age, day hash.

Instants are milliseconds since the epoch (int or float) or a ``datetime``.
Passing ``None`` means "now". Day and week keys use the local calendar.
"""

from __future__ import annotations

import math
import time
from datetime import datetime, timedelta

MS_PER_DAY = 86_400_000

Instant = int | float | datetime


def now_ms() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def to_datetime(instant: Instant | None = None) -> datetime:
    """Resolve an instant to a local datetime."""
    if instant is None:
        return datetime.now()
    if isinstance(instant, datetime):
        return instant
    return datetime.fromtimestamp(instant / 1000)


def day_key(instant: Instant | None = None) -> str:
    """Calendar date as ``YYYY-MM-DD``."""
    return to_datetime(instant).strftime("%Y-%m-%d")


def week_key(instant: Instant | None = None) -> str:
    """ISO-8601 week key as ``YYYY-Wnn``.

    The year is the ISO week-numbering year, so 2024-12-30 is ``2025-W01``
    and 2021-01-01 is ``2020-W53``.
    """
    iso = to_datetime(instant).isocalendar()
    return f"{iso.year}-W{iso.week:02d}"


def week_start(instant: Instant | None = None) -> datetime:
    """Monday 00:00 of the ISO week containing the instant."""
    dt = to_datetime(instant)
    monday = dt - timedelta(days=dt.weekday())
    return monday.replace(hour=0, minute=0, second=0, microsecond=0)


def age_days(past: int | float, now: int | float) -> int:
    """Whole days elapsed from ``past`` to ``now`` (both in ms).

    Floors, so a future ``past`` yields a negative age.
    """
    return math.floor((now - past) / MS_PER_DAY)


def content_hash(text: str) -> int:
    """Deterministic non-negative 32-bit hash of a string.

    Classic ``h * 31 + c`` over UTF-16 code units, wrapped to a signed
    32-bit integer at every step; the absolute value is returned.
    """
    h = 0
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        code = data[i] | (data[i + 1] << 8)
        h = (h * 31 + code) & 0xFFFFFFFF
    if h & 0x80000000:
        h -= 0x1_0000_0000
    return abs(h)
