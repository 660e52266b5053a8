"""Artifact and clock factories shared by the tests."""

from __future__ import annotations

from datetime import datetime

from boopblur.core.models import Artifact
from boopblur.core.temporal import MS_PER_DAY, day_key, week_key

# Wednesday 2026-03-18 12:00 local time
NOW = int(datetime(2026, 3, 18, 12, 0).timestamp() * 1000)


def days_ago(days: int, now: int = NOW) -> int:
    return now - days * MS_PER_DAY


def make_artifact(artifact_id: str, ts: int = NOW, blob: bytes = b"\x89PNG", **kwargs) -> Artifact:
    """Build an artifact with keys derived from ``ts``."""
    return Artifact(
        id=artifact_id,
        ts=ts,
        iso_date=day_key(ts),
        week_key=week_key(ts),
        blob=blob,
        spark_pack_id=kwargs.pop("spark_pack_id", "zen-but-dumb"),
        spark_index=kwargs.pop("spark_index", 0),
        **kwargs,
    )


class FakeClock:
    """Settable millisecond clock."""

    def __init__(self, now: int = NOW):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance_days(self, days: int) -> None:
        self.now += days * MS_PER_DAY
