"""Core data models for Boop-Blur."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

PHOTO = "photo"


class DeletionPolicy(str, Enum):
    """Retention policies a user can pick in settings."""

    OFF = "off"
    KEEP_4_WEEKS = "keep-4-weeks"
    DELETE_14_DAYS = "delete-14-days"


@dataclass(frozen=True)
class Artifact:
    """One captured moment. Never updated in place once stored."""

    id: str
    ts: int  # capture instant, ms since epoch
    iso_date: str  # YYYY-MM-DD, local calendar
    week_key: str  # YYYY-Wnn, ISO week-numbering year
    blob: bytes = field(repr=False)
    spark_pack_id: str
    spark_index: int
    type: str = PHOTO


@dataclass(frozen=True)
class VibePack:
    """A named set of decorative one-liners shown next to a capture."""

    id: str
    name: str
    spark_lines: tuple[str, ...] = ()
