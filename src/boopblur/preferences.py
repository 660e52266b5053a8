"""Settings and trace records — small JSON documents beside the database.

Both are create-on-first-read: a missing file yields defaults, and so does a
file that fails to parse or validate (logged, never raised). Every mutation
is written through immediately.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from boopblur.config import DEFAULT_DELETION_POLICY, DEFAULT_VIBE_PACK
from boopblur.core.errors import atomic_write
from boopblur.core.models import DeletionPolicy
from boopblur.core.temporal import now_ms

logger = logging.getLogger(__name__)


class JournalSettings(BaseModel):
    """User-facing settings record."""

    model_config = ConfigDict(populate_by_name=True)

    active_vibe_pack: str = Field(default=DEFAULT_VIBE_PACK, alias="activeVibePack")
    # Kept as a raw string; the retention engine treats unknown values as "off"
    deletion_policy: str = Field(default=DEFAULT_DELETION_POLICY, alias="deletionPolicy")


class Trace(BaseModel):
    """Lifetime capture counter."""

    model_config = ConfigDict(populate_by_name=True)

    total_boops: int = Field(default=0, ge=0, alias="totalBoops")
    last_boop_ts: int = Field(default=0, ge=0, alias="lastBoopTs")


def _read_record(path: Path, model: type[BaseModel], default: BaseModel) -> BaseModel:
    if not path.exists():
        return default
    try:
        return model.model_validate_json(path.read_text())
    except (ValidationError, OSError, UnicodeDecodeError) as e:
        logger.warning("Ignoring unreadable %s at %s: %s", model.__name__, path, e)
        return default


def _write_record(path: Path, record: BaseModel) -> None:
    atomic_write(path, record.model_dump_json(by_alias=True, indent=2))


class SettingsService:
    """Load, mutate and persist the settings record."""

    def __init__(
        self,
        path: str | Path,
        default_vibe_pack: str = DEFAULT_VIBE_PACK,
        default_deletion_policy: str = DEFAULT_DELETION_POLICY,
    ):
        self.path = Path(path)
        self._defaults = JournalSettings(
            active_vibe_pack=default_vibe_pack,
            deletion_policy=default_deletion_policy,
        )
        self._settings: JournalSettings | None = None

    @property
    def settings(self) -> JournalSettings:
        if self._settings is None:
            return self.load()
        return self._settings

    def load(self) -> JournalSettings:
        self._settings = _read_record(  # type: ignore[assignment]
            self.path, JournalSettings, self._defaults.model_copy()
        )
        return self._settings  # type: ignore[return-value]

    def save(self) -> None:
        _write_record(self.path, self.settings)

    def set_active_vibe_pack(self, pack_id: str) -> JournalSettings:
        self._settings = self.settings.model_copy(update={"active_vibe_pack": pack_id})
        self.save()
        return self._settings

    def set_deletion_policy(self, policy: str | DeletionPolicy) -> JournalSettings:
        value = policy.value if isinstance(policy, DeletionPolicy) else policy
        self._settings = self.settings.model_copy(update={"deletion_policy": value})
        self.save()
        return self._settings

    def reset(self) -> JournalSettings:
        self._settings = self._defaults.model_copy()
        self.save()
        return self._settings


class TraceService:
    """Load, increment and persist the trace record."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._trace: Trace | None = None

    @property
    def trace(self) -> Trace:
        if self._trace is None:
            return self.load()
        return self._trace

    def load(self) -> Trace:
        self._trace = _read_record(self.path, Trace, Trace())  # type: ignore[assignment]
        return self._trace  # type: ignore[return-value]

    def save(self) -> None:
        _write_record(self.path, self.trace)

    def record_boop(self, at: int | None = None) -> Trace:
        """Count one capture and stamp its time."""
        current = self.trace
        self._trace = Trace(
            total_boops=current.total_boops + 1,
            last_boop_ts=at if at is not None else now_ms(),
        )
        self.save()
        return self._trace

    def reset(self) -> Trace:
        self._trace = Trace()
        self.save()
        return self._trace
