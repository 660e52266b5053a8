"""Artifact lifecycle controller — the journal's in-memory view.

The controller owns an append-ordered cache of artifacts and is the only
thing that writes it. The store stays the source of truth: ``load()`` and
``run_cleanup()`` replace the cache with whatever the store holds, which also
heals a cache left stale by an interrupted write.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any
from uuid import uuid4

from boopblur.core.decay import DEFAULT_DECAY_TABLE, DecayTable, decay_state
from boopblur.core.models import PHOTO, Artifact, DeletionPolicy
from boopblur.core.temporal import age_days, day_key, now_ms, week_key
from boopblur.retention import resolve_policy, select_expired
from boopblur.vibes import get_pack, spark_index_for_day

if TYPE_CHECKING:
    from boopblur.core.logging import JournalLogger
    from boopblur.preferences import SettingsService, TraceService
    from boopblur.store import ArtifactStore

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return str(uuid4())


@dataclass
class CleanupReport:
    """Outcome of one retention sweep."""

    policy: DeletionPolicy
    scanned: int = 0
    deleted_ids: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "policy": self.policy.value,
            "scanned": self.scanned,
            "deleted_ids": list(self.deleted_ids),
        }


class ArtifactLifecycle:
    """Load, save, query, delete and sweep artifacts.

    The cache starts unloaded; day and week queries only mean something once
    ``load()`` has run. Mutating operations load first if needed, so they
    always leave the cache loaded and in step with the store for the ids
    they touched.
    """

    def __init__(
        self,
        store: ArtifactStore,
        settings: SettingsService | None = None,
        trace: TraceService | None = None,
        *,
        clock: Callable[[], int] = now_ms,
        id_factory: Callable[[], str] = _new_id,
        decay_table: DecayTable = DEFAULT_DECAY_TABLE,
        event_log: JournalLogger | None = None,
    ):
        self.store = store
        self.settings = settings
        self.trace = trace
        self.decay_table = decay_table
        self.event_log = event_log
        self._clock = clock
        self._id_factory = id_factory
        self._cache: list[Artifact] = []
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def artifacts(self) -> tuple[Artifact, ...]:
        """Snapshot of the cache in append order."""
        return tuple(self._cache)

    async def load(self) -> list[Artifact]:
        """Replace the cache with the store's full contents."""
        artifacts = await self.store.get_all()
        self._cache = list(artifacts)
        self._loaded = True
        logger.debug("Loaded %d artifacts", len(self._cache))
        return list(self._cache)

    async def _ensure_loaded(self) -> None:
        if not self._loaded:
            await self.load()

    async def save(
        self,
        blob: bytes,
        spark_pack_id: str,
        spark_index: int,
        at: int | None = None,
    ) -> Artifact:
        """Persist a new capture and append it to the cache.

        The returned object is the one stored and cached.
        """
        await self._ensure_loaded()
        ts = at if at is not None else self._clock()
        artifact = Artifact(
            id=self._id_factory(),
            ts=ts,
            iso_date=day_key(ts),
            week_key=week_key(ts),
            type=PHOTO,
            blob=blob,
            spark_pack_id=spark_pack_id,
            spark_index=spark_index,
        )
        await self.store.put(artifact)
        self._cache.append(artifact)

        if self.trace is not None:
            self.trace.record_boop(self._clock())
        if self.event_log is not None:
            self.event_log.artifact_saved(artifact.id, artifact.iso_date, artifact.week_key)
        return artifact

    async def capture(self, blob: bytes, at: int | None = None) -> Artifact:
        """Save a capture with the day's spark from the active vibe pack."""
        ts = at if at is not None else self._clock()
        pack_id = self.settings.settings.active_vibe_pack if self.settings else None
        pack = get_pack(pack_id) if pack_id else None
        if pack is None:
            logger.warning("Vibe pack %r not found; saving capture without a spark", pack_id)
            index = 0
        else:
            index = spark_index_for_day(pack, day_key(ts))
        return await self.save(blob, pack_id or "", index, at=ts)

    async def remove(self, artifact_id: str) -> None:
        """Delete from the store, then from the cache. Unknown ids are a no-op."""
        await self._ensure_loaded()
        await self.store.delete_by_id(artifact_id)
        before = len(self._cache)
        self._cache = [a for a in self._cache if a.id != artifact_id]
        if len(self._cache) != before and self.event_log is not None:
            self.event_log.artifact_removed(artifact_id)

    async def clear_all(self) -> int:
        removed = await self.store.clear_all()
        self._cache = []
        self._loaded = True
        if self.event_log is not None:
            self.event_log.store_cleared(removed)
        return removed

    # -- Queries, recomputed from the clock on every call --

    def current_week(self) -> list[Artifact]:
        current = week_key(self._clock())
        return [a for a in self._cache if a.week_key == current]

    def today(self) -> list[Artifact]:
        current = day_key(self._clock())
        return [a for a in self._cache if a.iso_date == current]

    def has_captured_today(self) -> bool:
        return len(self.today()) > 0

    def decay_state_for(self, artifact: Artifact) -> str:
        return decay_state(age_days(artifact.ts, self._clock()), self.decay_table)

    # -- Retention --

    async def run_cleanup(self) -> CleanupReport:
        """Apply the configured deletion policy.

        Reloads from the store first so the sweep never acts on a stale
        cache, then deletes every expired id in one batch. An empty
        deletion set writes nothing.
        """
        await self.load()
        raw_policy = self.settings.settings.deletion_policy if self.settings else None
        policy = resolve_policy(raw_policy) if raw_policy is not None else DeletionPolicy.OFF
        expired = select_expired(self._cache, policy, self._clock())
        report = CleanupReport(policy=policy, scanned=len(self._cache))

        if expired:
            await self.store.delete_batch(expired)
            gone = set(expired)
            self._cache = [a for a in self._cache if a.id not in gone]
            report.deleted_ids = expired
            logger.info("Cleanup (%s) deleted %d artifacts", policy.value, len(expired))

        if self.event_log is not None:
            self.event_log.cleanup_finished(policy.value, report.scanned, report.deleted_ids)
        return report
