"""Durable artifact store — async facade over the SQLite artifact database.

The connection is opened lazily. Every operation awaits ``ensure_ready()``
first, and concurrent first callers share one in-flight open task, so the
schema is created at most once per database no matter how calls interleave.
Blocking SQLAlchemy work runs on a worker thread; the event loop only
suspends at those storage boundaries.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from boopblur.core.errors import StoreError, StoreInitError
from boopblur.core.models import Artifact
from boopblur.db.engine import (
    create_sqlite_engine,
    init_schema,
    make_session_factory,
    session_scope,
)
from boopblur.services import artifacts as artifact_service

if TYPE_CHECKING:
    from sqlalchemy import Engine
    from sqlalchemy.orm import Session, sessionmaker

    from boopblur.config import AppConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ArtifactStore:
    """Keyed artifact storage with date, week and timestamp indices."""

    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path)
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None
        self._opening: asyncio.Future[None] | None = None
        self.open_attempts = 0
        self.schema_creations = 0

    @property
    def is_ready(self) -> bool:
        return self._session_factory is not None

    async def ensure_ready(self) -> None:
        """Open the database, creating its schema on first use.

        Safe to call concurrently: callers arriving while an open is in
        flight await that same attempt. A failed attempt is forgotten so the
        next call retries, and its StoreInitError reaches every waiter.
        """
        if self._session_factory is not None:
            return
        opening = self._opening
        if opening is None:
            opening = asyncio.ensure_future(asyncio.to_thread(self._open))
            self._opening = opening
        try:
            await asyncio.shield(opening)
        except Exception:
            if self._opening is opening:
                self._opening = None
            raise

    def _open(self) -> None:
        self.open_attempts += 1
        engine: Engine | None = None
        try:
            engine = create_sqlite_engine(self.db_path)
            created = init_schema(engine)
        except (StoreInitError, SQLAlchemyError, OSError) as e:
            if engine is not None:
                engine.dispose()
            if isinstance(e, StoreInitError):
                raise
            raise StoreInitError(f"Could not open artifact store at {self.db_path}: {e}") from e
        if created:
            self.schema_creations += 1
        self._engine = engine
        self._session_factory = make_session_factory(engine)
        logger.debug("Artifact store ready at %s", self.db_path)

    def _in_session(self, fn: Callable[..., T], *args: object) -> T:
        if self._session_factory is None:
            raise StoreError(f"Artifact store at {self.db_path} was closed mid-operation")
        try:
            with session_scope(self._session_factory) as session:
                return fn(session, *args)
        except SQLAlchemyError as e:
            raise StoreError(f"{fn.__name__} failed: {e}") from e

    async def _run(self, fn: Callable[..., T], *args: object) -> T:
        await self.ensure_ready()
        return await asyncio.to_thread(self._in_session, fn, *args)

    # -- Writes --

    async def put(self, artifact: Artifact) -> None:
        """Insert or overwrite by id."""
        await self._run(artifact_service.put_artifact, artifact)

    async def delete_by_id(self, artifact_id: str) -> None:
        """Delete one artifact; an unknown id is a no-op."""
        await self._run(artifact_service.delete_artifact, artifact_id)

    async def delete_batch(self, artifact_ids: Iterable[str]) -> int:
        """Delete many artifacts in a single transaction.

        Either every present id is removed or none is. Unknown ids are
        ignored. Returns the number of artifacts removed.
        """
        ids = list(artifact_ids)
        if not ids:
            await self.ensure_ready()
            return 0
        removed = await self._run(artifact_service.delete_artifacts, ids)
        logger.debug("Batch delete removed %d of %d ids", removed, len(ids))
        return removed

    async def clear_all(self) -> int:
        return await self._run(artifact_service.clear_artifacts)

    # -- Reads --

    async def get_by_id(self, artifact_id: str) -> Artifact | None:
        return await self._run(artifact_service.get_artifact, artifact_id)

    async def get_all(self) -> list[Artifact]:
        """All artifacts, in no particular order."""
        return await self._run(artifact_service.list_artifacts)

    async def get_all_by_week(self, week_key: str) -> list[Artifact]:
        return await self._run(artifact_service.list_by_week, week_key)

    async def get_all_by_date(self, iso_date: str) -> list[Artifact]:
        return await self._run(artifact_service.list_by_date, iso_date)

    def close(self) -> None:
        """Dispose the engine. The next operation reopens it."""
        if self._engine is not None:
            self._engine.dispose()
        self._engine = None
        self._session_factory = None
        self._opening = None


_store: ArtifactStore | None = None


def get_store(config: AppConfig | None = None) -> ArtifactStore:
    """Get the process-wide artifact store."""
    global _store
    if _store is None:
        if config is None:
            from boopblur.config import get_config

            config = get_config()
        config.ensure_storage_dir()
        _store = ArtifactStore(config.db_path)
    return _store


def reset_store() -> None:
    """Close and forget the process-wide store (useful for testing)."""
    global _store
    if _store is not None:
        _store.close()
        _store = None
