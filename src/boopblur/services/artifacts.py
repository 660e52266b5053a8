"""Artifact CRUD operations on a database session."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from boopblur.core.models import Artifact
from boopblur.db.artifacts import ArtifactRow

# Keeps each DELETE under SQLite's bound-parameter limit
DELETE_CHUNK_SIZE = 500


def put_artifact(session: Session, artifact: Artifact) -> None:
    """Insert or overwrite an artifact by id."""
    session.merge(ArtifactRow.from_artifact(artifact))


def get_artifact(session: Session, artifact_id: str) -> Artifact | None:
    """Get an artifact by ID.

    Returns:
        Artifact or None if not found.
    """
    row = session.get(ArtifactRow, artifact_id)
    return row.to_artifact() if row is not None else None


def list_artifacts(session: Session) -> list[Artifact]:
    return [row.to_artifact() for row in session.scalars(select(ArtifactRow))]


def list_by_week(session: Session, week_key: str) -> list[Artifact]:
    """Index lookup on ``week_key``."""
    stmt = select(ArtifactRow).where(ArtifactRow.week_key == week_key)
    return [row.to_artifact() for row in session.scalars(stmt)]


def list_by_date(session: Session, iso_date: str) -> list[Artifact]:
    """Index lookup on ``iso_date``."""
    stmt = select(ArtifactRow).where(ArtifactRow.iso_date == iso_date)
    return [row.to_artifact() for row in session.scalars(stmt)]


def delete_artifact(session: Session, artifact_id: str) -> int:
    """Delete one artifact. Returns the number of rows removed (0 or 1)."""
    result = session.execute(delete(ArtifactRow).where(ArtifactRow.id == artifact_id))
    return result.rowcount or 0


def delete_artifacts(session: Session, artifact_ids: Iterable[str]) -> int:
    """Delete many artifacts inside the caller's transaction.

    Ids that are not present are ignored. Returns the number of rows removed.
    """
    ids = list(dict.fromkeys(artifact_ids))
    removed = 0
    for start in range(0, len(ids), DELETE_CHUNK_SIZE):
        chunk = ids[start : start + DELETE_CHUNK_SIZE]
        result = session.execute(delete(ArtifactRow).where(ArtifactRow.id.in_(chunk)))
        removed += result.rowcount or 0
    return removed


def clear_artifacts(session: Session) -> int:
    result = session.execute(delete(ArtifactRow))
    return result.rowcount or 0
