"""Database model and engine for the artifact store."""

from boopblur.db.artifacts import ArtifactBase, ArtifactRow
from boopblur.db.engine import (
    create_sqlite_engine,
    get_schema_version,
    init_schema,
    make_session_factory,
    session_scope,
)

__all__ = [
    "ArtifactBase",
    "ArtifactRow",
    "create_sqlite_engine",
    "get_schema_version",
    "init_schema",
    "make_session_factory",
    "session_scope",
]
