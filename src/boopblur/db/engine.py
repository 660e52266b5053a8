"""Database engine setup for Boop-Blur.

The artifact database is a single SQLite file. Its schema version lives in
``PRAGMA user_version``: 0 means no schema yet, anything else must match
``SCHEMA_VERSION``.
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import Connection, Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from boopblur.config import SCHEMA_VERSION
from boopblur.core.errors import StoreInitError

logger = logging.getLogger(__name__)


def create_sqlite_engine(db_path: Path) -> Engine:
    """Create a SQLite engine with proper configuration."""
    db_path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(
        f"sqlite:///{db_path}",
        echo=False,
        pool_pre_ping=True,
        # Store work runs on worker threads
        connect_args={"check_same_thread": False},
    )
    return engine


def get_schema_version(conn: Connection) -> int:
    return int(conn.exec_driver_sql("PRAGMA user_version").scalar() or 0)


def init_schema(engine: Engine) -> bool:
    """Create the artifacts table and its indices if the schema is absent.

    Returns True when the schema was created by this call.
    """
    from boopblur.db.artifacts import ArtifactBase

    with engine.begin() as conn:
        version = get_schema_version(conn)
        if version == SCHEMA_VERSION:
            return False
        if version != 0:
            raise StoreInitError(
                f"Unsupported artifact schema version {version} (expected {SCHEMA_VERSION})"
            )
        ArtifactBase.metadata.create_all(conn)
        conn.exec_driver_sql(f"PRAGMA user_version = {SCHEMA_VERSION}")
    logger.info("Created artifact schema v%d", SCHEMA_VERSION)
    return True


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False)


@contextmanager
def session_scope(factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    """Yield a session that commits on success and rolls back on error."""
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
