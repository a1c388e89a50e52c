"""Database engine setup for SQLite with WAL mode.

The DB is stored at ``{root}/.mealer/mealer.db`` by default.  SQLAlchemy
Core (not ORM) is used: the store reads and writes opaque JSON documents,
so there is nothing to gain from identity maps or sessions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from mealer.infrastructure.database.schema import metadata

DEFAULT_DB_DIR = ".mealer"
DEFAULT_DB_NAME = "mealer.db"


def create_db_engine(db_path: Path) -> Engine:
    """Create a SQLite engine with WAL mode enabled."""
    engine = create_engine(f"sqlite:///{db_path}", echo=False)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    return engine


def init_database(
    root: Path,
    *,
    db_dir: str = DEFAULT_DB_DIR,
    db_name: str = DEFAULT_DB_NAME,
) -> Engine:
    """Initialize the mealer database at ``{root}/{db_dir}/{db_name}``.

    Creates the directory and all tables from :data:`schema.metadata`.
    Idempotent; safe to call on an existing database.

    Returns the engine ready for use.
    """
    data_dir = root / db_dir
    data_dir.mkdir(parents=True, exist_ok=True)

    engine = create_db_engine(data_dir / db_name)
    metadata.create_all(engine)
    return engine
