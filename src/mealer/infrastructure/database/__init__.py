"""SQLite database engine, schema, and document store via SQLAlchemy Core."""

from mealer.infrastructure.database.engine import create_db_engine, init_database
from mealer.infrastructure.database.schema import documents, metadata
from mealer.infrastructure.database.store import SqlDocumentStore

__all__ = [
    "SqlDocumentStore",
    "create_db_engine",
    "documents",
    "init_database",
    "metadata",
]
