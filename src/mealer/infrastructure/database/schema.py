"""SQLAlchemy Core table definitions for the mealer database.

One generic ``documents`` table backs every keyed-document collection.
``seq`` records insertion order, which is the store order returned by
``get_all``.
"""

from __future__ import annotations

from sqlalchemy import Column, Index, Integer, MetaData, Table, Text, UniqueConstraint

metadata = MetaData()

documents = Table(
    "documents",
    metadata,
    Column("seq", Integer, primary_key=True, autoincrement=True),
    Column("collection", Text, nullable=False),
    Column("doc_id", Text, nullable=False),
    Column("data", Text, nullable=False),  # JSON object
    Column("created", Text, nullable=False),
    UniqueConstraint("collection", "doc_id"),
)

Index("ix_documents_collection", documents.c.collection)
