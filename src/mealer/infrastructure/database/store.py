"""SQLite-backed document store.

Documents live in the ``documents`` table as JSON text, keyed by
``(collection, doc_id)``.  Requests run on the store's worker pool (or
inline with ``sync=True``); each opens its own short transaction.
"""

from __future__ import annotations

import json
import logging
from concurrent.futures import Future
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import SQLAlchemyError

from mealer.domain.ids import generate_document_id
from mealer.infrastructure.database.schema import documents
from mealer.infrastructure.store import DispatchingStore, Document, StoreError

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


class SqlDocumentStore(DispatchingStore):
    """Document store over a SQLAlchemy engine with the ``documents`` table.

    Parameters:
        engine: Engine whose database has the mealer schema created.
        sync: Complete every request inline on the calling thread.
        max_workers: ThreadPoolExecutor worker count.
    """

    def __init__(self, engine: Engine, *, sync: bool = False, max_workers: int = 2) -> None:
        super().__init__(sync=sync, max_workers=max_workers)
        self._engine = engine

    def get_all(self, collection: str) -> Future[list[Document]]:
        return self._submit(self._get_all, collection)

    def add(self, collection: str, data: dict[str, Any]) -> Future[str]:
        return self._submit(self._add, collection, dict(data))

    def delete(self, collection: str, document_id: str) -> Future[None]:
        return self._submit(self._delete, collection, document_id)

    def shutdown(self) -> None:
        super().shutdown()
        self._engine.dispose()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _get_all(self, collection: str) -> list[Document]:
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(
                    select(documents.c.doc_id, documents.c.data)
                    .where(documents.c.collection == collection)
                    .order_by(documents.c.seq)
                ).fetchall()
        except SQLAlchemyError as exc:
            raise StoreError(f"Failed to read collection {collection}: {exc}") from exc
        return [Document(id=row.doc_id, data=json.loads(row.data)) for row in rows]

    def _add(self, collection: str, data: dict[str, Any]) -> str:
        document_id = generate_document_id()
        try:
            payload = json.dumps(data)
        except TypeError as exc:
            raise StoreError(f"Document is not JSON serializable: {exc}") from exc
        try:
            with self._engine.begin() as conn:
                conn.execute(
                    insert(documents).values(
                        collection=collection,
                        doc_id=document_id,
                        data=payload,
                        created=datetime.now(UTC).isoformat(),
                    )
                )
        except SQLAlchemyError as exc:
            raise StoreError(f"Failed to add document to {collection}: {exc}") from exc
        logger.debug("Added document %s to %s", document_id, collection)
        return document_id

    def _delete(self, collection: str, document_id: str) -> None:
        try:
            with self._engine.begin() as conn:
                conn.execute(
                    delete(documents).where(
                        documents.c.collection == collection,
                        documents.c.doc_id == document_id,
                    )
                )
        except SQLAlchemyError as exc:
            raise StoreError(f"Failed to delete {document_id} from {collection}: {exc}") from exc
        logger.debug("Deleted document %s from %s", document_id, collection)
