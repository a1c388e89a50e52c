"""Keyed-document store contract and the in-memory implementation.

Every store operation is a single-shot asynchronous request: it returns a
:class:`concurrent.futures.Future` that completes exactly once, with a
value on success or an exception on failure.  Stores run requests on a
ThreadPoolExecutor, or inline when constructed with ``sync=True``.

Documents are returned in store order (insertion order for the stores
shipped here).  Deleting an ID that does not exist succeeds.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeVar, runtime_checkable

from mealer.domain.ids import generate_document_id

logger = logging.getLogger(__name__)

R = TypeVar("R")


class StoreError(Exception):
    """A document store request failed."""


class StoreClosedError(StoreError):
    """A request was issued after the store was shut down."""


@dataclass(frozen=True)
class Document:
    """One stored document: its store-assigned ID and field map."""

    id: str
    data: dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class DocumentStore(Protocol):
    """Remote keyed-document store collaborator."""

    def get_all(self, collection: str) -> Future[list[Document]]:
        """Fetch every document in *collection*."""
        ...

    def add(self, collection: str, data: dict[str, Any]) -> Future[str]:
        """Store *data* as a new document; resolves to the assigned ID."""
        ...

    def delete(self, collection: str, document_id: str) -> Future[None]:
        """Delete the document at *document_id*."""
        ...

    def shutdown(self) -> None:
        """Wait for in-flight requests and release resources."""
        ...


class DispatchingStore:
    """Base for stores that complete requests on a worker pool.

    Parameters:
        sync: Complete every request inline on the calling thread.
        max_workers: ThreadPoolExecutor worker count.
    """

    def __init__(self, *, sync: bool = False, max_workers: int = 2) -> None:
        self._sync = sync
        self._executor: ThreadPoolExecutor | None = (
            None
            if sync
            else ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="mealer-store")
        )
        self._futures: list[Future[Any]] = []
        self._futures_lock = threading.Lock()
        self._closed = False

    def _submit(self, fn: Callable[..., R], *args: Any) -> Future[R]:
        """Run *fn* as one store request and return its future."""
        if self._closed:
            failed: Future[R] = Future()
            failed.set_exception(StoreClosedError("Document store has been shut down"))
            return failed

        if self._executor is None:
            future: Future[R] = Future()
            try:
                future.set_result(fn(*args))
            except Exception as exc:
                logger.debug("Store request %s failed: %s", fn.__name__, exc)
                future.set_exception(exc)
            return future

        future = self._executor.submit(fn, *args)
        with self._futures_lock:
            self._futures = [f for f in self._futures if not f.done()]
            self._futures.append(future)
        return future

    def shutdown(self) -> None:
        """Wait for in-flight requests, then shut the worker pool down."""
        self._closed = True
        with self._futures_lock:
            pending = list(self._futures)
            self._futures.clear()
        for future in pending:
            # Failures are delivered to the request's own callbacks.
            future.exception()
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None


class MemoryDocumentStore(DispatchingStore):
    """Dict-backed document store, insertion-ordered per collection."""

    def __init__(self, *, sync: bool = False, max_workers: int = 2) -> None:
        super().__init__(sync=sync, max_workers=max_workers)
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}
        self._lock = threading.Lock()

    def get_all(self, collection: str) -> Future[list[Document]]:
        return self._submit(self._get_all, collection)

    def add(self, collection: str, data: dict[str, Any]) -> Future[str]:
        return self._submit(self._add, collection, dict(data))

    def delete(self, collection: str, document_id: str) -> Future[None]:
        return self._submit(self._delete, collection, document_id)

    def _get_all(self, collection: str) -> list[Document]:
        with self._lock:
            docs = self._collections.get(collection, {})
            return [Document(id=doc_id, data=dict(data)) for doc_id, data in docs.items()]

    def _add(self, collection: str, data: dict[str, Any]) -> str:
        with self._lock:
            docs = self._collections.setdefault(collection, {})
            document_id = generate_document_id()
            while document_id in docs:
                document_id = generate_document_id()
            docs[document_id] = data
        return document_id

    def _delete(self, collection: str, document_id: str) -> None:
        with self._lock:
            self._collections.get(collection, {}).pop(document_id, None)
