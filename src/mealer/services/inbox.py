"""InboxService — complaint records over an asynchronous document store.

Every operation dispatches one request to the store and returns at once
with a :class:`Response` saying whether the request was dispatched.  The
outcome arrives later through exactly one method on the caller's
:class:`InboxHandler`, invoked once the store's future completes (possibly
on a store worker thread).

Request lifecycle: ``Idle -> InFlight -> {Succeeded, Failed}``.  No retries,
no cancellation, no timeout.

INVARIANT: Validation failures never reach the store.
INVARIANT: Each dispatched request invokes exactly one handler method, once.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import Future
from typing import Any, Protocol, TypeVar, cast, runtime_checkable

from mealer.domain.complaints import Complaint, ComplaintDecodeError
from mealer.domain.ids import is_valid_id
from mealer.infrastructure.store import Document, DocumentStore
from mealer.services.result import ErrorCode, Response

logger = logging.getLogger(__name__)

R = TypeVar("R")

COMPLAINTS_COLLECTION = "Complaints"

MSG_INVALID_COMPLAINT = "Invalid complaint object provided"
MSG_INVALID_COMPLAINT_ID = "Invalid complaint id provided"
MSG_MISSING_HANDLER = "An inbox handler is required to receive the outcome"
PREFIX_LIST_ERROR = "Error getting complaints from database: "
PREFIX_ADD_ERROR = "Failed to add complaint to database: "
PREFIX_REMOVE_ERROR = "Error removing document from database: "


@runtime_checkable
class InboxHandler(Protocol):
    """Receives the outcome of an InboxService request."""

    def on_list(self, complaints: list[Complaint]) -> None: ...

    def on_list_error(self, message: str) -> None: ...

    def on_add_success(self, complaint: Complaint) -> None: ...

    def on_add_error(self, message: str) -> None: ...

    def on_remove_success(self) -> None: ...

    def on_remove_error(self, message: str) -> None: ...


def _notify(callback: Callable[..., None], *args: Any) -> None:
    """Invoke one handler method; a raising handler is logged, not retried."""
    try:
        callback(*args)
    except Exception:
        logger.exception("Inbox handler %s raised", getattr(callback, "__name__", callback))


class InboxService:
    """List, add, and remove complaints in a document store collection."""

    def __init__(self, store: DocumentStore, *, collection: str = COMPLAINTS_COLLECTION) -> None:
        self._store = store
        self._collection = collection

    @property
    def collection(self) -> str:
        return self._collection

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_all_complaints(self, handler: InboxHandler | None) -> Response:
        """Fetch every complaint; outcome via ``on_list`` / ``on_list_error``."""
        if handler is None:
            return self._reject_handler("get_all_complaints")

        future = self._request(lambda: self._store.get_all(self._collection))
        future.add_done_callback(lambda f: self._finish_list(f, handler))
        return Response.succeeded()

    def add_complaint(self, complaint: Complaint | None, handler: InboxHandler | None) -> Response:
        """Persist *complaint*; outcome via ``on_add_success`` / ``on_add_error``.

        On success the store-assigned ID is written back onto *complaint*.
        """
        if handler is None:
            return self._reject_handler("add_complaint")
        if not isinstance(complaint, Complaint):
            _notify(handler.on_add_error, MSG_INVALID_COMPLAINT)
            return Response.failed(ErrorCode.INVALID_COMPLAINT, MSG_INVALID_COMPLAINT)

        document = complaint.to_document()
        future = self._request(lambda: self._store.add(self._collection, document))
        future.add_done_callback(lambda f: self._finish_add(f, complaint, handler))
        return Response.succeeded()

    def remove_complaint(self, complaint_id: str | None, handler: InboxHandler | None) -> Response:
        """Delete a complaint by ID; outcome via ``on_remove_success`` / ``on_remove_error``."""
        if handler is None:
            return self._reject_handler("remove_complaint")
        if not is_valid_id(complaint_id):
            _notify(handler.on_remove_error, MSG_INVALID_COMPLAINT_ID)
            return Response.failed(ErrorCode.INVALID_ID, MSG_INVALID_COMPLAINT_ID)

        document_id = cast(str, complaint_id)
        future = self._request(lambda: self._store.delete(self._collection, document_id))
        future.add_done_callback(lambda f: self._finish_remove(f, document_id, handler))
        return Response.succeeded()

    # ------------------------------------------------------------------
    # Completion
    # ------------------------------------------------------------------

    def _finish_list(self, future: Future[list[Document]], handler: InboxHandler) -> None:
        try:
            docs = future.result()
        except Exception as exc:
            logger.warning("Listing %s failed: %s", self._collection, exc)
            _notify(handler.on_list_error, f"{PREFIX_LIST_ERROR}{exc}")
            return

        try:
            complaints = [Complaint.from_document(doc.data, document_id=doc.id) for doc in docs]
        except ComplaintDecodeError as exc:
            logger.warning("Decoding %s failed: %s", self._collection, exc)
            _notify(handler.on_list_error, f"{PREFIX_LIST_ERROR}{exc}")
            return

        logger.debug("Listed %d complaints from %s", len(complaints), self._collection)
        _notify(handler.on_list, complaints)

    def _finish_add(
        self,
        future: Future[str],
        complaint: Complaint,
        handler: InboxHandler,
    ) -> None:
        try:
            document_id = future.result()
        except Exception as exc:
            logger.warning("Adding complaint failed: %s", exc)
            _notify(handler.on_add_error, f"{PREFIX_ADD_ERROR}{exc}")
            return

        complaint.id = document_id
        logger.debug("Added complaint %s", document_id)
        _notify(handler.on_add_success, complaint)

    def _finish_remove(
        self, future: Future[None], complaint_id: str, handler: InboxHandler
    ) -> None:
        try:
            future.result()
        except Exception as exc:
            logger.warning("Removing complaint %s failed: %s", complaint_id, exc)
            _notify(handler.on_remove_error, f"{PREFIX_REMOVE_ERROR}{exc}")
            return

        logger.debug("Removed complaint %s", complaint_id)
        _notify(handler.on_remove_success)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _request(self, issue: Callable[[], Future[R]]) -> Future[R]:
        """Issue a store request; a store that raises instead of failing its future is folded in."""
        try:
            return issue()
        except Exception as exc:
            logger.debug("Store raised while dispatching: %s", exc, exc_info=True)
            failed: Future[R] = Future()
            failed.set_exception(exc)
            return failed

    def _reject_handler(self, op: str) -> Response:
        logger.error("%s called without a handler", op)
        return Response.failed(ErrorCode.INVALID_HANDLER, MSG_MISSING_HANDLER, op=op)
