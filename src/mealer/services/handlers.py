"""Future-backed inbox handler for callers that need to wait.

:class:`InboxFuture` implements :class:`~mealer.services.inbox.InboxHandler`
by resolving a :class:`concurrent.futures.Future`: success callbacks set
the result, error callbacks set an :class:`InboxError`.  A second callback
on the same handler raises ``InvalidStateError``, which surfaces any
exactly-once violation immediately.
"""

from __future__ import annotations

from concurrent.futures import Future
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mealer.domain.complaints import Complaint


class InboxError(Exception):
    """An inbox request completed with a failure message."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InboxFuture:
    """InboxHandler that resolves a Future with the request's outcome.

    Usage::

        handler = InboxFuture()
        service.get_all_complaints(handler)
        complaints = handler.result()
    """

    def __init__(self) -> None:
        self._future: Future[Any] = Future()

    @property
    def future(self) -> Future[Any]:
        return self._future

    def done(self) -> bool:
        return self._future.done()

    def result(self, timeout: float | None = None) -> Any:
        """Block until the outcome arrives; raises :class:`InboxError` on failure."""
        return self._future.result(timeout)

    def on_list(self, complaints: list[Complaint]) -> None:
        self._future.set_result(list(complaints))

    def on_list_error(self, message: str) -> None:
        self._future.set_exception(InboxError(message))

    def on_add_success(self, complaint: Complaint) -> None:
        self._future.set_result(complaint)

    def on_add_error(self, message: str) -> None:
        self._future.set_exception(InboxError(message))

    def on_remove_success(self) -> None:
        self._future.set_result(None)

    def on_remove_error(self, message: str) -> None:
        self._future.set_exception(InboxError(message))
