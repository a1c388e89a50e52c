"""Tests for InboxFuture — the Future-backed inbox handler."""

from __future__ import annotations

from concurrent.futures import InvalidStateError

import pytest

from mealer.domain.complaints import Complaint
from mealer.services.handlers import InboxError, InboxFuture
from mealer.services.inbox import InboxHandler


class TestInboxFuture:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(InboxFuture(), InboxHandler)

    def test_pending_until_called(self) -> None:
        handler = InboxFuture()
        assert not handler.done()
        handler.on_list([])
        assert handler.done()
        assert handler.result() == []

    def test_add_success_resolves_with_complaint(self, complaint: Complaint) -> None:
        handler = InboxFuture()
        handler.on_add_success(complaint)
        assert handler.result() is complaint

    def test_remove_success_resolves_with_none(self) -> None:
        handler = InboxFuture()
        handler.on_remove_success()
        assert handler.result() is None

    @pytest.mark.parametrize("method", ["on_list_error", "on_add_error", "on_remove_error"])
    def test_errors_raise_inbox_error(self, method: str) -> None:
        handler = InboxFuture()
        getattr(handler, method)("went wrong")
        with pytest.raises(InboxError) as excinfo:
            handler.result()
        assert excinfo.value.message == "went wrong"

    def test_second_callback_is_rejected(self) -> None:
        handler = InboxFuture()
        handler.on_remove_success()
        with pytest.raises(InvalidStateError):
            handler.on_remove_error("late")
