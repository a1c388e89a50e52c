"""Shared pytest fixtures and test helpers for mealer tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import date
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from mealer.domain.complaints import Complaint
from mealer.infrastructure.database.engine import init_database
from mealer.infrastructure.database.store import SqlDocumentStore
from mealer.infrastructure.store import MemoryDocumentStore


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    """Undo handler changes made by CLI invocations (configure_logging)."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    mealer_level = logging.getLogger("mealer").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("mealer").setLevel(mealer_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Iterator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def memory_store() -> Iterator[MemoryDocumentStore]:
    """In-memory store completing requests inline."""
    store = MemoryDocumentStore(sync=True)
    try:
        yield store
    finally:
        store.shutdown()


@pytest.fixture
def sql_store(db_engine: Engine) -> Iterator[SqlDocumentStore]:
    """SQLite store completing requests inline."""
    store = SqlDocumentStore(db_engine, sync=True)
    try:
        yield store
    finally:
        store.shutdown()


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI creates an isolated database.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes.
    """
    monkeypatch.delenv("MEALER_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def complaint() -> Complaint:
    """A fresh, unsaved complaint."""
    return make_complaint()


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_complaint(**overrides: Any) -> Complaint:
    fields: dict[str, Any] = {
        "title": "Cold food",
        "description": "The lasagna arrived cold.",
        "client_id": "client-1",
        "chef_id": "chef-7",
        "date_submitted": date(2024, 3, 1),
    }
    fields.update(overrides)
    return Complaint(**fields)


class RecordingHandler:
    """InboxHandler that records every callback it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))

    def on_list(self, complaints: list[Complaint]) -> None:
        self._record("on_list", complaints)

    def on_list_error(self, message: str) -> None:
        self._record("on_list_error", message)

    def on_add_success(self, complaint: Complaint) -> None:
        self._record("on_add_success", complaint)

    def on_add_error(self, message: str) -> None:
        self._record("on_add_error", message)

    def on_remove_success(self) -> None:
        self._record("on_remove_success")

    def on_remove_error(self, message: str) -> None:
        self._record("on_remove_error", message)

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.calls]


@pytest.fixture
def recorder() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def complaint_factory() -> Any:
    """The :func:`make_complaint` helper, for tests needing several complaints."""
    return make_complaint
