"""Per-invocation state shared by the mealer commands.

The root group builds one :class:`AppContext` and subcommands receive it
through ``@click.pass_obj``.  It owns the document store for the run and
turns inbox handler outcomes into printed results and exit codes.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import click

from mealer.output.formatters import OutputSettings, format_result
from mealer.services.handlers import InboxError, InboxFuture
from mealer.services.result import ErrorCode, Response, Result

if TYPE_CHECKING:
    from mealer.config.settings import MealerSettings
    from mealer.infrastructure.store import DocumentStore
    from mealer.services.inbox import InboxService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The store is lazily initialized on first use so ``--help`` and
    ``--version`` never touch the database.
    """

    def __init__(self, settings: MealerSettings) -> None:
        self.settings = settings
        self._store: DocumentStore | None = None

        from mealer.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def store(self) -> DocumentStore:
        """The configured document store (created lazily on first access)."""
        if self._store is None:
            cfg = self.settings.store
            if cfg.backend == "memory":
                from mealer.infrastructure.store import MemoryDocumentStore

                self._store = MemoryDocumentStore(
                    sync=self.settings.sync, max_workers=cfg.max_workers
                )
            else:
                from mealer.infrastructure.database import SqlDocumentStore, init_database

                engine = init_database(
                    self.settings.root, db_dir=cfg.db_dir, db_name=cfg.db_name
                )
                self._store = SqlDocumentStore(
                    engine, sync=self.settings.sync, max_workers=cfg.max_workers
                )
        return self._store

    def inbox(self) -> InboxService:
        """An InboxService over the configured store and collection."""
        from mealer.services.inbox import InboxService

        return InboxService(self.store, collection=self.settings.inbox.collection)

    def run_inbox(
        self,
        op: str,
        request: Callable[[InboxService, InboxFuture], Response],
    ) -> None:
        """Issue one inbox request, wait for its outcome, and emit it as *op*."""
        handler = InboxFuture()
        dispatched = request(self.inbox(), handler)
        self.emit(op, self.wait(dispatched, handler))

    def wait(self, dispatched: Response, handler: InboxFuture) -> Result[Any] | Response:
        """Block until *handler* resolves and convert the outcome.

        A request rejected at dispatch is returned as-is.
        """
        if not dispatched.ok:
            return dispatched
        try:
            value = handler.result()
        except InboxError as exc:
            return Result.failure(ErrorCode.STORE_ERROR, exc.message)
        if value is None:
            return Response.succeeded()
        return Result.success(value)

    def emit(self, op: str, outcome: Result[Any] | Response) -> None:
        """Format and output an outcome with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(op, outcome, settings=settings)
        if outcome.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def close(self) -> None:
        """Wait for in-flight store requests and release the store."""
        if self._store is not None:
            self._store.shutdown()
            self._store = None
