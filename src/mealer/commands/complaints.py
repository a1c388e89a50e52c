"""Command group: complaints (list, add, remove)."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import click

from mealer.commands._base import MealerGroup

if TYPE_CHECKING:
    from mealer.commands._context import AppContext


@click.group(
    cls=MealerGroup,
    examples="""\
  mealer complaints list
  mealer complaints add --title "Cold food" --description "Arrived cold" \\
      --client client-1 --chef chef-7
  mealer --json complaints remove Xy3kP0qLm8RtV2nB9sAe""",
)
def complaints() -> None:
    """Manage the complaint inbox."""


@complaints.command(
    "list",
    examples="""\
  mealer complaints list
  mealer --json complaints list
  mealer -v complaints list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List every complaint in store order."""
    app.run_inbox("list_complaints", lambda inbox, handler: inbox.get_all_complaints(handler))


@complaints.command(
    examples="""\
  mealer complaints add --title "Late delivery" --description "Two hours late" \\
      --client client-1 --chef chef-7
  mealer complaints add --title "Wrong order" --description "Got pasta" \\
      --client client-2 --chef chef-7 --date 2024-03-01""",
)
@click.option("--title", required=True, help="Short summary of the complaint.")
@click.option("--description", required=True, help="Full complaint text.")
@click.option("--client", "client_id", required=True, help="ID of the complaining client.")
@click.option("--chef", "chef_id", required=True, help="ID of the chef complained about.")
@click.option(
    "--date",
    "date_submitted",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Submission date (YYYY-MM-DD, default: today).",
)
@click.pass_obj
def add(
    app: AppContext,
    title: str,
    description: str,
    client_id: str,
    chef_id: str,
    date_submitted: datetime | None,
) -> None:
    """Submit a new complaint; prints the store-assigned ID."""
    from mealer.domain.complaints import Complaint

    complaint = Complaint(
        title=title,
        description=description,
        client_id=client_id,
        chef_id=chef_id,
        date_submitted=(date_submitted or datetime.now(UTC)).date(),
    )
    app.run_inbox("add_complaint", lambda inbox, handler: inbox.add_complaint(complaint, handler))


@complaints.command(
    examples="""\
  mealer complaints remove Xy3kP0qLm8RtV2nB9sAe""",
)
@click.argument("complaint_id")
@click.pass_obj
def remove(app: AppContext, complaint_id: str) -> None:
    """Remove a complaint by ID."""
    app.run_inbox(
        "remove_complaint", lambda inbox, handler: inbox.remove_complaint(complaint_id, handler)
    )
