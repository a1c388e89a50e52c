"""mealer subcommands.

Command modules are imported inside :func:`register_commands`, so the
services and store layers load only when a command actually runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups on the root CLI group."""
    from mealer.commands.complaints import complaints

    cli.add_command(complaints)
