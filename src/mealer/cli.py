"""The ``mealer`` command: global output/config flags over the command groups."""

from __future__ import annotations

from typing import Any

import click
from pydantic import ValidationError

from mealer import __version__
from mealer.commands import register_commands
from mealer.commands._context import AppContext
from mealer.config.discovery import ConfigError
from mealer.config.settings import MealerSettings


def _load_settings(config_path: str | None, **flags: Any) -> MealerSettings:
    try:
        return MealerSettings.from_cli(config_path=config_path, **flags)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise click.ClickException(f"Invalid configuration: {problems}") from exc


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="mealer")
@click.option("-c", "--config", "config_path", default=None, help="Use this mealer.toml.")
@click.option("--json", "json_output", is_flag=True, help="Print outcomes as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only IDs or OK/ERROR lines.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and wider tables.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option("--sync", is_flag=True, help="Complete store requests on the calling thread.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """Chef catalog and complaint inbox tools."""
    app = AppContext(_load_settings(config_path, **flags))
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
