"""Locating and reading mealer.toml.

Lookup order: the ``--config`` path, then ``MEALER_CONFIG``, then the
nearest ``mealer.toml`` in the working directory or one of its parents.
A config named explicitly must exist; finding nothing on the walk-up
just means defaults.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from mealer.config.models import MealerConfig

CONFIG_FILENAME = "mealer.toml"
CONFIG_ENV_VAR = "MEALER_CONFIG"


class ConfigError(Exception):
    """mealer.toml could not be located or parsed."""


def locate_config(explicit: str | Path | None = None, *, start: Path | None = None) -> Path | None:
    """Return the config file to load, or None when there is none."""
    named = explicit or os.environ.get(CONFIG_ENV_VAR)
    if named:
        path = Path(named).expanduser()
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        return path

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* into its raw section tables.

    Only the sections :class:`MealerConfig` knows (``[store]``, ``[inbox]``)
    are accepted; values are validated later by the settings models.
    """
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    unknown = sorted(set(data) - set(MealerConfig.model_fields))
    if unknown:
        raise ConfigError(f"Unknown section(s) in {path}: {', '.join(unknown)}")
    return data
