"""Runtime settings for one mealer invocation.

CLI flags win over ``MEALER_*`` environment variables (``__`` separates
nested keys, e.g. ``MEALER_STORE__BACKEND=memory``), which win over
mealer.toml, which wins over the defaults in :mod:`mealer.config.models`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from mealer.config.discovery import locate_config, read_config
from mealer.config.models import InboxConfig, StoreConfig


class TomlSectionsSource(PydanticBaseSettingsSource):
    """Feeds the parsed mealer.toml sections to pydantic-settings."""

    def __init__(self, settings_cls: type[BaseSettings], sections: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._sections = sections

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._sections.get(field_name), field_name, True

    def __call__(self) -> dict[str, Any]:
        return dict(self._sections)


class MealerSettings(BaseSettings):
    """Frozen settings carried by the CLI's AppContext.

    Attributes:
        root: Directory the database lives under; the config file's
            directory, or the working directory when no config was found.
        config_path: The mealer.toml that was loaded, if any.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="MEALER_",
        env_nested_delimiter="__",
    )

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    sync: bool = False

    store: StoreConfig = Field(default_factory=StoreConfig)
    inbox: InboxConfig = Field(default_factory=InboxConfig)

    @property
    def db_path(self) -> Path:
        """Location of the SQLite database file."""
        return self.root / self.store.db_dir / self.store.db_name

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # The TOML file is whichever one the caller passed as config_path.
        config_path = getattr(init_settings, "init_kwargs", {}).get("config_path")
        sections = read_config(Path(config_path)) if config_path else {}
        return init_settings, env_settings, TomlSectionsSource(settings_cls, sections)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        **flags: Any,
    ) -> MealerSettings:
        """Build settings for one CLI invocation.

        Raises:
            ConfigError: A named config is missing, or mealer.toml is not
                valid TOML or has unknown sections.
            pydantic.ValidationError: A config or env value is out of range.
        """
        located = locate_config(config_path, start=root)
        if root is None:
            root = located.parent if located else Path.cwd()
        return cls(root=root, config_path=located, **flags)
