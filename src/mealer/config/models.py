"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, mealer.toml only contains overrides.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    backend: Literal["sqlite", "memory"] = "sqlite"
    db_dir: str = ".mealer"
    db_name: str = "mealer.db"
    max_workers: int = Field(default=2, ge=1)


class InboxConfig(BaseModel):
    """[inbox] section."""

    model_config = {"frozen": True}

    collection: str = Field(default="Complaints", min_length=1)


class MealerConfig(BaseModel):
    """Root configuration model: the validated contents of mealer.toml."""

    model_config = {"frozen": True}

    store: StoreConfig = Field(default_factory=StoreConfig)
    inbox: InboxConfig = Field(default_factory=InboxConfig)
