"""Inventory loading and validation using Pydantic models.

Loads an inventory snapshot (services, containers, hosts and the self
identity) from a YAML file. All entries are validated with Pydantic v2.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

from tmplctx.models import Container, Host, SelfIdentity, Service

INVENTORY_ENV = "TMPLCTX_INVENTORY"
LOG_LEVEL_ENV = "TMPLCTX_LOG_LEVEL"
DEFAULT_INVENTORY_PATH = "./inventory.yaml"
DEFAULT_LOG_LEVEL = "INFO"


class InventoryConfig(BaseModel):
    """Inventory snapshot loaded from inventory.yaml."""

    model_config = ConfigDict(populate_by_name=True)

    services: list[Service] = Field(default_factory=list)
    containers: list[Container] = Field(default_factory=list)
    hosts: list[Host] = Field(default_factory=list)
    self_identity: SelfIdentity = Field(default_factory=SelfIdentity, alias="self")


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load and parse a YAML file, returning an empty dict for non-mapping documents."""
    with open(path) as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


def resolve_inventory_path(path: str | Path | None = None) -> Path:
    """Return the inventory path to use: explicit, then TMPLCTX_INVENTORY, then the default."""
    return Path(path or os.environ.get(INVENTORY_ENV, DEFAULT_INVENTORY_PATH))


def resolve_log_level(level: str | None = None) -> str:
    """Return the log level to use: explicit, then TMPLCTX_LOG_LEVEL, then INFO."""
    return (level or os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()


def load_inventory(path: str | Path) -> InventoryConfig:
    """Load an inventory snapshot from a YAML file.

    Args:
        path: Path to the inventory YAML file.

    Returns:
        The validated InventoryConfig.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file is not valid YAML.
        pydantic.ValidationError: If any entry has invalid content.
    """
    inventory_file = Path(path)
    if not inventory_file.is_file():
        raise FileNotFoundError(f"Inventory file not found: {inventory_file}")
    data = _load_yaml(inventory_file)
    # YAML null for a section means "none"
    cleaned = {k: v for k, v in data.items() if v is not None}
    return InventoryConfig.model_validate(cleaned)
