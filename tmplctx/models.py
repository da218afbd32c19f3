"""Inventory entity models.

Hosts, containers and services as supplied by the metadata loader.
All models are frozen: a snapshot never changes once built.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tmplctx.labels import LabelMap


class _Entity(BaseModel):
    """Common base carrying the label map."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    labels: LabelMap = Field(default_factory=LabelMap)

    @field_validator("labels", mode="before")
    @classmethod
    def coerce_labels(cls, v: Any) -> LabelMap:
        """Accept a mapping of strings (or None) and store it as a LabelMap.

        Non-string keys or values are rejected rather than converted, since
        YAML turns unquoted scalars like `yes` or `1.10` into bool and float.
        """
        if v is None:
            return LabelMap()
        if isinstance(v, LabelMap):
            return v
        if not isinstance(v, Mapping):
            raise ValueError("labels must be a mapping of strings")
        for key, val in v.items():
            if not isinstance(key, str) or not isinstance(val, str):
                raise ValueError(f"label {key!r} must be a string mapped to a string; quote it in YAML")
        return LabelMap(v)


class Container(_Entity):
    """A container, identified by name."""

    name: str
    uuid: str = ""
    address: str = ""
    stack: str = ""
    service: str = ""
    host_uuid: str = ""
    state: str = ""
    health: str = ""


class Host(_Entity):
    """A host, identified by UUID."""

    uuid: str
    name: str = ""
    hostname: str = ""
    address: str = ""


class Service(_Entity):
    """A service, identified by the (name, stack) pair."""

    name: str
    stack: str
    kind: str = ""
    vip: str = ""
    containers: tuple[str, ...] = ()

    @property
    def identifier(self) -> str:
        """Return the compound 'service.stack' identifier."""
        return f"{self.name}.{self.stack}"


class SelfIdentity(BaseModel):
    """Identity of the entity the current render runs inside."""

    model_config = ConfigDict(frozen=True)

    container_name: str = ""
    host_uuid: str = ""
    stack: str = ""
    service: str = ""
