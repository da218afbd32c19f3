"""Inventory lookups for template rendering: hosts, containers and services."""

from __future__ import annotations

from tmplctx.context import TemplateContext
from tmplctx.errors import (
    ContextError,
    EntityNotFound,
    InvalidSelectorArgument,
    InvalidServiceIdentifier,
    MalformedLabelSelector,
    MultipleStackSelectors,
    SelectorError,
)
from tmplctx.labels import LabelMap, satisfies
from tmplctx.models import Container, Host, SelfIdentity, Service

__version__ = "0.1.0"

__all__ = [
    "Container",
    "ContextError",
    "EntityNotFound",
    "Host",
    "InvalidSelectorArgument",
    "InvalidServiceIdentifier",
    "LabelMap",
    "MalformedLabelSelector",
    "MultipleStackSelectors",
    "SelectorError",
    "SelfIdentity",
    "Service",
    "TemplateContext",
    "satisfies",
]
