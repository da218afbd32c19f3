"""Shared fixtures: a small inventory snapshot."""

from __future__ import annotations

import pytest
import structlog

from tmplctx.context import TemplateContext
from tmplctx.models import Container, Host, SelfIdentity, Service


@pytest.fixture(autouse=True)
def _reset_structlog():
    """The CLI reconfigures structlog; undo it after every test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def containers() -> list[Container]:
    return [
        Container(name="web-1", stack="prod", service="web", labels={"tier": "web-frontend", "zone": "eu-1"}),
        Container(name="db-1", stack="prod", service="db", labels={"tier": "db"}),
        Container(name="Cache-1", stack="dev", service="cache", labels={"tier": "DB", "zone": "us-2"}),
    ]


@pytest.fixture
def hosts() -> list[Host]:
    return [
        Host(uuid="AAAA-1111", hostname="node-a", labels={"zone": "eu-1", "ssd": "true"}),
        Host(uuid="bbbb-2222", hostname="node-b", labels={"zone": "us-2"}),
    ]


@pytest.fixture
def services() -> list[Service]:
    return [
        Service(name="web", stack="prod", labels={"tier": "web-frontend"}),
        Service(name="db", stack="prod", labels={"tier": "db"}),
        Service(name="web", stack="staging", labels={"tier": "web-frontend"}),
        Service(name="app", stack="Prod", labels={"tier": "app"}),
        Service(name="db", stack="staging", labels={"tier": "db-replica"}),
    ]


@pytest.fixture
def self_identity() -> SelfIdentity:
    return SelfIdentity(container_name="web-1", host_uuid="aaaa-1111", stack="prod", service="app")


@pytest.fixture
def ctx(services, containers, hosts, self_identity) -> TemplateContext:
    return TemplateContext(services, containers, hosts, self_identity)
