"""Template context: the inventory snapshot seen by templates.

Provides single-entity lookups (by name, UUID or service identifier,
defaulting to the self identity) and selector-filtered collection
lookups over services, containers and hosts.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from tmplctx.config import InventoryConfig, load_inventory
from tmplctx.errors import EntityNotFound, InvalidServiceIdentifier
from tmplctx.filters import filter_containers, filter_hosts, filter_services
from tmplctx.models import Container, Host, SelfIdentity, Service
from tmplctx.selectors import parse_label_selectors, parse_service_selectors


def _fold(value: str) -> str:
    return value.lower()


class TemplateContext:
    """Read-only inventory snapshot with lookup methods for templates."""

    def __init__(
        self,
        services: Iterable[Service] = (),
        containers: Iterable[Container] = (),
        hosts: Iterable[Host] = (),
        self_identity: SelfIdentity | None = None,
    ) -> None:
        """Initialize the context from inventory collections.

        Args:
            services: All services, in inventory order.
            containers: All containers, in inventory order.
            hosts: All hosts, in inventory order.
            self_identity: Identity used when a lookup omits its identifier.
        """
        self._services: tuple[Service, ...] = tuple(services)
        self._containers: tuple[Container, ...] = tuple(containers)
        self._hosts: tuple[Host, ...] = tuple(hosts)
        self._self = self_identity or SelfIdentity()

        # First entity wins when keys collide
        self._containers_by_name: dict[str, Container] = {}
        for c in self._containers:
            self._containers_by_name.setdefault(_fold(c.name), c)
        self._hosts_by_uuid: dict[str, Host] = {}
        for h in self._hosts:
            self._hosts_by_uuid.setdefault(_fold(h.uuid), h)
        self._services_by_id: dict[tuple[str, str], Service] = {}
        for s in self._services:
            self._services_by_id.setdefault((_fold(s.name), _fold(s.stack)), s)

    @classmethod
    def from_config(cls, cfg: InventoryConfig) -> TemplateContext:
        """Build a context from a validated inventory config."""
        return cls(cfg.services, cfg.containers, cfg.hosts, cfg.self_identity)

    @classmethod
    def from_file(cls, path: str | Path) -> TemplateContext:
        """Load an inventory YAML file and build a context from it."""
        return cls.from_config(load_inventory(path))

    @property
    def services(self) -> tuple[Service, ...]:
        return self._services

    @property
    def containers(self) -> tuple[Container, ...]:
        return self._containers

    @property
    def hosts(self) -> tuple[Host, ...]:
        return self._hosts

    @property
    def self_identity(self) -> SelfIdentity:
        return self._self

    def get_container(self, name: str | None = None) -> Container:
        """Return the container with the given name, ignoring case.

        Without a name the current container is returned.

        Raises:
            EntityNotFound: If no container has that name.
        """
        name = name or self._self.container_name
        container = self._containers_by_name.get(_fold(name))
        if container is None:
            raise EntityNotFound("container", name)
        return container

    def get_host(self, uuid: str | None = None) -> Host:
        """Return the host with the given UUID, ignoring case.

        Without a UUID the local host is returned.

        Raises:
            EntityNotFound: If no host has that UUID.
        """
        uuid = uuid or self._self.host_uuid
        host = self._hosts_by_uuid.get(_fold(uuid))
        if host is None:
            raise EntityNotFound("host", uuid)
        return host

    def get_service(self, identifier: str | None = None) -> Service:
        """Return the service for an identifier of the form 'service[.stack]'.

        Without an identifier the service of the current container is
        returned. Without a stack part the current stack is assumed.

        Raises:
            InvalidServiceIdentifier: If the identifier has more than one dot.
            EntityNotFound: If no service matches name and stack.
        """
        if not identifier:
            name, stack = self._self.service, self._self.stack
        else:
            parts = identifier.split(".")
            if len(parts) == 1:
                name, stack = parts[0], self._self.stack
            elif len(parts) == 2:
                name, stack = parts
            else:
                raise InvalidServiceIdentifier(identifier)

        service = self._services_by_id.get((_fold(name), _fold(stack)))
        if service is None:
            searched = f"{name}.{stack}"
            raise EntityNotFound("service", searched)
        return service

    def get_containers(self, *selectors: str) -> list[Container]:
        """Return containers matching all '@key=value' selectors.

        Without selectors every container is returned.
        """
        if not selectors:
            return list(self._containers)
        selector = parse_label_selectors("containers", selectors)
        return filter_containers(self._containers, selector.labels)

    def get_hosts(self, *selectors: str) -> list[Host]:
        """Return hosts matching all '@key=value' selectors.

        Without selectors every host is returned.
        """
        if not selectors:
            return list(self._hosts)
        selector = parse_label_selectors("hosts", selectors)
        return filter_hosts(self._hosts, selector.labels)

    def get_services(self, *selectors: str) -> list[Service]:
        """Return services matching an optional '.stack' and all '@key=value' selectors.

        Without selectors every service is returned.
        """
        if not selectors:
            return list(self._services)
        selector = parse_service_selectors(selectors)
        return filter_services(self._services, selector)

    def template_functions(self) -> dict[str, Callable[..., Any]]:
        """Return the lookup methods keyed by the names templates call them by."""
        return {
            "container": self.get_container,
            "host": self.get_host,
            "service": self.get_service,
            "containers": self.get_containers,
            "hosts": self.get_hosts,
            "services": self.get_services,
        }
