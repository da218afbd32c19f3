"""Entity filters over inventory sequences.

Each filter keeps input order and returns a new (possibly empty) list.
Filters never fail once handed a parsed selector.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from tmplctx.labels import satisfies
from tmplctx.models import Container, Host, Service
from tmplctx.selectors import Selector


def filter_containers(containers: Iterable[Container], labels: Mapping[str, str]) -> list[Container]:
    """Return containers whose labels satisfy the selector labels."""
    return [c for c in containers if satisfies(c.labels, labels)]


def filter_hosts(hosts: Iterable[Host], labels: Mapping[str, str]) -> list[Host]:
    """Return hosts whose labels satisfy the selector labels."""
    return [h for h in hosts if satisfies(h.labels, labels)]


def filter_services_by_stack(services: Iterable[Service], stack: str) -> list[Service]:
    """Return services in the given stack, compared ignoring case."""
    wanted = stack.lower()
    return [s for s in services if s.stack.lower() == wanted]


def filter_services_by_label(services: Iterable[Service], labels: Mapping[str, str]) -> list[Service]:
    """Return services whose labels satisfy the selector labels."""
    return [s for s in services if satisfies(s.labels, labels)]


def filter_services(services: Iterable[Service], selector: Selector) -> list[Service]:
    """Apply the stack filter and the label filter of a selector.

    Both restrictions must hold; either may be absent.
    """
    result = list(services)
    if selector.match_all:
        return result
    if selector.stack is not None:
        result = filter_services_by_stack(result, selector.stack)
    if selector.labels:
        result = filter_services_by_label(result, selector.labels)
    return result
