"""Error types raised by context lookups.

Every error carries the structured fields callers need to branch on,
so nobody has to parse the message text.
"""

from __future__ import annotations


class ContextError(Exception):
    """Base class for all lookup and selector errors."""


class EntityNotFound(ContextError, LookupError):
    """Raised when a single-entity lookup finds no match."""

    def __init__(self, kind: str, identifier: str) -> None:
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"({kind}) could not find {kind} by identifier: {identifier!r}")


class InvalidServiceIdentifier(ContextError, ValueError):
    """Raised when a service identifier has more than one dot."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"(service) invalid service identifier {identifier!r}")


class SelectorError(ContextError, ValueError):
    """Base class for rejected selector tokens."""

    reason = "invalid selector"

    def __init__(self, kind: str, token: str) -> None:
        self.kind = kind
        self.token = token
        super().__init__(f"({kind}) {self.reason} {token!r}")


class InvalidSelectorArgument(SelectorError):
    """Token does not start with a prefix accepted for this lookup."""

    reason = "invalid argument"


class MalformedLabelSelector(SelectorError):
    """Label token is not of the form @key=value."""

    reason = "malformed label selector"


class MultipleStackSelectors(SelectorError):
    """More than one .stack token in a single services lookup."""

    reason = "invalid use of multiple stack selectors"
