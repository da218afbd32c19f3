"""Selector token parsing.

Collection lookups take selector tokens typed by their first character:

- ``@key=value`` selects by label (the value may be a regex).
- ``.stack`` selects services by stack (services only, at most once).

Parsing is purely syntactic. Bad tokens are rejected, never repaired.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import structlog

from tmplctx.errors import (
    InvalidSelectorArgument,
    MalformedLabelSelector,
    MultipleStackSelectors,
    SelectorError,
)
from tmplctx.labels import LabelMap

logger = structlog.get_logger()

LABEL_PREFIX = "@"
STACK_PREFIX = "."


@dataclass(frozen=True)
class Selector:
    """Structured selector: an optional stack plus required labels."""

    labels: LabelMap = field(default_factory=LabelMap)
    stack: str | None = None

    @property
    def match_all(self) -> bool:
        """Whether this selector places no restriction at all."""
        return self.stack is None and not self.labels


def _reject(error: SelectorError) -> SelectorError:
    logger.warning("selector_rejected", kind=error.kind, token=error.token, reason=error.reason)
    return error


def parse_label_token(kind: str, token: str) -> tuple[str, str]:
    """Split an ``@key=value`` token into its key and value.

    Raises:
        InvalidSelectorArgument: If the token does not start with '@'.
        MalformedLabelSelector: If the remainder is not exactly key=value
            with a non-empty key and value.
    """
    if not token.startswith(LABEL_PREFIX):
        raise _reject(InvalidSelectorArgument(kind, token))
    parts = token[len(LABEL_PREFIX):].split("=")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise _reject(MalformedLabelSelector(kind, token))
    return parts[0], parts[1]


def parse_label_selectors(kind: str, tokens: Iterable[str]) -> Selector:
    """Parse container or host selector tokens; only label tokens are accepted.

    Args:
        kind: Lookup kind used in errors ("containers" or "hosts").
        tokens: Selector tokens as passed by the caller.

    Returns:
        A Selector with no stack. A repeated key keeps the last value.
    """
    labels: dict[str, str] = {}
    for token in tokens:
        key, value = parse_label_token(kind, token)
        labels[key] = value
    return Selector(labels=LabelMap(labels))


def parse_service_selectors(tokens: Iterable[str]) -> Selector:
    """Parse services selector tokens: label tokens plus at most one stack token.

    Raises:
        InvalidSelectorArgument: For an empty token, an empty stack name, or
            an unknown prefix.
        MalformedLabelSelector: For a bad label token.
        MultipleStackSelectors: For a second stack token.
    """
    kind = "services"
    labels: dict[str, str] = {}
    stack: str | None = None
    for token in tokens:
        if token.startswith(STACK_PREFIX):
            name = token[len(STACK_PREFIX):]
            if not name:
                raise _reject(InvalidSelectorArgument(kind, token))
            if stack is not None:
                raise _reject(MultipleStackSelectors(kind, token))
            stack = name
        else:
            key, value = parse_label_token(kind, token)
            labels[key] = value
    return Selector(labels=LabelMap(labels), stack=stack)
