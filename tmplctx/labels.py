"""Label maps and the label selector matcher.

A selector label set is satisfied when every selector key exists on the
candidate and the candidate's value either equals the selector value
(ignoring case) or, when the selector value contains regex
metacharacters, is matched by it as a regular expression. Matching
stops at the first key that fails.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from functools import lru_cache

# A selector value without any of these is a literal, never a regex
REGEX_METACHARS = frozenset(".^$*+?{}[]\\|()")


class LabelMap(Mapping[str, str]):
    """Immutable, case-sensitive mapping of label keys to values."""

    __slots__ = ("_labels",)

    def __init__(self, labels: Mapping[str, str] | None = None) -> None:
        self._labels: dict[str, str] = dict(labels or {})

    def exists(self, key: str) -> bool:
        """Return True if the label key is present."""
        return key in self._labels

    def get_value(self, key: str) -> str:
        """Return the label value, or an empty string if the key is absent."""
        return self._labels.get(key, "")

    def __getitem__(self, key: str) -> str:
        return self._labels[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    def __hash__(self) -> int:
        return hash(frozenset(self._labels.items()))

    def __repr__(self) -> str:
        return f"LabelMap({self._labels!r})"


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str] | None:
    """Compile a selector value, returning None if it is not a valid regex."""
    try:
        return re.compile(pattern)
    except re.error:
        return None


def value_matches(candidate: str, wanted: str) -> bool:
    """Check one label value against one selector value.

    Exact comparison ignores case. Otherwise a selector value containing
    regex metacharacters is searched anywhere in the candidate value; an
    invalid regex simply does not match.
    """
    if candidate.lower() == wanted.lower():
        return True
    if REGEX_METACHARS.isdisjoint(wanted):
        return False
    rx = _compile(wanted)
    return rx is not None and rx.search(candidate) is not None


def satisfies(candidate: Mapping[str, str], selector: Mapping[str, str]) -> bool:
    """Return True if the candidate labels satisfy every selector label.

    An empty selector is satisfied by any candidate.

    Args:
        candidate: Labels of the entity being tested.
        selector: Required labels; values may be regular expressions.
    """
    for key, wanted in selector.items():
        if key not in candidate:
            return False
        if not value_matches(candidate[key], wanted):
            return False
    return True
