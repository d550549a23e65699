"""Ignore policies: which selectors and class tokens are exempt from reporting.

The policy is chosen once from the ``ignore_selectors`` option:

    - a callable            -> PredicateIgnorePolicy (its result is authoritative)
    - a sequence of patterns -> PatternIgnorePolicy (literal substrings or regexes)
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import Protocol, Union

__all__ = [
    "IgnorePattern",
    "IgnoreSelectors",
    "IgnorePolicy",
    "PatternIgnorePolicy",
    "PredicateIgnorePolicy",
    "build_ignore_policy",
]

IgnorePattern = Union[str, re.Pattern[str]]
IgnoreSelectors = Union[Iterable[IgnorePattern], Callable[[str], bool], None]


class IgnorePolicy(Protocol):
    """Decides whether a full selector or a class token is exempt."""

    def ignores(self, candidate: str) -> bool: ...

    def __call__(self, candidate: str) -> bool: ...


class PatternIgnorePolicy:
    """Ignore candidates matched by any configured pattern.

    A compiled regex ignores a candidate when it matches anywhere in it; a
    plain string ignores a candidate that contains it.
    """

    def __init__(self, patterns: Iterable[IgnorePattern] = ()) -> None:
        self._patterns: tuple[IgnorePattern, ...] = tuple(patterns)

    @property
    def patterns(self) -> tuple[IgnorePattern, ...]:
        return self._patterns

    def ignores(self, candidate: str) -> bool:
        for pattern in self._patterns:
            if isinstance(pattern, re.Pattern):
                if pattern.search(candidate):
                    return True
            elif pattern in candidate:
                return True
        return False

    __call__ = ignores


class PredicateIgnorePolicy:
    """Delegate the decision to a caller-supplied predicate."""

    def __init__(self, predicate: Callable[[str], bool]) -> None:
        self._predicate = predicate

    def ignores(self, candidate: str) -> bool:
        return bool(self._predicate(candidate))

    __call__ = ignores


def build_ignore_policy(ignore_selectors: IgnoreSelectors = None) -> IgnorePolicy:
    """Select the policy variant for *ignore_selectors*."""
    if ignore_selectors is None:
        return PatternIgnorePolicy()
    if callable(ignore_selectors):
        return PredicateIgnorePolicy(ignore_selectors)
    if isinstance(ignore_selectors, (str, re.Pattern)):
        # A lone pattern, not a sequence of characters.
        return PatternIgnorePolicy([ignore_selectors])
    return PatternIgnorePolicy(ignore_selectors)
