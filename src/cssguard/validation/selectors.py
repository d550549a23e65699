"""Selector-string analysis: class token extraction and simple class selectors.

Both patterns are ASCII-only: a class token is a dot followed by letters,
digits, hyphens or underscores.
"""

from __future__ import annotations

import re

__all__ = [
    "CLASS_PATTERN",
    "SIMPLE_CLASS_PATTERN",
    "extract_class_tokens",
    "is_simple_class_selector",
]

# ".name" anywhere in a selector, regardless of combinators or position.
CLASS_PATTERN = re.compile(r"\.[-A-Za-z0-9_]+")

# Exactly one class, optionally followed by ":pseudo" or "::pseudo".
SIMPLE_CLASS_PATTERN = re.compile(r"\.[-A-Za-z0-9_]+(?::{1,2}[-A-Za-z0-9_]+)?")


def extract_class_tokens(selector: str) -> list[str]:
    """Return every class token in *selector*, left to right.

    >>> extract_class_tokens(".foo.bar > div")
    ['.foo', '.bar']
    """
    return CLASS_PATTERN.findall(selector)


def is_simple_class_selector(selector: str) -> bool:
    """True if *selector* is a single class with at most one pseudo suffix.

    ``.foo``, ``.foo:hover`` and ``.foo::before`` qualify; ``.foo .bar``,
    ``div.foo`` and ``.foo[disabled]`` do not.
    """
    return SIMPLE_CLASS_PATTERN.fullmatch(selector) is not None
