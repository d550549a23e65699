"""Violation model: the outcome of matching one rule against the index."""

from __future__ import annotations

from dataclasses import dataclass

from cssguard.stylesheet.model import StyleRule


@dataclass(frozen=True)
class Violation:
    """A rule that overrides an immutable selector.

    ``matched_selector`` is either the rule's whole selector or the class token
    inside it that triggered the match. ``bundle`` is the owning bundle, if known.
    """

    rule: StyleRule
    matched_selector: str
    bundle: str | None = None

    @property
    def is_whole_selector(self) -> bool:
        return self.matched_selector == self.rule.selector
