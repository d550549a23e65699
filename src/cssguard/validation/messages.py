"""Message formatting for no-override violations."""

from __future__ import annotations

from cssguard.model.violation import Violation

__all__ = ["format_rejected", "format_invalid_bundles"]


def format_rejected(violation: Violation) -> str:
    """Describe *violation*, naming the owning bundle when known.

    Whole-selector match:  ".m-0" should not be overridden (found in utilities).
    Class-token match:     ".m-0" should not be overridden in ".card .m-0" (found in utilities).
    """
    suffix = f" (found in {violation.bundle})" if violation.bundle else ""
    selector = violation.rule.selector
    if violation.matched_selector != selector:
        return (
            f'"{violation.matched_selector}" should not be overridden '
            f'in "{selector}"{suffix}.'
        )
    return f'"{selector}" should not be overridden{suffix}.'


def format_invalid_bundles(invalid: list[str] | None) -> str:
    """Option warning text; ``None`` means the option was not a list at all."""
    got = "(not a list)" if invalid is None else ", ".join(f'"{b}"' for b in invalid)
    return f'The "bundles" option must be a list of valid bundles; got: {got}'
