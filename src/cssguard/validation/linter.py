"""Stylesheet linter: runs the no-override check and returns its diagnostics."""

from __future__ import annotations

from cssguard.bundles.source import BundleSource
from cssguard.config import NoOverrideOptions
from cssguard.model.diagnostic import Diagnostic
from cssguard.stylesheet.model import Stylesheet
from cssguard.validation.no_override import NoOverrideRule
from cssguard.validation.result import LintResult


class LintError(Exception):
    """Raised when linting finds ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Lint failed with {len(messages)} error(s): " + "; ".join(messages)
        )


def lint(
    stylesheet: Stylesheet, options: NoOverrideOptions, source: BundleSource
) -> LintResult:
    """Activate the no-override check and run it over *stylesheet*."""
    return NoOverrideRule(options, source).run(stylesheet)


def lint_or_raise(
    stylesheet: Stylesheet, options: NoOverrideOptions, source: BundleSource
) -> LintResult:
    """Run :func:`lint`; raises :class:`LintError` if any rule is rejected.

    Returns the result (with its option warnings) when nothing is rejected.
    """
    result = lint(stylesheet, options, source)
    if result.has_errors:
        raise LintError(result.diagnostics)
    return result
