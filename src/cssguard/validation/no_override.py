"""The no-override check: flag rules that redefine immutable bundle selectors.

For each rule, at most one violation is reported:

    1. the whole selector is a catalogued simple class selector (``.m-0``,
       ``.btn:hover``) and is not ignored, otherwise
    2. the first class token of the selector that some bundle defines and
       that is not ignored (``.m-0`` in ``.card .m-0``).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from cssguard.bundles.source import BundleSource
from cssguard.config import NoOverrideOptions
from cssguard.model.diagnostic import Diagnostic, Severity
from cssguard.model.violation import Violation
from cssguard.stylesheet.model import StyleRule, Stylesheet
from cssguard.validation.ignore import IgnorePolicy, build_ignore_policy
from cssguard.validation.index import ImmutabilityIndex
from cssguard.validation.messages import format_invalid_bundles, format_rejected
from cssguard.validation.result import LintResult
from cssguard.validation.selectors import extract_class_tokens, is_simple_class_selector

__all__ = ["RULE_NAME", "INVALID_OPTION", "NoOverrideRule", "check_bundles_option"]

logger = logging.getLogger(__name__)

RULE_NAME = "no-override"
INVALID_OPTION = "invalidOption"


def _bundle_list(bundles: object) -> list[object] | None:
    if isinstance(bundles, (list, tuple)):
        return list(bundles)
    return None


def check_bundles_option(bundles: object, available: Iterable[str]) -> Diagnostic | None:
    """Return a warning if *bundles* is not a list of known bundle names."""
    names = _bundle_list(bundles)
    known = set(available)
    if names is None:
        invalid = None
    else:
        invalid = [str(b) for b in names if not isinstance(b, str) or b not in known]
        if not invalid:
            return None
    return Diagnostic(
        rule=INVALID_OPTION,
        severity=Severity.WARNING,
        message=format_invalid_bundles(invalid),
    )


class NoOverrideRule:
    """One activation of the no-override check.

    The ignore policy and the immutability index are built here, once, and
    shared read-only by every subsequent :meth:`check`. A disabled rule does
    nothing: no index, no warnings, no diagnostics.
    """

    name = RULE_NAME

    def __init__(self, options: NoOverrideOptions, source: BundleSource) -> None:
        self._options = options
        self._ignore: IgnorePolicy = build_ignore_policy(options.ignore_selectors)
        self._index = ImmutabilityIndex()
        self._option_warning: Diagnostic | None = None
        if not options.enabled:
            return
        self._option_warning = check_bundles_option(
            options.bundles, source.available_bundles()
        )
        self._index = ImmutabilityIndex.build(
            _bundle_list(options.bundles) or [], source
        )

    @property
    def enabled(self) -> bool:
        return self._options.enabled

    @property
    def index(self) -> ImmutabilityIndex:
        return self._index

    @property
    def option_warning(self) -> Diagnostic | None:
        return self._option_warning

    def match(self, rule: StyleRule) -> Violation | None:
        """Decide whether *rule* overrides an immutable selector."""
        selector = rule.selector
        owner = self._index.owner_of_selector(selector)
        if (
            owner is not None
            and is_simple_class_selector(selector)
            and not self._ignore(selector)
        ):
            return Violation(rule=rule, matched_selector=selector, bundle=owner)

        for token in extract_class_tokens(selector):
            owner = self._index.owner_of_class(token)
            if owner is not None and not self._ignore(token):
                return Violation(rule=rule, matched_selector=token, bundle=owner)
        return None

    def violations(self, rules: Iterable[StyleRule]) -> Iterator[Violation]:
        if not self.enabled:
            return
        for rule in rules:
            violation = self.match(rule)
            if violation is not None:
                yield violation

    def check(self, rules: Iterable[StyleRule], result: LintResult) -> LintResult:
        """Report every violation in *rules* (document order) into *result*."""
        if not self.enabled:
            return result
        if self._option_warning is not None:
            result.warn(self._option_warning.rule, self._option_warning.message)
        for violation in self.violations(rules):
            result.report(self.name, format_rejected(violation), violation.rule)
        return result

    def run(self, stylesheet: Stylesheet) -> LintResult:
        result = self.check(stylesheet.rules, LintResult(path=stylesheet.path))
        logger.info(
            "%s: %d violation(s), %d warning(s)",
            stylesheet.path or "<string>",
            len(result.diagnostics),
            len(result.warnings),
        )
        return result
