"""No-override validation: immutable selector index, matcher and linter."""

from cssguard.validation.ignore import (
    PatternIgnorePolicy,
    PredicateIgnorePolicy,
    build_ignore_policy,
)
from cssguard.validation.index import ImmutabilityIndex
from cssguard.validation.linter import LintError, lint, lint_or_raise
from cssguard.validation.messages import format_rejected
from cssguard.validation.no_override import RULE_NAME, NoOverrideRule, check_bundles_option
from cssguard.validation.result import LintResult
from cssguard.validation.selectors import extract_class_tokens, is_simple_class_selector

__all__ = [
    "RULE_NAME",
    "NoOverrideRule",
    "ImmutabilityIndex",
    "LintResult",
    "LintError",
    "lint",
    "lint_or_raise",
    "check_bundles_option",
    "format_rejected",
    "extract_class_tokens",
    "is_simple_class_selector",
    "build_ignore_policy",
    "PatternIgnorePolicy",
    "PredicateIgnorePolicy",
]
