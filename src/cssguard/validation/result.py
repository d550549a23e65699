"""LintResult: collects diagnostics and option warnings for one stylesheet."""

from __future__ import annotations

from dataclasses import dataclass, field

from cssguard.model.diagnostic import Diagnostic, Severity
from cssguard.stylesheet.model import StyleRule


@dataclass
class LintResult:
    """Diagnostics for one run over one stylesheet.

    Rule violations go to ``diagnostics``; configuration problems go to the
    separate ``warnings`` channel and never stop the run.
    """

    path: str | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)
    warnings: list[Diagnostic] = field(default_factory=list)

    def report(self, rule_name: str, message: str, node: StyleRule) -> Diagnostic:
        diagnostic = Diagnostic(
            rule=rule_name,
            severity=Severity.ERROR,
            message=message,
            selector=node.selector,
            line=node.line,
            column=node.column,
            path=self.path,
        )
        self.diagnostics.append(diagnostic)
        return diagnostic

    def warn(self, rule_name: str, message: str) -> Diagnostic:
        diagnostic = Diagnostic(
            rule=rule_name,
            severity=Severity.WARNING,
            message=message,
            path=self.path,
        )
        self.warnings.append(diagnostic)
        return diagnostic

    @property
    def has_errors(self) -> bool:
        return any(d.is_error for d in self.diagnostics)
