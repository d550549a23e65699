"""Diagnostic model: structured lint messages for stylesheet rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single lint finding about a stylesheet.

    Attributes:
        rule: Identifier for the lint rule (or option check) that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        selector: The selector of the offending rule, if applicable.
        line: 1-based line of the offending rule, if known.
        column: 1-based column of the offending rule, if known.
        path: The stylesheet file, if known.
    """

    rule: str
    severity: Severity
    message: str
    selector: str | None = None
    line: int | None = None
    column: int | None = None
    path: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        parts: list[str] = []
        if self.path:
            parts.append(self.path)
        if self.line is not None:
            parts.extend([str(self.line), str(self.column or 1)])
        prefix = ":".join(parts) + ": " if parts else ""
        return f"{prefix}{self.severity.value}: {self.message} [{self.rule}]"
