"""cssguard model layer -- public type re-exports."""

from cssguard.model.diagnostic import Diagnostic, Severity
from cssguard.model.violation import Violation

__all__ = [
    "Severity",
    "Diagnostic",
    "Violation",
]
