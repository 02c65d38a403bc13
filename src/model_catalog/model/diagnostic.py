"""Diagnostic model: structured validation messages for store documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"


@dataclass(frozen=True)
class Diagnostic:
    """A single validation finding about one document.

    Attributes:
        rule: Identifier for the validation rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
    """

    rule: str
    severity: Severity
    message: str

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def __str__(self) -> str:
        return self.message


@dataclass
class FileResult:
    """Validation outcome for one file, addressed relative to the store root."""

    file: str
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def errors(self) -> list[str]:
        return [d.message for d in self.diagnostics if d.is_error]

    @property
    def valid(self) -> bool:
        return not self.errors
