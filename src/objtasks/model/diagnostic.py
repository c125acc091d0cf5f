"""Diagnostic model: structured findings produced by selector rules."""

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
    """A single finding about a selector's fragment sequence.

    Attributes:
        rule: Identifier for the rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        position: Index of the offending fragment, if applicable.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    position: int | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.position is not None:
            location = f" [fragment={self.position}]"
        return f"{self.severity.value}{location}: {self.message}"
