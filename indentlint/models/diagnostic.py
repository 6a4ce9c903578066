"""Diagnostic data models."""

from enum import Enum

from pydantic import BaseModel


class DiagnosticSeverity(str, Enum):
    """Severity level of a reported diagnostic."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class Diagnostic(BaseModel):
    """Line/column tagged rule violation."""

    line: int
    column: int
    category: str
    message: str
    severity: DiagnosticSeverity = DiagnosticSeverity.ERROR


class IndentCorrection(BaseModel):
    """First detected misindentation of a node: where it is and where it belongs."""

    observed: int
    expected: int

    def reproject(self, column: int) -> int:
        return column - self.observed + self.expected
