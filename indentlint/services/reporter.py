"""
Diagnostic reporting sink.

Rules report violations through any object implementing ``Reporter``.
``DiagnosticCollector`` keeps them in report order as ``Diagnostic`` models.
"""

from typing import List, Optional, Protocol

from indentlint.models import Diagnostic, DiagnosticSeverity
from indentlint.utils.logging import ContextLoggerAdapter, get_logger, log_diagnostic


class Reporter(Protocol):
    """Sink for line/column tagged rule violations."""

    def report(self, line: int, column: int, category: str, message: str) -> None:
        ...


class DiagnosticCollector:
    """Reporter that collects diagnostics in memory."""

    def __init__(
        self,
        severity: DiagnosticSeverity = DiagnosticSeverity.ERROR,
        logger: Optional[ContextLoggerAdapter] = None
    ):
        self.severity = severity
        self.diagnostics: List[Diagnostic] = []
        self._logger = logger or get_logger(__name__)

    def report(self, line: int, column: int, category: str, message: str) -> None:
        self.diagnostics.append(Diagnostic(
            line=line,
            column=column,
            category=category,
            message=message,
            severity=self.severity,
        ))
        log_diagnostic(self._logger, line, column, category, message)

    @property
    def count(self) -> int:
        return len(self.diagnostics)

    def lines(self) -> List[int]:
        """Lines that received at least one diagnostic, in report order."""
        seen: List[int] = []
        for diagnostic in self.diagnostics:
            if diagnostic.line not in seen:
                seen.append(diagnostic.line)
        return seen
