"""Services package: diagnostic reporting and the linting entry point."""

from indentlint.services.reporter import DiagnosticCollector, Reporter

__all__ = [
    'DiagnosticCollector',
    'Reporter',
]
