"""
Utility modules for the indentation linter.
"""

from indentlint.utils.logging import (
    get_logger,
    setup_logging,
    log_diagnostic,
    log_check_summary,
    log_error_with_context,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "log_diagnostic",
    "log_check_summary",
    "log_error_with_context",
]
