"""
Structured logging for the indentation linter.

Records are written as one JSON object per line. Loggers obtained through
``get_logger`` carry checking context (file_path, language, rule) into every
record they emit.
"""

import logging
import json
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, MutableMapping
from logging import LogRecord

CONTEXT_FIELDS = ("file_path", "language", "rule")

# Attributes every LogRecord has; anything else arrived through ``extra``.
_RECORD_ATTRIBUTES = frozenset(vars(LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Formats a record as JSON with its context fields promoted to the top level."""

    def format(self, record: LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra = {
            key: value for key, value in vars(record).items()
            if key not in _RECORD_ATTRIBUTES
        }
        for field in CONTEXT_FIELDS:
            if field in extra:
                payload[field] = extra.pop(field)
        if extra:
            payload["context"] = extra

        if record.exc_info:
            exc_type, exc, _ = record.exc_info
            payload["error"] = {
                "type": exc_type.__name__ if exc_type else None,
                "message": str(exc) if exc else None,
                "stack_trace": self.formatException(record.exc_info),
            }

        payload["source"] = f"{record.module}:{record.funcName}:{record.lineno}"
        return json.dumps(payload, default=str)


class ContextLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that adds its context fields to every record."""

    def __init__(self, logger: logging.Logger, extra: Optional[Dict[str, Any]] = None):
        super().__init__(logger, extra or {})

    def process(self, msg: str, kwargs: MutableMapping[str, Any]) -> tuple[str, MutableMapping[str, Any]]:
        kwargs["extra"] = {**kwargs.get("extra", {}), **self.extra}
        return msg, kwargs

    def with_context(self, **context: Any) -> "ContextLoggerAdapter":
        """Return a new adapter whose context is this one's plus ``context``."""
        return ContextLoggerAdapter(self.logger, {**self.extra, **context})


def setup_logging(log_level: str = "INFO") -> None:
    """
    Send all records to stdout as JSON.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    logging.getLogger("tree_sitter").setLevel(logging.WARNING)


def get_logger(name: str, **context: Any) -> ContextLoggerAdapter:
    """Context-aware logger for a module, e.g. ``get_logger(__name__, rule="indent")``."""
    return ContextLoggerAdapter(logging.getLogger(name), context)


def log_diagnostic(
    logger: logging.LoggerAdapter,
    line: int,
    column: int,
    category: str,
    message: str
) -> None:
    """
    Log a single reported rule violation.

    Args:
        logger: Logger to use
        line: 1-based line of the violation
        column: 0-based column of the violation
        category: Rule category (e.g., 'indent')
        message: Diagnostic message
    """
    logger.debug(
        f"Diagnostic at {line}:{column}: {message}",
        extra={
            "line": line,
            "column": column,
            "category": category,
        }
    )


def log_check_summary(
    logger: logging.LoggerAdapter,
    file_path: str,
    diagnostics: int,
    duration_ms: Optional[float] = None
) -> None:
    """
    Log the outcome of checking one source unit.

    Args:
        logger: Logger to use
        file_path: Path of the checked file
        diagnostics: Number of diagnostics reported
        duration_ms: Check duration in milliseconds (if available)
    """
    extra: Dict[str, Any] = {
        "file_path": file_path,
        "diagnostics": diagnostics,
    }
    if duration_ms is not None:
        extra["duration_ms"] = round(duration_ms, 2)

    logger.info(f"Checked {file_path}: {diagnostics} diagnostic(s)", extra=extra)


def log_error_with_context(
    logger: logging.LoggerAdapter,
    message: str,
    error: Exception,
    **context: Any
) -> None:
    """
    Log error with full stack trace and context.

    Args:
        logger: Logger to use
        message: Error message
        error: Exception object
        **context: Additional context fields
    """
    logger.error(
        message,
        extra=context,
        exc_info=error
    )
