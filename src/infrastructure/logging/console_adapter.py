"""Console logging adapter.

Writes structured logs to stdout using structlog.
- Development: human-readable console renderer with colors
- Testing/production: JSON renderer for machine parsing

The adapter does NOT inherit from LoggerProtocol (PEP 544 structural
subtyping). Any object with the same call signatures is compatible.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def configure_structlog(*, use_json: bool = False, level: str = "INFO") -> None:
    """Configure the process-wide structlog pipeline.

    Args:
        use_json: JSON output when True, human-readable console output when False.
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping()[level.upper()]
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,
    )


class ConsoleAdapter:
    """Console logger implementing LoggerProtocol.

    Args:
        use_json: JSON output when True, human-readable when False.
        level: Minimum level name.
        name: Logger name bound to every record.
    """

    def __init__(
        self, *, use_json: bool = False, level: str = "INFO", name: str = "catalog"
    ) -> None:
        """Initialize the console adapter.

        Args:
            use_json: JSON output when True, human-readable when False.
            level: Minimum level name.
            name: Logger name bound to every record.
        """
        configure_structlog(use_json=use_json, level=level)
        self._logger = structlog.get_logger().bind(logger=name)

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug message."""
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info message."""
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning message."""
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error message with optional exception details.

        Args:
            message: Message text.
            error: Optional exception instance.
            **context: Structured key-value context.
        """
        self._logger.error(message, **_with_error(error, context))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical message with optional exception details.

        Args:
            message: Message text.
            error: Optional exception instance.
            **context: Structured key-value context.
        """
        self._logger.critical(message, **_with_error(error, context))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return new adapter with bound context.

        Args:
            **context: Context to bind to all subsequent logs.

        Returns:
            ConsoleAdapter: New adapter instance with bound context.
        """
        bound_adapter = ConsoleAdapter.__new__(ConsoleAdapter)
        bound_adapter._logger = self._logger.bind(**context)
        return bound_adapter


def _with_error(error: Exception | None, context: dict[str, Any]) -> dict[str, Any]:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context
