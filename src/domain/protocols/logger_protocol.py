"""Structured logging port.

Handlers log through this protocol so they never import structlog
directly. Every call is an event name plus key-value context.

Levels used by the catalog:
    - INFO: product created, updated, deleted
    - WARNING: product not found, paging rejected, request cancelled
    - ERROR: storage or mapping failure

Usage:
    logger = get_logger().bind(handler="GetProductByIdHandler")
    logger.warning("product_not_found", product_id=str(product_id))
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger interface (implemented by ConsoleAdapter)."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error event.

        Args:
            message: Event name.
            error: Exception to report as ``error_type``/``error_message``.
            **context: Structured fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger that adds ``context`` to every event.

        The receiver is left unchanged.
        """
        ...
