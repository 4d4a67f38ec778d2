"""Error rendering for the v1 API.

Usage:
    from src.presentation.routers.api.v1.errors import register_exception_handlers
"""

from src.presentation.routers.api.v1.errors.exception_handlers import (
    register_exception_handlers,
    validation_exception_handler,
)

__all__ = [
    "register_exception_handlers",
    "validation_exception_handler",
]
