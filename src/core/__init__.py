"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Error values and error codes carried inside ``Failure``
- Settings

The core module has NO dependencies on other application layers.
"""

from src.core.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success

__all__ = [
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]
