"""Infrastructure layer error types.

Infrastructure errors represent failures of the storage backend.

Architecture:
- Repositories catch backend exceptions and map them to error values
- Infrastructure errors inherit from DomainError (not Exception)
- Uses InfrastructureErrorCode for internal error tracking
- Always carries domain ErrorCode.STORAGE_FAILURE toward handlers
- Used with Result types for error propagation
"""

from dataclasses import dataclass

from src.core.errors import DomainError
from src.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class StorageError(DomainError):
    """Base storage failure.

    Attributes:
        code: Domain ErrorCode (STORAGE_FAILURE).
        message: Human-readable message.
        infrastructure_code: Original infrastructure error code.
        details: Additional context.
    """

    infrastructure_code: InfrastructureErrorCode | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class DatabaseError(StorageError):
    """Database-specific errors.

    Wraps SQLAlchemy exceptions and provides consistent error handling.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        infrastructure_code: Database-specific error code.
        details: Additional context (operation, original error).
    """
