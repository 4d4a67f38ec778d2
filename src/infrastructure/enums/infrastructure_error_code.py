"""Infrastructure-specific error codes.

Internal codes for tracking storage failures. Errors carrying them still
use the domain ``ErrorCode`` (STORAGE_FAILURE) when flowing to handlers.
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Infrastructure-specific error codes."""

    # Database errors
    DATABASE_CONNECTION_FAILED = "database_connection_failed"
    DATABASE_TIMEOUT = "database_timeout"
    DATABASE_CONSTRAINT_VIOLATION = "database_constraint_violation"
    DATABASE_DATA_ERROR = "database_data_error"
    DATABASE_ERROR = "database_error"

    # In-memory store errors
    STORE_UNAVAILABLE = "store_unavailable"
