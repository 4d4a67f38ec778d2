"""Infrastructure errors package.

Usage:
    from src.infrastructure.errors import DatabaseError, StorageError
"""

from src.infrastructure.errors.infrastructure_error import DatabaseError, StorageError

__all__ = [
    "StorageError",
    "DatabaseError",
]
