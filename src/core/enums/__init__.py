"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from src.core.enums import ErrorCode, Environment, StorageBackend
"""

from src.core.enums.environment import Environment
from src.core.enums.error_code import ErrorCode
from src.core.enums.storage_backend import StorageBackend

__all__ = ["ErrorCode", "Environment", "StorageBackend"]
