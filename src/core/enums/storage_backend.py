"""Storage backends selectable through configuration."""

from enum import Enum


class StorageBackend(str, Enum):
    """Persistence provider behind the product repository.

    MEMORY keeps products in a process-local dict (seeded on startup).
    DATABASE uses SQLAlchemy against ``settings.database_url``.
    """

    MEMORY = "memory"
    DATABASE = "database"
