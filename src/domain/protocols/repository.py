"""Generic repository protocol for entity persistence.

Port (interface) for hexagonal architecture. Every operation returns a
``Result``: expected failures (missing identifier, duplicate identifier,
storage outage) come back as ``Failure`` values and never escape as
exceptions.

Failure vocabulary:
    NotFoundError: identifier absent in storage
    ConflictError: identifier already taken (add)
    StorageError: backend unavailable or operation rejected

Reference:
    Implementations live in src.infrastructure.persistence.
"""

from typing import Protocol, TypeVar

from src.core.errors import ConflictError, DomainError, NotFoundError
from src.core.result import Result

TEntity = TypeVar("TEntity")
TId = TypeVar("TId")


class Repository(Protocol[TEntity, TId]):
    """Repository protocol (port) over an entity type.

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        get_by_id: Retrieve entity by identifier
        get_all: Retrieve a slice of entities in stable order
        count: Count stored entities
        add: Insert a new entity
        update: Replace the mutable fields of a stored entity
        delete: Remove entity by identifier
    """

    async def get_by_id(
        self, entity_id: TId
    ) -> Result[TEntity, NotFoundError | DomainError]:
        """Find entity by identifier.

        Args:
            entity_id: Unique identifier.

        Returns:
            Success(entity) if found.
            Failure(NotFoundError) if absent, Failure(StorageError) on backend failure.
        """
        ...

    async def get_all(
        self, offset: int = 0, limit: int | None = None
    ) -> Result[list[TEntity], DomainError]:
        """List entities ordered by creation date, then identifier.

        Args:
            offset: Number of entities to skip.
            limit: Maximum number of entities to return (None = all).

        Returns:
            Success(list) (possibly empty) or Failure(StorageError).
        """
        ...

    async def count(self) -> Result[int, DomainError]:
        """Count stored entities.

        Returns:
            Success(total) or Failure(StorageError).
        """
        ...

    async def add(
        self, entity: TEntity
    ) -> Result[TEntity, ConflictError | DomainError]:
        """Insert a new entity.

        Args:
            entity: Entity to persist.

        Returns:
            Success(entity) as stored.
            Failure(ConflictError) if the identifier exists, Failure(StorageError)
            on backend failure.
        """
        ...

    async def update(
        self, entity: TEntity
    ) -> Result[TEntity, NotFoundError | DomainError]:
        """Update mutable fields of a stored entity.

        Args:
            entity: Entity carrying new values.

        Returns:
            Success(entity) as stored.
            Failure(NotFoundError) if absent, Failure(StorageError) on backend failure.
        """
        ...

    async def delete(self, entity_id: TId) -> Result[TId, NotFoundError | DomainError]:
        """Remove entity by identifier.

        Args:
            entity_id: Unique identifier.

        Returns:
            Success(entity_id) if removed.
            Failure(NotFoundError) if absent, Failure(StorageError) on backend failure.
        """
        ...
