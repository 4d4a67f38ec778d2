"""ProductRepository protocol for product persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol (SQLAlchemy and in-memory).
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.product import Product
from src.domain.protocols.repository import Repository


class ProductRepository(Repository[Product, UUID], Protocol):
    """Product repository protocol (port).

    Specialises the generic Repository over Product entities keyed by UUID.
    Implementations don't need to inherit from this.

    Example Implementation:
        >>> class PostgresProductRepository:
        ...     async def get_by_id(self, entity_id: UUID) -> Result[Product, DomainError]:
        ...         # Database logic here
        ...         pass
    """
