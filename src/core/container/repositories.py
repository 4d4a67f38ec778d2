"""Repository dependency factories.

Request-scoped product repository, selected by ``settings.storage_backend``:
- memory: the shared in-memory store
- database: a SQLAlchemy repository over a fresh per-request session
"""

from typing import AsyncGenerator

from src.core.config import settings
from src.core.container.infrastructure import get_database, get_in_memory_repository
from src.core.enums import StorageBackend
from src.domain.protocols.product_repository import ProductRepository


async def get_product_repository() -> AsyncGenerator[ProductRepository, None]:
    """Get product repository (request-scoped).

    For the database backend the session commits when the request completes
    and rolls back if it raises.

    Yields:
        Repository implementing ProductRepository.

    Usage:
        # Presentation Layer (FastAPI Depends)
        @router.get("/products/{product_id}")
        async def get_product(
            repository: ProductRepository = Depends(get_product_repository),
        ):
            ...
    """
    if settings.storage_backend == StorageBackend.MEMORY:
        yield get_in_memory_repository()
        return

    from src.infrastructure.persistence.repositories import SQLAlchemyProductRepository

    async with get_database().get_session() as session:
        yield SQLAlchemyProductRepository(session=session)
