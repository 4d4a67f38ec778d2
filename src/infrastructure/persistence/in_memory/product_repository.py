"""In-memory product repository.

Process-local implementation of the ProductRepository protocol, used when
``storage_backend`` is ``memory`` and in tests. Writes are serialized by an
``asyncio.Lock``, so a write is visible to every read issued after it
completes.

Stored products are frozen dataclasses, so handing them out does not let
callers mutate storage; ``update`` stores a fresh copy carrying the
original ``create_date``.
"""

import asyncio
from dataclasses import replace
from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import ConflictError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.product import Product
from src.infrastructure.errors import StorageError

PRODUCT_NOT_FOUND = "Product not found"
PRODUCT_ALREADY_EXISTS = "Product already exists"


class InMemoryProductRepository:
    """Dictionary-backed ProductRepository.

    Note: Does NOT inherit from ProductRepository (uses structural typing).

    Attributes:
        _products: Product ID -> stored product.
        _lock: Serializes writes.
    """

    def __init__(self, products: list[Product] | None = None) -> None:
        """Initialize repository, optionally pre-populated.

        Args:
            products: Initial products (IDs must be unique).
        """
        self._products: dict[UUID, Product] = {}
        self._lock = asyncio.Lock()
        for product in products or []:
            self._products[product.id] = product

    async def get_by_id(
        self, entity_id: UUID
    ) -> Result[Product, NotFoundError | StorageError]:
        product = self._products.get(entity_id)
        if product is None:
            return Failure(error=self._not_found(entity_id))
        return Success(value=product)

    async def get_all(
        self, offset: int = 0, limit: int | None = None
    ) -> Result[list[Product], StorageError]:
        ordered = sorted(self._products.values(), key=lambda p: (p.create_date, p.id))
        end = None if limit is None else offset + limit
        return Success(value=ordered[offset:end])

    async def count(self) -> Result[int, StorageError]:
        return Success(value=len(self._products))

    async def add(
        self, entity: Product
    ) -> Result[Product, ConflictError | StorageError]:
        async with self._lock:
            if entity.id in self._products:
                return Failure(
                    error=ConflictError(
                        code=ErrorCode.CONFLICT,
                        message=PRODUCT_ALREADY_EXISTS,
                        resource_type="Product",
                        conflicting_field="id",
                        details={"product_id": str(entity.id)},
                    )
                )
            self._products[entity.id] = entity
        return Success(value=entity)

    async def update(
        self, entity: Product
    ) -> Result[Product, NotFoundError | StorageError]:
        async with self._lock:
            stored = self._products.get(entity.id)
            if stored is None:
                return Failure(error=self._not_found(entity.id))
            updated = replace(
                stored,
                name=entity.name,
                quality=entity.quality,
                quantity=entity.quantity,
            )
            self._products[entity.id] = updated
        return Success(value=updated)

    async def delete(
        self, entity_id: UUID
    ) -> Result[UUID, NotFoundError | StorageError]:
        async with self._lock:
            if self._products.pop(entity_id, None) is None:
                return Failure(error=self._not_found(entity_id))
        return Success(value=entity_id)

    @staticmethod
    def _not_found(product_id: UUID) -> NotFoundError:
        return NotFoundError(
            code=ErrorCode.NOT_FOUND,
            message=PRODUCT_NOT_FOUND,
            resource_type="Product",
            resource_id=str(product_id),
        )
