"""Product repository implementation.

SQLAlchemy implementation of the ProductRepository protocol.
Maps between Product domain entity and ProductModel database model.

Architecture:
- Implements ProductRepository without inheritance (structural typing)
- Maps SQLAlchemy exceptions to DatabaseError (STORAGE_FAILURE)
- Returns Result types for all operations
"""

from datetime import UTC
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import (
    DataError,
    IntegrityError,
    OperationalError,
    SQLAlchemyError,
    TimeoutError as PoolTimeoutError,
)
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.core.errors import ConflictError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.product import Product
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import DatabaseError
from src.infrastructure.persistence.models.product import ProductModel

PRODUCT_NOT_FOUND = "Product not found"
PRODUCT_ALREADY_EXISTS = "Product already exists"


def _infrastructure_code(error: SQLAlchemyError) -> InfrastructureErrorCode:
    match error:
        case PoolTimeoutError():
            return InfrastructureErrorCode.DATABASE_TIMEOUT
        case OperationalError():
            return InfrastructureErrorCode.DATABASE_CONNECTION_FAILED
        case IntegrityError():
            return InfrastructureErrorCode.DATABASE_CONSTRAINT_VIOLATION
        case DataError():
            return InfrastructureErrorCode.DATABASE_DATA_ERROR
        case _:
            return InfrastructureErrorCode.DATABASE_ERROR


class SQLAlchemyProductRepository:
    """SQLAlchemy implementation of ProductRepository protocol.

    Handles persistence of Product entities using SQLAlchemy async sessions.
    Writes are flushed, not committed: the session owner (``Database.get_session``)
    commits when the request completes.

    **Implementation Notes**:
    - Maps between domain entity (dataclass) and database model (SQLAlchemy)
    - Uses select() for queries (SQLAlchemy 2.0 style)
    - Rolls back the session after a failed statement
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def get_by_id(
        self, entity_id: UUID
    ) -> Result[Product, NotFoundError | DatabaseError]:
        """Find product by ID.

        Args:
            entity_id: Unique product identifier.

        Returns:
            Success(Product) if found, Failure(NotFoundError) otherwise.
        """
        try:
            model = await self._session.get(ProductModel, entity_id)
        except SQLAlchemyError as e:
            return await self._storage_failure("get_by_id", e)

        if model is None:
            return Failure(error=self._not_found(entity_id))
        return Success(value=self._to_entity(model))

    async def get_all(
        self, offset: int = 0, limit: int | None = None
    ) -> Result[list[Product], DatabaseError]:
        """List products ordered by creation date, then ID.

        Args:
            offset: Number of products to skip.
            limit: Maximum number of products to return (None = all).

        Returns:
            Success(list[Product]) (possibly empty).
        """
        stmt = (
            select(ProductModel)
            .order_by(ProductModel.create_date, ProductModel.id)
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)

        try:
            result = await self._session.execute(stmt)
            models = result.scalars().all()
        except SQLAlchemyError as e:
            return await self._storage_failure("get_all", e)

        return Success(value=[self._to_entity(m) for m in models])

    async def count(self) -> Result[int, DatabaseError]:
        """Count stored products.

        Returns:
            Success(total).
        """
        stmt = select(func.count()).select_from(ProductModel)
        try:
            result = await self._session.execute(stmt)
            total = result.scalar_one()
        except SQLAlchemyError as e:
            return await self._storage_failure("count", e)

        return Success(value=int(total))

    async def add(
        self, entity: Product
    ) -> Result[Product, ConflictError | DatabaseError]:
        """Insert a new product.

        Args:
            entity: Product to persist.

        Returns:
            Success(Product) as stored, Failure(ConflictError) if the ID is taken.
        """
        try:
            existing = await self._session.get(ProductModel, entity.id)
            if existing is not None:
                return Failure(error=self._conflict(entity.id))

            self._session.add(self._to_model(entity))
            await self._session.flush()
        except IntegrityError:
            await self._session.rollback()
            return Failure(error=self._conflict(entity.id))
        except SQLAlchemyError as e:
            return await self._storage_failure("add", e)

        return Success(value=entity)

    async def update(
        self, entity: Product
    ) -> Result[Product, NotFoundError | DatabaseError]:
        """Update name, quality and quantity of a stored product.

        ``create_date`` is never written.

        Args:
            entity: Product carrying the new values.

        Returns:
            Success(Product) as stored, Failure(NotFoundError) if absent.
        """
        try:
            model = await self._session.get(ProductModel, entity.id)
            if model is None:
                return Failure(error=self._not_found(entity.id))

            model.name = entity.name
            model.quality = entity.quality
            model.quantity = entity.quantity
            await self._session.flush()
        except SQLAlchemyError as e:
            return await self._storage_failure("update", e)

        return Success(value=self._to_entity(model))

    async def delete(self, entity_id: UUID) -> Result[UUID, NotFoundError | DatabaseError]:
        """Delete product by ID.

        Args:
            entity_id: Unique product identifier.

        Returns:
            Success(entity_id) if removed, Failure(NotFoundError) if absent.
        """
        try:
            model = await self._session.get(ProductModel, entity_id)
            if model is None:
                return Failure(error=self._not_found(entity_id))

            await self._session.delete(model)
            await self._session.flush()
        except SQLAlchemyError as e:
            return await self._storage_failure("delete", e)

        return Success(value=entity_id)

    async def _storage_failure(
        self, operation: str, error: SQLAlchemyError
    ) -> Failure[DatabaseError]:
        await self._session.rollback()
        return Failure(
            error=DatabaseError(
                code=ErrorCode.STORAGE_FAILURE,
                infrastructure_code=_infrastructure_code(error),
                message=f"Database operation '{operation}' failed",
                details={"operation": operation, "error": str(error)},
            )
        )

    @staticmethod
    def _not_found(product_id: UUID) -> NotFoundError:
        return NotFoundError(
            code=ErrorCode.NOT_FOUND,
            message=PRODUCT_NOT_FOUND,
            resource_type="Product",
            resource_id=str(product_id),
        )

    @staticmethod
    def _conflict(product_id: UUID) -> ConflictError:
        return ConflictError(
            code=ErrorCode.CONFLICT,
            message=PRODUCT_ALREADY_EXISTS,
            resource_type="Product",
            conflicting_field="id",
            details={"product_id": str(product_id)},
        )

    def _to_entity(self, model: ProductModel) -> Product:
        """Convert database model to domain entity.

        SQLite returns naive datetimes; they are stored as UTC.

        Args:
            model: SQLAlchemy ProductModel instance.

        Returns:
            Product domain entity.
        """
        create_date = model.create_date
        if create_date.tzinfo is None:
            create_date = create_date.replace(tzinfo=UTC)

        return Product(
            id=model.id,
            name=model.name,
            quality=model.quality,
            quantity=model.quantity,
            create_date=create_date,
        )

    def _to_model(self, entity: Product) -> ProductModel:
        """Convert domain entity to database model.

        Args:
            entity: Product domain entity.

        Returns:
            ProductModel instance.
        """
        return ProductModel(
            id=entity.id,
            name=entity.name,
            quality=entity.quality,
            quantity=entity.quantity,
            create_date=entity.create_date,
        )
