"""Unit tests for product command handlers.

Tests CreateProduct, UpdateProduct and DeleteProduct handlers with a
mocked repository.

Reference:
    - src/application/commands/handlers/create_product_handler.py
    - src/application/commands/handlers/update_product_handler.py
    - src/application/commands/handlers/delete_product_handler.py
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.create_product_handler import (
    CreateProductHandler,
)
from src.application.commands.handlers.delete_product_handler import (
    DeleteProductHandler,
)
from src.application.commands.handlers.update_product_handler import (
    UpdateProductHandler,
)
from src.application.commands.product_commands import (
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
)
from src.application.cqrs.cancellation import CancellationToken
from src.application.mapping import Mapper
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, NotFoundError
from src.core.result import Failure, Success
from src.domain.entities.product import Product
from src.domain.protocols.product_repository import ProductRepository
from tests.conftest import create_product


@pytest.fixture
def mock_product_repo() -> AsyncMock:
    """Mock ProductRepository."""
    return AsyncMock(spec=ProductRepository)


def _not_found(product_id) -> Failure:
    return Failure(
        error=NotFoundError(
            code=ErrorCode.NOT_FOUND,
            message="Product not found",
            resource_type="Product",
            resource_id=str(product_id),
        )
    )


# ============================================================================
# CreateProduct
# ============================================================================


@pytest.mark.unit
class TestCreateProductHandler:
    """CreateProduct command handler."""

    @pytest.fixture
    def handler(
        self, mock_product_repo: AsyncMock, mapper: Mapper, mock_logger: MagicMock
    ) -> CreateProductHandler:
        return CreateProductHandler(
            product_repo=mock_product_repo, mapper=mapper, logger=mock_logger
        )

    async def test_create_persists_new_product(
        self, handler: CreateProductHandler, mock_product_repo: AsyncMock
    ) -> None:
        mock_product_repo.add.side_effect = lambda product: Success(value=product)

        response = await handler.handle(
            CreateProduct(name="Laptop", quality=10, quantity=149)
        )

        assert response.success is True
        assert response.value.name == "Laptop"
        assert response.value.quality == 10
        assert response.value.quantity == 149
        stored = mock_product_repo.add.await_args.args[0]
        assert isinstance(stored, Product)
        assert stored.id == response.value.id

    async def test_create_conflict(
        self, handler: CreateProductHandler, mock_product_repo: AsyncMock
    ) -> None:
        mock_product_repo.add.return_value = Failure(
            error=ConflictError(
                code=ErrorCode.CONFLICT,
                message="Product already exists",
                resource_type="Product",
                conflicting_field="id",
            )
        )

        response = await handler.handle(
            CreateProduct(name="Laptop", quality=10, quantity=149)
        )

        assert response.success is False
        assert response.error_code == ErrorCode.CONFLICT

    async def test_create_cancelled_never_writes(
        self, handler: CreateProductHandler, mock_product_repo: AsyncMock
    ) -> None:
        token = CancellationToken()
        token.cancel()

        response = await handler.handle(
            CreateProduct(name="Laptop", quality=10, quantity=149), token
        )

        assert response.error_code == ErrorCode.CANCELLED
        mock_product_repo.add.assert_not_awaited()


# ============================================================================
# UpdateProduct
# ============================================================================


@pytest.mark.unit
class TestUpdateProductHandler:
    """UpdateProduct command handler."""

    @pytest.fixture
    def handler(
        self, mock_product_repo: AsyncMock, mapper: Mapper, mock_logger: MagicMock
    ) -> UpdateProductHandler:
        return UpdateProductHandler(
            product_repo=mock_product_repo, mapper=mapper, logger=mock_logger
        )

    async def test_update_changes_mutable_fields_only(
        self, handler: UpdateProductHandler, mock_product_repo: AsyncMock
    ) -> None:
        existing = create_product("Laptop", 10, 149)
        mock_product_repo.get_by_id.return_value = Success(value=existing)
        mock_product_repo.update.side_effect = lambda product: Success(value=product)

        response = await handler.handle(
            UpdateProduct(
                product_id=existing.id, name="Gaming Laptop", quality=9, quantity=10
            )
        )

        assert response.success is True
        assert response.value.id == existing.id
        assert response.value.name == "Gaming Laptop"
        assert response.value.quality == 9
        assert response.value.quantity == 10
        assert response.value.create_date == existing.create_date

    async def test_update_missing_product(
        self, handler: UpdateProductHandler, mock_product_repo: AsyncMock
    ) -> None:
        product_id = uuid7()
        mock_product_repo.get_by_id.return_value = _not_found(product_id)

        response = await handler.handle(
            UpdateProduct(product_id=product_id, name="X", quality=1, quantity=1)
        )

        assert response.success is False
        assert response.error_code == ErrorCode.NOT_FOUND
        mock_product_repo.update.assert_not_awaited()


# ============================================================================
# DeleteProduct
# ============================================================================


@pytest.mark.unit
class TestDeleteProductHandler:
    """DeleteProduct command handler."""

    @pytest.fixture
    def handler(
        self, mock_product_repo: AsyncMock, mock_logger: MagicMock
    ) -> DeleteProductHandler:
        return DeleteProductHandler(product_repo=mock_product_repo, logger=mock_logger)

    async def test_delete_returns_deleted_id(
        self, handler: DeleteProductHandler, mock_product_repo: AsyncMock
    ) -> None:
        product_id = uuid7()
        mock_product_repo.delete.return_value = Success(value=product_id)

        response = await handler.handle(DeleteProduct(product_id=product_id))

        assert response.success is True
        assert response.value == product_id

    async def test_delete_missing_product(
        self, handler: DeleteProductHandler, mock_product_repo: AsyncMock
    ) -> None:
        product_id = uuid7()
        mock_product_repo.delete.return_value = _not_found(product_id)

        response = await handler.handle(DeleteProduct(product_id=product_id))

        assert response.success is False
        assert response.value is None
        assert response.error_code == ErrorCode.NOT_FOUND
