"""Unit tests for GetAllProductsHandler.

Tests paged listing: offset/limit computation, paging metadata, paging
validation and failure envelopes.

Reference:
    - src/application/queries/handlers/get_all_products_handler.py
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.application.mapping import Mapper
from src.application.queries.handlers.get_all_products_handler import (
    MAX_OFFSET,
    GetAllProductsHandler,
)
from src.application.queries.product_queries import GetAllProducts
from src.application.responses import PagedResponse
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.protocols.product_repository import ProductRepository
from src.infrastructure.errors import StorageError
from tests.conftest import create_product


@pytest.fixture
def mock_product_repo() -> AsyncMock:
    """Mock ProductRepository."""
    return AsyncMock(spec=ProductRepository)


@pytest.fixture
def handler(
    mock_product_repo: AsyncMock, mapper: Mapper, mock_logger: MagicMock
) -> GetAllProductsHandler:
    """GetAllProductsHandler with max page size 50."""
    return GetAllProductsHandler(
        product_repo=mock_product_repo,
        mapper=mapper,
        logger=mock_logger,
        max_page_size=50,
    )


@pytest.mark.unit
class TestGetAllProductsSuccess:
    """Paged listing success cases."""

    async def test_returns_page_with_paging_metadata(
        self, handler: GetAllProductsHandler, mock_product_repo: AsyncMock
    ) -> None:
        products = [create_product("TV", 10, 257), create_product("Desktop PC", 10, 124)]
        mock_product_repo.count.return_value = Success(value=4)
        mock_product_repo.get_all.return_value = Success(value=products)

        response = await handler.handle(GetAllProducts(page_number=2, page_size=2))

        assert isinstance(response, PagedResponse)
        assert response.success is True
        assert [dto.name for dto in response.value] == ["TV", "Desktop PC"]
        assert response.page_number == 2
        assert response.page_size == 2
        assert response.total_count == 4
        mock_product_repo.get_all.assert_awaited_once_with(offset=2, limit=2)

    async def test_first_page_uses_zero_offset(
        self, handler: GetAllProductsHandler, mock_product_repo: AsyncMock
    ) -> None:
        mock_product_repo.count.return_value = Success(value=0)
        mock_product_repo.get_all.return_value = Success(value=[])

        response = await handler.handle(GetAllProducts())

        assert response.success is True
        assert response.value == []
        assert response.total_count == 0
        mock_product_repo.get_all.assert_awaited_once_with(offset=0, limit=10)


@pytest.mark.unit
class TestGetAllProductsValidation:
    """Paging bounds."""

    @pytest.mark.parametrize(
        ("page_number", "page_size", "field"),
        [
            (0, 10, "page_number"),
            (-1, 10, "page_number"),
            (1, 0, "page_size"),
            (1, 51, "page_size"),
            (10**12, 10, "page_number"),
        ],
    )
    async def test_out_of_range_paging_rejected(
        self,
        handler: GetAllProductsHandler,
        mock_product_repo: AsyncMock,
        page_number: int,
        page_size: int,
        field: str,
    ) -> None:
        response = await handler.handle(
            GetAllProducts(page_number=page_number, page_size=page_size)
        )

        assert isinstance(response, PagedResponse)
        assert response.success is False
        assert response.error_code == ErrorCode.VALIDATION_FAILED
        assert response.page_number == 0
        assert response.page_size == 0
        mock_product_repo.count.assert_not_awaited()
        mock_product_repo.get_all.assert_not_awaited()

    async def test_max_page_size_accepted(
        self, handler: GetAllProductsHandler, mock_product_repo: AsyncMock
    ) -> None:
        mock_product_repo.count.return_value = Success(value=0)
        mock_product_repo.get_all.return_value = Success(value=[])

        response = await handler.handle(GetAllProducts(page_number=1, page_size=50))

        assert response.success is True

    async def test_largest_offset_accepted(
        self, handler: GetAllProductsHandler, mock_product_repo: AsyncMock
    ) -> None:
        mock_product_repo.count.return_value = Success(value=0)
        mock_product_repo.get_all.return_value = Success(value=[])

        response = await handler.handle(
            GetAllProducts(page_number=MAX_OFFSET + 1, page_size=1)
        )

        assert response.success is True
        mock_product_repo.get_all.assert_awaited_once_with(offset=MAX_OFFSET, limit=1)

    async def test_offset_past_limit_rejected(
        self, handler: GetAllProductsHandler, mock_product_repo: AsyncMock
    ) -> None:
        response = await handler.handle(
            GetAllProducts(page_number=MAX_OFFSET + 2, page_size=1)
        )

        assert response.error_code == ErrorCode.VALIDATION_FAILED
        assert response.message == "Page number is too large for page size 1"
        mock_product_repo.get_all.assert_not_awaited()


@pytest.mark.unit
class TestGetAllProductsFailures:
    """Storage failures."""

    async def test_count_failure_returns_storage_failure(
        self, handler: GetAllProductsHandler, mock_product_repo: AsyncMock
    ) -> None:
        mock_product_repo.count.return_value = Failure(
            error=StorageError(
                code=ErrorCode.STORAGE_FAILURE, message="Store unavailable"
            )
        )

        response = await handler.handle(GetAllProducts())

        assert isinstance(response, PagedResponse)
        assert response.success is False
        assert response.error_code == ErrorCode.STORAGE_FAILURE
        assert response.message == "Store unavailable"
        mock_product_repo.get_all.assert_not_awaited()

    async def test_get_all_exception_returns_paged_failure(
        self, handler: GetAllProductsHandler, mock_product_repo: AsyncMock
    ) -> None:
        mock_product_repo.count.return_value = Success(value=3)
        mock_product_repo.get_all.side_effect = TimeoutError("timed out")

        response = await handler.handle(GetAllProducts())

        assert isinstance(response, PagedResponse)
        assert response.success is False
        assert response.value is None
        assert response.error_code == ErrorCode.STORAGE_FAILURE
