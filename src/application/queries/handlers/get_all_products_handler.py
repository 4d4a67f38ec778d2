"""GetAllProducts query handler.

Returns one page of products wrapped in a PagedResponse. The page is
sliced by the repository (offset/limit) before the envelope is built;
the envelope only records the paging data.
"""

from src.application.cqrs.cancellation import CancellationToken
from src.application.cqrs.handler import EnvelopeHandler
from src.application.dtos.product_dtos import ProductViewDto
from src.application.mapping.mapper import Mapper
from src.application.queries.product_queries import GetAllProducts
from src.application.responses.paged_response import PagedResponse
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.product_repository import ProductRepository


# Largest row offset a page may start at (32-bit SQL INTEGER range)
MAX_OFFSET = 2**31 - 1


class GetAllProductsError:
    """GetAllProducts-specific error messages."""

    INVALID_PAGE_NUMBER = "Page number must be at least 1"
    PAGE_NUMBER_TOO_LARGE = "Page number is too large for page size {page_size}"
    INVALID_PAGE_SIZE = "Page size must be between 1 and {max_page_size}"


class GetAllProductsHandler(
    EnvelopeHandler[GetAllProducts, PagedResponse[list[ProductViewDto]]]
):
    """Handler for GetAllProducts query.

    Dependencies (injected via constructor):
        - ProductRepository: For product listing and counting
        - Mapper: Product -> ProductViewDto
        - LoggerProtocol: Structured logging
        - max_page_size: Upper bound for page size (from settings)
    """

    response_type = PagedResponse

    def __init__(
        self,
        product_repo: ProductRepository,
        mapper: Mapper,
        logger: LoggerProtocol,
        max_page_size: int = 100,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            product_repo: Product repository.
            mapper: Configured object mapper.
            logger: Structured logger.
            max_page_size: Largest accepted page size.
        """
        super().__init__(logger)
        self._product_repo = product_repo
        self._mapper = mapper
        self._max_page_size = max_page_size

    def _validate(self, request: GetAllProducts) -> ValidationError | None:
        if request.page_number < 1:
            return ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=GetAllProductsError.INVALID_PAGE_NUMBER,
                field="page_number",
            )
        if not 1 <= request.page_size <= self._max_page_size:
            return ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=GetAllProductsError.INVALID_PAGE_SIZE.format(
                    max_page_size=self._max_page_size
                ),
                field="page_size",
            )
        if (request.page_number - 1) * request.page_size > MAX_OFFSET:
            return ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=GetAllProductsError.PAGE_NUMBER_TOO_LARGE.format(
                    page_size=request.page_size
                ),
                field="page_number",
            )
        return None

    async def _execute(
        self, request: GetAllProducts, token: CancellationToken
    ) -> PagedResponse[list[ProductViewDto]]:
        """Fetch one page of products and the total count.

        Args:
            request: GetAllProducts query.
            token: Cancellation token.

        Returns:
            PagedResponse.ok(list[ProductViewDto]): Page (possibly empty).
            PagedResponse.fail(...): Invalid paging or storage failure.
        """
        validation_error = self._validate(request)
        if validation_error is not None:
            return self._from_error(
                validation_error,
                page_number=request.page_number,
                page_size=request.page_size,
            )

        count_result = await token.run(self._product_repo.count())
        if isinstance(count_result, Failure):
            return self._from_error(count_result.error)

        offset = (request.page_number - 1) * request.page_size
        page_result = await token.run(
            self._product_repo.get_all(offset=offset, limit=request.page_size)
        )
        if isinstance(page_result, Failure):
            return self._from_error(page_result.error)

        dtos = self._mapper.map_many(page_result.value, ProductViewDto)
        token.raise_if_cancelled()
        return PagedResponse.ok(
            dtos,
            page_number=request.page_number,
            page_size=request.page_size,
            total_count=count_result.value,
        )
