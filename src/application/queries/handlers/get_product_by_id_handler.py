"""GetProductById query handler.

Handles requests to retrieve a single product.
Returns a DTO (not the domain entity) wrapped in a ServiceResponse.

Architecture:
- Application layer handler (orchestrates data retrieval)
- Repository failures become failure envelopes, never exceptions
- A missing product never reaches the mapper
"""

from src.application.cqrs.cancellation import CancellationToken
from src.application.cqrs.handler import EnvelopeHandler
from src.application.dtos.product_dtos import ProductViewDto
from src.application.mapping.mapper import Mapper
from src.application.queries.product_queries import GetProductById
from src.application.responses.service_response import ServiceResponse
from src.core.result import Failure
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.product_repository import ProductRepository


class GetProductByIdHandler(
    EnvelopeHandler[GetProductById, ServiceResponse[ProductViewDto]]
):
    """Handler for GetProductById query.

    Dependencies (injected via constructor):
        - ProductRepository: For product retrieval
        - Mapper: Product -> ProductViewDto
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        product_repo: ProductRepository,
        mapper: Mapper,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            product_repo: Product repository.
            mapper: Configured object mapper.
            logger: Structured logger.
        """
        super().__init__(logger)
        self._product_repo = product_repo
        self._mapper = mapper

    async def _execute(
        self, request: GetProductById, token: CancellationToken
    ) -> ServiceResponse[ProductViewDto]:
        """Fetch the product and map it to a view DTO.

        Args:
            request: GetProductById query.
            token: Cancellation token.

        Returns:
            ServiceResponse.ok(ProductViewDto): Product found.
            ServiceResponse.fail(...): Product not found or storage failure.
        """
        result = await token.run(self._product_repo.get_by_id(request.product_id))

        if isinstance(result, Failure):
            return self._from_error(result.error, product_id=str(request.product_id))

        dto = self._mapper.map(result.value, ProductViewDto)
        token.raise_if_cancelled()
        return ServiceResponse.ok(dto)
