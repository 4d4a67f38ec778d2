"""CreateProduct command handler.

Maps the command to a new Product (fresh ID and creation timestamp),
persists it and returns the stored product as a view DTO.
"""

from src.application.commands.product_commands import CreateProduct
from src.application.cqrs.cancellation import CancellationToken
from src.application.cqrs.handler import EnvelopeHandler
from src.application.dtos.product_dtos import ProductViewDto
from src.application.mapping.mapper import Mapper
from src.application.responses.service_response import ServiceResponse
from src.core.result import Failure
from src.domain.entities.product import Product
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.product_repository import ProductRepository


class CreateProductHandler(
    EnvelopeHandler[CreateProduct, ServiceResponse[ProductViewDto]]
):
    """Handler for CreateProduct command.

    Dependencies (injected via constructor):
        - ProductRepository: For persistence
        - Mapper: CreateProduct -> Product, Product -> ProductViewDto
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
        self, request: CreateProduct, token: CancellationToken
    ) -> ServiceResponse[ProductViewDto]:
        """Create and persist the product.

        Args:
            request: CreateProduct command.
            token: Cancellation token.

        Returns:
            ServiceResponse.ok(ProductViewDto): Product created.
            ServiceResponse.fail(...): Conflict or storage failure.
        """
        product = self._mapper.map(request, Product)
        token.raise_if_cancelled()

        result = await token.run(self._product_repo.add(product))
        if isinstance(result, Failure):
            return self._from_error(result.error, product_id=str(product.id))

        self._logger.info(
            "product_created", product_id=str(result.value.id), name=result.value.name
        )
        return ServiceResponse.ok(self._mapper.map(result.value, ProductViewDto))
