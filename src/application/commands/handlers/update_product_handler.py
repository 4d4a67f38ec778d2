"""UpdateProduct command handler.

Loads the product, applies the new name/quality/quantity and stores it.
``id`` and ``create_date`` are never changed.
"""

from src.application.commands.product_commands import UpdateProduct
from src.application.cqrs.cancellation import CancellationToken
from src.application.cqrs.handler import EnvelopeHandler
from src.application.dtos.product_dtos import ProductViewDto
from src.application.mapping.mapper import Mapper
from src.application.responses.service_response import ServiceResponse
from src.core.result import Failure
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.product_repository import ProductRepository


class UpdateProductHandler(
    EnvelopeHandler[UpdateProduct, ServiceResponse[ProductViewDto]]
):
    """Handler for UpdateProduct command.

    Dependencies (injected via constructor):
        - ProductRepository: For lookup and persistence
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
        self, request: UpdateProduct, token: CancellationToken
    ) -> ServiceResponse[ProductViewDto]:
        """Apply the update.

        Args:
            request: UpdateProduct command.
            token: Cancellation token.

        Returns:
            ServiceResponse.ok(ProductViewDto): Product updated.
            ServiceResponse.fail(...): Product not found or storage failure.
        """
        product_id = str(request.product_id)

        existing = await token.run(self._product_repo.get_by_id(request.product_id))
        if isinstance(existing, Failure):
            return self._from_error(existing.error, product_id=product_id)

        updated = existing.value.with_changes(
            name=request.name,
            quality=request.quality,
            quantity=request.quantity,
        )
        result = await token.run(self._product_repo.update(updated))
        if isinstance(result, Failure):
            return self._from_error(result.error, product_id=product_id)

        self._logger.info("product_updated", product_id=product_id)
        return ServiceResponse.ok(self._mapper.map(result.value, ProductViewDto))
