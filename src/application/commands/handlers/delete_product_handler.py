"""DeleteProduct command handler.

Removes the product and returns its ID.
"""

from uuid import UUID

from src.application.commands.product_commands import DeleteProduct
from src.application.cqrs.cancellation import CancellationToken
from src.application.cqrs.handler import EnvelopeHandler
from src.application.responses.service_response import ServiceResponse
from src.core.result import Failure
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.product_repository import ProductRepository


class DeleteProductHandler(EnvelopeHandler[DeleteProduct, ServiceResponse[UUID]]):
    """Handler for DeleteProduct command.

    Dependencies (injected via constructor):
        - ProductRepository: For removal
        - LoggerProtocol: Structured logging
    """

    def __init__(self, product_repo: ProductRepository, logger: LoggerProtocol) -> None:
        """Initialize handler with dependencies.

        Args:
            product_repo: Product repository.
            logger: Structured logger.
        """
        super().__init__(logger)
        self._product_repo = product_repo

    async def _execute(
        self, request: DeleteProduct, token: CancellationToken
    ) -> ServiceResponse[UUID]:
        """Delete the product.

        Args:
            request: DeleteProduct command.
            token: Cancellation token.

        Returns:
            ServiceResponse.ok(UUID): Product deleted.
            ServiceResponse.fail(...): Product not found or storage failure.
        """
        result = await token.run(self._product_repo.delete(request.product_id))
        if isinstance(result, Failure):
            return self._from_error(result.error, product_id=str(request.product_id))

        self._logger.info("product_deleted", product_id=str(result.value))
        return ServiceResponse.ok(result.value)
