"""Base class for request handlers that answer with a response envelope.

Subclasses implement ``_execute``. The base ``handle`` turns every failure
that can occur while executing into a failure envelope, so a caller always
receives a ``ServiceResponse``:

- ``OperationCancelledError`` -> CANCELLED
- ``MappingError`` -> MAPPING_FAILURE
- any other ``Exception`` from the backend -> STORAGE_FAILURE

``asyncio.CancelledError`` is a BaseException and is not caught: native
task cancellation reaches the caller.

Each request type has exactly one handler; handlers are single-shot and
never retry.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from src.application.cqrs.cancellation import (
    CANCELLED_MESSAGE,
    CancellationToken,
    OperationCancelledError,
)
from src.application.mapping.mapper import MappingError
from src.application.responses.service_response import ServiceResponse
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.domain.protocols.logger_protocol import LoggerProtocol

TRequest = TypeVar("TRequest")
TResponse = TypeVar("TResponse", bound=ServiceResponse)  # type: ignore[type-arg]


class EnvelopeHandler(ABC, Generic[TRequest, TResponse]):
    """Handler base that always produces an envelope.

    Attributes:
        response_type: Envelope class used for failures (ServiceResponse or
            PagedResponse).
    """

    response_type: type[ServiceResponse] = ServiceResponse  # type: ignore[type-arg]

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize handler with a logger.

        Args:
            logger: Structured logger.
        """
        self._logger = logger

    async def handle(
        self, request: TRequest, cancellation: CancellationToken | None = None
    ) -> TResponse:
        """Handle ``request`` and return its envelope.

        Args:
            request: Query or command instance.
            cancellation: Optional cancellation token.

        Returns:
            Success or failure envelope.
        """
        token = cancellation if cancellation is not None else CancellationToken()
        handler_name = type(self).__name__
        try:
            return await self._execute(request, token)
        except OperationCancelledError:
            self._logger.warning("request_cancelled", handler=handler_name)
            return self._fail(CANCELLED_MESSAGE, ErrorCode.CANCELLED)
        except MappingError as e:
            self._logger.error(
                "mapping_failed",
                error=e,
                handler=handler_name,
                source_type=e.source_type,
                target_type=e.target_type,
            )
            return self._fail(str(e), ErrorCode.MAPPING_FAILURE)
        except Exception as e:
            self._logger.error("storage_operation_failed", error=e, handler=handler_name)
            return self._fail(
                f"Storage operation failed: {e}", ErrorCode.STORAGE_FAILURE
            )

    @abstractmethod
    async def _execute(self, request: TRequest, token: CancellationToken) -> TResponse:
        """Run the use case.

        May raise OperationCancelledError or MappingError; ``handle`` converts
        them into failure envelopes.
        """
        raise NotImplementedError

    def _fail(self, message: str, code: ErrorCode) -> TResponse:
        response: TResponse = self.response_type.fail(message, error_code=code)
        return response

    def _from_error(self, error: DomainError, **context: object) -> TResponse:
        """Log a repository/validation error value and wrap it in an envelope."""
        fields = {
            "handler": type(self).__name__,
            "error_code": error.code.value,
            "error_message": error.message,
            **context,
        }
        if error.code == ErrorCode.STORAGE_FAILURE:
            self._logger.error("request_failed", **fields)
        else:
            self._logger.warning("request_failed", **fields)
        response: TResponse = self.response_type.from_error(error)
        return response
