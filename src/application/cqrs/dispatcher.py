"""Request dispatcher (mediator).

Maps each request type to exactly one handler instance and forwards
requests to it. The handler's envelope comes back unchanged.

Faults that belong to the dispatcher itself (no handler registered,
duplicate registration) are raised as exceptions. Everything a handler
produces, success or failure, is an envelope.

Usage:
    dispatcher = Dispatcher()
    dispatcher.register(GetProductById, GetProductByIdHandler(repo, mapper, logger))
    response = await dispatcher.send(GetProductById(product_id=product_id))
"""

from typing import Any, Protocol, TypeVar

from src.application.cqrs.cancellation import CancellationToken
from src.domain.protocols.logger_protocol import LoggerProtocol

TRequest = TypeVar("TRequest", contravariant=True)
TResponse = TypeVar("TResponse", covariant=True)


class RequestHandler(Protocol[TRequest, TResponse]):
    """Contract every handler satisfies (structural typing)."""

    async def handle(
        self, request: TRequest, cancellation: CancellationToken | None = None
    ) -> TResponse:
        """Handle one request and return its response envelope."""
        ...


class HandlerNotRegisteredError(LookupError):
    """Raised when no handler is registered for a request type."""

    def __init__(self, request_type: type) -> None:
        super().__init__(f"No handler registered for {request_type.__name__}")
        self.request_type = request_type


class HandlerAlreadyRegisteredError(ValueError):
    """Raised when a second handler is registered for a request type."""

    def __init__(self, request_type: type) -> None:
        super().__init__(
            f"A handler is already registered for {request_type.__name__}"
        )
        self.request_type = request_type


class Dispatcher:
    """Routes typed requests to their single registered handler.

    Attributes:
        _handlers: Request type -> handler instance.
    """

    def __init__(self, logger: LoggerProtocol | None = None) -> None:
        """Initialize an empty dispatcher.

        Args:
            logger: Optional logger for dispatch tracing.
        """
        self._handlers: dict[type, RequestHandler[Any, Any]] = {}
        self._logger = logger

    def register(self, request_type: type, handler: RequestHandler[Any, Any]) -> None:
        """Bind a handler to a request type.

        Args:
            request_type: Request dataclass type.
            handler: Handler instance for that type.

        Raises:
            HandlerAlreadyRegisteredError: If the type already has a handler.
        """
        if request_type in self._handlers:
            raise HandlerAlreadyRegisteredError(request_type)
        self._handlers[request_type] = handler

    def is_registered(self, request_type: type) -> bool:
        """Check whether a handler is bound to ``request_type``."""
        return request_type in self._handlers

    def registered_types(self) -> tuple[type, ...]:
        """Return all request types with a bound handler."""
        return tuple(self._handlers)

    async def send(
        self, request: object, cancellation: CancellationToken | None = None
    ) -> Any:
        """Dispatch ``request`` to its handler.

        Args:
            request: Query or command instance.
            cancellation: Optional token forwarded to the handler.

        Returns:
            The handler's response envelope, unchanged.

        Raises:
            HandlerNotRegisteredError: If no handler is bound to the request type.
        """
        request_type = type(request)
        handler = self._handlers.get(request_type)
        if handler is None:
            if self._logger is not None:
                self._logger.error(
                    "handler_not_registered", request_type=request_type.__name__
                )
            raise HandlerNotRegisteredError(request_type)

        if self._logger is not None:
            self._logger.debug(
                "dispatching_request",
                request_type=request_type.__name__,
                handler=type(handler).__name__,
            )
        return await handler.handle(request, cancellation)
