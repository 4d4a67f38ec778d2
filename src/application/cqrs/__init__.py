"""CQRS building blocks: dispatcher, cancellation, handler base and registry.

The registry (src.application.cqrs.registry) imports every handler module, so
it is not re-exported here; import it directly where needed.
"""

from src.application.cqrs.cancellation import (
    CANCELLED_MESSAGE,
    CancellationToken,
    OperationCancelledError,
)
from src.application.cqrs.dispatcher import (
    Dispatcher,
    HandlerAlreadyRegisteredError,
    HandlerNotRegisteredError,
    RequestHandler,
)
from src.application.cqrs.metadata import (
    CommandMetadata,
    QueryMetadata,
    get_handler_factory_name,
    request_class,
)

__all__ = [
    "CANCELLED_MESSAGE",
    "CancellationToken",
    "OperationCancelledError",
    "Dispatcher",
    "HandlerAlreadyRegisteredError",
    "HandlerNotRegisteredError",
    "RequestHandler",
    "CommandMetadata",
    "QueryMetadata",
    "get_handler_factory_name",
    "request_class",
]
