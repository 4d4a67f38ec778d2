"""Handler dependency factories and dispatcher assembly.

One factory per registered request, named ``get_{snake_case_request}_handler``
(see ``get_handler_factory_name``). ``build_dispatcher`` walks the CQRS
registry and binds every request type to the handler its factory builds.
"""

from typing import TYPE_CHECKING, Any, Callable

from fastapi import Depends

from src.application.cqrs.dispatcher import Dispatcher
from src.application.cqrs.metadata import get_handler_factory_name, request_class
from src.core.config import settings
from src.core.container.infrastructure import get_logger, get_mapper
from src.core.container.repositories import get_product_repository
from src.domain.protocols.product_repository import ProductRepository

if TYPE_CHECKING:
    from src.application.commands.handlers.create_product_handler import (
        CreateProductHandler,
    )
    from src.application.commands.handlers.delete_product_handler import (
        DeleteProductHandler,
    )
    from src.application.commands.handlers.update_product_handler import (
        UpdateProductHandler,
    )
    from src.application.queries.handlers.get_all_products_handler import (
        GetAllProductsHandler,
    )
    from src.application.queries.handlers.get_product_by_id_handler import (
        GetProductByIdHandler,
    )


# ============================================================================
# Query Handler Factories
# ============================================================================


def get_get_product_by_id_handler(
    repository: ProductRepository,
) -> "GetProductByIdHandler":
    """Build GetProductById query handler."""
    from src.application.queries.handlers.get_product_by_id_handler import (
        GetProductByIdHandler,
    )

    return GetProductByIdHandler(
        product_repo=repository,
        mapper=get_mapper(),
        logger=get_logger(),
    )


def get_get_all_products_handler(
    repository: ProductRepository,
) -> "GetAllProductsHandler":
    """Build GetAllProducts query handler (page size bounded by settings)."""
    from src.application.queries.handlers.get_all_products_handler import (
        GetAllProductsHandler,
    )

    return GetAllProductsHandler(
        product_repo=repository,
        mapper=get_mapper(),
        logger=get_logger(),
        max_page_size=settings.max_page_size,
    )


# ============================================================================
# Command Handler Factories
# ============================================================================


def get_create_product_handler(
    repository: ProductRepository,
) -> "CreateProductHandler":
    """Build CreateProduct command handler."""
    from src.application.commands.handlers.create_product_handler import (
        CreateProductHandler,
    )

    return CreateProductHandler(
        product_repo=repository,
        mapper=get_mapper(),
        logger=get_logger(),
    )


def get_update_product_handler(
    repository: ProductRepository,
) -> "UpdateProductHandler":
    """Build UpdateProduct command handler."""
    from src.application.commands.handlers.update_product_handler import (
        UpdateProductHandler,
    )

    return UpdateProductHandler(
        product_repo=repository,
        mapper=get_mapper(),
        logger=get_logger(),
    )


def get_delete_product_handler(
    repository: ProductRepository,
) -> "DeleteProductHandler":
    """Build DeleteProduct command handler."""
    from src.application.commands.handlers.delete_product_handler import (
        DeleteProductHandler,
    )

    return DeleteProductHandler(product_repo=repository, logger=get_logger())


# ============================================================================
# Dispatcher
# ============================================================================


def build_dispatcher(repository: ProductRepository) -> Dispatcher:
    """Build a dispatcher with every registered request bound to its handler.

    Args:
        repository: Product repository shared by all handlers of this dispatcher.

    Returns:
        Dispatcher covering QUERY_REGISTRY and COMMAND_REGISTRY.

    Raises:
        LookupError: If a registered request has no factory in this module.
    """
    from src.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

    factories: dict[str, Callable[[ProductRepository], Any]] = {
        "get_get_product_by_id_handler": get_get_product_by_id_handler,
        "get_get_all_products_handler": get_get_all_products_handler,
        "get_create_product_handler": get_create_product_handler,
        "get_update_product_handler": get_update_product_handler,
        "get_delete_product_handler": get_delete_product_handler,
    }

    dispatcher = Dispatcher(logger=get_logger())
    for metadata in [*QUERY_REGISTRY, *COMMAND_REGISTRY]:
        factory_name = get_handler_factory_name(metadata)
        factory = factories.get(factory_name)
        if factory is None:
            raise LookupError(f"Missing handler factory: {factory_name}")
        dispatcher.register(request_class(metadata), factory(repository))
    return dispatcher


async def get_dispatcher(
    repository: ProductRepository = Depends(get_product_repository),
) -> Dispatcher:
    """Get dispatcher (request-scoped).

    Args:
        repository: Request-scoped product repository.
            Injected via Depends(get_product_repository).

    Returns:
        Dispatcher whose handlers share the request's repository.
    """
    return build_dispatcher(repository)
