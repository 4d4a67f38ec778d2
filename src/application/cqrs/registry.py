"""CQRS Registry - Single Source of Truth for Commands and Queries.

Catalogs every command and query of the product catalog with its handler
and result payload. Used for:
- Dispatcher wiring (one handler per request type)
- Validation tests (verify no drift between requests/handlers/container)

Adding new commands/queries:
1. Define command/query dataclass in *_commands.py/*_queries.py
2. Create handler class in handlers/ directory
3. Add entry to COMMAND_REGISTRY or QUERY_REGISTRY below
4. Add the handler factory to src.core.container.handlers
5. Run tests - they'll tell you what's missing
"""

from uuid import UUID

from src.application.commands.handlers.create_product_handler import (
    CreateProductHandler,
)
from src.application.commands.handlers.delete_product_handler import (
    DeleteProductHandler,
)
from src.application.commands.handlers.update_product_handler import (
    UpdateProductHandler,
)
from src.application.commands.product_commands import (
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
)
from src.application.cqrs.metadata import (
    CommandMetadata,
    QueryMetadata,
    request_class,
)
from src.application.dtos import ProductViewDto
from src.application.queries.handlers.get_all_products_handler import (
    GetAllProductsHandler,
)
from src.application.queries.handlers.get_product_by_id_handler import (
    GetProductByIdHandler,
)
from src.application.queries.product_queries import GetAllProducts, GetProductById
from src.application.responses import PagedResponse, ServiceResponse

# ═══════════════════════════════════════════════════════════════════════════
# COMMAND REGISTRY (3 commands)
# ═══════════════════════════════════════════════════════════════════════════

COMMAND_REGISTRY: list[CommandMetadata] = [
    CommandMetadata(
        command_class=CreateProduct,
        handler_class=CreateProductHandler,
        result_dto_class=ProductViewDto,
        description="Add a product to the catalog",
    ),
    CommandMetadata(
        command_class=UpdateProduct,
        handler_class=UpdateProductHandler,
        result_dto_class=ProductViewDto,
        description="Change name, quality and quantity of a product",
    ),
    CommandMetadata(
        command_class=DeleteProduct,
        handler_class=DeleteProductHandler,
        result_dto_class=UUID,
        description="Remove a product from the catalog",
    ),
]

# ═══════════════════════════════════════════════════════════════════════════
# QUERY REGISTRY (2 queries)
# ═══════════════════════════════════════════════════════════════════════════

QUERY_REGISTRY: list[QueryMetadata] = [
    QueryMetadata(
        query_class=GetProductById,
        handler_class=GetProductByIdHandler,
        result_dto_class=ProductViewDto,
        description="Get a single product by ID",
    ),
    QueryMetadata(
        query_class=GetAllProducts,
        handler_class=GetAllProductsHandler,
        result_dto_class=ProductViewDto,
        is_paginated=True,
        description="List one page of products",
    ),
]


def get_all_commands() -> list[type]:
    """Get all registered command classes."""
    return [meta.command_class for meta in COMMAND_REGISTRY]


def get_all_queries() -> list[type]:
    """Get all registered query classes."""
    return [meta.query_class for meta in QUERY_REGISTRY]


def get_handler_class(request_type: type) -> type | None:
    """Get the handler class registered for a command or query.

    Args:
        request_type: Command or query class.

    Returns:
        Handler class, or None if the request type is not registered.
    """
    for meta in [*COMMAND_REGISTRY, *QUERY_REGISTRY]:
        if request_class(meta) is request_type:
            return meta.handler_class
    return None


def validate_registry_consistency() -> list[str]:
    """Validate registry for common issues.

    Returns:
        List of error messages. Empty if registry is consistent.

    Example:
        >>> validate_registry_consistency()
        []
    """
    errors: list[str] = []

    request_types = [request_class(meta) for meta in [*COMMAND_REGISTRY, *QUERY_REGISTRY]]
    if len(request_types) != len(set(request_types)):
        errors.append("Duplicate request classes in registry")

    for meta in [*COMMAND_REGISTRY, *QUERY_REGISTRY]:
        if not hasattr(meta.handler_class, "handle"):
            errors.append(
                f"Handler {meta.handler_class.__name__} missing handle() method"
            )

    for meta in QUERY_REGISTRY:
        returns_page = issubclass(
            getattr(meta.handler_class, "response_type", ServiceResponse), PagedResponse
        )
        if returns_page != meta.is_paginated:
            errors.append(
                f"Handler {meta.handler_class.__name__} response type does not "
                f"match is_paginated={meta.is_paginated}"
            )

    return errors
