"""CQRS Metadata Types.

Dataclasses for CQRS registry metadata.
These types define the structure of command and query registry entries.

Design Principles:
- Immutable (frozen=True) - registry entries never change at runtime
- Type-safe (kw_only=True) - explicit field assignment
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class CommandMetadata:
    """Metadata for a command in the CQRS registry.

    Attributes:
        command_class: The command dataclass (e.g., CreateProduct).
        handler_class: The handler class (e.g., CreateProductHandler).
        result_dto_class: Payload type carried by a successful envelope.
        description: Human-readable description for documentation.

    Example:
        >>> CommandMetadata(
        ...     command_class=CreateProduct,
        ...     handler_class=CreateProductHandler,
        ...     result_dto_class=ProductViewDto,
        ...     description="Add a product to the catalog",
        ... )
    """

    command_class: type
    handler_class: type
    result_dto_class: type
    description: str = ""


@dataclass(frozen=True, kw_only=True)
class QueryMetadata:
    """Metadata for a query in the CQRS registry.

    Attributes:
        query_class: The query dataclass (e.g., GetProductById).
        handler_class: The handler class (e.g., GetProductByIdHandler).
        result_dto_class: DTO type carried by a successful envelope.
        is_paginated: Whether the handler returns a PagedResponse.
        description: Human-readable description for documentation.
    """

    query_class: type
    handler_class: type
    result_dto_class: type
    is_paginated: bool = False
    description: str = ""


def request_class(metadata: CommandMetadata | QueryMetadata) -> type:
    """Return the request type described by ``metadata``."""
    if isinstance(metadata, CommandMetadata):
        return metadata.command_class
    return metadata.query_class


def get_handler_factory_name(metadata: CommandMetadata | QueryMetadata) -> str:
    """Compute the container factory function name for a handler.

    Naming convention: get_{snake_case_request}_handler

    Args:
        metadata: Command or query metadata.

    Returns:
        Expected factory function name.

    Example:
        >>> get_handler_factory_name(QueryMetadata(query_class=GetProductById, ...))
        'get_get_product_by_id_handler'
    """
    class_name = request_class(metadata).__name__

    # Convert PascalCase to snake_case
    snake_case = ""
    for i, char in enumerate(class_name):
        if char.isupper() and i > 0:
            snake_case += "_"
        snake_case += char.lower()

    return f"get_{snake_case}_handler"
