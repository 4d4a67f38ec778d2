"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_logger, build_dispatcher, ...

The container is organized into modules:
- infrastructure: Core services (logging, mapper, database, in-memory store)
- repositories: Product repository factory (backend selected by settings)
- handlers: Handler factories and dispatcher assembly
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_in_memory_repository,
    get_logger,
    get_mapper,
)

# Repositories
from src.core.container.repositories import get_product_repository

# Handlers
from src.core.container.handlers import (
    build_dispatcher,
    get_create_product_handler,
    get_dispatcher,
    get_delete_product_handler,
    get_get_all_products_handler,
    get_get_product_by_id_handler,
    get_update_product_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_in_memory_repository",
    "get_logger",
    "get_mapper",
    # Repositories
    "get_product_repository",
    # Handlers
    "build_dispatcher",
    "get_dispatcher",
    "get_create_product_handler",
    "get_delete_product_handler",
    "get_get_all_products_handler",
    "get_get_product_by_id_handler",
    "get_update_product_handler",
]
