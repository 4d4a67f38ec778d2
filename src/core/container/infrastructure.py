"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console adapter)
- Mapper (product mapping profile)
- Database (PostgreSQL via asyncpg, SQLite in tests)
- In-memory product store
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.application.mapping.mapper import Mapper
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.infrastructure.persistence.in_memory import InMemoryProductRepository


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/production or LOG_JSON=true: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=settings.use_json_logs,
        level=settings.log_level,
        name=settings.app_name,
    )


@lru_cache()
def get_mapper() -> "Mapper":
    """Get the configured mapper singleton (app-scoped).

    Mapping functions are pure, so one instance is shared by all handlers.

    Returns:
        Mapper with the product profile registered.
    """
    from src.application.mapping import Mapper, configure_product_mappings

    return configure_product_mappings(Mapper())


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Repositories borrow sessions through ``Database.get_session``.

    Returns:
        Database manager instance.

    Raises:
        RuntimeError: If DATABASE_URL is not configured.
    """
    if settings.database_url is None:
        raise RuntimeError("DATABASE_URL is required for the database backend")

    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_in_memory_repository() -> "InMemoryProductRepository":
    """Get the process-local product store (app-scoped).

    Every request sees the same store, so writes are visible to later reads.

    Returns:
        InMemoryProductRepository instance.
    """
    from src.infrastructure.persistence.in_memory import InMemoryProductRepository

    return InMemoryProductRepository()
