"""Main FastAPI application entry point.

Creates the application, wires routers and runs storage startup:
- database backend: create tables, seed when enabled, dispose on shutdown
- memory backend: seed the shared in-memory store when enabled
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import settings
from src.core.container import get_database, get_in_memory_repository, get_logger
from src.core.enums import StorageBackend
from src.infrastructure.persistence.repositories import SQLAlchemyProductRepository
from src.infrastructure.persistence.seeds import seed_products
from src.presentation.routers import system_router, v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Prepare storage and seed initial products
    - Shutdown: Close database connections

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    logger.info(
        "application_starting",
        environment=settings.environment.value,
        storage_backend=settings.storage_backend.value,
    )

    if settings.storage_backend == StorageBackend.DATABASE:
        database = get_database()
        await database.create_all()
        if settings.seed_data:
            async with database.get_session() as session:
                await seed_products(SQLAlchemyProductRepository(session=session))
    elif settings.seed_data:
        await seed_products(get_in_memory_repository())

    yield

    if settings.storage_backend == StorageBackend.DATABASE:
        await get_database().close()
    logger.info("application_stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Product catalog service",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(system_router)
app.include_router(v1_router)
register_exception_handlers(app)
