"""Pytest configuration shared by all test suites.

This configuration ensures:
1. Async tests run under pytest-asyncio (auto mode, see pyproject.toml)
2. Tests run against the in-memory backend with JSON logs
3. Product, repository and logger fixtures are fresh per test
"""

import os
from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock
from uuid import UUID

import pytest
from uuid_extensions import uuid7

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("SEED_DATA", "false")

from src.application.mapping import Mapper, configure_product_mappings  # noqa: E402
from src.domain.entities.product import Product  # noqa: E402
from src.domain.protocols.logger_protocol import LoggerProtocol  # noqa: E402
from src.infrastructure.persistence.in_memory import (  # noqa: E402
    InMemoryProductRepository,
)

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)

_BASE_DATE = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)


def create_product(
    name: str = "Laptop",
    quality: int = 10,
    quantity: int = 149,
    *,
    product_id: UUID | None = None,
    offset_minutes: int = 0,
) -> Product:
    """Helper to create a Product with a deterministic creation date.

    Args:
        name: Product name.
        quality: Quality rating.
        quantity: Units in stock.
        product_id: Explicit ID (default: fresh UUIDv7).
        offset_minutes: Minutes added to the base creation date, to control
            listing order.

    Returns:
        Product instance for testing.
    """
    return Product(
        id=product_id or uuid7(),
        name=name,
        quality=quality,
        quantity=quantity,
        create_date=_BASE_DATE + timedelta(minutes=offset_minutes),
    )


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real storage"
    )
    config.addinivalue_line("markers", "api: HTTP tests through the application")


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double implementing LoggerProtocol."""
    logger = MagicMock(spec=LoggerProtocol)
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def mapper() -> Mapper:
    """Mapper with the product profile registered."""
    return configure_product_mappings(Mapper())


@pytest.fixture
def laptop() -> Product:
    """The 'Laptop' catalog product."""
    return create_product("Laptop", 10, 149)


@pytest.fixture
def in_memory_repository() -> InMemoryProductRepository:
    """Empty in-memory product repository."""
    return InMemoryProductRepository()
