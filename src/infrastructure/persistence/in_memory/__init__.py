"""Process-local storage adapters."""

from src.infrastructure.persistence.in_memory.product_repository import (
    InMemoryProductRepository,
)

__all__ = ["InMemoryProductRepository"]
