"""Database models for persistence layer.

This package contains SQLAlchemy database models that map to database
tables. These are infrastructure concerns and should not be imported by the
domain layer.

Models Organization:
    - product.py: Catalog product model

Note:
    Domain entities (dataclasses) live in src/domain/entities/
    Database models live here in src/infrastructure/persistence/models/
    They are separate and mapped via repository layer.
"""

from src.infrastructure.persistence.models.product import ProductModel

__all__ = [
    "ProductModel",
]
