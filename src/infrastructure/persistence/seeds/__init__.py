"""Initial catalog data."""

from src.infrastructure.persistence.seeds.product_seeder import (
    SEED_PRODUCTS,
    seed_products,
)

__all__ = ["SEED_PRODUCTS", "seed_products"]
