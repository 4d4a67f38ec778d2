"""Product catalog seeder.

Seeds the initial products through the repository, so the same seeder
works for the database and the in-memory backend. Idempotent: nothing is
inserted when the catalog already holds products.
"""

import structlog

from src.core.result import Failure
from src.domain.entities.product import Product
from src.domain.protocols.product_repository import ProductRepository

logger = structlog.get_logger(__name__)

# Format: (name, quality, quantity)
SEED_PRODUCTS: list[tuple[str, int, int]] = [
    ("Laptop", 10, 149),
    ("Mobile Phone", 10, 52),
    ("TV", 10, 257),
    ("Desktop PC", 10, 124),
]


async def seed_products(repository: ProductRepository) -> int:
    """Seed the initial catalog when storage is empty.

    Args:
        repository: Product repository to seed.

    Returns:
        Number of products inserted (0 when skipped).
    """
    count_result = await repository.count()
    if isinstance(count_result, Failure):
        logger.error("product_seeding_failed", error=str(count_result.error))
        return 0

    if count_result.value > 0:
        logger.info("product_seeding_skipped", existing=count_result.value)
        return 0

    seeded_count = 0
    for name, quality, quantity in SEED_PRODUCTS:
        product = Product.create(name=name, quality=quality, quantity=quantity)
        result = await repository.add(product)
        if isinstance(result, Failure):
            logger.warning(
                "product_seed_rejected", name=name, error=str(result.error)
            )
            continue
        seeded_count += 1

    logger.info(
        "product_seeding_complete", seeded=seeded_count, total=len(SEED_PRODUCTS)
    )
    return seeded_count
