"""Object mapping between domain entities and DTOs.

Usage:
    from src.application.mapping import Mapper, configure_product_mappings

    mapper = configure_product_mappings(Mapper())
    dto = mapper.map(product, ProductViewDto)
"""

from src.application.mapping.mapper import Mapper, MappingError
from src.application.mapping.product_mapping import configure_product_mappings

__all__ = [
    "Mapper",
    "MappingError",
    "configure_product_mappings",
]
