"""Product commands (CQRS write operations).

Commands represent intent to change the catalog. They are immutable
dataclasses with imperative names.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateProduct:
    """Add a new product to the catalog.

    The ID and creation timestamp are generated when the command is mapped
    to a Product entity.

    Attributes:
        name: Product name.
        quality: Quality rating.
        quantity: Units in stock.
    """

    name: str
    quality: int
    quantity: int


@dataclass(frozen=True, kw_only=True)
class UpdateProduct:
    """Replace the mutable fields of an existing product.

    Attributes:
        product_id: Product to update.
        name: New product name.
        quality: New quality rating.
        quantity: New stock count.
    """

    product_id: UUID
    name: str
    quality: int
    quantity: int


@dataclass(frozen=True, kw_only=True)
class DeleteProduct:
    """Remove a product from the catalog.

    Attributes:
        product_id: Product to delete.
    """

    product_id: UUID
