"""Product queries (CQRS read operations).

Queries represent requests for product data. They are immutable
dataclasses with question-like names. Queries NEVER change state.

Pattern:
- Queries are data containers (no logic)
- Handlers fetch, map and wrap data in a response envelope
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetProductById:
    """Get a single product by ID.

    Attributes:
        product_id: Product to retrieve.

    Example:
        >>> query = GetProductById(product_id=product_id)
        >>> response = await dispatcher.send(query)
    """

    product_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetAllProducts:
    """List one page of products.

    Products are ordered by creation date, then ID.

    Attributes:
        page_number: 1-based page to return.
        page_size: Number of products per page.

    Example:
        >>> query = GetAllProducts(page_number=2, page_size=20)
        >>> response = await dispatcher.send(query)
    """

    page_number: int = 1
    page_size: int = 10
