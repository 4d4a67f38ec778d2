"""Product DTOs (Data Transfer Objects).

Read-facing projections returned by product handlers. A DTO carries the
same fields as the Product entity and has no identity of its own: it is
recomputed by the mapper on every read.

DTOs:
    - ProductViewDto: Product as seen by the transport layer
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class ProductViewDto:
    """Single product view.

    Attributes:
        id: Product unique identifier.
        name: Product name.
        quality: Quality rating.
        quantity: Units in stock.
        create_date: Creation timestamp.
    """

    id: UUID
    name: str
    quality: int
    quantity: int
    create_date: datetime
