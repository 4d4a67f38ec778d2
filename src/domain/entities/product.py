"""Product domain entity.

Represents a catalog item. Products are created by the create-product
command or by seed initialization, read by the query handlers and owned
exclusively by the persistence layer.

The entity is frozen: ``id`` and ``create_date`` never change after
creation, and updates produce a new instance via ``with_changes``.
"""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True)
class Product:
    """Catalog product entity.

    Attributes:
        id: Unique product identifier (UUIDv7 when generated).
        name: Product name.
        quality: Quality rating.
        quantity: Units in stock.
        create_date: When the product was created (UTC).

    Example:
        >>> product = Product.create(name="Laptop", quality=10, quantity=149)
        >>> product.name
        'Laptop'
    """

    id: UUID
    name: str
    quality: int
    quantity: int
    create_date: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate identity after initialization.

        Raises:
            ValueError: If id is not a UUID.
        """
        if not isinstance(self.id, UUID):
            raise ValueError("Product id must be a UUID")

    @classmethod
    def create(cls, *, name: str, quality: int, quantity: int) -> "Product":
        """Create a new product with a fresh id and creation timestamp.

        Args:
            name: Product name.
            quality: Quality rating.
            quantity: Units in stock.

        Returns:
            New Product instance.
        """
        return cls(id=uuid7(), name=name, quality=quality, quantity=quantity)

    def with_changes(self, *, name: str, quality: int, quantity: int) -> "Product":
        """Return a copy with updated mutable fields.

        ``id`` and ``create_date`` are carried over unchanged.

        Args:
            name: New product name.
            quality: New quality rating.
            quantity: New stock count.

        Returns:
            Updated Product instance.
        """
        return replace(self, name=name, quality=quality, quantity=quantity)

    def __str__(self) -> str:
        """Return string representation.

        Returns:
            str: Human-readable string.
        """
        return f"{self.name} (quality={self.quality}, quantity={self.quantity})"
