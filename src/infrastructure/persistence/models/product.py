"""Product database model.

This module defines the ProductModel for storing catalog products.
"""

from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class ProductModel(BaseModel):
    """Product model for the catalog.

    Fields:
        id: UUID primary key (from BaseModel, assigned by the domain)
        name: Display name
        quality: Quality rating
        quantity: Units in stock
        create_date: Timestamp when the product was created (UTC, never updated)

    Indexes:
        - idx_products_create_date_id: (create_date, id) - stable listing order

    Example:
        model = ProductModel(
            id=product.id,
            name="Laptop",
            quality=10,
            quantity=149,
            create_date=product.create_date,
        )
        session.add(model)
        await session.flush()
    """

    __tablename__ = "products"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Product display name",
    )

    quality: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Quality rating",
    )

    quantity: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Units in stock",
    )

    create_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Creation timestamp (UTC)",
    )

    __table_args__ = (
        Index("idx_products_create_date_id", "create_date", "id"),
    )
