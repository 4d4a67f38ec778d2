"""Declarative base for all database models.

Following hexagonal architecture:
- This is an infrastructure concern (database implementation detail)
- Domain entities should NOT inherit from this
- Domain entities are mapped to/from database models by repositories

Usage:
    class ProductModel(BaseModel):
        __tablename__ = "products"
        name: Mapped[str]
        # Has: id

Note: The base model stays database-agnostic by using SQLAlchemy's Uuid
type, so the same models run on PostgreSQL (asyncpg) and SQLite (aiosqlite).
"""

from uuid import UUID as PythonUUID

from sqlalchemy import Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides the UUID primary key. Identifiers are always generated by the
    domain (``Product.create`` uses UUIDv7), never by the database.

    This is an infrastructure concern - domain entities should not
    inherit from or depend on this class.
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,  # SQLAlchemy's generic UUID type
        primary_key=True,
        nullable=False,
    )

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: String showing class name and ID.
        """
        return f"<{self.__class__.__name__}(id={self.id})>"

