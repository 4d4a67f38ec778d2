"""Persistence infrastructure.

This package provides:
- Base model for all database models
- Database connection and session management
- SQLAlchemy and in-memory product repositories
- Seed data
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database

__all__ = [
    "BaseModel",
    "Database",
]
