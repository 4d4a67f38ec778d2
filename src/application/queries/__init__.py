"""Queries - Read operations that fetch data.

Queries represent a request for information. They are immutable dataclasses
with question-like names (GetProductById, GetAllProducts).

Each query has a corresponding handler that fetches and returns the requested
data. Queries NEVER change state.
"""

from src.application.queries.product_queries import GetAllProducts, GetProductById

__all__ = [
    "GetAllProducts",
    "GetProductById",
]
