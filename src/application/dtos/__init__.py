"""Data Transfer Objects (DTOs) for application layer.

DTOs are result dataclasses returned (inside response envelopes) by
command and query handlers. They transfer data from the application layer
to the presentation layer.

Usage:
    from src.application.dtos import ProductViewDto

Note:
    DTOs are NOT the same as API schemas (Pydantic models in presentation layer).
"""

from src.application.dtos.product_dtos import ProductViewDto

__all__ = [
    "ProductViewDto",
]
