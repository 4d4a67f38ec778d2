"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import ProductCreateRequest, EnvelopeResponse
"""

from src.schemas.product_schemas import (
    EnvelopeResponse,
    PagedEnvelopeResponse,
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
    product_envelope,
    failure_envelope,
    product_id_envelope,
    product_page_envelope,
)

__all__ = [
    "EnvelopeResponse",
    "PagedEnvelopeResponse",
    "ProductCreateRequest",
    "ProductResponse",
    "ProductUpdateRequest",
    "failure_envelope",
    "product_envelope",
    "product_id_envelope",
    "product_page_envelope",
]
