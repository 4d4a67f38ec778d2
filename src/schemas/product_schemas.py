"""Product request and response schemas.

Pydantic schemas for product API endpoints. Includes:
- Request schemas (client → API)
- Envelope response schemas (API → client)
- DTO/envelope-to-schema conversion methods

Every response body is an envelope: ``{success, value, message, error_code}``,
plus ``page_number``, ``page_size`` and ``total_count`` for paged listings.
"""

from datetime import datetime
from typing import Any, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, Field

from src.application.dtos import ProductViewDto
from src.application.responses import PagedResponse, ServiceResponse

T = TypeVar("T")


# =============================================================================
# Request Schemas
# =============================================================================


class ProductCreateRequest(BaseModel):
    """Request body for creating a product.

    Attributes:
        name: Product name.
        quality: Quality rating.
        quantity: Units in stock.
    """

    name: str = Field(..., description="Product name", examples=["Laptop"])
    quality: int = Field(..., description="Quality rating", examples=[10])
    quantity: int = Field(..., description="Units in stock", examples=[149])


class ProductUpdateRequest(BaseModel):
    """Request body for updating a product (all mutable fields)."""

    name: str = Field(..., description="New product name")
    quality: int = Field(..., description="New quality rating")
    quantity: int = Field(..., description="New stock count")


# =============================================================================
# Response Schemas
# =============================================================================


class ProductResponse(BaseModel):
    """Product payload.

    Attributes:
        id: Product unique identifier.
        name: Product name.
        quality: Quality rating.
        quantity: Units in stock.
        create_date: Creation timestamp (UTC).
    """

    id: UUID = Field(..., description="Product unique identifier")
    name: str = Field(..., description="Product name")
    quality: int = Field(..., description="Quality rating")
    quantity: int = Field(..., description="Units in stock")
    create_date: datetime = Field(..., description="Creation timestamp (UTC)")

    @classmethod
    def from_dto(cls, dto: ProductViewDto) -> "ProductResponse":
        """Convert application DTO to response schema.

        Args:
            dto: ProductViewDto from handler.

        Returns:
            ProductResponse schema.
        """
        return cls(
            id=dto.id,
            name=dto.name,
            quality=dto.quality,
            quantity=dto.quantity,
            create_date=dto.create_date,
        )


class EnvelopeResponse(BaseModel, Generic[T]):
    """Transport shape of ``ServiceResponse``.

    Attributes:
        success: Whether the operation succeeded.
        value: Payload (null on failure).
        message: Failure description (empty on success).
        error_code: Machine-readable failure code (null on success).
    """

    success: bool = Field(..., description="Whether the operation succeeded")
    value: T | None = Field(None, description="Payload (null on failure)")
    message: str = Field("", description="Failure description")
    error_code: str | None = Field(None, description="Failure code")


class PagedEnvelopeResponse(EnvelopeResponse[T], Generic[T]):
    """Transport shape of ``PagedResponse``.

    Attributes:
        page_number: Requested page (1-based, 0 on failure).
        page_size: Requested page size (0 on failure).
        total_count: Total products available (0 on failure).
    """

    page_number: int = Field(0, description="Requested page (1-based)")
    page_size: int = Field(0, description="Requested page size")
    total_count: int = Field(0, description="Total items available")


def _envelope_fields(response: ServiceResponse) -> dict[str, Any]:  # type: ignore[type-arg]
    return {
        "success": response.success,
        "message": response.message,
        "error_code": response.error_code.value if response.error_code else None,
    }


def product_envelope(
    response: ServiceResponse[ProductViewDto],
) -> EnvelopeResponse[ProductResponse]:
    """Convert a single-product envelope to its transport schema."""
    value = ProductResponse.from_dto(response.value) if response.success else None
    return EnvelopeResponse[ProductResponse](value=value, **_envelope_fields(response))


def product_page_envelope(
    response: PagedResponse[list[ProductViewDto]],
) -> PagedEnvelopeResponse[list[ProductResponse]]:
    """Convert a paged product envelope to its transport schema."""
    value = (
        [ProductResponse.from_dto(dto) for dto in response.value]
        if response.success
        else None
    )
    return PagedEnvelopeResponse[list[ProductResponse]](
        value=value,
        page_number=response.page_number,
        page_size=response.page_size,
        total_count=response.total_count,
        **_envelope_fields(response),
    )


def product_id_envelope(response: ServiceResponse[UUID]) -> EnvelopeResponse[UUID]:
    """Convert a deleted-product envelope to its transport schema."""
    return EnvelopeResponse[UUID](value=response.value, **_envelope_fields(response))


def failure_envelope(response: ServiceResponse[None]) -> EnvelopeResponse[None]:
    """Convert a failure raised before any handler ran to its transport schema."""
    return EnvelopeResponse[None](value=None, **_envelope_fields(response))
