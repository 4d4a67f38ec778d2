"""Products resource endpoints.

Thin transport over the dispatcher: each endpoint builds a query or
command, dispatches it and renders the envelope. The body is always the
envelope; the status code reflects ``error_code``.

Endpoints:
    GET    /products                - List one page of products
    GET    /products/{product_id}   - Get product details
    POST   /products                - Create product
    PUT    /products/{product_id}   - Update product
    DELETE /products/{product_id}   - Delete product
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.application.commands.product_commands import (
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
)
from src.application.cqrs.dispatcher import Dispatcher
from src.application.queries.product_queries import GetAllProducts, GetProductById
from src.application.responses import ServiceResponse
from src.core.config import settings
from src.core.container import get_dispatcher
from src.core.enums import ErrorCode
from src.schemas.product_schemas import (
    EnvelopeResponse,
    PagedEnvelopeResponse,
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
    product_envelope,
    product_id_envelope,
    product_page_envelope,
)

products_router = APIRouter(prefix="/products", tags=["Products"])

# Failure code -> HTTP status
ERROR_STATUS: dict[ErrorCode, int] = {
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.STORAGE_FAILURE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.MAPPING_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.CANCELLED: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _render(
    response: ServiceResponse,  # type: ignore[type-arg]
    body: BaseModel,
    success_status: int = status.HTTP_200_OK,
) -> JSONResponse:
    if response.success or response.error_code is None:
        status_code = success_status
    else:
        status_code = ERROR_STATUS.get(
            response.error_code, status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@products_router.get(
    "",
    response_model=PagedEnvelopeResponse[list[ProductResponse]],
)
async def list_products(
    dispatcher: Annotated[Dispatcher, Depends(get_dispatcher)],
    page_number: Annotated[int, Query(description="Page number (1-based)")] = 1,
    page_size: Annotated[
        int, Query(description="Items per page")
    ] = settings.default_page_size,
) -> JSONResponse:
    """List one page of products.

    GET /api/v1/products?page_number=1&page_size=10 → 200 OK

    Out-of-range paging yields a 400 failure envelope.
    """
    response = await dispatcher.send(
        GetAllProducts(page_number=page_number, page_size=page_size)
    )
    return _render(response, product_page_envelope(response))


@products_router.get(
    "/{product_id}",
    response_model=EnvelopeResponse[ProductResponse],
)
async def get_product(
    product_id: Annotated[UUID, Path(description="Product UUID")],
    dispatcher: Annotated[Dispatcher, Depends(get_dispatcher)],
) -> JSONResponse:
    """Get a specific product.

    GET /api/v1/products/{id} → 200 OK / 404 Not Found
    """
    response = await dispatcher.send(GetProductById(product_id=product_id))
    return _render(response, product_envelope(response))


@products_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=EnvelopeResponse[ProductResponse],
)
async def create_product(
    data: ProductCreateRequest,
    dispatcher: Annotated[Dispatcher, Depends(get_dispatcher)],
) -> JSONResponse:
    """Create a product.

    POST /api/v1/products → 201 Created / 409 Conflict
    """
    response = await dispatcher.send(
        CreateProduct(name=data.name, quality=data.quality, quantity=data.quantity)
    )
    return _render(
        response, product_envelope(response), success_status=status.HTTP_201_CREATED
    )


@products_router.put(
    "/{product_id}",
    response_model=EnvelopeResponse[ProductResponse],
)
async def update_product(
    product_id: Annotated[UUID, Path(description="Product UUID")],
    data: ProductUpdateRequest,
    dispatcher: Annotated[Dispatcher, Depends(get_dispatcher)],
) -> JSONResponse:
    """Update name, quality and quantity of a product.

    PUT /api/v1/products/{id} → 200 OK / 404 Not Found
    """
    response = await dispatcher.send(
        UpdateProduct(
            product_id=product_id,
            name=data.name,
            quality=data.quality,
            quantity=data.quantity,
        )
    )
    return _render(response, product_envelope(response))


@products_router.delete(
    "/{product_id}",
    response_model=EnvelopeResponse[UUID],
)
async def delete_product(
    product_id: Annotated[UUID, Path(description="Product UUID")],
    dispatcher: Annotated[Dispatcher, Depends(get_dispatcher)],
) -> JSONResponse:
    """Delete a product.

    DELETE /api/v1/products/{id} → 200 OK / 404 Not Found
    """
    response = await dispatcher.send(DeleteProduct(product_id=product_id))
    return _render(response, product_id_envelope(response))
