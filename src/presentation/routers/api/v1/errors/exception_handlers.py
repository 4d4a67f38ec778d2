"""Exception handlers for the FastAPI application.

Request validation runs before any endpoint, so its failures never reach
a handler. This module renders them as the same failure envelope the
handlers produce.

Handlers:
    validation_exception_handler: RequestValidationError -> 400 envelope

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.application.responses import ServiceResponse
from src.core.container import get_logger
from src.core.enums import ErrorCode
from src.schemas.product_schemas import failure_envelope

VALIDATION_FAILED_MESSAGE = "Request validation failed"


def _describe(error: dict) -> str:
    # loc is (source, field, ...), e.g. ("path", "product_id") or ("body", "quality")
    loc = [str(part) for part in error.get("loc", ())[1:]]
    field = ".".join(loc) if loc else "request"
    return f"{field}: {error.get('msg', 'invalid value')}"


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Render a RequestValidationError as a VALIDATION_FAILED envelope.

    Example:
        GET /api/v1/products/not-a-uuid → 400
        {
            "success": false,
            "value": null,
            "message": "Request validation failed: product_id: Input should be a valid UUID, ...",
            "error_code": "validation_failed"
        }

    Args:
        request: FastAPI Request object.
        exc: RequestValidationError raised while parsing the request.

    Returns:
        JSONResponse with the failure envelope.
    """
    # FastAPI registers this handler only for RequestValidationError
    assert isinstance(exc, RequestValidationError)

    problems = [_describe(error) for error in exc.errors()]
    message = f"{VALIDATION_FAILED_MESSAGE}: {'; '.join(problems)}"
    get_logger().warning(
        "request_validation_failed",
        method=request.method,
        path=request.url.path,
        errors=problems,
    )

    response: ServiceResponse[None] = ServiceResponse.fail(
        message, error_code=ErrorCode.VALIDATION_FAILED
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=failure_envelope(response).model_dump(mode="json"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
