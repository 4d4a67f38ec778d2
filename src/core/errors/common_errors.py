"""Common error values shared by all layers.

Error Types:
- ValidationError: Request parameters outside accepted bounds
- NotFoundError: Requested identifier absent in storage
- ConflictError: Identifier already taken

Usage:
    from src.core.errors import NotFoundError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=NotFoundError(
        code=ErrorCode.NOT_FOUND,
        message="Product not found",
        resource_type="Product",
        resource_id=str(product_id),
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Request validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (Product).
        resource_id: ID of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate identifier).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (id).
        details: Additional context.
    """

    resource_type: str
    conflicting_field: str | None = None
