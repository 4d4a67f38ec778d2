"""Uniform response envelope returned by every handler.

Handlers never return bare DTOs or raise for expected failures: they
always hand back a ``ServiceResponse``. Callers inspect ``success`` before
trusting ``value``.

Invariant (checked at construction):
    success=True  -> value present, message empty, no error code
    success=False -> value absent, message and error code present

Usage:
    response = ServiceResponse.ok(dto)
    response = ServiceResponse.fail("Product not found", error_code=ErrorCode.NOT_FOUND)
    response = ServiceResponse.from_error(result.error)
"""

from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from src.core.enums import ErrorCode
from src.core.errors import DomainError

T = TypeVar("T")


@dataclass(frozen=True, kw_only=True)
class ServiceResponse(Generic[T]):
    """Response envelope for a single payload.

    Attributes:
        success: Whether the request completed.
        value: Payload on success, None on failure.
        message: Human-readable failure reason (empty on success).
        error_code: Kind of failure (None on success).
    """

    success: bool
    value: T | None = None
    message: str = ""
    error_code: ErrorCode | None = None

    def __post_init__(self) -> None:
        """Enforce the success/payload invariant.

        Raises:
            ValueError: If the envelope mixes success and failure state.
        """
        if self.success:
            if self.value is None:
                raise ValueError("Successful response requires a value")
            if self.error_code is not None or self.message:
                raise ValueError("Successful response cannot carry an error")
        else:
            if self.value is not None:
                raise ValueError("Failed response cannot carry a value")
            if self.error_code is None or not self.message:
                raise ValueError("Failed response requires a message and error code")

    @classmethod
    def ok(cls, value: T) -> Self:
        """Build a successful envelope.

        Args:
            value: Payload to wrap.

        Returns:
            Envelope with success=True.
        """
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, message: str, *, error_code: ErrorCode) -> Self:
        """Build a failed envelope.

        Args:
            message: Human-readable reason.
            error_code: Kind of failure.

        Returns:
            Envelope with success=False and no value.
        """
        return cls(success=False, message=message, error_code=error_code)

    @classmethod
    def from_error(cls, error: DomainError) -> Self:
        """Build a failed envelope from an error value.

        Args:
            error: Error returned by a repository or validation step.

        Returns:
            Envelope carrying the error's message and code.
        """
        return cls.fail(error.message, error_code=error.code)
