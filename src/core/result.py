"""Result types for railway-oriented programming.

Repositories and handlers report expected failures (missing product,
duplicate id, storage outage) as values instead of raising. Callers
branch on the variant explicitly.

Usage:
    async def load(repo: ProductRepository, product_id: UUID) -> str:
        result = await repo.get_by_id(product_id)
        match result:
            case Success(value=product):
                return product.name
            case Failure(error=error):
                return error.message
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]
