"""Paged response envelope for multi-item queries.

The envelope only records paging data supplied by the caller. Slicing the
result set is the handler's job and happens before construction.

Failed paged responses keep all paging fields at zero.
"""

from dataclasses import dataclass
from typing import Self, TypeVar

from src.application.responses.service_response import ServiceResponse

T = TypeVar("T")


@dataclass(frozen=True, kw_only=True)
class PagedResponse(ServiceResponse[T]):
    """Response envelope with paging metadata.

    Attributes:
        page_number: Page that was returned (1-based for list queries).
        page_size: Requested page size.
        total_count: Total items available across all pages.
    """

    page_number: int = 0
    page_size: int = 0
    total_count: int = 0

    def __post_init__(self) -> None:
        """Enforce envelope invariants and non-negative paging fields.

        Raises:
            ValueError: If any paging field is negative or the envelope is
                inconsistent.
        """
        super().__post_init__()
        for name in ("page_number", "page_size", "total_count"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative")

    @classmethod
    def ok(
        cls,
        value: T,
        *,
        page_number: int = 0,
        page_size: int = 0,
        total_count: int = 0,
    ) -> Self:
        """Build a successful paged envelope.

        Args:
            value: Page of items (already sliced).
            page_number: Page that was returned.
            page_size: Requested page size.
            total_count: Total items available.

        Returns:
            Envelope with success=True and paging metadata.
        """
        return cls(
            success=True,
            value=value,
            page_number=page_number,
            page_size=page_size,
            total_count=total_count,
        )

    @property
    def total_pages(self) -> int:
        """Number of pages implied by total_count and page_size.

        Returns:
            Page count (0 when page_size is 0).
        """
        if self.page_size == 0:
            return 0
        return (self.total_count + self.page_size - 1) // self.page_size
