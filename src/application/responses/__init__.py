"""Response envelopes returned across the application boundary."""

from src.application.responses.paged_response import PagedResponse
from src.application.responses.service_response import ServiceResponse

__all__ = [
    "PagedResponse",
    "ServiceResponse",
]
