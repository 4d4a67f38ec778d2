"""Error codes carried by error values and response envelopes.

Every failure that leaves a handler is tagged with one of these codes so
the transport layer can branch on the kind of failure without parsing
messages.
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Resource errors
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"

    # Request errors
    VALIDATION_FAILED = "validation_failed"

    # Processing errors
    MAPPING_FAILURE = "mapping_failure"
    STORAGE_FAILURE = "storage_failure"
    CANCELLED = "cancelled"
