"""
Error taxonomy for the service.

ApiError subclasses are client-facing (400/404) and carry the detail string
surfaced in the `{"errors": [{"detail": ...}]}` envelope. StoreError
subclasses are raised by the store gateway and always end up as a bare 500.
"""
from __future__ import annotations
from enum import Enum


class RejectionReason(str, Enum):
    INVALID_SHAPE = "InvalidShape"
    INVALID_KIND = "InvalidKind"
    INVALID_OPTIONS = "InvalidOptions"
    TOO_FEW_OPTIONS = "TooFewOptions"
    INVALID_OPTION_TYPES = "InvalidOptionTypes"
    INVALID_CORRECT_KEY = "InvalidCorrectKey"


# -------- Client errors --------

class ApiError(Exception):
    status_code: int = 400

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class RejectedPayload(ApiError):
    """Raised by the validators when a request body cannot become a record."""

    def __init__(self, reason: RejectionReason, detail: str) -> None:
        super().__init__(detail)
        self.reason = reason


class MalformedIdentifier(ApiError):
    """Raised when a path id is not a well-formed ObjectId."""


class NotFound(ApiError):
    status_code = 404


# -------- Store errors --------

class StoreError(Exception):
    """Base for failures inside the document store gateway."""

    def __init__(self, operation: str, cause: Exception | None = None) -> None:
        super().__init__(f"{operation} failed: {cause!r}")
        self.operation = operation
        self.cause = cause


class StoreUnavailable(StoreError):
    """The store could not be reached (connection refused, selection timeout)."""


class UnexpectedStoreError(StoreError):
    """Any other driver error."""
