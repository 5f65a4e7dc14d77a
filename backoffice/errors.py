"""
Domain errors raised by the service layer.

Each error carries the HTTP status it maps to; ``backoffice.main`` registers a
single handler that renders them as ``{"detail": message}``. Nothing here is
retried: the caller sees the message of the step that failed.
"""

from typing import Optional


class BackofficeError(Exception):
    """Base class for errors surfaced to API callers"""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(BackofficeError):
    """Requested record does not exist"""

    status_code = 404


class ValidationFailed(BackofficeError):
    """Input rejected before reaching the store"""

    status_code = 400


class ConflictError(BackofficeError):
    """Store rejected a write because of a uniqueness constraint"""

    status_code = 409


class StoreError(BackofficeError):
    """Any other store or transport failure; the underlying message is kept"""

    status_code = 500
