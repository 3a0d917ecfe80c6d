"""Custom exceptions for ledger reporting."""

from typing import Optional


class LedgerReportingError(Exception):
    """Base exception for ledger reporting errors."""


class ValidationError(LedgerReportingError):
    """Raised when an account address or transaction hash is malformed."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Validation error on '{field}': {message}")


class NotFoundError(LedgerReportingError):
    """Raised when Horizon has no such account or transaction."""

    def __init__(self, resource: str, identifier: str, detail: Optional[str] = None):
        self.resource = resource
        self.identifier = identifier
        self.detail = detail
        message = f"{resource} not found: {identifier}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class NetworkError(LedgerReportingError):
    """Raised when a Horizon request fails in transport or returns an error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
