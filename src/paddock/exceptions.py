"""Custom exceptions for the paddock data layer."""

from __future__ import annotations


class PaddockError(Exception):
    """Base exception for all paddock errors."""


class RecordFormatError(PaddockError, ValueError):
    """Raised when a CSV field cannot be converted to its declared type."""


class RecordLengthError(PaddockError, IndexError):
    """Raised when a CSV line has fewer fields than its record schema."""

    def __init__(self, record: str, expected: int, found: int) -> None:
        self.record = record
        self.expected = expected
        self.found = found
        super().__init__(f"{record} line has {found} fields, expected {expected}")


class MissingDataError(PaddockError, LookupError):
    """Raised when a required path is absent from an API response."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Missing required path: {path}")


class ErgastError(PaddockError):
    """Base exception for errors talking to the results API."""


class ErgastConnectionError(ErgastError):
    """Raised when the client cannot connect to the API."""


class ErgastTimeoutError(ErgastError):
    """Raised when a request to the API times out."""


class ErgastAPIError(ErgastError):
    """Raised when the API returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class ErgastDecodeError(ErgastError):
    """Raised when the API response body is not a JSON object."""
