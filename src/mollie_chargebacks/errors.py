"""
Mollie chargebacks error types.
"""

from typing import Any, Optional


class MollieError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class RequestConstructionError(MollieError):
    """Inputs could not be turned into a valid API request."""

    def __init__(self, message: str, code: str = "request_error"):
        super().__init__(code, message)


class TransportError(MollieError):
    """Network failure or non-success HTTP status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__("transport_error", message, details)
        self.status_code = status_code


class DecodeError(MollieError):
    """Response body is not JSON of the expected shape."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("decode_error", message, details)
