"""
Error kinds raised while serving generation requests.

Every ``GatewayError`` carries the status code and the caller-safe message
that end up in the failure envelope.
"""
from typing import Optional


class GatewayError(Exception):
    """Base class for errors that map directly to an HTTP response."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(GatewayError):
    """Missing/empty text, missing file, bad content type or disallowed MIME."""

    status_code = 400


class PayloadTooLargeError(GatewayError):
    status_code = 413

    @classmethod
    def for_limit(cls, max_size: int) -> "PayloadTooLargeError":
        return cls(f"File too large. Maximum size is {max_size // (1024 * 1024)} MB")


class UpstreamError(GatewayError):
    """Model Client failure, reported with a generic message."""

    status_code = 500


class ModelClientError(Exception):
    """Raised by the model client when the vendor call yields no usable text."""
