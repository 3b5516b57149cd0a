"""Domain exceptions carrying the HTTP status they surface as."""

from typing import Any, Optional


class StorefrontError(Exception):
    """
    Base error for storefront operations.

    Attributes:
        message: Human readable error message returned to the client
        status_code: HTTP status the error maps to
        extra: Additional fields merged into the error response body
        expose_message: Whether the body carries ``message`` under ``error``;
            gateway outcomes that answer with ``ok: false`` leave it out
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        expose_message: bool = True,
        **extra: Any,
    ):
        super().__init__(message)
        self.message = message
        self.expose_message = expose_message
        if status_code is not None:
            self.status_code = status_code
        self.extra = extra

    def to_dict(self) -> dict:
        """Render the error as a response body."""
        if not self.expose_message:
            return dict(self.extra)
        return {"error": self.message, **self.extra}


class InvalidRequestError(StorefrontError):
    """Request is missing required fields or carries invalid values."""

    status_code = 400


class UnauthorizedError(StorefrontError):
    """Caller did not present valid credentials."""

    status_code = 401


class ConfigurationError(StorefrontError):
    """A required server-side setting is missing."""

    status_code = 500


class StorageError(StorefrontError):
    """A JSON store could not be written."""

    status_code = 500


class PaymentGatewayError(StorefrontError):
    """The payment gateway could not be reached or answered unexpectedly."""

    status_code = 502


class PaymentVerificationError(StorefrontError):
    """The gateway reported that a payment did not succeed."""

    status_code = 400
