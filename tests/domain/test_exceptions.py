"""Tests for the error response bodies."""

from storefront.domain.exceptions import (
    InvalidRequestError,
    PaymentGatewayError,
    PaymentVerificationError,
    UnauthorizedError,
)


class TestStorefrontError:
    """Errors render as JSON bodies with their HTTP status."""

    def test_message_and_extra(self):
        """Test that the message is rendered under error with the extra fields."""
        error = PaymentGatewayError("Unexpected paystack response", raw=None)
        assert error.status_code == 502
        assert error.to_dict() == {"error": "Unexpected paystack response", "raw": None}

    def test_status_override(self):
        """Test that a status passed to the constructor wins over the class default."""
        error = PaymentGatewayError("internal error", status_code=500)
        assert error.status_code == 500
        assert PaymentGatewayError.status_code == 502

    def test_class_defaults(self):
        """Test the default status of the client errors."""
        assert InvalidRequestError("Invalid amount").status_code == 400
        assert UnauthorizedError("Unauthorized").status_code == 401

    def test_hidden_message(self):
        """Test that a gateway outcome body carries only its own fields."""
        error = PaymentVerificationError(
            "Payment not verified",
            expose_message=False,
            ok=False,
            verified=False,
            reason="Declined",
            raw={"status": True},
        )
        assert error.message == "Payment not verified"
        assert error.to_dict() == {"ok": False, "verified": False, "reason": "Declined", "raw": {"status": True}}
