"""Application interfaces - Port definitions for external services."""

from .payment_gateway import IPaymentGateway
from .email_sender import IEmailSender
from .sms_sender import ISmsSender

__all__ = ["IPaymentGateway", "IEmailSender", "ISmsSender"]
