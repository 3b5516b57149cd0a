"""Application Use Cases - One class per storefront operation."""

from .submit_contact_message import SubmitContactMessageUseCase
from .list_contact_messages import ListContactMessagesUseCase
from .authenticate_admin import AuthenticateAdminUseCase
from .initialize_payment import InitializePaymentUseCase
from .record_paid_order import RecordPaidOrderUseCase
from .verify_payment import VerifyPaymentUseCase
from .handle_payment_webhook import HandlePaymentWebhookUseCase
from .submit_order import SubmitOrderUseCase
from .list_orders import ListOrdersUseCase
from .save_profile import SaveProfileUseCase

__all__ = [
    "SubmitContactMessageUseCase",
    "ListContactMessagesUseCase",
    "AuthenticateAdminUseCase",
    "InitializePaymentUseCase",
    "RecordPaidOrderUseCase",
    "VerifyPaymentUseCase",
    "HandlePaymentWebhookUseCase",
    "SubmitOrderUseCase",
    "ListOrdersUseCase",
    "SaveProfileUseCase",
]
