"""FastAPI dependency injection setup."""

import hmac
from typing import Optional

from fastapi import Depends, Header, Query, Request

from storefront.application.interfaces import IEmailSender, IPaymentGateway, ISmsSender
from storefront.application.services import NotificationService
from storefront.application.use_cases import (
    AuthenticateAdminUseCase,
    HandlePaymentWebhookUseCase,
    InitializePaymentUseCase,
    ListContactMessagesUseCase,
    ListOrdersUseCase,
    RecordPaidOrderUseCase,
    SaveProfileUseCase,
    SubmitContactMessageUseCase,
    SubmitOrderUseCase,
    VerifyPaymentUseCase,
)
from storefront.domain.exceptions import UnauthorizedError
from storefront.domain.repositories import IContactRepository, IOrderRepository, IProfileRepository
from storefront.domain.value_objects import RequestMeta
from storefront.infrastructure.config import Settings, get_logger, get_settings
from storefront.infrastructure.notifications import SmtpEmailSender, TwilioSmsSender
from storefront.infrastructure.payments import PaystackGateway
from storefront.infrastructure.storage import (
    CONTACTS_FILE,
    ORDERS_FILE,
    PROFILES_FILE,
    JsonContactRepository,
    JsonFileStore,
    JsonOrderRepository,
    JsonProfileRepository,
)

logger = get_logger(__name__)


# Repository dependencies
def get_contact_repository(settings: Settings = Depends(get_settings)) -> IContactRepository:
    """Get contact message repository dependency."""
    return JsonContactRepository(JsonFileStore(settings.data_dir / CONTACTS_FILE, settings.lock_timeout))


def get_order_repository(settings: Settings = Depends(get_settings)) -> IOrderRepository:
    """Get order repository dependency."""
    return JsonOrderRepository(JsonFileStore(settings.data_dir / ORDERS_FILE, settings.lock_timeout))


def get_profile_repository(settings: Settings = Depends(get_settings)) -> IProfileRepository:
    """Get profile repository dependency."""
    return JsonProfileRepository(JsonFileStore(settings.data_dir / PROFILES_FILE, settings.lock_timeout))


# External service dependencies
def get_payment_gateway(settings: Settings = Depends(get_settings)) -> IPaymentGateway:
    """Get payment gateway dependency."""
    return PaystackGateway(
        secret_key=settings.paystack_secret_key,
        base_url=settings.paystack_base_url,
        timeout=settings.paystack_timeout,
    )


def get_email_sender(settings: Settings = Depends(get_settings)) -> IEmailSender:
    """Get email sender dependency."""
    return SmtpEmailSender(
        server=settings.smtp_server,
        port=settings.smtp_port,
        username=settings.smtp_email,
        password=settings.smtp_password,
        from_address=settings.mail_from,
        use_tls=settings.smtp_use_tls,
    )


def get_sms_sender(settings: Settings = Depends(get_settings)) -> ISmsSender:
    """Get SMS sender dependency."""
    return TwilioSmsSender(
        account_sid=settings.twilio_account_sid,
        auth_token=settings.twilio_auth_token,
        from_number=settings.twilio_from,
    )


def get_notification_service(
    settings: Settings = Depends(get_settings),
    email_sender: IEmailSender = Depends(get_email_sender),
    sms_sender: ISmsSender = Depends(get_sms_sender),
) -> NotificationService:
    """Get notification fan-out dependency."""
    return NotificationService(
        email_sender=email_sender,
        sms_sender=sms_sender,
        order_recipients=settings.order_recipients,
        contact_recipients=settings.contact_recipients,
        contact_phones=settings.contact_phones,
        store_name=settings.store_name,
    )


# Use case dependencies
def get_submit_contact_message_use_case(
    contact_repo: IContactRepository = Depends(get_contact_repository),
    notifications: NotificationService = Depends(get_notification_service),
) -> SubmitContactMessageUseCase:
    return SubmitContactMessageUseCase(contact_repo, notifications)


def get_list_contact_messages_use_case(
    contact_repo: IContactRepository = Depends(get_contact_repository),
) -> ListContactMessagesUseCase:
    return ListContactMessagesUseCase(contact_repo)


def get_authenticate_admin_use_case(
    settings: Settings = Depends(get_settings),
) -> AuthenticateAdminUseCase:
    return AuthenticateAdminUseCase(
        admin_username=settings.admin_username,
        admin_password_hash=settings.admin_password_hash,
        admin_token=settings.contact_admin_token,
    )


def get_initialize_payment_use_case(
    settings: Settings = Depends(get_settings),
    gateway: IPaymentGateway = Depends(get_payment_gateway),
) -> InitializePaymentUseCase:
    return InitializePaymentUseCase(gateway, currency=settings.paystack_currency)


def get_record_paid_order_use_case(
    order_repo: IOrderRepository = Depends(get_order_repository),
    notifications: NotificationService = Depends(get_notification_service),
) -> RecordPaidOrderUseCase:
    return RecordPaidOrderUseCase(order_repo, notifications)


def get_verify_payment_use_case(
    gateway: IPaymentGateway = Depends(get_payment_gateway),
    record_paid_order: RecordPaidOrderUseCase = Depends(get_record_paid_order_use_case),
) -> VerifyPaymentUseCase:
    return VerifyPaymentUseCase(gateway, record_paid_order)


def get_handle_payment_webhook_use_case(
    gateway: IPaymentGateway = Depends(get_payment_gateway),
    record_paid_order: RecordPaidOrderUseCase = Depends(get_record_paid_order_use_case),
) -> HandlePaymentWebhookUseCase:
    return HandlePaymentWebhookUseCase(gateway, record_paid_order)


def get_submit_order_use_case(
    order_repo: IOrderRepository = Depends(get_order_repository),
    notifications: NotificationService = Depends(get_notification_service),
) -> SubmitOrderUseCase:
    return SubmitOrderUseCase(order_repo, notifications)


def get_list_orders_use_case(
    order_repo: IOrderRepository = Depends(get_order_repository),
) -> ListOrdersUseCase:
    return ListOrdersUseCase(order_repo)


def get_save_profile_use_case(
    profile_repo: IProfileRepository = Depends(get_profile_repository),
) -> SaveProfileUseCase:
    return SaveProfileUseCase(profile_repo)


# Request helpers
def get_request_meta(request: Request) -> RequestMeta:
    """Browser details stored with form submissions."""
    headers = request.headers
    return RequestMeta(
        user_agent=headers.get("user-agent", ""),
        referer=headers.get("referer") or headers.get("referrer") or "",
    )


def parse_limit(limit: Optional[str] = Query(None, description="Maximum number of records")) -> Optional[int]:
    """Lenient ``limit`` query parameter: anything but a positive integer means no limit."""
    try:
        value = int(limit) if limit is not None else None
    except ValueError:
        return None
    if value is None or value <= 0:
        return None
    return value


def _check_admin_token(settings: Settings, provided: Optional[str]) -> None:
    """
    Validate an admin token against every configured admin token.

    With no token configured the listings stay open outside production.
    """
    tokens = settings.admin_tokens
    if not tokens:
        if settings.is_production:
            logger.warning("Admin listing requested but no admin token is configured")
            raise UnauthorizedError("Unauthorized")
        return
    if not provided or not any(
        hmac.compare_digest(provided.encode("utf-8"), token.encode("utf-8")) for token in tokens
    ):
        raise UnauthorizedError("Unauthorized")


def require_contact_admin(
    settings: Settings = Depends(get_settings),
    x_admin_token: Optional[str] = Header(None),
    key: Optional[str] = Query(None),
    token: Optional[str] = Query(None),
) -> None:
    """Admin gate for the contact message listing (X-Admin-Token, ?key= or ?token=)."""
    _check_admin_token(settings, x_admin_token or key or token)


def require_orders_admin(
    settings: Settings = Depends(get_settings),
    x_admin_key: Optional[str] = Header(None),
    key: Optional[str] = Query(None),
) -> None:
    """Admin gate for the order listing (X-Admin-Key or ?key=)."""
    _check_admin_token(settings, key or x_admin_key)
