"""Best-effort email and SMS fan-out."""

import asyncio
from typing import Awaitable, Optional

from storefront.application.interfaces import IEmailSender, ISmsSender
from storefront.application.services import message_templates as templates
from storefront.application.services.message_templates import EmailContent
from storefront.domain.entities import ContactMessage, Order
from storefront.infrastructure.config import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Sends storefront notifications over every configured channel.

    Channels run concurrently. A channel that is not configured is skipped
    and a channel that fails is logged; neither affects the caller.
    """

    def __init__(
        self,
        email_sender: IEmailSender,
        sms_sender: ISmsSender,
        order_recipients: Optional[list[str]] = None,
        contact_recipients: Optional[list[str]] = None,
        contact_phones: Optional[list[str]] = None,
        store_name: str = "Ebou Jewelry",
    ):
        self.email_sender = email_sender
        self.sms_sender = sms_sender
        self.order_recipients = order_recipients or []
        self.contact_recipients = contact_recipients or []
        self.contact_phones = contact_phones or []
        self.store_name = store_name

    async def notify_contact_message(self, message: ContactMessage) -> list[bool]:
        """Tell the shop owner about a new contact form submission."""
        body = templates.contact_message_sms(message)
        jobs = [("email", self._email(self.contact_recipients, templates.contact_message_email(message)))]
        jobs.extend(("sms", self._sms(phone, body)) for phone in self.contact_phones)
        return await self._dispatch(f"contact message from {message.email}", jobs, event="contact-message")

    async def notify_order_confirmation(self, order: Order) -> list[bool]:
        """Send the order receipt to the shop inbox (or the customer) and the customer's phone."""
        recipients = self.order_recipients or [order.customer.email]
        jobs = [
            ("email", self._email(recipients, templates.order_confirmation_email(order, self.store_name))),
            ("sms", self._sms(order.customer.phone, templates.order_confirmation_sms(order))),
        ]
        return await self._dispatch(
            f"order confirmation {order.order_id}", jobs, event="order-confirmation", order_id=order.order_id
        )

    async def notify_payment_received(self, order: Order) -> list[bool]:
        """Send the payment receipt once the gateway confirmed the payment."""
        recipients = self.order_recipients or [order.customer.email]
        jobs = [
            ("email", self._email(recipients, templates.payment_received_email(order, self.store_name))),
            ("sms", self._sms(order.customer.phone, templates.payment_received_sms(order))),
        ]
        return await self._dispatch(
            f"payment received {order.order_id}",
            jobs,
            event="payment-received",
            order_id=order.order_id,
            reference=order.payment_ref,
        )

    async def _email(self, recipients: list[str], content: EmailContent) -> bool:
        recipients = [email for email in recipients if email]
        if not self.email_sender.is_configured():
            logger.info(f"Email skipped - sender not configured ({content.subject})", extra={"channel": "email"})
            return False
        if not recipients:
            logger.info(f"Email skipped - no recipients ({content.subject})", extra={"channel": "email"})
            return False
        return await self.email_sender.send(recipients, content.subject, content.text, content.html)

    async def _sms(self, to: str, body: str) -> bool:
        if not self.sms_sender.is_configured():
            logger.info("SMS skipped - sender not configured", extra={"channel": "sms"})
            return False
        if not to:
            logger.info("SMS skipped - no phone number", extra={"channel": "sms"})
            return False
        return await self.sms_sender.send(to, body)

    async def _dispatch(
        self,
        label: str,
        jobs: list[tuple[str, Awaitable[bool]]],
        **context: str,
    ) -> list[bool]:
        channels = [channel for channel, _ in jobs]
        results = await asyncio.gather(*(job for _, job in jobs), return_exceptions=True)
        delivered = []
        for channel, result in zip(channels, results):
            if isinstance(result, Exception):
                logger.error(
                    f"Notification for {label} failed: {result}",
                    exc_info=result,
                    extra={**context, "channel": channel},
                )
                delivered.append(False)
            else:
                delivered.append(bool(result))
        logger.info(f"Notifications for {label}: {sum(delivered)}/{len(delivered)} delivered", extra=context)
        return delivered
