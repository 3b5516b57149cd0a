"""Twilio client for sending SMS notifications."""

from typing import Optional

from fastapi.concurrency import run_in_threadpool
from twilio.base.exceptions import TwilioException
from twilio.rest import Client

from storefront.application.interfaces import ISmsSender
from storefront.infrastructure.config import get_logger

logger = get_logger(__name__)


class TwilioSmsSender(ISmsSender):
    """Concrete implementation of ISmsSender using the Twilio REST API."""

    def __init__(
        self,
        account_sid: Optional[str],
        auth_token: Optional[str],
        from_number: Optional[str],
    ):
        self.account_sid = account_sid
        self.auth_token = auth_token
        self.from_number = from_number
        self._client: Optional[Client] = None

    def is_configured(self) -> bool:
        return bool(self.account_sid and self.auth_token and self.from_number)

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = Client(self.account_sid, self.auth_token)
        return self._client

    async def send(self, to: str, body: str) -> bool:
        """Send the message in the threadpool; never raises."""
        return await run_in_threadpool(self._send, to, body)

    def _send(self, to: str, body: str) -> bool:
        if not self.is_configured():
            logger.warning("Twilio configuration missing. Skipping SMS.")
            return False
        if not to:
            logger.warning("No phone number given. Skipping SMS.")
            return False

        try:
            message = self.client.messages.create(from_=self.from_number, to=to, body=body)
        except (TwilioException, OSError) as e:
            logger.error(f"Failed to send SMS to {to}: {e}", extra={"channel": "sms", "recipient": to})
            return False

        logger.info(f"SMS sent to {to} ({message.sid})", extra={"channel": "sms", "recipient": to})
        return True
