"""Use case for accepting a contact form submission."""

from typing import Optional

from storefront.application.services import NotificationService
from storefront.domain.entities import ContactMessage
from storefront.domain.exceptions import InvalidRequestError, StorageError
from storefront.domain.repositories import IContactRepository
from storefront.domain.value_objects import RequestMeta
from storefront.infrastructure.config import get_logger

logger = get_logger(__name__)


def _clean(value: Optional[str]) -> str:
    return str(value or "").strip()


class SubmitContactMessageUseCase:
    """Store a contact message, then notify the shop owner."""

    def __init__(
        self,
        contact_repository: IContactRepository,
        notifications: NotificationService,
    ):
        self.contact_repo = contact_repository
        self.notifications = notifications

    async def execute(
        self,
        name: Optional[str],
        email: Optional[str],
        message: Optional[str],
        phone: Optional[str] = None,
        topic: Optional[str] = None,
        source: Optional[str] = None,
        meta: Optional[RequestMeta] = None,
    ) -> ContactMessage:
        """
        Persist and announce a contact message.

        Raises:
            InvalidRequestError: If name, email or message is missing
            StorageError: If the message could not be saved
        """
        try:
            entry = ContactMessage(
                name=_clean(name),
                email=_clean(email),
                message=_clean(message),
                phone=_clean(phone),
                topic=_clean(topic) or "General",
                source=_clean(source) or "contact-form",
                meta=meta or RequestMeta(),
            )
        except ValueError as e:
            raise InvalidRequestError(str(e)) from e

        try:
            await self.contact_repo.add(entry)
        except StorageError as e:
            logger.error(f"Contact message save error: {e.message}")
            raise StorageError("Unable to save contact message") from e

        logger.info(f"Contact message received from {entry.email} ({entry.topic})")
        await self.notifications.notify_contact_message(entry)
        return entry
