"""JSON file implementation of contact message repository."""

from typing import Any, Optional

from fastapi.concurrency import run_in_threadpool

from storefront.domain.clock import newest_first
from storefront.domain.entities import ContactMessage
from storefront.domain.repositories import IContactRepository
from storefront.domain.value_objects import RequestMeta
from storefront.infrastructure.config import get_logger
from storefront.infrastructure.storage.json_file_store import JsonFileStore

logger = get_logger(__name__)


class JsonContactRepository(IContactRepository):
    """Concrete implementation of IContactRepository backed by contacts.json."""

    def __init__(self, store: JsonFileStore):
        """Initialize repository with its file store."""
        self.store = store

    async def add(self, message: ContactMessage) -> ContactMessage:
        """Append a contact message."""
        await run_in_threadpool(self.store.append, message.to_dict())
        return message

    async def list_recent(self, limit: Optional[int] = None) -> list[ContactMessage]:
        """List messages newest first, optionally truncated to ``limit``."""
        records = await run_in_threadpool(self.store.read)
        messages = []
        for record in records:
            message = self._record_to_entity(record)
            if message is not None:
                messages.append(message)

        ordered = newest_first(messages, key=lambda m: m.created_at)
        if limit is not None and limit > 0:
            return ordered[:limit]
        return ordered

    def _record_to_entity(self, record: dict[str, Any]) -> Optional[ContactMessage]:
        """Convert a stored record to a domain entity, skipping broken ones."""
        try:
            return ContactMessage(
                name=str(record.get("name") or ""),
                email=str(record.get("email") or ""),
                message=str(record.get("message") or ""),
                phone=str(record.get("phone") or ""),
                topic=str(record.get("topic") or "General"),
                source=str(record.get("source") or "contact-form"),
                created_at=str(record.get("createdAt") or ""),
                meta=RequestMeta.from_dict(record.get("meta")),
            )
        except ValueError as e:
            logger.warning(f"Skipping unreadable contact record: {e}")
            return None
