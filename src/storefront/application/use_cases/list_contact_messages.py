"""Use case for the admin listing of contact messages."""

from typing import Any, Optional

from storefront.domain.repositories import IContactRepository


class ListContactMessagesUseCase:
    """Return stored contact messages, newest first."""

    def __init__(self, contact_repository: IContactRepository):
        self.contact_repo = contact_repository

    async def execute(self, limit: Optional[int] = None) -> dict[str, Any]:
        messages = await self.contact_repo.list_recent(limit)
        return {
            "count": len(messages),
            "messages": [message.to_dict() for message in messages],
        }
