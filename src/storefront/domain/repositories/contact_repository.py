"""Contact message repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional

from storefront.domain.entities import ContactMessage


class IContactRepository(ABC):
    """
    Abstract repository interface for ContactMessage entity.

    Concrete implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def add(self, message: ContactMessage) -> ContactMessage:
        """
        Persist a new contact message.

        Args:
            message: ContactMessage entity to store

        Returns:
            Stored ContactMessage

        Raises:
            StorageError: If the message could not be written
        """
        pass

    @abstractmethod
    async def list_recent(self, limit: Optional[int] = None) -> list[ContactMessage]:
        """
        List stored messages, newest first.

        Args:
            limit: Maximum number of messages; None or non-positive means all

        Returns:
            Messages ordered by creation time, newest first
        """
        pass
