"""Customer profile repository interface - Abstract definition."""

from abc import ABC, abstractmethod

from storefront.domain.entities import CustomerProfile


class IProfileRepository(ABC):
    """Append-only store of customer profile snapshots."""

    @abstractmethod
    async def add(self, profile: CustomerProfile) -> CustomerProfile:
        """
        Append a profile snapshot.

        Raises:
            StorageError: If the snapshot could not be written
        """
        pass
