"""JSON file implementation of customer profile repository."""

from fastapi.concurrency import run_in_threadpool

from storefront.domain.entities import CustomerProfile
from storefront.domain.repositories import IProfileRepository
from storefront.infrastructure.storage.json_file_store import JsonFileStore


class JsonProfileRepository(IProfileRepository):
    """Concrete implementation of IProfileRepository backed by profiles.json."""

    def __init__(self, store: JsonFileStore):
        self.store = store

    async def add(self, profile: CustomerProfile) -> CustomerProfile:
        """Append a profile snapshot."""
        await run_in_threadpool(self.store.append, profile.to_dict())
        return profile
