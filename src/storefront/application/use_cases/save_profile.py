"""Use case for storing a customer profile snapshot."""

import json
from typing import Any, Optional

from storefront.domain.entities import CustomerProfile
from storefront.domain.exceptions import InvalidRequestError, StorageError
from storefront.domain.repositories import IProfileRepository
from storefront.domain.value_objects import RequestMeta
from storefront.infrastructure.config import get_logger

logger = get_logger(__name__)


def coerce_cart(value: Any) -> dict:
    """Accept the cart as an object or a JSON encoded string; anything else is empty."""
    if isinstance(value, dict):
        return value
    if isinstance(value, str):
        try:
            decoded = json.loads(value)
        except ValueError:
            return {}
        return decoded if isinstance(decoded, dict) else {}
    return {}


class SaveProfileUseCase:
    """Append a snapshot of the shopper's details and cart."""

    def __init__(self, profile_repository: IProfileRepository):
        self.profile_repo = profile_repository

    async def execute(
        self,
        email: Optional[str],
        name: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        cart: Any = None,
        meta: Optional[RequestMeta] = None,
    ) -> CustomerProfile:
        """
        Raises:
            InvalidRequestError: If the email is missing
            StorageError: If the snapshot could not be saved
        """
        try:
            profile = CustomerProfile(
                email=str(email or ""),
                name=str(name or "").strip(),
                phone=str(phone or "").strip(),
                address=str(address or "").strip(),
                cart_snapshot=coerce_cart(cart),
                meta=meta or RequestMeta(),
            )
        except ValueError as e:
            raise InvalidRequestError(str(e)) from e

        try:
            await self.profile_repo.add(profile)
        except StorageError as e:
            logger.error(f"save-profile error: {e.message}")
            raise StorageError("Unable to save profile") from e

        logger.info(f"Profile snapshot saved for {profile.email}")
        return profile
