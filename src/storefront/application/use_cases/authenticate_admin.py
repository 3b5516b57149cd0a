"""Use case for the admin login form."""

import hashlib
import hmac
from typing import Any, Optional

from storefront.domain.exceptions import (
    ConfigurationError,
    InvalidRequestError,
    UnauthorizedError,
)
from storefront.infrastructure.config import get_logger

logger = get_logger(__name__)

ADMIN_REDIRECT = "admin/messages.html"


def sha256_hex(value: str) -> str:
    """Hex SHA-256 digest, the format ADMIN_PASSWORD_HASH is configured in."""
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


def safe_compare(a: Optional[str], b: Optional[str]) -> bool:
    """Constant-time string comparison."""
    return hmac.compare_digest((a or "").encode("utf-8"), (b or "").encode("utf-8"))


class AuthenticateAdminUseCase:
    """Check the admin username and password and hand out the admin token."""

    def __init__(
        self,
        admin_username: Optional[str],
        admin_password_hash: Optional[str],
        admin_token: Optional[str] = None,
    ):
        self.admin_username = admin_username
        self.admin_password_hash = (admin_password_hash or "").strip().lower()
        self.admin_token = admin_token

    def execute(self, username: Optional[str], password: Optional[str]) -> dict[str, Any]:
        """
        Authenticate the admin.

        Raises:
            InvalidRequestError: If username or password is missing
            ConfigurationError: If admin credentials are not configured
            UnauthorizedError: If the credentials do not match
        """
        if not username or not password:
            raise InvalidRequestError("Username and password are required")

        if not self.admin_username or not self.admin_password_hash:
            raise ConfigurationError("Admin credentials not configured")

        user_match = safe_compare(username, self.admin_username)
        pass_match = safe_compare(sha256_hex(password), self.admin_password_hash)
        if not (user_match and pass_match):
            logger.warning("Admin login rejected")
            raise UnauthorizedError("Invalid credentials")

        logger.info("Admin logged in")
        return {
            "success": True,
            "token": self.admin_token,
            "redirect": ADMIN_REDIRECT,
        }
