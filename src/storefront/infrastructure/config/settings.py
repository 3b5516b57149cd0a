"""Application settings using Pydantic Settings for type-safe configuration."""

from functools import lru_cache
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


def parse_list(value: Optional[str]) -> list[str]:
    """Split a comma-separated setting into its non-empty, trimmed entries."""
    return [item.strip() for item in (value or "").split(",") if item.strip()]


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    All settings are type-safe and validated by Pydantic. Secrets are
    optional so the service starts without them; the operations that need
    a missing secret answer with a configuration error instead.
    """
    
    # Application
    app_name: str = "Ebou Jewelry Storefront"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"
    store_name: str = "Ebou Jewelry"
    
    # API
    api_prefix: str = "/api"
    cors_origins: list[str] = ["*"]
    
    # Storage
    data_dir: Path = Path("data")
    lock_timeout: float = 10.0
    
    # Paystack
    paystack_secret_key: Optional[str] = None
    paystack_base_url: str = "https://api.paystack.co"
    paystack_currency: str = "GHS"
    paystack_timeout: float = 30.0
    
    # Admin access
    admin_username: Optional[str] = None
    admin_password_hash: Optional[str] = None  # hex SHA-256 of the password
    contact_admin_token: Optional[str] = None
    admin_api_key: Optional[str] = None
    
    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    # SMTP / Email Configuration
    smtp_server: Optional[str] = None
    smtp_port: int = 587
    smtp_email: Optional[str] = None
    smtp_password: Optional[str] = None
    smtp_use_tls: bool = True
    mail_from: str = "no-reply@example.com"
    order_notify_emails: str = ""  # Comma-separated list of recipient emails
    contact_notify_emails: str = ""  # Comma-separated list of recipient emails
    
    # Twilio / SMS Configuration
    twilio_account_sid: Optional[str] = None
    twilio_auth_token: Optional[str] = None
    twilio_from: Optional[str] = None
    contact_notify_phones: str = ""  # Comma-separated list of phone numbers
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"
    
    @property
    def admin_tokens(self) -> list[str]:
        """Configured tokens that unlock the admin listings."""
        return [token for token in (self.contact_admin_token, self.admin_api_key) if token]

    @property
    def order_recipients(self) -> list[str]:
        """Fixed recipients of order emails; empty means the customer."""
        return parse_list(self.order_notify_emails)

    @property
    def contact_recipients(self) -> list[str]:
        """Recipients of contact form notifications."""
        return (
            parse_list(self.contact_notify_emails)
            or parse_list(self.order_notify_emails)
            or parse_list(self.smtp_email or self.mail_from)
        )

    @property
    def contact_phones(self) -> list[str]:
        return parse_list(self.contact_notify_phones)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    
    Returns:
        Singleton Settings instance
    """
    return Settings()
