"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"
DEFAULT_DASHBOARD_URL = "https://dashboard.stripe.com"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    notification_email: str = Field(
        description="Address that receives every payment failure alert",
        min_length=3,
    )
    sendgrid_api_key: str | None = Field(
        default=None,
        description="SendGrid API key used for sending alert emails via the REST API",
    )
    sendgrid_sender: str | None = Field(
        default=None,
        description="Email address that will appear as the sender of alert messages",
        min_length=3,
    )
    stripe_dashboard_url: str = Field(
        default=DEFAULT_DASHBOARD_URL,
        description="Base URL used to build deep links into the Stripe dashboard",
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used to render event timestamps in notifications",
    )
    log_level: str = Field(default="INFO", description="Root logging level")

    @model_validator(mode="after")
    def _validate_addresses(self) -> "Settings":
        if "@" not in self.notification_email:
            raise ValueError("NOTIFICATION_EMAIL must be a valid email address")
        if bool(self.sendgrid_api_key) ^ bool(self.sendgrid_sender):
            raise ValueError(
                "SENDGRID_API_KEY and SENDGRID_SENDER must both be provided to enable email"
            )
        if self.sendgrid_sender and "@" not in self.sendgrid_sender:
            raise ValueError("SENDGRID_SENDER must be a valid email address")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["DEFAULT_DASHBOARD_URL", "Settings", "get_settings", "reset_settings_cache"]
