"""
Client configuration with environment-driven settings.

Credentials and API endpoints are read from ``TWILIO_*`` environment
variables (or a local ``.env`` file). Arguments passed explicitly to a client
always take precedence over these values.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """REST client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TWILIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Credentials
    account_sid: str = Field(default="")
    auth_token: str = Field(default="")

    # REST API (2010-04-01, ".json" suffixed paths)
    api_host: str = Field(default="api.twilio.com")
    api_version: str = Field(default="2010-04-01")

    # TaskRouter API
    taskrouter_host: str = Field(default="taskrouter.twilio.com")
    taskrouter_version: str = Field(default="v1")

    timeout_seconds: float = Field(default=30.0, gt=0, le=300)
    log_level: str = "INFO"


def get_settings() -> ClientSettings:
    return ClientSettings()
