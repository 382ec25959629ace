"""Settings with defaults.

All defaults are defined here in the schema. Uses Pydantic Settings for
automatic env var loading.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = "eventcast analytics library"


class GoogleAnalyticsConfig(BaseModel):
    """Credentials and mode for the Google Analytics adapter."""

    tracking_id: Optional[str] = Field(None, description="Property tracking ID (tid)")
    client_id: Optional[str] = Field(None, description="Anonymous client ID (cid)")
    debug: bool = Field(False, description="Send hits to the validation endpoint")
    endpoint: Optional[str] = Field(None, description="Override the collection endpoint")


class PlausibleConfig(BaseModel):
    """Credentials for the Plausible adapter."""

    domain: Optional[str] = Field(None, description="Site domain registered in Plausible")
    api_key: Optional[str] = Field(None, description="Sites API key used for goal provisioning")
    client_ip: Optional[str] = Field(None, description="IP address forwarded to Plausible")
    user_agent: Optional[str] = Field(None, description="User agent forwarded to Plausible")
    endpoint: Optional[str] = Field(None, description="Override the API base URL")


class Settings(BaseSettings):
    """Eventcast settings with automatic env var loading.

    Env vars use the ``EVENTCAST_`` prefix and double underscore as nested
    delimiter:
        EVENTCAST_GOOGLE_ANALYTICS__TRACKING_ID=UA-12345-1
        EVENTCAST_PLAUSIBLE__API_KEY=...
    """

    model_config = SettingsConfigDict(
        env_prefix="EVENTCAST_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    ANALYTICS_ENABLED: bool = True
    LOG_LEVEL: str = "INFO"
    USER_AGENT: str = DEFAULT_USER_AGENT

    GOOGLE_ANALYTICS: GoogleAnalyticsConfig = Field(default_factory=GoogleAnalyticsConfig)
    PLAUSIBLE: PlausibleConfig = Field(default_factory=PlausibleConfig)

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level name and reject unknown levels."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level
