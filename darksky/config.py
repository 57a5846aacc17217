"""Client configuration pulled from environment variables via pydantic."""
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.darksky.net/forecast"
DEFAULT_TIMEOUT_SECONDS = 10.0


class Settings(BaseSettings):
    """Environment-driven configuration for the Dark Sky client.

    Access keys and coordinates are deliberately absent: callers pass them
    per request.
    """
    model_config = SettingsConfigDict(env_prefix="DARKSKY_", extra="ignore")

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @field_validator("base_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the endpoint so URL assembly never doubles a slash."""
        return str(v).rstrip("/")


settings = Settings()
