"""
Settings for dbapi-helpers.

Everything here can be set through DBAPI_HELPERS_* environment variables
or a .env file: the default logger's level and format, the text that
replaces redacted credentials, and whether JSON exports escape non-ASCII.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HelperSettings(BaseSettings):
    """Library settings, read from DBAPI_HELPERS_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DBAPI_HELPERS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Statement redaction
    redaction_placeholder: str = Field(default="<removed>")

    # Export
    json_ensure_ascii: bool = Field(default=False)


@lru_cache()
def get_settings() -> HelperSettings:
    """Get cached settings instance."""
    return HelperSettings()
