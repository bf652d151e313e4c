"""
Configuration module - loads settings from environment / .env file
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from ZOMATO_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ZOMATO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Target site
    base_url: str = Field(default="https://www.zomato.com")

    # HTTP
    request_timeout_seconds: float = Field(default=20.0, gt=0)
    # Zomato misbehaves with some header sets, so we look like desktop Firefox
    user_agent: str = Field(
        default="Mozilla/5.0 (X11; Fedora; Linux x86_64; rv:60.0) Gecko/20100101 Firefox/60.0"
    )
    accept_language: str = Field(default="en-US,en;q=0.5")

    # Example programs
    log_level: str = Field(default="INFO")


settings = Settings()
