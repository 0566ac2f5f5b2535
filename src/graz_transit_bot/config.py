"""Configuration management via environment variables."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SOURCE_URL = "https://www.holding-graz.at/de/category/verkehrsmeldungen/"
DEFAULT_DATABASE = Path("graz-opnv-bot.json")


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_prefix="GRAZ_TRANSIT_BOT_")

    source_url: str = SOURCE_URL
    database: Path = DEFAULT_DATABASE
    request_timeout: float = 30.0
    verbose: bool = False

    @field_validator("source_url")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        """Reject empty or whitespace-only values."""
        if not v or not v.strip():
            raise ValueError("must not be empty or whitespace")
        return v

    @field_validator("request_timeout")
    @classmethod
    def must_be_positive(cls, v: float) -> float:
        """Reject zero or negative timeouts."""
        if v <= 0:
            raise ValueError("must be greater than zero")
        return v
