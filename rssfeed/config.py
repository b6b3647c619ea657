"""Configuration management for rssfeed."""

import codecs
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rssfeed.elements import CHANNEL_ELEMENTS, ITEM_ELEMENTS


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="RSS_", extra="ignore")

    # Environment
    env: str = Field(default="dev", pattern="^(dev|prod)$")
    log_level: str = Field(default="INFO")

    # Timezone assumed for naive dates
    default_timezone: str = Field(default="UTC")

    # Allowed element names
    channel_elements: list[str] = Field(default_factory=lambda: list(CHANNEL_ELEMENTS))
    item_elements: list[str] = Field(default_factory=lambda: list(ITEM_ELEMENTS))

    # Rendering
    pretty_xml: bool = True
    xml_encoding: str = Field(default="utf-8")

    @field_validator("default_timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {value}") from e
        return value

    @field_validator("xml_encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {value}") from e
        return value

    @field_validator("channel_elements", "item_elements")
    @classmethod
    def _check_elements(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("Element whitelist must not be empty")
        # Keep first occurrence, drop duplicates
        return list(dict.fromkeys(value))


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
