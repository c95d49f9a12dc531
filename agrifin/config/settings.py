"""
Configuration Management for AgriFin

Uses pydantic-settings for type-safe configuration from environment variables.

All configuration is centralized here so every external dependency
(currently only the translation provider) is visible in one place and
validated at startup.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from agrifin.models.translation import Language


class TranslationSettings(BaseSettings):
    """Dynamic translation provider configuration (MyMemory by default)."""

    model_config = SettingsConfigDict(
        env_prefix="TRANSLATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    provider_url: str = Field(
        default="https://api.mymemory.translated.net/get",
        description="Endpoint of the MyMemory-compatible translation API"
    )
    timeout_seconds: float = Field(
        default=10.0,
        ge=0.5,
        le=60.0,
        description="Timeout for a single provider call"
    )
    contact_email: Optional[str] = Field(
        default=None,
        description="Optional contact email sent to MyMemory (raises the free quota)"
    )
    user_agent: str = Field(
        default="AgriFin/1.0",
        description="User-Agent header sent with provider requests"
    )

    @field_validator('provider_url')
    @classmethod
    def validate_provider_url(cls, v: str) -> str:
        """Provider URL must be an absolute http(s) URL."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("provider_url must start with http:// or https://")
        return v


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum level for local structured logs"
    )

    # Audit
    audit_max_events: int = Field(
        default=10_000,
        ge=1,
        description="Newest audit events kept by the in-memory audit store"
    )

    # Languages
    default_language: str = Field(
        default="en",
        description="Language the UI starts in; text in this language is never sent for translation"
    )

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator('default_language')
    @classmethod
    def validate_default_language(cls, v: str) -> str:
        return Language(v.strip().lower()).value


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def translation(self) -> TranslationSettings:
        return TranslationSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, plus
    {setting_name}_error entries for the ones that failed.
    """
    results = {}

    settings = get_settings()

    try:
        _ = settings.translation
        results["translation"] = True
    except Exception as e:
        results["translation"] = False
        results["translation_error"] = str(e)

    try:
        _ = settings.app
        results["app"] = True
    except Exception as e:
        results["app"] = False
        results["app_error"] = str(e)

    return results
