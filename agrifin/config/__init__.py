"""Configuration package."""

from agrifin.config.settings import (
    AppSettings,
    Settings,
    TranslationSettings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "Settings",
    "TranslationSettings",
    "get_settings",
    "validate_all_settings",
]
