"""Dynamic translation services package."""

from agrifin.services.translation.cache import TranslationCache
from agrifin.services.translation.provider import (
    MalformedResponseError,
    MyMemoryTranslationProvider,
    ProviderError,
    ProviderRejectedError,
    ProviderUnavailableError,
    TranslationProviderInterface,
)
from agrifin.services.translation.service import TranslationService
from agrifin.services.translation.session import LanguageSession

__all__ = [
    "LanguageSession",
    "MalformedResponseError",
    "MyMemoryTranslationProvider",
    "ProviderError",
    "ProviderRejectedError",
    "ProviderUnavailableError",
    "TranslationCache",
    "TranslationProviderInterface",
    "TranslationService",
]
