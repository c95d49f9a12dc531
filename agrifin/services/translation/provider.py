"""
Translation Provider

The provider is the external third-party service that performs the actual
translation. The default implementation talks to the free MyMemory API
(no API key required).

This module handles:
1. The abstract provider contract the translation service depends on
2. Building the MyMemory request (text + language pair)
3. Turning transport and payload problems into typed ProviderErrors

The provider is untrusted: it may be slow, down, or return garbage. It
never decides whether a translation is usable - it reports what came back
and the service decides.
"""

from abc import ABC, abstractmethod
from typing import Optional

import httpx
import structlog

from agrifin.config import get_settings
from agrifin.models.translation import Language, ProviderResponse


logger = structlog.get_logger("agrifin.provider")


class ProviderError(Exception):
    """Base exception for translation provider errors."""
    pass


class ProviderUnavailableError(ProviderError):
    """Network/transport failure or timeout talking to the provider."""
    pass


class ProviderRejectedError(ProviderError):
    """Provider answered with a non-success status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(message)


class MalformedResponseError(ProviderError):
    """Provider answered but the payload could not be understood."""
    pass


class TranslationProviderInterface(ABC):
    """
    Abstract interface for translation providers.

    Any provider (MyMemory, LibreTranslate, a test fake) must implement
    fetch_translation.
    """

    name: str = "provider"

    @abstractmethod
    async def fetch_translation(
        self,
        text: str,
        source_language: Language,
        target_language: Language,
    ) -> ProviderResponse:
        """
        Translate `text` from `source_language` to `target_language`.

        Returns:
            ProviderResponse with the provider's status code and, on
            success, the translated text

        Raises:
            ProviderError: On transport failure or an unreadable reply
        """
        pass


class MyMemoryTranslationProvider(TranslationProviderInterface):
    """
    Provider backed by the MyMemory HTTP API.

    Request:
        GET {provider_url}?q=<text>&langpair=<source>|<target>[&de=<email>]

    Args:
        client: Optional shared httpx.AsyncClient, owned and closed by the
            caller. When omitted, a short-lived client is opened for every
            call.
    """

    name = "mymemory"

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self._settings = get_settings().translation
        self._client = client

    @staticmethod
    def build_language_pair(
        source_language: Language,
        target_language: Language,
    ) -> str:
        """MyMemory language pair directive, e.g. 'en|hi'."""
        return f"{Language(source_language).value}|{Language(target_language).value}"

    def _build_params(
        self,
        text: str,
        source_language: Language,
        target_language: Language,
    ) -> dict[str, str]:
        params = {
            "q": text,
            "langpair": self.build_language_pair(source_language, target_language),
        }
        if self._settings.contact_email:
            params["de"] = self._settings.contact_email
        return params

    async def _get(self, params: dict[str, str]) -> httpx.Response:
        headers = {"User-Agent": self._settings.user_agent}
        if self._client is not None:
            return await self._client.get(
                self._settings.provider_url,
                params=params,
                headers=headers,
                timeout=self._settings.timeout_seconds,
            )
        async with httpx.AsyncClient(timeout=self._settings.timeout_seconds) as client:
            return await client.get(
                self._settings.provider_url,
                params=params,
                headers=headers,
            )

    async def fetch_translation(
        self,
        text: str,
        source_language: Language,
        target_language: Language,
    ) -> ProviderResponse:
        params = self._build_params(text, source_language, target_language)

        try:
            response = await self._get(params)
        except httpx.TimeoutException as e:
            logger.warning("provider_timeout", provider=self.name, error=str(e))
            raise ProviderUnavailableError(f"MyMemory request timed out: {e}") from e
        except httpx.HTTPError as e:
            logger.warning("provider_transport_error", provider=self.name, error=str(e))
            raise ProviderUnavailableError(f"MyMemory request failed: {e}") from e

        if response.status_code >= 400:
            raise ProviderRejectedError(
                status_code=response.status_code,
                message=f"MyMemory returned HTTP {response.status_code}",
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"MyMemory returned non-JSON body: {e}") from e

        try:
            result = ProviderResponse.from_mymemory(payload)
        except ValueError as e:
            raise MalformedResponseError(str(e)) from e

        logger.debug(
            "provider_response",
            provider=self.name,
            langpair=params["langpair"],
            status_code=result.status_code,
            has_text=result.translated_text is not None,
        )
        return result

