"""
Shared test fixtures.

No test talks to the real provider: translation calls go to FakeProvider,
HTTP-level tests use httpx.MockTransport.
"""

import asyncio
from typing import Optional

import pytest

from agrifin.config import get_settings
from agrifin.models.audit import AuditEvent
from agrifin.models.translation import Language, ProviderResponse
from agrifin.services.storage import InMemoryAuditStorage, StorageError
from agrifin.services.translation import TranslationProviderInterface


class FakeProvider(TranslationProviderInterface):
    """
    Scriptable provider.

    - translations: explicit replies; anything else becomes "<target>:<text>"
    - reject: texts answered with responseStatus 403
    - errors: texts for which the call raises the given exception
    - delays: seconds to sleep before answering, per text
    """

    name = "fake"

    def __init__(
        self,
        translations: Optional[dict[str, str]] = None,
        reject: Optional[set[str]] = None,
        errors: Optional[dict[str, Exception]] = None,
        delays: Optional[dict[str, float]] = None,
    ):
        self.translations = translations or {}
        self.reject = reject or set()
        self.errors = errors or {}
        self.delays = delays or {}
        self.calls: list[tuple[str, Language, Language]] = []

    async def fetch_translation(self, text, source_language, target_language):
        self.calls.append((text, source_language, target_language))

        delay = self.delays.get(text)
        if delay:
            await asyncio.sleep(delay)

        if text in self.errors:
            raise self.errors[text]
        if text in self.reject:
            return ProviderResponse(
                status_code=403,
                details="'AUTO' IS AN INVALID SOURCE LANGUAGE",
            )
        return ProviderResponse(
            status_code=200,
            translated_text=self.translations.get(
                text, f"{target_language.value}:{text}"
            ),
        )

    def call_count(self, text: Optional[str] = None) -> int:
        if text is None:
            return len(self.calls)
        return sum(1 for call in self.calls if call[0] == text)


class BrokenAuditStorage(InMemoryAuditStorage):
    """Audit store whose every write fails."""

    async def append_event(self, event: AuditEvent) -> bool:
        raise StorageError("audit backend unreachable")


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def make_provider():
    return FakeProvider


@pytest.fixture
def broken_storage():
    return BrokenAuditStorage()


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Drop cached settings and translation env overrides between tests."""
    for var in (
        "TRANSLATION_PROVIDER_URL",
        "TRANSLATION_TIMEOUT_SECONDS",
        "TRANSLATION_CONTACT_EMAIL",
        "TRANSLATION_USER_AGENT",
        "DEFAULT_LANGUAGE",
        "LOG_LEVEL",
        "DEBUG_MODE",
        "AUDIT_MAX_EVENTS",
    ):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
