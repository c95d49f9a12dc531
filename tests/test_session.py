"""Tests for LanguageSession."""

import asyncio

import pytest

from agrifin.audit import AuditLogger
from agrifin.models.audit import AuditEventType
from agrifin.models.translation import Language
from agrifin.services.storage import InMemoryAuditStorage
from agrifin.services.translation import LanguageSession, TranslationService


def run(coro):
    return asyncio.run(coro)


class TestLanguageSession:

    def test_starts_in_default_language(self, fake_provider):
        session = LanguageSession(TranslationService(provider=fake_provider))

        assert session.language == Language.ENGLISH
        assert session.default_language == Language.ENGLISH
        assert session.is_translating is False

    def test_default_language_text_is_not_sent(self, fake_provider):
        session = LanguageSession(TranslationService(provider=fake_provider))

        assert run(session.translate_dynamic("Net Profit")) == "Net Profit"
        assert fake_provider.call_count() == 0

    def test_translates_into_current_language(self, fake_provider):
        session = LanguageSession(TranslationService(provider=fake_provider))
        run(session.set_language("hi"))

        assert run(session.translate_dynamic("Net Profit")) == "hi:Net Profit"
        assert fake_provider.calls[0][2] == Language.HINDI

    def test_toggle_language(self, fake_provider):
        session = LanguageSession(TranslationService(provider=fake_provider))

        assert run(session.toggle_language()) == Language.HINDI
        assert run(session.toggle_language()) == Language.ENGLISH

    def test_unsupported_language_is_rejected(self, fake_provider):
        session = LanguageSession(TranslationService(provider=fake_provider))

        with pytest.raises(ValueError):
            run(session.set_language("fr"))
        assert session.language == Language.ENGLISH

    def test_failure_returns_original_text(self, make_provider):
        provider = make_provider(errors={"Net Loss": RuntimeError("offline")})
        session = LanguageSession(
            TranslationService(provider=provider),
            language=Language.HINDI,
        )

        assert run(session.translate_dynamic("Net Loss")) == "Net Loss"
        assert session.is_translating is False

    def test_is_translating_while_in_flight(self, make_provider):
        provider = make_provider(delays={"Crop Planning": 0.05})
        session = LanguageSession(
            TranslationService(provider=provider),
            language=Language.HINDI,
        )

        async def observe():
            task = asyncio.create_task(session.translate_dynamic("Crop Planning"))
            await asyncio.sleep(0.01)
            during = session.is_translating
            result = await task
            return during, result, session.is_translating

        during, result, after = run(observe())

        assert during is True
        assert result == "hi:Crop Planning"
        assert after is False

    def test_translate_many(self, make_provider):
        provider = make_provider(reject={"Tips"})
        session = LanguageSession(
            TranslationService(provider=provider),
            language=Language.HINDI,
        )

        assert run(session.translate_many(["Income", "Tips", "Expenses"])) == [
            "hi:Income",
            "Tips",
            "hi:Expenses",
        ]

    def test_translate_many_in_default_language(self, fake_provider):
        session = LanguageSession(TranslationService(provider=fake_provider))

        assert run(session.translate_many(("Income", "Tips"))) == ["Income", "Tips"]
        assert fake_provider.call_count() == 0

    def test_hindi_default_language(self, fake_provider):
        """With Hindi as default, English is the language that gets translated."""
        session = LanguageSession(
            TranslationService(provider=fake_provider),
            default_language="hi",
        )
        run(session.set_language(Language.ENGLISH))

        assert run(session.translate_dynamic("लाभ")) == "en:लाभ"

    def test_language_change_is_audited(self, fake_provider):
        storage = InMemoryAuditStorage()
        session = LanguageSession(
            TranslationService(provider=fake_provider),
            audit_logger=AuditLogger(storage),
        )

        run(session.set_language("hi"))
        run(session.set_language("hi"))

        events = run(storage.get_events_by_type(AuditEventType.LANGUAGE_CHANGED))
        assert len(events) == 1
        assert events[0].details == {"previous": "en", "current": "hi"}
        assert events[0].is_user_action is True
