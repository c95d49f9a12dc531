"""
Language Session

Per-user language state consumed by the UI:
- which language the user is currently reading
- dynamic translation of free text into that language
- whether a dynamic translation is in flight (for a progress indicator)

Text shown in the default language is never sent for translation.
"""

from typing import Optional, Sequence

import structlog

from agrifin.audit import AuditLogger
from agrifin.models.translation import Language
from agrifin.services.translation.service import LanguageLike, TranslationService


logger = structlog.get_logger("agrifin.session")


class LanguageSession:
    """
    Current UI language plus dynamic translation into it.

    Args:
        service: The process-wide TranslationService
        language: Starting language (defaults to the default language)
        default_language: Language whose text needs no translation
        audit_logger: Optional audit trail for language changes
    """

    def __init__(
        self,
        service: TranslationService,
        language: Optional[LanguageLike] = None,
        default_language: LanguageLike = Language.ENGLISH,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._service = service
        self._default_language = Language(default_language)
        self._language = Language(language) if language else self._default_language
        self._audit_logger = audit_logger
        self._in_flight = 0

    @property
    def language(self) -> Language:
        return self._language

    @property
    def default_language(self) -> Language:
        return self._default_language

    @property
    def is_translating(self) -> bool:
        """True while at least one dynamic translation is awaiting the provider."""
        return self._in_flight > 0

    async def set_language(self, language: LanguageLike) -> Language:
        """
        Switch the session language.

        Raises:
            ValueError: If `language` is not a supported language
        """
        new_language = Language(language)
        previous = self._language
        self._language = new_language

        if new_language != previous:
            logger.info(
                "language_changed",
                previous=previous.value,
                current=new_language.value,
            )
            if self._audit_logger:
                await self._audit_logger.log_language_changed(
                    previous=previous.value,
                    current=new_language.value,
                )
        return new_language

    async def toggle_language(self) -> Language:
        """Switch to the other supported language."""
        return await self.set_language(self._language.other())

    async def translate_dynamic(self, text: str) -> str:
        """
        Translate free text into the session language.

        Returns `text` unchanged while the session is in the default
        language, and on any translation failure.
        """
        if self._language == self._default_language:
            return text

        self._in_flight += 1
        try:
            return await self._service.translate(text, self._language)
        finally:
            self._in_flight -= 1

    async def translate_many(self, texts: Sequence[str]) -> list[str]:
        """translate_dynamic over a sequence, index-aligned."""
        if self._language == self._default_language:
            return list(texts)

        self._in_flight += 1
        try:
            return await self._service.translate_batch(texts, self._language)
        finally:
            self._in_flight -= 1
