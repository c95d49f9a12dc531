"""
Dynamic Translation Service

Translates free-form text between the two supported languages, using an
owned cache to avoid repeated provider calls and a fixed fallback policy
when translation is unavailable.

Flow for translate(text, target_language):
1. Empty / whitespace-only text → returned unchanged (no cache, no call)
2. Cache hit on (text, target_language) → cached value
3. One provider call from the other language to the target
4. Success → cache, return translation
5. Any failure → nothing cached, return the original text

Translation is an enhancement, never a blocking dependency: nothing
raised inside this module reaches the caller. Internally every attempt
produces a TranslationOutcome so the failure reason can still be logged
and asserted on.

Concurrent misses for the same key may both reach the provider. No lock
is taken; the first successful write to the cache wins.
"""

import asyncio
from typing import Optional, Sequence, Union
from uuid import UUID

import structlog

from agrifin.audit import AuditLogger, create_correlation_id
from agrifin.models.translation import (
    FailureReason,
    Language,
    TranslationOrigin,
    TranslationOutcome,
)
from agrifin.services.translation.cache import TranslationCache
from agrifin.services.translation.provider import (
    MalformedResponseError,
    MyMemoryTranslationProvider,
    ProviderRejectedError,
    TranslationProviderInterface,
)


logger = structlog.get_logger("agrifin.translation")

LanguageLike = Union[Language, str]


class TranslationService:
    """
    Cache-and-fallback translation service.

    Args:
        provider: External translation provider (MyMemory by default)
        cache: Cache owned by this service. Pass the same instance only
            if two services must share results.
        audit_logger: Optional audit trail for provider calls and fallbacks
        timeout_seconds: Optional per-call limit on the provider; expiry
            counts as the provider being unavailable
    """

    def __init__(
        self,
        provider: Optional[TranslationProviderInterface] = None,
        cache: Optional[TranslationCache] = None,
        audit_logger: Optional[AuditLogger] = None,
        timeout_seconds: Optional[float] = None,
    ):
        self._provider = provider or MyMemoryTranslationProvider()
        self._cache = cache if cache is not None else TranslationCache()
        self._audit_logger = audit_logger
        self._timeout_seconds = timeout_seconds

    @property
    def cache(self) -> TranslationCache:
        return self._cache

    @property
    def provider(self) -> TranslationProviderInterface:
        return self._provider

    @staticmethod
    def source_language_for(target_language: LanguageLike) -> Language:
        """The supported language that is not the target."""
        return Language(target_language).other()

    # ------------------------------------------------------------------
    # Public boundary - always resolves to a string
    # ------------------------------------------------------------------

    async def translate(self, text: str, target_language: LanguageLike) -> str:
        """
        Translate `text` into `target_language`.

        Returns the translation, or `text` unchanged if it is blank or
        translation failed for any reason. Never raises.
        """
        outcome = await self._translate_safely(text, target_language)
        return outcome.text

    async def translate_batch(
        self,
        texts: Sequence[str],
        target_language: LanguageLike,
        correlation_id: Optional[UUID] = None,
    ) -> list[str]:
        """
        Translate every element concurrently.

        The result is index-aligned with `texts`. Each element resolves
        on its own to its translation or its original text.
        """
        if not texts:
            return []

        correlation_id = correlation_id or create_correlation_id()

        outcomes = await asyncio.gather(
            *(
                self._translate_safely(text, target_language, correlation_id)
                for text in texts
            )
        )

        if self._audit_logger:
            await self._audit_logger.log_batch_completed(
                target_language=_language_label(target_language),
                total=len(outcomes),
                translated=sum(
                    1 for o in outcomes
                    if o.origin in (TranslationOrigin.PROVIDER, TranslationOrigin.CACHE)
                ),
                fallbacks=sum(
                    1 for o in outcomes if o.origin == TranslationOrigin.FALLBACK
                ),
                correlation_id=correlation_id,
            )

        return [outcome.text for outcome in outcomes]

    # ------------------------------------------------------------------
    # Internal result
    # ------------------------------------------------------------------

    async def translate_detailed(
        self,
        text: str,
        target_language: LanguageLike,
        correlation_id: Optional[UUID] = None,
    ) -> TranslationOutcome:
        """
        Translate and report how the result was obtained.

        Provider failures come back as fallback outcomes; this method is
        still allowed to raise on programming errors, which translate()
        and translate_batch() absorb.
        """
        if not text or not text.strip():
            return TranslationOutcome.passthrough(text)

        try:
            target = Language(target_language)
        except ValueError:
            outcome = TranslationOutcome.fallback(
                text,
                FailureReason.UNSUPPORTED_LANGUAGE,
                error_message=f"Unsupported target language: {target_language!r}",
            )
            await self._record_failure(outcome, correlation_id)
            return outcome

        cached = self._cache.get(text, target)
        if cached is not None:
            if self._audit_logger:
                await self._audit_logger.log_translation_cache_hit(
                    text=text,
                    target_language=target.value,
                    correlation_id=correlation_id,
                )
            return TranslationOutcome.from_cache(text, target, cached)

        source = self.source_language_for(target)

        reason = None
        try:
            response = await self._call_provider(text, source, target)
        except ProviderRejectedError as e:
            reason, message = FailureReason.PROVIDER_REJECTED, str(e)
        except MalformedResponseError as e:
            reason, message = FailureReason.MALFORMED_RESPONSE, str(e)
        except asyncio.TimeoutError:
            reason = FailureReason.PROVIDER_UNAVAILABLE
            message = f"Provider did not answer within {self._timeout_seconds}s"
        except Exception as e:
            # Transport errors and anything else the provider throws
            reason = FailureReason.PROVIDER_UNAVAILABLE
            message = f"{type(e).__name__}: {e}"

        if reason is None and not response.is_success:
            if response.status_code != 200:
                reason = FailureReason.PROVIDER_REJECTED
                message = f"Provider status {response.status_code}"
                if response.details:
                    message = f"{message}: {response.details}"
            else:
                reason = FailureReason.MALFORMED_RESPONSE
                message = "Provider reported success without a translated text"

        if reason is not None:
            outcome = TranslationOutcome.fallback(
                text,
                reason,
                error_message=message,
                target_language=target,
            )
            await self._record_failure(outcome, correlation_id)
            return outcome

        translated = self._cache.store(text, target, response.translated_text)

        if self._audit_logger:
            await self._audit_logger.log_translation_completed(
                text=text,
                target_language=target.value,
                translated_length=len(translated),
                correlation_id=correlation_id,
            )

        return TranslationOutcome.from_provider(text, target, translated)

    async def _call_provider(
        self,
        text: str,
        source: Language,
        target: Language,
    ):
        call = self._provider.fetch_translation(text, source, target)
        if self._timeout_seconds is None:
            return await call
        return await asyncio.wait_for(call, timeout=self._timeout_seconds)

    async def _translate_safely(
        self,
        text: str,
        target_language: LanguageLike,
        correlation_id: Optional[UUID] = None,
    ) -> TranslationOutcome:
        """Boundary conversion: any exception becomes a fallback outcome."""
        try:
            return await self.translate_detailed(text, target_language, correlation_id)
        except Exception as e:
            logger.error(
                "translation_unexpected_error",
                error=str(e),
                error_type=type(e).__name__,
            )
            if self._audit_logger:
                await self._audit_logger.log_error(
                    error_type=type(e).__name__,
                    error_message=str(e),
                    details={"stage": "translate"},
                    correlation_id=correlation_id,
                )
            return TranslationOutcome.fallback(
                text,
                FailureReason.PROVIDER_UNAVAILABLE,
                error_message=f"{type(e).__name__}: {e}",
            )

    async def _record_failure(
        self,
        outcome: TranslationOutcome,
        correlation_id: Optional[UUID],
    ) -> None:
        logger.warning("translation_fallback", **outcome.to_log_dict())
        if self._audit_logger:
            await self._audit_logger.log_translation_failed(
                text=outcome.original_text,
                target_language=(
                    outcome.target_language.value if outcome.target_language else None
                ),
                reason=outcome.failure_reason.value,
                error_message=outcome.error_message,
                correlation_id=correlation_id,
            )
            if outcome.failure_reason == FailureReason.PROVIDER_UNAVAILABLE:
                await self._audit_logger.log_external_service_error(
                    service=self._provider.name,
                    error_message=outcome.error_message or "provider unavailable",
                    correlation_id=correlation_id,
                )


def _language_label(language: LanguageLike) -> str:
    return language.value if isinstance(language, Language) else str(language)
