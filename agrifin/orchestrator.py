"""
Application wiring for AgriFin

Builds the objects the UI needs exactly once per process:
1. One TranslationCache, owned by
2. One TranslationService, shared by
3. Every LanguageSession

The UI is handed these instances; nothing is looked up through module
globals. Audit persistence is optional: without storage, events are only
written to the local structured log.
"""

from typing import Optional

import structlog

from agrifin.audit import AuditLogger, configure_logging
from agrifin.config import get_settings
from agrifin.services.storage import AuditStorageInterface, InMemoryAuditStorage
from agrifin.services.translation import (
    LanguageSession,
    MyMemoryTranslationProvider,
    TranslationCache,
    TranslationProviderInterface,
    TranslationService,
)


logger = structlog.get_logger("agrifin.orchestrator")


def create_translation_service(
    provider: Optional[TranslationProviderInterface] = None,
    cache: Optional[TranslationCache] = None,
    audit_logger: Optional[AuditLogger] = None,
) -> TranslationService:
    """
    Create the process-wide translation service.

    Uses MyMemory and the configured timeout unless a provider is given.
    """
    settings = get_settings().translation

    return TranslationService(
        provider=provider or MyMemoryTranslationProvider(),
        cache=cache if cache is not None else TranslationCache(),
        audit_logger=audit_logger,
        timeout_seconds=settings.timeout_seconds,
    )


def create_app_components(
    use_storage: bool = True,
    audit_storage: Optional[AuditStorageInterface] = None,
    provider: Optional[TranslationProviderInterface] = None,
) -> tuple[TranslationService, LanguageSession, AuditLogger]:
    """
    Factory function to create all application components.

    Args:
        use_storage: Whether to persist audit events. Falls back to an
            in-memory store holding the newest AUDIT_MAX_EVENTS events
            when no backend is passed.
        audit_storage: Explicit audit backend
        provider: Translation provider override (tests, alternate APIs)

    Returns:
        (translation_service, language_session, audit_logger)
    """
    app_settings = get_settings().app
    configure_logging("DEBUG" if app_settings.debug_mode else app_settings.log_level)

    if use_storage:
        audit_logger = AuditLogger(
            audit_storage
            if audit_storage is not None
            else InMemoryAuditStorage(max_events=app_settings.audit_max_events)
        )
    else:
        audit_logger = AuditLogger()  # Local-only logging

    service = create_translation_service(
        provider=provider,
        audit_logger=audit_logger,
    )

    session = LanguageSession(
        service=service,
        default_language=app_settings.default_language,
        audit_logger=audit_logger,
    )

    logger.info(
        "app_components_created",
        environment=app_settings.app_environment,
        provider=service.provider.name,
        audit_storage=use_storage,
    )

    return service, session, audit_logger
