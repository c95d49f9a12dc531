"""
Audit Logger

Every provider call, fallback and language switch is logged. This gives:
1. Traceability of what was sent to the external provider
2. Visibility into silent fallbacks (the caller only ever sees a string)
3. Correlation of all items translated as part of one batch

The audit logger:
- Is async so it can await a storage backend
- Gracefully handles storage failures (never crashes the caller)
- Supports correlation IDs to trace related events
"""

import logging
from typing import Optional
from uuid import UUID, uuid4

import structlog

from agrifin.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity
from agrifin.services.storage import AuditStorageInterface


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer(ensure_ascii=False)
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(log_level: str = "INFO") -> None:
    """
    Route structlog output through the stdlib root logger at `log_level`.

    structlog's filter_by_level defers to the stdlib logger level, so this
    is what decides whether info/debug audit lines are emitted.
    """
    logging.basicConfig(format="%(message)s", level=log_level.upper())
    logging.getLogger().setLevel(log_level.upper())


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. An AuditStorageInterface backend, when one is configured
    """

    def __init__(
        self,
        storage: Optional[AuditStorageInterface] = None,
    ):
        """
        Initialize audit logger.

        Args:
            storage: Storage backend for persistence.
                    If None, only logs locally.
        """
        self._storage = storage
        self._logger = structlog.get_logger("agrifin.audit")

    @property
    def storage(self) -> Optional[AuditStorageInterface]:
        return self._storage

    async def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Always logs locally. Persists to storage if available.

        Returns True if storage write succeeded (or no storage configured).
        """
        log_dict = event.to_log_dict()

        if event.severity in (AuditSeverity.ERROR, AuditSeverity.CRITICAL):
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        if self._storage is not None:
            try:
                return await self._storage.append_event(event)
            except Exception as e:
                # Log failure but don't raise
                self._logger.error(
                    "audit_storage_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True

    async def log_translation_completed(
        self,
        text: str,
        target_language: str,
        translated_length: int,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a fresh translation returned by the provider."""
        event = AuditEventBuilder.translation_completed(
            text=text,
            target_language=target_language,
            translated_length=translated_length,
            correlation_id=correlation_id,
        )
        await self.log(event)

    async def log_translation_cache_hit(
        self,
        text: str,
        target_language: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        event = AuditEventBuilder.translation_cache_hit(
            text=text,
            target_language=target_language,
            correlation_id=correlation_id,
        )
        await self.log(event)

    async def log_translation_failed(
        self,
        text: str,
        target_language: Optional[str],
        reason: str,
        error_message: Optional[str] = None,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a translation that fell back to the original text."""
        event = AuditEventBuilder.translation_failed(
            text=text,
            target_language=target_language,
            reason=reason,
            error_message=error_message,
            correlation_id=correlation_id,
        )
        await self.log(event)

    async def log_batch_completed(
        self,
        target_language: str,
        total: int,
        translated: int,
        fallbacks: int,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        event = AuditEventBuilder.batch_translation_completed(
            target_language=target_language,
            total=total,
            translated=translated,
            fallbacks=fallbacks,
            correlation_id=correlation_id,
        )
        await self.log(event)

    async def log_language_changed(
        self,
        previous: str,
        current: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a user switching the UI language."""
        event = AuditEventBuilder.language_changed(
            previous=previous,
            current=current,
            correlation_id=correlation_id,
        )
        await self.log(event)

    async def log_error(
        self,
        error_type: str,
        error_message: str,
        details: Optional[dict] = None,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log an error."""
        event = AuditEventBuilder.system_error(
            error_type=error_type,
            error_message=error_message,
            details=details,
            correlation_id=correlation_id,
        )
        await self.log(event)

    async def log_external_service_error(
        self,
        service: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log external service error."""
        event = AuditEventBuilder.external_service_error(
            service=service,
            error_message=error_message,
            correlation_id=correlation_id,
        )
        await self.log(event)


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a new user action (e.g., translating a page).
    Pass it through all subsequent operations.
    """
    return uuid4()
