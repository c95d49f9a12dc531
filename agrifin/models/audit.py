"""
Audit Models for AgriFin

Every significant action in the translation flow is recorded as an
AuditEvent. This provides:
1. Traceability of every provider call
2. Debugging information when translation silently falls back
3. Ability to reconstruct what a user saw and in which language

Audit logs are append-only. We never delete or modify them.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """
    Types of events we audit.
    """
    # Translation
    TRANSLATION_COMPLETED = "translation_completed"
    TRANSLATION_CACHE_HIT = "translation_cache_hit"
    TRANSLATION_FAILED = "translation_failed"
    BATCH_TRANSLATION_COMPLETED = "batch_translation_completed"

    # User preferences
    LANGUAGE_CHANGED = "language_changed"

    # System events
    SYSTEM_ERROR = "system_error"
    EXTERNAL_SERVICE_ERROR = "external_service_error"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - what is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'translation', 'session')"
    )

    # Correlation - for tracking related events
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events (e.g., all items of one batch)"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )

    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    # Error information (if applicable)
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_code": self.error_code,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


def _preview(text: str, limit: int = 80) -> str:
    """Shorten user text for audit descriptions."""
    text = text.replace("\n", " ")
    return text if len(text) <= limit else text[: limit - 1] + "…"


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.translation_completed("hello", "hi", 7, correlation_id)
        event = AuditEventBuilder.language_changed("en", "hi")
    """

    @staticmethod
    def translation_completed(
        text: str,
        target_language: str,
        translated_length: int,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSLATION_COMPLETED,
            entity_type="translation",
            correlation_id=correlation_id,
            description=f"Translated to {target_language}: {_preview(text)}",
            details={
                "target_language": target_language,
                "text_length": len(text),
                "translated_length": translated_length,
            },
        )

    @staticmethod
    def translation_cache_hit(
        text: str,
        target_language: str,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSLATION_CACHE_HIT,
            severity=AuditSeverity.DEBUG,
            entity_type="translation",
            correlation_id=correlation_id,
            description=f"Served from cache ({target_language}): {_preview(text)}",
            details={
                "target_language": target_language,
                "text_length": len(text),
            },
        )

    @staticmethod
    def translation_failed(
        text: str,
        target_language: Optional[str],
        reason: str,
        error_message: Optional[str] = None,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSLATION_FAILED,
            severity=AuditSeverity.WARNING,
            entity_type="translation",
            correlation_id=correlation_id,
            description=f"Translation fell back to original text ({reason})",
            details={
                "target_language": target_language,
                "text_length": len(text),
                "reason": reason,
            },
            error_code=reason,
            error_message=error_message,
        )

    @staticmethod
    def batch_translation_completed(
        target_language: str,
        total: int,
        translated: int,
        fallbacks: int,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BATCH_TRANSLATION_COMPLETED,
            entity_type="translation_batch",
            correlation_id=correlation_id,
            description=f"Batch to {target_language}: {translated}/{total} translated",
            details={
                "target_language": target_language,
                "total": total,
                "translated": translated,
                "fallbacks": fallbacks,
            },
        )

    @staticmethod
    def language_changed(
        previous: str,
        current: str,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LANGUAGE_CHANGED,
            entity_type="session",
            correlation_id=correlation_id,
            description=f"Language changed from {previous} to {current}",
            details={
                "previous": previous,
                "current": current,
            },
            is_user_action=True,
        )

    @staticmethod
    def system_error(
        error_type: str,
        error_message: str,
        details: Optional[dict] = None,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SYSTEM_ERROR,
            severity=AuditSeverity.ERROR,
            description=f"System error: {error_type}",
            error_message=error_message,
            details=details or {},
            correlation_id=correlation_id,
        )

    @staticmethod
    def external_service_error(
        service: str,
        error_message: str,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXTERNAL_SERVICE_ERROR,
            severity=AuditSeverity.ERROR,
            description=f"External service error: {service}",
            error_message=error_message,
            details={
                "service": service,
            },
            correlation_id=correlation_id,
        )
