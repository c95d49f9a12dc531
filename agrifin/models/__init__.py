"""
Data Models Package

This package contains all Pydantic models used in AgriFin.
All data flowing through the translation service must conform to these schemas.
"""

from agrifin.models.translation import (
    CacheKey,
    FailureReason,
    Language,
    ProviderResponse,
    TranslationOrigin,
    TranslationOutcome,
)
from agrifin.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Translation models
    "CacheKey",
    "FailureReason",
    "Language",
    "ProviderResponse",
    "TranslationOrigin",
    "TranslationOutcome",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
