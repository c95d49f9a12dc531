"""
Services package.

- storage: audit persistence backends
- translation: dynamic translation (import from agrifin.services.translation)
"""

from agrifin.services.storage import (
    AuditStorageInterface,
    InMemoryAuditStorage,
    StorageError,
)

__all__ = [
    # Storage services
    "AuditStorageInterface",
    "InMemoryAuditStorage",
    "StorageError",
]
