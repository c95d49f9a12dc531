"""
Storage Services Package

Provides the abstract audit storage interface and the in-memory backend.
"""

from agrifin.services.storage.interface import (
    AuditStorageInterface,
    StorageError,
)
from agrifin.services.storage.memory import InMemoryAuditStorage

__all__ = [
    # Interfaces
    "AuditStorageInterface",
    # Exceptions
    "StorageError",
    # Implementations
    "InMemoryAuditStorage",
]
