"""
In-Memory Audit Storage

Keeps the most recent audit events in a process-local ring buffer. Used
when no external store is configured and throughout the test suite.
"""

from collections import deque
from uuid import UUID

from agrifin.models.audit import AuditEvent, AuditEventType
from agrifin.services.storage.interface import AuditStorageInterface


DEFAULT_MAX_EVENTS = 10_000


class InMemoryAuditStorage(AuditStorageInterface):
    """
    Append-only audit storage bounded to the newest `max_events` events.

    Once full, each append drops the oldest event, so a long-running
    process holds at most `max_events` events however many calls it serves.
    """

    def __init__(self, max_events: int = DEFAULT_MAX_EVENTS):
        if max_events < 1:
            raise ValueError("max_events must be at least 1")
        self._events: deque[AuditEvent] = deque(maxlen=max_events)

    def __len__(self) -> int:
        return len(self._events)

    @property
    def max_events(self) -> int:
        return self._events.maxlen

    async def append_event(self, event: AuditEvent) -> bool:
        self._events.append(event)
        return True

    async def get_events_by_correlation_id(
        self,
        correlation_id: UUID,
    ) -> list[AuditEvent]:
        return [e for e in self._events if e.correlation_id == correlation_id]

    async def get_events_by_type(
        self,
        event_type: AuditEventType,
        limit: int = 100,
    ) -> list[AuditEvent]:
        return [e for e in self._events if e.event_type == event_type][:limit]

    async def get_recent_events(
        self,
        limit: int = 100,
    ) -> list[AuditEvent]:
        return list(reversed(self._events))[:limit]
