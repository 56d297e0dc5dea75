"""
Event publisher that keeps every published event in a list.

Useful for tests and for single-process wiring where no broker exists.
"""

from typing import List, Optional

from library_catalog.domain.events import DomainEvent


class InMemoryEventPublisher:
    """Records published events in publication order."""

    def __init__(self) -> None:
        self.published_events: List[DomainEvent] = []

    def publish(self, event: DomainEvent) -> None:
        self.published_events.append(event)

    def last_published_event(self) -> Optional[DomainEvent]:
        """Return the most recent event, or None if nothing was published."""
        if not self.published_events:
            return None
        return self.published_events[-1]
