"""
Domain events.

Domain events are immutable records of something that already happened in
the domain. They are named in past tense and carry the data needed to
understand what happened.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4

from .value_objects import BookId


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """Base class for domain events."""

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def event_type(self) -> str:
        """Return the event type name for serialization."""
        return self.__class__.__name__

    def to_dict(self) -> dict[str, object]:
        """Convert event to dictionary for serialization."""
        result: dict[str, object] = {}
        for key, value in self.__dict__.items():
            if isinstance(value, datetime):
                result[key] = value.isoformat()
            elif isinstance(value, (UUID, BookId)):
                result[key] = str(value)
            else:
                result[key] = value
        result["event_type"] = self.event_type
        return result


@dataclass(frozen=True, kw_only=True)
class BookAdded(DomainEvent):
    """A book was successfully registered in the catalog."""

    book_id: BookId
