"""
Domain layer - Core business logic and entities.

This layer contains the book aggregate, value objects, domain events, and
defines the ports (interfaces) that the infrastructure layer must implement.

It has NO dependencies on external frameworks, databases, or APIs.
"""

from .entities import Book, BookSnapshot
from .events import BookAdded, DomainEvent
from .value_objects import Author, BookId, Isbn, Title

__all__ = [
    # Entities
    "Book",
    "BookSnapshot",
    # Events
    "BookAdded",
    "DomainEvent",
    # Value Objects
    "Author",
    "BookId",
    "Isbn",
    "Title",
]
