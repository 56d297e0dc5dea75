"""
Persistence adapters for the book catalog.

Each repository here implements both BookRepository and IsbnUniquenessCheck
over a single backing store.
"""

from .in_memory_book_repository import InMemoryBookRepository
from .sqlite_book_repository import SqliteBookRepository

__all__ = ["InMemoryBookRepository", "SqliteBookRepository"]
