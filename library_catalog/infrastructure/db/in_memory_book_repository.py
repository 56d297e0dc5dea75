"""
In-memory implementation of the BookRepository and IsbnUniquenessCheck ports.

Both ports are served from the same dict, so exists() always observes every
save() made through this instance. Uniqueness is only checked by the use
case: two concurrent registrations of one ISBN can both be stored.
"""

import logging
import threading
from typing import Dict, Optional

from library_catalog.domain.entities import Book, BookSnapshot
from library_catalog.domain.value_objects import BookId, Isbn

logger = logging.getLogger(__name__)


class InMemoryBookRepository:
    """Dict-backed catalog keyed by BookId, storing snapshots."""

    def __init__(self) -> None:
        self._books: Dict[BookId, BookSnapshot] = {}
        self._lock = threading.Lock()

    def get_by_id(self, book_id: BookId) -> Optional[Book]:
        with self._lock:
            snapshot = self._books.get(book_id)
        if snapshot is None:
            return None
        return Book.from_snapshot(snapshot)

    def save(self, book: Book) -> None:
        snapshot = book.take_snapshot()
        with self._lock:
            self._books[snapshot.id] = snapshot
        logger.debug(f"Stored book_id={snapshot.id}")

    def exists(self, isbn: Isbn) -> bool:
        with self._lock:
            return any(snapshot.isbn == isbn for snapshot in self._books.values())

    def count(self) -> int:
        """Number of stored books."""
        with self._lock:
            return len(self._books)
