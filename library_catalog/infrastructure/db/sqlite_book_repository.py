"""
SQLite implementation of the BookRepository and IsbnUniquenessCheck ports.

This adapter persists book snapshots to a SQLite database. The isbn column
carries a UNIQUE constraint, so uniqueness is enforced by storage: if two
registrations race past the use case's check, the second save raises
IsbnConflictError instead of storing a duplicate.
"""

import logging
import sqlite3
from datetime import datetime, UTC
from pathlib import Path
from typing import Optional, Union

from library_catalog.domain.entities import Book, BookSnapshot
from library_catalog.domain.exceptions import IsbnConflictError
from library_catalog.domain.value_objects import Author, BookId, Isbn, Title

logger = logging.getLogger(__name__)


class SqliteBookRepository:
    """
    Books are stored one row per BookId. Saving an existing id overwrites the
    row (idempotent upsert); saving a new id with a stored ISBN is rejected.
    """

    def __init__(self, db_path: Union[Path, str]) -> None:
        """
        Initialize the repository with a database path.

        The special path ":memory:" is not supported because each operation
        opens its own connection; use a temporary file instead.
        """
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_schema()

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection with row factory."""
        conn = sqlite3.connect(str(self._db_path))
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        """Create the books table if it doesn't exist."""
        conn = self._get_connection()
        try:
            with conn:
                conn.execute("""
                CREATE TABLE IF NOT EXISTS books (
                    id TEXT PRIMARY KEY,
                    isbn TEXT NOT NULL UNIQUE,
                    title TEXT NOT NULL,
                    author TEXT NOT NULL,
                    created_at TEXT NOT NULL
                )
            """)
        finally:
            conn.close()

    def _snapshot_to_row(self, snapshot: BookSnapshot) -> dict:
        """Convert a BookSnapshot to a database row dict."""
        return {
            "id": str(snapshot.id),
            "isbn": str(snapshot.isbn),
            "title": str(snapshot.title),
            "author": str(snapshot.author),
            "created_at": datetime.now(UTC).isoformat(),
        }

    def _row_to_book(self, row: sqlite3.Row) -> Book:
        """Convert a database row back into a Book aggregate."""
        snapshot = BookSnapshot(
            id=BookId.from_string(row["id"]),
            isbn=Isbn(row["isbn"]),
            title=Title(row["title"]),
            author=Author(row["author"]),
        )
        return Book.from_snapshot(snapshot)

    def save(self, book: Book) -> None:
        """
        Save a book, overwriting any row with the same id.

        Raises:
            IsbnConflictError: If another book already stores this ISBN
            RuntimeError: If a database error occurs
        """
        snapshot = book.take_snapshot()
        row = self._snapshot_to_row(snapshot)

        conn = self._get_connection()
        try:
            with conn:
                conn.execute(
                    """
                    INSERT INTO books (id, isbn, title, author, created_at)
                    VALUES (:id, :isbn, :title, :author, :created_at)
                    ON CONFLICT(id) DO UPDATE SET
                        isbn = excluded.isbn,
                        title = excluded.title,
                        author = excluded.author
                    """,
                    row,
                )
        except sqlite3.IntegrityError as e:
            raise IsbnConflictError(row["isbn"]) from e
        except sqlite3.Error as e:
            raise RuntimeError(f"Failed to save book {row['id']}: {e}") from e
        finally:
            conn.close()

        logger.debug(f"Stored book_id={row['id']}")

    def get_by_id(self, book_id: BookId) -> Optional[Book]:
        """
        Retrieve a book by its id.

        Returns:
            The Book if found, None otherwise
        """
        conn = self._get_connection()
        try:
            row = conn.execute(
                "SELECT * FROM books WHERE id = ?", (str(book_id),)
            ).fetchone()
        except sqlite3.Error as e:
            raise RuntimeError(f"Failed to load book {book_id}: {e}") from e
        finally:
            conn.close()

        if row is None:
            return None
        return self._row_to_book(row)

    def exists(self, isbn: Isbn) -> bool:
        """Check whether any stored book has this ISBN."""
        conn = self._get_connection()
        try:
            row = conn.execute(
                "SELECT 1 FROM books WHERE isbn = ? LIMIT 1", (str(isbn),)
            ).fetchone()
        except sqlite3.Error as e:
            raise RuntimeError(f"Failed to check isbn {isbn}: {e}") from e
        finally:
            conn.close()
        return row is not None

    def count(self) -> int:
        """Get the total number of books in the catalog."""
        conn = self._get_connection()
        try:
            return conn.execute("SELECT COUNT(*) FROM books").fetchone()[0]
        finally:
            conn.close()
