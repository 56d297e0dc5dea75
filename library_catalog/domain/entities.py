"""
Domain entities for the library catalog.

Book is the aggregate root: the unit of consistency and persistence for a
catalog record. It crosses the persistence boundary only as a BookSnapshot,
so repositories never reach into aggregate internals.
"""

from dataclasses import dataclass

from .value_objects import Author, BookId, Isbn, Title


@dataclass(frozen=True)
class BookSnapshot:
    """
    Flat, serializable projection of a Book.

    Repositories store and load snapshots; the aggregate itself stays opaque.
    """

    id: BookId
    isbn: Isbn
    title: Title
    author: Author


class Book:
    """
    Represents a book registered in the catalog.

    A Book has no mutating operations. It is either created fresh, which
    mints a new BookId, or restored from a snapshot that was persisted earlier.
    """

    __slots__ = ("_id", "_isbn", "_title", "_author")

    def __init__(self, book_id: BookId, isbn: Isbn, title: Title, author: Author) -> None:
        self._id = book_id
        self._isbn = isbn
        self._title = title
        self._author = author

    @staticmethod
    def create_new(isbn: Isbn, title: Title, author: Author) -> "Book":
        """
        Factory method to create a new book with a freshly minted id.

        Args:
            isbn: Validated ISBN
            title: Validated title
            author: Validated author

        Returns:
            A new Book instance with a generated BookId
        """
        return Book(BookId.create_new(), isbn, title, author)

    @staticmethod
    def from_snapshot(snapshot: BookSnapshot) -> "Book":
        """Rehydrate a previously persisted book without minting a new id."""
        return Book(snapshot.id, snapshot.isbn, snapshot.title, snapshot.author)

    def take_snapshot(self) -> BookSnapshot:
        """Project the aggregate state into a snapshot."""
        return BookSnapshot(
            id=self._id,
            isbn=self._isbn,
            title=self._title,
            author=self._author,
        )

    def __eq__(self, other: object) -> bool:
        """Two books are equal if they have the same ID."""
        if not isinstance(other, Book):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        """Hash based on book ID."""
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Book(id={self._id}, isbn={self._isbn})"
