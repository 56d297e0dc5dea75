"""
Add-book use case.

Registers a book in the catalog: validates the raw input, refuses ISBNs that
are already registered, persists the new aggregate, publishes BookAdded and
reports the outcome to a presenter.

The service depends ONLY on ports. It doesn't know whether books live in a
dict or a SQLite file, or where events end up.

Concurrency: execute() runs its steps sequentially and opens no transaction
around check -> save -> publish. Two concurrent registrations of the same
ISBN can both succeed unless the repository enforces uniqueness itself (see
SqliteBookRepository, which raises IsbnConflictError in that case).
"""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, TypeVar

from library_catalog.domain.entities import Book
from library_catalog.domain.events import BookAdded
from library_catalog.domain.ports import (
    AddBookPresenter,
    BookRepository,
    EventPublisher,
    IsbnUniquenessCheck,
)
from library_catalog.domain.value_objects import Author, Isbn, Title

logger = logging.getLogger(__name__)

CommandT = TypeVar("CommandT", contravariant=True)
PresenterT = TypeVar("PresenterT", contravariant=True)


class UseCase(Protocol[CommandT, PresenterT]):
    """A single application operation driven by a command."""

    def execute(self, command: CommandT, presenter: PresenterT) -> None:
        ...


@dataclass(frozen=True)
class AddBookCommand:
    """
    Raw input for registering a book, as received from an adapter.

    Fields are unvalidated strings; the use case turns them into value objects.
    """

    isbn: Optional[str]
    title: Optional[str]
    author: Optional[str]


class AddBookUseCase:
    """
    Orchestrates book registration.

    Usage:
        use_case = AddBookUseCase(
            book_repository=repo,
            isbn_uniqueness_check=repo,
            event_publisher=publisher,
        )
        use_case.add_book("0747532699", "Harry Potter", "J. K. Rowling", presenter)
    """

    def __init__(
        self,
        book_repository: BookRepository,
        isbn_uniqueness_check: IsbnUniquenessCheck,
        event_publisher: EventPublisher,
    ) -> None:
        """
        Initialize the use case with its ports.

        Args:
            book_repository: Where new books are saved
            isbn_uniqueness_check: Answers whether an ISBN is already taken
            event_publisher: Receives BookAdded after each successful save
        """
        self._book_repository = book_repository
        self._isbn_uniqueness_check = isbn_uniqueness_check
        self._event_publisher = event_publisher

    def add_book(
        self,
        isbn: Optional[str],
        title: Optional[str],
        author: Optional[str],
        presenter: AddBookPresenter,
    ) -> None:
        """Inbound entry point for adapters; see execute()."""
        self.execute(AddBookCommand(isbn=isbn, title=title, author=author), presenter)

    def execute(self, command: AddBookCommand, presenter: AddBookPresenter) -> None:
        """
        Register the book described by the command.

        Args:
            command: Raw isbn, title and author
            presenter: Receives exactly one of added() or isbn_already_registered()

        Raises:
            ValidationError: If any field is missing or malformed. The
                presenter is not called in that case.
            Exception: Any error raised by a port propagates unchanged.
        """
        isbn = Isbn.from_string(command.isbn)
        title = Title.from_string(command.title)
        author = Author.from_string(command.author)

        if self._isbn_uniqueness_check.exists(isbn):
            logger.warning(f"ISBN {isbn} is already registered")
            presenter.isbn_already_registered()
            return

        book = Book.create_new(isbn, title, author)
        self._book_repository.save(book)

        book_id = book.take_snapshot().id
        logger.info(f"Registered book {book_id} (isbn={isbn})")

        self._event_publisher.publish(BookAdded(book_id=book_id))
        presenter.added(book_id)
