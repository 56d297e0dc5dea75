"""
Port interfaces (protocols) for the domain layer.

Ports define the contracts between the domain and infrastructure layers.
They are implemented by adapters in the infrastructure layer, allowing
the domain to remain independent of technical details.

Following Hexagonal Architecture principles, the domain layer depends only
on these abstract protocols, never on concrete implementations. Each port
is deliberately narrow so a test can fake exactly the capability it needs.
"""

from typing import Optional, Protocol, TypeVar

from .entities import Book
from .events import DomainEvent
from .value_objects import BookId, Isbn

IdT = TypeVar("IdT", contravariant=True)
AggregateT = TypeVar("AggregateT")


class Repository(Protocol[IdT, AggregateT]):
    """
    Generic port for loading and storing aggregates by id.
    """

    def get_by_id(self, aggregate_id: IdT) -> Optional[AggregateT]:
        """
        Retrieve an aggregate by its identifier.

        Returns:
            The aggregate if found, None otherwise
        """
        ...

    def save(self, aggregate: AggregateT) -> None:
        """
        Persist an aggregate, overwriting any previous state with the same id.

        Raises:
            RuntimeError: If the underlying storage fails
        """
        ...


class BookRepository(Repository[BookId, Book], Protocol):
    """
    Port for persisting and retrieving books from the catalog.

    Implementations store BookSnapshot projections and rebuild aggregates
    with Book.from_snapshot() when loading.
    """


class IsbnUniquenessCheck(Protocol):
    """
    Port answering whether an ISBN is already registered.

    Implementations must observe every successful save made through the
    BookRepository they are paired with.
    """

    def exists(self, isbn: Isbn) -> bool:
        """
        Check whether a book with this ISBN is already in the catalog.

        Args:
            isbn: The validated ISBN to look up

        Returns:
            True if a stored book has this ISBN
        """
        ...


class EventPublisher(Protocol):
    """
    Port for publishing domain events.

    Publishing is fire-and-forget: nothing is returned, and delivery
    guarantees belong to the implementation.
    """

    def publish(self, event: DomainEvent) -> None:
        ...


class AddBookPresenter(Protocol):
    """
    Port through which the add-book use case reports its outcome.

    Exactly one of the two methods is called, exactly once, per invocation.
    """

    def added(self, book_id: BookId) -> None:
        """The book was registered under the given id."""
        ...

    def isbn_already_registered(self) -> None:
        """A book with the same ISBN already exists; nothing was stored."""
        ...
