"""
Converters between the domain layer and API schemas.

This module centralizes all conversion logic between the domain layer
and the API layer, including the presenter that turns use case callbacks
into something an endpoint can return.
"""

from typing import Optional

from library_catalog.api.v1 import schemas as api
from library_catalog.domain import entities as domain
from library_catalog.domain.value_objects import BookId


class HttpAddBookPresenter:
    """
    Collects the add-book outcome so the endpoint can build a response.

    After execute() returns, exactly one of book_id / duplicate is set.
    """

    def __init__(self) -> None:
        self.book_id: Optional[BookId] = None
        self.duplicate: bool = False

    def added(self, book_id: BookId) -> None:
        self.book_id = book_id

    def isbn_already_registered(self) -> None:
        self.duplicate = True


def domain_book_to_api(book: domain.Book) -> api.Book:
    """
    Convert a domain Book aggregate to an API Book model.

    Args:
        book: Domain Book aggregate

    Returns:
        API Book model
    """
    snapshot = book.take_snapshot()
    return api.Book(
        id=snapshot.id.value,
        isbn=str(snapshot.isbn),
        title=str(snapshot.title),
        author=str(snapshot.author),
    )


def book_id_to_api(book_id: BookId) -> api.AddBookResponse:
    return api.AddBookResponse(id=book_id.value)
