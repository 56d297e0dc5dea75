"""
Sample books for tests.

Each function builds fresh objects on every call, so tests never share state.
"""

from library_catalog.domain.entities import BookSnapshot
from library_catalog.domain.value_objects import Author, BookId, Isbn, Title


def harry_potter() -> BookSnapshot:
    return BookSnapshot(
        id=BookId.create_new(),
        isbn=Isbn.from_string("0747532699"),
        title=Title.from_string("Harry Potter and the Philosopher's Stone"),
        author=Author.from_string("J. K. Rowling"),
    )


def moby_dick() -> BookSnapshot:
    return BookSnapshot(
        id=BookId.create_new(),
        isbn=Isbn.from_string("9780553213119"),
        title=Title.from_string("Moby Dick"),
        author=Author.from_string("Herman Melville"),
    )


def the_great_gatsby() -> BookSnapshot:
    return BookSnapshot(
        id=BookId.create_new(),
        isbn=Isbn.from_string("9780241341469"),
        title=Title.from_string("The Great Gatsby"),
        author=Author.from_string("F. Scott Fitzgerald"),
    )
