"""
Domain exceptions for the library catalog.

Validation errors derive from ValueError so callers that only care about
"bad input" can catch the builtin. Storage-level failures derive from
RuntimeError, matching how repository adapters report database problems.
"""

from typing import Optional


class ValidationError(ValueError):
    """Base class for malformed caller input."""


class MissingFieldError(ValidationError):
    """Raised when a required field is absent (None)."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"Cannot create {field_name} from None")
        self.field_name = field_name


class InvalidIsbnError(ValidationError):
    """Raised when a string is not a 10 or 13 digit ISBN."""

    def __init__(self, raw: Optional[str]) -> None:
        super().__init__(f"This string is not a valid ISBN: {raw}")
        self.raw = raw


class InvalidTitleError(ValidationError):
    """Raised when a title is empty or longer than allowed."""

    def __init__(self, raw: Optional[str]) -> None:
        super().__init__(f"This string is not a valid title: {raw}")
        self.raw = raw


class InvalidAuthorError(ValidationError):
    """Raised when an author is empty or longer than allowed."""

    def __init__(self, raw: Optional[str]) -> None:
        super().__init__(f"This string is not a valid author: {raw}")
        self.raw = raw


class InvalidBookIdError(ValidationError):
    """Raised when a string cannot be parsed back into a BookId."""

    def __init__(self, raw: Optional[str]) -> None:
        super().__init__(f"This string is not a valid book id: {raw}")
        self.raw = raw


class IsbnConflictError(RuntimeError):
    """
    Raised by storage that enforces ISBN uniqueness itself.

    This surfaces a race where two registrations for the same ISBN both
    passed the uniqueness check before either was saved.
    """

    def __init__(self, isbn: str) -> None:
        super().__init__(f"A book with ISBN {isbn} is already stored")
        self.isbn = isbn
