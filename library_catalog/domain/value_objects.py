"""
Value objects for the domain layer.

Value objects are immutable objects that represent descriptive aspects
of the domain with no conceptual identity. Each one validates itself on
construction, so holding an instance means holding valid data.
"""

import re
from dataclasses import dataclass
from typing import Optional
from uuid import UUID, uuid4

from .exceptions import (
    InvalidAuthorError,
    InvalidBookIdError,
    InvalidIsbnError,
    InvalidTitleError,
    MissingFieldError,
)

_ISBN_PATTERN = re.compile(r"^\d{10}$|^\d{13}$")

TEXT_MIN_LENGTH = 1
TEXT_MAX_LENGTH = 50


def _sanitize(raw: Optional[str], field_name: str) -> str:
    """Reject None and strip surrounding whitespace."""
    if raw is None:
        raise MissingFieldError(field_name)
    return raw.strip()


def _is_trimmed_text(value: str) -> bool:
    """True if value has no surrounding whitespace and an allowed length."""
    return value == value.strip() and TEXT_MIN_LENGTH <= len(value) <= TEXT_MAX_LENGTH


@dataclass(frozen=True)
class Isbn:
    """
    International Standard Book Number.

    Accepts exactly 10 or exactly 13 ASCII digits after trimming. Hyphens,
    spaces inside the number and checksum validation are not supported:
    "0-7475-3269-9" is rejected.
    """

    value: str

    def __post_init__(self) -> None:
        if not _ISBN_PATTERN.fullmatch(self.value) or not self.value.isascii():
            raise InvalidIsbnError(self.value)

    @classmethod
    def from_string(cls, raw: Optional[str]) -> "Isbn":
        """Build an Isbn from raw user input."""
        return cls(_sanitize(raw, "Isbn"))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Title:
    """Book title, 1 to 50 characters once trimmed."""

    value: str

    def __post_init__(self) -> None:
        if not _is_trimmed_text(self.value):
            raise InvalidTitleError(self.value)

    @classmethod
    def from_string(cls, raw: Optional[str]) -> "Title":
        return cls(_sanitize(raw, "Title"))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Author:
    """Book author, 1 to 50 characters once trimmed."""

    value: str

    def __post_init__(self) -> None:
        if not _is_trimmed_text(self.value):
            raise InvalidAuthorError(self.value)

    @classmethod
    def from_string(cls, raw: Optional[str]) -> "Author":
        return cls(_sanitize(raw, "Author"))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BookId:
    """
    Opaque, globally unique book identifier.

    Ids are random (UUID version 4) and minted only when a book is first
    created; they never encode any book content.
    """

    value: UUID

    @classmethod
    def create_new(cls) -> "BookId":
        """Mint a fresh random identifier."""
        return cls(uuid4())

    @classmethod
    def from_string(cls, raw: Optional[str]) -> "BookId":
        """
        Parse an identifier previously produced by ``str(book_id)``.

        Raises:
            MissingFieldError: If raw is None
            InvalidBookIdError: If raw is not a UUID
        """
        sanitized = _sanitize(raw, "BookId")
        try:
            return cls(UUID(sanitized))
        except ValueError as e:
            raise InvalidBookIdError(raw) from e

    def __str__(self) -> str:
        return str(self.value)
