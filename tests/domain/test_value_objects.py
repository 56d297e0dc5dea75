"""
Tests for domain value objects.
"""

import pytest
from uuid import UUID

from library_catalog.domain.exceptions import (
    InvalidAuthorError,
    InvalidBookIdError,
    InvalidIsbnError,
    InvalidTitleError,
    MissingFieldError,
    ValidationError,
)
from library_catalog.domain.value_objects import Author, BookId, Isbn, Title

TOO_LONG = "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Duis eleifend interdum congue."


class TestIsbn:
    """Tests for the Isbn value object."""

    @pytest.mark.parametrize("raw", ["0123456789", "0123456789012", "  0747532699  ", "9780553213119\n"])
    def test_valid_isbn_keeps_trimmed_value(self, raw):
        """Test that 10 and 13 digit strings are accepted and trimmed."""
        isbn = Isbn.from_string(raw)

        assert str(isbn) == raw.strip()

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "   ",
            "abc",
            "batman@gothamcity.com",
            "https://www.koder.be",
            "123",
            "012345678",
            "01234567890",
            "012345678901",
            "01234567890123",
            "0-7475-3269-9",
            "074753269X",
            "0747 532699",
            "٠١٢٣٤٥٦٧٨٩",
        ],
    )
    def test_invalid_isbn_rejected(self, raw):
        """Test that anything but 10 or 13 ASCII digits raises InvalidIsbnError."""
        with pytest.raises(InvalidIsbnError, match="not a valid ISBN"):
            Isbn.from_string(raw)

    def test_none_isbn_rejected(self):
        """Test that a missing ISBN raises MissingFieldError."""
        with pytest.raises(MissingFieldError):
            Isbn.from_string(None)

    def test_isbn_errors_are_validation_errors(self):
        """Test that callers can catch ValueError for bad input."""
        with pytest.raises(ValueError):
            Isbn.from_string("nope")
        assert issubclass(InvalidIsbnError, ValidationError)

    def test_isbn_equality_and_hash(self):
        """Test that equality is by trimmed value."""
        a = Isbn.from_string("0747532699")
        b = Isbn.from_string(" 0747532699 ")
        c = Isbn.from_string("9780553213119")

        assert a == b
        assert hash(a) == hash(b)
        assert a != c

    def test_isbn_immutability(self):
        """Test that isbn is immutable (frozen dataclass)."""
        isbn = Isbn.from_string("0747532699")

        with pytest.raises(Exception):
            isbn.value = "9780553213119"


class TestTitle:
    """Tests for the Title value object."""

    @pytest.mark.parametrize(
        "raw",
        ["Domain-Driven Design by Example", "The Big Friendly Giant", "X", "  padded  ", "a" * 50],
    )
    def test_valid_title(self, raw):
        title = Title.from_string(raw)

        assert str(title) == raw.strip()

    @pytest.mark.parametrize("raw", ["", "    ", TOO_LONG, "a" * 51])
    def test_invalid_title_rejected(self, raw):
        with pytest.raises(InvalidTitleError, match="not a valid title"):
            Title.from_string(raw)

    def test_length_counts_after_trimming(self):
        """Test that surrounding whitespace does not count toward the limit."""
        title = Title.from_string("   " + "a" * 50 + "   ")

        assert len(str(title)) == 50

    @pytest.mark.parametrize("value", ["   ", " x ", "Moby Dick ", "\tMoby Dick", ""])
    def test_constructor_rejects_untrimmed_or_blank(self, value):
        """Test that direct construction enforces the trimmed invariant."""
        with pytest.raises(InvalidTitleError):
            Title(value)

    def test_constructor_accepts_trimmed_value(self):
        assert Title("Moby Dick") == Title.from_string(" Moby Dick ")

    def test_none_title_rejected(self):
        with pytest.raises(MissingFieldError, match="Title"):
            Title.from_string(None)

    def test_title_equality(self):
        assert Title.from_string("Moby Dick") == Title.from_string(" Moby Dick")
        assert hash(Title.from_string("Moby Dick")) == hash(Title.from_string("Moby Dick "))
        assert Title.from_string("Moby Dick") != Title.from_string("moby dick")


class TestAuthor:
    """Tests for the Author value object."""

    @pytest.mark.parametrize("raw", ["Jane Doe", "John Doe", " J. K. Rowling "])
    def test_valid_author(self, raw):
        author = Author.from_string(raw)

        assert str(author) == raw.strip()

    @pytest.mark.parametrize("raw", ["", "\t", TOO_LONG])
    def test_invalid_author_rejected(self, raw):
        with pytest.raises(InvalidAuthorError, match="not a valid author"):
            Author.from_string(raw)

    @pytest.mark.parametrize("value", ["\t", " ", " Jane Doe", "Jane Doe\n"])
    def test_constructor_rejects_untrimmed_or_blank(self, value):
        with pytest.raises(InvalidAuthorError):
            Author(value)

    def test_none_author_rejected(self):
        with pytest.raises(MissingFieldError, match="Author"):
            Author.from_string(None)

    def test_author_is_not_a_title(self):
        """Test that value objects of different kinds never compare equal."""
        assert Author.from_string("Jane Doe") != Title.from_string("Jane Doe")


class TestBookId:
    """Tests for the BookId value object."""

    def test_create_new_is_random_uuid(self):
        book_id = BookId.create_new()

        assert isinstance(book_id.value, UUID)
        assert book_id.value.version == 4

    def test_create_new_is_unique(self):
        ids = {BookId.create_new() for _ in range(100)}

        assert len(ids) == 100

    def test_string_round_trip(self):
        book_id = BookId.create_new()

        assert BookId.from_string(str(book_id)) == book_id

    def test_invalid_book_id_rejected(self):
        with pytest.raises(InvalidBookIdError):
            BookId.from_string("not-a-uuid")

    def test_none_book_id_rejected(self):
        with pytest.raises(MissingFieldError):
            BookId.from_string(None)
