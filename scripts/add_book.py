#!/usr/bin/env python3
"""
Book Registration Script.

Registers a single book in the SQLite catalog and prints the assigned id.

Usage:
    python -m scripts.add_book --isbn 0747532699 \
        --title "Harry Potter and the Philosopher's Stone" --author "J. K. Rowling"

Exit codes:
    0  book registered
    1  ISBN already registered
    2  invalid input
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from library_catalog.domain.exceptions import ValidationError
from library_catalog.domain.services import AddBookUseCase
from library_catalog.domain.value_objects import BookId
from library_catalog.infrastructure.db import SqliteBookRepository
from library_catalog.infrastructure.events import LoggingEventPublisher

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path("data/catalog.db")

EXIT_ADDED = 0
EXIT_DUPLICATE = 1
EXIT_INVALID = 2


class ConsolePresenter:
    """Writes the add-book outcome to a stream and remembers the exit code."""

    def __init__(self, out: TextIO = sys.stdout) -> None:
        self._out = out
        self.exit_code: Optional[int] = None

    def added(self, book_id: BookId) -> None:
        print(book_id, file=self._out)
        self.exit_code = EXIT_ADDED

    def isbn_already_registered(self) -> None:
        print("ISBN is already registered", file=self._out)
        self.exit_code = EXIT_DUPLICATE


def main(
    isbn: str,
    title: str,
    author: str,
    db_path: Path = DEFAULT_DB_PATH,
    out: TextIO = sys.stdout,
) -> int:
    """
    Register one book.

    Args:
        isbn: Raw ISBN
        title: Raw title
        author: Raw author
        db_path: SQLite catalog file
        out: Where the outcome is printed

    Returns:
        Process exit code
    """
    repository = SqliteBookRepository(db_path)
    use_case = AddBookUseCase(
        book_repository=repository,
        isbn_uniqueness_check=repository,
        event_publisher=LoggingEventPublisher(),
    )
    presenter = ConsolePresenter(out)

    try:
        use_case.add_book(isbn, title, author, presenter)
    except ValidationError as e:
        logger.error(f"Invalid input: {e}")
        return EXIT_INVALID

    return presenter.exit_code


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Register a book in the library catalog")
    parser.add_argument("--isbn", "-i", type=str, required=True, help="10 or 13 digit ISBN")
    parser.add_argument("--title", "-t", type=str, required=True, help="Book title")
    parser.add_argument("--author", "-a", type=str, required=True, help="Author name")
    parser.add_argument(
        "--db-path",
        type=Path,
        default=DEFAULT_DB_PATH,
        help=f"SQLite catalog path (default: {DEFAULT_DB_PATH})",
    )
    return parser.parse_args(argv)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    args = parse_args()
    sys.exit(main(args.isbn, args.title, args.author, args.db_path))
