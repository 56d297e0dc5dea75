"""
FastAPI dependencies for dependency injection.

This module provides singleton instances of the repository, event publisher
and use case for use with FastAPI's Depends() system.

Note: We use module-level singletons instead of @lru_cache with Depends()
parameters, which is an antipattern that can cause unexpected behavior.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from library_catalog.domain.ports import EventPublisher
from library_catalog.domain.services import AddBookUseCase
from library_catalog.infrastructure.db import InMemoryBookRepository, SqliteBookRepository
from library_catalog.infrastructure.events import LoggingEventPublisher

logger = logging.getLogger(__name__)

# Configuration from environment
CATALOG_BACKEND = os.getenv("CATALOG_BACKEND", "sqlite")
DB_PATH = Path(os.getenv("DB_PATH", "data/catalog.db"))

CatalogRepository = Union[InMemoryBookRepository, SqliteBookRepository]

# Module-level singletons (initialized lazily)
_catalog_repository: Optional[CatalogRepository] = None
_event_publisher: Optional[EventPublisher] = None
_add_book_use_case: Optional[AddBookUseCase] = None


def get_catalog_repository() -> CatalogRepository:
    """Provide a singleton instance of the catalog repository."""
    global _catalog_repository
    if _catalog_repository is None:
        if CATALOG_BACKEND == "memory":
            _catalog_repository = InMemoryBookRepository()
        elif CATALOG_BACKEND == "sqlite":
            _catalog_repository = SqliteBookRepository(DB_PATH)
        else:
            raise RuntimeError(
                f"CATALOG_BACKEND must be 'memory' or 'sqlite', got '{CATALOG_BACKEND}'"
            )
        logger.info(f"Using {CATALOG_BACKEND} catalog backend")
    return _catalog_repository


def get_event_publisher() -> EventPublisher:
    """Provide a singleton instance of the event publisher."""
    global _event_publisher
    if _event_publisher is None:
        _event_publisher = LoggingEventPublisher()
    return _event_publisher


def get_add_book_use_case() -> AddBookUseCase:
    """Provide the AddBook use case with all dependencies wired."""
    global _add_book_use_case
    if _add_book_use_case is None:
        repository = get_catalog_repository()
        _add_book_use_case = AddBookUseCase(
            book_repository=repository,
            isbn_uniqueness_check=repository,
            event_publisher=get_event_publisher(),
        )
    return _add_book_use_case


def reset_dependencies() -> None:
    """
    Reset all singletons. Useful for testing.

    This allows tests to inject mock dependencies by resetting
    the module state between test cases.
    """
    global _catalog_repository, _event_publisher, _add_book_use_case

    _catalog_repository = None
    _event_publisher = None
    _add_book_use_case = None
