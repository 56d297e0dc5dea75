"""
Domain services package.

Services orchestrate domain logic that doesn't naturally belong to a single
entity. They coordinate between entities and ports to implement use cases.
"""

from .add_book_service import AddBookCommand, AddBookUseCase, UseCase

__all__ = [
    "AddBookCommand",
    "AddBookUseCase",
    "UseCase",
]
