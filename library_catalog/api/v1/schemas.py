"""
Request and response models for the book endpoints.
"""

from uuid import UUID

from pydantic import BaseModel, Field


class AddBookRequest(BaseModel):
    """
    Request body for POST /books.

    Fields are passed to the domain unvalidated; length and format rules
    live in the value objects, not here.
    """

    isbn: str = Field(description="10 or 13 digit ISBN, no separators")
    title: str = Field(description="Book title (1-50 characters)")
    author: str = Field(description="Author name (1-50 characters)")


class AddBookResponse(BaseModel):
    id: UUID = Field(description="Identifier assigned to the new book")


class Book(BaseModel):
    """
    API representation of a Book.

    Maps from the domain BookSnapshot for API responses.
    """

    id: UUID = Field(description="Unique identifier for this book in our system")
    isbn: str = Field(description="ISBN as registered")
    title: str = Field(description="Book title")
    author: str = Field(description="Author name")
