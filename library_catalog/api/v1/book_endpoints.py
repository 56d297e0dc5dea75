"""
API endpoints for registering and retrieving books.

This module defines the FastAPI routes for the catalog. It handles HTTP
concerns and delegates to the add-book use case and the repository.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from library_catalog.api.v1 import schemas as api
from library_catalog.api.v1.converters import (
    HttpAddBookPresenter,
    book_id_to_api,
    domain_book_to_api,
)
from library_catalog.api.v1.dependencies import (
    CatalogRepository,
    get_add_book_use_case,
    get_catalog_repository,
)
from library_catalog.domain.exceptions import IsbnConflictError, ValidationError
from library_catalog.domain.services import AddBookUseCase
from library_catalog.domain.value_objects import BookId

router = APIRouter()


@router.post(
    "/books",
    response_model=api.AddBookResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_book(
    request: api.AddBookRequest,
    use_case: AddBookUseCase = Depends(get_add_book_use_case),
) -> api.AddBookResponse:
    """
    Register a new book in the catalog.

    Returns:
        The id assigned to the book

    Raises:
        409: A book with this ISBN is already registered
        422: ISBN, title or author is malformed
    """
    presenter = HttpAddBookPresenter()
    try:
        use_case.add_book(request.isbn, request.title, request.author, presenter)
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e),
        )
    except IsbnConflictError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    except RuntimeError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )

    if presenter.duplicate:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"ISBN '{request.isbn.strip()}' is already registered",
        )

    return book_id_to_api(presenter.book_id)


@router.get("/books/{book_id}", response_model=api.Book)
def get_book_by_id(
    book_id: str,
    catalog_repo: CatalogRepository = Depends(get_catalog_repository),
) -> api.Book:
    """
    Get a book by its unique identifier.

    Raises:
        400: book_id is not a valid identifier
        404: Book not found
        503: The catalog storage failed
    """
    try:
        parsed_id = BookId.from_string(book_id)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    try:
        book = catalog_repo.get_by_id(parsed_id)
    except RuntimeError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )

    if book is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Book with id '{book_id}' not found",
        )

    return domain_book_to_api(book)


@router.get("/health")
def health_check() -> dict:
    """Liveness probe."""
    return {"status": "ok"}
