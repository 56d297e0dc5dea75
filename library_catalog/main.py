"""
ASGI entry point for the library catalog.

Run with:
    uvicorn library_catalog.main:app
"""

from fastapi import FastAPI

from library_catalog.api.v1.book_endpoints import router as books_router

API_PREFIX = "/api/v1"


def create_app() -> FastAPI:
    """Build the FastAPI application with the book routes mounted."""
    application = FastAPI(
        title="Library Catalog API",
        description="Register books in the library catalog.",
        version="1.0.0",
    )
    application.include_router(books_router, prefix=API_PREFIX, tags=["books"])
    return application


app = create_app()
