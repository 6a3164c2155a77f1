"""
Domain schemas for the books service.
"""

from uuid import UUID

from pydantic import Field, ConfigDict

from bff_core.schema import CamelModel


class Book(CamelModel):
    """Book as owned by the resource service."""
    model_config = ConfigDict(extra='ignore', frozen=True)

    id: UUID = Field(..., description="Server-generated identifier")
    author_id: UUID = Field(..., description="Author reference, not checked for existence")
    pages: int = Field(..., description="Page count")
    title: str = Field(..., description="Title")


class CreateBookCommand(CamelModel):
    """Input for creating a book; the identifier is assigned by the server."""
    model_config = ConfigDict(extra='ignore')

    author_id: UUID = Field(..., description="Author reference, not checked for existence")
    pages: int = Field(..., description="Page count")
    title: str = Field(..., description="Title")


class BookResponse(CamelModel):
    """Wire-facing projection of a book."""

    id: UUID
    author_id: UUID
    pages: int
    title: str


def to_book_response(book: Book) -> BookResponse:
    """Copy every book field onto the response, unchanged."""
    return BookResponse(
        id=book.id,
        author_id=book.author_id,
        pages=book.pages,
        title=book.title
    )
