"""
Domain schemas for the authors service.
"""

from uuid import UUID

from pydantic import Field, ConfigDict

from bff_core.schema import CamelModel


class Author(CamelModel):
    """Author as owned by the resource service."""
    model_config = ConfigDict(extra='ignore', frozen=True)

    id: UUID = Field(..., description="Server-generated identifier")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    address: str = Field(..., description="Postal address")
    language: str = Field(..., description="Language the author writes in")


class CreateAuthorCommand(CamelModel):
    """Input for creating an author; the identifier is assigned by the server."""
    model_config = ConfigDict(extra='ignore')

    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    address: str = Field(..., description="Postal address")
    language: str = Field(..., description="Language the author writes in")


class AuthorResponse(CamelModel):
    """Wire-facing projection of an author."""

    id: UUID
    first_name: str
    last_name: str
    address: str
    language: str


def to_author_response(author: Author) -> AuthorResponse:
    """Copy every author field onto the response, unchanged."""
    return AuthorResponse(
        id=author.id,
        first_name=author.first_name,
        last_name=author.last_name,
        address=author.address,
        language=author.language
    )
