"""
Domain layer for the authors service.

Contains data models, the response mapper, and the resource service interface.
"""

from .schema import Author, CreateAuthorCommand, AuthorResponse, to_author_response
from .ports import AuthorService

__all__ = [
    "Author",
    "CreateAuthorCommand",
    "AuthorResponse",
    "to_author_response",
    "AuthorService"
]
