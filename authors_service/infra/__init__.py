"""
Infrastructure layer for the authors service.

Contains the AuthorService implementations.
"""

from .memory_store import InMemoryAuthorService
from .http_store import HttpAuthorService

__all__ = [
    "InMemoryAuthorService",
    "HttpAuthorService"
]
