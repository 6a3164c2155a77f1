"""
Infrastructure layer for the books service.
"""

from .memory_store import InMemoryBookService
from .http_store import HttpBookService

__all__ = [
    "InMemoryBookService",
    "HttpBookService"
]
