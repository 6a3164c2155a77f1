"""
API layer for the authors service.
"""

from .http_server import AuthorsAPI

__all__ = [
    "AuthorsAPI"
]
