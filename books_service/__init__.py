"""
Books BFF Service

HTTP API for listing, finding and creating books, publishing a
notification to Redis for every created book.
"""

__version__ = "1.0.0"
__description__ = "Backend-for-frontend service for books"
