"""
Authors BFF Service

HTTP API for listing, finding and creating authors, publishing a
notification to Redis for every created author.
"""

__version__ = "1.0.0"
__description__ = "Backend-for-frontend service for authors"
