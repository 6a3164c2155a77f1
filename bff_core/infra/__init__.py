"""
Infrastructure layer shared by the BFF services.

Contains implementations backed by external systems: Redis for
notifications and HTTP for the downstream resource services.
"""

from .redis_client import RedisClient
from .notifier import Notifier, RedisNotifier, serialize_payload
from .downstream import DownstreamClient

__all__ = [
    "RedisClient",
    "Notifier",
    "RedisNotifier",
    "serialize_payload",
    "DownstreamClient"
]
