"""
Redis client wrapper for the BFF services.
Provides connection management for the notification channel.
"""

import logging
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError, ConnectionError


logger = logging.getLogger(__name__)


class RedisClient:
    """
    Async Redis client wrapper with connection pooling.
    """

    def __init__(
        self,
        url: str,
        max_connections: int = 10,
        socket_timeout: float = 5.0,
        socket_connect_timeout: float = 5.0,
        retry_on_timeout: bool = True,
        health_check_interval: int = 30
    ):
        """
        Initialize Redis client.

        Args:
            url: Redis connection URL (redis://host:port/db)
            max_connections: Maximum connections in pool
            socket_timeout: Socket timeout in seconds
            socket_connect_timeout: Connection timeout in seconds
            retry_on_timeout: Whether to retry on timeout
            health_check_interval: Health check interval in seconds
        """
        self.url = url
        self._pool: Optional[redis.ConnectionPool] = None
        self._client: Optional[redis.Redis] = None

        self._pool_config = {
            "max_connections": max_connections,
            "socket_timeout": socket_timeout,
            "socket_connect_timeout": socket_connect_timeout,
            "retry_on_timeout": retry_on_timeout,
            "health_check_interval": health_check_interval
        }

    async def connect(self) -> None:
        """
        Create the connection pool and verify Redis is reachable.

        The pool is kept even when the ping fails; connections are opened
        lazily, so commands succeed again once Redis comes back.

        Raises:
            ConnectionError: If Redis does not answer the ping
        """
        self._pool = redis.ConnectionPool.from_url(
            self.url,
            **self._pool_config
        )
        self._client = redis.Redis(connection_pool=self._pool)

        try:
            await self._client.ping()
        except RedisError as e:
            logger.error(f"Failed to connect to Redis: {e}")
            raise ConnectionError(f"Redis connection failed: {e}") from e

        logger.info(f"Connected to Redis: {self.url}")

    async def close(self) -> None:
        """Close Redis connection and cleanup resources."""
        if self._client:
            await self._client.aclose()
            self._client = None

        if self._pool:
            await self._pool.aclose()
            self._pool = None

        logger.info("Redis connection closed")

    @property
    def client(self) -> redis.Redis:
        """
        Get Redis client instance.

        Raises:
            RuntimeError: If not connected
        """
        if not self._client:
            raise RuntimeError("Redis client not connected. Call connect() first.")
        return self._client

    async def ping(self) -> bool:
        """
        Ping Redis to check connectivity.

        Returns:
            True if ping successful, False otherwise
        """
        try:
            if not self._client:
                return False

            await self._client.ping()
            return True

        except RedisError as e:
            logger.warning(f"Redis ping failed: {e}")
            return False

    async def publish(self, channel: str, message: str) -> int:
        """
        Publish a message on a pub/sub channel.

        Returns:
            Number of subscribers that received the message
        """
        return await self.client.publish(channel, message)
