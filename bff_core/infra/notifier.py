"""
Create notifications published to a Redis pub/sub channel.

Notification is best-effort: it runs after the resource has been created
and must never turn a successful write into a failed response.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel

from ..telemetry.metrics import MetricsSink
from .redis_client import RedisClient


logger = logging.getLogger(__name__)


def serialize_payload(payload: BaseModel) -> str:
    """
    Render a response object as pretty-printed JSON with wire field names.

    Null fields are omitted.
    """
    data = payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    return json.dumps(data, indent=2, ensure_ascii=False)


class Notifier(ABC):
    """
    Interface for post-create notifications.
    Implementations swallow and report their own failures.
    """

    @abstractmethod
    async def notify(self, payload: BaseModel) -> bool:
        """
        Publish a notification about a newly created resource.

        Args:
            payload: Response object describing the created resource

        Returns:
            True if the message was handed to the broker, False otherwise.
            Never raises.
        """
        pass


class RedisNotifier(Notifier):
    """
    Publishes notifications with Redis PUBLISH on a single channel.
    """

    def __init__(
        self,
        redis_client: RedisClient,
        topic: str,
        metrics: Optional[MetricsSink] = None
    ):
        """
        Args:
            redis_client: Connected Redis client
            topic: Channel name
            metrics: Sink counting failed notifications
        """
        self.redis_client = redis_client
        self.topic = topic
        self.metrics = metrics

    async def notify(self, payload: BaseModel) -> bool:
        try:
            message = serialize_payload(payload)
            receivers = await self.redis_client.publish(self.topic, message)

        except Exception as e:
            logger.error(
                "Push notification error",
                exc_info=True,
                extra={
                    "component": "notifier",
                    "topic": self.topic,
                    "payload_type": type(payload).__name__,
                    "error": str(e)
                }
            )
            if self.metrics is not None:
                self.metrics.increment_notification_failure()
            return False

        logger.debug(
            f"Notification published to {self.topic}",
            extra={
                "component": "notifier",
                "topic": self.topic,
                "receivers": receivers
            }
        )
        return True
