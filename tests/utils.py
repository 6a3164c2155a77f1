"""Test helpers shared across test modules."""

from typing import Optional
from unittest.mock import AsyncMock

from bff_core.telemetry.metrics import PrometheusMetricsSink


class StubRedisClient:
    """Stands in for bff_core.infra.redis_client.RedisClient."""

    def __init__(self):
        self.publish = AsyncMock(return_value=1)
        self.ping = AsyncMock(return_value=True)


def sample(metrics: PrometheusMetricsSink, name: str) -> Optional[float]:
    """Current value of one of the sink's labelled counters."""
    return metrics.registry.get_sample_value(name, metrics.labels)
