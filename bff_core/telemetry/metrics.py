"""
Metrics for the BFF services.

Each service owns its own CollectorRegistry and hands the sink to the
components that record into it.
"""

from abc import ABC, abstractmethod
from typing import Optional

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest


class MetricsSink(ABC):
    """
    Interface for recording per-endpoint request metrics.
    """

    @abstractmethod
    def increment_request(self) -> None:
        """Count one handled call to a resource endpoint."""
        pass

    @abstractmethod
    def increment_error(self) -> None:
        """Count one failed call to a resource endpoint."""
        pass

    @abstractmethod
    def increment_notification_failure(self) -> None:
        """Count one notification that could not be published."""
        pass

    @abstractmethod
    def observe_request_duration(
        self,
        method: str,
        uri: str,
        status_code: int,
        seconds: float
    ) -> None:
        """Record how long an HTTP request took."""
        pass


class PrometheusMetricsSink(MetricsSink):
    """
    MetricsSink backed by prometheus_client.

    Counters are labelled with the controller and service names so the
    Authors and Books services can share dashboards.
    """

    def __init__(
        self,
        controller_name: str,
        service_name: str,
        registry: Optional[CollectorRegistry] = None
    ):
        """
        Args:
            controller_name: Value of the ControllerName label
            service_name: Value of the ServiceName label
            registry: Registry to register into, a fresh one when omitted
        """
        self.registry = registry if registry is not None else CollectorRegistry()
        self.labels = {"ControllerName": controller_name, "ServiceName": service_name}
        label_names = list(self.labels)

        self._requests = Counter(
            "request_count",
            "Handled calls to resource endpoints",
            label_names,
            registry=self.registry
        ).labels(**self.labels)
        self._errors = Counter(
            "error_count",
            "Failed calls to resource endpoints",
            label_names,
            registry=self.registry
        ).labels(**self.labels)
        self._notification_failures = Counter(
            "notification_error_count",
            "Create notifications that could not be published",
            label_names,
            registry=self.registry
        ).labels(**self.labels)
        self._durations = Histogram(
            "http_server_requests_seconds",
            "HTTP request duration",
            ["method", "uri", "status"],
            registry=self.registry
        )

    def increment_request(self) -> None:
        self._requests.inc()

    def increment_error(self) -> None:
        self._errors.inc()

    def increment_notification_failure(self) -> None:
        self._notification_failures.inc()

    def observe_request_duration(
        self,
        method: str,
        uri: str,
        status_code: int,
        seconds: float
    ) -> None:
        self._durations.labels(
            method=method,
            uri=uri,
            status=str(status_code)
        ).observe(seconds)

    def render(self) -> bytes:
        """Prometheus text exposition of this sink's registry."""
        return generate_latest(self.registry)
