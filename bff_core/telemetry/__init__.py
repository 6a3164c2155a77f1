"""
Telemetry and observability for the BFF services.

Contains logging, metrics, and monitoring utilities.
"""

from .logger import setup_logging, JSONFormatter, CorrelationFilter, correlation_id_var
from .metrics import MetricsSink, PrometheusMetricsSink

__all__ = [
    "setup_logging",
    "JSONFormatter",
    "CorrelationFilter",
    "correlation_id_var",
    "MetricsSink",
    "PrometheusMetricsSink"
]
