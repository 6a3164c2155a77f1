"""
Service composition and lifecycle shared by the BFF services.
"""

import logging
import sys
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, Optional

import uvicorn
from fastapi import FastAPI
from redis.exceptions import ConnectionError

from .config import AppConfig, load_config
from .infra.downstream import DownstreamClient
from .infra.notifier import RedisNotifier
from .infra.redis_client import RedisClient
from .telemetry.logger import setup_logging
from .telemetry.metrics import PrometheusMetricsSink


logger = logging.getLogger(__name__)


class BffService(ABC):
    """
    Composes a BFF service from its configuration and manages its lifecycle.

    Subclasses name the service and build the resource service and the
    FastAPI application from the shared components.
    """

    service_name: str = "bff"
    controller_name: str = "Controller"
    resource_service_name: str = "Service"

    def __init__(self, config: AppConfig):
        """
        Args:
            config: Application configuration
        """
        self.config = config

        self.metrics: Optional[PrometheusMetricsSink] = None
        self.redis_client: Optional[RedisClient] = None
        self.notifier: Optional[RedisNotifier] = None
        self.downstream: Optional[DownstreamClient] = None
        self.resource_service: Any = None
        self.app: Optional[FastAPI] = None

    @abstractmethod
    def build_resource_service(self) -> Any:
        """Create the resource service adapter for this BFF."""

    @abstractmethod
    def build_app(self) -> FastAPI:
        """Create the FastAPI application from the composed components."""

    def build_downstream_client(self) -> Optional[DownstreamClient]:
        """HTTP client for the configured resource service, None when unset."""
        if not self.config.downstream.url:
            return None
        return DownstreamClient(
            base_url=self.config.downstream.url,
            timeout_ms=self.config.downstream.timeout_ms,
            max_connections=self.config.downstream.max_connections,
            user_agent=f"{self.service_name}-bff/1.0"
        )

    async def setup(self) -> None:
        """
        Setup all service dependencies.

        An unreachable Redis does not stop the service; notifications
        fail and are logged until it comes back.
        """
        try:
            logger.info(f"Setting up {self.service_name} service")

            self.metrics = PrometheusMetricsSink(
                controller_name=self.controller_name,
                service_name=self.resource_service_name
            )

            redis_config = self.config.redis
            self.redis_client = RedisClient(
                url=redis_config.url,
                max_connections=redis_config.max_connections,
                socket_timeout=redis_config.socket_timeout,
                socket_connect_timeout=redis_config.socket_connect_timeout,
                health_check_interval=redis_config.health_check_interval
            )
            try:
                await self.redis_client.connect()
            except ConnectionError as e:
                logger.warning(
                    f"Redis unavailable at startup, notifications will fail: {e}",
                    extra={"component": "service", "redis_url": redis_config.url}
                )

            self.notifier = RedisNotifier(
                redis_client=self.redis_client,
                topic=redis_config.topic,
                metrics=self.metrics
            )

            self.downstream = self.build_downstream_client()
            self.resource_service = self.build_resource_service()
            self.app = self.build_app()

            logger.info(
                "Service setup completed successfully",
                extra={
                    "component": "service",
                    "topic": redis_config.topic,
                    "downstream": self.config.downstream.url or "in-memory"
                }
            )

        except Exception as e:
            logger.error(f"Service setup failed: {e}")
            await self.cleanup()
            raise

    async def cleanup(self) -> None:
        """Cleanup service resources."""
        logger.info("Cleaning up service resources")

        try:
            if self.downstream:
                await self.downstream.close()
            if self.redis_client:
                await self.redis_client.close()

            logger.info("Service cleanup completed")

        except Exception as e:
            logger.error(f"Error during cleanup: {e}")

    async def run(self) -> None:
        """
        Serve the application with uvicorn until it is stopped.
        """
        if not self.app:
            raise RuntimeError("Service not setup. Call setup() first.")

        server_config = self.config.server
        logger.info(
            f"Starting {self.service_name} service on {server_config.host}:{server_config.port}"
        )

        server = uvicorn.Server(uvicorn.Config(
            app=self.app,
            host=server_config.host,
            port=server_config.port,
            log_level=server_config.log_level,
            workers=server_config.workers,
            access_log=True
        ))

        try:
            await server.serve()
        except Exception as e:
            logger.error(f"Server error: {e}")
            raise

    @asynccontextmanager
    async def lifespan(self):
        """
        Context manager for service lifecycle.

        Handles setup and cleanup automatically.
        """
        try:
            await self.setup()
            yield self
        finally:
            await self.cleanup()


async def serve(service_class: type, config_path: Optional[str] = None) -> None:
    """
    Load configuration, configure logging and run a BFF service.

    Args:
        service_class: BffService subclass to run
        config_path: Config file, defaults to CONFIG_PATH or ./config.yml
    """
    config = load_config(config_path)

    setup_logging(
        level=config.logging.level,
        service_name=f"{service_class.service_name}-bff",
        enable_json=config.logging.json_format,
        enable_correlation=config.logging.enable_correlation
    )

    try:
        async with service_class(config).lifespan() as service:
            await service.run()

    except KeyboardInterrupt:
        logger.info("Service interrupted by user")
    except Exception as e:
        logger.error(f"Service failed: {e}")
        sys.exit(1)
