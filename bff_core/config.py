"""
Configuration management for the BFF services.
Loads and validates configuration from YAML files using Pydantic.
"""

import os
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator, ConfigDict


logger = logging.getLogger(__name__)


class RedisConfig(BaseModel):
    """Redis connection and notification channel configuration."""
    model_config = ConfigDict(extra='forbid')

    url: str = Field(
        default="redis://redis:6379/0",
        description="Redis connection URL"
    )
    topic: str = Field(
        default="notifications",
        min_length=1,
        description="Pub/sub channel receiving create notifications"
    )
    max_connections: int = Field(
        default=10,
        ge=1,
        le=50,
        description="Maximum connections in Redis pool"
    )
    socket_timeout: float = Field(
        default=5.0,
        ge=0.1,
        le=30.0,
        description="Socket timeout in seconds"
    )
    socket_connect_timeout: float = Field(
        default=5.0,
        ge=0.1,
        le=30.0,
        description="Connection timeout in seconds"
    )
    health_check_interval: int = Field(
        default=30,
        ge=0,
        le=300,
        description="Health check interval in seconds"
    )

    @field_validator('url')
    @classmethod
    def validate_url(cls, v):
        if not v.startswith(("redis://", "rediss://", "unix://")):
            raise ValueError(f"Invalid Redis URL format: {v}")
        return v


class ServerConfig(BaseModel):
    """HTTP server configuration."""
    model_config = ConfigDict(extra='forbid')

    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )
    port: int = Field(
        default=8080,
        ge=1024,
        le=65535,
        description="Port to bind to"
    )
    workers: int = Field(
        default=1,
        ge=1,
        le=8,
        description="Number of worker processes"
    )
    log_level: str = Field(
        default="info",
        description="Uvicorn log level"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['critical', 'error', 'warning', 'info', 'debug', 'trace']
        if v.lower() not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        return v.lower()


class DownstreamConfig(BaseModel):
    """Downstream resource service configuration."""
    model_config = ConfigDict(extra='forbid')

    url: Optional[str] = Field(
        default=None,
        description="Base URL of the resource service; in-memory store when unset"
    )
    timeout_ms: int = Field(
        default=2000,
        ge=100,
        le=60000,
        description="Request timeout in milliseconds"
    )
    max_connections: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum connections to the resource service"
    )

    @field_validator('url')
    @classmethod
    def validate_url(cls, v):
        if v is None or v == "":
            return None
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid downstream URL: {v}")
        return v.rstrip("/")


class ApiConfig(BaseModel):
    """HTTP API behaviour."""
    model_config = ConfigDict(extra='forbid')

    legacy_error_status: bool = Field(
        default=False,
        description="Answer every error with 500 instead of its own status"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""
    model_config = ConfigDict(extra='forbid')

    level: str = Field(
        default="INFO",
        description="Logging level"
    )
    json_format: bool = Field(
        default=True,
        description="Enable JSON log formatting"
    )
    enable_correlation: bool = Field(
        default=True,
        description="Enable correlation IDs in logs"
    )

    @field_validator('level')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        return v.upper()


class AppConfig(BaseModel):
    """Main application configuration."""
    model_config = ConfigDict(extra='forbid')

    redis: RedisConfig = Field(default_factory=RedisConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    downstream: DownstreamConfig = Field(default_factory=DownstreamConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# Environment variable -> dotted config path
ENV_MAPPINGS = {
    'REDIS_URL': 'redis.url',
    'REDIS_TOPIC': 'redis.topic',
    'SERVER_HOST': 'server.host',
    'SERVER_PORT': 'server.port',
    'SERVER_WORKERS': 'server.workers',
    'DOWNSTREAM_URL': 'downstream.url',
    'DOWNSTREAM_TIMEOUT_MS': 'downstream.timeout_ms',
    'API_LEGACY_ERROR_STATUS': 'api.legacy_error_status',
    'LOG_LEVEL': 'logging.level',
    'LOG_JSON': 'logging.json_format'
}


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Load configuration from YAML file with environment variable overrides.

    Args:
        config_path: Path to config file, defaults to CONFIG_PATH env var or ./config.yml

    Returns:
        Loaded and validated configuration

    Raises:
        ValueError: If the YAML is malformed or validation fails
    """
    if config_path is None:
        config_path = os.getenv('CONFIG_PATH', './config.yml')

    config_file = Path(config_path)
    yaml_data: dict = {}

    if config_file.exists():
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                yaml_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error(f"Failed to parse YAML config: {e}")
            raise ValueError(f"Invalid YAML config: {e}") from e

        if not isinstance(yaml_data, dict):
            raise ValueError(f"Config root must be a mapping: {config_file}")

        logger.info(f"Loaded config from: {config_file}")
    else:
        logger.warning(f"Config file not found: {config_file}, using defaults")

    yaml_data = _apply_env_overrides(yaml_data)

    # pydantic's ValidationError is a ValueError
    config = AppConfig(**yaml_data)

    logger.info(
        "Configuration loaded successfully",
        extra={
            "component": "config",
            "config_file": str(config_file),
            "redis_url": config.redis.url,
            "redis_topic": config.redis.topic,
            "server_port": config.server.port
        }
    )

    return config


def _apply_env_overrides(config_data: dict) -> dict:
    """
    Apply environment variable overrides to config data.

    Values are kept as strings; pydantic coerces them to the field types.

    Args:
        config_data: Base configuration data

    Returns:
        Configuration data with environment overrides applied
    """
    for env_var, config_path in ENV_MAPPINGS.items():
        env_value = os.getenv(env_var)
        if env_value is not None:
            _set_nested_value(config_data, config_path, env_value)
            logger.debug(f"Applied env override: {env_var} -> {config_path}")

    return config_data


def _set_nested_value(data: dict, path: str, value: str) -> None:
    """
    Set a nested dictionary value using dot notation.

    Args:
        data: Dictionary to modify
        path: Dot-separated path (e.g., 'redis.url')
        value: Value to set
    """
    keys = path.split('.')
    current = data

    for key in keys[:-1]:
        if not isinstance(current.get(key), dict):
            current[key] = {}
        current = current[key]

    current[keys[-1]] = value
