"""
Shared schemas for the BFF services.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base model for wire-facing objects.

    Attributes are snake_case in Python and camelCase on the wire;
    both spellings are accepted on input.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='forbid'
    )


class HealthStatus(BaseModel):
    """Readiness check response."""
    model_config = ConfigDict(extra='forbid')

    status: str = Field(..., description="overall status: healthy, unhealthy")
    service: str = Field(..., description="Service name")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    checks: dict[str, str] = Field(default_factory=dict, description="Individual check results")
