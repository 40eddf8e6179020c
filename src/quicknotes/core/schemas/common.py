"""
Shared response schemas - errors, health etc
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    error: str = Field(description="Human-readable error message")

    model_config = ConfigDict(
        json_schema_extra={"example": {"error": "Title is required"}}
    )


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = Field(description="Application version")
    checks: dict[str, dict[str, Any]] = Field(description="Individual component health checks")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "ok",
                "timestamp": "2025-09-13T10:30:00Z",
                "version": "1.0.0",
                "checks": {
                    "token_store": {"status": "ok", "count": 3},
                    "note_store": {"status": "ok", "count": 12},
                },
            }
        }
    )
