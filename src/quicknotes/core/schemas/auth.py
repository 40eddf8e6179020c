"""
Authentication schemas.

These schemas define the API contracts for the mock login endpoint.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MockLoginRequest(BaseModel):
    """Mock login request schema.

    ``userId`` accepts any JSON value. A missing, non-string or blank value
    gets a single 400 message from the route rather than a schema error.
    """

    user_id: Any = Field(default=None, alias="userId", description="User to issue a token for")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"example": {"userId": "alice"}},
    )


class TokenResponse(BaseModel):
    """Issued token response schema."""

    token: str = Field(description="Bearer token to send as 'Authorization: Bearer <token>'")

    model_config = ConfigDict(
        json_schema_extra={"example": {"token": "fake_123e4567-e89b-12d3-a456-426614174000"}}
    )
