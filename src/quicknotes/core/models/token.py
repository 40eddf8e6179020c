# Mock bearer tokens
from pydantic import Field

from .base import RecordModel
from ...security import create_access_token


class TokenRecord(RecordModel):
    """Token paired with the user it authenticates. Never expires."""

    token: str = Field(default_factory=create_access_token)
    user_id: str
