"""
Record models for Quick Notes.

Records live in the in-memory repositories for the lifetime of the
process. They are immutable pydantic models.

Models included:
    - Note: a user's note with title, body and timestamps
    - TokenRecord: mock bearer token mapped to a user id
"""

from .base import RecordModel, utc_now
from .note import BODY_MAX_LENGTH, TITLE_MAX_LENGTH, Note
from .token import TokenRecord

__all__ = [
    "RecordModel",
    "Note",
    "TokenRecord",
    "TITLE_MAX_LENGTH",
    "BODY_MAX_LENGTH",
    "utc_now",
]
