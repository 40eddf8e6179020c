# Note model for user content
import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import RecordModel, utc_now

TITLE_MAX_LENGTH = 80
BODY_MAX_LENGTH = 500


def new_note_id() -> str:
    return f"note_{uuid.uuid4()}"


class Note(RecordModel):
    """Note owned by a single user."""

    id: str = Field(default_factory=new_note_id)
    user_id: str
    title: str
    body: str = ""
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: Optional[datetime] = None  # absent until the first update

    def __repr__(self) -> str:
        # keep reprs short in logs
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(id={self.id}, title='{truncated}', user_id={self.user_id})>"

    def is_owned_by(self, user_id: str) -> bool:
        """
        Check if this note is owned by the specified user.

        Args:
            user_id: identifier resolved from the caller's token

        Returns:
            bool: True if user owns this note, False otherwise
        """
        return self.user_id == user_id

    def with_changes(self, title: Optional[str] = None, body: Optional[str] = None) -> "Note":
        """
        Return an updated copy stamped with a fresh ``updated_at``.

        ``None`` means "keep the current value"; callers have already
        validated whatever they pass in.
        """
        changes = {"updated_at": utc_now()}
        if title is not None:
            changes["title"] = title
        if body is not None:
            changes["body"] = body
        return self.model_copy(update=changes)
