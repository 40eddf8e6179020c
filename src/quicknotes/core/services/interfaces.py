"""
Service interfaces for Quick Notes.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.note import Note
from ..schemas.common import HealthCheckResponse
from .results import UNSET, DeleteResult, NoteResult


class IAuthService(ABC):
    """Auth service for mock token management."""

    @abstractmethod
    def issue_token(self, user_id: str) -> str:
        """Issue a new token for a user."""
        pass

    @abstractmethod
    def resolve_user(self, token: str) -> Optional[str]:
        """Resolve a token to its user id, None if unknown."""
        pass


class INoteService(ABC):
    """Note service for CRUD operations."""

    @abstractmethod
    def create_note(
        self, user_id: str, title: Optional[str] = None, body: Optional[str] = None
    ) -> NoteResult:
        """Create new note."""
        pass

    @abstractmethod
    def list_user_notes(self, user_id: str) -> List[Note]:
        """List user notes, newest first."""
        pass

    @abstractmethod
    def get_note(self, note_id: str) -> Optional[Note]:
        """Get note by ID."""
        pass

    @abstractmethod
    def update_note(self, note_id: str, user_id: str, title=UNSET, body=UNSET) -> NoteResult:
        """Update existing note."""
        pass

    @abstractmethod
    def delete_note(self, note_id: str, user_id: str) -> DeleteResult:
        """Delete note."""
        pass


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        pass
