"""Repository layer for in-memory storage."""

from .note_repository import NoteRepository
from .token_repository import TokenRepository

__all__ = [
    "NoteRepository",
    "TokenRepository",
]
