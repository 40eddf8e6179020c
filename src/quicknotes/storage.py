# In-memory storage setup
from dataclasses import dataclass, field

from fastapi import Request

from .core.repositories import NoteRepository, TokenRepository


@dataclass
class Storage:
    """Stores owned by one app instance. Nothing survives a restart."""

    tokens: TokenRepository = field(default_factory=TokenRepository)
    notes: NoteRepository = field(default_factory=NoteRepository)


def get_storage(request: Request) -> Storage:
    """Get the storage attached to the running app."""
    return request.app.state.storage


def get_token_repository(request: Request) -> TokenRepository:
    return get_storage(request).tokens


def get_note_repository(request: Request) -> NoteRepository:
    return get_storage(request).notes
