"""Note repository backed by an in-memory dict."""

import threading
from operator import attrgetter
from typing import Dict, List, Optional

from ..models.note import Note


class NoteRepository:
    """Repository for note storage operations.

    One instance is owned by the running app; every method holds the lock
    for its whole body so readers never see a half-applied write.
    """

    def __init__(self):
        self._notes: Dict[str, Note] = {}
        self._lock = threading.RLock()

    def save_note(self, note: Note) -> Note:
        """Insert or overwrite a note by id."""
        with self._lock:
            self._notes[note.id] = note
            return note

    def get_by_id(self, note_id: str) -> Optional[Note]:
        """Get note by ID."""
        with self._lock:
            return self._notes.get(note_id)

    def list_by_user(self, user_id: str) -> List[Note]:
        """List a user's notes, newest first.

        Overwrites keep a note's original position in the dict, so walking
        it in reverse gives newest-created first among equal timestamps.
        """
        with self._lock:
            owned = [note for note in reversed(self._notes.values()) if note.user_id == user_id]
        return sorted(owned, key=attrgetter("created_at"), reverse=True)

    def delete_note(self, note_id: str) -> bool:
        """Delete note, returns False if it was not stored."""
        with self._lock:
            return self._notes.pop(note_id, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._notes)
