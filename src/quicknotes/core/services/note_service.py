"""Note service implementation."""

from typing import List, Optional

from ..logging import get_logger
from ..models.note import BODY_MAX_LENGTH, TITLE_MAX_LENGTH, Note
from ..repositories.note_repository import NoteRepository
from .interfaces import INoteService
from .results import UNSET, DeleteResult, Failure, NoteResult, ValidationMessage

logger = get_logger("notes")


class NoteService(INoteService):
    """Note service implementation.

    The caller has already authenticated ``user_id``; this layer only checks
    ownership and validates fields. Checks run in a fixed order and the
    first failure wins:

    - create: title, then body
    - update: existence, ownership, "anything to update", title, body
    - delete: existence, ownership
    """

    def __init__(self, note_repo: NoteRepository):
        self.note_repo = note_repo

    def create_note(
        self, user_id: str, title: Optional[str] = None, body: Optional[str] = None
    ) -> NoteResult:
        """Create new note."""
        error = self._validate_title(title) or self._validate_body(body)
        if error:
            return NoteResult.invalid(error)

        note = Note(user_id=user_id, title=title.strip(), body=body or "")
        self.note_repo.save_note(note)

        logger.info("Note created", extra={"note_id": note.id, "user_id": user_id})
        return NoteResult.success(note)

    def list_user_notes(self, user_id: str) -> List[Note]:
        """List user notes, newest first."""
        return self.note_repo.list_by_user(user_id)

    def get_note(self, note_id: str) -> Optional[Note]:
        """Get note by ID. No ownership filtering here."""
        return self.note_repo.get_by_id(note_id)

    def update_note(self, note_id: str, user_id: str, title=UNSET, body=UNSET) -> NoteResult:
        """Update existing note.

        ``UNSET`` means the field was not supplied and keeps its value. A
        supplied title is validated even when blank or None, so "not given"
        and "given but empty" stay different. A None body counts as not
        supplied.
        """
        note = self.note_repo.get_by_id(note_id)
        if note is None:
            return NoteResult.not_found()

        if not note.is_owned_by(user_id):
            logger.warning(
                "Update refused, not the owner", extra={"note_id": note_id, "user_id": user_id}
            )
            return NoteResult.forbidden()

        if body is None:
            body = UNSET
        title_given = title is not UNSET
        body_given = body is not UNSET

        if not title_given and not body_given:
            return NoteResult.invalid(ValidationMessage.NO_UPDATABLE_FIELDS)

        if title_given:
            error = self._validate_title(title)
            if error:
                return NoteResult.invalid(error)

        if body_given:
            error = self._validate_body(body)
            if error:
                return NoteResult.invalid(error)

        updated = note.with_changes(
            title=title.strip() if title_given else None,
            body=body if body_given else None,
        )
        self.note_repo.save_note(updated)

        logger.info("Note updated", extra={"note_id": note_id, "user_id": user_id})
        return NoteResult.success(updated)

    def delete_note(self, note_id: str, user_id: str) -> DeleteResult:
        """Delete note."""
        note = self.note_repo.get_by_id(note_id)
        if note is None:
            return DeleteResult(failure=Failure.NOT_FOUND)

        if not note.is_owned_by(user_id):
            logger.warning(
                "Delete refused, not the owner", extra={"note_id": note_id, "user_id": user_id}
            )
            return DeleteResult(failure=Failure.FORBIDDEN)

        self.note_repo.delete_note(note_id)

        logger.info("Note deleted", extra={"note_id": note_id, "user_id": user_id})
        return DeleteResult()

    def _validate_title(self, title: Optional[str]) -> Optional[ValidationMessage]:
        """Title must be present, non-blank after trimming and at most 80 chars."""
        if not title:
            return ValidationMessage.TITLE_REQUIRED
        trimmed = title.strip()
        if not trimmed:
            return ValidationMessage.TITLE_REQUIRED
        if len(trimmed) > TITLE_MAX_LENGTH:
            return ValidationMessage.TITLE_TOO_LONG
        return None

    def _validate_body(self, body: Optional[str]) -> Optional[ValidationMessage]:
        """Body is optional; raw length is capped at 500 chars."""
        if body is not None and len(body) > BODY_MAX_LENGTH:
            return ValidationMessage.BODY_TOO_LONG
        return None
