"""Notes API endpoints."""

from typing import List, NoReturn, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.models.note import Note
from ..core.repositories import NoteRepository
from ..core.schemas.notes import NoteCreate, NoteResponse, NoteUpdate
from ..core.services import UNSET, Failure, NoteService, ValidationMessage
from ..middleware.auth import get_current_user_id
from ..storage import get_note_repository

router = APIRouter(prefix="/notes", tags=["notes"])


def get_note_service(note_repo: NoteRepository = Depends(get_note_repository)) -> NoteService:
    return NoteService(note_repo)


def _to_response(note: Note) -> NoteResponse:
    return NoteResponse.model_validate(note.model_dump())


def _raise_for(failure: Failure, action: str, error: Optional[ValidationMessage] = None) -> NoReturn:
    """Map a service failure onto its HTTP status."""
    if failure is Failure.NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")
    if failure is Failure.FORBIDDEN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"You do not have permission to {action} this note",
        )
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error.value)


@router.post(
    "",
    response_model=NoteResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_note(
    request: Optional[NoteCreate] = None,
    current_user_id: str = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Create a new note."""
    request = request or NoteCreate()
    result = note_service.create_note(current_user_id, request.title, request.body)
    if not result.ok:
        _raise_for(result.failure, "create", result.error)
    return _to_response(result.note)


@router.get("", response_model=List[NoteResponse], response_model_exclude_none=True)
async def list_notes(
    current_user_id: str = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """List the current user's notes, newest first."""
    return [_to_response(note) for note in note_service.list_user_notes(current_user_id)]


@router.get("/{note_id}", response_model=NoteResponse, response_model_exclude_none=True)
async def get_note(
    note_id: str,
    current_user_id: str = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Get a specific note owned by the current user."""
    note = note_service.get_note(note_id)
    if note is None:
        _raise_for(Failure.NOT_FOUND, "view")
    if not note.is_owned_by(current_user_id):
        _raise_for(Failure.FORBIDDEN, "view")
    return _to_response(note)


@router.patch("/{note_id}", response_model=NoteResponse, response_model_exclude_none=True)
async def update_note(
    note_id: str,
    request: Optional[NoteUpdate] = None,
    current_user_id: str = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Update a note. Fields left out of the request body are kept."""
    request = request or NoteUpdate()
    sent = request.model_fields_set
    result = note_service.update_note(
        note_id,
        current_user_id,
        title=request.title if "title" in sent else UNSET,
        body=request.body if "body" in sent else UNSET,
    )
    if not result.ok:
        _raise_for(result.failure, "update", result.error)
    return _to_response(result.note)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(
    note_id: str,
    current_user_id: str = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Delete a note."""
    result = note_service.delete_note(note_id, current_user_id)
    if not result.ok:
        _raise_for(result.failure, "delete")
