"""
Typed outcomes returned by the note service.

Validation, ownership and lookup failures are ordinary results here, not
exceptions. The API layer maps each ``Failure`` kind to a status code.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..models.note import Note


class Failure(str, Enum):
    """Why a note operation was refused."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"


class ValidationMessage(str, Enum):
    """Every message a validation failure can carry."""

    TITLE_REQUIRED = "Title is required"
    TITLE_TOO_LONG = "Title must not exceed 80 characters"
    BODY_TOO_LONG = "Body must not exceed 500 characters"
    NO_UPDATABLE_FIELDS = "No updatable fields provided"


class _Unset:
    """Marker for a field the caller did not supply at all."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()


@dataclass(frozen=True)
class NoteResult:
    """Outcome of create/update: a note, or exactly one failure."""

    note: Optional[Note] = None
    failure: Optional[Failure] = None
    error: Optional[ValidationMessage] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, note: Note) -> "NoteResult":
        return cls(note=note)

    @classmethod
    def invalid(cls, message: ValidationMessage) -> "NoteResult":
        return cls(failure=Failure.VALIDATION, error=message)

    @classmethod
    def not_found(cls) -> "NoteResult":
        return cls(failure=Failure.NOT_FOUND)

    @classmethod
    def forbidden(cls) -> "NoteResult":
        return cls(failure=Failure.FORBIDDEN)


@dataclass(frozen=True)
class DeleteResult:
    """Outcome of delete: success, not found or forbidden."""

    failure: Optional[Failure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None
