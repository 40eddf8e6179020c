"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .auth import MockLoginRequest, TokenResponse
from .common import ErrorResponse, HealthCheckResponse
from .notes import NoteCreate, NoteResponse, NoteUpdate

__all__ = [
    # Auth schemas
    "MockLoginRequest",
    "TokenResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    # Common schemas
    "ErrorResponse",
    "HealthCheckResponse",
]
