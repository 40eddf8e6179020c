"""
Service layer interfaces and implementations.
"""

from .interfaces import IAuthService, IHealthService, INoteService
from .results import UNSET, DeleteResult, Failure, NoteResult, ValidationMessage

from .auth_service import AuthService
from .note_service import NoteService
from .health_service import HealthService

__all__ = [
    # Interfaces
    "IAuthService",
    "INoteService",
    "IHealthService",

    # Results
    "UNSET",
    "Failure",
    "ValidationMessage",
    "NoteResult",
    "DeleteResult",

    # Implementations
    "AuthService",
    "NoteService",
    "HealthService",
]
