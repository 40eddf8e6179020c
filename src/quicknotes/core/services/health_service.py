"""Health service implementation."""

from datetime import datetime, timezone
from typing import Any, Dict

from ... import __version__
from ..repositories.note_repository import NoteRepository
from ..repositories.token_repository import TokenRepository
from ..schemas.common import HealthCheckResponse
from .interfaces import IHealthService


class HealthService(IHealthService):
    """Health check service implementation."""

    def __init__(self, token_repo: TokenRepository, note_repo: NoteRepository):
        self.token_repo = token_repo
        self.note_repo = note_repo

    def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        return HealthCheckResponse(
            status="ok",
            timestamp=datetime.now(timezone.utc),
            version=__version__,
            checks={
                "token_store": self._store_check(self.token_repo),
                "note_store": self._store_check(self.note_repo),
            },
        )

    def _store_check(self, repo) -> Dict[str, Any]:
        # in-memory stores are always reachable; report their size
        return {"status": "ok", "count": repo.count()}
