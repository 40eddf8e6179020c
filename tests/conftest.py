"""Shared pytest fixtures. Every test gets its own app and empty stores."""

import logging

import httpx
import pytest
from fastapi.testclient import TestClient

from quicknotes.config import Settings
from quicknotes.core.repositories import NoteRepository, TokenRepository
from quicknotes.core.services import AuthService, NoteService
from quicknotes.main import create_app
from quicknotes.storage import Storage


@pytest.fixture(autouse=True)
def propagate_app_logs():
    """Let caplog see quicknotes records; the dictConfig turns propagation off."""
    logging.getLogger("quicknotes").propagate = True
    yield


@pytest.fixture
def test_settings():
    """Settings for testing: colored console logs, no log files."""
    return Settings(debug=True, log_level="WARNING", log_to_file=False, environment="test")


@pytest.fixture
def token_repo():
    return TokenRepository()


@pytest.fixture
def note_repo():
    return NoteRepository()


@pytest.fixture
def auth_service(token_repo):
    return AuthService(token_repo)


@pytest.fixture
def note_service(note_repo):
    return NoteService(note_repo)


@pytest.fixture
def storage(token_repo, note_repo):
    """Storage shared between the app and the service fixtures."""
    return Storage(tokens=token_repo, notes=note_repo)


@pytest.fixture
def test_app(test_settings, storage):
    """Create a fresh FastAPI app over the test storage."""
    app = create_app(settings=test_settings, storage=storage)
    # keep pytest's caplog working after dictConfig
    logging.getLogger("quicknotes").propagate = True
    return app


@pytest.fixture
def client(test_app):
    """Create test client."""
    return TestClient(test_app)


@pytest.fixture
async def async_client(test_app):
    """Create async test client."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def login(client):
    """Log a user in through the API and return auth headers."""

    def _login(user_id: str) -> dict[str, str]:
        resp = client.post("/auth/mock-login", json={"userId": user_id})
        assert resp.status_code == 200
        return {"Authorization": f"Bearer {resp.json()['token']}"}

    return _login


@pytest.fixture
def auth_headers(login):
    """Authentication headers for user 'alice'."""
    return login("alice")
