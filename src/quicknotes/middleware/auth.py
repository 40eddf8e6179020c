"""Authentication middleware."""

from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer

from ..core.repositories import TokenRepository
from ..core.services import AuthService
from ..security import parse_bearer_credentials
from ..storage import get_token_repository


class MockTokenBearer(HTTPBearer):
    """Bearer token authentication against the in-memory token store.

    The header is parsed here rather than by ``HTTPBearer`` because the
    scheme is case-sensitive and the value must split into exactly two
    parts. Every failure is a 401.
    """

    def __init__(self, auto_error: bool = True):
        super().__init__(auto_error=auto_error)

    async def __call__(self, request: Request) -> Optional[str]:
        authorization = request.headers.get("Authorization")
        if not authorization:
            return self._fail("Authorization header is missing")

        token = parse_bearer_credentials(authorization)
        if token is None:
            return self._fail("Invalid authorization format. Use: Bearer <token>")

        auth_service = AuthService(get_token_repository(request))
        user_id = auth_service.resolve_user(token)
        if user_id is None:
            return self._fail("Invalid or expired token")

        return user_id

    def _fail(self, detail: str) -> None:
        if self.auto_error:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)
        return None


# Dependency for getting current user ID from the bearer token
async def get_current_user_id(user_id: str = Depends(MockTokenBearer())) -> str:
    """Get current authenticated user ID."""
    return user_id


def get_auth_service(token_repo: TokenRepository = Depends(get_token_repository)) -> AuthService:
    return AuthService(token_repo)
