"""Authentication API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.schemas.auth import MockLoginRequest, TokenResponse
from ..core.services import AuthService
from ..middleware.auth import get_auth_service

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/mock-login", response_model=TokenResponse)
async def mock_login(
    request: Optional[MockLoginRequest] = None,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Issue a mock bearer token for any non-empty user id."""
    user_id = request.user_id if request else None
    if not isinstance(user_id, str) or not user_id.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="userId is required and must be a non-empty string",
        )

    return TokenResponse(token=auth_service.issue_token(user_id.strip()))
