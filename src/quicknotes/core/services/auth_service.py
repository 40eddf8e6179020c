"""Authentication service implementation."""

from typing import Optional

from ..logging import get_logger
from ..models.token import TokenRecord
from ..repositories.token_repository import TokenRepository
from .interfaces import IAuthService

logger = get_logger("auth")


class AuthService(IAuthService):
    """Mock token authentication.

    Tokens are random strings remembered in the token repository. There is
    no signature and no expiry: a token stays valid for the life of the
    process.
    """

    def __init__(self, token_repo: TokenRepository):
        self.token_repo = token_repo

    def issue_token(self, user_id: str) -> str:
        """Issue a new token for ``user_id`` (callers pass a non-empty id)."""
        record = self.token_repo.save_token(TokenRecord(user_id=user_id))
        logger.info("Token issued", extra={"user_id": user_id})
        return record.token

    def resolve_user(self, token: str) -> Optional[str]:
        """Resolve a token to its user id.

        Unknown tokens are an expected outcome and return None.
        """
        user_id = self.token_repo.get_user_id(token)
        if user_id is None:
            logger.debug("Token did not resolve to a user")
        return user_id
