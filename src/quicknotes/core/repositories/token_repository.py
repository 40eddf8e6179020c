"""Token repository backed by an in-memory dict."""

import threading
from typing import Dict, Optional

from ..models.token import TokenRecord


class TokenRepository:
    """Repository for token -> user id mappings."""

    def __init__(self):
        self._tokens: Dict[str, TokenRecord] = {}
        self._lock = threading.RLock()

    def save_token(self, record: TokenRecord) -> TokenRecord:
        """Store a newly issued token."""
        with self._lock:
            self._tokens[record.token] = record
            return record

    def get_by_token(self, token: str) -> Optional[TokenRecord]:
        """Get token record by exact token string."""
        with self._lock:
            return self._tokens.get(token)

    def get_user_id(self, token: str) -> Optional[str]:
        """Get the user a token belongs to."""
        record = self.get_by_token(token)
        return record.user_id if record else None

    def count(self) -> int:
        with self._lock:
            return len(self._tokens)
