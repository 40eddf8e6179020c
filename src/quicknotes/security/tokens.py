"""Mock bearer token utilities.

Tokens are opaque random strings with no signature and no expiry. They are
only meaningful to the in-memory token repository that issued them.
"""

import uuid
from typing import Optional

TOKEN_PREFIX = "fake_"
BEARER_SCHEME = "Bearer"


def create_access_token() -> str:
    """Create a new random token (uuid4 based)."""
    return f"{TOKEN_PREFIX}{uuid.uuid4()}"


def parse_bearer_credentials(header_value: str) -> Optional[str]:
    """Extract the token from an ``Authorization`` header value.

    The value must be exactly ``Bearer <token>``: two parts separated by a
    single space with a case-sensitive scheme. Anything else returns None.
    """
    parts = header_value.split(" ")
    if len(parts) != 2 or parts[0] != BEARER_SCHEME:
        return None
    return parts[1]
