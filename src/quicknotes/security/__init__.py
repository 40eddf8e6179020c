"""Security utilities."""

from .tokens import BEARER_SCHEME, TOKEN_PREFIX, create_access_token, parse_bearer_credentials

__all__ = [
    "BEARER_SCHEME",
    "TOKEN_PREFIX",
    "create_access_token",
    "parse_bearer_credentials",
]
