"""Middleware for authentication and other cross-cutting concerns."""

from .auth import MockTokenBearer, get_auth_service, get_current_user_id

__all__ = ["get_current_user_id", "get_auth_service", "MockTokenBearer"]
